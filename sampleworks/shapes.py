"""Shapes, a mutable named value, and a demo command tying the helpers together."""

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from sampleworks.mathtools import (
    add,
    cube_volume,
    describe_chars,
    fibonacci,
    maximum,
    reverse_string,
    sum_array,
)


class Shape(ABC):
    """A plane figure with an area and a perimeter."""

    @abstractmethod
    def area(self) -> float:
        """Return the area."""

    @abstractmethod
    def perimeter(self) -> float:
        """Return the perimeter."""


@dataclass(frozen=True)
class Rect(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)


@dataclass(frozen=True)
class Circle(Shape):
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius


@dataclass
class NamedValue:
    """A value and a name, both changed in place."""

    val: int
    name: str

    def set_val(self, v: int) -> None:
        self.val = v

    def set_name(self, n: str) -> None:
        self.name = n


def describe_slice(values: Sequence[int]) -> str:
    """Describe a sequence together with its length."""
    return f"{list(values)!r} :: len {len(values)}"


def main(argv=None) -> int:
    """Print a tour of the helpers and shapes."""
    for line in describe_chars(reverse_string("Hello world!")):
        print(line)

    print(f"Fibonnaci of: {4} is {fibonacci(4)}\n")

    named = NamedValue(val=1, name="test")
    named.set_val(2)
    named.set_name("nextTest")
    print(f"mystruct: {named}\n")

    print(f"Max between {10} and {15} is: {maximum(10, 15)}")

    rect = Rect(width=10, height=10)
    circle = Circle(radius=5)
    print(
        f"Rect width: {10} height: {10} area: {int(rect.area())} "
        f"perimeter: {int(rect.perimeter())}"
    )
    print(f"Circle radius: {5} area: {circle.area():f} perimeter: {circle.perimeter():f} ")

    print(describe_slice(list(range(17))))
    print(f"The array sum is: {sum_array([1, 2, 3, 4, 5, 6, 7, 8, 9])}")

    maps = {
        "mv": {"a": 1, "b": 2, "c": 3},
        "nv": dict(a=1, b=2, c=3),
        "ov": dict(zip("abc", (1, 2, 3))),
    }
    for label, mapping in maps.items():
        for key, val in mapping.items():
            print(f"An {label} map entry: key : {key} value: {val}")

    print(f"Find add 2 + 3: {add(2, 3)},   Cube volume of 5: {cube_volume(5)}  ")
    return 0