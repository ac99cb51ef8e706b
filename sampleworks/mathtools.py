"""Small numeric and string helpers."""

from collections.abc import Iterable


def maximum(a: int, b: int) -> int:
    """Return the larger of two numbers; ``a`` on a tie."""
    return a if a >= b else b


def minimum(a: int, b: int) -> int:
    """Return the smaller of two numbers; ``a`` on a tie."""
    return a if a <= b else b


def max_area_check(width: int, height: int, limit: int) -> bool:
    """True when the area of ``width`` x ``height`` stays below ``limit``."""
    return width * height < limit


def min_area_check(width: int, height: int, limit: int) -> bool:
    """True when the area of ``width`` x ``height`` reaches ``limit``."""
    return width * height >= limit


def describe_chars(s: str) -> list[str]:
    """Return one line per character giving the character and its code point."""
    return [f"A character: {ch} ({ord(ch)})" for ch in s]


def reverse_string(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]


def fibonacci(index: int) -> int:
    """Return the Fibonacci number at ``index``; indexes below 2 map to themselves."""
    if index <= 1:
        return index
    prev, cur = 0, 1
    for _ in range(index - 1):
        prev, cur = cur, prev + cur
    return cur


def sum_array(values: Iterable[int]) -> int:
    """Return the sum of ``values``."""
    return sum(values)


def add(a: int, b: int) -> int:
    """Return ``a + b``."""
    return a + b


def cube_volume(n: int) -> int:
    """Return the volume of a cube with side ``n``."""
    return n * n * n