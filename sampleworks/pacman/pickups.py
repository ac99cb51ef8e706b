"""Dots, big dots, the bonus fruit and the floating score points."""

from collections.abc import Callable
from dataclasses import dataclass

from sampleworks.pacman.board import Elem, Pos

FRUIT_COUNT = 3
_FRUIT_SIZE = 32


def _delete(dots: list[Pos], eaten: list[Pos], p: Pos) -> None:
    try:
        dots.remove(p)
    except ValueError:
        return
    eaten.append(p)


def _restore(dots: list[Pos], eaten: list[Pos], matrix, kind: Elem) -> None:
    for p in eaten:
        dots.append(p)
        matrix[p.y][p.x] = kind
    eaten.clear()


class DotManager:
    """The small dots."""

    kind = Elem.DOT

    def __init__(self) -> None:
        self.dots: list[Pos] = []
        self._eaten: list[Pos] = []

    def add(self, y: int, x: int) -> None:
        """Place a dot at row ``y``, column ``x``."""
        self.dots.append(Pos(y, x))

    def delete(self, p: Pos) -> None:
        """Take the dot at ``p`` off the board, keeping it for a restart."""
        _delete(self.dots, self._eaten, p)

    def detect_collision(self, matrix, p: Pos, callback: Callable[[], None]) -> None:
        """Call ``callback`` when the cell at ``p`` holds a dot."""
        if matrix[p.y][p.x] == self.kind:
            callback()

    def reinit(self, matrix) -> None:
        """Put every eaten dot back, both here and on the board."""
        _restore(self.dots, self._eaten, matrix, self.kind)

    def empty(self) -> bool:
        """True when no dot is left."""
        return not self.dots


class BigDotManager:
    """The big dots, which blink."""

    kind = Elem.BIG_DOT

    def __init__(self) -> None:
        self.dots: list[Pos] = []
        self._eaten: list[Pos] = []
        self.count = 0

    def add(self, y: int, x: int) -> None:
        """Place a big dot at row ``y``, column ``x``."""
        self.dots.append(Pos(y, x))

    def delete(self, p: Pos) -> None:
        """Take the big dot at ``p`` off the board, keeping it for a restart."""
        _delete(self.dots, self._eaten, p)

    def detect_collision(self, matrix, p: Pos, callback: Callable[[], None]) -> None:
        """Call ``callback`` when the cell at ``p`` holds a big dot."""
        if matrix[p.y][p.x] == self.kind:
            callback()

    def reinit(self, matrix) -> None:
        """Put every eaten big dot back, both here and on the board."""
        _restore(self.dots, self._eaten, matrix, self.kind)

    def empty(self) -> bool:
        """True when no big dot is left."""
        return not self.dots

    def blink_frame(self) -> int:
        """Advance one frame and return which of the two images to show."""
        self.count += 1
        return 1 if self.count % 10 == 0 else 0


class FruitManager:
    """The bonus fruit that fades in and out at a fixed spot."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.count = -400
        self.curr = 0
        self.alpha = 0.0
        self.show = True
        self.visible = False

    def update(self) -> None:
        """Advance the fade cycle by one frame."""
        if self.show:
            self.count += 1
            if self.count >= 70:
                self.alpha = min(self.alpha + 0.01, 1.0)
        else:
            self.count -= 1
            self.alpha = max(self.alpha - 0.01, 0.0)

        self.visible = self.alpha >= 0.1

        if self.count == 400:
            self.show = False
        elif self.count <= -500 and not self.show:
            self.show = True
            self.curr = (self.curr + 1) % FRUIT_COUNT

    def detect_collision(self, p_y: float, p_x: float, callback: Callable[[], None]) -> None:
        """Eat the fruit when the player overlaps it while it is visible."""
        if not self.visible:
            return
        if abs(p_y - self.y) < _FRUIT_SIZE and abs(p_x - self.x) < _FRUIT_SIZE:
            self.show = True
            self.count = -900
            self.visible = False
            self.alpha = 0.0
            self.curr = (self.curr + 1) % FRUIT_COUNT
            callback()


@dataclass
class Point:
    """A score label that floats upwards for a number of frames."""

    max_count: int
    show: bool = False
    count: int = 0
    x: float = 0.0
    y: float = 0.0

    def advance(self) -> None:
        """Move up one step; hide when the time is up."""
        self.count += 1
        self.y -= 1
        if self.count >= self.max_count:
            self.show = False
            self.count = 0


class PointManager:
    """The score labels, one per level of reward."""

    def __init__(self) -> None:
        self.points = [Point(max_count=22 - 2 * (i + 1)) for i in range(5)]

    def show(self, i: int, x: float, y: float) -> None:
        """Show label ``i`` (or the last one when past the end) at ``x``, ``y``."""
        p = self.points[min(i, len(self.points) - 1)]
        p.show = True
        p.x = x
        p.y = y

    def advance(self) -> None:
        """Advance every label that is showing."""
        for p in self.points:
            if p.show:
                p.advance()