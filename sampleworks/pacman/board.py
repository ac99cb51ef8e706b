"""Board elements, directions, the stage layout and movement on the grid."""

from dataclasses import dataclass
from enum import IntEnum

BACKGROUND_IMAGE_SIZE = 100
STAGE_BLOC_SIZE = 32


class Input(IntEnum):
    """A player command; also used as a direction of movement."""

    NONE = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4
    S_KEY = 5
    R_KEY = 6


class Elem(IntEnum):
    """What occupies a cell of the board. W0 to W24 are wall pieces."""

    W0 = 0
    W1 = 1
    W2 = 2
    W3 = 3
    W4 = 4
    W5 = 5
    W6 = 6
    W7 = 7
    W8 = 8
    W9 = 9
    W10 = 10
    W11 = 11
    W12 = 12
    W13 = 13
    W14 = 14
    W15 = 15
    W16 = 16
    W17 = 17
    W18 = 18
    W19 = 19
    W20 = 20
    W21 = 21
    W22 = 22
    W23 = 23
    W24 = 24
    PLAYER = 25
    BIG_DOT = 26
    DOT = 27
    EMPTY = 28
    BLINKY = 29
    CLYDE = 30
    INKY = 31
    PINKY = 32
    FRUIT = 33
    BACKGROUND = 34


@dataclass(frozen=True)
class Pos:
    """A cell position, row first."""

    y: int
    x: int


@dataclass(frozen=True)
class Stage:
    """A level layout written one character per cell, with its life settings."""

    matrix: tuple[str, ...]
    lives: int
    max_lives: int

    def width(self) -> int:
        """Number of cells in a row."""
        return len(self.matrix[0])

    def height(self) -> int:
        """Number of rows."""
        return len(self.matrix)


STAGE1 = Stage(
    matrix=(
        "3888888884888888885",
        "gqrrrrrrrgrrrrrrrqg",
        "gr02r789ror789r02rg",
        "gracrrrrrrrrrrracrg",
        "grikr6r78489r6rikrg",
        "grrrrgrrrgrrrgrrrrg",
        "gr02rd89ror78fr02rg",
        "grikrgrrrrrrrgrikrg",
        "grrrror39v75rorrrrg",
        "gr39rrrguwtgrrr75rg",
        "grgrr6rl888nr6rrgrg",
        "gror7nrrrxrrrl9rorg",
        "grrrrrr6r6r6rrrrrrg",
        "gr012r3nrorl5r012rg",
        "grijkrorrprrorijkrg",
        "gqrrrrrr385rrrrrrqg",
        "l8888888m8m8888888n",
    ),
    lives=1,
    max_lives=2,
)

DEFAULT_STAGE = STAGE1


def _cell(ch: str) -> Elem:
    if "0" <= ch <= "9":
        value = ord(ch) - ord("0")
    elif "a" <= ch <= "z":
        value = ord(ch) - ord("a") + 10
    else:
        raise ValueError(f"invalid stage character: {ch!r}")
    try:
        return Elem(value)
    except ValueError:
        raise ValueError(f"invalid stage character: {ch!r}") from None


def parse_stage(stage: Stage) -> list[list[Elem]]:
    """Decode a stage layout into a mutable grid of elements."""
    if not stage.matrix:
        raise ValueError("stage has no rows")
    width = stage.width()
    grid = []
    for row in stage.matrix:
        if len(row) != width:
            raise ValueError("stage rows differ in length")
        grid.append([_cell(ch) for ch in row])
    return grid


def is_wall(e: Elem) -> bool:
    """True for the wall pieces."""
    return Elem.W0 <= e <= Elem.W24


def can_move(matrix, p: Pos) -> bool:
    """True when the cell at ``p`` is not a wall."""
    return not is_wall(matrix[p.y][p.x])


def add_pos_dir(d: Input, p: Pos) -> Pos:
    """Return the neighbour of ``p`` in direction ``d``, never below zero."""
    y, x = p.y, p.x
    if d == Input.UP:
        y -= 1
    elif d == Input.RIGHT:
        x += 1
    elif d == Input.DOWN:
        y += 1
    elif d == Input.LEFT:
        x -= 1
    return Pos(max(y, 0), max(x, 0))


_OPPOSITE = {
    Input.UP: Input.DOWN,
    Input.RIGHT: Input.LEFT,
    Input.DOWN: Input.UP,
    Input.LEFT: Input.RIGHT,
}


def opp_dir(d: Input) -> Input:
    """Return the opposite direction, or NONE for anything that is not one."""
    return _OPPOSITE.get(d, Input.NONE)