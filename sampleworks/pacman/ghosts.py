"""The ghosts and the manager that moves them and checks them against the player."""

import random
from collections.abc import Callable

from sampleworks.pacman.board import (
    STAGE_BLOC_SIZE,
    Elem,
    Input,
    Pos,
    add_pos_dir,
    can_move,
    is_wall,
    opp_dir,
)
from sampleworks.pacman.effects import PAC_PARTICLE

GHOST_IMAGE_COUNT = 13
VULNERABLE_IMAGE_OFFSET = 8
NORMAL_SPEED = 4
VULNERABLE_SPEED = 2
VULNERABILITY_FRAMES = 392
BLINK_AFTER = 310
_NORMAL_STEPS = 8
_VULNERABLE_STEPS = 16
_HIT_DISTANCE = 32

_VISION = {
    Elem.PINKY: 10,
    Elem.INKY: 15,
    Elem.BLINKY: 50,
    Elem.CLYDE: 60,
}

_STEP = {
    Input.UP: (-1, 0),
    Input.RIGHT: (0, 1),
    Input.DOWN: (1, 0),
    Input.LEFT: (0, -1),
}

_DIRECTION_IMAGES = {
    Input.UP: (6, 7),
    Input.RIGHT: (0, 1),
    Input.DOWN: (2, 3),
    Input.LEFT: (4, 5),
}

_MOVES = (Input.UP, Input.RIGHT, Input.DOWN, Input.LEFT)


def get_vision(kind: Elem) -> int:
    """Return how many cells a ghost of ``kind`` can see along a line."""
    return _VISION.get(kind, 0)


def _toggle(current: int, pair: tuple[int, int]) -> int:
    first, second = pair
    return second if current == first else first


class Ghost:
    """One ghost, moving cell by cell in small steps."""

    def __init__(self, y: int, x: int, kind: Elem, rng=None) -> None:
        start = Pos(y, x)
        self.kind = kind
        self.current_img = 0
        self.prv_pos = start
        self.cur_pos = start
        self.nxt_pos = start
        self.initial_pos = start
        self.speed = NORMAL_SPEED
        self.steps_length = Pos(0, 0)
        self.steps = 0
        self.dir = Input.NONE
        self.vision = get_vision(kind)
        self.ct_vulnerable = 0
        self.vulnerable_move = False
        self.eaten = False
        self.lost = False
        self._rng = rng if rng is not None else random.Random()

    def image_index(self, image_count: int = GHOST_IMAGE_COUNT) -> int:
        """Return which of ``image_count`` images to draw now."""
        if self.is_vulnerable():
            i = self.current_img + VULNERABLE_IMAGE_OFFSET
            return VULNERABLE_IMAGE_OFFSET if i >= image_count else i
        return self.current_img

    def is_vulnerable(self) -> bool:
        return self.ct_vulnerable > 0

    def move(self) -> None:
        """Advance one step towards the next cell."""
        dy, dx = _STEP.get(self.dir, (0, 0))
        self.steps_length = Pos(
            self.steps_length.y + dy * self.speed,
            self.steps_length.x + dx * self.speed,
        )

        if self.steps % 4 == 0:
            self.update_image()
        self.steps += 1

        if self.vulnerable_move:
            self.ct_vulnerable += 1
            if self.steps == _VULNERABLE_STEPS:
                self.end_move()
                if self.ct_vulnerable >= VULNERABILITY_FRAMES:
                    self.end_vulnerability()
            return

        if self.steps == _NORMAL_STEPS:
            self.end_move()

    def end_vulnerability(self) -> None:
        self.vulnerable_move = False
        self.ct_vulnerable = 0
        self.eaten = False

    def update_image(self) -> None:
        """Flip to the other frame of the current animation."""
        if self.is_vulnerable():
            pair = (0, 1) if self.ct_vulnerable <= BLINK_AFTER else (2, 3)
            self.current_img = _toggle(self.current_img, pair)
            return
        pair = _DIRECTION_IMAGES.get(self.dir)
        if pair is not None:
            self.current_img = _toggle(self.current_img, pair)

    def end_move(self) -> None:
        """Arrive at the next cell."""
        self.prv_pos = self.cur_pos
        self.cur_pos = self.nxt_pos
        self.steps_length = Pos(0, 0)
        self.steps = 0

    def is_moving(self) -> bool:
        return self.steps > 0

    def find_next_move(self, matrix, pac: Pos) -> None:
        """Choose the direction and cell for the next move.

        A ghost chases the player when it sees it; otherwise it picks a
        random open neighbour other than the cell it came from, or turns back.
        """
        if self.is_vulnerable():
            self.vulnerable_move = True
            self.speed = VULNERABLE_SPEED
        else:
            self.speed = NORMAL_SPEED

        seen = self.localise_player(matrix, pac)
        if seen in _MOVES:
            self.dir = seen
        else:
            for v in self._rng.sample(range(5), 5):
                if v == 0:
                    continue
                direction = Input(v)
                np = add_pos_dir(direction, self.cur_pos)
                if can_move(matrix, np) and np != self.prv_pos:
                    self.dir = direction
                    self.nxt_pos = np
                    return
            self.dir = opp_dir(self.dir)
        self.nxt_pos = add_pos_dir(self.dir, self.cur_pos)

    def _sees(self, matrix, pac: Pos, dy: int, dx: int) -> bool:
        y, x = self.cur_pos.y + dy, self.cur_pos.x + dx
        height, width = len(matrix), len(matrix[0])
        for _ in range(self.vision):
            if not (0 <= y < height and 0 <= x < width) or is_wall(matrix[y][x]):
                return False
            if y == pac.y and x == pac.x:
                return True
            y += dy
            x += dx
        return False

    def localise_player(self, matrix, pac: Pos) -> Input:
        """Return the direction in which the player is in sight, or NONE."""
        if self.is_vulnerable():
            return Input.NONE
        cur = self.cur_pos
        if cur.x == pac.x and cur.y > pac.y and self._sees(matrix, pac, -1, 0):
            return Input.UP
        if cur.x == pac.x and cur.y < pac.y and self._sees(matrix, pac, 1, 0):
            return Input.DOWN
        if cur.y == pac.y and cur.x < pac.x and self._sees(matrix, pac, 0, 1):
            return Input.RIGHT
        if cur.y == pac.y and cur.x > pac.x and self._sees(matrix, pac, 0, -1):
            return Input.LEFT
        return Input.NONE

    def make_vulnerable(self) -> None:
        self.ct_vulnerable = 1

    def screen_pos(self) -> tuple[float, float]:
        """Return the drawing position as ``(y, x)``."""
        x = float(self.cur_pos.x * STAGE_BLOC_SIZE + self.steps_length.x)
        y = float(self.cur_pos.y * STAGE_BLOC_SIZE + self.steps_length.y)
        return y, x

    def reset(self) -> None:
        """Send the ghost back to where it started."""
        self.prv_pos = self.cur_pos = self.nxt_pos = self.initial_pos
        self.steps_length = Pos(0, 0)
        self.current_img = 0
        self.dir = Input.NONE
        self.steps = 0

    def make_eaten(self) -> None:
        self.eaten = True

    def is_eaten(self) -> bool:
        return self.eaten

    def reinit(self) -> None:
        """Restore the ghost for a new game."""
        self.reset()
        self.lost = False
        self.speed = NORMAL_SPEED
        self.end_vulnerability()

    def gameover(self) -> None:
        """Take the ghost off the board."""
        origin = Pos(0, 0)
        self.prv_pos = self.cur_pos = self.nxt_pos = origin
        self.lost = True


class GhostManager:
    """All the ghosts of a scene."""

    def __init__(self, rng=None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.ghosts: list[Ghost] = []
        self.eaten = 0

    def add_ghost(self, y: int, x: int, kind: Elem) -> None:
        self.ghosts.append(Ghost(y, x, kind, self._rng))

    def move(self, matrix, pac: Pos) -> None:
        """Move every ghost one step, choosing a new target where needed."""
        for g in self.ghosts:
            if not g.is_moving():
                g.find_next_move(matrix, pac)
            g.move()

    def make_vulnerable(self) -> None:
        self.eaten = 0
        for g in self.ghosts:
            g.make_vulnerable()

    def detect_collision(
        self, p_y: float, p_x: float, callback: Callable[[bool, float, float], None]
    ) -> None:
        """Report ghosts touching the player at ``p_y``, ``p_x``.

        A dangerous ghost stops the check with ``callback(False, 0, 0)``;
        each vulnerable one is eaten and reported with its position.
        """
        for g in self.ghosts:
            g_y, g_x = g.screen_pos()
            if abs(p_y - g_y) < _HIT_DISTANCE and abs(p_x - g_x) < _HIT_DISTANCE:
                if not g.is_vulnerable():
                    callback(False, 0.0, 0.0)
                    return
                self.eaten += 1
                g.make_eaten()
                g.reset()
                callback(True, g_y, g_x)

    def reset(self, explosions, over: bool) -> None:
        """Blow up every ghost where it stands and reset it, or remove it when ``over``."""
        for g in self.ghosts:
            y, x = g.screen_pos()
            explosions.add_explosion(PAC_PARTICLE, x, y)
            if over:
                g.gameover()
            else:
                g.reset()

    def reinit(self) -> None:
        for g in self.ghosts:
            g.reinit()