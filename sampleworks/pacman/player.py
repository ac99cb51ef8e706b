"""The player's character."""

import random
from collections.abc import Callable

from sampleworks.pacman.board import STAGE_BLOC_SIZE, Input, Pos, add_pos_dir, can_move
from sampleworks.pacman.effects import EXPLOSION_FRAMES, PAC_PARTICLE, ParticleManager

_STEP = {
    Input.UP: (-1, 0),
    Input.RIGHT: (0, 1),
    Input.DOWN: (1, 0),
    Input.LEFT: (0, -1),
}

# (mouth closed, mouth open) image per direction
_IMAGES = {
    Input.UP: (6, 7),
    Input.RIGHT: (0, 1),
    Input.DOWN: (2, 3),
    Input.LEFT: (4, 5),
}

_STEPS_PER_CELL = 7


class Player:
    """The player, moving cell by cell and exploding when caught."""

    def __init__(self, y: int, x: int, rng=None) -> None:
        start = Pos(y, x)
        self.current_img = 0
        self.prv_pos = start
        self.cur_pos = start
        self.nxt_pos = start
        self.initial_pos = start
        self.speed = 0
        self.steps_length = Pos(0, 0)
        self.steps = 0
        self.dir = Input.NONE
        self.score = 0
        self.ct_explosion = 0
        self.lost = False
        self.pm = ParticleManager(PAC_PARTICLE, 0.0, 0.0, rng if rng is not None else random.Random())

    def move(self, matrix, direction: Input, callback: Callable[[], None]) -> None:
        """Advance one frame, turning towards ``direction`` when between cells.

        While exploding, the explosion runs instead; ``callback`` is called
        when it ends.
        """
        if self.is_exploding():
            self.ct_explosion += 1
            self.pm.move()
            if self.ct_explosion == EXPLOSION_FRAMES:
                self.reset()
                callback()
            return

        if not self.is_moving():
            if direction == Input.NONE:
                return
            if not can_move(matrix, add_pos_dir(direction, self.cur_pos)):
                return
            self.update_dir(direction)

        self.speed = 4 if self.steps <= 1 or self.steps >= 6 else 5

        dy, dx = _STEP.get(self.dir, (0, 0))
        self.steps_length = Pos(
            self.steps_length.y + dy * self.speed,
            self.steps_length.x + dx * self.speed,
        )

        self.update_image(self.steps <= 5)
        self.steps += 1

        if self.steps >= _STEPS_PER_CELL:
            self.end_move()

    def reset(self) -> None:
        """Put the player back at its starting cell."""
        self.cur_pos = self.prv_pos = self.nxt_pos = self.initial_pos
        self.current_img = 0
        self.ct_explosion = 0
        self.steps_length = Pos(0, 0)
        self.steps = 0

    def is_moving(self) -> bool:
        return self.steps > 0

    def update_dir(self, d: Input) -> None:
        """Start moving in direction ``d``."""
        self.steps_length = Pos(0, 0)
        self.dir = d
        self.nxt_pos = add_pos_dir(d, self.cur_pos)
        self.prv_pos = self.cur_pos

    def end_move(self) -> None:
        """Arrive at the next cell."""
        self.cur_pos = self.nxt_pos
        self.steps_length = Pos(0, 0)
        self.steps = 0

    def update_image(self, open_mouth: bool) -> None:
        """Show the image for the current direction, mouth open or closed."""
        pair = _IMAGES.get(self.dir)
        if pair is not None:
            self.current_img = pair[1] if open_mouth else pair[0]

    def screen_pos(self) -> tuple[float, float]:
        """Return the drawing position as ``(y, x)``."""
        x = float(self.cur_pos.x * STAGE_BLOC_SIZE + self.steps_length.x)
        y = float(self.cur_pos.y * STAGE_BLOC_SIZE + self.steps_length.y)
        return y, x

    def explode(self) -> None:
        """Start exploding where the player stands, unless already exploding."""
        if self.is_exploding():
            return
        y, x = self.screen_pos()
        self.cur_pos = Pos(0, 0)
        self.pm.reset(x, y)
        self.ct_explosion = 1

    def is_exploding(self) -> bool:
        return self.ct_explosion > 0

    def reinit(self) -> None:
        """Restore the player for a new game."""
        self.reset()
        self.score = 0
        self.lost = False

    def gameover(self) -> None:
        """Take the player off the board."""
        self.lost = True
        self.cur_pos = Pos(0, 0)