"""Heads-up display state: the count-down, the fades and the positions of the labels."""

from sampleworks.pacman.board import STAGE_BLOC_SIZE

KEY_TEXT = "KEYS"
R_TEXT = "r: Restart"
H_TEXT = "hjkl: Move"
LIVES_TEXT = "LIVES"
SCORE_TEXT = "SCORE"
RESTART_TEXT = "R: Restart"
MOVE_TEXT = "←↓↑→: Move"
PAUSE_TEXT = "P: pause"
SOUND_TEXT = "s: sound {}"

GOLD = (255, 204, 0, 255)

_FADE_STEP = 0.01
_COUNTDOWN = (
    (60, "3"),
    (120, "2"),
    (180, "1"),
    (240, "GO!"),
)


class Hud:
    """Text and overlays shown below and on top of the board."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.score_x = width - 5 * STAGE_BLOC_SIZE
        self.key_x = 20
        self.lives_x = width // 2 - 2 * STAGE_BLOC_SIZE
        self.title_y = height + 25
        self.count = 0
        self.entrance = False
        self.game_over_alpha = 0.0
        self.win_alpha = 0.0

    def reinit(self) -> None:
        """Clear the end-of-game overlays."""
        self.game_over_alpha = 0.0
        self.win_alpha = 0.0

    def entrance_anim(self, enabled: bool) -> None:
        """Start (restarting the count) or stop the entrance count-down."""
        if enabled:
            self.count = 0
        self.entrance = enabled

    def entrance_text(self) -> str | None:
        """Advance the count-down one frame and return the text to show, if any."""
        if not self.entrance:
            return None
        self.count += 1
        for limit, text in _COUNTDOWN:
            if self.count <= limit:
                return text
        self.entrance_anim(False)
        return None

    def fade_game_over(self) -> float:
        """Fade the game-over image in by one frame and return its opacity."""
        self.game_over_alpha = min(self.game_over_alpha + _FADE_STEP, 1.0)
        return self.game_over_alpha

    def fade_win(self) -> float:
        """Fade the victory image in by one frame and return its opacity."""
        self.win_alpha = min(self.win_alpha + _FADE_STEP, 1.0)
        return self.win_alpha

    def lives_pos(self, lives: int) -> tuple[float, float]:
        """Return ``(x, y)`` of the life icon slot number ``lives``."""
        x = float(self.lives_x + lives * STAGE_BLOC_SIZE)
        y = float(self.title_y + STAGE_BLOC_SIZE)
        return x, y

    def sound_label(self, status: str) -> str:
        """Return the key help line for the sound toggle."""
        return SOUND_TEXT.format(status)