"""The game scene: board, characters, scoring, sounds and keyboard input."""

import random
from collections.abc import Collection
from dataclasses import dataclass

from sampleworks.pacman.board import (
    BACKGROUND_IMAGE_SIZE,
    DEFAULT_STAGE,
    STAGE_BLOC_SIZE,
    Elem,
    Input,
    Stage,
    parse_stage,
)
from sampleworks.pacman.effects import GHOST_PARTICLE, PAC_PARTICLE, ExplosionManager
from sampleworks.pacman.ghosts import GhostManager
from sampleworks.pacman.hud import Hud
from sampleworks.pacman.pickups import BigDotManager, DotManager, FruitManager, PointManager
from sampleworks.pacman.player import Player

SAMPLE_RATE = 44100

SIREN = "siren"
EAT_FRUIT = "eat_fruit"
WAIL = "wail"
EAT_GHOST = "eat_ghost"
DEATH = "death"
ENTRANCE = "entrance"
APPLAUSE = "applause"

_VOLUMES = {
    SIREN: 0.2,
    EAT_FRUIT: 0.1,
    WAIL: 0.05,
    EAT_GHOST: 0.05,
    DEATH: 0.05,
    ENTRANCE: 0.2,
    APPLAUSE: 0.2,
}

_SIREN_BLOCKERS = (WAIL, DEATH, ENTRANCE, APPLAUSE)

_KEY_BINDINGS = (
    (Input.UP, ("up", "k")),
    (Input.LEFT, ("left", "h")),
    (Input.RIGHT, ("right", "l")),
    (Input.DOWN, ("down", "j")),
)

_GHOST_REWARDS = {1: 200, 2: 400, 3: 800}
_GHOST_REWARD_MAX = 1600


def key_to_input(pressed: Collection[str], just_pressed: Collection[str]) -> Input:
    """Map held keys and keys pressed this frame to a command.

    Movement keys count while held (arrows or hjkl); ``s`` and ``r`` only on
    the frame they are pressed.
    """
    for command, keys in _KEY_BINDINGS:
        if any(key in pressed for key in keys):
            return command
    if "s" in just_pressed:
        return Input.S_KEY
    if "r" in just_pressed:
        return Input.R_KEY
    return Input.NONE


@dataclass
class _Channel:
    volume: float = 0.0
    playing: bool = False


class Sounds:
    """Playback state of the game's sound effects."""

    def __init__(self) -> None:
        self.on = False
        self.players = {name: _Channel() for name in _VOLUMES}
        self.toggle_sound()

    def toggle_sound(self) -> None:
        """Mute every sound, or restore their volumes."""
        self.on = not self.on
        for name, channel in self.players.items():
            channel.volume = _VOLUMES[name] if self.on else 0.0

    def status(self) -> str:
        """Return what the sound toggle would switch to: "off" or "on"."""
        return "off" if self.on else "on"

    def _channel(self, name: str) -> _Channel:
        try:
            return self.players[name]
        except KeyError:
            raise ValueError(f"unknown sound: {name!r}") from None

    def play(self, name: str) -> None:
        """Start the sound ``name`` with the rules that belong to it."""
        channel = self._channel(name)
        if name == SIREN:
            if self.can_play_siren() and not channel.playing:
                channel.playing = True
            return
        if name in (WAIL, DEATH, ENTRANCE, APPLAUSE):
            self.players[SIREN].playing = False
        if name in (WAIL, ENTRANCE):
            channel.playing = True
            return
        if not channel.playing:
            channel.playing = True

    def pause(self) -> None:
        """Stop every sound."""
        for channel in self.players.values():
            channel.playing = False

    def can_play_siren(self) -> bool:
        """True when no sound that silences the siren is playing."""
        return not any(self.players[name].playing for name in _SIREN_BLOCKERS)


class Scene:
    """One level in play."""

    def __init__(self, stage: Stage | None = None, rng=None) -> None:
        self.stage = stage if stage is not None else DEFAULT_STAGE
        rng = rng if rng is not None else random.Random()
        self.lives = self.stage.lives
        self.over = False
        self.dots = DotManager()
        self.explosions = ExplosionManager(rng)
        self.big_dots = BigDotManager()
        self.ghosts = GhostManager(rng)
        self.points = PointManager()
        self.sounds = Sounds()
        self.hud = Hud(
            self.stage.width() * STAGE_BLOC_SIZE,
            self.stage.height() * STAGE_BLOC_SIZE,
        )
        self.matrix = parse_stage(self.stage)
        self.player: Player | None = None
        self.fruit: FruitManager | None = None
        self._populate(rng)
        if self.player is None:
            raise ValueError("stage has no player")
        if self.fruit is None:
            raise ValueError("stage has no fruit")
        self.hud.entrance_anim(True)
        self.sounds.play(ENTRANCE)

    def _populate(self, rng) -> None:
        for y, row in enumerate(self.matrix):
            for x, cell in enumerate(row):
                if cell == Elem.DOT:
                    self.dots.add(y, x)
                elif cell == Elem.BIG_DOT:
                    self.big_dots.add(y, x)
                elif cell == Elem.PLAYER:
                    self.player = Player(y, x, rng)
                elif cell == Elem.FRUIT:
                    self.fruit = FruitManager(float(x * STAGE_BLOC_SIZE), float(y * STAGE_BLOC_SIZE))
                elif cell in (Elem.BLINKY, Elem.INKY, Elem.PINKY, Elem.CLYDE):
                    self.ghosts.add_ghost(y, x, cell)

    def screen_width(self) -> int:
        return self.stage.width() * STAGE_BLOC_SIZE

    def screen_height(self) -> int:
        board = self.stage.height() * STAGE_BLOC_SIZE
        return (board // BACKGROUND_IMAGE_SIZE + 2) * BACKGROUND_IMAGE_SIZE

    def move(self, direction: Input) -> None:
        """Advance explosions, ghosts and the player by one frame."""
        self.explosions.move()
        if not self.over:
            self.ghosts.move(self.matrix, self.player.cur_pos)
        if self.lives > 0:
            self.player.move(self.matrix, direction, self._after_pacman_explosion)

    def detect_collision(self) -> None:
        """Resolve what the player touches: dots, fruit, big dots and ghosts."""
        y, x = self.player.screen_pos()
        self.dots.detect_collision(self.matrix, self.player.cur_pos, self._after_dot)
        self.fruit.detect_collision(y, x, self._after_fruit)
        self.big_dots.detect_collision(self.matrix, self.player.cur_pos, self._after_big_dot)
        self.ghosts.detect_collision(y, x, self._after_ghost)

    def _after_dot(self) -> None:
        pos = self.player.cur_pos
        self.player.score += 10
        self.dots.delete(pos)
        self.matrix[pos.y][pos.x] = Elem.EMPTY
        if not self.over and self.won():
            self.victory()

    def _after_fruit(self) -> None:
        y, x = self.player.screen_pos()
        self.player.score += 100
        self.points.show(0, x, y)
        self.sounds.play(EAT_FRUIT)
        self.lives = min(self.lives + 1, self.stage.max_lives)

    def _after_big_dot(self) -> None:
        pos = self.player.cur_pos
        self.player.score += 50
        self.big_dots.delete(pos)
        self.matrix[pos.y][pos.x] = Elem.EMPTY
        if not self.over and self.won():
            self.victory()
            return
        self.ghosts.make_vulnerable()
        self.sounds.play(WAIL)

    def _after_ghost(self, vulnerable: bool, y: float, x: float) -> None:
        if vulnerable:
            self.explosions.add_explosion(GHOST_PARTICLE, x, y)
            self.sounds.play(EAT_GHOST)
            eaten = self.ghosts.eaten
            self.player.score += _GHOST_REWARDS.get(eaten, _GHOST_REWARD_MAX)
            self.points.show(eaten, x, y)
        else:
            self.sounds.play(DEATH)
            self.player.explode()

    def _after_pacman_explosion(self) -> None:
        self.ghosts.reset(self.explosions, False)
        x, y = self.hud.lives_pos(self.lives)
        self.explosions.add_explosion(PAC_PARTICLE, x - 16, y + 16)
        self.lives -= 1
        if self.lives == 0:
            self.player.gameover()

    def won(self) -> bool:
        """True when every dot and big dot has been eaten."""
        return self.dots.empty() and self.big_dots.empty()

    def victory(self) -> None:
        """End the level as won."""
        self.over = True
        self.ghosts.reset(self.explosions, True)
        self.sounds.pause()
        self.sounds.play(APPLAUSE)

    def reinit(self) -> None:
        """Restart the level from the beginning."""
        self.dots.reinit(self.matrix)
        self.big_dots.reinit(self.matrix)
        self.player.reinit()
        self.hud.reinit()
        self.lives = self.stage.max_lives - 1
        self.over = False
        self.ghosts.reinit()
        self.explosions.reinit()
        self.hud.entrance_anim(True)
        self.sounds.pause()
        self.sounds.play(ENTRANCE)

    def update(self, key: Input) -> None:
        """Run one frame for the command ``key``."""
        if key == Input.S_KEY:
            self.sounds.toggle_sound()

        if key == Input.R_KEY:
            self.reinit()
        elif not self.hud.entrance:
            self.move(key)
            self.detect_collision()

        won = self.won()
        self.big_dots.blink_frame()
        self.fruit.update()
        self.points.advance()
        if self.lives == 0:
            self.hud.fade_game_over()
        elif won:
            self.hud.fade_win()
        self.hud.entrance_text()
        if not won:
            self.sounds.play(SIREN)


class Game:
    """The whole game: a scene driven by keyboard state."""

    def __init__(self, stage: Stage | None = None, rng=None) -> None:
        self.scene = Scene(stage, rng)
        self.input = Input.NONE

    def screen_width(self) -> int:
        return self.scene.screen_width()

    def screen_height(self) -> int:
        return self.scene.screen_height()

    def update(self, pressed: Collection[str], just_pressed: Collection[str]) -> None:
        """Read the keys and run one frame."""
        self.input = key_to_input(pressed, just_pressed)
        self.scene.update(self.input)