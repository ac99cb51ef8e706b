from collections import Counter

from sampleworks.pacman.board import STAGE_BLOC_SIZE
from sampleworks.pacman.hud import Hud


def test_countdown_sequence():
    hud = Hud(608, 544)
    hud.entrance_anim(True)
    shown = [hud.entrance_text() for _ in range(240)]
    assert Counter(shown) == {"3": 60, "2": 60, "1": 60, "GO!": 60}
    assert shown[0] == "3"
    assert shown[-1] == "GO!"
    assert hud.entrance is True
    assert hud.entrance_text() is None
    assert hud.entrance is False


def test_countdown_disabled_shows_nothing():
    hud = Hud(608, 544)
    hud.entrance_anim(True)
    hud.entrance_text()
    hud.entrance_anim(False)
    assert hud.entrance_text() is None


def test_entrance_anim_restarts_count():
    hud = Hud(608, 544)
    hud.entrance_anim(True)
    for _ in range(100):
        hud.entrance_text()
    hud.entrance_anim(True)
    assert hud.count == 0
    assert hud.entrance_text() == "3"


def test_fades_are_capped_and_reset():
    hud = Hud(608, 544)
    values = [hud.fade_game_over() for _ in range(200)]
    assert values == sorted(values)
    assert values[-1] == 1.0
    for _ in range(200):
        hud.fade_win()
    assert hud.win_alpha == 1.0
    hud.reinit()
    assert hud.game_over_alpha == 0.0
    assert hud.win_alpha == 0.0


def test_lives_pos_steps_one_block_per_life():
    hud = Hud(608, 544)
    x0, y0 = hud.lives_pos(0)
    x1, y1 = hud.lives_pos(1)
    assert x0 == hud.lives_x
    assert x1 - x0 == STAGE_BLOC_SIZE
    assert y0 == y1
    assert y0 - hud.title_y == STAGE_BLOC_SIZE


def test_sound_label():
    hud = Hud(608, 544)
    assert hud.sound_label("on") == "s: sound on"
    assert hud.sound_label("off") == "s: sound off"