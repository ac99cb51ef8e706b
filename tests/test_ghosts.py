import random

import pytest

from sampleworks.pacman.board import (
    STAGE_BLOC_SIZE,
    Elem,
    Input,
    Pos,
    Stage,
    can_move,
    parse_stage,
)
from sampleworks.pacman.effects import ExplosionManager
from sampleworks.pacman.ghosts import (
    GHOST_IMAGE_COUNT,
    NORMAL_SPEED,
    VULNERABLE_IMAGE_OFFSET,
    VULNERABLE_SPEED,
    Ghost,
    GhostManager,
    get_vision,
)

LAYOUT = Stage(
    matrix=(
        "3888885",
        "gsssssg",
        "gs8sssg",
        "gsssssg",
        "l88888n",
    ),
    lives=1,
    max_lives=2,
)

DEAD_END = Stage(
    matrix=(
        "385",
        "gsg",
        "gsg",
        "l8n",
    ),
    lives=1,
    max_lives=2,
)


@pytest.fixture
def grid():
    return parse_stage(LAYOUT)


def ghost(y, x, kind=Elem.BLINKY, seed=1):
    return Ghost(y, x, kind, random.Random(seed))


@pytest.mark.parametrize(
    "kind, vision",
    [(Elem.PINKY, 10), (Elem.INKY, 15), (Elem.BLINKY, 50), (Elem.CLYDE, 60), (Elem.DOT, 0)],
)
def test_get_vision(kind, vision):
    assert get_vision(kind) == vision


def test_new_ghost_starts_still_at_its_cell():
    g = ghost(2, 3)
    assert g.cur_pos == g.prv_pos == g.nxt_pos == g.initial_pos == Pos(2, 3)
    assert g.speed == NORMAL_SPEED
    assert not g.is_moving()
    assert not g.is_vulnerable()


def test_screen_pos_follows_cell():
    g = ghost(2, 3)
    assert g.screen_pos() == (2 * STAGE_BLOC_SIZE, 3 * STAGE_BLOC_SIZE)


def test_localise_player_in_each_direction(grid):
    g = ghost(1, 1)
    assert g.localise_player(grid, Pos(1, 5)) == Input.RIGHT
    assert g.localise_player(grid, Pos(3, 1)) == Input.DOWN
    g = ghost(3, 5)
    assert g.localise_player(grid, Pos(1, 5)) == Input.UP
    assert g.localise_player(grid, Pos(3, 1)) == Input.LEFT


def test_localise_player_blocked_by_wall(grid):
    g = ghost(1, 2)
    assert g.localise_player(grid, Pos(3, 2)) == Input.NONE


def test_localise_player_needs_vision(grid):
    g = ghost(1, 1, Elem.FRUIT)
    assert g.localise_player(grid, Pos(1, 2)) == Input.NONE


def test_vulnerable_ghost_does_not_chase(grid):
    g = ghost(1, 1)
    g.make_vulnerable()
    assert g.localise_player(grid, Pos(1, 2)) == Input.NONE


def test_find_next_move_chases_visible_player(grid):
    g = ghost(1, 1)
    g.find_next_move(grid, Pos(1, 4))
    assert g.dir == Input.RIGHT
    assert g.nxt_pos == Pos(1, 2)


@pytest.mark.parametrize("seed", range(10))
def test_random_move_picks_open_neighbour(grid, seed):
    g = ghost(1, 1, seed=seed)
    g.find_next_move(grid, Pos(0, 0))
    assert g.nxt_pos in {Pos(1, 2), Pos(2, 1)}
    assert can_move(grid, g.nxt_pos)


@pytest.mark.parametrize("seed", range(10))
def test_random_move_avoids_previous_cell(grid, seed):
    g = ghost(1, 1, seed=seed)
    g.prv_pos = Pos(1, 2)
    g.find_next_move(grid, Pos(0, 0))
    assert g.nxt_pos == Pos(2, 1)
    assert g.dir == Input.DOWN


def test_dead_end_turns_back():
    matrix = parse_stage(DEAD_END)
    g = ghost(1, 1)
    g.prv_pos = Pos(2, 1)
    g.dir = Input.UP
    g.find_next_move(matrix, Pos(0, 0))
    assert g.dir == Input.DOWN
    assert g.nxt_pos == Pos(2, 1)


def test_full_move_reaches_next_cell(grid):
    g = ghost(1, 1)
    g.find_next_move(grid, Pos(1, 4))
    target = g.nxt_pos
    g.move()
    assert g.is_moving()
    assert g.steps_length == Pos(0, NORMAL_SPEED)
    while g.is_moving():
        g.move()
    assert g.cur_pos == target
    assert g.prv_pos == Pos(1, 1)
    assert g.steps_length == Pos(0, 0)


def test_vulnerable_move_is_slower(grid):
    g = ghost(1, 1)
    g.make_vulnerable()
    g.find_next_move(grid, Pos(0, 0))
    assert g.speed == VULNERABLE_SPEED
    assert g.vulnerable_move
    target = g.nxt_pos
    g.move()
    assert abs(g.steps_length.x) + abs(g.steps_length.y) == VULNERABLE_SPEED
    moves = 1
    while g.is_moving():
        g.move()
        moves += 1
    assert g.cur_pos == target
    assert moves * VULNERABLE_SPEED == STAGE_BLOC_SIZE


def test_vulnerability_ends_after_enough_frames(grid):
    g = ghost(1, 1)
    g.make_vulnerable()
    g.ct_vulnerable = 390
    g.find_next_move(grid, Pos(0, 0))
    while True:
        g.move()
        if not g.is_moving():
            break
    assert not g.is_vulnerable()
    assert g.ct_vulnerable == 0
    assert not g.vulnerable_move


def test_image_index_uses_vulnerability_images():
    g = ghost(1, 1)
    g.current_img = 5
    assert g.image_index(GHOST_IMAGE_COUNT) == 5
    g.make_vulnerable()
    assert g.image_index(GHOST_IMAGE_COUNT) == VULNERABLE_IMAGE_OFFSET
    g.current_img = 3
    assert g.image_index(GHOST_IMAGE_COUNT) == 11


@pytest.mark.parametrize("direction", [Input.UP, Input.RIGHT, Input.DOWN, Input.LEFT])
def test_update_image_toggles(direction):
    g = ghost(1, 1)
    g.dir = direction
    g.update_image()
    first = g.current_img
    g.update_image()
    second = g.current_img
    g.update_image()
    assert first != second
    assert g.current_img == first


def test_vulnerable_images_stay_in_range():
    g = ghost(1, 1)
    g.make_vulnerable()
    seen = set()
    for ct in (1, 400):
        g.ct_vulnerable = ct
        for _ in range(3):
            g.update_image()
            seen.add(g.current_img)
    assert seen == {0, 1, 2, 3}


def test_reset_and_reinit(grid):
    g = ghost(1, 1)
    g.find_next_move(grid, Pos(1, 4))
    g.move()
    g.make_vulnerable()
    g.make_eaten()
    g.reset()
    assert g.cur_pos == g.initial_pos
    assert not g.is_moving()
    assert g.dir == Input.NONE
    assert g.is_eaten()
    g.gameover()
    assert g.lost
    assert g.cur_pos == Pos(0, 0)
    g.reinit()
    assert not g.lost
    assert not g.is_eaten()
    assert not g.is_vulnerable()
    assert g.cur_pos == g.initial_pos


def test_manager_make_vulnerable():
    gm = GhostManager(random.Random(0))
    gm.add_ghost(1, 1, Elem.BLINKY)
    gm.add_ghost(3, 5, Elem.INKY)
    gm.eaten = 3
    gm.make_vulnerable()
    assert gm.eaten == 0
    assert all(g.is_vulnerable() for g in gm.ghosts)


def test_manager_move_starts_every_ghost(grid):
    gm = GhostManager(random.Random(0))
    gm.add_ghost(1, 1, Elem.BLINKY)
    gm.add_ghost(3, 5, Elem.CLYDE)
    gm.move(grid, Pos(0, 0))
    assert all(g.is_moving() for g in gm.ghosts)
    assert all(can_move(grid, g.nxt_pos) for g in gm.ghosts)


def test_collision_with_dangerous_ghost_stops_at_first():
    gm = GhostManager(random.Random(0))
    gm.add_ghost(1, 1, Elem.BLINKY)
    gm.add_ghost(1, 1, Elem.INKY)
    calls = []
    y, x = gm.ghosts[0].screen_pos()
    gm.detect_collision(y, x, lambda *args: calls.append(args))
    assert calls == [(False, 0.0, 0.0)]
    assert gm.eaten == 0


def test_collision_with_vulnerable_ghost_eats_it():
    gm = GhostManager(random.Random(0))
    gm.add_ghost(2, 3, Elem.BLINKY)
    gm.add_ghost(1, 1, Elem.INKY)
    gm.make_vulnerable()
    g = gm.ghosts[0]
    y, x = g.screen_pos()
    calls = []
    gm.detect_collision(y + 5, x - 5, lambda *args: calls.append(args))
    assert calls == [(True, y, x)]
    assert gm.eaten == 1
    assert g.is_eaten()
    assert not gm.ghosts[1].is_eaten()


def test_collision_far_away_reports_nothing():
    gm = GhostManager(random.Random(0))
    gm.add_ghost(1, 1, Elem.BLINKY)
    calls = []
    gm.detect_collision(400.0, 400.0, lambda *args: calls.append(args))
    assert calls == []


def test_manager_reset_explodes_every_ghost():
    gm = GhostManager(random.Random(0))
    gm.add_ghost(1, 1, Elem.BLINKY)
    gm.add_ghost(3, 5, Elem.PINKY)
    explosions = ExplosionManager(random.Random(0))
    gm.reset(explosions, over=False)
    assert len(explosions.explosions) == len(gm.ghosts)
    assert not any(g.lost for g in gm.ghosts)
    gm.reset(explosions, over=True)
    assert len(explosions.explosions) == 2 * len(gm.ghosts)
    assert all(g.lost for g in gm.ghosts)
    gm.reinit()
    assert not any(g.lost for g in gm.ghosts)
    assert [g.cur_pos for g in gm.ghosts] == [Pos(1, 1), Pos(3, 5)]