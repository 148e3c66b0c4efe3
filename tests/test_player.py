import pytest

from cubecaster.game import Player
from cubecaster.player import (
    KEYCODE_ESCAPE,
    KEYCODE_LEFT_ARROW,
    KEYCODE_RIGHT_ARROW,
    Key,
    check_collision,
    press_key,
    release_key,
    update_player,
)

ROOM = ("111", "101", "111")


@pytest.mark.parametrize(
    "code, flag",
    [
        (ord("w"), Key.UP),
        (ord("s"), Key.DOWN),
        (ord("a"), Key.LEFT),
        (ord("d"), Key.RIGHT),
        (KEYCODE_RIGHT_ARROW, Key.TURN_RIGHT),
        (KEYCODE_LEFT_ARROW, Key.TURN_LEFT),
    ],
)
def test_press_and_release_round_trip(code, flag):
    held = press_key(Key(0), code)
    assert held == flag
    assert release_key(held, code) == Key(0)


def test_press_keeps_other_keys():
    held = press_key(press_key(Key(0), ord("w")), ord("d"))
    assert held == Key.UP | Key.RIGHT
    assert release_key(held, ord("w")) == Key.RIGHT


def test_unbound_key_changes_nothing():
    assert press_key(Key.UP, ord("x")) == Key.UP
    assert release_key(Key.UP, ord("x")) == Key.UP


def test_escape_exits():
    with pytest.raises(SystemExit):
        press_key(Key(0), KEYCODE_ESCAPE)


def test_no_keys_no_motion():
    player = Player(96.0, 96.0, 0.0)
    update_player(player, Key(0), 60.0, ROOM)
    assert (player.x, player.y, player.rot) == (96.0, 96.0, 0.0)


def test_zero_fps_moves_nothing():
    player = Player(96.0, 96.0, 0.0)
    update_player(player, Key.UP | Key.TURN_RIGHT, 0.0, ROOM)
    assert (player.x, player.y, player.rot) == (96.0, 96.0, 0.0)


def test_turn_right_at_reference_rate():
    player = Player(96.0, 96.0, 10.0)
    update_player(player, Key.TURN_RIGHT, 60.0, ROOM)
    assert player.rot == pytest.approx(10.0 + 1.5)


def test_turn_wraps_past_full_circle():
    player = Player(96.0, 96.0, 359.0)
    update_player(player, Key.TURN_RIGHT, 60.0, ROOM)
    assert player.rot == pytest.approx(359.0 + 1.5 - 360)

    player = Player(96.0, 96.0, 0.0)
    update_player(player, Key.TURN_LEFT, 60.0, ROOM)
    assert player.rot == pytest.approx(360 - 1.5)


def test_forward_and_back_cancel():
    player = Player(96.0, 96.0, 30.0)
    update_player(player, Key.UP | Key.DOWN, 60.0, ROOM)
    assert player.x == pytest.approx(96.0)
    assert player.y == pytest.approx(96.0)


def test_forward_and_strafe_directions():
    forward = Player(96.0, 96.0, 0.0)
    update_player(forward, Key.UP, 60.0, ROOM)
    assert forward.x == pytest.approx(96.0 + 2)
    assert forward.y == pytest.approx(96.0)

    right = Player(96.0, 96.0, 0.0)
    update_player(right, Key.RIGHT, 60.0, ROOM)
    assert right.x == pytest.approx(96.0)
    assert right.y == pytest.approx(96.0 + 2)


def test_walls_stop_player():
    player = Player(96.0, 96.0, 0.0)
    for _ in range(50):
        update_player(player, Key.UP, 60.0, ROOM)
    assert player.x == 128 - 10
    assert player.y == pytest.approx(96.0)


def test_collision_pushes_back_from_each_side():
    player = Player(120.0, 96.0, 0.0)
    check_collision(player, ROOM)
    assert player.x == 128 - 10

    player = Player(70.0, 96.0, 0.0)
    check_collision(player, ROOM)
    assert player.x == 64 + 10

    player = Player(96.0, 70.0, 0.0)
    check_collision(player, ROOM)
    assert player.y == 64 + 10


def test_collision_leaves_free_player_alone():
    player = Player(96.0, 96.0, 45.0)
    check_collision(player, ROOM)
    assert (player.x, player.y) == (96.0, 96.0)