import pytest

from pixelplay.controls import Canvas, Controls, Gamepad
from pixelplay.space_invaders import Bullet, GameState, Invader, step


def texts(canvas):
    return [c.params["text"] for c in canvas.commands if c.kind == "text"]


def test_new_state_grid():
    state = GameState.new()
    assert len(state.invaders) == 55
    assert state.invaders[0].sprites == ("invader_a_0", "invader_a_1")
    assert state.invaders[11].sprites == ("invader_b_0", "invader_b_1")
    assert state.invaders[33].sprites == ("invader_c_0", "invader_c_1")
    assert state.invaders[0].x == 20.0 and state.invaders[0].y == 20.0
    assert all(inv.moving_right for inv in state.invaders)


def test_first_frame_marches_and_speeds_up():
    state = GameState.new()
    first_x = state.invaders[0].x
    rate = state.move_rate
    state = step(state, Controls(), Canvas())
    assert state.invaders[0].x == first_x + 2.0
    assert state.move_rate == rate - 1
    assert state.tick == 1


def test_firing_spawns_bullet_that_moves_up():
    state = GameState.new()
    state.tick = 1
    state = step(state, Controls({0: Gamepad.tapping("a")}), Canvas())
    assert len(state.bullets) == 1
    assert state.bullets[0].x == state.player_x
    assert state.bullets[0].y == state.player_y - 4.0


def test_player_moves():
    state = GameState.new()
    start = state.player_x
    state = step(state, Controls({0: Gamepad.holding("left")}), Canvas())
    assert state.player_x == start - 2.0


def test_bullet_kills_invader():
    state = GameState.new()
    state.tick = 1
    target = state.invaders[0]
    state.bullets = [Bullet(x=target.x + 1.0, y=target.y + 8.0)]
    state = step(state, Controls(), Canvas())
    assert state.score == 1
    assert len(state.invaders) == 54
    assert target not in state.invaders
    assert state.bullets == []


def test_bullets_leave_screen():
    state = GameState.new()
    state.tick = 1
    state.bullets = [Bullet(x=0.0, y=3.0)]
    state = step(state, Controls(), Canvas())
    assert state.bullets == []


def test_edge_reverses_and_drops():
    state = GameState.new()
    state.invaders = [
        Invader(x=206.0, y=40.0, moving_right=True, sprites=("a", "b")),
        Invader(x=20.0, y=40.0, moving_right=True, sprites=("a", "b")),
    ]
    state = step(state, Controls(), Canvas())
    assert all(not inv.moving_right for inv in state.invaders)
    assert all(inv.y == 48.0 for inv in state.invaders)


def test_game_over_and_restart():
    state = GameState.new()
    state.invaders[0].y = state.player_y
    state = step(state, Controls(), Canvas())
    assert state.game_over

    canvas = Canvas()
    state = step(state, Controls(), canvas)
    assert "GAME OVER" in texts(canvas)

    state = step(state, Controls({0: Gamepad.tapping("start")}), Canvas())
    assert not state.game_over
    assert len(state.invaders) == 55
    assert state.score == 0


def test_win_message_and_score_text():
    state = GameState.new()
    state.invaders = []
    canvas = Canvas()
    step(state, Controls(), canvas)
    assert "YOU WIN!" in texts(canvas)
    assert "SCORE: 00000" in texts(canvas)


def test_sprite_frame_alternates():
    state = GameState.new()
    state.tick = 31
    canvas = Canvas()
    step(state, Controls(), canvas)
    names = [c.params["name"] for c in canvas.commands if c.kind == "sprite"]
    assert "invader_a_1" in names
    assert "invader_a_0" not in names