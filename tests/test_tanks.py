import math

import pytest

from pixelplay.controls import Canvas, Controls, Gamepad
from pixelplay.tanks import (
    Block,
    GameState,
    Missile,
    Rect,
    Tank,
    Winner,
    create_mirrored_blocks,
    did_hit_missile,
    draw_blocks,
    draw_tank,
    step,
    update_tank,
)


def test_mirrored_blocks_pair_up():
    blocks = create_mirrored_blocks([(32.0, 0.0, 16, 16), (128.0, 0.0, 8, 32)])
    assert len(blocks) == 4
    for original, mirror in zip(blocks[::2], blocks[1::2]):
        assert original.x + mirror.x + original.width == 256.0
        assert (original.y, original.width, original.height) == (
            mirror.y,
            mirror.width,
            mirror.height,
        )


def test_new_state_layout():
    state = GameState.new()
    assert len(state.tanks) == 2
    assert len(state.blocks) == 10
    assert state.winner is None
    assert state.tanks[0].x == 32.0
    assert state.tanks[1].rot == pytest.approx(math.pi)
    assert state.tanks[0].y == state.tanks[1].y


def test_rect_intersection_excludes_touching_edges():
    a = Rect(x=0, y=0, width=10, height=10)
    assert a.intersects(Rect(x=5, y=5, width=10, height=10))
    assert not a.intersects(Rect(x=10, y=0, width=10, height=10))


def test_hitboxes_are_centred():
    tank = Tank(color=1, x=50.0, y=40.0)
    assert tank.hitbox() == Rect(x=42.0, y=32.0, width=16, height=16)
    missile = Missile(x=10.0, y=10.0, vel=0.0, rot=0.0)
    assert missile.hitbox() == Rect(x=7.0, y=7.0, width=6, height=6)
    assert Block(1.0, 2.0, 3, 4).hitbox() == Rect(x=1.0, y=2.0, width=3, height=4)


def test_did_hit_missile():
    tank = Tank(color=1, x=50.0, y=50.0)
    assert did_hit_missile(tank, [Missile(50.0, 50.0, 0.0, 0.0)])
    assert not did_hit_missile(tank, [Missile(150.0, 50.0, 0.0, 0.0)])
    assert not did_hit_missile(tank, [])


def test_accelerating_moves_forward():
    tank = Tank(color=1, x=100.0, y=70.0)
    update_tank(Gamepad.holding("up"), tank, [])
    assert tank.x == pytest.approx(100.0 + 0.02)
    assert tank.y == pytest.approx(70.0)
    assert tank.vel == pytest.approx(0.02 * 0.97)


def test_block_undoes_movement():
    tank = Tank(color=1, x=100.0, y=70.0, vel=1.0)
    wall = Block(x=108.5, y=0.0, width=10, height=144)
    update_tank(Gamepad(), tank, [wall])
    assert tank.x == pytest.approx(100.0)


def test_rotation():
    tank = Tank(color=1, x=100.0, y=70.0)
    update_tank(Gamepad.holding("left"), tank, [])
    assert tank.rot == pytest.approx(-0.05)
    update_tank(Gamepad.holding("right"), tank, [])
    assert tank.rot == pytest.approx(0.0)


def test_firing_adds_missile():
    tank = Tank(color=1, x=100.0, y=70.0, rot=0.5)
    update_tank(Gamepad.tapping("a"), tank, [])
    assert tank.missiles == [Missile(x=100.0, y=70.0, vel=5.0, rot=0.5)]


def test_missiles_removed_by_blocks_and_bounds():
    tank = Tank(color=1, x=100.0, y=70.0)
    tank.missiles = [
        Missile(x=20.0, y=20.0, vel=5.0, rot=0.0),
        Missile(x=254.0, y=20.0, vel=5.0, rot=0.0),
        Missile(x=50.0, y=20.0, vel=5.0, rot=0.0),
    ]
    block = Block(x=18.0, y=18.0, width=4, height=4)
    update_tank(Gamepad(), tank, [block])
    assert len(tank.missiles) == 1
    assert tank.missiles[0].x == pytest.approx(55.0)


def test_step_declares_winner_and_then_freezes():
    state = GameState.new()
    tank1 = state.tanks[0]
    state.tanks[1].missiles.append(Missile(x=tank1.x, y=tank1.y, vel=0.0, rot=0.0))
    state = step(state, Controls(), Canvas())
    assert state.winner is Winner.P2

    canvas = Canvas()
    before = (tank1.x, tank1.y)
    state = step(state, Controls({0: Gamepad.holding("up")}), canvas)
    assert (tank1.x, tank1.y) == before
    assert canvas.commands[-1].params["text"] == "WINNER P2"


def test_step_draw_when_both_hit():
    state = GameState.new()
    t1, t2 = state.tanks
    t2.missiles.append(Missile(x=t1.x, y=t1.y, vel=0.0, rot=0.0))
    t1.missiles.append(Missile(x=t2.x, y=t2.y, vel=0.0, rot=0.0))
    state = step(state, Controls(), Canvas())
    assert state.winner is Winner.DRAW


def test_drawing_counts():
    canvas = Canvas()
    draw_blocks(canvas, create_mirrored_blocks([(32.0, 0.0, 16, 16)]))
    draw_tank(canvas, Tank(color=1, x=10.0, y=10.0, missiles=[Missile(1.0, 1.0, 0.0, 0.0)]))
    kinds = canvas.kinds()
    assert kinds.count("circ") == 1
    assert kinds.count("rect") == 2 + 1 + 8