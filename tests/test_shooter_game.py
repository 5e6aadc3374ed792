import logging

from pixelplay.controls import Canvas, Controls, Gamepad
from pixelplay.shooter_entities import (
    SCREEN_H,
    SCREEN_W,
    DamageBoost,
    Floating,
    Heal,
    Powerup,
    Projectile,
    ProjectileOwner,
    ProjectileType,
    SpeedBoost,
)
from pixelplay.shooter_game import (
    draw_game_elements,
    draw_game_over,
    draw_hud,
    draw_notifications,
    draw_powerup,
    draw_projectile,
    draw_stars,
    step,
)
from pixelplay.shooter_state import GameState


def zero_rand():
    return 0


def texts(canvas):
    return [c.params["text"] for c in canvas.commands if c.kind == "text"]


def make_projectile(kind):
    return Projectile(
        x=10.0, y=20.0, width=8, height=6, velocity=5.0, angle=-90.0, damage=1,
        projectile_type=kind, projectile_owner=ProjectileOwner.PLAYER,
    )


def test_game_over_blinks_press_start():
    state = GameState.new()
    canvas = Canvas()
    state.tick = 0
    draw_game_over(canvas, state, SCREEN_W, SCREEN_H)
    assert texts(canvas) == ["GAME OVER", "PRESS START"]

    canvas = Canvas()
    state.tick = 16
    draw_game_over(canvas, state, SCREEN_W, SCREEN_H)
    assert texts(canvas) == ["GAME OVER"]


def test_hud_texts_and_right_alignment():
    state = GameState.new()
    canvas = Canvas()
    draw_hud(canvas, state, SCREEN_W)
    assert texts(canvas) == ["LVL: 1", "HP: 3", "XP: 00000"]
    xp = [c for c in canvas.commands if c.kind == "text"][-1]
    assert xp.params["x"] + len("XP: 00000") * 8 + 4 == SCREEN_W


def test_notifications_show_only_first():
    state = GameState.new()
    canvas = Canvas()
    draw_notifications(canvas, state, SCREEN_W)
    assert texts(canvas) == [state.notifications[0]]
    assert canvas.kinds() == ["rect", "text"]


def test_notifications_empty_draws_nothing():
    state = GameState.new()
    state.notifications = []
    canvas = Canvas()
    draw_notifications(canvas, state, SCREEN_W)
    assert canvas.commands == []


def test_projectile_colors_and_diameter():
    canvas = Canvas()
    draw_projectile(canvas, make_projectile(ProjectileType.SPLATTER))
    draw_projectile(canvas, make_projectile(ProjectileType.LASER))
    first, second = canvas.commands
    assert first.params["color"] == 0xFF0000FF
    assert second.params["color"] == 0xFFFF00FF
    assert first.params["d"] == 8


def test_powerup_color_depends_on_effect():
    for effect, color in (
        (Heal(), 0x00FF66FF),
        (SpeedBoost(), 0x6600FFFF),
        (DamageBoost(ProjectileType.SPLATTER), 0xFF0066FF),
    ):
        canvas = Canvas()
        powerup = Powerup(x=40.0, y=50.0, width=8, height=8, effect=effect, movement=Floating(0.5))
        draw_powerup(canvas, powerup, 0)
        circ, sprite = canvas.commands
        assert circ.params["color"] == color
        assert circ.params["d"] >= 8
        assert sprite.params["name"] == "powerup_sprite"


def test_stars_stay_within_screen():
    state = GameState.new()
    canvas = Canvas()
    draw_stars(canvas, state, SCREEN_W, SCREEN_H)
    assert len(canvas.commands) == 30
    for command in canvas.commands:
        assert -SCREEN_W < command.params["x"] < SCREEN_W
        assert -SCREEN_H < command.params["y"] < SCREEN_H


def test_elements_without_hit_keep_camera_still():
    state = GameState.new()
    canvas = Canvas()
    draw_game_elements(canvas, state, zero_rand)
    assert canvas.commands[0].params == {"x": 0, "y": 0}
    assert canvas.camera == (0, 0)
    assert "GAME OVER" not in texts(canvas)


def test_elements_shake_camera_with_signed_remainder():
    state = GameState.new()
    state.hit_timer = 5
    canvas = Canvas()
    draw_game_elements(canvas, state, lambda: 0xFFFFFFFF)
    assert canvas.commands[0].params == {"x": -1, "y": -1}
    assert canvas.camera == (0, 0)


def test_dead_player_shows_game_over_and_no_player():
    state = GameState.new()
    state.player.health = 0
    canvas = Canvas()
    draw_game_elements(canvas, state, zero_rand)
    assert "GAME OVER" in texts(canvas)
    player_rects = [
        c for c in canvas.commands
        if c.kind == "rect" and c.params.get("color") == state.player.color
    ]
    assert player_rects == []


def test_step_advances_tick_and_draws():
    state = GameState.new()
    canvas = Canvas()
    result = step(state, Controls(), canvas, zero_rand)
    assert result.tick == 1
    assert canvas.kinds()[0] == "camera"
    assert "LVL: 1" in texts(canvas)


def test_step_logs_debug_on_b(caplog):
    state = GameState.new()
    controls = Controls({0: Gamepad.holding("b")})
    with caplog.at_level(logging.DEBUG, logger="pixelplay.shooter_game"):
        step(state, controls, Canvas(), zero_rand)
    assert "Health = 3" in caplog.text