"""One frame of the space shooter: draw the scene, then advance the rules."""

from __future__ import annotations

import logging
import math

from .controls import Canvas, Controls
from .shooter_entities import (
    SCREEN_H,
    SCREEN_W,
    DamageBoost,
    Enemy,
    Heal,
    MaxHealthUp,
    Player,
    Powerup,
    Projectile,
    ProjectileType,
    Rand,
    SpeedBoost,
    rand_with_seed,
)
from .shooter_state import GameState
from .shooter_update import update

logger = logging.getLogger(__name__)

BLACK = 0x000000FF
WHITE = 0xFFFFFFFF
ENEMY_COLOR = 0xAAAAAAFF
STAR_COLOR = 0xFFFFFF44
NOTIFICATION_COLOR = 0x22AAAAFF
HUD_HEIGHT = 16
HUD_PADDING = 4

# (seed, size, speed, count) of each parallax layer.
_STAR_LAYERS = (
    (54321, 1, 0.15, 10),
    (12345, 1, 0.25, 10),
    (67890, 2, 0.35, 10),
)

_POWERUP_COLORS = {
    Heal: 0x00FF66FF,
    MaxHealthUp: 0x00FFFFFF,
    DamageBoost: 0xFF0066FF,
    SpeedBoost: 0x6600FFFF,
}


def _to_i32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _rem(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend."""
    r = abs(a) % b
    return -r if a < 0 else r


def step(state: GameState, controls: Controls, canvas: Canvas, rand: Rand) -> GameState:
    """Draw the current frame, then run one update; return the state to keep."""
    if controls.gamepad(0).b.pressed():
        player = state.player
        logger.debug(
            "- Health = %d\n- Position: (%s, %s)\n- Score: %d\n- Resolution: [%d, %d]",
            player.health, player.x, player.y, state.score, SCREEN_W, SCREEN_H,
        )
    draw_game_elements(canvas, state, rand)
    return update(state, controls, canvas, rand)


def draw_game_elements(canvas: Canvas, state: GameState, rand: Rand) -> None:
    """Draw the world, shaking the camera while the player is hit."""
    if state.hit_timer > 0:
        canvas.set_camera(_rem(_to_i32(rand()), 3), _rem(_to_i32(rand()), 3))
    else:
        canvas.set_camera(0, 0)

    draw_stars(canvas, state, SCREEN_W, SCREEN_H)
    if state.player.health > 0:
        draw_player(canvas, state.player)
    for enemy in state.enemies:
        draw_enemy(canvas, enemy)
    for projectile in state.projectiles:
        draw_projectile(canvas, projectile)
    for powerup in state.powerups:
        draw_powerup(canvas, powerup, state.tick)

    canvas.set_camera(0, 0)
    draw_notifications(canvas, state, SCREEN_W)
    if state.player.health == 0:
        draw_game_over(canvas, state, SCREEN_W, SCREEN_H)
    draw_hud(canvas, state, SCREEN_W)


def draw_stars(canvas: Canvas, state: GameState, screen_w: int, screen_h: int) -> None:
    """Parallax star field that drifts with time and the player's position."""
    player = state.player
    for seed, size, speed, count in _STAR_LAYERS:
        for i in range(count):
            value = rand_with_seed(seed + i + state.tick // 10)
            rand_x = value % screen_w
            rand_y = (value // screen_w) % screen_h
            adjust_x = player.x * speed / -5.0
            adjust_y = player.y * speed / -5.0
            x = rand_x + int(adjust_x)
            y = int(state.tick * speed) + rand_y + int(adjust_y)
            canvas.circ(x=_rem(x, screen_w), y=_rem(y, screen_h), d=size, color=STAR_COLOR)


def draw_player(canvas: Canvas, player: Player) -> None:
    canvas.rect(x=player.x, y=player.y, w=player.width, h=player.height, color=player.color)
    if player.accessory is not None:
        canvas.sprite(player.accessory, x=player.x, y=player.y)


def draw_enemy(canvas: Canvas, enemy: Enemy) -> None:
    canvas.rect(x=enemy.x, y=enemy.y, w=enemy.width, h=enemy.height, color=ENEMY_COLOR)


def draw_projectile(canvas: Canvas, projectile: Projectile) -> None:
    if projectile.projectile_type in (ProjectileType.SPLATTER, ProjectileType.FRAGMENT):
        color = 0xFF0000FF
    else:
        color = 0xFFFF00FF
    canvas.circ(
        x=projectile.x,
        y=projectile.y,
        d=max(projectile.width, projectile.height),
        color=color,
    )


def draw_powerup(canvas: Canvas, powerup: Powerup, tick: int) -> None:
    """A pulsing circle coloured by effect, with the powerup sprite on top."""
    n = math.cos(tick * 0.15) * 3.0
    canvas.circ(
        x=int(powerup.x - n * 0.5),
        y=int(powerup.y - n * 0.5),
        d=max(powerup.width, powerup.height) + max(int(n), 0),
        color=_POWERUP_COLORS[type(powerup.effect)],
    )
    canvas.sprite("powerup_sprite", x=int(powerup.x), y=int(powerup.y))


def draw_hud(canvas: Canvas, state: GameState, screen_w: int) -> None:
    """Top bar with level, health and skill points."""
    canvas.rect(x=0, y=0, w=screen_w, h=HUD_HEIGHT, color=BLACK)
    canvas.rect(x=0, y=HUD_HEIGHT, w=screen_w, h=1, color=WHITE)

    canvas.text("LVL: 1", x=HUD_PADDING, y=HUD_PADDING, font="L", color=WHITE)

    health_text = f"HP: {state.player.health}"
    health_x = screen_w // 2 - (len(health_text) * 8) // 2
    canvas.text(health_text, x=health_x, y=HUD_PADDING, font="L", color=WHITE)

    xp_text = f"XP: {state.player.skill_points:05}"
    xp_x = screen_w - len(xp_text) * 8 - HUD_PADDING
    canvas.text(xp_text, x=xp_x, y=HUD_PADDING, font="L", color=WHITE)


def draw_notifications(canvas: Canvas, state: GameState, screen_w: int) -> None:
    """Show only the oldest pending notification."""
    if not state.notifications:
        return
    notif = state.notifications[0]
    w = len(notif) * 5
    x = screen_w // 2 - w // 2
    canvas.rect(w=w + 4, h=10, x=x - 2, y=24 - 2, color=NOTIFICATION_COLOR)
    canvas.text(notif, x=x, y=24, font="M", color=WHITE)


def draw_game_over(canvas: Canvas, state: GameState, screen_w: int, screen_h: int) -> None:
    canvas.text("GAME OVER", x=screen_w // 2 - 32, y=screen_h // 2 - 4, font="L")
    if state.tick // 4 % 8 < 4:
        canvas.text(
            "PRESS START",
            x=screen_w // 2 - 24,
            y=screen_h // 2 - 4 + 16,
            font="M",
        )