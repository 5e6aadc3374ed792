"""Classic invaders: five rows of eleven marching down on a lone cannon."""

from __future__ import annotations

from dataclasses import dataclass, field

from .controls import Canvas, Controls

SCREEN_W = 224.0
SCREEN_H = 256.0
WHITE = 0xFFFFFFFF


@dataclass
class Invader:
    x: float
    y: float
    moving_right: bool
    sprites: tuple[str, str]


@dataclass
class Bullet:
    x: float
    y: float


def _sprites_for_row(row: int) -> tuple[str, str]:
    if row in (1, 2):
        return ("invader_b_0", "invader_b_1")
    if row in (3, 4):
        return ("invader_c_0", "invader_c_1")
    return ("invader_a_0", "invader_a_1")


@dataclass
class GameState:
    player_x: float = 128.0
    player_y: float = 218.0
    invaders: list[Invader] = field(default_factory=list)
    bullets: list[Bullet] = field(default_factory=list)
    invader_direction_change: bool = False
    score: int = 0
    game_over: bool = False
    tick: int = 0
    move_rate: int = 10

    @classmethod
    def new(cls) -> "GameState":
        invaders = [
            Invader(
                x=20.0 + col * 16.0,
                y=20.0 + row * 16.0,
                moving_right=True,
                sprites=_sprites_for_row(row),
            )
            for row in range(5)
            for col in range(11)
        ]
        return cls(invaders=invaders)


def _bullet_hits(bullet: Bullet, invader: Invader) -> bool:
    return (
        bullet.x < invader.x + 16.0
        and bullet.x + 2.0 > invader.x
        and bullet.y < invader.y + 8.0
        and bullet.y + 2.0 > invader.y
    )


def _march(state: GameState) -> bool:
    """Move every invader one step; report whether any reached an edge."""
    hit_edge = False
    for invader in state.invaders:
        invader.x += 2.0 if invader.moving_right else -2.0
        if invader.x + 16.0 >= SCREEN_W or invader.x < 0.0:
            hit_edge = True
        if invader.y >= state.player_y:
            state.game_over = True
            break
    return hit_edge


def _resolve_hits(state: GameState) -> None:
    surviving_bullets = []
    for bullet in state.bullets:
        hit = False
        survivors = []
        for invader in state.invaders:
            if _bullet_hits(bullet, invader):
                hit = True
                state.score += 1
            else:
                survivors.append(invader)
        state.invaders = survivors
        if not hit:
            surviving_bullets.append(bullet)
    state.bullets = surviving_bullets


def _update(state: GameState, controls: Controls) -> None:
    pad = controls.gamepad(0)
    if pad.left.pressed():
        state.player_x -= 2.0
    if pad.right.pressed():
        state.player_x += 2.0
    if pad.a.just_pressed() or pad.start.just_pressed():
        state.bullets.append(Bullet(x=state.player_x, y=state.player_y))

    for bullet in state.bullets:
        bullet.y -= 4.0
    state.bullets = [bullet for bullet in state.bullets if bullet.y > 0.0]

    hit_edge = _march(state) if state.tick % state.move_rate == 0 else False

    if state.tick % 600 == 0:
        state.move_rate = max(state.move_rate - 1, 1)

    if hit_edge:
        for invader in state.invaders:
            invader.y += 8.0
            invader.moving_right = not invader.moving_right

    _resolve_hits(state)


def step(state: GameState, controls: Controls, canvas: Canvas) -> GameState:
    """Run one frame and return the state for the next one."""
    won = not state.invaders
    lost = state.game_over

    if not lost and not won:
        _update(state, controls)
    else:
        pad = controls.gamepad(0)
        if pad.a.just_pressed() or pad.start.just_pressed():
            state = GameState.new()

    canvas.sprite("player", x=state.player_x - 8.0, y=state.player_y)
    frame = 0 if state.tick % 60 < 30 else 1
    for invader in state.invaders:
        canvas.sprite(invader.sprites[frame], x=invader.x, y=invader.y)
    for bullet in state.bullets:
        canvas.rect(x=bullet.x, y=bullet.y, w=2, h=2, color=WHITE)
    canvas.text(f"SCORE: {state.score:05}", x=10, y=10, font="L", color=WHITE)
    if won:
        canvas.text("YOU WIN!", x=80, y=80, font="L", color=WHITE)
    if lost:
        canvas.text("GAME OVER", x=76, y=80, font="L", color=WHITE)

    state.tick += 1
    return state