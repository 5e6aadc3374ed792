"""Two-player tank duel on a small arena with mirrored walls."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from .controls import Canvas, Controls, Gamepad

SCREEN_W = 256.0
SCREEN_H = 144.0
BLOCK_COLOR = 0x777777FF
BACKGROUND_COLOR = 0x222222FF


class Winner(enum.Enum):
    P1 = "P1"
    P2 = "P2"
    DRAW = "Draw"


@dataclass
class Rect:
    x: float
    y: float
    width: int
    height: int

    def intersects(self, other: "Rect") -> bool:
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass
class Missile:
    x: float
    y: float
    vel: float
    rot: float

    def hitbox(self) -> Rect:
        return Rect(x=self.x - 3.0, y=self.y - 3.0, width=6, height=6)


@dataclass
class Tank:
    color: int
    x: float
    y: float
    vel: float = 0.0
    rot: float = 0.0
    missiles: list[Missile] = field(default_factory=list)

    def hitbox(self) -> Rect:
        return Rect(x=self.x - 8.0, y=self.y - 8.0, width=16, height=16)


@dataclass
class Block:
    x: float
    y: float
    width: int
    height: int

    def hitbox(self) -> Rect:
        return Rect(x=self.x, y=self.y, width=self.width, height=self.height)


_BLOCK_LAYOUT = [
    (32.0, 0.0, 16, 16),
    (128.0, 0.0, 8, 32),
    (72.0, 40.0, 16, 64),
    (128.0, 112.0, 8, 32),
    (32.0, 128.0, 16, 16),
]


@dataclass
class GameState:
    tanks: list[Tank]
    blocks: list[Block]
    winner: Winner | None = None

    @classmethod
    def new(cls) -> "GameState":
        return cls(
            tanks=[
                Tank(color=0xFFFF00FF, x=32.0, y=SCREEN_H / 2),
                Tank(color=0xFF00FFFF, x=SCREEN_W - 32.0, y=SCREEN_H / 2, rot=math.pi),
            ],
            blocks=create_mirrored_blocks(_BLOCK_LAYOUT),
        )


def create_mirrored_blocks(positions) -> list[Block]:
    """Each block followed by its mirror image across the arena's centre."""
    blocks: list[Block] = []
    for x, y, width, height in positions:
        blocks.append(Block(x, y, width, height))
        blocks.append(Block(SCREEN_W - x - width, y, width, height))
    return blocks


def did_hit_missile(tank: Tank, missiles) -> bool:
    tank_box = tank.hitbox()
    return any(tank_box.intersects(missile.hitbox()) for missile in missiles)


def _missile_survives(missile: Missile, blocks) -> bool:
    box = missile.hitbox()
    if any(box.intersects(block.hitbox()) for block in blocks):
        return False
    missile.x += missile.vel * math.cos(missile.rot)
    missile.y += missile.vel * math.sin(missile.rot)
    return 0.0 <= missile.x <= SCREEN_W and 0.0 <= missile.y <= SCREEN_H


def update_tank(gamepad: Gamepad, tank: Tank, blocks) -> None:
    """Apply one frame of input, movement and missile flight to a tank."""
    if gamepad.up.pressed():
        tank.vel += 0.02
    if gamepad.down.pressed():
        tank.vel -= 0.01

    dx = tank.vel * math.cos(tank.rot)
    dy = tank.vel * math.sin(tank.rot)
    tank.x += dx
    tank.y += dy
    tank_box = tank.hitbox()
    if any(tank_box.intersects(block.hitbox()) for block in blocks):
        tank.x -= dx
        tank.y -= dy

    tank.vel *= 0.97

    if gamepad.left.pressed():
        tank.rot -= 0.05
    if gamepad.right.pressed():
        tank.rot += 0.05

    tank.missiles = [m for m in tank.missiles if _missile_survives(m, blocks)]

    if gamepad.a.just_pressed():
        tank.missiles.append(Missile(x=tank.x, y=tank.y, vel=5.0, rot=tank.rot))


def draw_tank(canvas: Canvas, tank: Tank) -> None:
    for missile in tank.missiles:
        canvas.rect(x=missile.x - 3.0, y=missile.y - 3.0, w=6, h=6, color=tank.color)

    tank_x = int(tank.x)
    tank_y = int(tank.y)
    canvas.circ(x=tank_x - 8, y=tank_y - 8, d=16, color=tank.color)

    for length in range(8, 16):
        end_x = tank_x + length * math.cos(tank.rot)
        end_y = tank_y + length * math.sin(tank.rot)
        canvas.rect(x=end_x - 2.0, y=end_y - 2.0, w=4, h=4, color=tank.color)


def draw_blocks(canvas: Canvas, blocks) -> None:
    for block in blocks:
        canvas.rect(x=block.x, y=block.y, w=block.width, h=block.height, color=BLOCK_COLOR)


def step(state: GameState, controls: Controls, canvas: Canvas) -> GameState:
    """Run one frame and return the state for the next one."""
    tank1, tank2 = state.tanks[0], state.tanks[1]

    canvas.rect(w=256, h=144, color=BACKGROUND_COLOR)
    draw_blocks(canvas, state.blocks)
    draw_tank(canvas, tank1)
    draw_tank(canvas, tank2)

    if state.winner is not None:
        canvas.text(f"WINNER {state.winner.value}", font="L")
        return state

    update_tank(controls.gamepad(0), tank1, state.blocks)
    update_tank(controls.gamepad(1), tank2, state.blocks)
    tank1_hit = did_hit_missile(tank1, tank2.missiles)
    tank2_hit = did_hit_missile(tank2, tank1.missiles)
    if tank1_hit and tank2_hit:
        state.winner = Winner.DRAW
    elif tank1_hit:
        state.winner = Winner.P2
    elif tank2_hit:
        state.winner = Winner.P1
    else:
        state.winner = None
    return state