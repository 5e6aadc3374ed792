"""Game state of the space shooter and the rules that shape it at spawn time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .shooter_entities import (
    SCREEN_H,
    SCREEN_W,
    Boss,
    Enemy,
    Player,
    PlayerMetrics,
    Powerup,
    Projectile,
    ProjectileOwner,
    ProjectileType,
    Quest,
    Rand,
    Skills,
    Unlockables,
)

INITIAL_SPAWN_RATE = 100
MINIMUM_SPAWN_RATE = 25
SPEED_UP_RATE = 60 * 2
SPLASH_ANGLES = (45.0, 135.0, 225.0, 315.0)
SPLASH_TTL = 10

_HELP_MESSAGES = (
    "Use arrow keys to move",
    "Press A to shoot projectiles",
)

_INTRO_NOTIFICATIONS = (
    "Use arrow keys to move.",
    "Press SPACE or A to shoot.",
    "Defeat enemies and collect powerups.",
    "Try to not die. Good luck!",
)


def _new_player() -> Player:
    return Player(
        x=float(SCREEN_W // 2 - 8),
        y=float(SCREEN_H - 64),
        width=16,
        height=16,
        health=3,
        max_health=3,
        speed=2.0,
        color=0xFF00FFFF,
        projectile_type=ProjectileType.SPLATTER,
        projectile_damage=1,
        accessory=None,
        skill_points=0,
        skills=Skills(),
        metrics=PlayerMetrics(),
    )


def _first_quest() -> Quest:
    return Quest.defeat_boss(
        "Defeat the First Boss",
        "A quest to defeat the infamous first boss!",
    )


@dataclass
class GameState:
    """Everything the shooter keeps from one frame to the next."""

    tick: int = 0
    notification_timer: int = 0
    hit_timer: int = 0
    score: int = 0
    tutorial_active: bool = True
    help_messages: list[str] = field(default_factory=lambda: list(_HELP_MESSAGES))
    current_quest: Optional[Quest] = field(default_factory=_first_quest)
    notifications: list[str] = field(default_factory=lambda: list(_INTRO_NOTIFICATIONS))
    unlockables: Unlockables = field(default_factory=Unlockables)
    player: Player = field(default_factory=_new_player)
    boss: Optional[Boss] = None
    projectiles: list[Projectile] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)
    powerups: list[Powerup] = field(default_factory=list)

    @classmethod
    def new(cls) -> "GameState":
        """A fresh game at the start of the intro."""
        return cls()


def spawn_rate(tick: int) -> int:
    """Ticks between enemy spawns; shrinks as the game goes on."""
    return max(MINIMUM_SPAWN_RATE, max(INITIAL_SPAWN_RATE - tick // SPEED_UP_RATE, 0))


_ENEMY_KINDS = (
    Enemy.tank,
    Enemy.tank,
    Enemy.shooter,
    Enemy.shooter,
    Enemy.meteor,
    Enemy.zipper,
    Enemy.turret,
    Enemy.turret,
)


def enemy_for_roll(roll: int, rand: Rand) -> Enemy:
    """The enemy spawned for a roll in ``0..7``."""
    if not 0 <= roll < len(_ENEMY_KINDS):
        raise ValueError(f"enemy roll out of range: {roll}")
    return _ENEMY_KINDS[roll](rand)


def splash_fragments(projectile: Projectile) -> list[Projectile]:
    """Slower, weaker fragments a splatter shot breaks into on impact."""
    return [
        Projectile(
            x=projectile.x,
            y=projectile.y,
            width=projectile.width,
            height=projectile.height,
            velocity=projectile.velocity / 2.0,
            angle=angle,
            damage=projectile.damage // 2,
            projectile_type=ProjectileType.FRAGMENT,
            projectile_owner=ProjectileOwner.PLAYER,
            ttl=SPLASH_TTL,
        )
        for angle in SPLASH_ANGLES
    ]