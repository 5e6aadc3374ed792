"""Entities of the space shooter: player, enemies, projectiles, powerups and
the progression data around them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

SCREEN_W = 512
SCREEN_H = 512

_U32 = 2**32

Rand = Callable[[], int]


class ProjectileType(enum.Enum):
    BASIC = "Basic"
    SPLATTER = "Splatter"
    FRAGMENT = "Fragment"
    LASER = "Laser"
    BOMB = "Bomb"


class ProjectileOwner(enum.Enum):
    ENEMY = "Enemy"
    PLAYER = "Player"


@dataclass
class Projectile:
    x: float
    y: float
    width: int
    height: int
    velocity: float
    angle: float
    damage: int
    projectile_type: ProjectileType
    projectile_owner: ProjectileOwner
    ttl: Optional[int] = None


class BossType(enum.Enum):
    FIRST_BOSS = "FirstBoss"


@dataclass(frozen=True)
class TargetPlayer:
    """Moves down and fires at the player."""

    intensity: float
    speed: float
    size: int


@dataclass(frozen=True)
class ShootDown:
    """Moves down and fires straight down."""

    intensity: float
    speed: float
    size: int


@dataclass(frozen=True)
class MoveDown:
    """Moves down without attacking."""


@dataclass(frozen=True)
class RandomZigZag:
    """Zig-zags down, turning by pi / ``angle`` now and then."""

    angle: float


EnemyStrategy = Union[TargetPlayer, ShootDown, MoveDown, RandomZigZag]


def _spawn_x(rand: Rand, offset: int) -> float:
    # Unsigned arithmetic: a roll smaller than the offset wraps around.
    return float((rand() % SCREEN_W - offset) % _U32)


@dataclass
class Enemy:
    x: float
    y: float
    width: int
    height: int
    health: int
    speed: float
    angle: float
    points: int
    strategy: EnemyStrategy

    @classmethod
    def tank(cls, rand: Rand) -> "Enemy":
        return cls(
            x=_spawn_x(rand, 32), y=-32.0, width=32, height=32, health=5,
            speed=0.5, angle=0.0, points=50,
            strategy=TargetPlayer(1.0, 2.5, 16),
        )

    @classmethod
    def shooter(cls, rand: Rand) -> "Enemy":
        return cls(
            x=_spawn_x(rand, 16), y=-16.0, width=16, height=16, health=3,
            speed=1.0, angle=0.0, points=30,
            strategy=TargetPlayer(3.0, 2.0, 4),
        )

    @classmethod
    def turret(cls, rand: Rand) -> "Enemy":
        return cls(
            x=_spawn_x(rand, 16), y=-8.0, width=16, height=8, health=3,
            speed=1.5, angle=0.0, points=30,
            strategy=ShootDown(2.0, 2.5, 2),
        )

    @classmethod
    def zipper(cls, rand: Rand) -> "Enemy":
        return cls(
            x=_spawn_x(rand, 16), y=-16.0, width=16, height=16, health=2,
            speed=0.5, angle=0.0, points=20,
            strategy=RandomZigZag(1.0),
        )

    @classmethod
    def meteor(cls, rand: Rand) -> "Enemy":
        return cls(
            x=_spawn_x(rand, 8), y=-8.0, width=8, height=8, health=2,
            speed=3.0, angle=0.0, points=20,
            strategy=MoveDown(),
        )


@dataclass
class Boss:
    boss_type: BossType
    enemy: Enemy


class QuestObjective(enum.Enum):
    DEFEAT_BOSS = "DefeatBoss"
    DEFEAT_ENEMIES = "DefeatEnemies"
    COLLECT_PROJECTILES = "CollectProjectiles"
    SKILL_POINTS = "SkillPoints"


@dataclass
class Quest:
    title: str
    description: str
    objective: QuestObjective
    target: int = 0
    completed: bool = False

    @classmethod
    def defeat_boss(cls, title: str, description: str) -> "Quest":
        return cls(title=title, description=description, objective=QuestObjective.DEFEAT_BOSS)


class SpecialAbility(enum.Enum):
    CHAIN_DAMAGE = "ChainDamage"
    AUTOMATIC_WEAPONS = "AutomaticWeapons"
    ARMOR = "Armor"
    REGEN = "Regen"
    VAMPIRE = "Vampire"
    LUCKY = "Lucky"
    SLOW = "Slow"
    FREEZE = "Freeze"
    POISON = "Poison"


class DifficultyLevel(enum.Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


@dataclass
class Level:
    id: int
    name: str
    difficulty: DifficultyLevel


@dataclass
class Unlockables:
    special_ability: Optional[SpecialAbility] = None
    extra_levels: list[Level] = field(default_factory=list)
    cosmetic_items: list[str] = field(default_factory=list)


@dataclass
class Skills:
    speed_boost: bool = False
    double_damage: bool = False


@dataclass
class PlayerMetrics:
    longest_run_seconds: float = 0.0
    num_projectiles_collected: int = 0
    num_enemies_defeated: int = 0
    completed_quests: list[Quest] = field(default_factory=list)
    bosses_defeated: list[BossType] = field(default_factory=list)


@dataclass(frozen=True)
class Heal:
    """Restores one health."""


@dataclass(frozen=True)
class MaxHealthUp:
    """Raises maximum health and refills it."""


@dataclass(frozen=True)
class SpeedBoost:
    """Makes the player faster."""


@dataclass(frozen=True)
class DamageBoost:
    """Raises damage of the given projectile type."""

    projectile_type: ProjectileType


PowerupEffect = Union[Heal, MaxHealthUp, SpeedBoost, DamageBoost]


@dataclass(frozen=True)
class Static:
    """Does not move."""


@dataclass(frozen=True)
class Floating:
    """Moves vertically at ``speed``."""

    speed: float


@dataclass(frozen=True)
class Drifting:
    """Moves horizontally at ``speed``."""

    speed: float


PowerupMovement = Union[Static, Floating, Drifting]


@dataclass
class Powerup:
    x: float
    y: float
    width: int
    height: int
    effect: PowerupEffect
    movement: PowerupMovement


@dataclass
class Player:
    x: float
    y: float
    width: int
    height: int
    health: int
    max_health: int
    speed: float
    color: int
    projectile_type: ProjectileType
    projectile_damage: int
    accessory: Optional[str] = None
    skill_points: int = 0
    skills: Skills = field(default_factory=Skills)
    metrics: PlayerMetrics = field(default_factory=PlayerMetrics)


def check_collision(
    x1: float, y1: float, w1: int, h1: int, x2: float, y2: float, w2: int, h2: int
) -> bool:
    """Overlap test of two rectangles on whole-pixel positions."""
    x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
    return x1 < x2 + w2 and x1 + w1 > x2 and y1 < y2 + h2 and y1 + h1 > y2


def rand_with_seed(seed: int) -> int:
    """Deterministic pseudo-random value for ``seed``, below 2**31."""
    return ((seed * 1103515245 + 12345) % _U32) % 2147483648