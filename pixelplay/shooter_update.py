"""Per-frame rules of the space shooter: input, spawning, combat and timers."""

from __future__ import annotations

import dataclasses
import math

from .controls import Canvas, Controls
from .shooter_entities import (
    SCREEN_H,
    SCREEN_W,
    DamageBoost,
    Drifting,
    Floating,
    Heal,
    MaxHealthUp,
    MoveDown,
    Powerup,
    Projectile,
    ProjectileOwner,
    ProjectileType,
    QuestObjective,
    Rand,
    RandomZigZag,
    ShootDown,
    SpecialAbility,
    SpeedBoost,
    Static,
    TargetPlayer,
    check_collision,
)
from .shooter_state import GameState, enemy_for_roll, spawn_rate, splash_fragments

MAX_ENEMIES = 24
MAX_HEALTH_CAP = 10
MAX_PROJECTILE_DAMAGE = 2
NOTIFICATION_FRAMES = 120 - 1
FATAL_HIT_FRAMES = 240
HIT_FRAMES = 10
BOSS_INTENSITY = 4.0


def _collides_with_player(state: GameState, x: float, y: float, w: int, h: int) -> bool:
    p = state.player
    return check_collision(x, y, w, h, p.x, p.y, p.width, p.height)


def _handle_input(state: GameState, controls: Controls) -> GameState:
    player = state.player
    pad = controls.gamepad(0)
    if player.health == 0:
        # A press of A restarts even while the hit timer is still running.
        if (state.hit_timer == 0 and pad.start.just_pressed()) or pad.a.just_pressed():
            return GameState.new()
        return state

    if pad.up.pressed():
        player.y = max(player.y - player.speed, 0.0)
    if pad.down.pressed():
        player.y = min(player.y + player.speed, float(SCREEN_H - player.height))
    if pad.left.pressed():
        player.x = max(player.x - player.speed, 0.0)
    if pad.right.pressed():
        player.x = min(player.x + player.speed, float(SCREEN_W - player.width))

    shooter = controls.gamepad(1)
    if shooter.start.just_pressed() or shooter.a.just_pressed():
        state.projectiles.append(
            Projectile(
                x=player.x + float(player.width // 2) - 2.0,
                y=player.y,
                width=8,
                height=8,
                velocity=5.0,
                angle=-90.0,
                damage=player.projectile_damage,
                projectile_type=player.projectile_type,
                projectile_owner=ProjectileOwner.PLAYER,
            )
        )
    return state


def _spawn_powerups(state: GameState, rand: Rand) -> None:
    if state.tick % (60 * 30) == 0:
        x = float(rand() % SCREEN_W)
        y = 24.0 + float(rand() % SCREEN_H // 2)
        state.powerups.append(
            Powerup(x=x, y=y, width=8, height=8, effect=Heal(), movement=Drifting(0.75))
        )
    if state.tick % (60 * 10) == 0 and state.player.health == 1:
        x = float(rand() % SCREEN_W)
        y = float(rand() % SCREEN_H)
        state.powerups.append(
            Powerup(x=x, y=y, width=8, height=8, effect=MaxHealthUp(), movement=Floating(0.5))
        )


def _spawn_enemies(state: GameState, canvas: Canvas, rand: Rand) -> None:
    if state.tick <= (len(state.notifications) + 1) * 240:
        return
    rate = spawn_rate(state.tick)
    if state.player.health > 0:
        canvas.text(f"spawn rate: {rate}", x=4, y=22, font="S")
    if state.tick % rate == 0 and len(state.enemies) < MAX_ENEMIES:
        state.enemies.append(enemy_for_roll(rand() % 8, rand))


def collect_powerups(state: GameState) -> None:
    """Apply and remove every powerup the player touches."""
    player = state.player
    remaining = []
    for powerup in state.powerups:
        if not _collides_with_player(state, powerup.x, powerup.y, powerup.width, powerup.height):
            remaining.append(powerup)
            continue
        effect = powerup.effect
        if isinstance(effect, Heal):
            player.health = min(player.health + 1, player.max_health)
            player.skill_points += 1
            state.notifications.append("+1 Health")
        elif isinstance(effect, MaxHealthUp):
            player.max_health = min(player.max_health + 1, MAX_HEALTH_CAP)
            player.health = player.max_health
            player.skill_points += 1
            state.notifications.append("Max Health +1")
        elif isinstance(effect, SpeedBoost):
            player.speed *= 1.1
            player.skill_points += 1
            state.notifications.append("1.1x Speed Boost")
        elif isinstance(effect, DamageBoost):
            if player.projectile_type is effect.projectile_type:
                state.notifications.append(f"+1 {effect.projectile_type.value} Damage")
                player.skill_points += 1
                player.projectile_damage = min(
                    player.projectile_damage + 1, MAX_PROJECTILE_DAMAGE
                )
    state.powerups = remaining


def _reward_kill(state: GameState, enemy, rand: Rand) -> None:
    player = state.player
    state.score += 1
    player.skill_points += enemy.points
    if rand() % 10 != 0:
        return
    state.powerups.append(
        Powerup(
            x=enemy.x, y=enemy.y, width=8, height=8,
            effect=SpeedBoost(), movement=Floating(0.1),
        )
    )
    if player.skill_points > 500:
        x = float(rand() % SCREEN_W)
        y = float(rand() % SCREEN_H)
        state.powerups.append(
            Powerup(
                x=x, y=y, width=8, height=8,
                effect=DamageBoost(ProjectileType.SPLATTER), movement=Floating(0.5),
            )
        )


def _hit_enemies(state: GameState, rand: Rand, splashes: list[Projectile]) -> None:
    kept = []
    for projectile in state.projectiles:
        if projectile.projectile_owner is not ProjectileOwner.PLAYER:
            kept.append(projectile)
            continue
        active = True
        survivors = []
        for enemy in state.enemies:
            if check_collision(
                projectile.x, projectile.y, projectile.width, projectile.height,
                enemy.x, enemy.y, enemy.width, enemy.height,
            ):
                enemy.health = max(enemy.health - projectile.damage, 0)
                active = False
                if enemy.health == 0:
                    _reward_kill(state, enemy, rand)
                if projectile.projectile_type is ProjectileType.SPLATTER:
                    splashes.extend(splash_fragments(projectile))
            if enemy.health > 0:
                survivors.append(enemy)
        state.enemies = survivors
        if active:
            kept.append(projectile)
    state.projectiles = kept


def _hit_boss(state: GameState, splashes: list[Projectile]) -> None:
    kept = []
    for projectile in state.projectiles:
        boss = state.boss
        if projectile.projectile_owner is not ProjectileOwner.PLAYER or boss is None:
            kept.append(projectile)
            continue
        foe = boss.enemy
        if not check_collision(
            projectile.x, projectile.y, projectile.width, projectile.height,
            foe.x, foe.y, foe.width, foe.height,
        ):
            kept.append(projectile)
            continue
        foe.health = max(foe.health - projectile.damage, 0)
        if foe.health == 0:
            state.score += 10
            state.boss = None
        if projectile.projectile_type is ProjectileType.SPLATTER:
            splashes.extend(splash_fragments(projectile))
    state.projectiles = kept


def _hit_player(state: GameState) -> None:
    player = state.player
    kept = []
    for projectile in state.projectiles:
        if projectile.projectile_owner is not ProjectileOwner.ENEMY or not _collides_with_player(
            state, projectile.x, projectile.y, projectile.width, projectile.height
        ):
            kept.append(projectile)
            continue
        previous = player.health
        player.health = max(player.health - projectile.damage, 0)
        fatal = previous > 0 and player.health == 0
        state.hit_timer = FATAL_HIT_FRAMES if fatal else HIT_FRAMES
    state.projectiles = kept


def move_projectiles(state: GameState, screen_w: int, screen_h: int) -> None:
    """Advance every projectile and drop the ones whose time ran out."""
    for projectile in state.projectiles:
        radians = math.radians(projectile.angle)
        projectile.x += projectile.velocity * math.cos(radians)
        projectile.y += projectile.velocity * math.sin(radians)
        if projectile.ttl is not None:
            projectile.ttl = max(projectile.ttl - 1, 0)

    # Out-of-bounds projectiles are kept along with the live ones.
    state.projectiles = [
        p
        for p in state.projectiles
        if p.ttl is None
        or p.ttl > 0
        or p.y < -float(p.height)
        or p.x < -float(p.width)
        or p.x > float(screen_w)
        or p.y > float(screen_h)
    ]


def _ram_player(state: GameState) -> None:
    player = state.player
    survivors = []
    for enemy in state.enemies:
        if _collides_with_player(state, enemy.x, enemy.y, enemy.width, enemy.height):
            player.health = max(player.health - 1, 0)
        if enemy.y < float(SCREEN_H):
            survivors.append(enemy)
    state.enemies = survivors


def _aim_at_player(state: GameState, x: float, y: float) -> float:
    return math.atan2(state.player.y - y, state.player.x - x) * 180.0 / math.pi


def move_enemies(state: GameState, rand: Rand) -> None:
    """Move each enemy by its strategy; shooters may fire."""
    for enemy in state.enemies:
        strategy = enemy.strategy
        if isinstance(strategy, (TargetPlayer, ShootDown)):
            enemy.y += enemy.speed
            if rand() % (250 // int(strategy.intensity)) == 0:
                if isinstance(strategy, TargetPlayer):
                    angle = _aim_at_player(state, enemy.x, enemy.y)
                else:
                    angle = 90.0
                size = strategy.size
                state.projectiles.append(
                    Projectile(
                        x=enemy.x + enemy.width * 0.5 - size * 0.5,
                        y=enemy.y + float(enemy.height),
                        width=size,
                        height=size,
                        velocity=strategy.speed,
                        angle=angle,
                        damage=1,
                        projectile_type=ProjectileType.LASER,
                        projectile_owner=ProjectileOwner.ENEMY,
                    )
                )
        elif isinstance(strategy, MoveDown):
            enemy.y += enemy.speed
        elif isinstance(strategy, RandomZigZag):
            enemy.x += enemy.speed * math.cos(enemy.angle)
            enemy.y += enemy.speed
            if enemy.x < 0.0 or enemy.x > float(SCREEN_W):
                enemy.angle = math.pi - enemy.angle
            elif rand() % 20 == 0:
                enemy.angle += math.pi / strategy.angle


def _boss_attack(state: GameState, rand: Rand) -> None:
    boss = state.boss
    if boss is None:
        return
    if rand() % (100 // int(BOSS_INTENSITY)) == 0:
        foe = boss.enemy
        state.projectiles.append(
            Projectile(
                x=foe.x,
                y=foe.y,
                width=4,
                height=4,
                velocity=BOSS_INTENSITY * 2.0,
                angle=_aim_at_player(state, foe.x, foe.y),
                damage=int(BOSS_INTENSITY),
                projectile_type=ProjectileType.LASER,
                projectile_owner=ProjectileOwner.ENEMY,
            )
        )


def move_powerups(state: GameState, screen_w: int, screen_h: int) -> None:
    """Float or drift powerups, bouncing them off the screen edges."""
    for powerup in state.powerups:
        movement = powerup.movement
        if isinstance(movement, Floating):
            powerup.y += movement.speed
            if powerup.y <= 0.0 or powerup.y >= float(screen_h):
                powerup.movement = Floating(-movement.speed)
        elif isinstance(movement, Drifting):
            powerup.x += movement.speed
            if powerup.x <= 0.0 or powerup.x >= float(screen_w):
                powerup.movement = Drifting(-movement.speed)
        elif isinstance(movement, Static):
            pass


def _complete(state: GameState, quest) -> None:
    quest.completed = True
    state.player.metrics.completed_quests.append(dataclasses.replace(quest))
    state.notifications.append(f"Quest completed: {quest.title}")


def check_quest(state: GameState) -> None:
    """Mark the current quest complete once its objective is met."""
    quest = state.current_quest
    if quest is None or quest.completed:
        return
    player = state.player
    metrics = player.metrics
    objective = quest.objective
    if objective is QuestObjective.DEFEAT_BOSS:
        boss = state.boss
        if boss is not None and boss.enemy.health == 0:
            metrics.bosses_defeated.append(boss.boss_type)
            state.unlockables.special_ability = SpecialAbility.SLOW
            _complete(state, quest)
    elif objective is QuestObjective.COLLECT_PROJECTILES:
        if metrics.num_projectiles_collected >= quest.target:
            _complete(state, quest)
    elif objective is QuestObjective.DEFEAT_ENEMIES:
        if metrics.num_enemies_defeated >= quest.target:
            _complete(state, quest)
    elif objective is QuestObjective.SKILL_POINTS:
        if player.skill_points >= quest.target:
            _complete(state, quest)


def _enable_skills(state: GameState) -> None:
    skills = state.player.skills
    if state.score > 100:
        skills.speed_boost = True
    if state.score > 200:
        skills.double_damage = True


def advance_notifications(state: GameState) -> None:
    """Retire the front notification once it has been shown long enough."""
    if not state.notifications:
        return
    state.notification_timer += 1
    if state.notification_timer >= NOTIFICATION_FRAMES:
        state.notification_timer = 0
        state.notifications.pop(0)


def update(state: GameState, controls: Controls, canvas: Canvas, rand: Rand) -> GameState:
    """Advance the game by one frame and return the state to keep."""
    state = _handle_input(state, controls)
    _spawn_powerups(state, rand)
    _spawn_enemies(state, canvas, rand)
    collect_powerups(state)

    splashes: list[Projectile] = []
    _hit_enemies(state, rand, splashes)
    _hit_boss(state, splashes)
    _hit_player(state)
    state.projectiles.extend(splashes)

    move_projectiles(state, SCREEN_W, SCREEN_H)
    _ram_player(state)
    move_enemies(state, rand)
    _boss_attack(state, rand)
    move_powerups(state, SCREEN_W, SCREEN_H)
    check_quest(state)
    _enable_skills(state)
    advance_notifications(state)

    state.hit_timer = max(state.hit_timer - 1, 0)
    state.tick += 1
    return state