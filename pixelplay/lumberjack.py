"""Rules of the lumberjack game: players spend energy to chop wood from a
shared tree, and energy refills over time."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

TIME_TO_REFILL_ENERGY = 60
MAX_ENERGY = 100
MAX_WOOD_PER_TREE = 100000

U64_MAX = 2**64 - 1
U16_MAX = 2**16 - 1


class GameErrorCode(enum.Enum):
    NOT_ENOUGH_ENERGY = "Not enough energy"
    WRONG_AUTHORITY = "Wrong Authority"


class GameError(Exception):
    """A game rule was broken."""

    def __init__(self, code: GameErrorCode) -> None:
        super().__init__(code.value)
        self.code = code


def _checked_add(a: int, b: int) -> int | None:
    total = a + b
    return total if total <= U64_MAX else None


@dataclass
class PlayerData:
    authority: str = ""
    name: str = ""
    level: int = 0
    xp: int = 0
    wood: int = 0
    energy: int = 0
    last_login: int = 0
    last_id: int = 0

    def describe(self) -> str:
        return f"Authority: {self.authority} Wood: {self.wood} Energy: {self.energy}"

    def update_energy(self, now: int) -> None:
        """Refill one energy per full refill period elapsed since last login."""
        time_passed = now - self.last_login
        time_spent = 0
        while time_passed >= TIME_TO_REFILL_ENERGY and self.energy < MAX_ENERGY:
            self.energy += 1
            time_passed -= TIME_TO_REFILL_ENERGY
            time_spent += TIME_TO_REFILL_ENERGY

        if self.energy >= MAX_ENERGY:
            self.last_login = now
        else:
            self.last_login += time_spent

    def chop_tree(self, amount: int) -> None:
        wood = _checked_add(self.wood, amount)
        if wood is None:
            logger.info("Total wood reached!")
        else:
            self.wood = wood
        self.energy = max(self.energy - amount, 0)


@dataclass
class GameData:
    total_wood_collected: int = 0

    def on_tree_chopped(self, amount_chopped: int) -> None:
        total = _checked_add(self.total_wood_collected, amount_chopped)
        if total is None:
            logger.info("The ever tree is completly chopped!")
        elif self.total_wood_collected >= MAX_WOOD_PER_TREE:
            self.total_wood_collected = 0
            logger.info("Tree successfully chopped. New Tree coming up.")
        else:
            self.total_wood_collected = total
            logger.info("Total wood chopped: %d", total)


def init_player(player: PlayerData, signer: str, now: int) -> PlayerData:
    """Give a player full energy and bind it to its signer."""
    player.energy = MAX_ENERGY
    player.last_login = now
    player.authority = signer
    return player


def chop_tree(
    player: PlayerData, game_data: GameData, counter: int, now: int, amount: int
) -> None:
    """Spend ``amount`` energy for ``amount`` wood, after refilling energy."""
    if not 0 <= counter <= U16_MAX:
        raise ValueError(f"counter out of range: {counter}")
    player.update_energy(now)
    logger.info(player.describe())

    if player.energy < amount:
        raise GameError(GameErrorCode.NOT_ENOUGH_ENERGY)

    player.last_id = counter
    player.chop_tree(amount)
    game_data.on_tree_chopped(amount)
    logger.info(
        "You chopped a tree and got 1 wood. You have %d wood and %d energy left.",
        player.wood,
        player.energy,
    )


def chop_one(player: PlayerData, game_data: GameData, counter: int, now: int) -> None:
    """Chop a single unit of wood."""
    chop_tree(player, game_data, counter, now, 1)