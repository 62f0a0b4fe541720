"""Rock/paper/scissor matchups and damage. Pure math, no I/O."""
from __future__ import annotations

import math

from giga_tactics.models.combat import MoveType

WIN_MULTIPLIER = 2.0
TIE_MULTIPLIER = 1.0
LOSE_MULTIPLIER = 0.5

# Each attack type and the type it beats.
BEATS: dict[MoveType, MoveType] = {
    MoveType.ROCK: MoveType.SCISSOR,
    MoveType.SCISSOR: MoveType.PAPER,
    MoveType.PAPER: MoveType.ROCK,
}


def matchup_multiplier(attacker: MoveType | str, defender: MoveType | str) -> float:
    """Damage multiplier for ``attacker`` hitting into ``defender``.

    2.0 when the attacker's type beats the defender's, 0.5 when it loses,
    1.0 on a tie. If either side defends no multiplier applies (1.0).
    """
    attacker = MoveType(attacker)
    defender = MoveType(defender)
    if attacker == MoveType.DEFEND or defender == MoveType.DEFEND:
        return TIE_MULTIPLIER
    if attacker == defender:
        return TIE_MULTIPLIER
    if BEATS[attacker] == defender:
        return WIN_MULTIPLIER
    return LOSE_MULTIPLIER


def damage_dealt(attack_power: int, attacker: MoveType | str, defender: MoveType | str) -> int:
    """Damage after the matchup multiplier, truncated toward zero. Defend deals none."""
    if MoveType(attacker) == MoveType.DEFEND:
        return 0
    return math.floor(attack_power * matchup_multiplier(attacker, defender))


def absorb(damage: int, shield: int, health: int) -> tuple[int, int]:
    """Apply damage to shield first, overflow to health. Returns (shield, health)."""
    if damage > shield:
        return 0, max(0, health - (damage - shield))
    return shield - damage, max(0, health)
