"""Loot scoring strategies. Pure functions, no I/O.

Each strategy maps the full option list plus the current battle snapshot to
a parallel list of scores, higher is better. The strategy set is closed.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from giga_tactics.models.combat import ATTACK_TYPES, BattleSnapshot, MoveType
from giga_tactics.models.loot import LootOption, LootSelection

logger = logging.getLogger(__name__)

BASE_UPGRADE_WEIGHT = 0.1
AGGRESSIVE_UPGRADE_WEIGHT = 0.2
KEYWORD_BONUS = 2.0
LOW_HEALTH_RATIO = 0.5
LOW_HEALTH_HEAL_BONUS = 1.5
FOCUS_BONUS = 2.5
UNFOCUSED_PENALTY = 0.3

ATTACK_KEYWORDS = ("atk", "attack", "damage")
DEFENSE_KEYWORDS = ("def", "shield", "heal", "health")
HEAL_KEYWORD = "heal"


class LootStrategyName(str, Enum):
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"
    DEFENSIVE = "defensive"
    FOCUSED = "focused"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.replace(" ", "").replace("_", "").replace("-", "").lower()
            return _STRATEGY_ALIASES.get(key)
        return None


# Names used by the dungeon agent's mission settings.
_STRATEGY_ALIASES: dict[str, LootStrategyName] = {
    "balanced": LootStrategyName.BALANCED,
    "aggressive": LootStrategyName.AGGRESSIVE,
    "glasscanon": LootStrategyName.AGGRESSIVE,
    "glasscannon": LootStrategyName.AGGRESSIVE,
    "defensive": LootStrategyName.DEFENSIVE,
    "tank": LootStrategyName.DEFENSIVE,
    "focused": LootStrategyName.FOCUSED,
    "twomovespecialist": LootStrategyName.FOCUSED,
}

ScoreFn = Callable[[Sequence[LootOption], BattleSnapshot], list[float]]


@dataclass(frozen=True)
class LootStrategy:
    name: LootStrategyName
    title: str
    description: str
    score: ScoreFn


def _matches_any(text: str, keywords: Sequence[str]) -> bool:
    lowered = text.lower()
    return any(k in lowered for k in keywords)


def base_score(option: LootOption) -> float:
    """Rarity tier plus a small bonus for the upgrade values."""
    return option.rarity_tier + BASE_UPGRADE_WEIGHT * option.upgrade_total


def score_balanced(options: Sequence[LootOption], snapshot: BattleSnapshot) -> list[float]:
    return [base_score(o) for o in options]


def score_aggressive(options: Sequence[LootOption], snapshot: BattleSnapshot) -> list[float]:
    scores = []
    for option in options:
        if _matches_any(option.boon_type, ATTACK_KEYWORDS):
            score = KEYWORD_BONUS * option.rarity_tier
            score += AGGRESSIVE_UPGRADE_WEIGHT * option.upgrade_total
        else:
            score = base_score(option)
        scores.append(score)
    return scores


def score_defensive(options: Sequence[LootOption], snapshot: BattleSnapshot) -> list[float]:
    health = snapshot.player.health
    low_health = health.current < health.max * LOW_HEALTH_RATIO

    scores = []
    for option in options:
        score = base_score(option)
        if _matches_any(option.boon_type, DEFENSE_KEYWORDS):
            score *= KEYWORD_BONUS
        if low_health and HEAL_KEYWORD in option.boon_type.lower():
            score *= LOW_HEALTH_HEAL_BONUS
        scores.append(score)
    return scores


def focus_types(snapshot: BattleSnapshot) -> tuple[list[MoveType], MoveType]:
    """The two strongest attack types by power x charges, and the odd one out.

    Ties keep rock/paper/scissor order.
    """
    player = snapshot.player

    def total_power(move_type: MoveType) -> int:
        line = player.attack_line(move_type)
        return line.attack_power * line.charges_remaining

    ranked = sorted(ATTACK_TYPES, key=total_power, reverse=True)
    return ranked[:2], ranked[2]


def score_focused(options: Sequence[LootOption], snapshot: BattleSnapshot) -> list[float]:
    focused, unfocused = focus_types(snapshot)

    scores = []
    for option in options:
        score = base_score(option)
        boon = option.boon_type.lower()
        if any(t.value in boon for t in focused):
            score *= FOCUS_BONUS
        elif unfocused.value in boon:
            score *= UNFOCUSED_PENALTY
        scores.append(score)
    return scores


LOOT_STRATEGIES: dict[LootStrategyName, LootStrategy] = {
    LootStrategyName.BALANCED: LootStrategy(
        name=LootStrategyName.BALANCED,
        title="Balanced",
        description="Prioritize highest tier upgrades regardless of type",
        score=score_balanced,
    ),
    LootStrategyName.AGGRESSIVE: LootStrategy(
        name=LootStrategyName.AGGRESSIVE,
        title="Glass Cannon",
        description="Prioritize attack upgrades over defense",
        score=score_aggressive,
    ),
    LootStrategyName.DEFENSIVE: LootStrategy(
        name=LootStrategyName.DEFENSIVE,
        title="Tank",
        description="Prioritize defense and healing",
        score=score_defensive,
    ),
    LootStrategyName.FOCUSED: LootStrategy(
        name=LootStrategyName.FOCUSED,
        title="Two Move Specialist",
        description="Focus upgrades on only two attack types",
        score=score_focused,
    ),
}


def get_strategy(name: LootStrategyName | str) -> LootStrategy:
    """Look up a built-in strategy. Unknown names raise ValueError."""
    try:
        key = LootStrategyName(name)
    except ValueError as exc:
        raise ValueError(f"Unknown loot strategy '{name}'") from exc
    return LOOT_STRATEGIES[key]


def select_best_loot(
    options: Sequence[LootOption],
    snapshot: BattleSnapshot,
    strategy: LootStrategyName | str = LootStrategyName.BALANCED,
) -> LootSelection:
    """Score every option and pick the best; the first index wins exact ties."""
    if not options:
        raise ValueError("No loot options to choose from")

    chosen = get_strategy(strategy)
    scores = chosen.score(options, snapshot)

    best_index = 0
    for i in range(1, len(scores)):
        if scores[i] > scores[best_index]:
            best_index = i

    logger.debug(f"{chosen.title} picked option {best_index} with scores {scores}")
    return LootSelection(
        best_option=options[best_index],
        best_index=best_index,
        scores=scores,
    )


def _fmt(value: float | int | None) -> str:
    if value is None:
        return "n/a"
    return f"{value:g}"


def explain_loot_choice(
    option: LootOption,
    scores: Sequence[float],
    strategy: LootStrategyName | str,
) -> str:
    """Short audit text for a loot pick."""
    chosen = get_strategy(strategy)
    lines = [
        f"Using {chosen.title} strategy: {chosen.description}",
        f"Selected: {option.boon_type or 'unknown'} (Rarity: {_fmt(option.rarity)})",
        f"Values: {_fmt(option.upgrade_value_1)}, {_fmt(option.upgrade_value_2)}",
    ]
    if scores:
        lines.append(f"Best score: {max(scores):.2f}")
    return "\n".join(lines)
