from __future__ import annotations

from giga_tactics.mechanics.combat_sim import evaluate_move, find_optimal_move, simulate_outcome
from giga_tactics.mechanics.loot_strategies import (
    LOOT_STRATEGIES,
    LootStrategyName,
    explain_loot_choice,
    select_best_loot,
)
from giga_tactics.mechanics.matchups import damage_dealt, matchup_multiplier

__all__ = [
    "LOOT_STRATEGIES",
    "LootStrategyName",
    "damage_dealt",
    "evaluate_move",
    "explain_loot_choice",
    "find_optimal_move",
    "matchup_multiplier",
    "select_best_loot",
    "simulate_outcome",
]
