"""Turns engine results into the text the dungeon agent reasons over."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from giga_tactics.mechanics.combat_sim import DEFAULT_TUNING, find_optimal_move
from giga_tactics.mechanics.loot_strategies import (
    LootStrategyName,
    explain_loot_choice,
    select_best_loot,
)
from giga_tactics.models.combat import BattleSnapshot, CombatTuning, OptimalMove
from giga_tactics.models.loot import LootOption


@dataclass(frozen=True)
class CombatDecision:
    move: str
    analysis: str
    reasoning: str
    result: OptimalMove


@dataclass(frozen=True)
class LootDecision:
    index: int
    explanation: str
    scores: list[float] = field(default_factory=list)


def _combat_reasoning(result: OptimalMove) -> str:
    evaluation = result.evaluation
    if evaluation.guarantees_victory:
        return "This move guarantees victory by dealing lethal damage in all scenarios."
    if evaluation is not result.all_evaluations[0]:
        return (
            f"{result.all_evaluations[0].label} has the highest raw EV, but playing it "
            "would spend its last charge, so we preserve charges for future flexibility."
        )
    if evaluation.would_exhaust_charges:
        return "Every alternative is worse, so we spend the last charge of this move."
    return "This move maximizes expected value while maintaining strategic reserves."


def format_combat_analysis(snapshot: BattleSnapshot, result: OptimalMove) -> str:
    player, enemy = snapshot.player, snapshot.enemy
    lines = [
        "Combat Analysis:",
        f"Current State - Player HP: {player.health.current}/{player.health.max}, "
        f"Shield: {player.shield.current}/{player.shield.max}",
        f"Enemy HP: {enemy.health.current}/{enemy.health.max}, "
        f"Shield: {enemy.shield.current}/{enemy.shield.max}",
        "",
        "Move Evaluations:",
    ]
    for evaluation in result.all_evaluations:
        line = f"- {evaluation.label}: EV={evaluation.expected_value:.2f}"
        if evaluation.would_exhaust_charges:
            line += " (Would deplete!)"
        if evaluation.guarantees_victory:
            line += " (Guarantees win!)"
        lines.append(line)
    lines.append("")
    lines.append(f"Optimal Move: {result.evaluation.label}")
    lines.append(f"Reasoning: {_combat_reasoning(result)}")
    return "\n".join(lines)


def generate_combat_decision(
    snapshot: BattleSnapshot,
    tuning: CombatTuning = DEFAULT_TUNING,
) -> CombatDecision:
    result = find_optimal_move(snapshot, tuning)
    return CombatDecision(
        move=result.best_move,
        analysis=format_combat_analysis(snapshot, result),
        reasoning=_combat_reasoning(result),
        result=result,
    )


def generate_loot_decision(
    options: Sequence[LootOption],
    snapshot: BattleSnapshot,
    strategy: LootStrategyName | str = LootStrategyName.BALANCED,
) -> LootDecision:
    selection = select_best_loot(options, snapshot, strategy)
    return LootDecision(
        index=selection.best_index,
        explanation=explain_loot_choice(selection.best_option, selection.scores, strategy),
        scores=selection.scores,
    )
