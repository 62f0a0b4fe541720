"""Expected-value combat evaluator. Pure functions, no I/O.

Every candidate player move is simulated against every move the enemy can
currently make, each enemy response weighted equally.
"""
from __future__ import annotations

import logging

from giga_tactics.mechanics.matchups import absorb, damage_dealt
from giga_tactics.models.combat import (
    BattleSnapshot,
    CombatMove,
    CombatOutcome,
    CombatTuning,
    MoveEvaluation,
    OptimalMove,
)

logger = logging.getLogger(__name__)

DEFAULT_TUNING = CombatTuning()


def simulate_outcome(
    player_move: CombatMove,
    enemy_move: CombatMove,
    player_health: int,
    player_shield: int,
    enemy_health: int,
    enemy_shield: int,
    tuning: CombatTuning = DEFAULT_TUNING,
) -> CombatOutcome:
    """Resolve one simultaneous exchange from the pre-turn health and shield."""
    player_shield_change = tuning.defend_shield_gain if player_move.is_defend else 0
    enemy_shield_change = tuning.defend_shield_gain if enemy_move.is_defend else 0

    dealt = damage_dealt(player_move.damage, player_move.move_type, enemy_move.move_type)
    taken = damage_dealt(enemy_move.damage, enemy_move.move_type, player_move.move_type)

    enemy_shield_after, enemy_health_after = absorb(
        dealt, enemy_shield + enemy_shield_change, enemy_health
    )
    player_shield_after, player_health_after = absorb(
        taken, player_shield + player_shield_change, player_health
    )

    return CombatOutcome(
        player_damage_dealt=dealt,
        player_damage_taken=taken,
        player_shield_change=player_shield_change,
        enemy_shield_change=enemy_shield_change,
        player_health_after=player_health_after,
        enemy_health_after=enemy_health_after,
        player_shield_after=player_shield_after,
        enemy_shield_after=enemy_shield_after,
    )


def net_value(outcome: CombatOutcome, tuning: CombatTuning = DEFAULT_TUNING) -> float:
    """Damage swing plus the shield differential at ``tuning.shield_weight``."""
    shield_swing = outcome.player_shield_change - outcome.enemy_shield_change
    return (
        outcome.player_damage_dealt
        - outcome.player_damage_taken
        + tuning.shield_weight * shield_swing
    )


def evaluate_move(
    player_move: CombatMove,
    snapshot: BattleSnapshot,
    tuning: CombatTuning = DEFAULT_TUNING,
) -> MoveEvaluation:
    """Score one player move against every move the enemy can currently make."""
    if not player_move.is_playable:
        raise ValueError(f"{player_move.label} has no charges remaining")

    player, enemy = snapshot.player, snapshot.enemy
    enemy_moves = enemy.available_moves()

    outcomes: dict[str, CombatOutcome] = {}
    total = 0.0
    guarantees_victory = True
    for enemy_move in enemy_moves:
        outcome = simulate_outcome(
            player_move,
            enemy_move,
            player.health.current,
            player.shield.current,
            enemy.health.current,
            enemy.shield.current,
            tuning,
        )
        outcomes[enemy_move.move_type.value] = outcome
        total += net_value(outcome, tuning)
        if outcome.enemy_health_after > 0:
            guarantees_victory = False

    would_exhaust = not player_move.is_defend and player_move.charges_remaining == 1

    return MoveEvaluation(
        move=player_move,
        expected_value=total / len(enemy_moves),
        outcomes=outcomes,
        would_exhaust_charges=would_exhaust,
        guarantees_victory=guarantees_victory,
    )


def find_optimal_move(
    snapshot: BattleSnapshot,
    tuning: CombatTuning = DEFAULT_TUNING,
) -> OptimalMove:
    """Pick the highest-EV move, avoiding a last charge unless it wins outright.

    Equal EVs keep candidate order (rock, paper, scissor, defend).
    """
    candidates = snapshot.player.available_moves()
    if not candidates:
        raise ValueError("No playable moves in snapshot")

    evaluations = [evaluate_move(move, snapshot, tuning) for move in candidates]
    evaluations.sort(key=lambda e: e.expected_value, reverse=True)

    best = evaluations[0]
    if best.would_exhaust_charges and not best.guarantees_victory:
        for evaluation in evaluations:
            if not evaluation.would_exhaust_charges or evaluation.guarantees_victory:
                if evaluation is not best:
                    logger.debug(
                        f"Conserving last {best.move_name} charge, "
                        f"falling back to {evaluation.move_name}"
                    )
                best = evaluation
                break

    logger.debug(
        f"Optimal move {best.move_name} (EV {best.expected_value:.2f}) "
        f"out of {len(evaluations)} candidates"
    )
    return OptimalMove(
        best_move=best.move_name,
        evaluation=best,
        all_evaluations=evaluations,
    )
