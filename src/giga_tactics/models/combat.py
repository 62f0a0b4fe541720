from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Balance numbers from the live game; overridable through CombatTuning.
DEFEND_SHIELD_GAIN = 5
SHIELD_WEIGHT = 0.5


class MoveType(str, Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSOR = "scissor"
    DEFEND = "defend"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "scissors":
                return cls.SCISSOR
            for member in cls:
                if member.value == normalized:
                    return member
        return None


ATTACK_TYPES: tuple[MoveType, ...] = (MoveType.ROCK, MoveType.PAPER, MoveType.SCISSOR)


class CombatTuning(BaseModel):
    model_config = ConfigDict(frozen=True)

    defend_shield_gain: int = Field(default=DEFEND_SHIELD_GAIN, ge=0)
    shield_weight: float = Field(default=SHIELD_WEIGHT, ge=0)


class Gauge(BaseModel):
    """A current/max pair, used for both health and shield."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    current: int = Field(ge=0)
    max: int = Field(ge=0, alias="currentMax")


class AttackLine(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    attack_power: int = Field(ge=0, alias="currentATK")
    charges_remaining: int = Field(ge=0, alias="currentCharges")


class CombatMove(BaseModel):
    """A move one side can play this turn.

    Attack moves carry their damage and charge count; ``defend`` has no
    charge cap, so its ``charges_remaining`` is ``None``.
    """

    model_config = ConfigDict(frozen=True)

    move_type: MoveType
    damage: int = 0
    charges_remaining: Optional[int] = None

    @classmethod
    def defend(cls) -> CombatMove:
        return cls(move_type=MoveType.DEFEND)

    @property
    def is_defend(self) -> bool:
        return self.move_type == MoveType.DEFEND

    @property
    def is_playable(self) -> bool:
        return self.is_defend or (self.charges_remaining or 0) > 0

    @property
    def label(self) -> str:
        if self.is_defend:
            return "Defend"
        return f"Attack-{self.move_type.value.capitalize()}"


class CombatantSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    health: Gauge
    shield: Gauge
    rock: AttackLine
    paper: AttackLine
    scissor: AttackLine

    def attack_line(self, move_type: MoveType) -> AttackLine:
        if move_type == MoveType.DEFEND:
            raise ValueError("defend has no attack line")
        return getattr(self, move_type.value)

    def move_for(self, move_type: MoveType) -> CombatMove:
        if move_type == MoveType.DEFEND:
            return CombatMove.defend()
        line = self.attack_line(move_type)
        return CombatMove(
            move_type=move_type,
            damage=line.attack_power,
            charges_remaining=line.charges_remaining,
        )

    def available_moves(self) -> list[CombatMove]:
        """Attacks with charges left, in rock/paper/scissor order, then defend."""
        moves = [self.move_for(t) for t in ATTACK_TYPES]
        moves = [m for m in moves if m.is_playable]
        moves.append(CombatMove.defend())
        return moves


class BattleSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    player: CombatantSnapshot
    enemy: CombatantSnapshot


@dataclass(frozen=True)
class CombatOutcome:
    player_damage_dealt: int
    player_damage_taken: int
    player_shield_change: int
    enemy_shield_change: int
    player_health_after: int
    enemy_health_after: int
    player_shield_after: int = 0
    enemy_shield_after: int = 0


@dataclass(frozen=True)
class MoveEvaluation:
    move: CombatMove
    expected_value: float
    outcomes: dict[str, CombatOutcome] = field(default_factory=dict)
    would_exhaust_charges: bool = False
    guarantees_victory: bool = False

    @property
    def move_name(self) -> str:
        return self.move.move_type.value

    @property
    def label(self) -> str:
        return self.move.label


@dataclass(frozen=True)
class OptimalMove:
    best_move: str
    evaluation: MoveEvaluation
    all_evaluations: list[MoveEvaluation] = field(default_factory=list)
