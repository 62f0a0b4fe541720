from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LootOption(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    doc_id: Optional[str] = Field(default=None, alias="docId")
    rarity: Optional[int] = Field(default=None, alias="RARITY_CID")
    boon_type: str = Field(default="", alias="boonTypeString")
    upgrade_value_1: float = Field(default=0.0, alias="selectedVal1")
    upgrade_value_2: float = Field(default=0.0, alias="selectedVal2")

    @field_validator("boon_type", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("upgrade_value_1", "upgrade_value_2", mode="before")
    @classmethod
    def _none_to_zero(cls, value):
        return 0.0 if value is None else value

    @property
    def rarity_tier(self) -> int:
        """Rarity used for scoring; an unset or zero rarity counts as 1."""
        return self.rarity or 1

    @property
    def upgrade_total(self) -> float:
        return self.upgrade_value_1 + self.upgrade_value_2


@dataclass(frozen=True)
class LootSelection:
    best_option: LootOption
    best_index: int
    scores: list[float] = field(default_factory=list)
