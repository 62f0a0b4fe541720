"""Application bootstrap: wires config, engine and display together."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from giga_tactics.engine.decisions import (
    CombatDecision,
    LootDecision,
    generate_combat_decision,
    generate_loot_decision,
)
from giga_tactics.engine.snapshots import parse_battle_snapshot, parse_loot_options
from giga_tactics.mechanics.loot_strategies import LootStrategyName, get_strategy
from giga_tactics.models.combat import CombatTuning
from giga_tactics.models.loot import LootOption
from giga_tactics.utils import read_json

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


def _load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load config.toml; the project root copy unless a path is given."""
    import tomllib

    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    if path:
        logger.warning(f"Config file {config_path} not found, using defaults")
    return {}


class AdvisorApp:
    """Loads dungeon state files and renders move and loot recommendations."""

    def __init__(self, config_path: str | Path | None = None, config: dict[str, Any] | None = None):
        self.config = config if config is not None else _load_config(config_path)
        self._tuning: CombatTuning | None = None
        self._display = None

    @property
    def tuning(self) -> CombatTuning:
        if self._tuning is None:
            combat_cfg = self.config.get("combat", {})
            self._tuning = CombatTuning(**combat_cfg)
        return self._tuning

    @property
    def default_strategy(self) -> LootStrategyName:
        name = self.config.get("loot", {}).get("default_strategy", LootStrategyName.BALANCED.value)
        return get_strategy(name).name

    @property
    def display(self):
        if self._display is None:
            from giga_tactics.cli.display import AdvisorDisplay

            disp_cfg = self.config.get("display", {})
            self._display = AdvisorDisplay(show_outcomes=disp_cfg.get("show_outcomes", True))
        return self._display

    # -- Decisions --

    def advise_move(self, payload: Any) -> CombatDecision:
        snapshot = parse_battle_snapshot(payload)
        return generate_combat_decision(snapshot, self.tuning)

    def advise_loot(
        self,
        payload: Any,
        strategy: LootStrategyName | str | None = None,
    ) -> tuple[list[LootOption], LootDecision]:
        snapshot = parse_battle_snapshot(payload)
        options = parse_loot_options(payload)
        chosen = get_strategy(strategy or self.default_strategy).name
        logger.debug(f"Scoring {len(options)} loot options with {chosen.value}")
        return options, generate_loot_decision(options, snapshot, chosen)

    # -- CLI entry points --

    def show_move(self, state_path: str | Path) -> CombatDecision:
        decision = self.advise_move(read_json(state_path))
        self.display.show_move_decision(decision)
        return decision

    def show_loot(self, state_path: str | Path, strategy: str | None = None) -> LootDecision:
        options, decision = self.advise_loot(read_json(state_path), strategy)
        self.display.show_loot_decision(options, decision)
        return decision

    def show_strategies(self) -> None:
        self.display.show_strategies(self.default_strategy)
