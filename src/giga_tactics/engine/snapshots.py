"""Normalizes dungeon state payloads into battle and loot snapshots."""
from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from giga_tactics.models.combat import BattleSnapshot
from giga_tactics.models.loot import LootOption

logger = logging.getLogger(__name__)


class InvalidSnapshotError(ValueError):
    """A battle or loot payload is missing fields the decision engine needs."""


def _unwrap_run(payload: dict[str, Any]) -> dict[str, Any] | None:
    """Return the ``run`` object of a raw dungeon response, if the payload is one."""
    data = payload.get("data", payload)
    if isinstance(data, dict) and isinstance(data.get("run"), dict):
        return data["run"]
    return None


def parse_battle_snapshot(payload: Any) -> BattleSnapshot:
    """Build a BattleSnapshot from a dungeon state or a raw dungeon response.

    Accepts ``{"player": ..., "enemy": ...}`` as well as the API wrapper
    ``{"data": {"run": {"players": [player, enemy]}}}``, where the first
    player is always the user.
    """
    if isinstance(payload, BattleSnapshot):
        return payload
    if not isinstance(payload, dict):
        raise InvalidSnapshotError(f"Expected a mapping, got {type(payload).__name__}")

    run = _unwrap_run(payload)
    if run is not None:
        players = run.get("players") or []
        if not isinstance(players, list):
            raise InvalidSnapshotError(
                f"Expected a list of players, got {type(players).__name__}"
            )
        if len(players) < 2:
            raise InvalidSnapshotError(
                f"Dungeon run has {len(players)} players, expected player and enemy"
            )
        payload = {"player": players[0], "enemy": players[1]}

    try:
        return BattleSnapshot.model_validate(payload)
    except ValidationError as exc:
        raise InvalidSnapshotError(f"Malformed battle snapshot: {exc}") from exc


def parse_loot_options(payload: Any) -> list[LootOption]:
    """Read loot offers from a list, a dungeon state, or a raw dungeon response."""
    if isinstance(payload, dict):
        run = _unwrap_run(payload)
        source = run if run is not None else payload
        raw = source.get("lootOptions", source.get("loot_options"))
        if raw is None:
            raise InvalidSnapshotError("No lootOptions in payload")
    else:
        raw = payload

    if not isinstance(raw, list):
        raise InvalidSnapshotError(f"Expected a list of loot options, got {type(raw).__name__}")

    try:
        options = [o if isinstance(o, LootOption) else LootOption.model_validate(o) for o in raw]
    except ValidationError as exc:
        raise InvalidSnapshotError(f"Malformed loot option: {exc}") from exc

    logger.debug(f"Parsed {len(options)} loot options")
    return options
