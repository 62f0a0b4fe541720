"""Shared fixtures for the giga-tactics test suite."""
from __future__ import annotations

from typing import Any

import pytest

from giga_tactics.models.combat import BattleSnapshot
from giga_tactics.models.loot import LootOption


def _combatant(
    lines: dict[str, tuple[int, int]],
    health: tuple[int, int],
    shield: tuple[int, int],
) -> dict[str, Any]:
    side: dict[str, Any] = {
        "health": {"current": health[0], "max": health[1]},
        "shield": {"current": shield[0], "max": shield[1]},
    }
    for move in ("rock", "paper", "scissor"):
        power, charges = lines.get(move, (0, 0))
        side[move] = {"attack_power": power, "charges_remaining": charges}
    return side


def build_snapshot(
    player: dict[str, tuple[int, int]],
    enemy: dict[str, tuple[int, int]],
    player_health: tuple[int, int] = (10, 10),
    player_shield: tuple[int, int] = (0, 0),
    enemy_health: tuple[int, int] = (10, 10),
    enemy_shield: tuple[int, int] = (0, 0),
) -> BattleSnapshot:
    """Attack lines are given as {move: (attack_power, charges)}; omitted moves have none."""
    return BattleSnapshot.model_validate({
        "player": _combatant(player, player_health, player_shield),
        "enemy": _combatant(enemy, enemy_health, enemy_shield),
    })


@pytest.fixture
def make_snapshot():
    return build_snapshot


@pytest.fixture
def example_snapshot() -> BattleSnapshot:
    # Paper is out of charges; the enemy can only throw rock or defend.
    return build_snapshot(
        player={"rock": (5, 2), "paper": (5, 0), "scissor": (5, 2)},
        enemy={"rock": (5, 1)},
    )


def _api_player(lines: dict[str, tuple[int, int]], health: int, max_health: int) -> dict[str, Any]:
    player: dict[str, Any] = {
        "id": "0xabc",
        "health": {"current": health, "starting": max_health, "currentMax": max_health, "startingMax": max_health},
        "shield": {"current": 0, "starting": 0, "currentMax": 4, "startingMax": 4},
        "equipment": [],
        "lastMove": "",
        "thisPlayerWin": False,
        "otherPlayerWin": False,
    }
    for move in ("rock", "paper", "scissor"):
        power, charges = lines.get(move, (0, 0))
        player[move] = {
            "startingATK": power,
            "startingDEF": 0,
            "currentATK": power,
            "currentDEF": 0,
            "currentCharges": charges,
            "maxCharges": 3,
        }
    return player


@pytest.fixture
def dungeon_state() -> dict[str, Any]:
    """A dungeon state in the remote API's field naming."""
    return {
        "currentDungeon": 1,
        "currentRoom": 3,
        "currentEnemy": 7,
        "player": _api_player({"rock": (5, 2), "paper": (5, 0), "scissor": (5, 2)}, 10, 10),
        "enemy": _api_player({"rock": (5, 1)}, 10, 10),
        "lootPhase": True,
        "lootOptions": [
            {"docId": "a", "RARITY_CID": 1, "selectedVal1": 2, "selectedVal2": 0, "boonTypeString": "UpgradeRock"},
            {"docId": "b", "RARITY_CID": 2, "selectedVal1": 4, "selectedVal2": 6, "boonTypeString": "AddMaxHealth"},
            {"docId": "c", "RARITY_CID": 2, "selectedVal1": 4, "selectedVal2": 6, "boonTypeString": "atk_boost"},
        ],
        "lastBattleResult": None,
    }


@pytest.fixture
def dungeon_response(dungeon_state) -> dict[str, Any]:
    """The raw API response wrapping the same run."""
    return {
        "success": True,
        "data": {
            "run": {
                "_id": "run1",
                "players": [dungeon_state["player"], dungeon_state["enemy"]],
                "lootPhase": True,
                "lootOptions": dungeon_state["lootOptions"],
            },
            "entity": {"ROOM_NUM_CID": 3, "DUNGEON_ID_CID": 1, "ENEMY_CID": 7},
        },
    }


@pytest.fixture
def attack_and_defense_loot() -> list[LootOption]:
    return [
        LootOption(boon_type="atk_boost", rarity=2, upgrade_value_1=4, upgrade_value_2=6),
        LootOption(boon_type="def_boost", rarity=2, upgrade_value_1=4, upgrade_value_2=6),
    ]
