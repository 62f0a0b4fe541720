"""Tests for giga_tactics.engine.snapshots."""
from __future__ import annotations

import copy

import pytest

from giga_tactics.engine.snapshots import (
    InvalidSnapshotError,
    parse_battle_snapshot,
    parse_loot_options,
)
from giga_tactics.models.combat import MoveType


class TestParseBattleSnapshot:
    def test_api_field_names(self, dungeon_state):
        snapshot = parse_battle_snapshot(dungeon_state)
        assert snapshot.player.rock.attack_power == 5
        assert snapshot.player.paper.charges_remaining == 0
        assert snapshot.player.health.max == 10
        assert snapshot.player.shield.max == 4
        assert snapshot.enemy.rock.charges_remaining == 1

    def test_raw_response_wrapper(self, dungeon_response, dungeon_state):
        assert parse_battle_snapshot(dungeon_response) == parse_battle_snapshot(dungeon_state)

    def test_normalized_field_names(self, example_snapshot):
        assert parse_battle_snapshot(example_snapshot.model_dump()) == example_snapshot

    def test_snapshot_passthrough(self, example_snapshot):
        assert parse_battle_snapshot(example_snapshot) is example_snapshot

    def test_missing_health(self, dungeon_state):
        del dungeon_state["player"]["health"]
        with pytest.raises(InvalidSnapshotError, match="Malformed battle snapshot"):
            parse_battle_snapshot(dungeon_state)

    def test_missing_health_max(self, dungeon_state):
        dungeon_state["player"]["health"] = {"current": 2}
        with pytest.raises(InvalidSnapshotError, match="Malformed battle snapshot"):
            parse_battle_snapshot(dungeon_state)

    def test_missing_shield_max(self, dungeon_state):
        dungeon_state["enemy"]["shield"] = {"current": 0}
        with pytest.raises(InvalidSnapshotError):
            parse_battle_snapshot(dungeon_state)

    def test_players_not_a_list(self, dungeon_response):
        run = dungeon_response["data"]["run"]
        run["players"] = {"a": run["players"][0], "b": run["players"][1]}
        with pytest.raises(InvalidSnapshotError, match="players"):
            parse_battle_snapshot(dungeon_response)

    def test_missing_enemy(self, dungeon_state):
        del dungeon_state["enemy"]
        with pytest.raises(ValueError):
            parse_battle_snapshot(dungeon_state)

    def test_negative_charges(self, dungeon_state):
        dungeon_state["player"]["rock"]["currentCharges"] = -1
        with pytest.raises(InvalidSnapshotError):
            parse_battle_snapshot(dungeon_state)

    def test_run_without_enemy(self, dungeon_response):
        dungeon_response["data"]["run"]["players"] = dungeon_response["data"]["run"]["players"][:1]
        with pytest.raises(InvalidSnapshotError, match="expected player and enemy"):
            parse_battle_snapshot(dungeon_response)

    def test_not_a_mapping(self):
        with pytest.raises(InvalidSnapshotError):
            parse_battle_snapshot([1, 2, 3])

    def test_payload_not_modified(self, dungeon_state):
        before = copy.deepcopy(dungeon_state)
        parse_battle_snapshot(dungeon_state)
        assert dungeon_state == before

    def test_available_moves(self, dungeon_state):
        snapshot = parse_battle_snapshot(dungeon_state)
        assert [m.move_type for m in snapshot.player.available_moves()] == [
            MoveType.ROCK, MoveType.SCISSOR, MoveType.DEFEND,
        ]
        assert [m.move_type for m in snapshot.enemy.available_moves()] == [
            MoveType.ROCK, MoveType.DEFEND,
        ]


class TestParseLootOptions:
    def test_from_dungeon_state(self, dungeon_state):
        options = parse_loot_options(dungeon_state)
        assert [o.doc_id for o in options] == ["a", "b", "c"]
        assert options[1].rarity == 2
        assert options[1].boon_type == "AddMaxHealth"
        assert options[1].upgrade_total == 10

    def test_from_response(self, dungeon_response):
        assert len(parse_loot_options(dungeon_response)) == 3

    def test_from_list(self, dungeon_state):
        assert len(parse_loot_options(dungeon_state["lootOptions"])) == 3

    def test_null_fields(self):
        [option] = parse_loot_options([{"RARITY_CID": None, "boonTypeString": None, "selectedVal1": None}])
        assert option.boon_type == ""
        assert option.rarity_tier == 1
        assert option.upgrade_total == 0

    def test_missing_loot(self, dungeon_state):
        del dungeon_state["lootOptions"]
        with pytest.raises(InvalidSnapshotError, match="No lootOptions"):
            parse_loot_options(dungeon_state)

    def test_wrong_type(self):
        with pytest.raises(InvalidSnapshotError):
            parse_loot_options({"lootOptions": "none"})

    def test_malformed_option(self):
        with pytest.raises(InvalidSnapshotError, match="Malformed loot option"):
            parse_loot_options([{"RARITY_CID": "legendary"}])
