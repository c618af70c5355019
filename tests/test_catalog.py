"""Unit tests for wikidex.catalog – record parsing and JSON loading."""
import json

import pytest
from wikidex.catalog import (
    BaseStats,
    CreatureRecord,
    MoveRecord,
    load_creatures,
    load_moves,
)


class TestCreatureRecord:
    def test_from_dict(self, creature_rows):
        c = CreatureRecord.from_dict(creature_rows[2])
        assert c.name == "Florasaur"
        assert c.types == ("Grass", "Poison")
        assert c.base_stats.special_attack == 100
        assert c.evolves_into is None
        assert [a.name for a in c.abilities] == ["Overgrow", "Chlorophyll"]
        assert c.weight_kg == 100

    def test_evolution_fields(self, creature_rows):
        c = CreatureRecord.from_dict(creature_rows[0])
        assert c.evolves_into == "Bloomtle"
        assert c.evolution_level == 16

    def test_empty_evolves_into_is_none(self):
        c = CreatureRecord.from_dict({"Name": "Solo", "EvolvesInto": ""})
        assert c.evolves_into is None

    def test_learnable_moves(self, creature_rows):
        c = CreatureRecord.from_dict(creature_rows[1])
        assert c.learnable_moves == {"Tackle", "Vine Whip", "Razor Leaf"}

    def test_no_learnset(self, creature_rows):
        assert CreatureRecord.from_dict(creature_rows[5]).learnable_moves == frozenset()

    def test_missing_name(self):
        with pytest.raises(ValueError):
            CreatureRecord.from_dict({"Id": "9"})

    def test_missing_stats_default(self):
        stats = BaseStats.from_dict({"HP": 10})
        assert stats.hp == 10
        assert stats.speed == 0


class TestMoveRecord:
    def test_optional_fields_stay_none(self):
        m = MoveRecord.from_dict({"Name": "Growl", "Type": "Normal", "Category": "Status"})
        assert m.base_power is None
        assert m.accuracy is None
        assert m.priority is None
        assert m.description is None

    def test_effect_fields(self):
        m = MoveRecord.from_dict({"Name": "Double Slap", "MinHits": 2, "MaxHits": 5,
                                  "RecoilPercent": 0, "CausesFlinch": False})
        assert (m.min_hits, m.max_hits) == (2, 5)
        assert m.recoil_percent == 0
        assert m.causes_flinch is False

    def test_missing_name(self):
        with pytest.raises(ValueError):
            MoveRecord.from_dict({"Type": "Fire"})


class TestLoaders:
    def test_load_creatures(self, data_dir):
        creatures = load_creatures(data_dir / "creatures.json")
        assert len(creatures) == 6
        assert creatures[0].name == "Sproutle"

    def test_load_moves(self, data_dir):
        moves = load_moves(data_dir / "moves.json")
        assert [m.name for m in moves][:2] == ["Tackle", "Ember"]

    def test_object_document(self, tmp_path):
        path = tmp_path / "moves.json"
        path.write_text(json.dumps({"tackle": {"Name": "Tackle"}, "ember": {"Name": "Ember"}}))
        assert [m.name for m in load_moves(path)] == ["Tackle", "Ember"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_creatures(tmp_path / "absent.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "creatures.json"
        path.write_text("[{")
        with pytest.raises(ValueError, match="Malformed"):
            load_creatures(path)

    def test_wrong_document_type(self, tmp_path):
        path = tmp_path / "creatures.json"
        path.write_text("42")
        with pytest.raises(ValueError):
            load_creatures(path)
