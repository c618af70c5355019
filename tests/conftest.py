"""
Shared fixtures for the test suite.
"""
import json
import sys
from pathlib import Path

import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


CREATURE_ROWS = [
    {"Id": "1", "Name": "Sproutle", "DexNumber": 1, "Types": ["Grass"],
     "EvolvesInto": "Bloomtle", "EvolutionLevel": 16,
     "BaseStats": {"HP": 45, "Attack": 49, "Defense": 49,
                   "SpecialAttack": 65, "SpecialDefense": 65, "Speed": 45},
     "Learnset": {"1": ["Tackle"], "7": ["Vine Whip"]},
     "Abilities": [{"Name": "Overgrow", "Chance": 100}],
     "CatchRateScalar": 45, "BaseWeightKg": 6.9},
    {"Id": "2", "Name": "Bloomtle", "DexNumber": 2, "Types": ["Grass"],
     "EvolvesInto": "Florasaur", "EvolutionLevel": 32,
     "BaseStats": {"HP": 60, "Attack": 62, "Defense": 63,
                   "SpecialAttack": 80, "SpecialDefense": 80, "Speed": 60},
     "Learnset": {"1": ["Tackle", "Vine Whip"], "20": ["Razor Leaf"]},
     "Abilities": [{"Name": "Overgrow", "Chance": 100}],
     "CatchRateScalar": 45, "BaseWeightKg": 13},
    {"Id": "3", "Name": "Florasaur", "DexNumber": 3, "Types": ["Grass", "Poison"],
     "BaseStats": {"HP": 80, "Attack": 82, "Defense": 83,
                   "SpecialAttack": 100, "SpecialDefense": 100, "Speed": 80},
     "Learnset": {"1": ["Razor Leaf"], "40": ["Solar Beam"]},
     "Abilities": [{"Name": "Overgrow", "Chance": 90}, {"Name": "Chlorophyll", "Chance": 10}],
     "CatchRateScalar": 45, "BaseWeightKg": 100},
    {"Id": "4", "Name": "Emberpup", "DexNumber": 4, "Types": ["Fire"],
     "EvolvesInto": "Blazehound", "EvolutionLevel": 20,
     "BaseStats": {"HP": 39, "Attack": 52, "Defense": 43,
                   "SpecialAttack": 60, "SpecialDefense": 50, "Speed": 65},
     "Learnset": {"1": ["Ember"]},
     "Abilities": [{"Name": "Blaze", "Chance": 100}],
     "CatchRateScalar": 45, "BaseWeightKg": 8.5},
    {"Id": "5", "Name": "Blazehound", "DexNumber": 5, "Types": ["Fire"],
     "BaseStats": {"HP": 78, "Attack": 84, "Defense": 78,
                   "SpecialAttack": 109, "SpecialDefense": 85, "Speed": 100},
     "Learnset": {"1": ["Ember", "Flamethrower"]},
     "Abilities": [{"Name": "Blaze", "Chance": 100}],
     "CatchRateScalar": 45, "BaseWeightKg": 90.5},
    {"Id": "6", "Name": "Rockling", "DexNumber": 6, "Types": ["Rock"],
     "BaseStats": {"HP": 50, "Attack": 95, "Defense": 180,
                   "SpecialAttack": 85, "SpecialDefense": 45, "Speed": 70},
     "Learnset": None,
     "CatchRateScalar": 200, "BaseWeightKg": 210},
]

MOVE_ROWS = [
    {"Name": "Tackle", "Type": "Normal", "Category": "Physical",
     "BasePower": 40, "Accuracy": 100, "Priority": 0,
     "Description": "A full-body charge attack."},
    {"Name": "Ember", "Type": "Fire", "Category": "Special",
     "BasePower": 40, "Accuracy": 100, "Priority": 0,
     "Description": "Small flames that may leave the target with a burn.",
     "StatusEffect": "Burn", "StatusChance": 10},
    {"Name": "Quick Attack", "Type": "Normal", "Category": "Physical",
     "BasePower": 40, "Accuracy": 100, "Priority": 1,
     "Description": "An extremely fast attack that always strikes first."},
    {"Name": "Double Slap", "Type": "Normal", "Category": "Physical",
     "BasePower": 15, "Accuracy": 85, "MinHits": 2, "MaxHits": 5,
     "Description": "Slaps the target two to five times."},
    {"Name": "Double-Edge", "Type": "Normal", "Category": "Physical",
     "BasePower": 120, "Accuracy": 100, "RecoilPercent": 33,
     "Description": "A reckless tackle that also hurts the user."},
    {"Name": "Recover", "Type": "Normal", "Category": "Status",
     "HealsPercent": 50, "Description": "Restores half of the user's max HP."},
    {"Name": "Swords Dance", "Type": "Normal", "Category": "Status",
     "StatChanges": [{"Stat": "Attack", "Stages": 2}]},
    {"Name": "Bite", "Type": "Dark", "Category": "Physical",
     "BasePower": 60, "Accuracy": 100, "CausesFlinch": True},
    {"Name": "Supersonic", "Type": "Normal", "Category": "Status",
     "Accuracy": 55, "CausesConfusion": True,
     "Description": "Odd sound waves that confuse the target."},
    {"Name": "Fury Swipes", "Type": "Normal", "Category": "Physical",
     "BasePower": 18, "Accuracy": 80, "MultiHit": True},
]


@pytest.fixture
def creature_rows():
    return [dict(r) for r in CREATURE_ROWS]


@pytest.fixture
def creatures():
    from wikidex.catalog import CreatureRecord
    return [CreatureRecord.from_dict(r) for r in CREATURE_ROWS]


@pytest.fixture
def moves():
    from wikidex.catalog import MoveRecord
    return [MoveRecord.from_dict(r) for r in MOVE_ROWS]


@pytest.fixture
def data_dir(tmp_path):
    """A data directory with both catalog files written out."""
    (tmp_path / "creatures.json").write_text(json.dumps(CREATURE_ROWS), encoding="utf-8")
    (tmp_path / "moves.json").write_text(json.dumps(MOVE_ROWS), encoding="utf-8")
    return tmp_path
