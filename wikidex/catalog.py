"""
catalog – Typed records for the static game catalog and their JSON loaders.

The wiki's dataset is exported as JSON with PascalCase keys
(``Name``, ``EvolvesInto``, ``BasePower`` ...).  This module is the only
place that knows about that key style; everything downstream works on the
frozen dataclasses defined here.

Loaded catalogs are plain lists and are never mutated by the rest of the
package.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from wikidex.config import BASE_STAT_KEYS

logger = logging.getLogger(__name__)


# ── Creature records ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class BaseStats:
    hp: int = 0
    attack: int = 0
    defense: int = 0
    special_attack: int = 0
    special_defense: int = 0
    speed: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BaseStats":
        return cls(**{attr: int(data.get(key) or 0) for key, attr in BASE_STAT_KEYS.items()})


@dataclass(frozen=True)
class AbilityEntry:
    name: str
    chance: float = 0.0


@dataclass(frozen=True)
class CreatureRecord:
    """One creature species as exported by the wiki dataset."""
    name: str
    id: str = ""
    slug: str = ""
    dex_number: int = 0
    description: str = ""
    types: Tuple[str, ...] = ()
    base_stats: Optional[BaseStats] = None
    learnset: Optional[Dict[str, List[str]]] = field(default=None, compare=False, hash=False)
    evolves_into: Optional[str] = None
    evolution_level: Optional[int] = None
    abilities: Tuple[AbilityEntry, ...] = ()
    catch_rate: Optional[float] = None
    weight_kg: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CreatureRecord":
        name = data.get("Name")
        if not name:
            raise ValueError(f"Creature record without a Name: {dict(data)!r}")
        stats = data.get("BaseStats")
        return cls(
            name=name,
            id=str(data.get("Id") or ""),
            slug=data.get("Slug") or "",
            dex_number=int(data.get("DexNumber") or 0),
            description=data.get("Description") or "",
            types=tuple(data.get("Types") or ()),
            base_stats=BaseStats.from_dict(stats) if stats else None,
            learnset=data.get("Learnset"),
            evolves_into=data.get("EvolvesInto") or None,
            evolution_level=data.get("EvolutionLevel"),
            abilities=tuple(
                AbilityEntry(name=a["Name"], chance=float(a.get("Chance") or 0))
                for a in data.get("Abilities") or ()
            ),
            catch_rate=data.get("CatchRateScalar"),
            weight_kg=data.get("BaseWeightKg"),
        )

    @property
    def learnable_moves(self) -> frozenset:
        """Every move name in the learnset, regardless of level."""
        if not self.learnset:
            return frozenset()
        moves = set()
        for entries in self.learnset.values():
            if isinstance(entries, (list, tuple)):
                moves.update(entries)
        return frozenset(moves)


# ── Move records ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MoveRecord:
    """One move.  Numeric fields are ``None`` when the dataset omits them."""
    name: str
    type: str = ""
    category: str = ""
    id: str = ""
    slug: str = ""
    description: Optional[str] = None
    base_power: Optional[float] = None
    accuracy: Optional[float] = None
    priority: Optional[float] = None
    status_effect: Optional[str] = None
    status_chance: Optional[float] = None
    recoil_percent: Optional[float] = None
    heals_percent: Optional[float] = None
    stat_changes: Any = field(default=None, compare=False, hash=False)
    causes_flinch: Optional[bool] = None
    causes_confusion: Optional[bool] = None
    multi_hit: Any = field(default=None, compare=False, hash=False)
    min_hits: Optional[int] = None
    max_hits: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MoveRecord":
        name = data.get("Name")
        if not name:
            raise ValueError(f"Move record without a Name: {dict(data)!r}")
        return cls(
            name=name,
            type=data.get("Type") or "",
            category=data.get("Category") or "",
            id=str(data.get("Id") or ""),
            slug=data.get("Slug") or "",
            description=data.get("Description"),
            base_power=data.get("BasePower"),
            accuracy=data.get("Accuracy"),
            priority=data.get("Priority"),
            status_effect=data.get("StatusEffect"),
            status_chance=data.get("StatusChance"),
            recoil_percent=data.get("RecoilPercent"),
            heals_percent=data.get("HealsPercent"),
            stat_changes=data.get("StatChanges"),
            causes_flinch=data.get("CausesFlinch"),
            causes_confusion=data.get("CausesConfusion"),
            multi_hit=data.get("MultiHit"),
            min_hits=data.get("MinHits"),
            max_hits=data.get("MaxHits"),
        )


# ── Loaders ─────────────────────────────────────────────────────────────────

def _read_records(path: Union[str, Path]) -> List[Mapping[str, Any]]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            doc = json.load(f)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Malformed catalog file {path}: {exc}") from exc

    # The exporter writes either a list or a {slug: record} object.
    if isinstance(doc, dict):
        doc = list(doc.values())
    if not isinstance(doc, list):
        raise ValueError(f"Catalog file {path} must hold a list or object, got {type(doc).__name__}")
    return doc


def load_creatures(path: Union[str, Path]) -> List[CreatureRecord]:
    """Load a creature catalog from a JSON export."""
    creatures = [CreatureRecord.from_dict(r) for r in _read_records(path)]
    logger.info("Loaded %d creatures from %s", len(creatures), path)
    return creatures


def load_moves(path: Union[str, Path]) -> List[MoveRecord]:
    """Load a move catalog from a JSON export."""
    moves = [MoveRecord.from_dict(r) for r in _read_records(path)]
    logger.info("Loaded %d moves from %s", len(moves), path)
    return moves
