"""
move_filters – Multi-facet filtering of the move catalog.

A ``MoveFilters`` value describes every facet the move browser exposes:
free-text search, type and category sets, power/accuracy/priority ranges,
and eight effect toggles.  ``INITIAL_FILTERS`` matches every move.

Absent numeric fields on a move count as 0.  That coalescing happens once,
in ``normalize_move``; the predicates below only see ``MoveFacets``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List

from wikidex.catalog import MoveRecord
from wikidex.config import (
    MOVE_ACCURACY_BOUNDS,
    MOVE_EFFECT_TOGGLES,
    MOVE_POWER_BOUNDS,
    MOVE_PRIORITY_BOUNDS,
)


# ── Filter specification ────────────────────────────────────────────────────

@dataclass(frozen=True)
class StatRange:
    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def narrower_than(self, bounds) -> bool:
        lo, hi = bounds
        return self.min > lo or self.max < hi


@dataclass(frozen=True)
class EffectToggles:
    has_status: bool = False
    has_multi_hit: bool = False
    has_recoil: bool = False
    has_priority: bool = False
    has_healing: bool = False
    has_stat_changes: bool = False
    has_flinch: bool = False
    has_confusion: bool = False

    @property
    def active(self) -> List[str]:
        return [name for name in MOVE_EFFECT_TOGGLES if getattr(self, name)]


@dataclass(frozen=True)
class MoveFilters:
    search: str = ""
    types: FrozenSet[str] = frozenset()
    categories: FrozenSet[str] = frozenset()
    power: StatRange = StatRange(*MOVE_POWER_BOUNDS)
    accuracy: StatRange = StatRange(*MOVE_ACCURACY_BOUNDS)
    priority: StatRange = StatRange(*MOVE_PRIORITY_BOUNDS)
    effects: EffectToggles = field(default_factory=EffectToggles)

    def __post_init__(self):
        # Accept any iterable for the sets; store them frozen.
        object.__setattr__(self, "types", frozenset(self.types))
        object.__setattr__(self, "categories", frozenset(self.categories))


INITIAL_FILTERS = MoveFilters()


# ── Normalization ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MoveFacets:
    """The filterable view of a move, with every optional field resolved."""
    name: str
    description: str
    type: str
    category: str
    power: float
    accuracy: float
    priority: float
    has_status: bool
    has_multi_hit: bool
    has_recoil: bool
    has_healing: bool
    has_stat_changes: bool
    has_flinch: bool
    has_confusion: bool

    @property
    def has_priority(self) -> bool:
        return self.priority != 0


def has_multi_hit(move: MoveRecord) -> bool:
    if move.multi_hit:
        return True
    return move.min_hits is not None and move.max_hits is not None


def has_priority(move: MoveRecord) -> bool:
    return (move.priority or 0) != 0


def normalize_move(move: MoveRecord) -> MoveFacets:
    return MoveFacets(
        name=move.name.lower(),
        description=(move.description or "").lower(),
        type=move.type,
        category=move.category,
        power=move.base_power or 0,
        accuracy=move.accuracy or 0,
        priority=move.priority or 0,
        has_status=bool(move.status_effect),
        has_multi_hit=has_multi_hit(move),
        has_recoil=bool(move.recoil_percent),
        has_healing=(move.heals_percent or 0) > 0,
        has_stat_changes=bool(move.stat_changes),
        has_flinch=bool(move.causes_flinch),
        has_confusion=bool(move.causes_confusion),
    )


# ── Filtering ───────────────────────────────────────────────────────────────

def _matches(facets: MoveFacets, filters: MoveFilters) -> bool:
    if filters.search:
        needle = filters.search.lower()
        if needle not in facets.name and needle not in facets.description:
            return False

    if filters.types and facets.type not in filters.types:
        return False
    if filters.categories and facets.category not in filters.categories:
        return False

    if not filters.power.contains(facets.power):
        return False
    if not filters.accuracy.contains(facets.accuracy):
        return False
    if not filters.priority.contains(facets.priority):
        return False

    # A toggle that is off never excludes anything.
    for toggle in filters.effects.active:
        if not getattr(facets, toggle):
            return False
    return True


def apply_filters(moves: Iterable[MoveRecord], filters: MoveFilters) -> List[MoveRecord]:
    """Return the moves matching every active facet, in their original order."""
    return [move for move in moves if _matches(normalize_move(move), filters)]


def get_active_filter_count(filters: MoveFilters) -> int:
    """Number of facets that differ from ``INITIAL_FILTERS`` (for the "N active" badge)."""
    count = 0
    if filters.search:
        count += 1
    if filters.types:
        count += 1
    if filters.categories:
        count += 1
    if filters.power.narrower_than(MOVE_POWER_BOUNDS):
        count += 1
    if filters.accuracy.narrower_than(MOVE_ACCURACY_BOUNDS):
        count += 1
    if filters.priority.narrower_than(MOVE_PRIORITY_BOUNDS):
        count += 1
    count += len(filters.effects.active)
    return count
