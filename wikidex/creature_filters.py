"""
creature_filters – Multi-facet filtering of the creature catalog.

Facet semantics differ per dimension:
  - types:     a creature must have ALL selected types
  - moves:     a creature must be able to learn ANY selected move
  - abilities: a creature must have ANY selected ability
  - stats:     each base stat inside its range (skipped when a creature
               has no base stats at all)
  - catch rate / weight / dex number: absent values count as 0
  - evolution status: ``can_evolve`` keeps creatures with an
    ``evolves_into`` link, ``final`` keeps those without one
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List

from wikidex.catalog import CreatureRecord
from wikidex.config import (
    CATCH_RATE_BOUNDS,
    DEX_NUMBER_BOUNDS,
    EVOLUTION_STATUSES,
    STAT_BOUNDS,
    WEIGHT_BOUNDS,
    EvolutionStatus,
)
from wikidex.move_filters import StatRange

STAT_FIELDS = ("hp", "attack", "defense", "special_attack", "special_defense", "speed")


@dataclass(frozen=True)
class CreatureFilters:
    types: FrozenSet[str] = frozenset()
    moves: FrozenSet[str] = frozenset()
    abilities: FrozenSet[str] = frozenset()
    hp: StatRange = StatRange(*STAT_BOUNDS)
    attack: StatRange = StatRange(*STAT_BOUNDS)
    defense: StatRange = StatRange(*STAT_BOUNDS)
    special_attack: StatRange = StatRange(*STAT_BOUNDS)
    special_defense: StatRange = StatRange(*STAT_BOUNDS)
    speed: StatRange = StatRange(*STAT_BOUNDS)
    catch_rate: StatRange = StatRange(*CATCH_RATE_BOUNDS)
    weight: StatRange = StatRange(*WEIGHT_BOUNDS)
    evolution_status: str = EvolutionStatus.ALL
    dex_number: StatRange = StatRange(*DEX_NUMBER_BOUNDS)

    def __post_init__(self):
        for name in ("types", "moves", "abilities"):
            object.__setattr__(self, name, frozenset(getattr(self, name)))
        if self.evolution_status not in EVOLUTION_STATUSES:
            raise ValueError(f"Unknown evolution status: {self.evolution_status}")


INITIAL_CREATURE_FILTERS = CreatureFilters()


def _matches(creature: CreatureRecord, filters: CreatureFilters) -> bool:
    if filters.types and not filters.types.issubset(creature.types):
        return False

    if filters.moves and filters.moves.isdisjoint(creature.learnable_moves):
        return False

    if filters.abilities:
        names = {a.name for a in creature.abilities}
        if filters.abilities.isdisjoint(names):
            return False

    if creature.base_stats is not None:
        for stat in STAT_FIELDS:
            if not getattr(filters, stat).contains(getattr(creature.base_stats, stat)):
                return False

    if not filters.catch_rate.contains(creature.catch_rate or 0):
        return False
    if not filters.weight.contains(creature.weight_kg or 0):
        return False

    if filters.evolution_status == EvolutionStatus.CAN_EVOLVE and not creature.evolves_into:
        return False
    if filters.evolution_status == EvolutionStatus.FINAL and creature.evolves_into:
        return False

    return filters.dex_number.contains(creature.dex_number or 0)


def apply_creature_filters(
    creatures: Iterable[CreatureRecord],
    filters: CreatureFilters,
) -> List[CreatureRecord]:
    """Return the creatures matching every active facet, in catalog order."""
    return [c for c in creatures if _matches(c, filters)]


def get_active_creature_filter_count(filters: CreatureFilters) -> int:
    count = sum(1 for s in (filters.types, filters.moves, filters.abilities) if s)
    count += sum(1 for stat in STAT_FIELDS if getattr(filters, stat).narrower_than(STAT_BOUNDS))
    if filters.catch_rate.narrower_than(CATCH_RATE_BOUNDS):
        count += 1
    if filters.weight.narrower_than(WEIGHT_BOUNDS):
        count += 1
    if filters.evolution_status != EvolutionStatus.ALL:
        count += 1
    if filters.dex_number.narrower_than(DEX_NUMBER_BOUNDS):
        count += 1
    return count
