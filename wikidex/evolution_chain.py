"""
evolution_chain – Resolve the evolution line a creature belongs to.

Each creature names at most one ``evolves_into`` target, so the catalog is
a forest of simple chains.  A chain is rebuilt by walking back through the
creatures that evolve into the target, then forward along ``evolves_into``.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from wikidex.catalog import CreatureRecord

logger = logging.getLogger(__name__)


def get_creature_by_name(name: str, catalog: Iterable[CreatureRecord]) -> Optional[CreatureRecord]:
    """Look up a creature by exact name, falling back to a case-insensitive match."""
    creatures = list(catalog)
    for c in creatures:
        if c.name == name:
            return c
    lowered = name.lower()
    for c in creatures:
        if c.name.lower() == lowered:
            return c
    return None


def _index(creatures: List[CreatureRecord]):
    # First occurrence wins, matching a linear scan over the catalog.
    by_name: Dict[str, CreatureRecord] = {}
    by_target: Dict[str, CreatureRecord] = {}
    for c in creatures:
        by_name.setdefault(c.name, c)
        if c.evolves_into:
            by_target.setdefault(c.evolves_into, c)
    return by_name, by_target


def build_evolution_chain(name: str, catalog: Iterable[CreatureRecord]) -> List[CreatureRecord]:
    """
    Return the ordered evolution line containing *name*:
    ``[*pre_evolutions, target, *post_evolutions]``.

    An empty list means there is nothing to show: either *name* is not in
    the catalog or the creature has no relatives.  Links pointing at
    missing creatures end the walk in that direction.
    """
    creatures = list(catalog)
    by_name, by_target = _index(creatures)

    target = by_name.get(name)
    if target is None:
        logger.debug("No creature named %r in catalog", name)
        return []

    # Every record may appear once; a revisit means the catalog has a cycle.
    seen = {target.name}

    pre: List[CreatureRecord] = []
    search = name
    while len(seen) <= len(creatures):
        parent = by_target.get(search)
        if parent is None:
            break
        if parent.name in seen:
            logger.error(
                "Evolution cycle detected at %r while resolving %r; chain truncated",
                parent.name, name,
            )
            break
        seen.add(parent.name)
        pre.insert(0, parent)
        search = parent.name

    post: List[CreatureRecord] = []
    current = target.name
    next_name = target.evolves_into
    while next_name and len(seen) <= len(creatures):
        child = by_name.get(next_name)
        if child is None:
            logger.debug("Dangling evolution link %r -> %r", current, next_name)
            break
        if child.name in seen:
            logger.error(
                "Evolution cycle detected at %r while resolving %r; chain truncated",
                child.name, name,
            )
            break
        seen.add(child.name)
        post.append(child)
        current = child.name
        next_name = child.evolves_into

    chain = pre + [target] + post
    return chain if len(chain) > 1 else []
