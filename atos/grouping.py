# atos/grouping.py
# -*- coding: utf-8 -*-
"""
Groups classified acts by canonical bucket and orders the groups for review.

- group_and_order(acts):
    acts (extraction order = relevance order) -> list[Group]
    sorted by (priority tier, locale-aware name).
- priority_for(name):
    SAD = 1, Atos da Governadora = 2, everything else = 3.

Pure and synchronous: input acts are only referenced, never modified,
so it is safe to call from concurrent analyses.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from core.logging import logger

from .classifier import GOVERNOR_ACTS, SAD, classify
from .types import Act, Group
from .utils_text import locale_sort_key

PRIORITY_BY_BUCKET: Dict[str, int] = {
    SAD: 1,
    GOVERNOR_ACTS: 2,
}
DEFAULT_PRIORITY = 3


def priority_for(name: str) -> int:
    return PRIORITY_BY_BUCKET.get(name, DEFAULT_PRIORITY)


def _group_sort_key(group: Group):
    return (group.priority, locale_sort_key(group.name))


def group_and_order(acts: Sequence[Act]) -> List[Group]:
    """Bucket acts and return groups in display order.

    1) classify each act in input order; a bucket is created the first
       time its name is seen (dict keeps insertion order)
    2) priority tier per bucket
    3) sort by (priority, name); members keep their input order
    """
    buckets: Dict[str, List[Act]] = {}

    for act in acts:
        name = classify(act)
        if name not in buckets:
            buckets[name] = []
        buckets[name].append(act)

    groups = [
        Group(name=name, acts=members, priority=priority_for(name))
        for name, members in buckets.items()
    ]
    groups.sort(key=_group_sort_key)

    logger.debug(
        "[grouping] %d acts -> %d groups (%s)",
        len(acts),
        len(groups),
        ", ".join(f"{g.name}={len(g.acts)}" for g in groups),
    )
    return groups
