# -*- coding: utf-8 -*-
"""
atos.builders

Packs engine output into the shape the review screen consumes.

- display_person_name(act): name shown on the act card (sentinel-aware)
- type_label(act_type): badge text (Exoneração / Nomeação / Decreto / Outro)
- build_act_view(act), build_group_view(group):
    dicts with the raw act fields plus displayName / typeLabel,
    group count and auto_expand flag
- build_analysis_view(response, groups):
    summary + total act count + grouped views for one document

The expand/collapse state itself belongs to the UI; only the initial
auto_expand hint is produced here.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .types import Act, ActType, ExtractionResponse, Group

UNIDENTIFIED_PERSON = "Nome não identificado"

# Sentinels the AI returns when the person could not be read
_PERSON_SENTINELS = ("Nome não especificado",)

TYPE_LABELS: Dict[ActType, str] = {
    ActType.EXONERATION: "Exoneração",
    ActType.HIRING: "Nomeação",
    ActType.GOVERNOR_ACT: "Decreto",
    ActType.OTHER: "Outro",
}


def display_person_name(act: Act) -> str:
    name = (act.person_name or "").strip()
    if not name or name in _PERSON_SENTINELS:
        return UNIDENTIFIED_PERSON
    return name


def type_label(act_type: ActType) -> str:
    return TYPE_LABELS.get(act_type, TYPE_LABELS[ActType.OTHER])


def build_act_view(act: Act) -> Dict[str, Any]:
    view = act.model_dump(mode="json", by_alias=True)
    view["displayName"] = display_person_name(act)
    view["typeLabel"] = type_label(act.type)
    return view


def build_group_view(group: Group) -> Dict[str, Any]:
    return {
        "name": group.name,
        "priority": group.priority,
        "auto_expand": group.auto_expand,
        "count": len(group.acts),
        "acts": [build_act_view(a) for a in group.acts],
    }


def build_analysis_view(response: ExtractionResponse, groups: Sequence[Group]) -> Dict[str, Any]:
    group_views: List[Dict[str, Any]] = [build_group_view(g) for g in groups]
    return {
        "summary": response.summary,
        "total_acts": len(response.acts),
        "groups": group_views,
    }
