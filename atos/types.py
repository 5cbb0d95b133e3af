# -*- coding: utf-8 -*-
"""
atos.types

Data structures shared by the extraction gateway, the grouping engine and the API.

- ActType: closed enumeration of act kinds (no custom categories)
- Act: one personnel act extracted from a gazette (immutable)
- ExtractionResponse: what the gateway returns for one document (acts + summary)
- Group: one canonical organization bucket with its acts and priority tier

JSON field names follow the frontend contract
(type / secretariat / personName / role / description).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class ActType(str, Enum):
    EXONERATION = "EXONERATION"    # exoneração (dismissal)
    HIRING = "HIRING"              # nomeação (appointment)
    GOVERNOR_ACT = "GOVERNOR_ACT"  # decreto da governadora
    OTHER = "OTHER"


class Act(BaseModel):
    """
    A single personnel act.

    secretariat and personName may arrive empty or as sentinels;
    they are defaulted by the engine / builders, never by the caller.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: ActType
    secretariat: str = Field(default="", description="Organization name as reported by the AI")
    person_name: str = Field(default="", alias="personName")
    role: Optional[str] = Field(default=None, description="Job title / commissioned role")
    description: str = Field(..., description="Short summary of the act")

    @field_validator("secretariat", "person_name", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        # the model and API clients send null for "not found"
        return "" if value is None else value


class ExtractionResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    acts: List[Act] = Field(default_factory=list)
    summary: str = ""


class Group(BaseModel):
    """Canonical bucket, its members in input order and its priority tier."""

    name: str
    acts: List[Act]
    priority: int

    @computed_field  # type: ignore[misc]
    @property
    def auto_expand(self) -> bool:
        # SAD and governor acts open by default in the UI
        return self.priority <= 2
