# schemas.py
# -*- coding: utf-8 -*-
"""
Request / response bodies of the HTTP API (shown in Swagger).
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from atos.types import Act


class ActView(Act):
    """Act as shown on a card: raw fields + display values."""

    displayName: str = Field(..., description="personName, or 'Nome não identificado' when missing")
    typeLabel: str = Field(..., description="Exoneração / Nomeação / Decreto / Outro")


class GroupView(BaseModel):
    name: str = Field(..., description="Canonical bucket: SAD, Atos da Governadora, or the organization name")
    priority: int = Field(..., description="1 = SAD, 2 = Atos da Governadora, 3 = others")
    auto_expand: bool = Field(..., description="Open this group by default (priority <= 2)")
    count: int
    acts: List[ActView]


class GroupRequest(BaseModel):
    """
    Already-extracted acts to be grouped (no AI call).
    """
    acts: List[Act] = Field(
        default_factory=list,
        examples=[
            [
                {
                    "type": "HIRING",
                    "secretariat": "",
                    "personName": "MARIA DA SILVA",
                    "role": "Agente de Contratação",
                    "description": "Nomeia MARIA DA SILVA como Agente de Contratação.",
                }
            ]
        ],
    )


class GroupResponse(BaseModel):
    total_acts: int
    groups: List[GroupView]


class AnalysisResponse(BaseModel):
    """
    State of one analysis session.
    - status: IDLE | ANALYZING | SUCCESS | ERROR
    - generation: increases on every new analysis / reset of the session
    """
    session_id: str = Field(
        ...,
        description="Reuse this id on the next upload so older in-flight results are discarded.",
        examples=["c3b9d2c8-1234-4f10-9f21-abcdef123456"],
    )
    generation: int
    status: str
    file_name: str = ""
    summary: Optional[str] = None
    total_acts: int = 0
    groups: List[GroupView] = Field(default_factory=list)
    error: Optional[str] = None
