# -*- coding: utf-8 -*-
"""
atos.pipeline

One document, end to end:

1. extractor.analyze_pdf      : PDF -> ExtractionResponse (AI call)
2. grouping.group_and_order   : acts -> ordered groups (rule engine)
3. builders.build_analysis_view is applied by the callers that need dicts

run_analysis is the only entry point the API and the console demo use.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from core.logging import logger

from .extractor import analyze_pdf
from .grouping import group_and_order
from .types import ExtractionResponse, Group


@dataclass(frozen=True)
class AnalysisResult:
    response: ExtractionResponse
    groups: List[Group]


def run_analysis(base64_pdf: str, file_name: str = "diario.pdf", client: Optional[Any] = None) -> AnalysisResult:
    response = analyze_pdf(base64_pdf, file_name=file_name, client=client)
    groups = group_and_order(response.acts)
    logger.info(f"[pipeline] {file_name}: {len(response.acts)} acts in {len(groups)} groups")
    return AnalysisResult(response=response, groups=groups)
