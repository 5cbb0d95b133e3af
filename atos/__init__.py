# -*- coding: utf-8 -*-
"""
atos package

Extraction and review ordering of personnel acts (nomeações, exonerações,
designações, decretos) published in a Diário Oficial.

Callers (app_fastapi.py, main.py) usually need only:

- run_analysis(base64_pdf, file_name):
    PDF -> AI extraction -> grouped, prioritized acts
- group_and_order(acts):
    rule engine only, for acts that were already extracted

Modules
- types       : Act / ActType / Group / ExtractionResponse
- utils_text  : normalization and locale-aware sort key
- classifier  : canonical bucket per act (ordered rule table)
- grouping    : grouping + priority ordering
- builders    : view dicts for the review screen
- errors      : gateway / intake error taxonomy with user messages
- llm_client  : OpenAI Chat wrapper
- extractor   : prompt, schema, response parsing
- pipeline    : extractor + grouping for one document
"""

from .classifier import classify
from .grouping import group_and_order
from .pipeline import AnalysisResult, run_analysis

__all__ = ["classify", "group_and_order", "run_analysis", "AnalysisResult"]
