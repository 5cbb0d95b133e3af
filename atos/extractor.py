# atos/extractor.py
# -*- coding: utf-8 -*-
"""
Extraction gateway: gazette PDF -> ExtractionResponse(acts, summary).

Role
----
- analyze_pdf(base64_pdf, file_name):
    sends the PDF to the model with a strict output schema, parses the reply
    and validates every record at the boundary before it reaches the engine.
- parse_extraction(text):
    JSON text -> ExtractionResponse (fallbacks for missing acts / summary).

The model is treated as an unreliable producer: the grouping engine re-checks
the organization afterwards, so the prompt rules here are a first line only.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from core.logging import logger

from .errors import EmptyResponseError, MalformedResponseError
from .llm_client import build_pdf_part, call_chat_json
from .types import Act, ActType, ExtractionResponse

# ------------------------------------------------------------
# 1. Prompt
# ------------------------------------------------------------

SYSTEM_INSTRUCTION = (
    "Você é um assistente especializado em Transparência Pública e Auditoria "
    "Governamental. Sua tarefa é extrair dados públicos de Diários Oficiais para "
    "facilitar o controle social. Os dados são públicos e não sensíveis."
)

EXTRACTION_PROMPT = """Analise este Diário Oficial. Extraia atos de pessoal (Nomeações, Exonerações, Designações).

ATENÇÃO ÀS REGRAS DE NEGÓCIO:
1. Priorize atos da "Secretaria de Administração" (SAD) e "Atos da Governadora".
2. Se o cargo for "Agente de Contratação" ou "Equipe de Apoio", a secretaria DEVE ser "SAD".
3. Ignore licitações, avisos de férias e erratas simples.
4. Extraia o nome completo das pessoas (geralmente em UPPERCASE).
"""

# ------------------------------------------------------------
# 2. Output schema (strict mode: every property listed as required,
#    optional ones are nullable)
# ------------------------------------------------------------

ACT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "secretariat": {
            "type": "string",
            "description": (
                "Nome da secretaria. Se for 'Agente de Contratação' ou 'Equipe de Apoio', "
                "use 'SAD'. Se 'Secretaria de Administração', use 'SAD'."
            ),
        },
        "personName": {
            "type": "string",
            "description": "Nome do servidor em CAIXA ALTA. Se não houver nome, use 'Nome não identificado'.",
        },
        "type": {
            "type": "string",
            "enum": [t.value for t in ActType],
            "description": "Tipo do ato.",
        },
        "role": {
            "type": ["string", "null"],
            "description": "Cargo ou função gratificada.",
        },
        "description": {
            "type": "string",
            "description": "Descrição resumida do ato.",
        },
    },
    "required": ["secretariat", "personName", "type", "role", "description"],
    "additionalProperties": False,
}

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "summary": {
            "type": "string",
            "description": "Um resumo executivo de 2 linhas sobre os principais atos encontrados no documento.",
        },
        "acts": {
            "type": "array",
            "description": "Lista de atos oficiais de pessoal identificados.",
            "items": ACT_SCHEMA,
        },
    },
    "required": ["summary", "acts"],
    "additionalProperties": False,
}

_ACT_TYPES = {t.value for t in ActType}


# ------------------------------------------------------------
# 3. Parsing / boundary validation
# ------------------------------------------------------------

def fallback_summary(act_count: int) -> str:
    return f"Análise concluída. {act_count} atos processados."


def _coerce_act(raw: Any, index: int) -> Optional[Act]:
    """One raw record -> Act, or None if it cannot satisfy the Act contract."""
    if not isinstance(raw, dict):
        logger.warning(f"[extractor] record #{index} is not an object, dropped")
        return None

    record = dict(raw)

    if record.get("type") not in _ACT_TYPES:
        logger.warning(f"[extractor] record #{index} has unknown type {record.get('type')!r}, using OTHER")
        record["type"] = ActType.OTHER.value

    description = record.get("description")
    if not isinstance(description, str) or not description.strip():
        logger.warning(f"[extractor] record #{index} has no description, dropped")
        return None

    try:
        return Act.model_validate(record)
    except ValidationError as e:
        logger.warning(f"[extractor] record #{index} failed validation, dropped: {e}")
        return None


def parse_extraction(text: str) -> ExtractionResponse:
    """Model JSON text -> ExtractionResponse."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"[extractor] JSON parse failed: {e}")
        logger.debug(f"[extractor] received text: {text[:500]}")
        raise MalformedResponseError(f"invalid JSON from model: {e}") from e

    if not isinstance(data, dict):
        raise MalformedResponseError("model output is not a JSON object")

    raw_acts = data.get("acts") or []
    if not isinstance(raw_acts, list):
        raise MalformedResponseError("'acts' is not a list")

    acts: List[Act] = []
    for i, raw in enumerate(raw_acts):
        act = _coerce_act(raw, i)
        if act is not None:
            acts.append(act)

    summary = data.get("summary")
    if not isinstance(summary, str) or not summary.strip():
        summary = fallback_summary(len(acts))

    return ExtractionResponse(acts=acts, summary=summary.strip())


# ------------------------------------------------------------
# 4. Gateway call
# ------------------------------------------------------------

def build_messages(base64_pdf: str, file_name: str) -> List[Dict[str, Any]]:
    return [
        {"role": "system", "content": SYSTEM_INSTRUCTION},
        {
            "role": "user",
            "content": [
                build_pdf_part(base64_pdf, file_name),
                {"type": "text", "text": EXTRACTION_PROMPT},
            ],
        },
    ]


def analyze_pdf(base64_pdf: str, file_name: str = "diario.pdf", client: Optional[Any] = None) -> ExtractionResponse:
    """Send one gazette PDF (bare base64, no data-URL prefix) to the model."""
    logger.info(f"[extractor] analyzing {file_name} ({len(base64_pdf)} base64 chars)")

    result = call_chat_json(
        build_messages(base64_pdf, file_name),
        RESPONSE_SCHEMA,
        schema_name="gazette_personnel_acts",
        client=client,
    )

    if result.refusal:
        logger.warning(f"[extractor] model refused: {result.refusal}")
        raise EmptyResponseError(f"model refusal: {result.refusal}")

    if result.finish_reason == "length":
        logger.warning("[extractor] response truncated (finish_reason=length)")
        raise MalformedResponseError("response truncated by max_tokens")

    if not result.text:
        logger.warning(f"[extractor] empty response (finish_reason={result.finish_reason})")
        raise EmptyResponseError("model returned no text")

    response = parse_extraction(result.text)
    logger.info(f"[extractor] {len(response.acts)} acts extracted from {file_name}")
    return response
