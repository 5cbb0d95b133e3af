# -*- coding: utf-8 -*-
"""
atos.llm_client

Shared wrapper around the OpenAI Chat API.

- get_client(): lazily builds the client from OPENAI_API_KEY (.env)
- build_pdf_part(base64_pdf, file_name): inline PDF content part
- call_chat_json(messages, schema, ...): structured-output chat call

Everything in atos that talks to the model goes through this module.
Provider exceptions are translated into atos.errors here, so callers
only deal with one error family.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import openai
from openai import OpenAI

from core.config import (
    EXTRACTION_MAX_TOKENS,
    EXTRACTION_MODEL,
    EXTRACTION_TEMPERATURE,
    OPENAI_API_KEY,
    REQUEST_TIMEOUT_SECONDS,
)
from core.logging import logger

from .errors import GatewayError, MissingCredentialError

_client: Optional[OpenAI] = None


def get_client() -> OpenAI:
    global _client
    if _client is None:
        if not OPENAI_API_KEY:
            raise MissingCredentialError("OPENAI_API_KEY is not set in .env")
        _client = OpenAI(api_key=OPENAI_API_KEY, timeout=REQUEST_TIMEOUT_SECONDS)
    return _client


@dataclass
class ChatResult:
    text: str
    finish_reason: str
    refusal: Optional[str] = None


def build_pdf_part(base64_pdf: str, file_name: str = "diario.pdf") -> Dict[str, Any]:
    return {
        "type": "file",
        "file": {
            "filename": file_name,
            "file_data": f"data:application/pdf;base64,{base64_pdf}",
        },
    }


# -------------------- OpenAI Chat (structured output) --------------------
def call_chat_json(
    messages: List[Dict[str, Any]],
    schema: Dict[str, Any],
    schema_name: str = "extraction",
    model: str = EXTRACTION_MODEL,
    temperature: float = EXTRACTION_TEMPERATURE,
    max_tokens: int = EXTRACTION_MAX_TOKENS,
    client: Optional[Any] = None,
) -> ChatResult:
    """Chat call constrained to a strict JSON schema."""
    client = client or get_client()
    try:
        resp = client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": schema_name,
                    "strict": True,
                    "schema": schema,
                },
            },
        )
    except openai.AuthenticationError as e:
        logger.error(f"[OpenAI] authentication failed: {e}")
        raise MissingCredentialError(str(e)) from e
    except openai.OpenAIError as e:
        logger.warning(f"[OpenAI] API error: {type(e).__name__}: {e}")
        raise GatewayError(str(e)) from e

    if not resp.choices:
        logger.warning("[OpenAI] response without choices")
        return ChatResult(text="", finish_reason="")

    choice = resp.choices[0]
    message = choice.message
    return ChatResult(
        text=(message.content or "").strip(),
        finish_reason=choice.finish_reason or "",
        refusal=getattr(message, "refusal", None),
    )
