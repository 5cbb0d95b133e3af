"""
Shared fixtures.

LOG_DIR points to a temp directory before any project module is imported,
and the OpenAI client is replaced by FakeClient (no network).
"""

import json
import os
import tempfile
from types import SimpleNamespace

os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="diario_atos_logs_")

from atos.types import Act, ActType


class FakeClient:
    """Mimics openai.OpenAI: client.chat.completions.create(**kwargs)."""

    def __init__(self, content=None, finish_reason="stop", refusal=None, error=None, no_choices=False):
        self.content = content
        self.finish_reason = finish_reason
        self.refusal = refusal
        self.error = error
        self.no_choices = no_choices
        self.calls = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.no_choices:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.content, refusal=self.refusal)
        choice = SimpleNamespace(message=message, finish_reason=self.finish_reason)
        return SimpleNamespace(choices=[choice])


def model_reply(acts, summary="Resumo do documento."):
    return json.dumps({"summary": summary, "acts": acts}, ensure_ascii=False)


def make_act(secretariat="", role=None, description="Ato de pessoal.", type=ActType.HIRING, person_name="FULANO DE TAL"):
    return Act(
        type=type,
        secretariat=secretariat,
        personName=person_name,
        role=role,
        description=description,
    )
