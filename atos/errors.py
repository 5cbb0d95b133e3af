# -*- coding: utf-8 -*-
"""
atos.errors

Failures raised around the grouping engine (the engine itself never raises).

Each error carries:
- status_code: HTTP status the routers answer with
- user_message: Portuguese text shown on the upload screen

Gateway (AI call)
- MissingCredentialError : API key absent / rejected (fatal, not retryable)
- MalformedResponseError : truncated or invalid JSON (user should cut the PDF)
- EmptyResponseError     : no text / refusal (retry or check legibility)
- GatewayError           : anything else, original message passed through

Intake (upload)
- InvalidFileTypeError, FileTooLargeError, EmptyFileError
"""

from __future__ import annotations

from core.config import MAX_UPLOAD_MB

GENERIC_MESSAGE = "Ocorreu um erro ao processar o PDF."


class ExtractionError(Exception):
    status_code = 502
    user_message_text = GENERIC_MESSAGE

    @property
    def user_message(self) -> str:
        return self.user_message_text


class MissingCredentialError(ExtractionError):
    status_code = 500
    user_message_text = "Erro de configuração: API Key não encontrada."


class MalformedResponseError(ExtractionError):
    user_message_text = (
        "O arquivo é muito complexo ou extenso, e a resposta foi interrompida. "
        "Tente cortar o PDF apenas nas páginas de interesse."
    )


class EmptyResponseError(ExtractionError):
    user_message_text = (
        "A IA retornou uma resposta vazia. O documento pode conter apenas "
        "imagens não legíveis ou o modelo bloqueou o conteúdo."
    )


class GatewayError(ExtractionError):
    """Provider failure with no specific meaning; its own message is shown."""

    @property
    def user_message(self) -> str:
        return str(self) or GENERIC_MESSAGE


# ------------------------------------------------------------
# Intake
# ------------------------------------------------------------

class IntakeError(ExtractionError):
    status_code = 400


class InvalidFileTypeError(IntakeError):
    status_code = 415
    user_message_text = "Por favor, envie apenas arquivos PDF."


class FileTooLargeError(IntakeError):
    status_code = 413
    user_message_text = f"O arquivo é muito grande. O limite é {MAX_UPLOAD_MB}MB."


class EmptyFileError(IntakeError):
    user_message_text = "O arquivo enviado está vazio."


def to_user_message(exc: BaseException) -> str:
    """Text shown to the user for any failure during an analysis."""
    if isinstance(exc, ExtractionError):
        return exc.user_message
    return str(exc) or GENERIC_MESSAGE
