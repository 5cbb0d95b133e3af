# routers/analysis.py
import re
import uuid
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from atos import run_analysis
from atos.builders import build_group_view
from atos.errors import ExtractionError, to_user_message
from core.logging import logger
from schemas import AnalysisResponse
from services.analysis_state import ANALYSIS_SESSIONS, AnalysisSession
from services.intake import encode_base64, read_upload, validate_pdf_upload

router = APIRouter()

# session ids also name the JSONL log file
_SESSION_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")

SUPERSEDED_MESSAGE = "Esta análise foi substituída por um envio mais recente."

UNEXPECTED_ERROR_STATUS = 502


def _check_session_id(session_id: str) -> str:
    if not _SESSION_ID_RE.match(session_id):
        raise HTTPException(status_code=400, detail="session_id inválido.")
    return session_id


def _record_failure(session_id: str, generation: int, exc: Exception) -> None:
    if not ANALYSIS_SESSIONS.fail(session_id, generation, to_user_message(exc)):
        raise HTTPException(status_code=409, detail=SUPERSEDED_MESSAGE)


def to_response(session: AnalysisSession) -> AnalysisResponse:
    data = session.data
    return AnalysisResponse(
        session_id=session.session_id,
        generation=session.generation,
        status=session.status,
        file_name=session.file_name,
        summary=data.summary if data else None,
        total_acts=len(data.acts) if data else 0,
        groups=[build_group_view(g) for g in session.groups],
        error=session.error,
    )


@router.post(
    "/api/analysis",
    response_model=AnalysisResponse,
    summary="Analyze a Diário Oficial PDF",
    tags=["analysis"],
)
def analyze_gazette(
    file: UploadFile = File(..., description="Diário Oficial em PDF"),
    session_id: Optional[str] = Form(default=None),
):
    """
    - PDF check (type / size) -> AI extraction -> grouping by organization
    - SAD and Atos da Governadora come first and are marked auto_expand
    - may take up to ~2 minutes for large gazettes
    """
    session_id = _check_session_id(session_id) if session_id else str(uuid.uuid4())
    file_name = file.filename or "diario.pdf"

    logger.info(f"=== 🟦 analysis request: {file_name} (session {session_id}) ===")
    generation = ANALYSIS_SESSIONS.start(session_id, file_name)

    try:
        data = read_upload(file.file)
        validate_pdf_upload(file_name, file.content_type, data)
        result = run_analysis(encode_base64(data), file_name=file_name)
    except ExtractionError as e:
        logger.warning(f"[analysis] {session_id} failed: {type(e).__name__}: {e}")
        _record_failure(session_id, generation, e)
        raise HTTPException(status_code=e.status_code, detail=to_user_message(e))
    except Exception as e:
        # anything else still ends the analysis; its message goes to the user as-is
        logger.exception(f"[analysis] {session_id} unexpected failure: {e}")
        _record_failure(session_id, generation, e)
        raise HTTPException(status_code=UNEXPECTED_ERROR_STATUS, detail=to_user_message(e))

    if not ANALYSIS_SESSIONS.complete(session_id, generation, result.response, result.groups):
        raise HTTPException(status_code=409, detail=SUPERSEDED_MESSAGE)

    logger.info(f"=== 🟩 analysis done: {len(result.response.acts)} acts (session {session_id}) ===")
    return to_response(ANALYSIS_SESSIONS.get(session_id))


@router.get(
    "/api/analysis/{session_id}",
    response_model=AnalysisResponse,
    summary="Current state of an analysis session",
    tags=["analysis"],
)
def get_analysis(session_id: str):
    return to_response(ANALYSIS_SESSIONS.get(_check_session_id(session_id)))


@router.delete(
    "/api/analysis/{session_id}",
    response_model=AnalysisResponse,
    summary="New file: abandon the current analysis and go back to IDLE",
    tags=["analysis"],
)
def reset_analysis(session_id: str):
    return to_response(ANALYSIS_SESSIONS.reset(_check_session_id(session_id)))
