"""
Terminal logger and per-session JSONL event log tests.
"""

import json
import logging
import uuid
from datetime import datetime, timedelta

from core import logging as core_logging
from services.analysis_state import AnalysisStore


def _events(session_id):
    with core_logging.event_log_path(session_id).open(encoding="utf-8") as f:
        return [json.loads(line) for line in f]


class TestEventLog:

    def test_event_written_as_jsonl(self):
        sid = f"log-{uuid.uuid4().hex}"
        core_logging.log_event(sid, "analysis_start", generation=3, file_name="diário.pdf")

        (event,) = _events(sid)
        assert event["type"] == "analysis_start"
        assert event["session_id"] == sid
        assert (event["generation"], event["file_name"]) == (3, "diário.pdf")
        assert datetime.fromisoformat(event["timestamp"]).utcoffset() == timedelta(0)

    def test_store_events_follow_session(self):
        sid = f"log-{uuid.uuid4().hex}"
        store = AnalysisStore()
        gen = store.start(sid, "a.pdf")
        store.fail(sid, gen, "Ocorreu um erro ao processar o PDF.")
        store.reset(sid)

        assert [e["type"] for e in _events(sid)] == ["analysis_start", "analysis_error", "analysis_reset"]
        assert store.get(sid).updated_at.utcoffset() == timedelta(0)

    def test_disabled(self, monkeypatch):
        monkeypatch.setattr(core_logging, "EVENT_LOG_ENABLED", False)
        sid = f"log-{uuid.uuid4().hex}"
        core_logging.log_event(sid, "analysis_start")
        assert not core_logging.event_log_path(sid).exists()

    def test_write_failure_does_not_raise(self, monkeypatch, tmp_path):
        # a directory cannot be opened for append
        monkeypatch.setattr(core_logging, "event_log_path", lambda session_id: tmp_path)
        core_logging.log_event("qualquer", "analysis_start")


class TestLogger:

    def test_level_from_name(self):
        log = core_logging.configure_logger("diario_atos.tests", "DEBUG")
        assert log.level == logging.DEBUG

        log = core_logging.configure_logger("diario_atos.tests", "WARNING")
        assert log.level == logging.WARNING
        assert len(log.handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        assert core_logging._resolve_level("VERBOSE") == logging.INFO
