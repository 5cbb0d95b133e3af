# core/config.py
# -*- coding: utf-8 -*-

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env (must run first)
load_dotenv()

# --------------------------------
# Paths / log directory
# --------------------------------

# Project root
BASE_DIR = Path(__file__).resolve().parent.parent

# JSONL event logs, one file per analysis session
LOG_DIR = Path(os.getenv("LOG_DIR", str(BASE_DIR / "data" / "logs")))
LOG_DIR.mkdir(parents=True, exist_ok=True)

# --------------------------------
# OpenAI (PDF extraction)
# --------------------------------

# Checked at call time, not here, so the engine and the API can start without it
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

EXTRACTION_MODEL = os.getenv("OPENAI_EXTRACTION_MODEL", "gpt-4o")
EXTRACTION_TEMPERATURE = 0.1  # low creativity, stay faithful to the document
EXTRACTION_MAX_TOKENS = int(os.getenv("OPENAI_EXTRACTION_MAX_TOKENS", "16384"))

# Large gazettes can take up to ~2 minutes
REQUEST_TIMEOUT_SECONDS = float(os.getenv("OPENAI_TIMEOUT_SECONDS", "120"))

# --------------------------------
# Upload limits
# --------------------------------

MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "30"))
MAX_UPLOAD_BYTES = MAX_UPLOAD_MB * 1024 * 1024

# --------------------------------
# Logging
# --------------------------------

# DEBUG / INFO / WARNING / ERROR
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Per-session JSONL event files (turn off on read-only deployments)
EVENT_LOG_ENABLED = os.getenv("EVENT_LOG_ENABLED", "true").lower() == "true"

# --------------------------------
# Analysis sessions (memory)
# --------------------------------

# Finished / idle sessions beyond this count are evicted, oldest first
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "500"))
