# services/intake.py
# -*- coding: utf-8 -*-
"""
Upload checks before a PDF is sent to the model.

- validate_pdf_upload(file_name, content_type, data):
    type (application/pdf), non-empty, size limit (MAX_UPLOAD_BYTES)
- read_upload(stream):
    bounded read, never more than the limit + 1 byte
- encode_base64(data):
    bare base64 payload (no "data:...;base64," prefix)
"""

import base64
from typing import BinaryIO, Optional

from core.config import MAX_UPLOAD_BYTES
from core.logging import logger
from atos.errors import EmptyFileError, FileTooLargeError, InvalidFileTypeError

PDF_MIME = "application/pdf"

# Browsers / curl sometimes send these for a .pdf file
_GENERIC_MIMES = ("", "application/octet-stream", "binary/octet-stream")


def is_pdf(file_name: str, content_type: Optional[str]) -> bool:
    ctype = (content_type or "").split(";")[0].strip().lower()
    if ctype == PDF_MIME:
        return True
    return ctype in _GENERIC_MIMES and (file_name or "").lower().endswith(".pdf")


def validate_pdf_upload(file_name: str, content_type: Optional[str], data: bytes) -> None:
    if not is_pdf(file_name, content_type):
        logger.warning(f"[intake] rejected {file_name!r}: content type {content_type!r}")
        raise InvalidFileTypeError(f"not a PDF: {content_type}")

    if not data:
        raise EmptyFileError(f"empty upload: {file_name}")

    if len(data) > MAX_UPLOAD_BYTES:
        logger.warning(f"[intake] rejected {file_name!r}: {len(data)} bytes > {MAX_UPLOAD_BYTES}")
        raise FileTooLargeError(f"{len(data)} bytes")


def read_upload(stream: BinaryIO) -> bytes:
    """
    Read at most MAX_UPLOAD_BYTES + 1 bytes.
    One byte over the limit is enough for validate_pdf_upload to reject the file,
    so an oversized upload is never held in memory in full.
    """
    return stream.read(MAX_UPLOAD_BYTES + 1)


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
