"""
PDF Service — turn an uploaded resume PDF into plain text.

Responsibilities:
  • Decode base64 data URIs sent by the browser (data:application/pdf;base64,...)
  • Extract raw text from PDF bytes (pdfplumber)
  • Clean up extracted text

Nothing here raises to the caller: any failure yields "" (or b"" when decoding),
and the analysis carries on with an empty resume.
"""

from __future__ import annotations

import base64
import binascii
import logging
from io import BytesIO

import pdfplumber

from skillmapper.utils.text_cleanup import normalize_text

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF"


# ── Public API ───────────────────────────────────────────────────────────────


def decode_data_uri(data_uri: str | None) -> bytes:
    """
    Decode a base64 PDF payload.

    Accepts a full data URI ("data:application/pdf;base64,<data>") or bare
    base64. Returns b"" when the payload is missing or cannot be decoded.
    """
    if not data_uri or not data_uri.strip():
        logger.warning("No PDF payload provided")
        return b""

    payload = data_uri.strip()
    if payload.startswith("data:"):
        header, sep, payload = payload.partition(",")
        if not sep or not payload:
            logger.warning("No base64 data found in data URI")
            return b""
        if ";base64" not in header:
            logger.warning(f"Data URI is not base64-encoded: {header[:50]}")
            return b""

    # Browsers and mail clients may wrap base64 across lines
    payload = "".join(payload.split())
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.warning(f"Could not decode base64 PDF payload: {e}")
        return b""


def extract_text(pdf_bytes: bytes | None) -> str:
    """Extract normalized text from PDF bytes. Returns "" on any failure."""
    if not pdf_bytes:
        logger.warning("Empty PDF payload, nothing to extract")
        return ""

    try:
        raw_text = _extract_pdf_text(pdf_bytes)
    except Exception as e:
        logger.error(f"Error parsing PDF ({len(pdf_bytes)} bytes): {e}")
        return ""

    text = normalize_text(raw_text)
    if not text:
        logger.warning("PDF parsed but contained no text (image-only scan?)")
    else:
        logger.info(f"Extracted {len(text)} chars of resume text")
    return text


def extract_text_from_data_uri(data_uri: str | None) -> str:
    """decode_data_uri() + extract_text()."""
    return extract_text(decode_data_uri(data_uri))


def looks_like_pdf(file_bytes: bytes) -> bool:
    """Cheap signature check used by the upload route before parsing."""
    return file_bytes[:1024].lstrip().startswith(PDF_MAGIC)


# ── Text Extraction ──────────────────────────────────────────────────────────


def _extract_pdf_text(file_bytes: bytes) -> str:
    """Extract text from a PDF file using pdfplumber."""
    text_parts: list[str] = []
    with pdfplumber.open(BytesIO(file_bytes)) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    return "\n\n".join(text_parts)
