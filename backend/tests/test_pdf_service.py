"""Tests for PDF decoding and text extraction. None of these may raise."""

from __future__ import annotations

import base64

from skillmapper.services.pdf_service import (
    decode_data_uri,
    extract_text,
    extract_text_from_data_uri,
    looks_like_pdf,
)
from skillmapper.utils.text_cleanup import has_text, normalize_text


def test_extract_text_from_real_pdf(sample_pdf: bytes) -> None:
    text = extract_text(sample_pdf)
    assert "Python" in text
    assert "Teamwork" in text


def test_extract_text_from_data_uri(sample_pdf: bytes) -> None:
    uri = "data:application/pdf;base64," + base64.b64encode(sample_pdf).decode()
    assert "SQL" in extract_text_from_data_uri(uri)


def test_garbage_bytes_give_empty_text() -> None:
    assert extract_text(b"definitely not a pdf") == ""


def test_truncated_pdf_gives_empty_text(sample_pdf: bytes) -> None:
    assert extract_text(sample_pdf[:40]) == ""


def test_empty_payload_gives_empty_text() -> None:
    assert extract_text(b"") == ""
    assert extract_text(None) == ""


def test_decode_bare_base64() -> None:
    assert decode_data_uri(base64.b64encode(b"%PDF-1.4").decode()) == b"%PDF-1.4"


def test_decode_line_wrapped_base64(sample_pdf: bytes) -> None:
    encoded = base64.encodebytes(sample_pdf).decode()
    assert "\n" in encoded
    assert decode_data_uri("data:application/pdf;base64," + encoded) == sample_pdf


def test_decode_data_uri_without_payload() -> None:
    assert decode_data_uri("data:application/pdf;base64,") == b""
    assert decode_data_uri("data:application/pdf;base64") == b""


def test_decode_rejects_non_base64_uri() -> None:
    assert decode_data_uri("data:text/plain,hello") == b""


def test_decode_invalid_base64() -> None:
    assert decode_data_uri("data:application/pdf;base64,@@not-base64@@") == b""


def test_decode_missing_uri() -> None:
    assert decode_data_uri(None) == b""
    assert decode_data_uri("   ") == b""


def test_looks_like_pdf(sample_pdf: bytes) -> None:
    assert looks_like_pdf(sample_pdf)
    assert not looks_like_pdf(b"PK\x03\x04 docx zip")


def test_normalize_text_cleans_pdf_artifacts() -> None:
    raw = "Jane\u00a0Doe  \n\n\n\n\u201cPython\u201d \u2013 SQL\u200b\x0c\n  Teamwork  "
    assert normalize_text(raw) == 'Jane Doe\n\n"Python" - SQL\nTeamwork'


def test_has_text() -> None:
    assert has_text("x")
    assert not has_text("  \n")
    assert not has_text(None)
