"""
Text cleanup utilities for text pulled out of resume PDFs.
"""

from __future__ import annotations

import re
import unicodedata

# Characters PDF text layers commonly emit in place of plain ASCII
_REPLACEMENTS = {
    "\u2019": "'",   # right single quote
    "\u2018": "'",   # left single quote
    "\u201c": '"',   # left double quote
    "\u201d": '"',   # right double quote
    "\u2013": "-",   # en-dash
    "\u2014": "-",   # em-dash
    "\u2026": "...", # ellipsis
    "\u00a0": " ",   # non-breaking space
    "\u200b": "",    # zero-width space
    "\ufeff": "",    # BOM
    "\u00ad": "",    # soft hyphen
    "\uf0b7": "\u2022",  # private-use bullet from Word exports
}


def normalize_text(text: str) -> str:
    """Normalize unicode and whitespace in raw extracted text."""
    text = unicodedata.normalize("NFKC", text)

    for old, new in _REPLACEMENTS.items():
        text = text.replace(old, new)

    # Drop control characters except newline / tab
    text = "".join(ch for ch in text if ch in "\n\t" or unicodedata.category(ch)[0] != "C")

    # Collapse multiple spaces into one
    text = re.sub(r"[ \t]+", " ", text)

    # Strip leading/trailing whitespace per line
    lines = [line.strip() for line in text.splitlines()]
    text = "\n".join(lines)

    # Collapse 3+ consecutive newlines into 2
    text = re.sub(r"\n{3,}", "\n\n", text)

    return text.strip()


def has_text(text: str | None) -> bool:
    """True when there is something besides whitespace to send to the model."""
    return bool(text and text.strip())
