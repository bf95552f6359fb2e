# src/digest_kit/text/normalize.py

"""Deterministic text passes applied before detection and summarization.

Pure functions. No state, no I/O.
"""

import re

# Transliteration glyphs as they come out of PDF font encodings for IAST
# text, mapped to plain English spellings (Gétä -> Gita, Kåñëa -> Krishna).
_DIACRITICS = str.maketrans(
    {
        "Ç": "Sh",  # ś
        "ç": "sh",
        "ñ": "sh",  # ṣ
        "Å": "Ri",  # ṛ
        "å": "ri",
        "ò": "d",  # ḍ
        "ö": "t",  # ṭ
        "ë": "n",  # ṇ
        "Ä": "A",  # ā
        "ä": "a",
        "É": "I",  # ī
        "é": "i",
        "Ü": "U",  # ū
        "ü": "u",
        "è": "e",
        "ì": "i",
        "à": "a",
    }
)

_LINE_BREAKS_RE = re.compile(r"\r\n?|\f")
_INLINE_SPACE_RE = re.compile(r"[ \t]+")
_EXCESS_NEWLINES_RE = re.compile(r"\n{4,}")
_PAGE_NUMBER_LINE_RE = re.compile(r"^\s*\d+\s*$", re.MULTILINE)


def normalize_diacritics(text: str) -> str:
    """Replace transliteration diacritics with ASCII equivalents.

    Single pass: replacement output is never re-substituted.
    """
    return text.translate(_DIACRITICS)


def clean_text(text: str) -> str:
    """Normalize whitespace in extracted text and drop page-number lines."""
    text = _LINE_BREAKS_RE.sub("\n", text)
    text = _INLINE_SPACE_RE.sub(" ", text)
    text = _EXCESS_NEWLINES_RE.sub("\n\n\n", text)
    text = _PAGE_NUMBER_LINE_RE.sub("", text)
    return text.strip()
