"""Lexical bias normalisation applied before any keyword scoring."""
from __future__ import annotations

import re

BIAS_LEXICON = (
    "horrible", "evil", "malicious", "disgusting", "shameful",
    "luckily", "unfortunately", "obviously", "clearly",
)

_BIAS_RE = re.compile(r"\b(?:" + "|".join(BIAS_LEXICON) + r")\b", re.IGNORECASE)
_WS_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lowercase, blank out loaded words and collapse whitespace."""
    clean = _BIAS_RE.sub(" ", (text or "").lower())
    return _WS_RE.sub(" ", clean).strip()
