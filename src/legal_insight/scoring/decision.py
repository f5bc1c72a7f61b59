"""Decision aggregation for the bail-outcome risk engine.

final_score = 0.65 * ml_probability + 0.35 * evidence_score, compared against
a threshold that depends on the detected domain:

    Criminal with a grave-offence marker  -> 0.65
    Procedural                            -> 0.45
    anything else                         -> 0.55

Confidence is mapped into [65, 95] for either outcome.
"""
from __future__ import annotations

import re
from typing import List, Tuple

from legal_insight.schemas import PartyEntities

GRANTED = "GRANTED"
DISMISSED = "DISMISSED"

ML_WEIGHT = 0.65
EVIDENCE_WEIGHT = 0.35

DEFAULT_THRESHOLD = 0.55
SEVERE_CRIMINAL_THRESHOLD = 0.65
PROCEDURAL_THRESHOLD = 0.45

CONFIDENCE_FLOOR = 0.65
CONFIDENCE_SPAN = 0.30

SEVERE_OFFENCE_RE = re.compile(r"murder|rape|narcotics|terror|302|376", re.IGNORECASE)

# ASCII word boundaries, so "José" yields "Jos"
ENTITY_RE = re.compile(r"\b[A-Z][a-z]+\b", re.ASCII)
ENTITY_STOP_WORDS = frozenset({"The", "A", "Court", "Judge", "He", "She", "They", "It", "This", "That"})


def select_threshold(case_type: str, text: str) -> float:
    if case_type == "Criminal" and SEVERE_OFFENCE_RE.search(text or ""):
        return SEVERE_CRIMINAL_THRESHOLD
    if case_type == "Procedural":
        return PROCEDURAL_THRESHOLD
    return DEFAULT_THRESHOLD


def combine_scores(ml_probability: float, evidence_score: float) -> float:
    return round(ml_probability * ML_WEIGHT + evidence_score * EVIDENCE_WEIGHT, 4)


def compute_confidence(outcome: str, final_score: float) -> float:
    if outcome == GRANTED:
        return round((CONFIDENCE_FLOOR + final_score * CONFIDENCE_SPAN) * 100, 4)
    return round((CONFIDENCE_FLOOR + (1 - final_score) * CONFIDENCE_SPAN) * 100, 4)


def decide(ml_probability: float, evidence_score: float, threshold: float) -> Tuple[str, float, float]:
    """Return (outcome, confidence, final_score)."""
    final_score = combine_scores(ml_probability, evidence_score)
    outcome = GRANTED if final_score >= threshold else DISMISSED
    return outcome, compute_confidence(outcome, final_score), final_score


def candidate_entities(raw_text: str) -> List[str]:
    seen = set()
    names: List[str] = []
    for word in ENTITY_RE.findall(raw_text or ""):
        if word in ENTITY_STOP_WORDS or word in seen:
            continue
        seen.add(word)
        names.append(word)
    return names


def extract_entities(raw_text: str) -> PartyEntities:
    """Display labels for the two sides, read from the un-normalised text."""
    names = candidate_entities(raw_text)
    defaults = PartyEntities()
    return PartyEntities(
        petitioner=names[0] if len(names) > 0 else defaults.petitioner,
        respondent=names[1] if len(names) > 1 else defaults.respondent,
    )

__all__ = [
    'GRANTED', 'DISMISSED', 'select_threshold', 'combine_scores', 'compute_confidence',
    'decide', 'extract_entities', 'candidate_entities'
]
