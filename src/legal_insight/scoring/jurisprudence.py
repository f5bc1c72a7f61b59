"""Legal-domain classification and relief-probability heuristics.

analyze_jurisprudence() scores five domains by keyword density:

    score = keyword_hits / (word_count * 0.1 + 1)

Keywords are matched as plain substrings, so "arrest" also fires on
"arrested" and "it" fires inside "with".

predict_prob() starts from 0.5 and applies a fixed, ordered list of additive
rules keyed on substring presence, clamped to [0, 1].
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Tuple

from legal_insight.schemas import JurisprudenceClassification

logger = logging.getLogger(__name__)

DEFAULT_CASE_TYPE = "Procedural"

# Table order is the tie-break order
CONCEPTS: Dict[str, str] = {
    "Contractual": "agreement breach terms signed obligation commercial dispute",
    "Criminal": "assault theft fraud harm police illegal murder weapon arrest bail ipc crpc",
    "Procedural": "jurisdiction limitation notice filed court delay petition appeal stay",
    "Family": "divorce custody maintenance marriage alimony cruelty domestic violence",
    "Cyber": "hacking phishing data fraud online identity theft it act",
}

CASE_TYPES = tuple(CONCEPTS)


def word_count(text: str) -> int:
    # Same counting as a plain whitespace split that keeps empty edge tokens
    return len(re.split(r"\s+", (text or "").lower()))


def select_case_type(scores: Dict[str, float]) -> str:
    """Argmax over table order; Procedural when nothing stands out."""
    values = list(scores.values())
    if not values or len(set(values)) == 1:
        return DEFAULT_CASE_TYPE
    best = max(values)
    for concept in CASE_TYPES:
        if scores.get(concept) == best:
            return concept
    return DEFAULT_CASE_TYPE


def analyze_jurisprudence(text: str) -> JurisprudenceClassification:
    lowered = (text or "").lower()
    denominator = word_count(lowered) * 0.1 + 1
    scores: Dict[str, float] = {}
    for concept, keywords in CONCEPTS.items():
        hits = sum(1 for kw in keywords.split(" ") if kw in lowered)
        scores[concept] = hits / denominator
    case_type = select_case_type(scores)
    logger.debug(f"Classified as {case_type}: {scores}")
    return JurisprudenceClassification(case_type=case_type, scores=scores)


@dataclass(frozen=True)
class ProbabilityRule:
    terms: Tuple[str, ...]
    delta: float
    require_all: bool = False

    def applies(self, lowered: str) -> bool:
        check = all if self.require_all else any
        return check(term in lowered for term in self.terms)


BASE_PROBABILITY = 0.5

PROBABILITY_RULES: Tuple[ProbabilityRule, ...] = (
    # relief likely
    ProbabilityRule(("first-time", "no criminal"), 0.20),
    ProbabilityRule(("delay", "fir"), 0.15, require_all=True),
    ProbabilityRule(("medical", "illness"), 0.20),
    ProbabilityRule(("co-accused", "bail"), 0.20, require_all=True),
    ProbabilityRule(("civil", "contract"), 0.15),
    ProbabilityRule(("settlement", "compromise"), 0.20),
    ProbabilityRule(("juvenile", "minor"), 0.20),
    # relief unlikely
    ProbabilityRule(("murder", "302"), -0.30),
    ProbabilityRule(("rape", "376"), -0.30),
    ProbabilityRule(("ndps", "narcotics"), -0.25),
    ProbabilityRule(("habitual", "repeat offender"), -0.30),
    ProbabilityRule(("absconding", "flight risk"), -0.25),
    ProbabilityRule(("threat", "witness"), -0.20),
    ProbabilityRule(("terror", "uapa"), -0.40),
)


def predict_prob(text: str, case_type: str = DEFAULT_CASE_TYPE) -> float:
    """Heuristic probability of relief. case_type does not change the result."""
    lowered = (text or "").lower()
    prob = BASE_PROBABILITY
    for rule in PROBABILITY_RULES:
        if rule.applies(lowered):
            prob += rule.delta
    # Deltas carry two decimals, so 0.5 + 0.2 + 0.2 must come out as 0.9
    return max(0.0, min(1.0, round(prob, 4)))

__all__ = [
    'CONCEPTS', 'CASE_TYPES', 'DEFAULT_CASE_TYPE', 'PROBABILITY_RULES', 'ProbabilityRule',
    'analyze_jurisprudence', 'predict_prob', 'select_case_type', 'word_count'
]
