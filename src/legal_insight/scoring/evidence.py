"""Evidence strength scoring.

Counts objective evidentiary signals in a (normalised) case narrative:
statutory citations, money, dates, documents, witnesses and mitigating
circumstances. Each feature adds min(count * weight, FEATURE_CAP) on top of a
base standing of 0.30; the total is capped at 1.0.

The details list is the audit trail shown to the user, one line per feature
that fired, in table order. A details list holding only the base line means
no objective evidence was found.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Pattern, Tuple

from legal_insight.schemas import EvidenceAssessment

logger = logging.getLogger(__name__)

BASE_SCORE = 0.30
BASE_DETAIL = "Base legal standing (+0.30)"
FEATURE_CAP = 0.4
MAX_SCORE = 1.0


@dataclass(frozen=True)
class EvidenceFeature:
    name: str
    pattern: Pattern[str]
    weight: float

    def count(self, text: str) -> int:
        return sum(1 for _ in self.pattern.finditer(text))


EVIDENCE_FEATURES: Tuple[EvidenceFeature, ...] = (
    EvidenceFeature(
        "citation",
        re.compile(r"(section|article|act|clause|ipc|crpc|cpc|437|438|439)\s+\d*", re.IGNORECASE),
        0.20,
    ),
    EvidenceFeature(
        "monetary",
        re.compile(r"(\$|rs\.|rupees|eur|usd|amount|payment|surety|bond)\s?[\d,]*", re.IGNORECASE),
        0.10,
    ),
    EvidenceFeature(
        "date",
        re.compile(
            r"(\d{1,2}(st|nd|rd|th)?\s+(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)\w*\s+\d{4}"
            r"|\d{1,2}[/-]\d{1,2}[/-]\d{2,4})",
            re.IGNORECASE,
        ),
        0.10,
    ),
    EvidenceFeature(
        "document",
        re.compile(
            r"(agreement|contract|deed|receipt|email|invoice|report|affidavit|petition|application|chargesheet|fir|memo)",
            re.IGNORECASE,
        ),
        0.20,
    ),
    EvidenceFeature(
        "witness",
        re.compile(r"(witness|testimony|testified|statement|evidence|proof|alibi|corroboration)", re.IGNORECASE),
        0.20,
    ),
    EvidenceFeature(
        "mitigation",
        re.compile(r"(first-time|parity|medical|delay|cooperation|no\s+antecedents|permanent\s+resident)", re.IGNORECASE),
        0.20,
    ),
)


def calculate_strength(text: str) -> EvidenceAssessment:
    text = text or ""
    score = BASE_SCORE
    details: List[str] = [BASE_DETAIL]

    for feature in EVIDENCE_FEATURES:
        count = feature.count(text)
        if not count:
            continue
        points = min(count * feature.weight, FEATURE_CAP)
        score += points
        details.append(f"Found {count} {feature.name}(s) (+{points:.2f})")

    score = min(round(score, 4), MAX_SCORE)
    logger.debug(f"Evidence score {score:.2f} from {len(details) - 1} feature(s)")
    return EvidenceAssessment(score=score, details=details)


def has_objective_evidence(details: List[str]) -> bool:
    """True when the trail holds more than the base standing line."""
    return len(details) > 1

__all__ = ['EVIDENCE_FEATURES', 'EvidenceFeature', 'calculate_strength', 'has_objective_evidence', 'BASE_SCORE']
