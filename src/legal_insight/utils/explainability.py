"""Explainability utilities for bail decisions.

Every decision is fully explained by its evidence trail and the two weighted
scores; this module turns those into a short sentence for display.
"""
from __future__ import annotations

import re
from typing import Any, Dict, List

from legal_insight.schemas import BailDecision

_DETAIL_RE = re.compile(r"^Found (\d+) (\w+)\(s\) \(\+([\d.]+)\)$")


def key_factors(decision: BailDecision) -> List[Dict[str, Any]]:
    """Structured view of the evidence trail, excluding the base standing line."""
    factors: List[Dict[str, Any]] = []
    for detail in decision.evidence_log:
        m = _DETAIL_RE.match(detail)
        if not m:
            continue
        factors.append({
            'feature': m.group(2),
            'count': int(m.group(1)),
            'points': float(m.group(3)),
        })
    return factors


def format_explanation(decision: BailDecision) -> str:
    """Format a human-readable explanation string."""
    head = f"{decision.outcome} ({decision.confidence:.0f}% confidence) as a {decision.case_type} matter"
    factors = key_factors(decision)
    if not factors:
        return f"{head}; no objective evidence markers were found."
    factors.sort(key=lambda f: f['points'], reverse=True)
    terms = ", ".join(f"{f['feature']} x{f['count']}" for f in factors[:3])
    return f"{head}, driven by {terms}."


__all__ = ['key_factors', 'format_explanation']
