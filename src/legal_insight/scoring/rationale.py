"""Prompt construction for the optional natural-language rationale step.

The engine never calls a text generator itself. Callers that have one hand it
the prompt built here and fall back to RATIONALE_UNAVAILABLE when it fails, so
the deterministic decision is always renderable on its own.
"""
from __future__ import annotations

from legal_insight.schemas import BailDecision

RATIONALE_UNAVAILABLE = "AI Analysis unavailable."


def build_rationale_prompt(decision: BailDecision, clean_text: str) -> str:
    return "\n".join([
        "Analyze this bail case.",
        f"Facts: {clean_text}",
        f"Detected Domain: {decision.case_type}",
        f"Predicted Verdict: {decision.outcome}",
        f"Confidence: {decision.confidence:.1f}%",
        f"Evidence Score: {decision.final_score:.2f}",
        "",
        "Provide:",
        "1. A simplified summary for a citizen.",
        "2. Legal rationale (Ratio Decidendi).",
    ])
