"""Performance utilities: result caching, confidence language, and response formatting."""

import functools
import logging
from typing import Any, Callable, Dict, Optional, TypeVar

from legal_insight.schemas import BailDecision
from legal_insight.scoring.evidence import has_objective_evidence
from legal_insight.scoring.fairness import normalize_text
from legal_insight.scoring.rationale import RATIONALE_UNAVAILABLE, build_rationale_prompt
from legal_insight.utils.explainability import format_explanation

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# LRU Caching for Pipeline Results
# =============================================================================

def create_cached_pipeline(
    pipeline_fn: Callable[[str], T],
    maxsize: int = 256
) -> Callable[[str], T]:
    """
    Wrap a pure text pipeline with LRU caching.

    Safe because both pipelines are deterministic and return frozen records.

    Args:
        pipeline_fn: extract_document_structure or assess_bail_risk
        maxsize: Maximum cache size (default 256)

    Returns:
        Cached version of the pipeline
    """
    @functools.lru_cache(maxsize=maxsize)
    def cached_pipeline(text: str) -> T:
        return pipeline_fn(text)

    return cached_pipeline


def get_cache_stats(cached_fn: Callable[..., Any]) -> Dict[str, Any]:
    """Get cache statistics from a cached function."""
    try:
        info = cached_fn.cache_info()  # type: ignore[attr-defined]
        return {
            "hits": info.hits,
            "misses": info.misses,
            "maxsize": info.maxsize or 0,
            "currsize": info.currsize
        }
    except AttributeError:
        return {"error": "Function is not cached"}


# =============================================================================
# Confidence Language Helper
# =============================================================================

# Decision confidence always lies in [65, 95]
CONFIDENCE_THRESHOLDS = {
    "high": 88.0,
    "moderate": 78.0,
    "low": 0.0
}

CONFIDENCE_LANGUAGE = {
    "high": {
        "level": "High",
        "description": "The rule signals point clearly in one direction.",
        "recommendation": "Useful as a first screen; confirm against the case record.",
    },
    "moderate": {
        "level": "Moderate",
        "description": "The rule signals lean one way but not decisively.",
        "recommendation": "Review the evidence trail before relying on this outcome.",
    },
    "low": {
        "level": "Low",
        "description": "The combined score sits close to the decision threshold.",
        "recommendation": "Treat as undecided; a lawyer should review the facts.",
    },
}


def get_confidence_level(confidence: Optional[float]) -> str:
    """Map confidence (percent) to categorical level."""
    if confidence is None:
        return "unknown"

    for level, threshold in CONFIDENCE_THRESHOLDS.items():
        if confidence >= threshold:
            return level
    return "low"


def get_confidence_language(confidence: Optional[float]) -> Dict[str, Any]:
    """
    Generate human-friendly confidence information.

    Args:
        confidence: Decision confidence in percent (65-95)

    Returns:
        Dictionary with level, description, recommendation and rounded score
    """
    level = get_confidence_level(confidence)

    if level == "unknown":
        return {
            "level": "Unknown",
            "description": "Confidence score not available.",
            "recommendation": "Unable to assess decision reliability.",
            "score": None,
        }

    base_info = CONFIDENCE_LANGUAGE[level]
    return {
        **base_info,
        "score": round(confidence or 0, 1),
    }


# =============================================================================
# Response Format Helpers
# =============================================================================

def format_minimal_response(decision: BailDecision) -> Dict[str, Any]:
    """Generate minimal response format for fast API responses."""
    return {
        "outcome": decision.outcome,
        "confidence": round(decision.confidence, 2),
        "case_type": decision.case_type,
    }


def format_full_response(decision: BailDecision) -> Dict[str, Any]:
    """Generate full response format: the complete decision record plus wording."""
    response: Dict[str, Any] = decision.model_dump()
    response["confidence_info"] = get_confidence_language(decision.confidence)
    response["explanation"] = format_explanation(decision)
    return response


def format_detailed_response(decision: BailDecision, raw_text: str) -> Dict[str, Any]:
    """Generate detailed response format with the rationale prompt and audit data."""
    response = format_full_response(decision)
    response["audit"] = {
        "normalized_text": normalize_text(raw_text),
        "objective_evidence": has_objective_evidence(decision.evidence_log),
        "margin": round(decision.final_score - decision.threshold, 4),
    }
    response["rationale_prompt"] = build_rationale_prompt(decision, response["audit"]["normalized_text"])
    response["rationale"] = RATIONALE_UNAVAILABLE
    return response


def format_decision(decision: BailDecision, raw_text: str, response_format: str) -> Dict[str, Any]:
    if response_format == "minimal":
        return format_minimal_response(decision)
    if response_format == "detailed":
        return format_detailed_response(decision, raw_text)
    return format_full_response(decision)
