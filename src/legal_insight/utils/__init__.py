"""Utility modules for the legal insight engine."""

from legal_insight.utils.explainability import (
    key_factors,
    format_explanation,
)

from legal_insight.utils.performance import (
    create_cached_pipeline,
    get_cache_stats,
    get_confidence_language,
    get_confidence_level,
    format_decision,
    format_minimal_response,
    format_full_response,
    format_detailed_response,
    CONFIDENCE_THRESHOLDS,
    CONFIDENCE_LANGUAGE,
)

__all__ = [
    # Explainability
    "key_factors",
    "format_explanation",
    # Performance
    "create_cached_pipeline",
    "get_cache_stats",
    "get_confidence_language",
    "get_confidence_level",
    "format_decision",
    "format_minimal_response",
    "format_full_response",
    "format_detailed_response",
    "CONFIDENCE_THRESHOLDS",
    "CONFIDENCE_LANGUAGE",
]
