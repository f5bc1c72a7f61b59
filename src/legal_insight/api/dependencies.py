import logging
from typing import Any, Callable, Dict, Optional, Tuple

from flask import request, jsonify
from pydantic import ValidationError

from legal_insight.api import config
from legal_insight.engine import assess_bail_risk, extract_document_structure
from legal_insight.schemas import BailDecision, DocumentExtraction
from legal_insight.utils.performance import create_cached_pipeline, get_cache_stats

logger = logging.getLogger("api")

extract_pipeline: Callable[[str], DocumentExtraction] = extract_document_structure
bail_pipeline: Callable[[str], BailDecision] = assess_bail_risk


def init_pipelines() -> None:
    """Install the (optionally cached) pipelines used by the routes."""
    global extract_pipeline, bail_pipeline
    if config.ENABLE_RESULT_CACHE:
        extract_pipeline = create_cached_pipeline(extract_document_structure, maxsize=config.RESULT_CACHE_SIZE)
        bail_pipeline = create_cached_pipeline(assess_bail_risk, maxsize=config.RESULT_CACHE_SIZE)
        logger.info(f"[api] Result cache enabled (maxsize={config.RESULT_CACHE_SIZE})")
    else:
        extract_pipeline = extract_document_structure
        bail_pipeline = assess_bail_risk
        logger.info("[api] Result cache disabled")


def run_extract(text: str) -> DocumentExtraction:
    return extract_pipeline(text)


def run_bail(text: str) -> BailDecision:
    return bail_pipeline(text)


def cache_stats() -> Dict[str, Any]:
    return {
        'extract': get_cache_stats(extract_pipeline),
        'bail': get_cache_stats(bail_pipeline),
    }


def require_api_key():
    if config.API_KEY:
        key = request.headers.get("X-API-Key", "")
        if key != config.API_KEY:
            return jsonify({"error": "Unauthorized"}), 401
    return None


def json_object_body() -> Tuple[Optional[Dict[str, Any]], Any]:
    """Return (body, None) for a JSON object body, else (None, error_response)."""
    raw = request.get_json(silent=True)
    if raw is None:
        return None, (jsonify({"error": "Expected application/json body"}), 400)
    if not isinstance(raw, dict):
        return None, (jsonify({"error": "Body must be a JSON object"}), 400)
    return raw, None


def validation_error(ve: ValidationError):
    details = ve.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"error": "validation_failed", "details": details}), 400
