import logging
import time
from typing import Any, Dict, List

from flask import Blueprint, jsonify
from flasgger import swag_from
from pydantic import ValidationError

from legal_insight.api import config, dependencies, models, state
from legal_insight.api.extensions import limiter
from legal_insight.scoring.decision import (
    DEFAULT_THRESHOLD, PROCEDURAL_THRESHOLD, SEVERE_CRIMINAL_THRESHOLD, ML_WEIGHT, EVIDENCE_WEIGHT,
)
from legal_insight.scoring.evidence import BASE_SCORE, EVIDENCE_FEATURES, FEATURE_CAP
from legal_insight.scoring.fairness import BIAS_LEXICON
from legal_insight.scoring.jurisprudence import BASE_PROBABILITY, CONCEPTS, DEFAULT_CASE_TYPE, PROBABILITY_RULES
from legal_insight.utils.performance import format_decision

logger = logging.getLogger(__name__)
bail_bp = Blueprint('bail', __name__)


@bail_bp.route("/api/bail/assess", methods=["POST"])
@limiter.limit("30/minute")
@swag_from({
    'tags': ['bail'],
    'consumes': ['application/json'],
    'parameters': [{
        'name': 'body', 'in': 'body', 'required': True,
        'schema': {
            'type': 'object',
            'properties': {
                'text': {'type': 'string', 'description': 'Free-text case narrative'},
                'format': {'type': 'string', 'enum': ['minimal', 'full', 'detailed']}
            },
            'required': ['text']
        }
    }],
    'responses': {
        200: {'description': 'GRANTED / DISMISSED with confidence and evidence trail'},
        400: {'description': 'Invalid request'}
    }
})
def assess():
    auth = dependencies.require_api_key()
    if auth:
        return auth
    raw, err = dependencies.json_object_body()
    if err:
        return err
    try:
        parsed = models.BailRequest(**raw)
    except ValidationError as ve:
        return dependencies.validation_error(ve)

    start_time = time.perf_counter()
    decision = dependencies.run_bail(parsed.text)
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    state.record_decision('assess', decision.outcome, decision.confidence)
    logger.info(f"Bail assessment: {decision.outcome} ({decision.confidence:.1f}%) type={decision.case_type}")

    response = format_decision(decision, parsed.text, parsed.response_format())
    response["timing_ms"] = round(elapsed_ms, 2)
    return jsonify(response)


@bail_bp.route("/api/bail/batch", methods=["POST"])
@limiter.limit("10/minute")
@swag_from({
    'tags': ['bail'],
    'consumes': ['application/json'],
    'parameters': [{
        'name': 'body', 'in': 'body', 'required': True,
        'schema': {
            'type': 'object',
            'properties': {
                'cases': {
                    'type': 'array',
                    'items': {'type': 'string'},
                    'description': 'Case narratives to assess'
                },
                'format': {
                    'type': 'string',
                    'enum': ['minimal', 'full', 'detailed'],
                    'description': 'Response format level'
                }
            },
            'required': ['cases']
        }
    }],
    'responses': {
        200: {'description': 'Batch assessment results'},
        400: {'description': 'Invalid request'},
        413: {'description': 'Too many cases in batch'}
    }
})
def assess_batch():
    """
    Assess multiple case narratives in a single request.

    Invalid entries are reported in 'errors' by index; the rest are assessed.
    """
    auth = dependencies.require_api_key()
    if auth:
        return auth
    raw, err = dependencies.json_object_body()
    if err:
        return err

    cases = raw.get('cases', [])
    if not isinstance(cases, list):
        return jsonify({"error": "'cases' must be an array"}), 400

    if len(cases) > config.BATCH_SIZE_LIMIT:
        return jsonify({
            "error": f"Batch size exceeds limit of {config.BATCH_SIZE_LIMIT}",
            "submitted": len(cases),
            "limit": config.BATCH_SIZE_LIMIT
        }), 413

    response_format = raw.get('format', 'minimal')
    if response_format not in config.RESPONSE_FORMATS:
        response_format = 'minimal'

    start_time = time.perf_counter()
    results: List[Dict[str, Any]] = []
    errors: List[Dict[str, Any]] = []

    for idx, case in enumerate(cases):
        if not isinstance(case, str):
            errors.append({"index": idx, "error": "Case must be a string"})
            continue
        try:
            parsed = models.BailRequest(text=case)
        except ValidationError as ve:
            errors.append({
                "index": idx,
                "error": "validation_failed",
                "details": ve.errors(include_url=False, include_context=False, include_input=False),
            })
            continue
        decision = dependencies.run_bail(parsed.text)
        state.record_decision('batch', decision.outcome, decision.confidence)
        results.append({"index": idx, **format_decision(decision, parsed.text, response_format)})

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    return jsonify({
        "results": results,
        "errors": errors,
        "count": len(results),
        "error_count": len(errors),
        "timing_ms": round(elapsed_ms, 2),
        "avg_ms_per_case": round(elapsed_ms / len(cases), 2) if cases else 0
    })


@bail_bp.route("/api/bail/rules", methods=["GET"])
def rules():
    """The fixed rule tables behind every assessment, for auditing."""
    return jsonify({
        "bias_lexicon": list(BIAS_LEXICON),
        "evidence": {
            "base_score": BASE_SCORE,
            "feature_cap": FEATURE_CAP,
            "features": [
                {"name": f.name, "pattern": f.pattern.pattern, "weight": f.weight}
                for f in EVIDENCE_FEATURES
            ],
        },
        "jurisprudence": {
            "concepts": CONCEPTS,
            "default_case_type": DEFAULT_CASE_TYPE,
        },
        "probability": {
            "base": BASE_PROBABILITY,
            "rules": [
                {"terms": list(r.terms), "delta": r.delta, "require_all": r.require_all}
                for r in PROBABILITY_RULES
            ],
        },
        "decision": {
            "ml_weight": ML_WEIGHT,
            "evidence_weight": EVIDENCE_WEIGHT,
            "thresholds": {
                "default": DEFAULT_THRESHOLD,
                "severe_criminal": SEVERE_CRIMINAL_THRESHOLD,
                "procedural": PROCEDURAL_THRESHOLD,
            },
        },
    })
