import logging
from flask import Blueprint, jsonify
from flasgger import swag_from
from pydantic import ValidationError

from legal_insight.api import dependencies, models, state
from legal_insight.api.extensions import limiter
from legal_insight.parsing.statute_extractor import extract_clean_laws, extract_statutes

logger = logging.getLogger(__name__)
extraction_bp = Blueprint('extraction', __name__)


@extraction_bp.route("/api/extract", methods=["POST"])
@limiter.limit("30/minute")
@swag_from({
    'tags': ['extract'],
    'consumes': ['application/json'],
    'parameters': [{
        'name': 'body', 'in': 'body', 'required': True,
        'schema': {
            'type': 'object',
            'properties': {
                'text': {'type': 'string', 'description': 'Judgment text (at least 50 characters)'},
            },
            'required': ['text']
        }
    }],
    'responses': {
        200: {'description': 'Header metadata, statutory citations and document structure'},
        400: {'description': 'Invalid request'}
    }
})
def extract_document():
    """Extract header metadata, laws and facts / issues / arguments from judgment text."""
    auth = dependencies.require_api_key()
    if auth:
        return auth
    raw, err = dependencies.json_object_body()
    if err:
        return err
    try:
        parsed = models.ExtractRequest(**raw)
    except ValidationError as ve:
        return dependencies.validation_error(ve)

    result = dependencies.run_extract(parsed.text)
    state.update_extraction_stats()
    logger.info(f"Extracted document: {len(result.laws)} laws, {len(result.struct.issues)} issues")
    return jsonify(result.model_dump())


@extraction_bp.route("/api/extract/laws", methods=["POST"])
@limiter.limit("60/minute")
def extract_laws():
    """Statutory citations only, with the raw span each one was read from."""
    auth = dependencies.require_api_key()
    if auth:
        return auth
    raw, err = dependencies.json_object_body()
    if err:
        return err
    try:
        parsed = models.LawsRequest(**raw)
    except ValidationError as ve:
        return dependencies.validation_error(ve)

    refs = extract_statutes(parsed.text)
    laws = extract_clean_laws(parsed.text)
    return jsonify({"laws": laws, "references": refs, "count": len(laws)})
