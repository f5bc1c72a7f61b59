import os
import platform
from flask import Blueprint, jsonify, Response

from legal_insight.api import config, state, dependencies
from legal_insight.scoring.jurisprudence import CASE_TYPES

monitoring_bp = Blueprint('monitoring', __name__)

@monitoring_bp.route("/metrics", methods=["GET"])
def metrics():
    from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)

@monitoring_bp.route("/version", methods=["GET"])
def version():
    return jsonify({
        "version": config.APP_VERSION,
        "env": config.APP_ENV,
        "commit": os.getenv("GIT_COMMIT"),
        "python": platform.python_version(),
        "case_types": list(CASE_TYPES),
    })

@monitoring_bp.route("/api/version", methods=["GET"])
def api_version():
    return version()

@monitoring_bp.route("/api/health", methods=["GET"])
def health():
    try:
        decision = dependencies.run_bail("healthcheck")
        return jsonify({"status": "ok", "engine": decision.outcome in ("GRANTED", "DISMISSED")}), 200
    except Exception as e:
        return jsonify({"status": "error", "detail": str(e)}), 500

@monitoring_bp.route("/api/health/ready", methods=["GET"])
def health_ready():
    """Readiness probe - checks that both pipelines are installed."""
    checks = {
        'extract_pipeline': dependencies.extract_pipeline is not None,
        'bail_pipeline': dependencies.bail_pipeline is not None,
    }
    all_ready = all(checks.values())
    return jsonify({
        "ready": all_ready,
        "checks": checks
    }), 200 if all_ready else 503

@monitoring_bp.route("/api/health/live", methods=["GET"])
def health_live():
    """Liveness probe - minimal check that service is running."""
    return jsonify({"alive": True}), 200

@monitoring_bp.route("/api/stats/memory", methods=["GET"])
def memory_stats():
    """Return current memory usage and result cache statistics."""
    return jsonify({
        "memory": state.get_memory_usage(),
        "cache": dependencies.cache_stats(),
    })

@monitoring_bp.route("/api/stats/decisions", methods=["GET"])
def decision_stats():
    """Return decision statistics for monitoring."""
    with state.decision_stats_lock:
        stats = state.decision_stats.copy()
        extraction = state.extraction_stats.copy()
    # Remove internal tracking fields
    stats.pop('_confidence_sum', None)
    stats['grant_rate'] = (stats['granted'] / stats['total_decisions']) if stats['total_decisions'] else None
    stats['extractions'] = extraction
    return jsonify(stats)
