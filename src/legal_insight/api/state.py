from typing import Any, Dict
import threading
import time

import psutil

# Decision Stats (for monitoring)
decision_stats: Dict[str, Any] = {
    'total_decisions': 0,
    'granted': 0,
    'dismissed': 0,
    'last_decision_time': None,
    'avg_confidence': 0.0,
    '_confidence_sum': 0.0,
}
decision_stats_lock = threading.Lock()

extraction_stats: Dict[str, Any] = {
    'total_extractions': 0,
    'last_extraction_time': None,
}

# Metrics
REQUEST_COUNT: Any = None
REQUEST_LATENCY: Any = None
DECISIONS_TOTAL: Any = None


def update_decision_stats(outcome: str, confidence: float) -> None:
    """Update decision statistics for monitoring."""
    with decision_stats_lock:
        total = int(decision_stats.get('total_decisions') or 0) + 1
        decision_stats['total_decisions'] = total
        decision_stats['last_decision_time'] = time.time()
        key = 'granted' if outcome == 'GRANTED' else 'dismissed'
        decision_stats[key] = int(decision_stats.get(key) or 0) + 1
        conf_sum = float(decision_stats.get('_confidence_sum') or 0.0) + confidence
        decision_stats['_confidence_sum'] = conf_sum
        decision_stats['avg_confidence'] = conf_sum / total


def update_extraction_stats() -> None:
    with decision_stats_lock:
        extraction_stats['total_extractions'] = int(extraction_stats.get('total_extractions') or 0) + 1
        extraction_stats['last_extraction_time'] = time.time()


def record_decision(endpoint: str, outcome: str, confidence: float) -> None:
    update_decision_stats(outcome, confidence)
    if DECISIONS_TOTAL is not None:
        DECISIONS_TOTAL.labels(endpoint, outcome).inc()


def get_memory_usage() -> Dict[str, Any]:
    """Get current memory usage information."""
    try:
        process = psutil.Process()
        mem_info = process.memory_info()
        return {
            'rss_mb': round(mem_info.rss / (1024 * 1024), 2),
            'vms_mb': round(mem_info.vms / (1024 * 1024), 2),
            'percent': round(process.memory_percent(), 2),
        }
    except psutil.Error as e:
        return {'error': str(e)}
