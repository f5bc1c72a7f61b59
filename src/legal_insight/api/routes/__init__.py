from legal_insight.api.routes.extraction import extraction_bp
from legal_insight.api.routes.bail import bail_bp
from legal_insight.api.routes.monitoring import monitoring_bp

__all__ = ['extraction_bp', 'bail_bp', 'monitoring_bp']
