import os
from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")

MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', '2097152'))  # 2 MB default
API_KEY = os.getenv("API_KEY", "")
RATE_LIMIT_STORAGE_URI = os.getenv("RATE_LIMIT_STORAGE_URI", "memory://")
RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "1") == "1"
SENTRY_DSN = os.getenv("SENTRY_DSN", "")
SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0"))
SENTRY_PROFILES_SAMPLE_RATE = float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "0.0"))
APP_ENV = os.getenv("APP_ENV", "production")
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Input limits (document text is usually extracted from a PDF upstream)
MIN_DOCUMENT_LENGTH = int(os.getenv("MIN_DOCUMENT_LENGTH", "50"))
MAX_TEXT_LENGTH = int(os.getenv("MAX_TEXT_LENGTH", "500000"))
BATCH_SIZE_LIMIT = int(os.getenv("BATCH_SIZE_LIMIT", "50"))

# Result caching (pipelines are pure, so identical text -> identical result)
ENABLE_RESULT_CACHE = os.getenv("ENABLE_RESULT_CACHE", "1") == "1"
RESULT_CACHE_SIZE = int(os.getenv("RESULT_CACHE_SIZE", "256"))

# Response Format Customization
RESPONSE_FORMAT = os.getenv("RESPONSE_FORMAT", "full")  # full, minimal, detailed
RESPONSE_FORMATS = ("minimal", "full", "detailed")
