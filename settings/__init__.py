"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("ASSET_DB_PATH", "assets.duckdb")

# Logging
LOG_DIR = Path(os.getenv("ASSET_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("ASSET_LOG_LEVEL", "INFO")

# Analytics cache
CACHE_TTL = int(os.getenv("ANALYTICS_CACHE_TTL", 15 * 60))
CACHE_MAX_ENTRIES = int(os.getenv("ANALYTICS_CACHE_MAX_ENTRIES", 100))

# Record store fetch limits
ASSET_LIMIT = 5000
EVENT_LIMIT = 10000
ISSUE_LIMIT = 5000

# Document store API (sync only)
STORE_ENDPOINT = os.getenv("STORE_ENDPOINT", "https://cloud.appwrite.io/v1")
STORE_PROJECT_ID = os.getenv("STORE_PROJECT_ID", "")
STORE_API_KEY = os.getenv("STORE_API_KEY", "")
STORE_DATABASE_ID = os.getenv("STORE_DATABASE_ID", "")
STORE_TIMEOUT = 60

# Sync
MAX_CONCURRENT = 10
PAGE_SIZE = 100

# API
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", 8000))

# Document store collections (ids as configured in the store)
STORE_COLLECTIONS = {
    "assets": os.getenv("STORE_ASSETS_COLLECTION", "68a2f5600012a7780a8a"),
    "asset_events": os.getenv("STORE_ASSET_EVENTS_COLLECTION", "68a3041a001bb5265a23"),
    "asset_issues": os.getenv("STORE_ASSET_ISSUES_COLLECTION", "68a2fffe003661c07e78"),
    "staff": os.getenv("STORE_STAFF_COLLECTION", "68a2f49900122499000a"),
}
