"""Asset model."""

ASSET_DDL = """
CREATE TABLE IF NOT EXISTS asset (
    id VARCHAR PRIMARY KEY,
    name VARCHAR,
    category VARCHAR,
    department VARCHAR,
    purchase_price DOUBLE,
    purchase_date TIMESTAMP,
    available_status VARCHAR,
    current_condition VARCHAR,
    last_used_at TIMESTAMP,
    created_at TIMESTAMP
)
"""

ASSET_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_asset_department ON asset(department)",
    "CREATE INDEX IF NOT EXISTS idx_asset_category ON asset(category)",
]
