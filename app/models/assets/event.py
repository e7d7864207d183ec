"""Asset event (audit trail) model."""

ASSET_EVENT_DDL = """
CREATE TABLE IF NOT EXISTS asset_event (
    id VARCHAR PRIMARY KEY,
    asset_id VARCHAR NOT NULL,
    event_type VARCHAR NOT NULL,
    from_value VARCHAR,
    to_value VARCHAR,
    at TIMESTAMP NOT NULL
)
"""

ASSET_EVENT_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_asset_event_asset ON asset_event(asset_id)",
    "CREATE INDEX IF NOT EXISTS idx_asset_event_at ON asset_event(at)",
]
