"""Asset issue model."""

ASSET_ISSUE_DDL = """
CREATE TABLE IF NOT EXISTS asset_issue (
    id VARCHAR PRIMARY KEY,
    asset_id VARCHAR NOT NULL,
    issue_type VARCHAR,
    reported_at TIMESTAMP NOT NULL,
    resolved_at TIMESTAMP
)
"""

ASSET_ISSUE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_asset_issue_asset ON asset_issue(asset_id)",
]
