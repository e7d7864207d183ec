"""Data validation functions."""

import duckdb


def validate_store(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate integrity of the synced asset data."""
    issues = []
    stats = {}

    stats["assets"] = conn.execute("SELECT COUNT(*) FROM asset").fetchone()[0]
    stats["asset_events"] = conn.execute("SELECT COUNT(*) FROM asset_event").fetchone()[0]
    stats["asset_issues"] = conn.execute("SELECT COUNT(*) FROM asset_issue").fetchone()[0]
    stats["staff"] = conn.execute("SELECT COUNT(*) FROM staff").fetchone()[0]

    if stats["assets"] == 0:
        issues.append("No assets found")
    if stats["staff"] == 0:
        issues.append("No staff found")

    orphan_events = conn.execute(
        """
        SELECT COUNT(*) FROM asset_event e
        LEFT JOIN asset a ON a.id = e.asset_id
        WHERE a.id IS NULL
        """
    ).fetchone()[0]
    stats["orphan_events"] = orphan_events
    if orphan_events > 0:
        issues.append(f"{orphan_events} events reference unknown assets")

    orphan_issues = conn.execute(
        """
        SELECT COUNT(*) FROM asset_issue i
        LEFT JOIN asset a ON a.id = i.asset_id
        WHERE a.id IS NULL
        """
    ).fetchone()[0]
    stats["orphan_issues"] = orphan_issues
    if orphan_issues > 0:
        issues.append(f"{orphan_issues} issues reference unknown assets")

    inverted = conn.execute("SELECT COUNT(*) FROM asset_issue WHERE resolved_at < reported_at").fetchone()[0]
    if inverted > 0:
        issues.append(f"{inverted} issues resolved before they were reported")

    unpriced = conn.execute("SELECT COUNT(*) FROM asset WHERE purchase_price IS NULL").fetchone()[0]
    stats["unpriced_assets"] = unpriced

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
