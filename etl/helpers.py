"""ETL helper functions."""

import duckdb
import polars as pl


def replace_table(conn: duckdb.DuckDBPyConnection, table: str, df: pl.DataFrame) -> None:
    """Replace a table's rows with a DataFrame in one transaction."""
    view = f"{table}_df"
    conn.execute("BEGIN TRANSACTION")
    try:
        conn.execute(f"DELETE FROM {table}")
        conn.register(view, df)
        conn.execute(f"INSERT INTO {table} SELECT * FROM {view}")
        conn.unregister(view)
        conn.execute("COMMIT")
    except duckdb.Error:
        conn.execute("ROLLBACK")
        raise
