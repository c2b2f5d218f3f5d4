"""MigrationReport: a queryable summary of what a migration run produced.

Uses DuckDB (in-memory) over the :class:`~notable2obsidian.migrator.MigrationResult`
rows and returns :mod:`polars` DataFrames.

Usage::

    results = migrate_to(entries, notable_dir, vault_dir)
    with MigrationReport(results) as report:
        report.notebook_counts()
        report.write(Path("migration.csv"))
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import duckdb
import polars as pl
import yaml

if TYPE_CHECKING:
    from notable2obsidian.migrator import MigrationResult


class MigrationReport:
    """In-memory DuckDB table of migrated notes."""

    def __init__(self, results: list["MigrationResult"]) -> None:
        self.conn: duckdb.DuckDBPyConnection = duckdb.connect(":memory:")
        self._create_schema()
        self._load(results)

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def _create_schema(self) -> None:
        self.conn.execute("""
            CREATE OR REPLACE TABLE migrated (
                title       VARCHAR,
                source      VARCHAR,
                destination VARCHAR,
                notebook    VARCHAR,
                tags        VARCHAR[],
                links       INTEGER,
                attachments INTEGER
            )
        """)

    def _load(self, results: list["MigrationResult"]) -> None:
        rows = [
            (
                r.title,
                str(r.source),
                str(r.destination),
                r.notebook,
                r.tags,
                r.links,
                r.attachments,
            )
            for r in results
        ]
        if rows:
            self.conn.executemany("INSERT INTO migrated VALUES (?,?,?,?,?,?,?)", rows)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def table(self) -> pl.DataFrame:
        """Return one row per migrated note, ordered by destination."""
        return self.conn.execute("SELECT * FROM migrated ORDER BY destination").pl()

    def notebook_counts(self) -> pl.DataFrame:
        """Return a notebook → note count table (``""`` is the vault root)."""
        return self.conn.execute(
            """
            SELECT notebook, COUNT(*) AS note_count
            FROM migrated
            GROUP BY notebook
            ORDER BY note_count DESC, notebook
            """
        ).pl()

    def tag_counts(self) -> pl.DataFrame:
        """Return a tag → count table sorted by frequency."""
        return self.conn.execute(
            """
            SELECT tag, COUNT(*) AS note_count
            FROM (SELECT unnest(tags) AS tag FROM migrated)
            GROUP BY tag
            ORDER BY note_count DESC, tag
            """
        ).pl()

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def write(self, path: Path) -> Path:
        """Write :meth:`table` to *path*; the format follows the file suffix.

        Supported: ``.csv`` (tags joined with ``", "``), ``.parquet``,
        ``.json`` and ``.yaml`` / ``.yml``.
        """
        path = Path(path)
        df = self.table()
        suffix = path.suffix.lower()
        if suffix == ".csv":
            df.with_columns(pl.col("tags").list.join(", ")).write_csv(path)
        elif suffix == ".parquet":
            df.write_parquet(path)
        elif suffix == ".json":
            df.write_json(path)
        elif suffix in {".yaml", ".yml"}:
            path.write_text(
                yaml.safe_dump(df.to_dicts(), sort_keys=False, allow_unicode=True),
                encoding="utf-8",
            )
        else:
            raise ValueError(f"Unsupported report format: {path.suffix or path.name}")
        return path

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "MigrationReport":
        return self

    def __exit__(self, *_: object) -> None:
        self.close()
