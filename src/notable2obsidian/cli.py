"""Command-line entry point.

Usage::

    notable2obsidian <notable_dir> <vault_dir>
    notable2obsidian notes/ vault/ --config notable2obsidian.toml
    notable2obsidian notes/ vault/ --dry-run --report migration.csv
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from notable2obsidian.collector import read_notable
from notable2obsidian.config import MigrationConfig, load_config
from notable2obsidian.migrator import migrate_to
from notable2obsidian.report import MigrationReport


def valid_directories(paths: list[Path | None]) -> bool:
    """Return True when every path is given and is an existing directory."""
    return all(path is not None and path.is_dir() for path in paths)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notable2obsidian",
        description="Migrate a Notable notes directory into an Obsidian vault.",
    )
    parser.add_argument("notable_dir", type=Path, help="Notable notes directory")
    parser.add_argument("vault_dir", type=Path, help="Obsidian vault directory")
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="TOML file with a [migration] table",
    )
    parser.add_argument(
        "--report", "-r",
        type=Path,
        help="Write a migration report (.csv, .parquet, .json, .yaml)",
    )
    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Convert notes and log links without writing any files",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not valid_directories([args.notable_dir, args.vault_dir]):
        parser.error("notable_dir and vault_dir must both be existing directories")

    try:
        config = load_config(args.config) if args.config else MigrationConfig()
        entries = read_notable(args.notable_dir, config=config)
        results = migrate_to(
            entries, args.notable_dir, args.vault_dir, config, dry_run=args.dry_run
        )
        if args.report:
            with MigrationReport(results) as report:
                report.write(args.report)
    except (OSError, ValueError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1

    verb = "Checked" if args.dry_run else "Migrated"
    print(f"{verb} {len(results)} notes for: {args.vault_dir}/")
    return 0


if __name__ == "__main__":
    sys.exit(main())
