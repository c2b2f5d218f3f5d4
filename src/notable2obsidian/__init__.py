"""Notable → Obsidian vault migration library."""

from notable2obsidian.collector import read_notable
from notable2obsidian.config import MigrationConfig, load_config
from notable2obsidian.entry import Entry, Properties
from notable2obsidian.links import rewrite_links
from notable2obsidian.migrator import MigrationResult, migrate_to
from notable2obsidian.parser import (
    extract_properties,
    generate_properties_section,
    remove_properties_section,
)
from notable2obsidian.report import MigrationReport

__all__ = [
    "Entry",
    "Properties",
    "MigrationConfig",
    "load_config",
    "extract_properties",
    "generate_properties_section",
    "remove_properties_section",
    "rewrite_links",
    "read_notable",
    "migrate_to",
    "MigrationResult",
    "MigrationReport",
]
