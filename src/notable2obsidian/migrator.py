"""Write collected Notable entries into an Obsidian vault."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from notable2obsidian.config import MigrationConfig
from notable2obsidian.entry import Entry
from notable2obsidian.links import ATTACHMENT, NOTE, LinkRewrite, rewrite_links
from notable2obsidian.parser import NEWLINE, generate_properties_section


@dataclass
class MigrationResult:
    """Outcome of migrating one entry."""

    title: str
    source: Path
    destination: Path
    notebook: str   # vault-relative directory, "" at the vault root
    tags: list[str] = field(default_factory=list)
    links: int = 0
    attachments: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "source": str(self.source),
            "destination": str(self.destination),
            "notebook": self.notebook,
            "tags": self.tags,
            "links": self.links,
            "attachments": self.attachments,
        }


def vault_relative_path(entry: Entry, notable_dir: Path) -> Path:
    """Path of *entry* relative to the Notable root, notebook folder included."""
    return entry.full_path.relative_to(notable_dir)


def render_entry(entry: Entry, note_dir: str, config: MigrationConfig) -> tuple[str, list[LinkRewrite]]:
    """Return the Obsidian text for *entry* and the link rewrites applied."""
    body, rewrites = rewrite_links(entry.data, note_dir, config.attachments_dir)
    header = generate_properties_section(entry.properties, config.attachments_dir)
    return f"{header}{NEWLINE}{body}", rewrites


def migrate_to(
    entries: dict[str, Entry],
    notable_dir: Path,
    vault_dir: Path,
    config: MigrationConfig | None = None,
    *,
    dry_run: bool = False,
) -> list[MigrationResult]:
    """Convert every entry and write it below *vault_dir*.

    Existing files are overwritten.  With *dry_run* nothing is written.
    """
    notable_dir = Path(notable_dir)
    vault_dir = Path(vault_dir)
    config = config or MigrationConfig()
    results: list[MigrationResult] = []

    for title, entry in entries.items():
        rel_path = vault_relative_path(entry, notable_dir)
        destination = vault_dir / rel_path
        note_dir = "" if rel_path.parent == Path(".") else rel_path.parent.as_posix()

        print(f'* Processing "{title}" @ {entry.full_path} -> {destination}...')

        text, rewrites = render_entry(entry, note_dir, config)
        for rw in rewrites:
            label = "Internal link" if rw.kind == NOTE else "Attachment"
            print(f"  > {label}: {rw.original} -> {rw.replacement}")

        if not dry_run:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(text, encoding="utf-8")

        results.append(
            MigrationResult(
                title=title,
                source=entry.full_path,
                destination=destination,
                notebook=note_dir,
                tags=list(entry.properties.tags),
                links=sum(1 for rw in rewrites if rw.kind == NOTE),
                attachments=sum(1 for rw in rewrites if rw.kind == ATTACHMENT),
            )
        )
    return results
