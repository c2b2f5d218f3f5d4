"""Collect Notable notes from a directory tree, keyed by title."""

from __future__ import annotations

import sys
from pathlib import Path

from notable2obsidian.config import MigrationConfig
from notable2obsidian.entry import Entry
from notable2obsidian.parser import extract_properties, remove_properties_section


def read_notable(
    notable_dir: Path,
    results: dict[str, Entry] | None = None,
    config: MigrationConfig | None = None,
) -> dict[str, Entry]:
    """Walk *notable_dir* depth-first and cache every non-deleted note.

    *results* is the accumulator shared by the recursive calls.  A note tagged
    ``Notebooks/<name>`` is relocated to ``<dir>/<name>/<file>`` and loses that
    tag.  Read errors propagate.
    """
    notable_dir = Path(notable_dir)
    results = {} if results is None else results
    config = config or MigrationConfig()
    notebook_re = config.notebook_re

    for path in sorted(notable_dir.iterdir()):
        if path.is_dir():
            read_notable(path, results, config)
            continue

        print(f'* Caching "{path}"...')
        data = path.read_text(encoding="utf-8", errors="replace")
        properties = extract_properties(data)
        if properties.deleted:
            continue

        full_path = path
        notebook = next((t for t in properties.tags if notebook_re.match(t)), None)
        if notebook is not None:
            properties.tags.remove(notebook)
            folder = notebook_re.sub("", notebook).strip("/")
            full_path = notable_dir / folder / path.name

        previous = results.get(properties.title)
        if previous is not None:
            print(
                f'[warn] Duplicate title "{properties.title}": {path} replaces {previous.full_path}',
                file=sys.stderr,
            )

        results[properties.title] = Entry(
            title=properties.title,
            full_path=full_path,
            data=remove_properties_section(data),
            properties=properties,
        )
    return results
