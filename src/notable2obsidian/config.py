"""Migration settings, optionally loaded from a TOML file.

Example ``notable2obsidian.toml``::

    [migration]
    attachments_dir = "attachments"     # vault folder attachments live in
    notebook_prefix = "Notebooks/"      # tag prefix that selects a subfolder
"""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from notable2obsidian.parser import DEFAULT_ATTACHMENTS_DIR

DEFAULT_NOTEBOOK_PREFIX = "Notebooks/"


@dataclass
class MigrationConfig:
    attachments_dir: str = DEFAULT_ATTACHMENTS_DIR
    notebook_prefix: str = DEFAULT_NOTEBOOK_PREFIX

    def __post_init__(self) -> None:
        self.attachments_dir = self.attachments_dir.strip("/")
        if not self.attachments_dir:
            raise ValueError("attachments_dir must not be empty")
        if not self.notebook_prefix:
            raise ValueError("notebook_prefix must not be empty")

    @property
    def notebook_re(self) -> re.Pattern[str]:
        return re.compile("^" + re.escape(self.notebook_prefix))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MigrationConfig":
        section = data.get("migration", data)
        return cls(
            attachments_dir=section.get("attachments_dir", DEFAULT_ATTACHMENTS_DIR),
            notebook_prefix=section.get("notebook_prefix", DEFAULT_NOTEBOOK_PREFIX),
        )


def load_config(path: Path) -> MigrationConfig:
    """Read a :class:`MigrationConfig` from a ``.toml`` file."""
    with open(path, "rb") as fh:
        data = tomllib.load(fh)
    return MigrationConfig.from_dict(data)
