"""Entry and Properties dataclasses for collected Notable notes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

#: Optional keys that are only re-emitted when they appeared in the source.
OPTIONAL_KEYS = ("favorited", "created", "modified")


@dataclass
class Properties:
    """Metadata parsed from a Notable ``---`` header block."""

    title: str = ""
    created: str = ""
    modified: str = ""
    deleted: bool = False
    favorited: bool = False
    tags: list[str] = field(default_factory=list)
    attachments: list[str] = field(default_factory=list)
    #: Keys actually found in the source block
    present: set[str] = field(default_factory=set)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "title": self.title,
            "deleted": self.deleted,
            "tags": self.tags,
            "attachments": self.attachments,
        }
        for key in OPTIONAL_KEYS:
            if key in self.present:
                result[key] = getattr(self, key)
        return result


@dataclass
class Entry:
    """A single Notable note waiting to be written into the vault."""

    title: str
    full_path: Path
    data: str
    properties: Properties = field(default_factory=Properties)
