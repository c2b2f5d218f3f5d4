"""Notable → Obsidian link rewriting.

Two source forms are recognised:

- ``[Link Text](@note/relative/path.md)`` becomes ``[[dir/path]]`` or
  ``[[dir/path\\|Link Text]]``, where ``dir`` is the vault directory of the
  note being migrated.
- ``[](@attachment/relative/path)`` becomes ``[[attachments/relative/path]]``.

Matches are found in a single pass over the untouched body and then spliced in
by offset, so a replacement can never be re-matched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePosixPath

from notable2obsidian.parser import DEFAULT_ATTACHMENTS_DIR

_PATH_CHARS = r"[\w\s/\-+.:]+"

_LINK_RE = re.compile(
    rf"\[(?P<text>[\w\s]+)\]\(@note/(?P<note>{_PATH_CHARS})\.md\)"
    rf"|\[\]\(@attachment/(?P<attachment>{_PATH_CHARS})\)"
)

NOTE = "note"
ATTACHMENT = "attachment"


@dataclass(frozen=True)
class LinkRewrite:
    kind: str           # NOTE or ATTACHMENT
    start: int
    end: int
    original: str
    replacement: str


def note_link_target(note_dir: str, reference: str) -> str:
    """Join the migrating note's directory with *reference*'s base name."""
    name = PurePosixPath(reference).name
    if name.endswith(".md"):
        name = name[: -len(".md")]
    return f"{note_dir}/{name}" if note_dir else name


def find_link_rewrites(
    body: str,
    note_dir: str = "",
    attachments_dir: str = DEFAULT_ATTACHMENTS_DIR,
) -> list[LinkRewrite]:
    """Return every link in *body* together with its Obsidian replacement."""
    rewrites: list[LinkRewrite] = []
    for m in _LINK_RE.finditer(body):
        if m.group("note") is not None:
            text = m.group("text")
            target = note_link_target(note_dir, m.group("note"))
            title = "" if text == target else f"\\|{text}"
            rewrites.append(LinkRewrite(NOTE, m.start(), m.end(), m.group(0), f"[[{target}{title}]]"))
        else:
            target = f"{attachments_dir}/{m.group('attachment')}"
            rewrites.append(LinkRewrite(ATTACHMENT, m.start(), m.end(), m.group(0), f"[[{target}]]"))
    return rewrites


def apply_link_rewrites(body: str, rewrites: list[LinkRewrite]) -> str:
    """Splice non-overlapping *rewrites* into *body*."""
    parts: list[str] = []
    pos = 0
    for rw in sorted(rewrites, key=lambda r: r.start):
        if rw.start < pos:
            raise ValueError(f"Overlapping link rewrite at offset {rw.start}")
        parts.append(body[pos : rw.start])
        parts.append(rw.replacement)
        pos = rw.end
    parts.append(body[pos:])
    return "".join(parts)


def rewrite_links(
    body: str,
    note_dir: str = "",
    attachments_dir: str = DEFAULT_ATTACHMENTS_DIR,
) -> tuple[str, list[LinkRewrite]]:
    """Rewrite every Notable link in *body*; return the new text and the rewrites."""
    rewrites = find_link_rewrites(body, note_dir, attachments_dir)
    return apply_link_rewrites(body, rewrites), rewrites
