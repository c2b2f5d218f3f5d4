"""Notable metadata-block parser and Obsidian front-matter generator.

Notable stores note properties in a leading ``---`` block::

    ---
    title: My Note
    created: 2020-01-01T10:00:00.000Z
    favorited: true
    tags: [Notebooks/Work, ideas]
    attachments: [photo.png]
    ---

Parsing is deliberately regex-based rather than YAML: values are taken
verbatim from the rest of the line and a key that appears more than once
keeps its *last* value.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from notable2obsidian.entry import OPTIONAL_KEYS, Properties

NEWLINE = "\n"
DEFAULT_ATTACHMENTS_DIR = "attachments"

# Leading metadata block, non-greedy up to the first closing delimiter
_SECTION_RE = re.compile(r"^---(.*?)---", re.DOTALL)
_STRING_RE = re.compile(r"(title|created|modified): ([^\n]+)", re.IGNORECASE)
_BOOLEAN_RE = re.compile(r"(deleted|favorited): ([^\n]+)", re.IGNORECASE)
_LIST_RE = re.compile(r"(tags|attachments): \[([^\]]+)\]", re.IGNORECASE)


def _scan(pattern: re.Pattern[str], block: str) -> list[tuple[str, str]]:
    """Return every ``(key, raw_value)`` occurrence in document order."""
    return [(m.group(1).lower(), m.group(2)) for m in pattern.finditer(block)]


def _last_wins(occurrences: list[tuple[str, Any]]) -> dict[str, Any]:
    folded: dict[str, Any] = {}
    for key, value in occurrences:
        folded[key] = value
    return folded


def extract_properties(data: str) -> Properties:
    """Parse the leading metadata block of *data*.

    Text without a block yields default :class:`Properties`.
    """
    result = Properties()
    match = _SECTION_RE.match(data)
    if not match:
        return result

    block = match.group(0)
    strings = _last_wins(_scan(_STRING_RE, block))
    booleans = _last_wins([(k, v == "true") for k, v in _scan(_BOOLEAN_RE, block)])
    lists = _last_wins(
        [(k, [s.strip() for s in v.split(",")]) for k, v in _scan(_LIST_RE, block)]
    )

    for key, value in {**strings, **booleans, **lists}.items():
        setattr(result, key, value)
        if key in OPTIONAL_KEYS:
            result.present.add(key)
    return result


def remove_properties_section(data: str) -> str:
    """Strip the leading metadata block and surrounding whitespace."""
    return _SECTION_RE.sub("", data.strip(), count=1).strip()


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def generate_properties_section(
    properties: Properties | Mapping[str, Any],
    attachments_dir: str = DEFAULT_ATTACHMENTS_DIR,
) -> str:
    """Render Obsidian front-matter for *properties*, or ``""`` when empty.

    ``title`` and ``deleted`` are never written.  Attachment names are
    re-rooted under *attachments_dir*.
    """
    props = properties.to_dict() if isinstance(properties, Properties) else properties

    lines = [f"{key}: {_format_value(props[key])}" for key in OPTIONAL_KEYS if key in props]
    result = NEWLINE.join(lines)
    if result:
        result += NEWLINE

    tags = props.get("tags") or []
    if tags:
        result += f"tags: [{', '.join(tags)}]{NEWLINE}"

    attachments = props.get("attachments") or []
    if attachments:
        joined = ", ".join(f"{attachments_dir}/{name}" for name in attachments)
        result += f"attachments: [{joined}]{NEWLINE}"

    return f"---{NEWLINE}{result}---{NEWLINE}" if result else ""
