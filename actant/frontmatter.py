"""Parse and serialize YAML frontmatter blocks on Markdown documents."""

from __future__ import annotations

import logging
import re
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*\n?", re.DOTALL)


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (metadata, body); malformed YAML yields empty metadata."""
    match = _FRONTMATTER_RE.match(text)
    if not match:
        return {}, text
    try:
        raw = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as exc:
        logger.debug("Ignoring malformed frontmatter: %s", exc)
        return {}, text
    if not isinstance(raw, dict):
        return {}, text
    return raw, text[match.end() :]


def render_frontmatter(fields: dict[str, Any], body: str) -> str:
    fm = {key: value for key, value in fields.items() if value not in (None, "", [])}
    parts: list[str] = []
    if fm:
        parts.append("---")
        parts.append(
            yaml.safe_dump(
                fm, default_flow_style=False, sort_keys=False, allow_unicode=True
            ).rstrip()
        )
        parts.append("---")
        parts.append("")
    parts.append(body)
    return "\n".join(parts)
