import json
import logging
import re
import shutil
from datetime import datetime
from pathlib import Path, PurePosixPath
from typing import Any


logger = logging.getLogger(__name__)

_SLUG_STRIP_RE = re.compile(r"[^a-z0-9\s_-]")
_SLUG_SPACE_RE = re.compile(r"[\s_]+")
_SLUG_DASH_RE = re.compile(r"-{2,}")


def now_stamp() -> str:
    return datetime.now().strftime("%Y%m%d-%H%M%S")


def slugify(text: str, default: str = "") -> str:
    slug = _SLUG_STRIP_RE.sub("", text.strip().lower())
    slug = _SLUG_SPACE_RE.sub("-", slug)
    slug = _SLUG_DASH_RE.sub("-", slug).strip("-")
    return slug or default


def loads_json_safe(text: str) -> Any | None:
    try:
        return json.loads(text)
    except (TypeError, ValueError) as exc:
        logger.debug("Ignoring undecodable JSON: %s", exc)
        return None


def dumps_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def join_sections(parts: list[str]) -> str:
    return "\n\n".join(part for part in parts if part)


def backup_file(path: Path) -> Path:
    backup_path = Path(f"{path}.bak-{now_stamp()}")
    shutil.copy2(path, backup_path)
    return backup_path


def is_under(path: Path, root: Path) -> bool:
    try:
        path.resolve().relative_to(root.resolve())
        return True
    except (OSError, ValueError):
        return False


def normalize_relative_path(text: str) -> str:
    """Drop ``./`` segments and repeated slashes; backslashes become ``/``."""
    return PurePosixPath(text.replace("\\", "/")).as_posix()


def is_safe_relative_path(text: str) -> bool:
    if not text or text.startswith(("/", "\\")):
        return False
    candidate = Path(text)
    if candidate.is_absolute() or candidate.drive:
        return False
    return ".." not in candidate.parts


def human_size(size: int) -> str:
    if size < 1024:
        return f"{size}B"
    return f"{size / 1024:.1f}KB"


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text
