"""Discover agent configuration files under a project root."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePosixPath
from typing import Optional

from actant.errors import ScanRootError
from actant.models import AgentType, ScannedFile, ScanResult
from actant.registry import AGENT_FILE_PATTERNS, patterns_for
from actant.utils import is_under

logger = logging.getLogger(__name__)


def scan(root: Path | str, agent: AgentType | str) -> list[ScannedFile]:
    """Return the files matching ``agent``'s registry patterns, once per path."""
    root_path = _require_root(root)
    seen: set[str] = set()
    files: list[ScannedFile] = []
    for pattern in patterns_for(agent):
        for scanned in _resolve_pattern(root_path, pattern):
            if scanned.path in seen:
                continue
            seen.add(scanned.path)
            files.append(scanned)
    return files


def scan_auto(root: Path | str, parallel: bool = False) -> Optional[ScanResult]:
    """Scan every agent and keep the one with the most files.

    Ties go to the agent registered first. Returns None when nothing matched.
    """
    root_path = _require_root(root)
    agents = list(AGENT_FILE_PATTERNS)
    if parallel:
        with ThreadPoolExecutor(max_workers=len(agents)) as pool:
            results = list(pool.map(lambda agent: scan(root_path, agent), agents))
    else:
        results = [scan(root_path, agent) for agent in agents]

    best: Optional[ScanResult] = None
    for agent, files in zip(agents, results):
        if best is None or len(files) > len(best.files):
            best = ScanResult(agent_type=agent, files=files)
    if best is None or not best.files:
        return None
    return best


def scan_for_configs(
    root: Path | str, force_agent: AgentType | str | None = None
) -> Optional[ScanResult]:
    if force_agent is None:
        return scan_auto(root)
    agent = AgentType.resolve(force_agent)
    if agent is None:
        return None
    files = scan(root, agent)
    if not files:
        return None
    return ScanResult(agent_type=agent, files=files)


def _require_root(root: Path | str) -> Path:
    root_path = Path(root)
    if not root_path.is_dir():
        raise ScanRootError(root_path)
    return root_path


def _resolve_pattern(root: Path, pattern: str) -> list[ScannedFile]:
    parts = PurePosixPath(pattern).parts
    if "*" in parts:
        # dir/*/name: the wildcard is a directory name
        index = parts.index("*")
        parent = root.joinpath(*parts[:index])
        suffix = parts[index + 1 :]
        candidates = [
            entry.joinpath(*suffix) for entry in _list_dir(parent) if _is_dir(entry)
        ]
    elif "*" in parts[-1]:
        # dir/*.ext: the wildcard is a file name
        parent = root.joinpath(*parts[:-1])
        ext = PurePosixPath(parts[-1]).suffix
        candidates = [
            entry for entry in _list_dir(parent) if ext and entry.name.endswith(ext)
        ]
    else:
        candidates = [root.joinpath(*parts)]

    results: list[ScannedFile] = []
    for candidate in candidates:
        scanned = _read_candidate(root, candidate)
        if scanned is not None:
            results.append(scanned)
    return results


def _list_dir(path: Path) -> list[Path]:
    try:
        if not path.is_dir():
            return []
        return sorted(path.iterdir(), key=lambda item: item.name)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", path, exc)
        return []


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def _read_candidate(root: Path, candidate: Path) -> Optional[ScannedFile]:
    try:
        if not candidate.is_file():
            return None
        if not is_under(candidate, root):
            logger.debug("Skipping %s: resolves outside %s", candidate, root)
            return None
        content = candidate.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Skipping unreadable file %s: %s", candidate, exc)
        return None
    relative = candidate.relative_to(root).as_posix()
    return ScannedFile(path=relative, content=content)
