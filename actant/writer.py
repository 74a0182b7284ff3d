"""Materialize exporter output under a project root."""

from __future__ import annotations

from pathlib import Path

from actant.errors import DuplicateOutputPathError, UnsafeOutputPathError
from actant.models import ExportFile, WriteResult
from actant.utils import backup_file, is_safe_relative_path, is_under


def _target_path(root: Path, relative: str) -> Path:
    target = root / relative
    if not is_safe_relative_path(relative) or not is_under(target, root):
        raise UnsafeOutputPathError(target)
    return target


def existing_files(files: list[ExportFile], root: Path) -> list[str]:
    return [item.path for item in files if (root / item.path).exists()]


def write_export_files(
    files: list[ExportFile],
    root: Path,
    *,
    overwrite: bool = True,
    backup: bool = False,
) -> WriteResult:
    # All paths are checked before the first write.
    targets = [(item, _target_path(root, item.path)) for item in files]
    seen: set[Path] = set()
    for _, target in targets:
        resolved = target.resolve()
        if resolved in seen:
            raise DuplicateOutputPathError(target)
        seen.add(resolved)

    written: list[str] = []
    skipped: list[str] = []
    backups: list[str] = []
    for item, target in targets:
        if target.exists():
            if not overwrite:
                skipped.append(item.path)
                continue
            if backup and target.is_file():
                backups.append(str(backup_file(target)))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(item.content, encoding="utf-8")
        written.append(item.path)
    return WriteResult(written=written, skipped=skipped, backups=backups)
