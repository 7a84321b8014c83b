"""경로 분류 및 링크 해석./Classify paths and resolve links."""

from __future__ import annotations

import os
import stat
from enum import Enum
from pathlib import Path

from .models import ErrorReporter


class PathKind(str, Enum):
    """경로 종류./Kind of filesystem entry."""

    FILE = "file"
    SYMLINK = "symlink"
    SKIP = "skip"


def classify_path(path: Path, report_error: ErrorReporter | None = None) -> PathKind:
    """링크를 따르지 않고 경로를 분류합니다./Classify a path without following links."""

    try:
        mode = os.lstat(path).st_mode
    except OSError as exc:
        _report(path, exc, report_error)
        return PathKind.SKIP
    if stat.S_ISREG(mode):
        return PathKind.FILE
    if stat.S_ISLNK(mode):
        return PathKind.SYMLINK
    return PathKind.SKIP


def resolve_file(path: Path, report_error: ErrorReporter | None = None) -> Path | None:
    """읽을 수 있는 일반 파일 경로를 반환합니다./Return a usable regular-file path.

    심볼릭 링크는 정규 대상 경로로 해석되며, 대상이 일반 파일이 아니거나
    해석에 실패하면 ``None`` 을 반환합니다.
    Symbolic links resolve to their canonical target; ``None`` is returned when
    the target is not a regular file or resolution fails.
    """

    kind = classify_path(path, report_error)
    if kind is PathKind.FILE:
        return path
    if kind is PathKind.SKIP:
        return None
    try:
        target = path.resolve(strict=True)
        mode = os.stat(target).st_mode
    except (OSError, RuntimeError) as exc:
        # RuntimeError: symlink loop on older interpreters
        error = exc if isinstance(exc, OSError) else OSError(str(exc))
        _report(path, error, report_error)
        return None
    if not stat.S_ISREG(mode):
        return None
    return target


def _report(path: Path, exc: OSError, report_error: ErrorReporter | None) -> None:
    if report_error is not None:
        report_error(path, exc)


__all__ = ["PathKind", "classify_path", "resolve_file"]
