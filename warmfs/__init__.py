"""파일 시스템 워머 API./Filesystem warmer API."""

from __future__ import annotations

from .channel import ResultChannel
from .exceptions import InvalidSessionError, WarmErrorBase
from .models import (
    CHUNK_SIZE,
    CancellationToken,
    DirectoryTarget,
    FileTarget,
    RunKind,
    RunState,
    RunStatistics,
    SkippedPath,
    Target,
)
from .pool import WorkerPool
from .reader import FileReader
from .resolver import PathKind, classify_path, resolve_file
from .session import ResultStream, WarmSession
from .walker import DirectoryWalker

__all__ = [
    "CHUNK_SIZE",
    "CancellationToken",
    "DirectoryTarget",
    "DirectoryWalker",
    "FileReader",
    "FileTarget",
    "InvalidSessionError",
    "PathKind",
    "ResultChannel",
    "ResultStream",
    "RunKind",
    "RunState",
    "RunStatistics",
    "SkippedPath",
    "Target",
    "WarmErrorBase",
    "WarmSession",
    "WorkerPool",
    "classify_path",
    "resolve_file",
]
