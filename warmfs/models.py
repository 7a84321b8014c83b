"""워머 데이터 모델 정의./Define warmer data models."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Union

CHUNK_SIZE = 1024

DiagnosticSink = Callable[["SkippedPath"], None]
ErrorReporter = Callable[[Path, OSError], None]


class RunKind(str, Enum):
    """실행 종류./Kind of run."""

    ESTIMATE = "estimate"
    WARM = "warm"


class RunState(str, Enum):
    """실행 단계./Lifecycle phase of a run."""

    CREATED = "created"
    RUNNING = "running"
    DRAINING = "draining"
    FINISHED = "finished"


@dataclass(frozen=True, slots=True)
class DirectoryTarget:
    """재귀적으로 순회할 디렉터리./Directory walked recursively.

    ``follow_links`` 가 ``None`` 이면 세션 설정을 따릅니다.
    When ``follow_links`` is ``None`` the session flag applies.
    """

    root: Path
    follow_links: bool | None = None


@dataclass(frozen=True, slots=True)
class FileTarget:
    """명시적 파일 경로./Explicit file path."""

    path: Path


Target = Union[DirectoryTarget, FileTarget]


@dataclass(slots=True)
class CancellationToken:
    """스레드 간 취소 신호를 전달합니다./Carry cancellation across threads."""

    _event: threading.Event = field(default_factory=threading.Event, init=False)

    def cancel(self) -> None:
        """취소 상태로 설정합니다./Mark token as cancelled."""

        self._event.set()

    def is_cancelled(self) -> bool:
        """취소 여부를 반환합니다./Return cancellation flag."""

        return self._event.is_set()


@dataclass(frozen=True, slots=True)
class SkippedPath:
    """흡수된 경로 오류 정보./Path failure absorbed during a run."""

    path: str
    reason: str
    kind: RunKind | None = None


@dataclass(frozen=True, slots=True)
class RunStatistics:
    """실행 요약 통계./Run summary statistics."""

    kind: RunKind
    files: int
    skipped: int
    bytes: int
    duration_seconds: float

    def to_payload(self) -> dict[str, object]:
        """JSON 직렬화용 딕트를 생성./Return dict for JSON serialisation."""

        return {
            "kind": self.kind.value,
            "files": self.files,
            "skipped": self.skipped,
            "bytes": self.bytes,
            "duration_seconds": self.duration_seconds,
        }
