"""실행 상태 추적기./Track run progress state."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field

from .models import RunKind, RunState, RunStatistics


@dataclass(slots=True)
class RunTracker:
    """실행 통계를 스레드 안전하게 저장합니다./Store run statistics thread-safely."""

    kind: RunKind
    state: RunState = RunState.CREATED
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    files: int = 0
    skipped: int = 0
    bytes: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def mark(self, state: RunState) -> None:
        """단계를 전환합니다./Move to the given phase."""

        with self._lock:
            self.state = state
            if state is RunState.FINISHED and self.end_time is None:
                self.end_time = time.perf_counter()

    def add_file(self) -> None:
        """처리된 파일 하나를 기록합니다./Record one processed file."""

        with self._lock:
            self.files += 1

    def add_skipped(self) -> None:
        """건너뛴 경로 하나를 기록합니다./Record one skipped path."""

        with self._lock:
            self.skipped += 1

    def add_bytes(self, count: int) -> None:
        """방출된 바이트 수를 더합니다./Accumulate emitted bytes."""

        with self._lock:
            self.bytes += count

    def snapshot(self) -> RunStatistics:
        """현재 통계를 계산합니다./Build a snapshot of current stats."""

        with self._lock:
            end = self.end_time if self.end_time is not None else time.perf_counter()
            return RunStatistics(
                kind=self.kind,
                files=self.files,
                skipped=self.skipped,
                bytes=self.bytes,
                duration_seconds=round(max(end - self.start_time, 0.0), 2),
            )
