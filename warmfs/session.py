"""워밍 세션 실행기./Warm session runner."""

from __future__ import annotations

import logging
import os
import threading
from functools import partial
from pathlib import Path
from types import TracebackType
from typing import Iterable, Iterator, Optional, Type, Union

from .channel import ResultChannel
from .exceptions import InvalidSessionError
from .models import (
    CHUNK_SIZE,
    CancellationToken,
    DiagnosticSink,
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
from .resolver import resolve_file
from .state import RunTracker
from .walker import DirectoryWalker

__all__ = ["ResultStream", "WarmSession"]

logger = logging.getLogger(__name__)

TargetLike = Union[Target, str, "os.PathLike[str]"]


class ResultStream(Iterator[int]):
    """한 번만 소비되는 바이트 수 순회기./Single-use iterator over byte counts.

    값은 작업 완료 순서대로 도착합니다. 코디네이터와 모든 작업이 끝난 뒤에만
    순회가 종료됩니다.
    Values arrive in completion order. Iteration ends only after the
    coordinator and every job have finished.
    """

    def __init__(
        self,
        kind: RunKind,
        channel: ResultChannel,
        tracker: RunTracker,
        token: CancellationToken,
    ) -> None:
        self._kind = kind
        self._channel = channel
        self._tracker = tracker
        self._token = token
        self._coordinator: threading.Thread | None = None

    def _attach(self, coordinator: threading.Thread) -> None:
        self._coordinator = coordinator

    @property
    def kind(self) -> RunKind:
        """실행 종류./Run kind."""

        return self._kind

    @property
    def state(self) -> RunState:
        """현재 실행 단계./Current run phase."""

        return self._tracker.state

    def __iter__(self) -> "ResultStream":
        return self

    def __next__(self) -> int:
        value = self._channel.receive()
        if value is None:
            raise StopIteration
        return value

    def total(self) -> int:
        """남은 값을 모두 합산합니다./Drain the stream and return the sum."""

        return sum(self)

    def statistics(self) -> RunStatistics:
        """현재 통계 스냅샷./Snapshot of the run statistics."""

        return self._tracker.snapshot()

    def join(self, timeout: float | None = None) -> bool:
        """코디네이터 종료를 기다립니다./Wait for the coordinator to finish.

        ``timeout`` 안에 끝나면 ``True`` 를 반환합니다.
        Returns ``True`` when it finished within ``timeout``.
        """

        if self._coordinator is None:
            return True
        self._coordinator.join(timeout)
        return not self._coordinator.is_alive()

    def cancel(self) -> None:
        """남은 작업을 협조적으로 취소합니다./Cooperatively cancel remaining work."""

        self._token.cancel()

    def close(self) -> None:
        """취소 후 수신을 멈춥니다./Cancel and stop receiving values."""

        self._token.cancel()
        self._channel.close()

    def __enter__(self) -> "ResultStream":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


class WarmSession:
    """디렉터리와 파일 대상을 추정하거나 워밍합니다./Estimate or warm directory and file targets.

    세션은 불변이며 여러 번 실행할 수 있습니다. 각 실행은 새 채널, 풀,
    통계를 만듭니다.
    A session is immutable and reusable; every run gets a fresh channel, pool
    and statistics.
    """

    def __init__(
        self,
        targets: Iterable[TargetLike],
        num_threads: int = 100,
        follow_links: bool = False,
        *,
        chunk_size: int = CHUNK_SIZE,
        diagnostic_sink: DiagnosticSink | None = None,
    ) -> None:
        if num_threads < 1:
            raise InvalidSessionError(f"num_threads must be >= 1, got {num_threads}")
        if chunk_size < 1:
            raise InvalidSessionError(f"chunk_size must be >= 1, got {chunk_size}")
        self._targets = tuple(_coerce_target(target) for target in targets)
        self._num_threads = num_threads
        self._follow_links = follow_links
        self._chunk_size = chunk_size
        self._diagnostic_sink = diagnostic_sink

    @classmethod
    def from_paths(
        cls,
        paths: Iterable[str | os.PathLike[str]],
        num_threads: int = 100,
        follow_links: bool = False,
        **kwargs: object,
    ) -> "WarmSession":
        """경로 목록으로 세션을 생성합니다./Build a session from plain paths."""

        return cls(list(paths), num_threads, follow_links, **kwargs)  # type: ignore[arg-type]

    @property
    def targets(self) -> tuple[Target, ...]:
        return self._targets

    @property
    def num_threads(self) -> int:
        return self._num_threads

    @property
    def follow_links(self) -> bool:
        return self._follow_links

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def diagnostic_sink(self) -> DiagnosticSink | None:
        return self._diagnostic_sink

    def estimate(self) -> int:
        """읽을 총 바이트를 추정합니다./Estimate total bytes to read."""

        return self.iter_estimate().total()

    def warm(self) -> int:
        """파일을 읽고 읽은 총 바이트를 반환합니다./Read files, returning bytes read."""

        return self.iter_warm().total()

    def iter_estimate(self) -> ResultStream:
        """파일별 크기 스트림을 시작합니다./Start a stream of per-file sizes."""

        return self._start(RunKind.ESTIMATE)

    def iter_warm(self) -> ResultStream:
        """청크별 읽기 스트림을 시작합니다./Start a stream of per-chunk read counts."""

        return self._start(RunKind.WARM)

    def _start(self, kind: RunKind) -> ResultStream:
        channel = ResultChannel()
        tracker = RunTracker(kind=kind)
        token = CancellationToken()
        stream = ResultStream(kind, channel, tracker, token)
        run = _Run(self, kind, channel, tracker, token)
        coordinator = threading.Thread(
            target=run.coordinate,
            name=f"warmfs-{kind.value}-coordinator",
            daemon=True,
        )
        stream._attach(coordinator)
        logger.info(
            "starting %s run: targets=%d threads=%d follow_links=%s",
            kind.value,
            len(self._targets),
            self._num_threads,
            self._follow_links,
        )
        coordinator.start()
        return stream


class _Run:
    """실행 하나의 코디네이터와 작업./Coordinator and jobs of one run."""

    def __init__(
        self,
        session: WarmSession,
        kind: RunKind,
        channel: ResultChannel,
        tracker: RunTracker,
        token: CancellationToken,
    ) -> None:
        self._session = session
        self._kind = kind
        self._channel = channel
        self._tracker = tracker
        self._token = token

    def coordinate(self) -> None:
        self._tracker.mark(RunState.RUNNING)
        try:
            with WorkerPool(
                self._session.num_threads, name=f"warmfs-{self._kind.value}"
            ) as pool:
                for path, needs_resolve in self._iter_paths():
                    if self._token.is_cancelled():
                        logger.info("%s run cancelled", self._kind.value)
                        break
                    pool.submit(partial(self._run_job, path, needs_resolve))
                self._tracker.mark(RunState.DRAINING)
        finally:
            self._tracker.mark(RunState.FINISHED)
            logger.info(
                "%s run finished: %s", self._kind.value, self._tracker.snapshot().to_payload()
            )
            self._channel.finish()

    def _iter_paths(self) -> Iterator[tuple[Path, bool]]:
        for target in self._session.targets:
            if isinstance(target, FileTarget):
                yield target.path, True
                continue
            follow = self._session.follow_links
            if target.follow_links is not None:
                follow = target.follow_links
            walker = DirectoryWalker(target.root, follow, self._report)
            for path in walker.iter_files():
                yield path, False

    def _run_job(self, path: Path, needs_resolve: bool) -> None:
        if self._token.is_cancelled():
            return
        if needs_resolve:
            resolved = resolve_file(path, self._report)
            if resolved is None:
                return
            path = resolved
        failed = False

        def report(failed_path: Path, exc: OSError) -> None:
            nonlocal failed
            failed = True
            self._report(failed_path, exc)

        reader = FileReader(self._session.chunk_size, self._token, report)
        for count in reader.read(self._kind, path):
            self._tracker.add_bytes(count)
            self._channel.send(count)
        # files that failed to open or read count as skipped only
        if not failed:
            self._tracker.add_file()

    def _report(self, path: Path, exc: OSError) -> None:
        self._tracker.add_skipped()
        logger.debug("skipping %s during %s: %s", path, self._kind.value, exc)
        sink = self._session.diagnostic_sink
        if sink is not None:
            sink(SkippedPath(path=str(path), reason=str(exc), kind=self._kind))


def _coerce_target(value: TargetLike) -> Target:
    if isinstance(value, (DirectoryTarget, FileTarget)):
        return value
    if isinstance(value, (str, os.PathLike)):
        path = Path(value)
        if path.is_dir():
            return DirectoryTarget(root=path)
        return FileTarget(path=path)
    raise InvalidSessionError(f"unsupported target: {value!r}")
