"""고정 크기 작업자 풀./Fixed-size worker pool."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from types import TracebackType
from typing import Callable, Optional, Type

from .exceptions import InvalidSessionError

logger = logging.getLogger(__name__)

Job = Callable[[], None]


class WorkerPool:
    """최대 ``num_threads`` 개의 작업을 동시에 실행합니다./Run at most ``num_threads`` jobs at once.

    ``submit`` 은 대기열 길이와 무관하게 즉시 반환하며, 제출된 모든 작업은
    ``shutdown`` 이 끝나기 전에 실행됩니다.
    ``submit`` returns immediately regardless of queue length and every
    submitted job runs before ``shutdown`` returns.
    """

    def __init__(self, num_threads: int, name: str = "warmfs-worker") -> None:
        if num_threads < 1:
            raise InvalidSessionError(f"num_threads must be >= 1, got {num_threads}")
        self._num_threads = num_threads
        self._executor = ThreadPoolExecutor(max_workers=num_threads, thread_name_prefix=name)
        self._submitted = 0

    @property
    def num_threads(self) -> int:
        """동시 실행 상한./Concurrency limit."""

        return self._num_threads

    @property
    def submitted(self) -> int:
        """제출된 작업 수./Number of submitted jobs."""

        return self._submitted

    def submit(self, job: Job) -> None:
        """작업을 비동기로 대기열에 넣습니다./Queue a job for asynchronous execution."""

        future = self._executor.submit(job)
        future.add_done_callback(_log_failure)
        self._submitted += 1

    def shutdown(self) -> None:
        """대기 중인 작업을 모두 마칠 때까지 기다립니다./Wait until queued jobs finish."""

        self._executor.shutdown(wait=True)

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.shutdown()


def _log_failure(future: Future[None]) -> None:
    error = future.exception()
    if error is not None:
        logger.error("worker job failed", exc_info=(type(error), error, error.__traceback__))


__all__ = ["Job", "WorkerPool"]
