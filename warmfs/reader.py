"""단일 파일 추정/읽기./Estimate or read a single file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from .models import CHUNK_SIZE, CancellationToken, ErrorReporter, RunKind


class FileReader:
    """파일 하나를 순회하며 바이트 수를 방출합니다./Emit byte counts for one file.

    추정 모드는 메타데이터 크기 하나만, 워밍 모드는 실제로 읽은 청크마다
    하나의 값을 생성합니다. 실패는 보고만 하고 전파하지 않습니다.
    Estimate mode yields the metadata size once; warm mode yields one value
    per chunk actually read. Failures are reported, never raised.
    """

    def __init__(
        self,
        chunk_size: int = CHUNK_SIZE,
        cancellation_token: CancellationToken | None = None,
        report_error: ErrorReporter | None = None,
    ) -> None:
        self._chunk_size = chunk_size
        self._token = cancellation_token
        self._report_error = report_error

    def read(self, kind: RunKind, path: Path) -> Iterator[int]:
        """실행 종류에 맞는 순회기를 반환합니다./Return the iterator for a run kind."""

        if kind is RunKind.ESTIMATE:
            return self.estimate(path)
        return self.warm(path)

    def estimate(self, path: Path) -> Iterator[int]:
        """파일 크기를 생성합니다./Yield the file size."""

        try:
            size = os.stat(path).st_size
        except OSError as exc:
            self._report(path, exc)
            return
        yield int(size)

    def warm(self, path: Path) -> Iterator[int]:
        """청크 단위로 읽고 읽은 바이트 수를 생성합니다./Read in chunks, yielding counts."""

        try:
            handle = open(path, "rb", buffering=0)
        except OSError as exc:
            self._report(path, exc)
            return
        buffer = bytearray(self._chunk_size)
        with handle:
            while not self._cancelled():
                try:
                    count = handle.readinto(buffer)
                except OSError as exc:
                    self._report(path, exc)
                    break
                if not count:
                    break
                yield count

    def _cancelled(self) -> bool:
        return self._token is not None and self._token.is_cancelled()

    def _report(self, path: Path, exc: OSError) -> None:
        if self._report_error is not None:
            self._report_error(path, exc)


__all__ = ["FileReader"]
