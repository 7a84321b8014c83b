"""디렉터리 순회 도우미./Directory walking helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from .models import ErrorReporter


class DirectoryWalker:
    """루트 아래 일반 파일을 지연 순회합니다./Lazily walk regular files under a root."""

    def __init__(
        self,
        root: Path,
        follow_links: bool = False,
        report_error: ErrorReporter | None = None,
    ) -> None:
        self._root = Path(root)
        self._follow = follow_links
        self._report_error = report_error

    def iter_files(self) -> Iterator[Path]:
        """파일 경로를 생성합니다./Yield file paths."""

        root = self._root
        try:
            root_stat = root.stat()
        except OSError as exc:
            self._report(root, exc)
            return
        if root.is_file():
            yield root
            return
        if not root.is_dir():
            return
        visited: set[tuple[int, int]] = {(root_stat.st_dev, root_stat.st_ino)}
        stack: list[Path] = [root]
        follow = self._follow
        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as iterator:
                    for entry in iterator:
                        try:
                            if entry.is_dir(follow_symlinks=follow):
                                if follow:
                                    info = entry.stat(follow_symlinks=True)
                                    key = (info.st_dev, info.st_ino)
                                    if key in visited:
                                        continue
                                    visited.add(key)
                                stack.append(Path(entry.path))
                                continue
                            if entry.is_file(follow_symlinks=follow):
                                yield Path(entry.path)
                        except OSError as exc:
                            self._report(Path(entry.path), exc)
            except OSError as exc:
                self._report(current, exc)

    def _report(self, path: Path, exc: OSError) -> None:
        if self._report_error is not None:
            self._report_error(path, exc)


__all__ = ["DirectoryWalker"]
