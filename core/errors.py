"""CLI 예외 정의(KR). CLI exception definitions (EN)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class WarmFsError(Exception):
    """설정/로깅 준비 단계 오류 · Failure while preparing a warm-fs run.

    ``stage`` 는 ``config`` 또는 ``logging`` 이며, ``path`` 는 문제를 일으킨
    설정 파일이나 로그 파일입니다.
    ``stage`` is ``config`` or ``logging``; ``path`` names the offending
    config or log file when there is one.
    """

    message: str
    stage: str | None = None
    path: Path | None = None

    def __str__(self) -> str:
        """사람 친화적 메시지를 생성 · Build human friendly message."""

        text = f"[{self.stage}] {self.message}" if self.stage else self.message
        if self.path is not None:
            return f"{text} ({self.path})"
        return text

    def to_payload(self) -> dict[str, str]:
        """JSON 오류 출력용 딕트 · Dict for the JSON error line."""

        payload = {"error": str(self)}
        if self.stage:
            payload["stage"] = self.stage
        if self.path is not None:
            payload["path"] = str(self.path)
        return payload


__all__ = ["WarmFsError"]
