"""워머 전용 예외를 정의합니다./Define warmer specific exceptions."""

from __future__ import annotations


class WarmErrorBase(RuntimeError):
    """워머 오류 기본 클래스./Base class for warmer errors."""


class InvalidSessionError(WarmErrorBase, ValueError):
    """잘못된 세션 구성./Raised for an invalid session configuration."""
