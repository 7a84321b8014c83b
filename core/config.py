"""워머 설정 모델(KR). Warmer configuration models (EN)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from pydantic import Field, ValidationError, field_validator

from warmfs import CHUNK_SIZE, WarmSession
from warmfs.models import DiagnosticSink

from .base import WarmBaseModel
from .errors import WarmFsError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class WarmConfig(WarmBaseModel):
    """워밍 설정 전체를 표현 · Represent complete warming settings."""

    paths: Tuple[Path, ...] = Field(default_factory=lambda: (Path("./"),))
    num_threads: int = Field(default=100, ge=1)
    follow_links: bool = True
    chunk_size: int = Field(default=CHUNK_SIZE, ge=1)
    log_file: Path = Field(default_factory=lambda: Path(".cache/warmfs.log"))
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_file(cls, config_file: Path) -> "WarmConfig":
        """설정 파일에서 로드 · Load settings from config file."""

        try:
            data = (
                yaml.safe_load(config_file.read_text(encoding="utf-8"))
                if config_file.exists()
                else {}
            )
        except (OSError, yaml.YAMLError) as exc:
            raise WarmFsError(
                f"cannot read configuration: {exc}", stage="config", path=config_file
            ) from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise WarmFsError(
                "configuration file must contain a mapping", stage="config", path=config_file
            )
        try:
            return cls.from_mapping(data)
        except WarmFsError as exc:
            exc.path = config_file
            raise

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "WarmConfig":
        """사전에서 검증하여 생성 · Validate settings from a mapping."""

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise WarmFsError(_summarise(exc), stage="config") from exc

    def merged(self, **overrides: Any) -> "WarmConfig":
        """``None`` 이 아닌 값으로 덮어쓴 사본 · Copy with non-None overrides applied."""

        payload = self.to_dict()
        payload.update({key: value for key, value in overrides.items() if value is not None})
        return self.from_mapping(payload)

    def to_dict(self) -> Dict[str, Any]:
        """사전을 반환 · Return dictionary representation."""

        return dict(self.model_dump())

    def build_session(self, diagnostic_sink: DiagnosticSink | None = None) -> WarmSession:
        """설정으로 세션을 생성 · Build a warm session from the settings."""

        return WarmSession.from_paths(
            self.paths,
            self.num_threads,
            self.follow_links,
            chunk_size=self.chunk_size,
            diagnostic_sink=diagnostic_sink,
        )


def _summarise(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "invalid configuration"


__all__ = ["WarmConfig"]
