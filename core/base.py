"""설정 모델 기반 클래스(KR). Base model for settings (EN)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WarmBaseModel(BaseModel):
    """Pydantic v2 기반 공통 모델."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


__all__ = ["WarmBaseModel"]
