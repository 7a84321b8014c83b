"""핵심 헬퍼 모듈 테스트(KR). Core helper module tests (EN)."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from core.config import WarmConfig
from core.errors import WarmFsError
from core.logging import configure_logging, utc_now


def test_utc_now_should_return_tz_aware_iso() -> None:
    """UTC ISO8601 문자열을 돌려준다 · Returns UTC ISO string."""

    timestamp = utc_now()
    assert timestamp.endswith("+00:00")
    assert "T" in timestamp


def test_configure_logging_should_install_json_handler(tmp_path: Path) -> None:
    """로깅 설정이 JSON 핸들러를 추가한다 · Logging config installs JSON handler."""

    log_path = tmp_path / "app.log"
    configure_logging(log_path, level="INFO")
    logging.getLogger("warmfs.session").info("hello")
    logging.getLogger("warmfs.session").debug("hidden")
    for handler in logging.getLogger("warmfs").handlers:
        handler.flush()
    lines = log_path.read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])
    assert payload["message"] == "hello"
    assert payload["name"] == "warmfs.session"
    assert "timestamp" in payload
    assert all("hidden" not in line for line in lines)


def test_warm_fs_error_str() -> None:
    """오류는 단계와 메시지를 노출한다 · Error exposes stage and message."""

    error = WarmFsError("failed", stage="config")
    assert str(error) == "[config] failed"
    assert str(WarmFsError("plain")) == "plain"


def test_config_defaults() -> None:
    """기본 설정값을 확인한다 · Check default settings."""

    config = WarmConfig()
    assert config.paths == (Path("./"),)
    assert config.num_threads == 100
    assert config.follow_links is True
    assert config.chunk_size == 1024


def test_config_from_yaml_file(tmp_path: Path, warm_tree: Path) -> None:
    """YAML 설정을 읽어 세션을 만든다 · Load YAML settings and build a session."""

    config_file = tmp_path / "warmfs.yml"
    config_file.write_text(
        f"paths:\n  - {warm_tree.as_posix()}\nnum_threads: 3\nfollow_links: false\n",
        encoding="utf-8",
    )
    config = WarmConfig.from_file(config_file)
    session = config.build_session()
    assert session.num_threads == 3
    assert session.follow_links is False
    assert session.estimate() == 2500


def test_missing_config_file_gives_defaults(tmp_path: Path) -> None:
    """설정 파일이 없으면 기본값 · Missing config file yields defaults."""

    assert WarmConfig.from_file(tmp_path / "absent.yml") == WarmConfig()


@pytest.mark.parametrize(
    "content",
    ["- just\n- a list\n", "num_threads: 0\n", "chunk_size: many\n", "log_level: LOUD\n"],
)
def test_invalid_config_raises_warm_fs_error(tmp_path: Path, content: str) -> None:
    """잘못된 설정은 WarmFsError · Invalid settings raise WarmFsError."""

    config_file = tmp_path / "bad.yml"
    config_file.write_text(content, encoding="utf-8")
    with pytest.raises(WarmFsError) as info:
        WarmConfig.from_file(config_file)
    assert info.value.stage == "config"


def test_merged_ignores_none_overrides() -> None:
    """None 덮어쓰기는 무시된다 · None overrides are ignored."""

    config = WarmConfig(num_threads=7).merged(num_threads=None, follow_links=False)
    assert config.num_threads == 7
    assert config.follow_links is False


def test_log_level_is_normalised() -> None:
    """로그 레벨은 대문자로 정규화된다 · Log level is upper-cased."""

    assert WarmConfig(log_level=" debug ").log_level == "DEBUG"


def test_warm_fs_error_payload_names_path(tmp_path: Path) -> None:
    """오류 페이로드에 파일 경로가 포함된다 · Error payload includes the file path."""

    error = WarmFsError("cannot open log file", stage="logging", path=tmp_path / "w.log")
    assert str(error).endswith(f"({tmp_path / 'w.log'})")
    assert error.to_payload() == {
        "error": str(error),
        "stage": "logging",
        "path": str(tmp_path / "w.log"),
    }
