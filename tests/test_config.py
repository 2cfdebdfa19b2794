from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir, write_user_env_vars
from core.domain.units import Units
from core.domain.widgets import Platform


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)
    assert settings.weather_provider == "static"
    assert settings.default_units is Units.METRIC
    assert settings.default_platform is Platform.ANDROID
    assert settings.log_level == "WARNING"


def test_env_prefix_and_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONSTRUCT_KIT_DEFAULT_PLATFORM", " IOS ")
    monkeypatch.setenv("CONSTRUCT_KIT_DEFAULT_UNITS", "imperial")
    monkeypatch.setenv("CONSTRUCT_KIT_LOG_LEVEL", "debug")
    settings = AppSettings(_env_file=None)
    assert settings.default_platform is Platform.IOS
    assert settings.default_units is Units.IMPERIAL
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == 10


def test_project_env_file_is_read(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("CONSTRUCT_KIT_WEATHER_PROVIDER=station\n", encoding="utf-8")
    assert AppSettings(_env_file=env_file).weather_provider == "station"


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, log_level="LOUD")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, http_timeout_seconds=0)
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, default_platform="symbian")


def test_write_user_env_vars_merges(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    write_user_env_vars({"B": "2", "A": "1"}, env_path)
    write_user_env_vars({"A": "3", "C": None}, env_path)
    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines == ["# construct-kit user config (.env)", "A=3", "B=2"]


def test_user_config_dir_honours_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "construct-kit"
