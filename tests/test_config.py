from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from sigpair_admin.core import config
from sigpair_admin.core.config import DEFAULT_TOKEN_LIFETIME_SECONDS, AdminSettings


def test_defaults() -> None:
    settings = AdminSettings()

    assert settings.base_url is None
    assert settings.admin_token is None
    assert settings.http_timeout_seconds == 20.0
    assert settings.default_token_lifetime_seconds == DEFAULT_TOKEN_LIFETIME_SECONDS == 3600


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SIGPAIR_BASE_URL", "https://node.example")
    monkeypatch.setenv("sigpair_admin_token", "tok")
    monkeypatch.setenv("SIGPAIR_HTTP_TIMEOUT_SECONDS", "2.5")

    settings = AdminSettings()

    assert settings.base_url == "https://node.example"
    assert settings.admin_token == "tok"
    assert settings.http_timeout_seconds == 2.5


def test_reads_project_env_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "SIGPAIR_BASE_URL=http://from-dotenv:8080\nSIGPAIR_ADMIN_TOKEN=dotenv-token\n",
        encoding="utf-8",
    )

    settings = AdminSettings()

    assert settings.base_url == "http://from-dotenv:8080"
    assert settings.admin_token == "dotenv-token"


@pytest.mark.parametrize(
    "field, value",
    [
        ("http_timeout_seconds", 0),
        ("default_token_lifetime_seconds", -1),
        ("user_agent", ""),
    ],
)
def test_rejects_invalid_values(field: str, value) -> None:
    with pytest.raises(ValidationError):
        AdminSettings(**{field: value})


def test_user_config_dir_honours_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert config.get_user_config_dir() == tmp_path / "sigpair-admin"
    assert config.get_user_env_file() == tmp_path / "sigpair-admin" / ".env"


def test_reads_user_env_file_resolved_at_build_time(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(config.sys, "platform", "linux")
    user_env = config.get_user_env_file()
    assert user_env.is_relative_to(tmp_path)
    user_env.parent.mkdir(parents=True)
    user_env.write_text(
        "SIGPAIR_BASE_URL=http://from-user:8080\nSIGPAIR_ADMIN_TOKEN=user-token\n",
        encoding="utf-8",
    )
    (tmp_path / ".env").write_text("SIGPAIR_ADMIN_TOKEN=project-token\n", encoding="utf-8")

    settings = AdminSettings()

    assert settings.base_url == "http://from-user:8080"
    assert settings.admin_token == "project-token"


def test_environment_beats_env_files(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config.sys, "platform", "linux")
    user_env = config.get_user_env_file()
    user_env.parent.mkdir(parents=True)
    user_env.write_text("SIGPAIR_BASE_URL=http://from-user:8080\n", encoding="utf-8")
    monkeypatch.setenv("SIGPAIR_BASE_URL", "http://from-env:8080")

    assert AdminSettings().base_url == "http://from-env:8080"
