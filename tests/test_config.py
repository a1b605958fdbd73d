"""Tests for AppSettings defaults and overrides."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file


def test_defaults_match_classic_constants() -> None:
    settings = AppSettings()

    assert settings.project_name == "my-project"
    assert settings.database_name == "my_database"
    assert settings.database_user == "postgres"
    assert settings.api_port == "8000"
    assert settings.db_port == "5432"
    assert settings.compose_file == "docker-compose.yml"
    assert settings.compose_prefix() == ["docker-compose", "-f", "docker-compose.yml"]


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOCKER_MANAGE_DATABASE_NAME", "shop")
    monkeypatch.setenv("docker_manage_api_port", "9000")

    settings = AppSettings()

    assert settings.database_name == "shop"
    assert settings.api_port == "9000"


def test_project_env_file_is_read(tmp_path: Path) -> None:
    # conftest chdirs into tmp_path
    (tmp_path / ".env").write_text("DOCKER_MANAGE_DB_PORT=6543\nUNRELATED=1\n", encoding="utf-8")

    assert AppSettings().db_port == "6543"


def test_user_env_file_is_read(tmp_path: Path) -> None:
    env_file = get_user_env_file()
    assert env_file == tmp_path / "xdg" / "docker-manage" / ".env"
    env_file.parent.mkdir(parents=True)
    env_file.write_text("DOCKER_MANAGE_PROJECT_NAME=from-user-config\n", encoding="utf-8")

    assert AppSettings().project_name == "from-user-config"


def test_compose_command_is_split() -> None:
    settings = AppSettings(compose_command="docker compose", compose_file="a b.yml")

    assert settings.compose_prefix() == ["docker", "compose", "-f", "a b.yml"]


def test_empty_value_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AppSettings(database_user="")


def test_settings_are_immutable() -> None:
    settings = AppSettings()

    with pytest.raises(ValidationError):
        settings.project_name = "other"


def test_project_env_file_wins_over_user_config(tmp_path: Path) -> None:
    env_file = get_user_env_file()
    env_file.parent.mkdir(parents=True)
    env_file.write_text("DOCKER_MANAGE_API_PORT=1111\nDOCKER_MANAGE_DB_PORT=2222\n", encoding="utf-8")
    (tmp_path / ".env").write_text("DOCKER_MANAGE_API_PORT=3333\n", encoding="utf-8")

    settings = AppSettings()

    assert settings.api_port == "3333"
    assert settings.db_port == "2222"


def test_environment_wins_over_env_files(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("DOCKER_MANAGE_DATABASE_USER=from-file\n", encoding="utf-8")
    monkeypatch.setenv("DOCKER_MANAGE_DATABASE_USER", "from-env")

    assert AppSettings().database_user == "from-env"
