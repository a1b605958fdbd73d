"""Project configuration.

Why here:
- Centralizes the project values (pydantic-settings) without polluting the CLI.
- Lets every action read the same compose file, service and credentials.

Defaults reproduce the classic `docker-manage.sh` constants; environment
variables (`DOCKER_MANAGE_*`) or a `.env` file override them per project.
"""

from __future__ import annotations

import os
import shlex
import sys
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "docker-manage"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "docker-manage"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "docker-manage"
    return Path.home() / ".config" / "docker-manage"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without leaking into actions.
    - A single configuration contract for the CLI and the action table.

    Ports stay strings: they are only interpolated into messages.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCKER_MANAGE_",
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
        frozen=True,
    )

    project_name: str = Field(
        default="my-project",
        min_length=1,
        description="Project name shown in the header.",
    )
    database_name: str = Field(
        default="my_database",
        min_length=1,
        description="Database used by db/sql/backup/restore.",
    )
    database_user: str = Field(
        default="postgres",
        min_length=1,
        description="Database role passed to psql/pg_dump.",
    )
    api_port: str = Field(
        default="8000",
        min_length=1,
        description="Host port of the API service.",
    )
    db_port: str = Field(
        default="5432",
        min_length=1,
        description="Host port of the database service.",
    )
    compose_file: str = Field(
        default="docker-compose.yml",
        min_length=1,
        description="Compose file passed with `-f`.",
    )

    compose_command: str = Field(
        default="docker-compose",
        min_length=1,
        description="Orchestration CLI, split shell-style (e.g. 'docker compose').",
    )
    docker_command: str = Field(
        default="docker",
        min_length=1,
        description="Docker engine CLI used for `system prune`.",
    )
    db_service: str = Field(
        default="postgres",
        min_length=1,
        description="Compose service running the database.",
    )
    shell_program: str = Field(
        default="bash",
        min_length=1,
        description="Program started by `shell <service>`.",
    )

    def __init__(self, **values: Any) -> None:
        # Later files win: the project .env overrides the user's global one.
        # Resolved per instance so XDG_CONFIG_HOME is read at load time.
        values.setdefault("_env_file", (str(get_user_env_file()), ".env"))
        super().__init__(**values)

    def compose_prefix(self) -> list[str]:
        """`docker-compose -f <file>` as an argv prefix."""

        return [*shlex.split(self.compose_command), "-f", self.compose_file]
