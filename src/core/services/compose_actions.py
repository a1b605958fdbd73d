"""Action table for the compose project.

Each action maps to the ordered list of external invocations it performs.
Nothing here runs a process: the CLI feeds the result to a `CommandRunner`,
which keeps side-effects (printing, prompts, subprocess) out of this module
and makes every argv directly testable.
"""

from __future__ import annotations

import shlex
from datetime import datetime
from pathlib import Path

from core.config import AppSettings
from core.domain.models import Invocation


def backup_filename(database: str, now: datetime | None = None) -> str:
    """`backup_<database>_<YYYYmmdd_HHMMSS>.sql`, local time."""

    now = now or datetime.now()
    return f"backup_{database}_{now:%Y%m%d_%H%M%S}.sql"


class ComposeActions:
    """Builds the invocations of every managed action."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def _compose(self, *args: str, **redirects: Path | None) -> Invocation:
        return Invocation(argv=[*self._settings.compose_prefix(), *args], **redirects)

    def _psql(self) -> list[str]:
        s = self._settings
        return ["psql", "-U", s.database_user, "-d", s.database_name]

    def start(self) -> list[Invocation]:
        return [self._compose("up", "-d", "--force-recreate")]

    def stop(self) -> list[Invocation]:
        return [self._compose("down")]

    def restart(self) -> list[Invocation]:
        return [*self.stop(), *self.start()]

    def rebuild(self) -> list[Invocation]:
        return [
            self._compose("down"),
            self._compose("build", "--no-cache"),
            self._compose("up", "-d"),
        ]

    def logs(self, service: str | None = None) -> list[Invocation]:
        if service:
            return [self._compose("logs", "-f", service)]
        return [self._compose("logs", "-f")]

    def list_services(self) -> Invocation:
        """Invocation whose captured stdout is one service name per line."""

        return self._compose("config", "--services")

    def shell(self, service: str) -> list[Invocation]:
        return [self._compose("exec", service, self._settings.shell_program)]

    def db(self) -> list[Invocation]:
        return [self._compose("exec", self._settings.db_service, *self._psql())]

    def sql(self, query: str) -> list[Invocation]:
        return [self._compose("exec", self._settings.db_service, *self._psql(), "-c", query)]

    def backup(self, output: Path) -> list[Invocation]:
        s = self._settings
        return [
            self._compose(
                "exec",
                s.db_service,
                "pg_dump",
                "-U",
                s.database_user,
                s.database_name,
                stdout_path=output,
            )
        ]

    def restore(self, source: Path) -> list[Invocation]:
        # -T: no TTY, stdin carries the dump.
        s = self._settings
        return [
            self._compose(
                "exec",
                "-T",
                s.db_service,
                "psql",
                "-U",
                s.database_user,
                s.database_name,
                stdin_path=source,
            )
        ]

    def update(self) -> list[Invocation]:
        return [self._compose("pull"), self._compose("up", "-d")]

    def clean(self) -> list[Invocation]:
        return [
            self._compose("down", "-v"),
            self._compose("rm", "-f"),
            Invocation(argv=[*self._docker(), "system", "prune", "-f"]),
        ]

    def check(self) -> list[Invocation]:
        return [self._compose("ps")]

    def _docker(self) -> list[str]:
        return shlex.split(self._settings.docker_command)


def parse_service_list(output: str) -> list[str]:
    """Service names from `config --services` output, in order."""

    return [line.strip() for line in output.splitlines() if line.strip()]
