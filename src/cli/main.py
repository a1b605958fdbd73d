"""Typer application: one command per managed action.

Why this shape:
- `ComposeActions` decides *what* runs; this layer prints, prompts and maps
  failures to exit codes.
- Every command runs its invocations in order and stops at the first failure,
  exiting with the failing tool's code.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import click
import typer
from pydantic import ValidationError
from rich.console import Console
from typer.core import TyperGroup

from adapters.process_runner import SubprocessRunner
from cli.ui_components import (
    COMMAND_HELP,
    PROG_NAME,
    print_configuration,
    print_db_tips,
    print_error,
    print_header,
    print_info,
    print_usage,
    print_warning,
)
from core.config import AppSettings
from core.domain.confirmation import is_affirmative
from core.domain.models import Invocation
from core.interfaces.runner import CommandRunner
from core.log import configure_logging
from core.services.compose_actions import ComposeActions, backup_filename, parse_service_list

log = logging.getLogger(__name__)

_console = Console()

EXIT_USAGE = 1
EXIT_NOT_FOUND = 127
EXIT_INTERRUPTED = 130


def build_settings() -> AppSettings:
    return AppSettings()


def build_runner() -> CommandRunner:
    return SubprocessRunner()


@dataclass
class ManagerContext:
    """Per-invocation state handed to commands through `ctx.obj`."""

    settings: AppSettings
    actions: ComposeActions
    runner: CommandRunner


def _load_settings() -> AppSettings:
    try:
        return build_settings()
    except ValidationError as exc:
        print_error(_console, f"Invalid configuration: {exc}")
        raise typer.Exit(code=EXIT_USAGE) from exc


def _usage_exit(header: bool = True) -> typer.Exit:
    settings = _load_settings()
    if header:
        print_header(_console, settings.project_name)
    print_usage(_console, settings)
    return typer.Exit(code=EXIT_USAGE)


class DispatchGroup(TyperGroup):
    """Unknown commands and malformed command lines print the usage summary and exit 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            raise _usage_exit() from exc

    def resolve_command(self, ctx: click.Context, args: list[str]):
        if args and self.get_command(ctx, args[0]) is None:
            raise _usage_exit()
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            # The callback already printed the header.
            raise _usage_exit(header=False) from exc


# Arguments past the ones a command takes are ignored.
_LENIENT = {"allow_extra_args": True, "ignore_unknown_options": True}

app = typer.Typer(
    cls=DispatchGroup,
    help="Manage a Docker Compose project (services, logs, database).",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show every external command before it runs."),
) -> None:
    configure_logging(verbose)
    settings = _load_settings()
    print_header(_console, settings.project_name)

    if ctx.invoked_subcommand is None:
        print_usage(_console, settings)
        raise typer.Exit(code=EXIT_USAGE)

    ctx.obj = ManagerContext(
        settings=settings,
        actions=ComposeActions(settings),
        runner=build_runner(),
    )


def _exit_code(returncode: int) -> int:
    # Killed by signal N -> 128 + N, as a shell reports it.
    return returncode if returncode > 0 else 128 - returncode


@contextmanager
def _delegated() -> Iterator[None]:
    """Map external failures to the exit code of the failing tool."""

    try:
        yield
    except subprocess.CalledProcessError as exc:
        cmd = shlex.join(exc.cmd) if isinstance(exc.cmd, (list, tuple)) else str(exc.cmd)
        print_error(_console, f"Command failed (exit {exc.returncode}): {cmd}")
        raise typer.Exit(code=_exit_code(exc.returncode)) from exc
    except FileNotFoundError as exc:
        print_error(_console, f"Command not found: {exc.filename}")
        raise typer.Exit(code=EXIT_NOT_FOUND) from exc
    except KeyboardInterrupt:
        raise typer.Exit(code=EXIT_INTERRUPTED)


def _run_all(manager: ManagerContext, invocations: Iterable[Invocation]) -> None:
    with _delegated():
        for invocation in invocations:
            manager.runner.run(invocation)


def _confirm(question: str, assume_yes: bool) -> bool:
    if assume_yes:
        return True
    reply = typer.prompt(question, default="", show_default=False)
    return is_affirmative(reply)


def _usage_error(message: str, hint: str | None = None) -> typer.Exit:
    print_error(_console, message)
    if hint:
        print_info(_console, hint)
    return typer.Exit(code=EXIT_USAGE)


def _start(manager: ManagerContext) -> None:
    settings = manager.settings
    print_info(_console, "🚀 Starting Docker services...")
    _run_all(manager, manager.actions.start())
    print_info(_console, "✅ Services started successfully!")
    print_info(_console, f"🌐 API available at: http://localhost:{settings.api_port}")
    print_info(_console, f"🗄️ Database available at: localhost:{settings.db_port}")


def _stop(manager: ManagerContext) -> None:
    print_info(_console, "🛑 Stopping Docker services...")
    _run_all(manager, manager.actions.stop())
    print_info(_console, "✅ Services stopped successfully!")


@app.command(help=COMMAND_HELP["start"], context_settings=_LENIENT)
def start(ctx: typer.Context) -> None:
    _start(ctx.obj)


@app.command(help=COMMAND_HELP["stop"], context_settings=_LENIENT)
def stop(ctx: typer.Context) -> None:
    _stop(ctx.obj)


@app.command(help=COMMAND_HELP["restart"], context_settings=_LENIENT)
def restart(ctx: typer.Context) -> None:
    _stop(ctx.obj)
    _start(ctx.obj)


@app.command(help=COMMAND_HELP["rebuild"], context_settings=_LENIENT)
def rebuild(ctx: typer.Context) -> None:
    manager: ManagerContext = ctx.obj
    print_info(_console, "🔨 Rebuilding images and restarting services...")
    _run_all(manager, manager.actions.rebuild())
    print_info(_console, "✅ Services rebuilt and restarted successfully!")


@app.command(help=COMMAND_HELP["logs"], context_settings=_LENIENT)
def logs(
    ctx: typer.Context,
    service: str | None = typer.Argument(None, help="Service to follow (default: all)."),
) -> None:
    manager: ManagerContext = ctx.obj
    if service:
        print_info(_console, f"📋 Showing logs for service: {service} (Ctrl+C to exit)...")
    else:
        print_info(_console, "📋 Showing all service logs (Ctrl+C to exit)...")
    _run_all(manager, manager.actions.logs(service))


def _available_services(manager: ManagerContext) -> list[str]:
    try:
        output = manager.runner.capture(manager.actions.list_services())
    except (subprocess.CalledProcessError, FileNotFoundError) as exc:
        log.debug("Could not list services: %s", exc)
        return []
    return parse_service_list(output)


@app.command(help=COMMAND_HELP["shell"], context_settings=_LENIENT)
def shell(
    ctx: typer.Context,
    service: str | None = typer.Argument(None, help="Service whose container to enter."),
) -> None:
    manager: ManagerContext = ctx.obj
    if not service:
        names = " ".join(_available_services(manager))
        raise _usage_error("Please specify a service name", f"Available services: {names}")
    print_info(_console, f"🐚 Entering container for service: {service}")
    _run_all(manager, manager.actions.shell(service))


@app.command(help=COMMAND_HELP["db"], context_settings=_LENIENT)
def db(ctx: typer.Context) -> None:
    manager: ManagerContext = ctx.obj
    print_db_tips(_console, manager.settings.database_name)
    _run_all(manager, manager.actions.db())


@app.command(help=COMMAND_HELP["sql"], context_settings=_LENIENT)
def sql(
    ctx: typer.Context,
    query: str | None = typer.Argument(None, help="SQL passed to psql -c."),
) -> None:
    manager: ManagerContext = ctx.obj
    if not query:
        raise _usage_error(
            "Please specify an SQL query",
            f"Example: {PROG_NAME} sql 'SELECT * FROM users LIMIT 5;'",
        )
    print_info(_console, "🔍 Executing SQL query...")
    _run_all(manager, manager.actions.sql(query))


@app.command(help=COMMAND_HELP["backup"], context_settings=_LENIENT)
def backup(
    ctx: typer.Context,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Dump file (default: backup_<database>_<timestamp>.sql in the current directory).",
    ),
) -> None:
    manager: ManagerContext = ctx.obj
    target = output or Path(backup_filename(manager.settings.database_name))
    print_info(_console, f"💾 Creating database backup: {target}")
    _run_all(manager, manager.actions.backup(target))
    print_info(_console, "✅ Backup created successfully!")


@app.command(help=COMMAND_HELP["restore"], context_settings=_LENIENT)
def restore(
    ctx: typer.Context,
    backup_file: str | None = typer.Argument(None, help="SQL dump to load."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
) -> None:
    manager: ManagerContext = ctx.obj
    if not backup_file:
        raise _usage_error(
            "Please specify backup file path",
            f"Example: {PROG_NAME} restore backup_file.sql",
        )
    source = Path(backup_file)
    if not source.is_file():
        raise _usage_error(f"Backup file not found: {backup_file}")

    print_warning(_console, "⚠️  This will overwrite the current database!")
    if not _confirm("Continue? (y/N)", yes):
        print_info(_console, "Restore cancelled.")
        return

    print_info(_console, f"🔄 Restoring database from: {backup_file}")
    _run_all(manager, manager.actions.restore(source))
    print_info(_console, "✅ Database restored successfully!")


@app.command(help=COMMAND_HELP["update"], context_settings=_LENIENT)
def update(ctx: typer.Context) -> None:
    manager: ManagerContext = ctx.obj
    print_info(_console, "⬆️  Updating services...")
    _run_all(manager, manager.actions.update())
    print_info(_console, "✅ Services updated successfully!")


@app.command(help=COMMAND_HELP["clean"], context_settings=_LENIENT)
def clean(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
) -> None:
    manager: ManagerContext = ctx.obj
    print_warning(_console, "🧹 Cleaning up containers, images, and volumes...")
    if not _confirm("Are you sure? This will remove all data! (y/N)", yes):
        print_info(_console, "Cleanup cancelled.")
        return

    _run_all(manager, manager.actions.clean())
    print_info(_console, "✅ Cleanup completed!")


@app.command(help=COMMAND_HELP["check"], context_settings=_LENIENT)
def check(ctx: typer.Context) -> None:
    manager: ManagerContext = ctx.obj
    print_info(_console, "🔍 Checking service status...")
    _run_all(manager, manager.actions.check())


@app.command(help=COMMAND_HELP["config"], context_settings=_LENIENT)
def config(ctx: typer.Context) -> None:
    print_configuration(_console, ctx.obj.settings)


def run() -> None:
    app(prog_name=PROG_NAME)
