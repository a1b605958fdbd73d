"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Messages are built as `Text`, so user values (SQL, paths) are never parsed
  as Rich markup or emoji codes.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.config import AppSettings

PROG_NAME = "docker-manage"

# Order is the order shown in the usage summary.
COMMAND_HELP: dict[str, str] = {
    "start": "Start all services",
    "stop": "Stop all services",
    "restart": "Restart all services",
    "rebuild": "Rebuild and restart all services",
    "logs": "Show logs (optional: specify service name)",
    "shell": "Enter container shell (specify service name)",
    "db": "Connect to database directly",
    "sql": "Execute SQL query",
    "backup": "Create database backup",
    "restore": "Restore database from backup",
    "update": "Update services to latest images",
    "clean": "Clean up containers, images, and volumes",
    "check": "Check service status",
    "config": "Show current configuration",
}

_EXAMPLES = (
    "start",
    "logs api",
    "shell web",
    "db",
    "sql 'SELECT COUNT(*) FROM users;'",
    "backup",
    "restore backup_file.sql",
)

_DB_TIPS = (
    ("\\l", "List databases"),
    ("\\dt", "List tables"),
    ("\\d users", "Describe table 'users'"),
    ("SELECT COUNT(*) FROM table_name;", "Count records"),
    ("\\q", "Quit"),
)

_SEPARATOR = "-------------------------------"


def _tagged(console: Console, tag: str, style: str, message: str) -> None:
    console.print(Text.assemble((f"[{tag}]", style), " ", message), soft_wrap=True)


def print_info(console: Console, message: str) -> None:
    _tagged(console, "INFO", "green", message)


def print_warning(console: Console, message: str) -> None:
    _tagged(console, "WARNING", "yellow", message)


def print_error(console: Console, message: str) -> None:
    _tagged(console, "ERROR", "red", message)


def print_plain(console: Console, message: str = "") -> None:
    console.print(Text(message), soft_wrap=True)


def print_header(console: Console, project_name: str) -> None:
    """Header printed before every command."""

    title = Text(f"Docker Manager - {project_name}", style="bold blue")
    console.print(Panel(title, border_style="blue", expand=False))


def print_usage(console: Console, settings: AppSettings) -> None:
    """Usage summary for unknown or missing commands."""

    print_plain(console)
    print_plain(console, f"Usage: {PROG_NAME} {{command}} [options]")
    print_plain(console)
    print_plain(console, "📋 Available commands:")
    for name, description in COMMAND_HELP.items():
        print_plain(console, f"  {name:<9} - {description}")
    print_plain(console)
    print_plain(console, "📝 Examples:")
    for example in _EXAMPLES:
        print_plain(console, f"  {PROG_NAME} {example}")
    print_plain(console)
    print_plain(console, "⚙️  Configuration :")
    print_plain(console, f"  Project: {settings.project_name}")
    print_plain(console, f"  Database: {settings.database_name}")
    print_plain(console, f"  API Port: {settings.api_port}")
    print_plain(console, f"  DB Port: {settings.db_port}")


def print_db_tips(console: Console, database: str) -> None:
    print_plain(console, _SEPARATOR)
    print_info(console, f"🗄️ Connecting to database: {database}")
    print_plain(console)
    print_info(console, "💡 Useful commands:")
    for command, description in _DB_TIPS:
        # psql meta-commands are padded, SQL examples are not.
        label = f"{command:<11}" if command.startswith("\\") else command
        print_info(console, f"   {label} - {description}")
    print_plain(console, _SEPARATOR)


def print_configuration(console: Console, settings: AppSettings) -> None:
    print_info(console, "⚙️  Current configuration:")
    print_plain(console, f"Project Name: {settings.project_name}")
    print_plain(console, f"Database: {settings.database_name}")
    print_plain(console, f"Database User: {settings.database_user}")
    print_plain(console, f"API Port: {settings.api_port}")
    print_plain(console, f"Database Port: {settings.db_port}")
    print_plain(console, f"Compose File: {settings.compose_file}")
