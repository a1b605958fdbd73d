"""Domain models (Pydantic v2).

Note:
- These models describe *what* is executed, not *how* it is executed.
"""

from __future__ import annotations

import shlex
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Invocation(BaseModel):
    """One call of an external tool.

    Why it exists:
    - The action table returns data instead of running processes, so the
      exact argv can be inspected (tests, `--verbose`) before anything runs.
    - Redirections are explicit fields: argv never goes through a shell.
    """

    model_config = ConfigDict(frozen=True)

    argv: list[str] = Field(
        ...,
        min_length=1,
        description="Exact argument vector; argv[0] is the executable.",
    )
    stdin_path: Path | None = Field(
        default=None,
        description="File fed to stdin (e.g. a SQL dump on restore).",
    )
    stdout_path: Path | None = Field(
        default=None,
        description="File receiving stdout (e.g. a SQL dump on backup).",
    )

    def render(self) -> str:
        """Shell-style rendering for logs and error messages."""

        text = shlex.join(self.argv)
        if self.stdin_path is not None:
            text += f" < {shlex.quote(str(self.stdin_path))}"
        if self.stdout_path is not None:
            text += f" > {shlex.quote(str(self.stdout_path))}"
        return text
