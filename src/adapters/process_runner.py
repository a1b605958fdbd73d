"""Subprocess adapter.

Why a wrapper:
- The only place that touches `subprocess`: argv lists, no shell, `check=True`.
- Opens redirection files around the call so actions stay pure data.
"""

from __future__ import annotations

import logging
import subprocess
from contextlib import ExitStack

from core.domain.models import Invocation
from core.interfaces.runner import CommandRunner

log = logging.getLogger(__name__)


class SubprocessRunner(CommandRunner):
    """Runs invocations with the current terminal attached."""

    def run(self, invocation: Invocation) -> None:
        log.debug("Running: %s", invocation.render())
        with ExitStack() as stack:
            stdin = None
            stdout = None
            if invocation.stdin_path is not None:
                stdin = stack.enter_context(invocation.stdin_path.open("rb"))
            if invocation.stdout_path is not None:
                invocation.stdout_path.parent.mkdir(parents=True, exist_ok=True)
                stdout = stack.enter_context(invocation.stdout_path.open("wb"))
            subprocess.run(invocation.argv, stdin=stdin, stdout=stdout, check=True)

    def capture(self, invocation: Invocation) -> str:
        log.debug("Capturing: %s", invocation.render())
        result = subprocess.run(
            invocation.argv,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )
        return result.stdout
