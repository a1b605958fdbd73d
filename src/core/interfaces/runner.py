"""External process runner contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The CLI can be exercised end to end with a recording fake.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Invocation


@runtime_checkable
class CommandRunner(Protocol):
    """Minimal contract for running an `Invocation`.

    Design rules:
    - Failures are not swallowed: a non-zero exit raises
      `subprocess.CalledProcessError`, a missing executable `FileNotFoundError`.
    - `run` inherits the terminal, `capture` returns stdout as text.
    """

    def run(self, invocation: Invocation) -> None:
        """Run the invocation to completion."""

        ...

    def capture(self, invocation: Invocation) -> str:
        """Run the invocation and return its standard output."""

        ...
