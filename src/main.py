"""docker-manage entry point for `python -m main` inside `src/`."""

from __future__ import annotations

import sys

# Status lines carry emoji; cp1252 Windows consoles cannot encode them.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
