"""Run docker-manage from a checkout, without installing it.

    python -m main start
    python -m main sql 'SELECT COUNT(*) FROM users;'

Puts `src/` on the import path and hands over to the same `run()` the
installed `docker-manage` script calls.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
