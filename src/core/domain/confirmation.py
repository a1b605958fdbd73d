"""Answers to destructive-action prompts."""

from __future__ import annotations

import re

_AFFIRMATIVE = re.compile(r"[Yy]")


def is_affirmative(reply: str | None) -> bool:
    """True only for a single `y`/`Y`; everything else declines (default No)."""

    if reply is None:
        return False
    return _AFFIRMATIVE.fullmatch(reply.strip()) is not None
