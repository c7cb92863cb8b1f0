"""Anchored prefix patterns for chord chains."""

from __future__ import annotations

import re
from typing import Union

from .normalizer import normalize_chain

KeyTarget = Union[str, "re.Pattern[str]"]

_ANCHORS = re.compile(r"^\^|\$$")


def _fragments(target: KeyTarget) -> tuple[tuple[str, ...], int]:
    if isinstance(target, re.Pattern):
        flags = re.IGNORECASE if target.flags & re.IGNORECASE else 0
        return tuple(target.pattern.split()), flags
    if not isinstance(target, str):
        raise TypeError(
            f"target must be a string or compiled pattern, not {type(target).__name__}"
        )
    return tuple(re.escape(token) for token in normalize_chain(target)), 0


def prefix_patterns(target: KeyTarget) -> tuple[re.Pattern[str], ...]:
    """Build one anchored pattern per prefix length of ``target``.

    ``"alt-f x Enter"`` gives ``^alt\\-f$``, ``^alt\\-f x$`` and
    ``^alt\\-f x Enter$``. String targets are normalized and escaped token by
    token and matched case-sensitively, since letter case carries shift; pass
    a pattern compiled with ``re.IGNORECASE`` to fold case. A compiled pattern
    is split on whitespace as is, so each position may carry its own
    alternation, e.g. ``re.compile(r"alt-x (Enter|Escape)")``; its
    ``re.IGNORECASE`` flag is kept.

    Raises ``ValueError`` for an empty target and ``re.error`` when a
    fragment does not compile on its own.
    """

    fragments, flags = _fragments(target)
    if not fragments:
        raise ValueError("key target must contain at least one keystroke")

    patterns: list[re.Pattern[str]] = []
    for fragment in fragments:
        if patterns:
            previous = _ANCHORS.sub("", patterns[-1].pattern)
            source = f"^{previous} {fragment}$"
        else:
            source = f"^{fragment}$"
        patterns.append(re.compile(source, flags))
    return tuple(patterns)


__all__ = ["KeyTarget", "prefix_patterns"]
