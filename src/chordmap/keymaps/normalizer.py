"""Canonicalisation of human-written key descriptors.

Several notations name the same keystroke: ``"C-s"`` (editor style),
``"{^s}"`` (SendKeys style), ``"ctrl+s"`` and ``"ctrl-s"`` all become
``"ctrl-s"``. The canonical form writes modifiers as ``ctrl-``, ``alt-``,
``shift-`` in that order, spells named keys like the DOM ``key`` values
(``Enter``, ``PageUp``, ``F5``) and folds ``shift-<letter>`` into the
uppercase letter.
"""

from __future__ import annotations

import re
from typing import Callable

CANONICAL_KEY_NAMES: tuple[str, ...] = (
    "ArrowDown",
    "ArrowLeft",
    "ArrowRight",
    "ArrowUp",
    "Backspace",
    "CapsLock",
    "Delete",
    "End",
    "Enter",
    "Escape",
    "Home",
    "Insert",
    "NumLock",
    "PageDown",
    "PageUp",
    "Pause",
    "ScrollLock",
    "Space",
    "Tab",
)

# Same order as CANONICAL_KEY_NAMES.
ALTERNATE_KEY_NAMES: tuple[str, ...] = (
    "Down",
    "Left",
    "Right",
    "Up",
    "BS",
    "CapsLock",
    "Del",
    "End",
    "Return",
    "Esc",
    "Home",
    "Ins",
    "NumLock",
    "PGDN",
    "PGUP",
    "Break",
    "ScrollLock",
    "Spacebar",
    "Tab",
)


def _whole_word(name: str) -> re.Pattern[str]:
    return re.compile(rf"\b{name}\b", re.IGNORECASE)


_SPELLINGS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (_whole_word(name), name) for name in CANONICAL_KEY_NAMES
) + tuple(
    (_whole_word(alias), name)
    for alias, name in zip(ALTERNATE_KEY_NAMES, CANONICAL_KEY_NAMES)
)

_WHITESPACE = re.compile(r"\s+")
_ANGLE_WRAPPED = re.compile(r"(?:(?<= )|^)<([^>]+)>(?= |$)")
_BRACE_WRAPPED = re.compile(r"\{([^}]+|\})\}")
_FUNCTION_KEY = re.compile(r"(?<![A-Za-z])f(\d+)")

# Either '-' or '+' joins a modifier to the key. meta has no spelling.
_MODIFIER_SPELLINGS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"s(?:hift)?[+-]", re.IGNORECASE), "+"),
    (re.compile(r"c(?:trl)?[+-]", re.IGNORECASE), "^"),
    (re.compile(r"a(?:lt)?[+-]", re.IGNORECASE), "%"),
)

# A trailing marker is the key itself, e.g. "ctrl-+".
_MODIFIER_RUN = re.compile(r"[+^%]+(?! |$)")
_SHIFTED_LETTER = re.compile(r"shift-([a-zA-Z])\b")


def _spell_modifiers(match: re.Match[str]) -> str:
    run = match.group(0)
    return (
        ("ctrl-" if "^" in run else "")
        + ("alt-" if "%" in run else "")
        + ("shift-" if "+" in run else "")
    )


def _upper_letter(match: re.Match[str]) -> str:
    return match.group(1).upper()


def _sub(
    pattern: re.Pattern[str], repl: str | Callable[[re.Match[str]], str]
) -> Callable[[str], str]:
    return lambda text: pattern.sub(repl, text)


def _canonical_spellings(text: str) -> str:
    for pattern, name in _SPELLINGS:
        text = pattern.sub(name, text)
    return text


def _modifier_markers(text: str) -> str:
    for pattern, marker in _MODIFIER_SPELLINGS:
        text = pattern.sub(marker, text)
    return text


_PIPELINE: tuple[Callable[[str], str], ...] = (
    lambda text: _WHITESPACE.sub(" ", text).strip(),
    _canonical_spellings,
    _sub(_ANGLE_WRAPPED, r"\1"),
    _sub(_BRACE_WRAPPED, r"\1"),
    _sub(_FUNCTION_KEY, r"F\1"),
    _modifier_markers,
    _sub(_MODIFIER_RUN, _spell_modifiers),
    _sub(_SHIFTED_LETTER, _upper_letter),
)


def normalize(text: str) -> str:
    """Return the canonical spelling of ``text``.

    Unknown names pass through untouched, so custom descriptors survive.
    The result is stable: ``normalize(normalize(x)) == normalize(x)``.
    """

    for step in _PIPELINE:
        text = step(text)
    return text


def normalize_chain(text: str) -> tuple[str, ...]:
    """Split a chord chain on whitespace and normalize every keystroke."""

    return tuple(normalize(token) for token in text.split())


__all__ = [
    "ALTERNATE_KEY_NAMES",
    "CANONICAL_KEY_NAMES",
    "normalize",
    "normalize_chain",
]
