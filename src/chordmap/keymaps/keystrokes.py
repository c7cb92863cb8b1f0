"""Keystroke records and their translation into canonical descriptor tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Mapping, Optional

# Physical codes on an ANSI (US) layout, as produced while ctrl/alt is held.
ANSI_PUNCTUATION: Mapping[str, str] = {
    "Backquote": "`",
    "shift-Backquote": "~",
    "shift-1": "!",
    "shift-2": "@",
    "shift-3": "#",
    "shift-4": "$",
    "shift-5": "%",
    "shift-6": "^",
    "shift-7": "&",
    "shift-8": "*",
    "shift-9": "(",
    "shift-0": ")",
    "Minus": "-",
    "shift-Minus": "_",
    "Equal": "=",
    "shift-Equal": "+",
    "BracketLeft": "[",
    "shift-BracketLeft": "{",
    "BracketRight": "]",
    "shift-BracketRight": "}",
    "Backslash": "\\",
    "shift-Backslash": "|",
    "Semicolon": ";",
    "shift-Semicolon": ":",
    "Quote": "'",
    "shift-Quote": '"',
    "Comma": ",",
    "shift-Comma": "<",
    "Period": ".",
    "shift-Period": ">",
    "Slash": "/",
    "shift-Slash": "?",
}

_BARE_MODIFIER = re.compile(r"^(?:shift|control|meta|alt)$", re.IGNORECASE)
_LETTER_OR_DIGIT_CODE = re.compile(r"^(?:Key|Digit)[A-Za-z0-9_]$")
_SINGLE_LETTER = re.compile(r"^[a-zA-Z]$")


@dataclass(frozen=True, slots=True)
class KeystrokeEvent:
    """One discrete key press as delivered by the host platform.

    ``key`` and ``code`` follow the DOM ``KeyboardEvent`` vocabulary: ``key``
    is the logical value (``"a"``, ``"A"``, ``"Enter"``), ``code`` the
    physical key (``"KeyA"``, ``"Comma"``, ``"Numpad1"``). ``current_target``
    is the element the handler is attached to and keys the binder state.
    """

    key: Optional[str]
    code: str = ""
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False
    current_target: Any = field(default=None, compare=False)
    native: Any = field(default=None, compare=False, repr=False)
    prevent_default_hook: Optional[Callable[[], object]] = field(
        default=None, compare=False, repr=False
    )

    @classmethod
    def from_dom(
        cls, event: Mapping[str, Any], *, current_target: Any = None
    ) -> "KeystrokeEvent":
        """Build an event from a DOM-shaped mapping (``shiftKey``, ``ctrlKey``...)."""

        return cls(
            key=event.get("key"),
            code=event.get("code") or "",
            shift=bool(event.get("shiftKey", False)),
            ctrl=bool(event.get("ctrlKey", False)),
            alt=bool(event.get("altKey", False)),
            meta=bool(event.get("metaKey", False)),
            current_target=(
                current_target
                if current_target is not None
                else event.get("currentTarget")
            ),
        )

    def prevent_default(self) -> None:
        if self.prevent_default_hook is not None:
            self.prevent_default_hook()


@dataclass(frozen=True, slots=True)
class Keystroke:
    """An event augmented with its canonical token and, once a binder has
    seen it, the (partial) chord sequence it completed."""

    event: KeystrokeEvent
    token: Optional[str] = None
    sequence: Optional[str] = None

    @property
    def current_target(self) -> Any:
        return self.event.current_target

    def with_sequence(self, sequence: str) -> "Keystroke":
        return replace(self, sequence=sequence)

    def prevent_default(self) -> None:
        self.event.prevent_default()


def _modified_key(event: KeystrokeEvent, key: str) -> str:
    # Physical codes keep ctrl/alt chords independent of the keyboard layout.
    code = event.code
    if not code:
        token = key
    elif _LETTER_OR_DIGIT_CODE.match(code):
        token = code[-1].upper() if event.shift else code[-1].lower()
    elif code.startswith("Numpad"):
        token = key
    else:
        token = code

    if event.shift and not _SINGLE_LETTER.match(token):
        token = f"shift-{token}"
    return ANSI_PUNCTUATION.get(token, token)


def derive_token(event: KeystrokeEvent) -> tuple[Optional[str], Keystroke]:
    """Translate ``event`` into a canonical single-keystroke token.

    Returns ``(token, keystroke)``; ``token`` is ``None`` for a missing key
    or a modifier pressed on its own. The event itself is never modified.
    """

    key = event.key
    if not key or _BARE_MODIFIER.match(key):
        return None, Keystroke(event)

    # Spaces separate keystrokes in a chain.
    if key == " ":
        key = "Space"

    if event.ctrl or event.alt:
        token = _modified_key(event, key)
    else:
        # Shift is already part of the logical key.
        token = key

    if event.alt:
        token = f"alt-{token}"
    if event.ctrl:
        token = f"ctrl-{token}"
    return token, Keystroke(event, token)


__all__ = [
    "ANSI_PUNCTUATION",
    "Keystroke",
    "KeystrokeEvent",
    "derive_token",
]
