"""Feeds Textual key events to chordmap binders."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional

from textual import events

from chordmap.keymaps import Binder, KeystrokeEvent, MatchResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


# Textual key name -> (DOM code, DOM key)
_NAMED_KEYS: dict[str, tuple[str, str]] = {
    "enter": ("Enter", "Enter"),
    "escape": ("Escape", "Escape"),
    "tab": ("Tab", "Tab"),
    "backspace": ("Backspace", "Backspace"),
    "delete": ("Delete", "Delete"),
    "insert": ("Insert", "Insert"),
    "home": ("Home", "Home"),
    "end": ("End", "End"),
    "pageup": ("PageUp", "PageUp"),
    "pagedown": ("PageDown", "PageDown"),
    "up": ("ArrowUp", "ArrowUp"),
    "down": ("ArrowDown", "ArrowDown"),
    "left": ("ArrowLeft", "ArrowLeft"),
    "right": ("ArrowRight", "ArrowRight"),
    "space": ("Space", " "),
    "grave_accent": ("Backquote", "`"),
    "minus": ("Minus", "-"),
    "equals_sign": ("Equal", "="),
    "left_square_bracket": ("BracketLeft", "["),
    "right_square_bracket": ("BracketRight", "]"),
    "backslash": ("Backslash", "\\"),
    "semicolon": ("Semicolon", ";"),
    "apostrophe": ("Quote", "'"),
    "comma": ("Comma", ","),
    "full_stop": ("Period", "."),
    "slash": ("Slash", "/"),
}

_MODIFIERS = {"ctrl", "shift", "alt", "meta"}
_FUNCTION_KEY = re.compile(r"^f\d+$")


def keystroke_from_textual(event: events.Key, *, target: Any = None) -> KeystrokeEvent:
    """Translate a Textual ``Key`` into a DOM-style ``KeystrokeEvent``.

    Textual names chords like ``"ctrl+shift+up"``; the trailing part is the
    key and the rest are modifiers. ``prevent_default`` on the result stops
    the Textual event.
    """

    *modifiers, name = event.key.split("+")
    held = {mod for mod in modifiers if mod in _MODIFIERS}
    shift = "shift" in held

    if name in _NAMED_KEYS:
        code, key = _NAMED_KEYS[name]
    elif _FUNCTION_KEY.match(name):
        code = key = name.upper()
    elif len(name) == 1 and name.isascii() and name.isalpha():
        code = f"Key{name.upper()}"
        key = name.upper() if shift else name
        shift = shift or name.isupper()
    elif len(name) == 1 and name.isdigit():
        code, key = f"Digit{name}", name
    else:
        code, key = "", event.character or name

    return KeystrokeEvent(
        key=key,
        code=code,
        shift=shift,
        ctrl="ctrl" in held,
        alt="alt" in held,
        meta="meta" in held,
        current_target=target,
        native=event,
        prevent_default_hook=event.prevent_default,
    )


@dataclass(slots=True)
class TextualKeymapHooks:
    """Callbacks the adapter uses to report what it did."""

    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualKeymapAdapter:
    """Dispatches every Textual key event to a set of binders."""

    def __init__(
        self,
        binders: Iterable[Binder] = (),
        hooks: Optional[TextualKeymapHooks] = None,
    ) -> None:
        self.binders: List[Binder] = list(binders)
        self.hooks = hooks or TextualKeymapHooks()

    def add(self, binder: Binder) -> Binder:
        self.binders.append(binder)
        return binder

    def reset(self, widget: Any = None) -> None:
        """Drop pending chords for ``widget``; call from its ``on_unmount``."""

        for binder in self.binders:
            binder.reset(widget)

    def handle_textual_key(self, event: events.Key, widget: Any = None) -> List[MatchResult]:
        """Feed ``event`` (delivered to ``widget``) to every binder."""

        keystroke = keystroke_from_textual(event, target=widget)
        self._log("key ->", key=event.key, code=keystroke.code, value=keystroke.key)
        results = [binder(keystroke) for binder in self.binders]
        for binder, result in zip(self.binders, results):
            if result.status in ("match", "partial"):
                self.hooks.update_status(f"{binder.name}:{result.status}")
            self._log(
                "result <-",
                binding=binder.name,
                status=result.status,
                sequence=result.sequence,
            )
        return results

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        parts.extend(f"{key}={value!r}" for key, value in fields.items() if value is not None)
        self.hooks.log(" ".join(parts))


__all__ = [
    "TextualKeymapAdapter",
    "TextualKeymapHooks",
    "keystroke_from_textual",
]
