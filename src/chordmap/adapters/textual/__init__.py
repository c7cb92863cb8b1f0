"""Textual integration for chordmap binders."""

from .controller import TextualKeymapAdapter, TextualKeymapHooks, keystroke_from_textual

__all__ = ["TextualKeymapAdapter", "TextualKeymapHooks", "keystroke_from_textual"]
