"""Key descriptor normalization and chord-chain matching."""

from .normalizer import (
    ALTERNATE_KEY_NAMES,
    CANONICAL_KEY_NAMES,
    normalize,
    normalize_chain,
)
from .patterns import KeyTarget, prefix_patterns
from .keystrokes import ANSI_PUNCTUATION, Keystroke, KeystrokeEvent, derive_token
from .binder import Binder, MatchResult, build_binder, prevent_default

__all__ = [
    "ALTERNATE_KEY_NAMES",
    "ANSI_PUNCTUATION",
    "CANONICAL_KEY_NAMES",
    "Binder",
    "KeyTarget",
    "Keystroke",
    "KeystrokeEvent",
    "MatchResult",
    "build_binder",
    "derive_token",
    "normalize",
    "normalize_chain",
    "prefix_patterns",
    "prevent_default",
]
