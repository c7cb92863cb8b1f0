"""Chord-chain key bindings from human-written key descriptors."""

from .keymaps import build_binder, derive_token, normalize

__all__ = [
    "adapters",
    "keymaps",
    "runtime",
    "build_binder",
    "derive_token",
    "normalize",
]

__version__ = "0.1.0"
