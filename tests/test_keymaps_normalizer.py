from __future__ import annotations

import pytest

from chordmap.keymaps import CANONICAL_KEY_NAMES, normalize, normalize_chain


@pytest.mark.parametrize(
    "descriptor",
    ["ctrl-s", "C-s", "c-s", "^s", "{^s}", "<C-s>", "ctrl+s", "Ctrl+s"],
)
def test_control_notations_share_canonical_form(descriptor: str) -> None:
    assert normalize(descriptor) == "ctrl-s"


@pytest.mark.parametrize(
    ("descriptor", "expected"),
    [
        ("Esc", "Escape"),
        ("<Esc>", "Escape"),
        ("del", "Delete"),
        ("Return", "Enter"),
        ("enter", "Enter"),
        ("{ENTER}", "Enter"),
        ("BS", "Backspace"),
        ("{BS}", "Backspace"),
        ("PGUP", "PageUp"),
        ("pgdn", "PageDown"),
        ("Ins", "Insert"),
        ("Spacebar", "Space"),
        ("Break", "Pause"),
        ("Up", "ArrowUp"),
        ("left", "ArrowLeft"),
        ("capslock", "CapsLock"),
    ],
)
def test_alternate_spellings(descriptor: str, expected: str) -> None:
    assert normalize(descriptor) == expected


def test_shift_letter_folds_to_uppercase() -> None:
    assert normalize("shift-a") == "A"
    assert normalize("s-a") == "A"
    assert normalize("ctrl-shift-a") == "ctrl-A"


@pytest.mark.parametrize(
    "descriptor",
    ["alt-shift-ctrl-F1", "shift-ctrl-alt-F1", "a-s-c-f1", "{%+^F1}", "ctrl+alt+shift+f1"],
)
def test_modifier_order_is_fixed(descriptor: str) -> None:
    assert normalize(descriptor) == "ctrl-alt-shift-F1"


def test_shift_with_named_key_is_kept() -> None:
    assert normalize("shift-Tab") == "shift-Tab"
    assert normalize("s-f5") == "shift-F5"


def test_function_keys_are_uppercased() -> None:
    assert normalize("f12") == "F12"
    assert normalize("<f3>") == "F3"
    assert normalize("f1s-") == "F1+"


def test_f_digits_after_a_letter_is_not_a_function_key() -> None:
    assert normalize("buf1") == "buf1"


@pytest.mark.parametrize("literal", ["+", "^", "%", "ctrl-+", "ctrl-^", "alt-%"])
def test_trailing_marker_is_a_literal_key(literal: str) -> None:
    assert normalize(literal) == literal


def test_closing_brace_in_brace_notation() -> None:
    assert normalize("{}}") == "}"


def test_whitespace_is_collapsed() -> None:
    assert normalize("  ctrl-k \t  ctrl-s  ") == "ctrl-k ctrl-s"


def test_chains_normalize_per_keystroke() -> None:
    assert normalize("<C-x> <C-s>") == "ctrl-x ctrl-s"
    assert normalize_chain(" C-k  shift-b Esc ") == ("ctrl-k", "B", "Escape")


@pytest.mark.parametrize("descriptor", ["Foo", "XF86AudioPlay", "", "   "])
def test_unknown_text_passes_through(descriptor: str) -> None:
    assert normalize(descriptor) == descriptor.strip()


@pytest.mark.parametrize(
    "descriptor",
    [
        "ctrl-s",
        "{^s}",
        "<C-x> <C-s>",
        "shift-a",
        "alt-shift-ctrl-F1",
        "Up Down",
        "{}}",
        "ctrl-+",
        "PGUP",
        "s-Tab",
        "random words here",
        "f1s-",
        "buf1",
    ]
    + list(CANONICAL_KEY_NAMES),
)
def test_normalize_is_idempotent(descriptor: str) -> None:
    once = normalize(descriptor)
    assert normalize(once) == once
