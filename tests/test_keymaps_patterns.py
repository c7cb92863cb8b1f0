from __future__ import annotations

import re

import pytest

from chordmap.keymaps import prefix_patterns


def test_one_pattern_per_keystroke() -> None:
    patterns = prefix_patterns("ctrl-k ctrl-s")

    assert len(patterns) == 2
    assert patterns[0].fullmatch("ctrl-k")
    assert not patterns[0].fullmatch("ctrl-k ctrl-s")
    assert patterns[1].fullmatch("ctrl-k ctrl-s")
    assert not patterns[1].fullmatch("ctrl-k")


def test_patterns_are_anchored() -> None:
    patterns = prefix_patterns("ctrl-k ctrl-s")

    assert patterns[1].search("x ctrl-k ctrl-s") is None
    assert patterns[0].search("ctrl-k ctrl-s") is None


def test_each_prefix_extends_the_previous_one() -> None:
    patterns = prefix_patterns("alt-f x Enter")

    for previous, current in zip(patterns, patterns[1:]):
        assert current.pattern.startswith(previous.pattern[:-1] + " ")
        assert current.pattern.startswith("^") and current.pattern.endswith("$")
    assert patterns[-1].fullmatch("alt-f x Enter")


def test_string_targets_are_normalized() -> None:
    patterns = prefix_patterns("<C-k> {^s}")

    assert patterns[1].fullmatch("ctrl-k ctrl-s")


def test_string_tokens_match_literally() -> None:
    patterns = prefix_patterns("ctrl-. x")

    assert patterns[0].fullmatch("ctrl-.")
    assert not patterns[0].fullmatch("ctrl-a")


def test_string_targets_are_case_sensitive() -> None:
    patterns = prefix_patterns("ctrl-a")

    assert patterns[0].fullmatch("ctrl-a")
    assert not patterns[0].fullmatch("ctrl-A")


def test_case_folding_is_opt_in_through_a_compiled_pattern() -> None:
    patterns = prefix_patterns(re.compile(r"ctrl-a ctrl-s", re.IGNORECASE))

    assert patterns[1].fullmatch("ctrl-A ctrl-S")


def test_compiled_pattern_fragments_are_used_verbatim() -> None:
    patterns = prefix_patterns(re.compile(r"alt-x f\d+ (Enter|Escape)", re.IGNORECASE))

    assert len(patterns) == 3
    assert patterns[1].fullmatch("alt-x f12")
    assert patterns[2].fullmatch("ALT-X F3 escape")
    assert patterns[2].flags & re.IGNORECASE


def test_compiled_pattern_case_flag_carries_over() -> None:
    patterns = prefix_patterns(re.compile(r"ctrl-x (Enter|Escape)"))

    assert patterns[1].fullmatch("ctrl-x Escape")
    assert not patterns[1].fullmatch("ctrl-x escape")


def test_empty_target_is_rejected() -> None:
    with pytest.raises(ValueError):
        prefix_patterns("   ")


def test_broken_fragment_fails_at_build_time() -> None:
    with pytest.raises(re.error):
        prefix_patterns(re.compile(r"(a b)"))
