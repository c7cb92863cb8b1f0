from __future__ import annotations

import pytest

from chordmap.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_span_reraises_and_keeps_metadata() -> None:
    with pytest.raises(KeyError):
        with telemetry.span(
            "keymaps::test", component="keymaps", metadata={"binding": "ctrl-s"}
        ) as handle:
            handle.add_metadata("status", "match")
            assert handle.metadata == {"binding": "ctrl-s", "status": "match"}
            raise KeyError("boom")
