"""Stateful chord-chain matching bound to keystroke events."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Literal, Optional

from chordmap.runtime.telemetry import record_event, span

from .keystrokes import Keystroke, KeystrokeEvent, derive_token
from .patterns import KeyTarget, prefix_patterns

KeystrokeCallback = Callable[[Keystroke], object]
MatchStatus = Literal["match", "partial", "miss", "ignored"]


def prevent_default(keystroke: Keystroke) -> None:
    """Default partial-match callback: keep the platform from acting on a
    keystroke that only started a chord."""

    keystroke.prevent_default()


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of feeding one keystroke to a ``Binder``."""

    status: MatchStatus
    keystroke: Keystroke
    sequence: Optional[str] = None
    callback_result: object = None

    @property
    def matched(self) -> bool:
        return self.status == "match"


@dataclass(slots=True)
class _InFlight:
    element: Any
    sequence: str


def _drop_first(sequence: str) -> str:
    return sequence.partition(" ")[2]


class Binder:
    """Matches a chord chain against keystrokes, one state slot per element.

    Instances are callables: attach one as the key handler of any number of
    elements. Each element gets its own in-flight partial sequence, and two
    binders on the same element never share state.

    A chord in flight keeps a reference to its element; call ``reset`` when
    an element is discarded so it can be collected.
    """

    def __init__(
        self,
        target: KeyTarget,
        on_match: KeystrokeCallback,
        on_partial_match: Optional[KeystrokeCallback] = None,
        *,
        name: str | None = None,
        logger_name: str | None = None,
    ) -> None:
        if not callable(on_match):
            raise TypeError("on_match must be callable")
        if on_partial_match is not None and not callable(on_partial_match):
            raise TypeError("on_partial_match must be callable")

        self._target = target
        self._name = name or str(getattr(target, "pattern", target))
        self._logger_name = logger_name
        with span(
            "keymaps::bind",
            logger_name=logger_name,
            component="keymaps",
            metadata={"binding": self._name},
        ) as handle:
            self._patterns = prefix_patterns(target)
            handle.add_metadata("length", len(self._patterns))
        self._on_match = on_match
        self._on_partial_match = on_partial_match or prevent_default
        self._in_flight: Dict[int, _InFlight] = {}
        self._lock = threading.Lock()

    @property
    def target(self) -> KeyTarget:
        return self._target

    @property
    def name(self) -> str:
        return self._name

    @property
    def patterns(self) -> tuple:
        return self._patterns

    @property
    def length(self) -> int:
        return len(self._patterns)

    def pending(self, element: Any = None) -> Optional[str]:
        """Return the partial sequence currently held for ``element``."""

        with self._lock:
            entry = self._in_flight.get(id(element))
            return entry.sequence if entry else None

    def reset(self, element: Any = None) -> None:
        """Abandon the in-flight sequence of ``element`` and release it."""

        with self._lock:
            self._in_flight.pop(id(element), None)

    def reset_all(self) -> None:
        with self._lock:
            self._in_flight.clear()

    def __call__(self, event: KeystrokeEvent) -> MatchResult:
        return self.handle(event)

    def handle(self, event: KeystrokeEvent) -> MatchResult:
        token, keystroke = derive_token(event)
        if token is None:
            return MatchResult(status="ignored", keystroke=keystroke)

        with span(
            "keymaps::dispatch",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding": self._name, "token": token},
        ) as handle:
            status, sequence, abandoned = self._advance(event.current_target, token)
            handle.add_metadata("status", status)
            if sequence is None:
                if abandoned:
                    record_event(
                        "keymaps.abandoned",
                        level="debug",
                        data={
                            "binding": self._name,
                            "sequence": abandoned,
                            "token": token,
                        },
                        logger_name=self._logger_name,
                    )
                return MatchResult(status=status, keystroke=keystroke)

            handle.add_metadata("sequence", sequence)
            keystroke = keystroke.with_sequence(sequence)
            callback = self._on_match if status == "match" else self._on_partial_match
            return MatchResult(
                status=status,
                keystroke=keystroke,
                sequence=sequence,
                callback_result=callback(keystroke),
            )

    def _advance(
        self, element: Any, token: str
    ) -> tuple[MatchStatus, Optional[str], Optional[str]]:
        slot = id(element)
        with self._lock:
            entry = self._in_flight.get(slot)
            candidate = f"{entry.sequence} {token}" if entry else token
            while candidate:
                length = candidate.count(" ") + 1
                if length <= len(self._patterns) and self._patterns[length - 1].fullmatch(
                    candidate
                ):
                    if length == len(self._patterns):
                        self._in_flight.pop(slot, None)
                        return "match", candidate, None
                    self._in_flight[slot] = _InFlight(element, candidate)
                    return "partial", candidate, None
                # The chain may have started later than assumed ("a a b" fed
                # "a a a b"): retry without the oldest keystroke.
                candidate = _drop_first(candidate)
            self._in_flight.pop(slot, None)
            return "miss", None, entry.sequence if entry else None

    def __repr__(self) -> str:
        return f"Binder({self._name!r}, length={len(self._patterns)})"


def build_binder(
    target: KeyTarget,
    on_match: KeystrokeCallback,
    on_partial_match: Optional[KeystrokeCallback] = None,
    *,
    name: str | None = None,
    logger_name: str | None = None,
) -> Binder:
    """Compile ``target`` and return a keystroke handler for it.

    ``target`` is a chord chain such as ``"ctrl-k ctrl-s"`` (any supported
    notation) or a compiled pattern whose whitespace separated fragments
    match one keystroke each. Pattern errors surface here, not on the first
    keystroke.
    """

    return Binder(
        target,
        on_match,
        on_partial_match,
        name=name,
        logger_name=logger_name,
    )


__all__ = [
    "Binder",
    "KeystrokeCallback",
    "MatchResult",
    "MatchStatus",
    "build_binder",
    "prevent_default",
]
