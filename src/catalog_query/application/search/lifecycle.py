"""Application search – query lifecycle state machine.

The happy path is ``IDLE -> EDITING -> SETTLED -> FETCHING -> DISPLAYED``.
A keystroke during a fetch re-enters ``EDITING``; facet, page and navigation
changes go straight to ``FETCHING``; a settle that changes nothing drops back
to ``IDLE``; ``reset`` returns any phase to ``IDLE``.
"""
from __future__ import annotations

import dataclasses
from datetime import datetime, timezone
from enum import Enum

__all__ = ["InvalidTransitionError", "Phase", "PhaseChange", "QueryLifecycle"]


class Phase(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    SETTLED = "settled"
    FETCHING = "fetching"
    DISPLAYED = "displayed"


_TRANSITIONS: dict[Phase, frozenset[Phase]] = {
    Phase.IDLE: frozenset({Phase.EDITING, Phase.FETCHING}),
    Phase.EDITING: frozenset({Phase.EDITING, Phase.SETTLED, Phase.FETCHING, Phase.IDLE}),
    Phase.SETTLED: frozenset({Phase.FETCHING, Phase.IDLE, Phase.EDITING}),
    Phase.FETCHING: frozenset({Phase.FETCHING, Phase.EDITING, Phase.DISPLAYED, Phase.IDLE}),
    Phase.DISPLAYED: frozenset({Phase.EDITING, Phase.FETCHING, Phase.IDLE}),
}


class InvalidTransitionError(Exception):
    """Raised when a phase change is not declared in the lifecycle."""

    def __init__(self, from_phase: Phase, to_phase: Phase) -> None:
        super().__init__(f"No transition from '{from_phase.value}' to '{to_phase.value}'")
        self.from_phase = from_phase
        self.to_phase = to_phase


@dataclasses.dataclass(frozen=True)
class PhaseChange:
    """Immutable history entry for a completed transition."""

    from_phase: Phase
    to_phase: Phase
    occurred_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(timezone.utc))


class QueryLifecycle:
    """Tracks the phase of a listing's current query."""

    def __init__(self, *, keep_history: int = 50) -> None:
        self._phase = Phase.IDLE
        self._keep = keep_history
        self._history: list[PhaseChange] = []

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def history(self) -> list[PhaseChange]:
        return list(self._history)

    def can_advance(self, to: Phase) -> bool:
        return to in _TRANSITIONS[self._phase]

    def advance(self, to: Phase) -> Phase:
        if not self.can_advance(to):
            raise InvalidTransitionError(self._phase, to)
        self._history.append(PhaseChange(self._phase, to))
        del self._history[: -self._keep]
        self._phase = to
        return to

    def reset(self) -> None:
        if self._phase is not Phase.IDLE:
            self.advance(Phase.IDLE)
