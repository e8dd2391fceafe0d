"""Variant machine: a holder that rebinds itself to successive variants.

The values it holds stay immutable; ``send()`` replaces the held value
with the result of ``transition()``.
"""

from __future__ import annotations

import logging
from typing import Any

from ._derive import describe
from ._errors import InvalidTransition
from ._transitions import has_transitions, transition

logger = logging.getLogger(__name__)


class VariantMachine:
    """Holds the current variant of one family and its history.

    Parameters
    ----------
    initial
        Starting variant.  Must belong to a family with transitions
        (tri-state switch, player, reachability or activation).
    """

    def __init__(self, initial: Any) -> None:
        if not has_transitions(initial):
            raise InvalidTransition(
                f"{type(initial).__name__} value {initial!r} has no transitions"
            )
        self._initial = initial
        self._state = initial
        self._history: list[Any] = [initial]

    @property
    def state(self) -> Any:
        return self._state

    @property
    def history(self) -> tuple[Any, ...]:
        """Every value held so far, oldest first, including the current one."""
        return tuple(self._history)

    def send(self, event: Any = None) -> Any:
        """Apply *event* to the current variant and return the new one."""
        try:
            next_state = transition(self._state, event)
        except InvalidTransition:
            logger.warning(
                "Rejected event %r in state %s", event, describe(self._state)
            )
            raise
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s -> %s (event=%r)", describe(self._state), describe(next_state), event
            )
        self._state = next_state
        self._history.append(next_state)
        return next_state

    def advance(self, steps: int = 1) -> Any:
        """Apply *steps* event-less transitions (tri-state switches only)."""
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        for _ in range(steps):
            self.send()
        return self._state

    def reset(self) -> None:
        """Return to the initial variant and clear the history."""
        self._state = self._initial
        self._history = [self._initial]

    def __repr__(self) -> str:
        return f"VariantMachine(state={self._state!r})"
