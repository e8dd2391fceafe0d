"""Pure transition functions: (current variant, event) -> next variant.

Each family has its own handler; ``transition`` picks the handler from the
family of the current value.  Tables are checked for totality at import
time, so a variant added to a family without a matching row fails as soon
as this module is loaded.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from typing import Any

from variantstate.model.activation import ActivationEvent, ActivationState
from variantstate.model.player import Alive, Dead, PlayerEvent
from variantstate.model.reachability import (
    LinkDown,
    LinkUp,
    NotReachable,
    Reachable,
    ReachabilityEvent,
    Reset,
    Unknown,
)
from variantstate.model.switch import TriStateSwitch

from ._errors import InvalidTransition, NonExhaustiveDispatch
from ._families import (
    ACTIVATION_FAMILY,
    PLAYER_FAMILY,
    REACHABILITY_FAMILY,
    SWITCH_FAMILY,
    Family,
    family_of,
    model_family,
    require_exhaustive,
)


# ---------------------------------------------------------------------------
# Tri-state switch
# ---------------------------------------------------------------------------

SWITCH_SUCCESSOR: dict[TriStateSwitch, TriStateSwitch] = {
    TriStateSwitch.OFF: TriStateSwitch.LOW,
    TriStateSwitch.LOW: TriStateSwitch.HIGH,
    TriStateSwitch.HIGH: TriStateSwitch.OFF,
}

require_exhaustive(SWITCH_FAMILY, SWITCH_SUCCESSOR, "SWITCH_SUCCESSOR", NonExhaustiveDispatch)


def _next_switch(current: TriStateSwitch, event: Any) -> TriStateSwitch:
    if event is not None:
        raise InvalidTransition(
            f"TriStateSwitch transitions take no event, got {event!r}"
        )
    return SWITCH_SUCCESSOR[current]


# ---------------------------------------------------------------------------
# Player life-cycle
# ---------------------------------------------------------------------------

def _next_from_dead(current: Dead, event: PlayerEvent) -> Dead | Alive:
    if event is PlayerEvent.INCREASE_HEART:
        return Alive(hearts=1)
    return current


def _next_from_alive(current: Alive, event: PlayerEvent) -> Dead | Alive:
    if event is PlayerEvent.INCREASE_HEART:
        return Alive(hearts=current.hearts + 1)
    if current.hearts == 1:
        return Dead()
    return Alive(hearts=current.hearts - 1)


_PLAYER_DISPATCH: dict[str, Callable[[Any, PlayerEvent], Dead | Alive]] = {
    "dead": _next_from_dead,
    "alive": _next_from_alive,
}

require_exhaustive(PLAYER_FAMILY, _PLAYER_DISPATCH, "_PLAYER_DISPATCH", NonExhaustiveDispatch)


def _next_player(current: Dead | Alive, event: Any) -> Dead | Alive:
    if not isinstance(event, PlayerEvent):
        raise InvalidTransition(
            f"PlayerState transitions need a PlayerEvent, got {event!r}"
        )
    return _PLAYER_DISPATCH[current.kind](current, event)


# ---------------------------------------------------------------------------
# Network reachability
# ---------------------------------------------------------------------------

# Link events determine the next status regardless of the current one.
_REACHABILITY_EVENTS: dict[str, Callable[[Any], Unknown | NotReachable | Reachable]] = {
    "link_up": lambda event: Reachable(connection_type=event.connection_type),
    "link_down": lambda event: NotReachable(),
    "reset": lambda event: Unknown(),
}

require_exhaustive(
    model_family("ReachabilityEvent", ReachabilityEvent),
    _REACHABILITY_EVENTS,
    "_REACHABILITY_EVENTS",
    NonExhaustiveDispatch,
)


def _next_reachability(
    current: Unknown | NotReachable | Reachable,
    event: Any,
) -> Unknown | NotReachable | Reachable:
    if not isinstance(event, (LinkUp, LinkDown, Reset)):
        raise InvalidTransition(
            f"NetworkReachabilityStatus transitions need a link event, got {event!r}"
        )
    return _REACHABILITY_EVENTS[event.kind](event)


# ---------------------------------------------------------------------------
# Activation flow
# ---------------------------------------------------------------------------

_A = ActivationState
_E = ActivationEvent

ACTIVATION_TABLE: dict[tuple[ActivationState, ActivationEvent], ActivationState] = {
    (_A.ACTIVATING, _E.PRIMARY_ACTION): _A.IN_PROGRESS,
    (_A.ACTIVATING, _E.SECONDARY_ACTION): _A.CANCELLED,
    (_A.IN_PROGRESS, _E.PRIMARY_ACTION): _A.ACTIVATED,
    (_A.IN_PROGRESS, _E.SECONDARY_ACTION): _A.CANCELLED,
    (_A.ACTIVATED, _E.PRIMARY_ACTION): _A.ACTIVATED,
    (_A.ACTIVATED, _E.SECONDARY_ACTION): _A.ACTIVATED,
    (_A.CANCELLED, _E.PRIMARY_ACTION): _A.ACTIVATING,
    (_A.CANCELLED, _E.SECONDARY_ACTION): _A.CANCELLED,
}

_missing_rows = set(itertools.product(ActivationState, ActivationEvent)) - ACTIVATION_TABLE.keys()
if _missing_rows:
    raise NonExhaustiveDispatch(
        f"ACTIVATION_TABLE is missing rows: {sorted((s.value, e.value) for s, e in _missing_rows)}"
    )


def _next_activation(current: ActivationState, event: Any) -> ActivationState:
    if not isinstance(event, ActivationEvent):
        raise InvalidTransition(
            f"ActivationState transitions need an ActivationEvent, got {event!r}"
        )
    return ACTIVATION_TABLE[(current, event)]


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

_TRANSITION_DISPATCH: dict[Family, Callable[[Any, Any], Any]] = {
    SWITCH_FAMILY: _next_switch,
    PLAYER_FAMILY: _next_player,
    REACHABILITY_FAMILY: _next_reachability,
    ACTIVATION_FAMILY: _next_activation,
}


def transition(current: Any, event: Any = None) -> Any:
    """Return the variant that follows *current* when *event* occurs.

    The result is a new value; *current* is never modified.  Tri-state
    switches take no event.  Player, reachability and activation values
    require an event of their family's type.

    Raises
    ------
    InvalidTransition
        If *current* belongs to no family with transitions, or *event* is
        missing or of the wrong type.
    """
    family = family_of(current)
    handler = _TRANSITION_DISPATCH.get(family) if family is not None else None
    if handler is None:
        raise InvalidTransition(
            f"No transitions defined for {type(current).__name__} value {current!r}"
        )
    return handler(current, event)


def has_transitions(value: Any) -> bool:
    """True if *value* belongs to a family that ``transition`` accepts."""
    family = family_of(value)
    return family is not None and family in _TRANSITION_DISPATCH
