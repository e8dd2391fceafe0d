"""Shared test helpers for the variantstate test suite."""

from variantstate.engine import transition
from variantstate.model.activation import ActivationState
from variantstate.model.barcode import QRCode, Upc
from variantstate.model.category import IntCategory
from variantstate.model.player import Alive, Dead
from variantstate.model.reachability import (
    ConnectionType,
    NotReachable,
    Reachable,
    Unknown,
)
from variantstate.model.switch import TriStateSwitch


# One value per variant of every family.
ALL_VARIANTS = [
    *TriStateSwitch,
    *IntCategory,
    *ActivationState,
    Unknown(),
    NotReachable(),
    Reachable(connection_type=ConnectionType.ETHERNET_OR_WIFI),
    Reachable(connection_type=ConnectionType.WWAN),
    Dead(),
    Alive(hearts=1),
    Alive(hearts=3),
    Upc(number_system=8, manufacturer=85909, product=51226, check=3),
    QRCode(code="ABCDEFGHIJKLMNOP"),
]


def run_events(start, events):
    """Apply *events* in order from *start*; return every value visited."""
    visited = [start]
    current = start
    for event in events:
        current = transition(current, event)
        visited.append(current)
    return visited


def upc(ns, manufacturer, product, check):
    """Shorthand for a Upc barcode."""
    return Upc(number_system=ns, manufacturer=manufacturer, product=product, check=check)
