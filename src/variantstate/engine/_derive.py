"""Exhaustive dispatch: derived properties and payload extraction.

``derive`` is the single dispatch primitive.  It refuses a handler table
that does not name every variant of the value's family, so there is no
default branch to fall into when a family grows a new variant.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Any, TypeVar

from variantstate.model.activation import ActivationState
from variantstate.model.barcode import Upc
from variantstate.model.category import IntCategory
from variantstate.model.player import Alive
from variantstate.model.reachability import ConnectionType
from variantstate.model.switch import TriStateSwitch

from ._errors import NonExhaustiveDispatch, VariantError
from ._families import (
    ACTIVATION_FAMILY,
    BARCODE_FAMILY,
    CATEGORY_FAMILY,
    FAMILIES,
    PLAYER_FAMILY,
    REACHABILITY_FAMILY,
    SWITCH_FAMILY,
    Family,
    family_of,
    require_exhaustive,
)

T = TypeVar("T")


def _family_or_raise(variant: Any) -> Family:
    family = family_of(variant)
    if family is None:
        raise VariantError(
            f"{type(variant).__name__} value {variant!r} is not a declared variant"
        )
    return family


def _expect(variant: Any, family: Family) -> None:
    if family_of(variant) is not family:
        raise VariantError(
            f"expected a {family.name} variant, got {type(variant).__name__} {variant!r}"
        )


def derive(variant: Any, handlers: Mapping[Hashable, Callable[[Any], T]]) -> T:
    """Run the handler registered for *variant* and return its result.

    *handlers* is keyed by enum member (payload-less families) or by
    ``kind`` string (payload-carrying families) and must cover every
    variant of the family.

    Raises
    ------
    NonExhaustiveDispatch
        If *handlers* misses a variant of the family or names a foreign one.
    VariantError
        If *variant* belongs to no declared family.
    """
    family = _family_or_raise(variant)
    require_exhaustive(family, handlers, "handler table", NonExhaustiveDispatch)
    return handlers[family.key_of(variant)](variant)


# ---------------------------------------------------------------------------
# describe
# ---------------------------------------------------------------------------

_CONNECTION_NAMES: dict[ConnectionType, str] = {
    ConnectionType.ETHERNET_OR_WIFI: "Ethernet or Wi-Fi",
    ConnectionType.WWAN: "WWAN",
}


def _describe_alive(player: Alive) -> str:
    noun = "heart" if player.hearts == 1 else "hearts"
    return f"Alive with {player.hearts} {noun}"


def _describe_upc(code: Upc) -> str:
    return f"UPC: {code.number_system}, {code.manufacturer}, {code.product}, {code.check}."


_DESCRIBERS: dict[Family, dict[Hashable, Callable[[Any], str]]] = {
    SWITCH_FAMILY: {
        TriStateSwitch.OFF: lambda _: "Off",
        TriStateSwitch.LOW: lambda _: "Low",
        TriStateSwitch.HIGH: lambda _: "High",
    },
    CATEGORY_FAMILY: {
        IntCategory.SMALL: lambda _: "Small",
        IntCategory.MEDIUM: lambda _: "Medium",
        IntCategory.BIG: lambda _: "Big",
        IntCategory.WEIRD: lambda _: "Weird",
    },
    ACTIVATION_FAMILY: {
        ActivationState.ACTIVATING: lambda _: "Activating",
        ActivationState.IN_PROGRESS: lambda _: "In Progress",
        ActivationState.ACTIVATED: lambda _: "Activated",
        ActivationState.CANCELLED: lambda _: "Cancelled",
    },
    REACHABILITY_FAMILY: {
        "unknown": lambda _: "Unknown",
        "not_reachable": lambda _: "Not reachable",
        "reachable": lambda s: f"Reachable via {_CONNECTION_NAMES[s.connection_type]}",
    },
    PLAYER_FAMILY: {
        "dead": lambda _: "Dead",
        "alive": _describe_alive,
    },
    BARCODE_FAMILY: {
        "upc": _describe_upc,
        "qr_code": lambda b: f"QR code: {b.code}.",
    },
}


def describe(variant: Any) -> str:
    """Human-readable label for any declared variant."""
    family = _family_or_raise(variant)
    return derive(variant, _DESCRIBERS[family])


# ---------------------------------------------------------------------------
# payload_of
# ---------------------------------------------------------------------------

def _no_payload(_: Any) -> None:
    return None


# Enum families carry no payload and have no entry here.
_PAYLOAD_EXTRACTORS: dict[Family, dict[Hashable, Callable[[Any], Any]]] = {
    REACHABILITY_FAMILY: {
        "unknown": _no_payload,
        "not_reachable": _no_payload,
        "reachable": lambda s: s.connection_type,
    },
    PLAYER_FAMILY: {
        "dead": _no_payload,
        "alive": lambda p: p.hearts,
    },
    BARCODE_FAMILY: {
        "upc": lambda b: b.digits,
        "qr_code": lambda b: b.code,
    },
}


def payload_of(variant: Any) -> Any:
    """Return the data attached to *variant*, or None if it carries none.

    ``Reachable`` -> ``ConnectionType``, ``Alive`` -> heart count,
    ``Upc`` -> ``UpcDigits``, ``QRCode`` -> the code string.
    """
    family = _family_or_raise(variant)
    extractors = _PAYLOAD_EXTRACTORS.get(family)
    if extractors is None:
        return None
    return derive(variant, extractors)


# ---------------------------------------------------------------------------
# Family-specific derived properties
# ---------------------------------------------------------------------------

def is_reachable(status: Any) -> bool:
    _expect(status, REACHABILITY_FAMILY)
    return derive(status, {
        "unknown": lambda _: False,
        "not_reachable": lambda _: False,
        "reachable": lambda _: True,
    })


def heart_count(player: Any) -> int:
    """Hearts held by *player*; a dead player has none."""
    _expect(player, PLAYER_FAMILY)
    return derive(player, {
        "dead": lambda _: 0,
        "alive": lambda p: p.hearts,
    })


def _upc_check_digit(code: Upc) -> int:
    """UPC-A check digit over the eleven data digits."""
    digits = [
        int(c)
        for c in f"{code.number_system}{code.manufacturer:05d}{code.product:05d}"
    ]
    odd = sum(digits[0::2])
    even = sum(digits[1::2])
    return (10 - (odd * 3 + even) % 10) % 10


def has_valid_check_digit(barcode: Any) -> bool:
    """True if a UPC's check digit matches its data digits.  QR codes always pass."""
    _expect(barcode, BARCODE_FAMILY)
    return derive(barcode, {
        "upc": lambda b: _upc_check_digit(b) == b.check,
        "qr_code": lambda _: True,
    })


def primary_action_title(state: ActivationState) -> str:
    """Label of the primary call-to-action button shown in *state*."""
    _expect(state, ACTIVATION_FAMILY)
    return derive(state, {
        ActivationState.ACTIVATING: lambda _: "Activate",
        ActivationState.IN_PROGRESS: lambda _: "Finish",
        ActivationState.ACTIVATED: lambda _: "Done",
        ActivationState.CANCELLED: lambda _: "Restart",
    })


# ---------------------------------------------------------------------------
# Import-time coverage checks
# ---------------------------------------------------------------------------

_undescribed = [f.name for f in FAMILIES if f not in _DESCRIBERS]
if _undescribed:
    raise NonExhaustiveDispatch(f"No describer for families: {_undescribed}")

for _family, _table in _DESCRIBERS.items():
    require_exhaustive(_family, _table, "_DESCRIBERS", NonExhaustiveDispatch)
for _family, _table in _PAYLOAD_EXTRACTORS.items():
    require_exhaustive(_family, _table, "_PAYLOAD_EXTRACTORS", NonExhaustiveDispatch)
