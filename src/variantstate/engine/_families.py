"""Family registry: which closed variant set a value belongs to.

Every dispatcher in the engine looks a value up here first.  Enum families
are keyed by member; model families are keyed by their ``kind`` string.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Any, get_args

from variantstate.model.activation import ActivationState
from variantstate.model.barcode import Barcode
from variantstate.model.category import IntCategory
from variantstate.model.player import PlayerState
from variantstate.model.reachability import NetworkReachabilityStatus
from variantstate.model.switch import TriStateSwitch


@dataclass(frozen=True)
class Family:
    """A closed set of variants.

    Attributes
    ----------
    name
        Human-readable family name, used in error messages.
    keys
        Every dispatch key of the family (enum members or ``kind`` strings).
    types
        Python types whose instances belong to the family.
    """

    name: str
    keys: frozenset[Hashable]
    types: tuple[type, ...]

    def key_of(self, value: Any) -> Hashable:
        if isinstance(value, Enum):
            return value
        return value.kind


def enum_family(enum_cls: type[Enum]) -> Family:
    return Family(enum_cls.__name__, frozenset(enum_cls), (enum_cls,))


def model_family(name: str, alias: Any) -> Family:
    """Build a family from an ``Annotated[Union[...], Field(discriminator=...)]`` alias."""
    union = get_args(alias)[0]
    members = get_args(union)
    kinds = frozenset(m.model_fields["kind"].default for m in members)
    return Family(name, kinds, members)


SWITCH_FAMILY = enum_family(TriStateSwitch)
CATEGORY_FAMILY = enum_family(IntCategory)
ACTIVATION_FAMILY = enum_family(ActivationState)
REACHABILITY_FAMILY = model_family("NetworkReachabilityStatus", NetworkReachabilityStatus)
PLAYER_FAMILY = model_family("PlayerState", PlayerState)
BARCODE_FAMILY = model_family("Barcode", Barcode)

FAMILIES: tuple[Family, ...] = (
    SWITCH_FAMILY,
    CATEGORY_FAMILY,
    ACTIVATION_FAMILY,
    REACHABILITY_FAMILY,
    PLAYER_FAMILY,
    BARCODE_FAMILY,
)

_FAMILY_BY_TYPE: dict[type, Family] = {
    t: family for family in FAMILIES for t in family.types
}


def family_of(value: Any) -> Family | None:
    """Return the family *value* belongs to, or None for foreign values."""
    return _FAMILY_BY_TYPE.get(type(value))


def _label(key: Hashable) -> str:
    return key.name if isinstance(key, Enum) else str(key)


def require_exhaustive(
    family: Family,
    table: dict[Hashable, Any],
    what: str,
    error: type[Exception],
) -> None:
    """Raise *error* unless *table* is keyed by exactly the family's variants."""
    table_keys = set(table)
    missing = family.keys - table_keys
    extra = table_keys - family.keys
    if missing or extra:
        parts = []
        if missing:
            parts.append(f"missing {sorted(_label(k) for k in missing)}")
        if extra:
            parts.append(f"unexpected {sorted(_label(k) for k in extra)}")
        raise error(f"{what} for {family.name} is not exhaustive: {', '.join(parts)}")
