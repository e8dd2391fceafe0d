"""Raw-value tables: explicit two-way mappings between variants and primitives.

A variant's raw value is never inferred from its name.  Each table is
built from an explicit ``{member: raw}`` mapping that must cover every
member of the enum and use each raw value once.
"""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from variantstate.model.reachability import ConnectionType
from variantstate.model.switch import TriStateSwitch

from ._errors import UnknownRawValue, VariantError
from ._families import enum_family, require_exhaustive

E = TypeVar("E", bound=Enum)


class RawValueTable(Generic[E]):
    """Bidirectional mapping between the members of *enum_cls* and raw values.

    Parameters
    ----------
    enum_cls : type[Enum]
        The variant family.
    mapping : dict[Enum, object]
        Member -> raw value.  Must name every member; raw values must be
        unique and hashable.
    """

    def __init__(self, enum_cls: type[E], mapping: dict[E, object]) -> None:
        require_exhaustive(
            enum_family(enum_cls), mapping, "raw values", VariantError,
        )
        reverse: dict[object, E] = {}
        for member, raw in mapping.items():
            if raw in reverse:
                raise VariantError(
                    f"raw value {raw!r} is shared by {reverse[raw].name} "
                    f"and {member.name}"
                )
            reverse[raw] = member
        self.enum_cls = enum_cls
        self._to_raw = dict(mapping)
        self._from_raw = reverse

    def to_raw(self, member: E) -> object:
        if not isinstance(member, self.enum_cls):
            raise VariantError(
                f"expected a {self.enum_cls.__name__} member, got {member!r}"
            )
        return self._to_raw[member]

    def from_raw(self, raw: object) -> E:
        try:
            return self._from_raw[raw]
        except (KeyError, TypeError):
            raise UnknownRawValue(
                f"{raw!r} is not a raw value of {self.enum_cls.__name__}"
            ) from None

    def __repr__(self) -> str:
        return f"RawValueTable({self.enum_cls.__name__}, {self._to_raw!r})"


SWITCH_RAW_VALUES: RawValueTable[TriStateSwitch] = RawValueTable(TriStateSwitch, {
    TriStateSwitch.OFF: 0,
    TriStateSwitch.LOW: 1,
    TriStateSwitch.HIGH: 2,
})

CONNECTION_TYPE_RAW_VALUES: RawValueTable[ConnectionType] = RawValueTable(ConnectionType, {
    ConnectionType.ETHERNET_OR_WIFI: "ethernetOrWiFi",
    ConnectionType.WWAN: "wwan",
})
