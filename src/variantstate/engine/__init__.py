"""variantstate engine: classification, transitions and exhaustive dispatch.

Entry point::

    from variantstate.engine import classify, transition, describe
    from variantstate.model.switch import TriStateSwitch

    classify(34645)                    # IntCategory.MEDIUM
    transition(TriStateSwitch.OFF)     # TriStateSwitch.LOW
    describe(TriStateSwitch.HIGH)      # "High"
"""

from __future__ import annotations

from ._classify import classify, load_classification_table
from ._derive import (
    derive,
    describe,
    has_valid_check_digit,
    heart_count,
    is_reachable,
    payload_of,
    primary_action_title,
)
from ._errors import (
    InvalidTransition,
    NonExhaustiveDispatch,
    UnknownRawValue,
    VariantError,
)
from ._families import FAMILIES, Family, family_of
from ._machine import VariantMachine
from ._raw_values import (
    CONNECTION_TYPE_RAW_VALUES,
    SWITCH_RAW_VALUES,
    RawValueTable,
)
from ._transitions import (
    ACTIVATION_TABLE,
    SWITCH_SUCCESSOR,
    has_transitions,
    transition,
)

__all__ = [
    "ACTIVATION_TABLE",
    "CONNECTION_TYPE_RAW_VALUES",
    "FAMILIES",
    "SWITCH_RAW_VALUES",
    "SWITCH_SUCCESSOR",
    "Family",
    "InvalidTransition",
    "NonExhaustiveDispatch",
    "RawValueTable",
    "UnknownRawValue",
    "VariantError",
    "VariantMachine",
    "classify",
    "derive",
    "describe",
    "family_of",
    "has_transitions",
    "has_valid_check_digit",
    "heart_count",
    "is_reachable",
    "load_classification_table",
    "payload_of",
    "primary_action_title",
    "transition",
]
