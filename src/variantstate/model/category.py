"""Integer magnitude categories and the range tables that classify into them.

A ``ClassificationTable`` is an ordered list of half-open ranges
``[lower, upper)``, each naming one ``IntCategory``, plus a default for
everything the ranges miss.  Tables are plain pydantic models so they can
be built in code or loaded from JSON::

    {
        "rules": [
            {"lower": 0, "upper": 10, "variant": "SMALL"},
            {"lower": 10, "upper": 100, "variant": "BIG"}
        ],
        "default": "WEIRD"
    }
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class IntCategory(str, Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    BIG = "BIG"
    WEIRD = "WEIRD"


class ClassificationRule(BaseModel):
    """One half-open range ``[lower, upper)`` mapped to a category."""

    model_config = ConfigDict(frozen=True)

    lower: float
    upper: float
    variant: IntCategory

    @model_validator(mode="after")
    def _bounds_check(self):
        # NaN bounds fail here too
        if not self.lower < self.upper:
            raise ValueError(
                f"lower ({self.lower}) must be < upper ({self.upper})"
            )
        return self

    def contains(self, value: float) -> bool:
        return self.lower <= value < self.upper


class ClassificationTable(BaseModel):
    """Ordered, non-overlapping rules with a catch-all default."""

    model_config = ConfigDict(frozen=True)

    rules: tuple[ClassificationRule, ...] = ()
    default: IntCategory

    @model_validator(mode="after")
    def _validate_ordering(self):
        for prev, rule in zip(self.rules, self.rules[1:]):
            if rule.lower < prev.upper:
                raise ValueError(
                    f"rules must be sorted and non-overlapping: "
                    f"[{rule.lower}, {rule.upper}) starts before "
                    f"[{prev.lower}, {prev.upper}) ends"
                )
        return self


INT_CATEGORY_TABLE = ClassificationTable(
    rules=(
        ClassificationRule(lower=0, upper=1_000, variant=IntCategory.SMALL),
        ClassificationRule(lower=1_000, upper=100_000, variant=IntCategory.MEDIUM),
        ClassificationRule(lower=100_000, upper=1_000_000, variant=IntCategory.BIG),
    ),
    default=IntCategory.WEIRD,
)
