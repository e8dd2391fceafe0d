"""Classification of raw magnitudes into ``IntCategory`` variants."""

from __future__ import annotations

import logging
from numbers import Real
from pathlib import Path
from typing import Any

from variantstate.model.category import (
    INT_CATEGORY_TABLE,
    ClassificationTable,
    IntCategory,
)

logger = logging.getLogger(__name__)


def classify(
    value: Any,
    table: ClassificationTable = INT_CATEGORY_TABLE,
) -> IntCategory:
    """Return the category whose range contains *value*.

    Rules are tried in order; the first ``[lower, upper)`` range containing
    *value* wins.  Anything no rule claims (negative numbers, values past
    the last range, NaN, and non-numeric input such as None or "5") falls
    to ``table.default``.
    """
    if not isinstance(value, Real):
        return table.default
    for rule in table.rules:
        if rule.contains(value):
            return rule.variant
    return table.default


def load_classification_table(path: str | Path) -> ClassificationTable:
    """Load and validate a classification table from a JSON file.

    Raises ``pydantic.ValidationError`` for malformed or overlapping rules.
    """
    path = Path(path)
    table = ClassificationTable.model_validate_json(path.read_text(encoding="utf-8"))
    logger.debug("Loaded %d classification rules from %s", len(table.rules), path)
    return table
