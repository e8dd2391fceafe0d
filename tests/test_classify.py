"""Tests for classification of magnitudes into IntCategory."""

import json
import math

import pytest
from pydantic import ValidationError

from variantstate.engine import classify, load_classification_table
from variantstate.model.category import (
    INT_CATEGORY_TABLE,
    ClassificationRule,
    ClassificationTable,
    IntCategory,
)


# ---------------------------------------------------------------------------
# Default table
# ---------------------------------------------------------------------------

class TestDefaultTable:
    def test_small(self):
        assert classify(500) is IntCategory.SMALL

    def test_medium(self):
        assert classify(34645) is IntCategory.MEDIUM

    def test_big(self):
        assert classify(250_000) is IntCategory.BIG

    def test_weird_above_last_range(self):
        assert classify(1_000_000) is IntCategory.WEIRD
        assert classify(10**12) is IntCategory.WEIRD

    def test_weird_negative(self):
        assert classify(-1) is IntCategory.WEIRD

    def test_nan_falls_to_default(self):
        assert classify(math.nan) is IntCategory.WEIRD

    def test_lower_bound_inclusive(self):
        assert classify(0) is IntCategory.SMALL
        assert classify(1_000) is IntCategory.MEDIUM
        assert classify(100_000) is IntCategory.BIG

    def test_upper_bound_exclusive(self):
        assert classify(999) is IntCategory.SMALL
        assert classify(99_999) is IntCategory.MEDIUM
        assert classify(999_999) is IntCategory.BIG

    def test_floats(self):
        assert classify(999.5) is IntCategory.SMALL
        assert classify(-0.5) is IntCategory.WEIRD

    @pytest.mark.parametrize("value", [None, "5", b"5", [500], object()])
    def test_non_numeric_falls_to_default(self, value):
        assert classify(value) is IntCategory.WEIRD

    def test_deterministic(self):
        results = {classify(34645) for _ in range(10)}
        assert results == {IntCategory.MEDIUM}

    def test_every_input_lands_in_exactly_one_place(self):
        for value in [-5, 0, 1, 999, 1000, 5000, 99_999, 100_000, 999_999, 1_000_000]:
            claimed = [r for r in INT_CATEGORY_TABLE.rules if r.contains(value)]
            assert len(claimed) <= 1
            expected = claimed[0].variant if claimed else INT_CATEGORY_TABLE.default
            assert classify(value) is expected


# ---------------------------------------------------------------------------
# Custom tables
# ---------------------------------------------------------------------------

class TestCustomTable:
    def test_custom_ranges(self):
        table = ClassificationTable(
            rules=[
                ClassificationRule(lower=0, upper=10, variant=IntCategory.SMALL),
                ClassificationRule(lower=10, upper=20, variant=IntCategory.BIG),
            ],
            default=IntCategory.MEDIUM,
        )
        assert classify(5, table) is IntCategory.SMALL
        assert classify(15, table) is IntCategory.BIG
        assert classify(25, table) is IntCategory.MEDIUM

    def test_empty_table_is_all_default(self):
        table = ClassificationTable(default=IntCategory.WEIRD)
        assert classify(0, table) is IntCategory.WEIRD
        assert classify(500, table) is IntCategory.WEIRD

    def test_gaps_fall_to_default(self):
        table = ClassificationTable(
            rules=[
                ClassificationRule(lower=0, upper=10, variant=IntCategory.SMALL),
                ClassificationRule(lower=20, upper=30, variant=IntCategory.BIG),
            ],
            default=IntCategory.WEIRD,
        )
        assert classify(15, table) is IntCategory.WEIRD


# ---------------------------------------------------------------------------
# Table validation
# ---------------------------------------------------------------------------

class TestTableValidation:
    def test_nan_bound_rejected(self):
        with pytest.raises(ValidationError, match="must be < upper"):
            ClassificationRule(lower=math.nan, upper=10, variant=IntCategory.SMALL)
        with pytest.raises(ValidationError, match="must be < upper"):
            ClassificationRule(lower=0, upper=math.nan, variant=IntCategory.SMALL)

    def test_nan_cannot_hide_unsorted_rules(self):
        with pytest.raises(ValidationError):
            ClassificationTable(
                rules=[
                    {"lower": 0, "upper": math.nan, "variant": "SMALL"},
                    {"lower": -5, "upper": 3, "variant": "BIG"},
                ],
                default=IntCategory.WEIRD,
            )

    def test_infinite_bounds_allowed(self):
        rule = ClassificationRule(lower=-math.inf, upper=0, variant=IntCategory.WEIRD)
        assert rule.contains(-1e300)

    def test_empty_range_rejected(self):
        with pytest.raises(ValidationError, match="must be < upper"):
            ClassificationRule(lower=10, upper=10, variant=IntCategory.SMALL)

    def test_inverted_range_rejected(self):
        with pytest.raises(ValidationError, match="must be < upper"):
            ClassificationRule(lower=10, upper=5, variant=IntCategory.SMALL)

    def test_overlapping_rules_rejected(self):
        with pytest.raises(ValidationError, match="non-overlapping"):
            ClassificationTable(
                rules=[
                    ClassificationRule(lower=0, upper=10, variant=IntCategory.SMALL),
                    ClassificationRule(lower=5, upper=20, variant=IntCategory.BIG),
                ],
                default=IntCategory.WEIRD,
            )

    def test_unsorted_rules_rejected(self):
        with pytest.raises(ValidationError, match="non-overlapping"):
            ClassificationTable(
                rules=[
                    ClassificationRule(lower=10, upper=20, variant=IntCategory.BIG),
                    ClassificationRule(lower=0, upper=10, variant=IntCategory.SMALL),
                ],
                default=IntCategory.WEIRD,
            )

    def test_unknown_variant_rejected(self):
        with pytest.raises(ValidationError):
            ClassificationRule(lower=0, upper=1, variant="HUGE")

    def test_table_is_frozen(self):
        with pytest.raises(ValidationError):
            INT_CATEGORY_TABLE.default = IntCategory.SMALL


# ---------------------------------------------------------------------------
# Loading from JSON
# ---------------------------------------------------------------------------

class TestLoadClassificationTable:
    def test_load(self, tmp_path):
        path = tmp_path / "table.json"
        path.write_text(json.dumps({
            "rules": [
                {"lower": 0, "upper": 100, "variant": "SMALL"},
                {"lower": 100, "upper": 200, "variant": "BIG"},
            ],
            "default": "WEIRD",
        }))
        table = load_classification_table(path)
        assert classify(50, table) is IntCategory.SMALL
        assert classify(150, table) is IntCategory.BIG
        assert classify(250, table) is IntCategory.WEIRD

    def test_load_accepts_str_path(self, tmp_path):
        path = tmp_path / "table.json"
        path.write_text(json.dumps({"default": "SMALL"}))
        table = load_classification_table(str(path))
        assert table.rules == ()
        assert table.default is IntCategory.SMALL

    def test_load_rejects_overlap(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({
            "rules": [
                {"lower": 0, "upper": 100, "variant": "SMALL"},
                {"lower": 50, "upper": 200, "variant": "BIG"},
            ],
            "default": "WEIRD",
        }))
        with pytest.raises(ValidationError, match="non-overlapping"):
            load_classification_table(path)

    def test_default_table_round_trips_through_json(self, tmp_path):
        path = tmp_path / "default.json"
        path.write_text(INT_CATEGORY_TABLE.model_dump_json())
        assert load_classification_table(path) == INT_CATEGORY_TABLE
