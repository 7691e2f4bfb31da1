"""
Unit tests for the range evaluator.

Tests cover:
1. Half-open range semantics and ordering
2. Reversed and empty ranges
3. Bound validation
"""

import pytest

from primefamilies.core.errors import ValidationError
from primefamilies.modules.families import FamilyKind, U64_MAX, evaluate, normalize_range


@pytest.mark.unit
class TestRangeSemantics:
    """evaluate() scans [start, end) in ascending order."""

    def test_end_is_exclusive(self):
        assert "7" not in evaluate(FamilyKind.PALINDROMIC, 2, 7)
        assert "7" in evaluate(FamilyKind.PALINDROMIC, 2, 8)

    def test_start_is_inclusive(self):
        assert evaluate(FamilyKind.TWIN, 5, 6) == ["(5,7)"]

    def test_hits_ascending(self):
        hits = [int(h) for h in evaluate(FamilyKind.SAFE, 2, 500)]
        assert hits == sorted(hits)

    def test_reversed_range_equals_forward(self):
        assert evaluate(FamilyKind.TWIN, 20, 3) == evaluate(FamilyKind.TWIN, 3, 20)

    @pytest.mark.parametrize("kind", FamilyKind.all())
    def test_empty_range(self, kind):
        assert evaluate(kind, 10, 10) == []

    def test_accepts_kind_name(self):
        assert evaluate("mersenne", 2, 4) == ["3", "7"]

    def test_pure(self):
        first = evaluate(FamilyKind.CIRCULAR, 2, 120)
        first.append("mutated")
        assert evaluate(FamilyKind.CIRCULAR, 2, 120)[-1] != "mutated"


@pytest.mark.unit
class TestBoundValidation:
    """Bounds must be integers in the u64 domain."""

    def test_negative_bound(self):
        with pytest.raises(ValidationError):
            evaluate(FamilyKind.TWIN, -1, 10)

    def test_bound_above_domain(self):
        with pytest.raises(ValidationError):
            evaluate(FamilyKind.TWIN, 0, U64_MAX + 1)

    def test_non_integer_bound(self):
        with pytest.raises(ValidationError):
            evaluate(FamilyKind.TWIN, 0, 10.5)

    def test_bool_bound_rejected(self):
        with pytest.raises(ValidationError):
            evaluate(FamilyKind.TWIN, True, 10)

    def test_unknown_family(self):
        with pytest.raises(ValidationError):
            evaluate("not-a-family", 0, 10)

    def test_normalize_range(self):
        assert normalize_range(9, 2) == (2, 9)
        assert normalize_range(0, U64_MAX) == (0, U64_MAX)

    def test_numpy_integers_accepted(self):
        import numpy as np

        assert normalize_range(np.uint64(5), np.int32(3)) == (3, 5)
