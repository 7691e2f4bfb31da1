"""Unit tests for the family predicate library.

Tests cover:
    - Known members of every family
    - Overflow and out-of-domain candidates
    - Registry dispatch (decorator, alternate registries)
    - Checked arithmetic helpers
"""

import pytest

from primefamilies.core.errors import ArithmeticOverflowError, ValidationError
from primefamilies.modules.families import (
    FAMILY_REGISTRY,
    FamilyKind,
    U64_MAX,
    evaluate,
    family,
    get_family,
    test as check_member,
)
from primefamilies.modules.families.arithmetic import (
    EUCLID_TERMS,
    FIBONACCI_TERMS,
    PERRIN_TERMS,
    THABIT_TERMS,
    checked_add,
    checked_mul,
    checked_pow2,
    is_prime,
    is_semiprime,
    reverse_digits,
    rotations,
    truncate_u64,
)


# =============================================================================
# KNOWN EXAMPLES
# =============================================================================

@pytest.mark.unit
class TestKnownExamples:
    """Exact outputs over small ranges."""

    def test_twin_3_to_20(self):
        """
        ЧТО ПРОВЕРЯЕМ:
            Twin pairs below 20 are exactly the four classic pairs
        """
        assert evaluate(FamilyKind.TWIN, 3, 20) == ["(3,5)", "(5,7)", "(11,13)", "(17,19)"]

    def test_mersenne_2_to_8(self):
        """
        ЧТО ПРОВЕРЯЕМ:
            Candidate is the exponent, output is 2^p - 1
        """
        assert evaluate(FamilyKind.MERSENNE, 2, 8) == ["3", "7", "31", "127"]

    def test_safe_5_to_30(self):
        hits = evaluate(FamilyKind.SAFE, 5, 30)
        for expected in ("7", "11", "23"):
            assert expected in hits

    def test_cousin_and_sexy(self):
        assert evaluate(FamilyKind.COUSIN, 3, 20) == ["(3,7)", "(7,11)", "(13,17)", "(19,23)"]
        assert evaluate(FamilyKind.SEXY, 5, 20) == ["(5,11)", "(7,13)", "(11,17)", "(13,19)", "(17,23)"]

    def test_sophie_germain(self):
        assert evaluate(FamilyKind.SOPHIE_GERMAIN, 2, 30) == ["2", "3", "5", "11", "23", "29"]

    def test_palindromic(self):
        assert evaluate(FamilyKind.PALINDROMIC, 2, 200) == ["2", "3", "5", "7", "11", "101", "131", "151", "181", "191"]

    def test_emirp_excludes_palindromes(self):
        hits = evaluate(FamilyKind.EMIRP, 2, 40)
        assert hits == ["13", "17", "31", "37"]
        assert "11" not in hits

    def test_circular(self):
        assert evaluate(FamilyKind.CIRCULAR, 2, 40) == ["2", "3", "5", "7", "11", "13", "17", "31", "37"]

    def test_chen_includes_semiprime_case(self):
        """
        ЧТО ПРОВЕРЯЕМ:
            7 is Chen because 9 = 3 * 3 is semiprime
        """
        hits = evaluate(FamilyKind.CHEN, 2, 20)
        assert "7" in hits
        assert "13" in hits  # 15 = 3 * 5

    def test_fermat_indices(self):
        """
        ЧТО ПРОВЕРЯЕМ:
            F0..F4 are prime, F5 is composite, F6 truncates to 1
        """
        assert evaluate(FamilyKind.FERMAT, 0, 10) == ["F0", "F1", "F2", "F3", "F4"]

    def test_cuban_reports_generated_value(self):
        assert evaluate(FamilyKind.CUBAN, 1, 4) == ["7", "19", "37"]

    def test_euler_polynomial_reports_generated_value(self):
        assert evaluate(FamilyKind.EULER_BINOMIAL_LIKE, 0, 3) == ["41", "43", "47"]

    def test_proth(self):
        assert evaluate(FamilyKind.PROTH, 2, 100) == ["3", "5", "13", "17", "41", "97"]

    def test_cullen_woodall_thabit(self):
        assert evaluate(FamilyKind.CULLEN, 2, 200) == ["3"]
        assert evaluate(FamilyKind.WOODALL, 2, 400) == ["7", "23", "383"]
        assert evaluate(FamilyKind.THABIT, 2, 200) == ["2", "5", "11", "23", "47", "191"]

    def test_euclid(self):
        assert evaluate(FamilyKind.EUCLID, 2, 3000) == ["3", "7", "31", "211", "2311"]

    def test_fibonacci(self):
        assert evaluate(FamilyKind.FIBONACCI, 0, 250) == ["2", "3", "5", "13", "89", "233"]

    def test_perrin(self):
        assert evaluate(FamilyKind.PERRIN, 0, 300) == ["2", "3", "5", "7", "17", "29", "277"]

    def test_happy(self):
        assert evaluate(FamilyKind.HAPPY, 2, 50) == ["7", "13", "19", "23", "31"]

    def test_wilson(self):
        assert evaluate(FamilyKind.WILSON, 0, 100) == ["5", "13"]

    def test_centered_hexagonal(self):
        assert evaluate(FamilyKind.CENTERED_HEXAGONAL, 0, 130) == ["7", "19", "37", "61", "127"]

    @pytest.mark.parametrize("kind", FamilyKind.all())
    def test_every_family_has_members_below_150(self, kind):
        """
        ЧТО ПРОВЕРЯЕМ:
            Each registered family finds at least one member in [0, 150)
        """
        assert evaluate(kind, 0, 150)


# =============================================================================
# DOMAIN AND OVERFLOW
# =============================================================================

@pytest.mark.unit
class TestDomainBoundaries:
    """Overflowing arithmetic means 'not a member', never an error."""

    def test_mersenne_beyond_exponent_limit(self):
        assert evaluate(FamilyKind.MERSENNE, 70, 72) == []

    def test_mersenne_largest_exponent(self):
        assert check_member(FamilyKind.MERSENNE, 61) == str(2 ** 61 - 1)
        assert check_member(FamilyKind.MERSENNE, 63) is None

    def test_sophie_germain_partner_overflow(self):
        """
        ЧТО ПРОВЕРЯЕМ:
            Largest u64 prime: 2p + 1 overflows, so it is not a member
        """
        assert check_member(FamilyKind.SOPHIE_GERMAIN, 18446744073709551557) is None

    def test_cuban_overflow_is_absorbed(self):
        assert check_member(FamilyKind.CUBAN, 2 ** 40) is None

    def test_out_of_domain_candidate(self):
        assert check_member(FamilyKind.TWIN, -3) is None
        assert check_member(FamilyKind.TWIN, U64_MAX + 1) is None

    def test_wilson_limit(self):
        assert check_member(FamilyKind.WILSON, 563) is None

    def test_range_at_top_of_domain(self):
        """
        ЧТО ПРОВЕРЯЕМ:
            Scanning up to U64_MAX never raises
        """
        hits = evaluate(FamilyKind.SOPHIE_GERMAIN, U64_MAX - 20, U64_MAX)
        assert hits == []


# =============================================================================
# REGISTRY
# =============================================================================

@pytest.mark.unit
class TestRegistry:
    """Dispatch table behaviour."""

    def test_every_kind_registered(self):
        assert set(FAMILY_REGISTRY) == set(FamilyKind)

    def test_family_metadata(self):
        entry = get_family(FamilyKind.MERSENNE)
        assert entry.kind is FamilyKind.MERSENNE
        assert entry.label == "Mersenne prime"
        assert "63" in entry.domain

    def test_decorator_with_private_registry(self):
        registry = {}

        @family(FamilyKind.TWIN, label="Evens", description="even numbers", registry=registry)
        def evens(p):
            return str(p) if p % 2 == 0 else None

        assert evaluate(FamilyKind.TWIN, 0, 7, registry=registry) == ["0", "2", "4", "6"]
        # global table untouched
        assert get_family(FamilyKind.TWIN).label == "Twin primes"

    def test_unregistered_family(self):
        with pytest.raises(ValidationError):
            get_family(FamilyKind.TWIN, registry={})

    def test_parse_kind_names(self):
        assert FamilyKind.parse("twin") is FamilyKind.TWIN
        assert FamilyKind.parse("SOPHIE_GERMAIN") is FamilyKind.SOPHIE_GERMAIN
        assert FamilyKind.parse("centered-hexagonal") is FamilyKind.CENTERED_HEXAGONAL
        with pytest.raises(ValidationError):
            FamilyKind.parse("gaussian")

    def test_kind_str(self):
        assert str(FamilyKind.EULER_BINOMIAL_LIKE) == "euler_binomial_like"


# =============================================================================
# ARITHMETIC HELPERS
# =============================================================================

@pytest.mark.unit
class TestArithmetic:
    """Checked u64 helpers and number-theory utilities."""

    def test_u64_max(self):
        assert U64_MAX == 2 ** 64 - 1

    def test_checked_add_overflow(self):
        assert checked_add(U64_MAX - 1, 1) == U64_MAX
        with pytest.raises(ArithmeticOverflowError):
            checked_add(U64_MAX, 1)

    def test_checked_mul_overflow(self):
        with pytest.raises(ArithmeticOverflowError):
            checked_mul(2 ** 32, 2 ** 32)

    def test_checked_pow2(self):
        assert checked_pow2(63) == 2 ** 63
        with pytest.raises(ArithmeticOverflowError):
            checked_pow2(64)

    def test_truncate(self):
        assert truncate_u64(2 ** 64 + 1) == 1

    def test_is_prime_small_values(self):
        assert [n for n in range(20) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19]

    def test_is_prime_large(self):
        assert is_prime(18446744073709551557)
        assert not is_prime(U64_MAX)

    def test_is_semiprime(self):
        assert is_semiprime(4)
        assert is_semiprime(15)
        assert not is_semiprime(7)
        assert not is_semiprime(30)

    def test_reverse_digits_overflow(self):
        assert reverse_digits(123) == 321
        with pytest.raises(ArithmeticOverflowError):
            reverse_digits(10000000000000000009)

    def test_rotations(self):
        assert list(rotations(197)) == [197, 971, 719]

    def test_sequence_tables_within_domain(self):
        for terms in (EUCLID_TERMS, FIBONACCI_TERMS, PERRIN_TERMS, THABIT_TERMS):
            assert max(terms) <= U64_MAX

    def test_thabit_includes_n_zero(self):
        assert 2 in THABIT_TERMS
