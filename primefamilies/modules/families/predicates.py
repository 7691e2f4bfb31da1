"""
Family predicates and the dispatch registry.

Each predicate takes one candidate from the u64 domain and returns the
canonical text of the hit, or None. Predicates are registered with the
@family decorator; the evaluator only ever sees FAMILY_REGISTRY, so adding a
family never touches the scan code.

Arithmetic that would leave the u64 domain raises ArithmeticOverflowError
inside a predicate; test() absorbs it and reports "not a member".
"""

from dataclasses import dataclass
from math import isqrt
from typing import Callable, Dict, Optional

from primefamilies.core.errors import ArithmeticOverflowError, ValidationError
from .kinds import FamilyKind
from .arithmetic import (
    CULLEN_TERMS,
    EUCLID_TERMS,
    FIBONACCI_TERMS,
    PERRIN_TERMS,
    THABIT_TERMS,
    WOODALL_TERMS,
    checked_add,
    checked_mul,
    checked_pow2,
    checked_sub,
    digit_square_sum,
    in_domain,
    is_palindrome,
    is_prime,
    is_semiprime,
    reverse_digits,
    rotations,
    truncate_u64,
)

Predicate = Callable[[int], Optional[str]]

# Explicit safe domains
DEFAULT_DOMAIN = "0 <= p <= 2**64 - 1"
MERSENNE_MAX_EXPONENT = 63
FERMAT_MAX_INDEX = 6
WILSON_LIMIT = 50


@dataclass(frozen=True)
class FamilyDef:
    """Registry record for one prime family."""
    kind: FamilyKind
    label: str
    description: str
    predicate: Predicate
    domain: str = DEFAULT_DOMAIN


FamilyRegistry = Dict[FamilyKind, FamilyDef]

FAMILY_REGISTRY: FamilyRegistry = {}


def family(
    kind: FamilyKind,
    label: str,
    description: str,
    domain: Optional[str] = None,
    registry: Optional[FamilyRegistry] = None,
) -> Callable[[Predicate], Predicate]:
    """Register the decorated predicate for `kind`."""
    target = FAMILY_REGISTRY if registry is None else registry

    def decorator(fn: Predicate) -> Predicate:
        definition = FamilyDef(
            kind=kind,
            label=label,
            description=description,
            predicate=fn,
            domain=domain or DEFAULT_DOMAIN,
        )
        target[kind] = definition
        return fn

    return decorator


def get_family(kind: FamilyKind, registry: Optional[FamilyRegistry] = None) -> FamilyDef:
    """Look up a family definition; unknown kinds are a ValidationError."""
    source = FAMILY_REGISTRY if registry is None else registry
    try:
        return source[kind]
    except KeyError:
        raise ValidationError(
            f"No predicate registered for family {kind!r}",
            data={"kind": str(kind)},
        )


def test(kind: FamilyKind, candidate: int, registry: Optional[FamilyRegistry] = None) -> Optional[str]:
    """
    Decide whether `candidate` belongs to `kind`.

    Args:
        kind: Family to test against
        candidate: Integer candidate
        registry: Alternate dispatch table (default: FAMILY_REGISTRY)

    Returns:
        Canonical text of the hit, or None (also for out-of-domain
        candidates and overflowing arithmetic)
    """
    predicate = get_family(kind, registry).predicate
    if not in_domain(candidate):
        return None
    try:
        return predicate(candidate)
    except ArithmeticOverflowError:
        return None


# not a pytest test
test.__test__ = False


# ---------------------------------------------------------------------------
# Classic families
# ---------------------------------------------------------------------------

@family(
    FamilyKind.MERSENNE,
    label="Mersenne prime",
    description="2^p - 1 is prime; the candidate is the exponent p.",
    domain=f"p <= {MERSENNE_MAX_EXPONENT}",
)
def mersenne(p: int) -> Optional[str]:
    if p > MERSENNE_MAX_EXPONENT:
        return None
    m = checked_pow2(p) - 1
    return str(m) if is_prime(m) else None


@family(
    FamilyKind.SOPHIE_GERMAIN,
    label="Sophie Germain prime",
    description="p and 2p + 1 are both prime.",
)
def sophie_germain(p: int) -> Optional[str]:
    if not is_prime(p):
        return None
    return str(p) if is_prime(checked_add(checked_mul(2, p), 1)) else None


def _pair(p: int, gap: int) -> Optional[str]:
    if not is_prime(p):
        return None
    q = checked_add(p, gap)
    return f"({p},{q})" if is_prime(q) else None


@family(FamilyKind.TWIN, label="Twin primes", description="(p, p + 2) both prime.")
def twin(p: int) -> Optional[str]:
    return _pair(p, 2)


@family(FamilyKind.COUSIN, label="Cousin primes", description="(p, p + 4) both prime.")
def cousin(p: int) -> Optional[str]:
    return _pair(p, 4)


@family(FamilyKind.SEXY, label="Sexy primes", description="(p, p + 6) both prime.")
def sexy(p: int) -> Optional[str]:
    return _pair(p, 6)


@family(
    FamilyKind.PALINDROMIC,
    label="Palindromic prime",
    description="Prime whose decimal digits read the same both ways.",
)
def palindromic(p: int) -> Optional[str]:
    return str(p) if is_palindrome(p) and is_prime(p) else None


@family(
    FamilyKind.EMIRP,
    label="Emirp",
    description="Prime whose digit reversal is a different prime.",
)
def emirp(p: int) -> Optional[str]:
    if not is_prime(p):
        return None
    r = reverse_digits(p)
    return str(p) if r != p and is_prime(r) else None


@family(
    FamilyKind.SAFE,
    label="Safe prime",
    description="p and (p - 1) / 2 are both prime.",
)
def safe(p: int) -> Optional[str]:
    if not is_prime(p):
        return None
    return str(p) if is_prime((p - 1) // 2) else None


@family(
    FamilyKind.CHEN,
    label="Chen prime",
    description="p prime and p + 2 either prime or semiprime.",
)
def chen(p: int) -> Optional[str]:
    if not is_prime(p):
        return None
    q = checked_add(p, 2)
    return str(p) if is_prime(q) or is_semiprime(q) else None


@family(
    FamilyKind.CIRCULAR,
    label="Circular prime",
    description="Every decimal rotation is prime.",
)
def circular(p: int) -> Optional[str]:
    if not is_prime(p):
        return None
    return str(p) if all(is_prime(r) for r in rotations(p)) else None


@family(
    FamilyKind.FERMAT,
    label="Fermat prime",
    description="2^(2^p) + 1 is prime (truncated to 64 bits); the candidate is the index p.",
    domain=f"p <= {FERMAT_MAX_INDEX}",
)
def fermat(p: int) -> Optional[str]:
    if p > FERMAT_MAX_INDEX:
        return None
    f = truncate_u64((1 << (1 << p)) + 1)
    return f"F{p}" if is_prime(f) else None


# ---------------------------------------------------------------------------
# Polynomial families (the hit is the generated value)
# ---------------------------------------------------------------------------

@family(
    FamilyKind.CUBAN,
    label="Cuban prime",
    description="3p^2 + 3p + 1 is prime; reports the generated value.",
)
def cuban(p: int) -> Optional[str]:
    v = checked_add(checked_add(checked_mul(3, checked_mul(p, p)), checked_mul(3, p)), 1)
    return str(v) if is_prime(v) else None


@family(
    FamilyKind.EULER_BINOMIAL_LIKE,
    label="Euler polynomial prime",
    description="p^2 + p + 41 is prime; reports the generated value.",
)
def euler_binomial_like(p: int) -> Optional[str]:
    v = checked_add(checked_add(checked_mul(p, p), p), 41)
    return str(v) if is_prime(v) else None


# ---------------------------------------------------------------------------
# Sequence families (the candidate must be a term)
# ---------------------------------------------------------------------------

@family(
    FamilyKind.PROTH,
    label="Proth prime",
    description="p = k * 2^n + 1 with k odd and k < 2^n, p prime.",
)
def proth(p: int) -> Optional[str]:
    if p < 3:
        return None
    m = p - 1
    n = (m & -m).bit_length() - 1
    k = m >> n
    if k >= (1 << n):
        return None
    return str(p) if is_prime(p) else None


def _term_hit(p: int, terms) -> Optional[str]:
    return str(p) if p in terms and is_prime(p) else None


@family(FamilyKind.CULLEN, label="Cullen prime", description="p = n * 2^n + 1, prime.")
def cullen(p: int) -> Optional[str]:
    return _term_hit(p, CULLEN_TERMS)


@family(FamilyKind.WOODALL, label="Woodall prime", description="p = n * 2^n - 1, prime.")
def woodall(p: int) -> Optional[str]:
    return _term_hit(p, WOODALL_TERMS)


@family(FamilyKind.THABIT, label="Thabit prime", description="p = 3 * 2^n - 1, prime.")
def thabit(p: int) -> Optional[str]:
    return _term_hit(p, THABIT_TERMS)


@family(
    FamilyKind.EUCLID,
    label="Euclid prime",
    description="p = (product of the first k primes) + 1, prime.",
)
def euclid(p: int) -> Optional[str]:
    return _term_hit(p, EUCLID_TERMS)


@family(FamilyKind.FIBONACCI, label="Fibonacci prime", description="Prime Fibonacci number.")
def fibonacci(p: int) -> Optional[str]:
    return _term_hit(p, FIBONACCI_TERMS)


@family(
    FamilyKind.PERRIN,
    label="Perrin prime",
    description="Prime term of P(n) = P(n-2) + P(n-3), P(0..2) = 3, 0, 2.",
)
def perrin(p: int) -> Optional[str]:
    return _term_hit(p, PERRIN_TERMS)


# ---------------------------------------------------------------------------
# Other families
# ---------------------------------------------------------------------------

@family(
    FamilyKind.HAPPY,
    label="Happy prime",
    description="Prime whose digit-square-sum orbit reaches 1.",
)
def happy(p: int) -> Optional[str]:
    seen = set()
    current = p
    while current != 1 and current not in seen:
        seen.add(current)
        current = digit_square_sum(current)
    return str(p) if current == 1 and is_prime(p) else None


@family(
    FamilyKind.WILSON,
    label="Wilson prime",
    description="(p - 1)! + 1 divisible by p^2.",
    domain=f"p < {WILSON_LIMIT}",
)
def wilson(p: int) -> Optional[str]:
    if p < 2 or p >= WILSON_LIMIT:
        return None
    modulus = p * p
    fact = 1
    for i in range(2, p):
        fact = fact * i % modulus
    return str(p) if (fact + 1) % modulus == 0 and is_prime(p) else None


@family(
    FamilyKind.CENTERED_HEXAGONAL,
    label="Centered hexagonal prime",
    description="p = 3n(n - 1) + 1 for an integer n, prime.",
)
def centered_hexagonal(p: int) -> Optional[str]:
    if p < 1:
        return None
    disc = checked_sub(checked_mul(12, p), 3)
    root = isqrt(disc)
    if root * root != disc or (3 + root) % 6:
        return None
    n = (3 + root) // 6
    if checked_add(checked_mul(3, checked_mul(n, n - 1)), 1) != p:
        return None
    return str(p) if is_prime(p) else None
