"""
Fixed-width arithmetic for family predicates.

All candidates and intermediate values live in the unsigned 64-bit domain.
Checked helpers raise ArithmeticOverflowError instead of silently widening,
so predicates can treat "would overflow" as "not a member".
"""

from typing import FrozenSet, Iterator

import numpy as np
from sympy import factorint, isprime

from primefamilies.core.errors import ArithmeticOverflowError

U64_MAX: int = int(np.iinfo(np.uint64).max)
U64_BITS: int = np.iinfo(np.uint64).bits


def in_domain(n: int) -> bool:
    """True if n is representable as an unsigned 64-bit integer."""
    return 0 <= n <= U64_MAX


def _check(value: int, op: str) -> int:
    if value > U64_MAX or value < 0:
        raise ArithmeticOverflowError(
            f"{op} leaves the u64 domain",
            data={"op": op},
        )
    return value


def checked_add(a: int, b: int) -> int:
    return _check(a + b, "add")


def checked_sub(a: int, b: int) -> int:
    return _check(a - b, "sub")


def checked_mul(a: int, b: int) -> int:
    return _check(a * b, "mul")


def checked_pow2(exponent: int) -> int:
    """2**exponent, for exponents that fit in 64 bits."""
    if exponent >= U64_BITS:
        raise ArithmeticOverflowError(
            "shift leaves the u64 domain",
            data={"op": "pow2", "exponent": exponent},
        )
    return 1 << exponent


def truncate_u64(value: int) -> int:
    """Keep the low 64 bits of a value computed in a wider domain."""
    return value & U64_MAX


def is_prime(n: int) -> bool:
    """Deterministic primality for the u64 domain; 0 and 1 are not prime."""
    if n < 2:
        return False
    return bool(isprime(n))


def is_semiprime(n: int) -> bool:
    """True if n is the product of exactly two primes (not necessarily distinct)."""
    if n < 4:
        return False
    return sum(factorint(n).values()) == 2


def reverse_digits(n: int) -> int:
    """Decimal digit reversal; raises if the result leaves the domain."""
    return _check(int(str(n)[::-1]), "reverse")


def rotations(n: int) -> Iterator[int]:
    """Every left rotation of the decimal representation, n first."""
    digits = str(n)
    for i in range(len(digits)):
        yield _check(int(digits[i:] + digits[:i]), "rotate")


def is_palindrome(n: int) -> bool:
    digits = str(n)
    return digits == digits[::-1]


def digit_square_sum(n: int) -> int:
    total = 0
    while n > 0:
        n, d = divmod(n, 10)
        total += d * d
    return total


# ---------------------------------------------------------------------------
# Sequence term tables (every term <= U64_MAX)
# ---------------------------------------------------------------------------

def _bounded(terms: Iterator[int]) -> FrozenSet[int]:
    out = set()
    for t in terms:
        if t > U64_MAX:
            break
        out.add(t)
    return frozenset(out)


def _cullen_terms() -> Iterator[int]:
    n = 1
    while True:
        yield n * (1 << n) + 1
        n += 1


def _woodall_terms() -> Iterator[int]:
    n = 1
    while True:
        yield n * (1 << n) - 1
        n += 1


def _thabit_terms() -> Iterator[int]:
    n = 0
    while True:
        yield 3 * (1 << n) - 1
        n += 1


def _euclid_terms() -> Iterator[int]:
    product = 1
    q = 2
    while True:
        if is_prime(q):
            product *= q
            yield product + 1
        q += 1


def _fibonacci_terms() -> Iterator[int]:
    a, b = 0, 1
    while True:
        yield a
        a, b = b, a + b


def _perrin_terms() -> Iterator[int]:
    # P(0..2) = 3, 0, 2 then P(n) = P(n-2) + P(n-3); early terms are not monotone
    seq = [3, 0, 2]
    yield from seq
    while True:
        nxt = seq[-2] + seq[-3]
        if nxt > U64_MAX and seq[-1] > U64_MAX:
            return
        seq = [seq[-2], seq[-1], nxt]
        yield nxt


def _perrin_bounded() -> FrozenSet[int]:
    return frozenset(t for t in _perrin_terms() if t <= U64_MAX)


CULLEN_TERMS: FrozenSet[int] = _bounded(_cullen_terms())
WOODALL_TERMS: FrozenSet[int] = _bounded(_woodall_terms())
THABIT_TERMS: FrozenSet[int] = _bounded(_thabit_terms())
EUCLID_TERMS: FrozenSet[int] = _bounded(_euclid_terms())
FIBONACCI_TERMS: FrozenSet[int] = _bounded(_fibonacci_terms())
PERRIN_TERMS: FrozenSet[int] = _perrin_bounded()
