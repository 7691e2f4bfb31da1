"""
Range evaluator - the single computational hot path.

Scans [start, end) in ascending order, applying one family predicate per
candidate and keeping the hits in order. Reversed bounds are normalized.
"""

from numbers import Integral
from typing import List, Optional, Tuple

from primefamilies.core.errors import ValidationError
from .arithmetic import in_domain
from .kinds import FamilyKind
from .predicates import FamilyRegistry, get_family, test


def validate_bound(name: str, value) -> int:
    """Coerce a range bound to int, rejecting bools and values outside u64."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ValidationError(
            f"Range bound '{name}' must be an integer",
            data={"bound": name, "type": type(value).__name__},
        )
    value = int(value)
    if not in_domain(value):
        raise ValidationError(
            f"Range bound '{name}' is outside the unsigned 64-bit domain",
            data={"bound": name, "value": value},
        )
    return value


def normalize_range(start, end) -> Tuple[int, int]:
    """Validate both bounds and swap them if reversed."""
    start = validate_bound("start", start)
    end = validate_bound("end", end)
    if start > end:
        start, end = end, start
    return start, end


def evaluate(
    kind: FamilyKind,
    start: int,
    end: int,
    registry: Optional[FamilyRegistry] = None,
) -> List[str]:
    """
    Evaluate a family over a half-open range (uncached).

    Args:
        kind: Family to scan for
        start: Inclusive bound
        end: Exclusive bound (operands may be given in either order)
        registry: Alternate dispatch table (default: FAMILY_REGISTRY)

    Returns:
        Hits in ascending candidate order

    Example:
        >>> evaluate(FamilyKind.TWIN, 3, 20)
        ['(3,5)', '(5,7)', '(11,13)', '(17,19)']
    """
    kind = FamilyKind.parse(kind)
    start, end = normalize_range(start, end)
    # unregistered families fail even on an empty range
    get_family(kind, registry)

    hits: List[str] = []
    for candidate in range(start, end):
        hit = test(kind, candidate, registry)
        if hit is not None:
            hits.append(hit)
    return hits
