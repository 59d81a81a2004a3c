"""
Tolerance tiers and expansion bounds.

Defines precision expectations for comparing matrices:
- EXACT: integer and Fraction arithmetic, compared for equality
- FP64: double precision results of a small cofactor expansion
- FP64_LOOSE: double precision after many products (adjugate of order > 6)

Used by allclose(), by invert()'s near-singular check, and by the test suite.
"""

from dataclasses import dataclass
import numbers


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer or rational arithmetic, no rounding',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, small expansion order',
)

FP64_LOOSE = ToleranceTier(
    rtol=1e-6,
    atol=1e-9,
    name='fp64_loose',
    description='Double precision, large expansion order',
)

# Largest order the cofactor expansion accepts by default.
# 10! = 3,628,800 terms; recursion depth equals the order.
MAX_EXPANSION_ORDER = 10

# Above this order FP64 is too strict for inverse round-trips.
LOOSE_TOLERANCE_ORDER = 6


def select_tolerance(elements, order: int = 0) -> ToleranceTier:
    """Select the tolerance tier appropriate for a collection of elements."""
    if all(isinstance(x, numbers.Rational) for x in elements):
        return EXACT
    if order > LOOSE_TOLERANCE_ORDER:
        return FP64_LOOSE
    return FP64
