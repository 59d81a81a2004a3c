"""
Shared compute infrastructure for recmatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers and the cofactor expansion bound
"""

from recmatrix.core.compute.timing import Timer, timed
from recmatrix.core.compute.tolerances import (
    EXACT,
    FP64,
    FP64_LOOSE,
    MAX_EXPANSION_ORDER,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP64_LOOSE",
    "MAX_EXPANSION_ORDER",
    "select_tolerance",
]
