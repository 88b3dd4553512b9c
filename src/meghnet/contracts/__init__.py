"""Stage contracts: fail-fast enforcement of stage invariants.

Contracts fail immediately and loudly when a stage doesn't produce its
promised invariants, or when a caller breaks a stage precondition.

Key principle:
- Pydantic validates config correctness
- Contracts validate pipeline correctness
- Algorithms handle science edge cases (empty regions, zero areas)
"""

from meghnet.contracts.failure import ContractViolation
from meghnet.contracts.base import require
from meghnet.contracts.raster import assert_raster
from meghnet.contracts.segmentation import assert_segmented
from meghnet.contracts.prediction import assert_trackable, assert_prediction

__all__ = [
    "ContractViolation",
    "require",
    "assert_raster",
    "assert_segmented",
    "assert_trackable",
    "assert_prediction",
]
