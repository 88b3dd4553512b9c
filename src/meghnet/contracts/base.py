"""The one enforcement primitive shared by all contracts."""

from meghnet.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Raise ContractViolation with ``message`` unless ``condition`` holds.

    Called at stage boundaries. There is no recovery path: a false
    condition means a caller or stage bug.

    Examples
    --------
    >>> require(raster.ndim in (2, 3), "Raster contract violated: expected 2 or 3 dims")
    """
    if not condition:
        raise ContractViolation(message)
