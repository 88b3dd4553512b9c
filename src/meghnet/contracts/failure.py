"""Single exception type for contract violations.

Contracts fail fast, loud, and once. All violations raise the same
exception type, allowing caller to handle pipeline bugs uniformly.
"""


class ContractViolation(RuntimeError):
    """Raised when a stage contract is violated.

    This indicates a caller or pipeline bug, not a recoverable science
    edge case. An empty cloud region is a valid result and never raises;
    asking for a trajectory without three centroids does.

    Key distinction:
    - ValueError: User/config error (handled by Pydantic)
    - DecodeError: Input bytes are not an image
    - ContractViolation: Stage precondition or postcondition broken
    """
    pass
