"""Exception types raised by latencyviz.

InvalidInputError covers caller mistakes (bad ranges, empty samples,
unknown scheme names). InternalInvariantError marks a logic defect: it
should be unreachable for any input that passed validation.
"""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Input violates a documented precondition."""


class UnattainablePercentileError(InvalidInputError):
    """Percentile key cannot be computed for the given sample count.

    Attributes:
        n: Number of samples.
        p: Requested percentile key.
    """

    def __init__(self, n: int, p: float) -> None:
        super().__init__(f"percentile not computable: n={n}, p={p}")
        self.n = n
        self.p = p


class InternalInvariantError(RuntimeError):
    """An internal invariant failed (a bug, not a user error)."""
