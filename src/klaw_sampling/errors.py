"""Sampling error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'EmptySequence',
    'EmptySequenceError',
    'InvalidWeight',
    'InvalidWeightError',
    'SamplingError',
]


class SamplingError(Exception):
    """Base class for the exception variants raised by sampling operations."""


# --- Empty input ---


class EmptySequence(msgspec.Struct, frozen=True, gc=False):
    """Source had no elements - struct variant for Result[T, EmptySequence]."""

    operation: str | None = None

    def to_exception(self) -> EmptySequenceError:
        """Convert to exception for raise-based code."""
        return EmptySequenceError(self.operation)


class EmptySequenceError(SamplingError):
    """Source had no elements - exception variant."""

    def __init__(self, operation: str | None = None) -> None:
        self.operation = operation
        msg = 'Sequence contains no elements'
        if operation:
            msg = f'{operation}: {msg}'
        super().__init__(msg)

    def to_struct(self) -> EmptySequence:
        """Convert to struct for Result-based code."""
        return EmptySequence(self.operation)


# --- Weights ---


class InvalidWeight(msgspec.Struct, frozen=True, gc=False):
    """Weights cannot define a distribution - struct variant.

    ``index`` and ``weight`` identify the offending element when a single
    weight was rejected; both are None when the total was the problem.
    """

    reason: str
    index: int | None = None
    weight: float | None = None

    def to_exception(self) -> InvalidWeightError:
        """Convert to exception for raise-based code."""
        return InvalidWeightError(self.reason, self.index, self.weight)


class InvalidWeightError(SamplingError):
    """Weights cannot define a distribution - exception variant."""

    def __init__(self, reason: str, index: int | None = None, weight: float | None = None) -> None:
        self.reason = reason
        self.index = index
        self.weight = weight
        msg = f'Invalid weight: {reason}'
        if index is not None:
            msg = f'{msg} (index={index}, weight={weight!r})'
        super().__init__(msg)

    def to_struct(self) -> InvalidWeight:
        """Convert to struct for Result-based code."""
        return InvalidWeight(self.reason, self.index, self.weight)
