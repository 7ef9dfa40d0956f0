"""Error types for misuse of Option values.

Absence itself is never an error - it is carried by ``Nothing``. The types
here report programmer errors: forcing a value out of ``Nothing``, a guard
handler that does not divert control, and a marker pair in a state that
normal use cannot produce.
"""

from __future__ import annotations

import msgspec

__all__ = [
    'GuardFallthroughError',
    'InconsistentState',
    'InconsistentStateError',
    'UnwrapError',
]


class UnwrapError(RuntimeError):
    """A value was forced out of Nothing via unwrap() or expect()."""


class GuardFallthroughError(UnwrapError):
    """A guard_or_else() handler returned instead of raising or aborting."""


class InconsistentState(msgspec.Struct, frozen=True, gc=False):
    """Marker pair held an end without a start - struct variant for logs and records."""

    end: object
    rejected: object

    def to_exception(self) -> InconsistentStateError:
        """Convert to exception for raise-based code."""
        return InconsistentStateError(self.end, self.rejected)


class InconsistentStateError(AssertionError):
    """Marker pair held an end without a start - exception variant."""

    def __init__(self, end: object, rejected: object) -> None:
        self.end = end
        self.rejected = rejected
        super().__init__(f'Marker pair has end={end!r} but no start; rejected input {rejected!r}')

    def to_struct(self) -> InconsistentState:
        """Convert to struct for record-based code."""
        return InconsistentState(self.end, self.rejected)
