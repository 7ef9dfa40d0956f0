"""MarkerPair: two nullable slots updated by a joint-presence decision table.

Feeding a value moves the pair through the states:

    start    end      on feed(x)
    Nothing  Nothing  start = x
    Some     Nothing  end = x
    Some     Some     start = x, end cleared
    Nothing  Some     inconsistent - raise, or log and restart from x

The last row cannot be reached through feed(); it only occurs when the
slots were assigned directly. InconsistentStatePolicy selects the handling.
"""

from __future__ import annotations

from optionals._config import InconsistentStatePolicy, resolve_policy
from optionals._logging import get_logger
from optionals.errors import InconsistentState, InconsistentStateError
from optionals.option import Nothing, NothingType, Option, Some

__all__ = ['MarkerPair']


def _is_option(slot: object) -> bool:
    return isinstance(slot, Some | NothingType)


class MarkerPair[T]:
    """Start and end markers, each of which may be absent.

    Example:
        >>> pair = MarkerPair[int]()
        >>> pair.feed(1)
        (Some(value=1), Nothing)
        >>> pair.feed(2)
        (Some(value=1), Some(value=2))
        >>> pair.feed(3)
        (Some(value=3), Nothing)

    Attributes:
        start: The start marker slot.
        end: The end marker slot.
        policy: Handling of an end marker without a start.
        anomalies: Inconsistent states recovered from under the RESET policy.
    """

    __slots__ = ('anomalies', 'end', 'policy', 'start')

    def __init__(
        self,
        start: Option[T] = Nothing,
        end: Option[T] = Nothing,
        *,
        policy: InconsistentStatePolicy | str | None = None,
    ) -> None:
        self.start: Option[T] = start
        self.end: Option[T] = end
        self.policy = resolve_policy(policy)
        self.anomalies: list[InconsistentState] = []

    @property
    def state(self) -> tuple[Option[T], Option[T]]:
        """The current (start, end) pair."""
        return self.start, self.end

    def feed(self, value: T) -> tuple[Option[T], Option[T]]:
        """Apply the decision table to a new input and return the new state.

        Raises:
            InconsistentStateError: If end is set without start and the
                policy is RAISE. The state is left unchanged.
            TypeError: If a slot was assigned something other than an Option.
        """
        match self.start, self.end:
            case NothingType(), NothingType():
                self.start = Some(value)
            case Some(), NothingType():
                self.end = Some(value)
            case Some(), Some():
                self.start, self.end = Some(value), Nothing
            case NothingType(), Some(end):
                self._on_inconsistent(end, value)
            case _:
                slot, bad = ('start', self.start) if not _is_option(self.start) else ('end', self.end)
                raise TypeError(f'MarkerPair.{slot} must be Some or Nothing, got {bad!r}')
        get_logger(__name__).debug('marker_pair.transition', start=self.start, end=self.end, fed=value)
        return self.state

    def span(self) -> Option[tuple[T, T]]:
        """Return Some((start, end)) when both markers are present."""
        return self.start.zip(self.end)

    def reset(self) -> None:
        """Clear both markers."""
        self.start, self.end = Nothing, Nothing

    def _on_inconsistent(self, end: T, value: T) -> None:
        if self.policy is InconsistentStatePolicy.RAISE:
            raise InconsistentStateError(end, value)

        anomaly = InconsistentState(end=end, rejected=value)
        self.anomalies.append(anomaly)
        get_logger(__name__).warning(
            'marker_pair.inconsistent_state',
            end=end,
            restarted_with=value,
        )
        self.start, self.end = Some(value), Nothing

    def __repr__(self) -> str:
        return f'MarkerPair(start={self.start!r}, end={self.end!r}, policy={self.policy.value!r})'
