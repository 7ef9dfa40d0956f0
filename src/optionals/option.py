"""Option type: Some[T] | Nothing for values that may be absent.

Every way of getting a value out of an Option is a named method, so unsafe
access points can be found by searching for them:

    - forced: ``unwrap()``, ``expect(msg)``
    - safe default: ``unwrap_or(default)``, ``unwrap_or_else(factory)``
    - safe branch: ``try_bind()``, ``match(on_some, on_nothing)``,
      ``guard_or_else(on_absent)``, ``bail()``

``unwrap_or_else`` is the preferred fallback form: its factory only runs on
the absent path. ``unwrap_or`` takes an already-computed default.

Example:
    ```python
    from optionals import NothingType, Some, from_nullable

    name = from_nullable(crew.get('captain'))
    greeting = name.map(lambda n: f'Ahoy, {n}!').unwrap_or_else(lambda: 'Ahoy!')

    match name:
        case Some(captain):
            hail(captain)
        case NothingType():
            raise_alarm()
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Never, NoReturn, TypeIs

import msgspec

from optionals.errors import GuardFallthroughError, UnwrapError
from optionals.propagate import Propagate

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'from_nullable',
    'some',
    'to_nullable',
]

_NO_TRUTH_VALUE = 'Option has no truth value; use .is_some() / .is_none().'


class Some[T](msgspec.Struct, frozen=True, gc=False, tag='some', tag_field='kind'):
    """A present value.

    ``Some(None)`` is present: it is a different state from ``Nothing`` and
    the two never compare equal.

    Examples:
        >>> captain = Some('Jenkins')
        >>> captain.unwrap()
        'Jenkins'
        >>> captain.map(str.upper)
        Some(value='JENKINS')
        >>> for name in captain:
        ...     print(name)
        Jenkins
    """

    value: T

    def __bool__(self) -> Never:
        raise TypeError(_NO_TRUTH_VALUE)

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __enter__(self) -> T:
        return self.value

    def __exit__(self, *_: object) -> None:
        pass

    # --- queries ---

    def is_some(self) -> TypeIs[Some[T]]:
        """True; narrows the option to Some[T] for type checkers."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def is_some_and(self, pred: Callable[[T], bool]) -> bool:
        """Return pred(value)."""
        return pred(self.value)

    # --- forced access ---

    def unwrap(self) -> T:
        """Return the value. Forced access: fails on Nothing."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the value. Forced access with a caller-supplied failure message."""
        return self.value

    # --- fallback substitution ---

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the value; ``default`` was evaluated by the caller but is unused."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the value. The factory is never called for Some."""
        return self.value

    # --- branching ---

    def try_bind(self) -> tuple[bool, T]:
        """Return ``(True, value)``.

        Lets callers run dependent logic only when a value exists:

            present, name = opt.try_bind()
            if present:
                greet(name)
        """
        return True, self.value

    def guard_or_else(self, on_absent: Callable[[], NoReturn]) -> T:  # noqa: ARG002
        """Return the value for use in the rest of the scope.

        Args:
            on_absent: Handler that must leave the scope (raise, abort). It is
                only called for Nothing.
        """
        return self.value

    def match[R](self, on_some: Callable[[T], R], on_nothing: Callable[[], R]) -> R:  # noqa: ARG002
        """Call exactly one branch, chosen by the variant; here ``on_some(value)``."""
        return on_some(self.value)

    def bail(self) -> T:
        """Return the value; on Nothing this returns early from an ``@early_return`` function."""
        return self.value

    # --- transforms ---

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Wrap f(value) in a new Some."""
        return Some(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        return f(self.value)

    def map_or_else[U](self, default_fn: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f(value) for its side effect and return self."""
        f(self.value)
        return self

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Return f(value) where f itself returns an Option (flat-map / bind)."""
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep the value only if predicate(value) holds."""
        return self if predicate(self.value) else Nothing

    # --- combining ---

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        return other

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        return self

    def xor(self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Some only when exactly one side is present."""
        return self if isinstance(other, NothingType) else Nothing

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Pair both values, or Nothing if ``other`` is absent."""
        match other:
            case Some(value):
                return Some((self.value, value))
        return Nothing

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Remove one level of nesting: Some(Some(x)) -> Some(x), Some(Nothing) -> Nothing."""
        return self.value  # type: ignore[return-value]

    def __or__[U](self, f: Callable[[T], U]) -> Some[U] | NothingType:
        """``Some(x) | f`` - like map, but an Option returned by f is not re-wrapped."""
        out = f(self.value)
        return out if isinstance(out, Some | NothingType) else Some(out)


class NothingType(msgspec.Struct, frozen=True, gc=False, tag='nothing', tag_field='kind'):
    """The absent state.

    Use the ``Nothing`` singleton. Separately constructed instances still
    compare and hash equal to it.

    Examples:
        >>> Nothing.unwrap_or_else(lambda: 'anonymous')
        'anonymous'
        >>> list(Nothing)
        []
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def __bool__(self) -> Never:
        raise TypeError(_NO_TRUTH_VALUE)

    def __iter__(self) -> Iterator[Never]:
        return iter(())

    def __enter__(self) -> NoReturn:
        """``with Nothing as value:`` never runs its body; raises Propagate instead."""
        raise Propagate(self)

    def __exit__(self, *_: object) -> None:
        pass

    def is_some(self) -> TypeIs[Some[object]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """True; narrows the option to NothingType for type checkers."""
        return True

    def is_some_and[T](self, _pred: Callable[[T], bool]) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Forced access on an absent value.

        Raises:
            UnwrapError: Always. Nothing is evaluated before raising, so the
                caller's dependent work never starts.
        """
        raise UnwrapError('Called unwrap on Nothing')

    def expect(self, msg: str) -> NoReturn:
        """Raises UnwrapError(msg)."""
        raise UnwrapError(msg)

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Return f(); the only place the factory runs."""
        return f()

    def try_bind(self) -> tuple[bool, None]:
        """Return ``(False, None)``: skip the dependent block."""
        return False, None

    def guard_or_else(self, on_absent: Callable[[], NoReturn]) -> NoReturn:
        """Run the absence handler, which has to leave the current scope.

        Raises:
            GuardFallthroughError: If ``on_absent`` returns instead of
                raising, so code after the guard never runs without a value.
        """
        on_absent()
        raise GuardFallthroughError('guard_or_else handler returned instead of diverting control')

    def match[T, R](self, on_some: Callable[[T], R], on_nothing: Callable[[], R]) -> R:  # noqa: ARG002
        """Call ``on_nothing()``; ``on_some`` is never called."""
        return on_nothing()

    def bail(self) -> NoReturn:
        """Leave the enclosing ``@early_return`` function, which then returns Nothing.

        Raises:
            Propagate: Always, carrying Nothing.
        """
        raise Propagate(self)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        return default

    def map_or_else[T, U](self, default_fn: Callable[[], U], _f: Callable[[T], U]) -> U:
        return default_fn()

    def inspect[T](self, _f: Callable[[T], Any]) -> NothingType:
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        return self

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return the Option produced by the recovery function."""
        return f()

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        return self

    def and_[T](self, _other: Some[T] | NothingType) -> NothingType:
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        return other

    def xor[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        return other

    def zip[U](self, _other: Some[U] | NothingType) -> NothingType:
        return self

    def flatten(self) -> NothingType:
        return self

    def __or__[T, U](self, _f: Callable[[T], U]) -> NothingType:
        return self


Nothing: NothingType = NothingType()
"""The absent value."""


type Option[T] = Some[T] | NothingType


def some[T](x: T) -> Option[T]:
    """Wrap a value in Some, typed as Option[T]."""
    return Some(x)


def from_nullable[T](x: T | None) -> Option[T]:
    """Lift a ``T | None`` result: None becomes Nothing, anything else Some(x).

    Falsy values such as 0 or '' are present.
    """
    if x is None:
        return Nothing
    return Some(x)


def to_nullable[T](m: Option[T]) -> T | None:
    """Lower an option for APIs that expect ``T | None``.

    Lossy: ``Some(None)`` and ``Nothing`` both become None.
    """
    match m:
        case Some(value):
            return value
    return None
