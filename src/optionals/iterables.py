"""Collection-level helpers over many Options.

Option iterates as zero or one element, so dropping absent entries from a
sequence of options and flattening a sequence of lists are the same
map-then-flatten-one-level combinator (``flat_map``) applied to two
container shapes.

Example:
    ```python
    from optionals import Nothing, Some, from_nullable
    from optionals.iterables import flat_map, flatten_options

    flatten_options([Nothing, Some('a'), Some('b'), Nothing, Some('c')])
    # ['a', 'b', 'c']

    flat_map(lambda s: from_nullable(aliases.get(s)), names)  # 0 or 1 per name
    flat_map(lambda s: s.split(), lines)                      # 0..N per line
    ```
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable

from optionals.option import Nothing, NothingType, Option, Some

__all__ = [
    'filter_map',
    'first_some',
    'flat_map',
    'flatten',
    'flatten_options',
    'sequence',
]


def flat_map[T, U](f: Callable[[T], Iterable[U]], xs: Iterable[T]) -> list[U]:
    """Map each element to an iterable and concatenate the results in order.

    Args:
        f: Function returning any iterable, including an Option.
        xs: Input elements.

    Returns:
        All produced elements, in input order.
    """
    return list(itertools.chain.from_iterable(map(f, xs)))


def flatten[T](nested: Iterable[Iterable[T]]) -> list[T]:
    """Flatten one level of nesting: [[1, 2], [], [3]] -> [1, 2, 3]."""
    return list(itertools.chain.from_iterable(nested))


def flatten_options[T](options: Iterable[Option[T]]) -> list[T]:
    """Keep the present values, in order, silently dropping Nothing.

    Args:
        options: Sequence of options, any length.

    Returns:
        One element per Some in the input, in original order.
    """
    return flatten(options)


def filter_map[T, U](f: Callable[[T], Option[U]], xs: Iterable[T]) -> list[U]:
    """Apply f to each element and keep the present results."""
    return flat_map(f, xs)


def sequence[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Return Some(values) only if every option is present, else Nothing.

    Stops at the first Nothing. An empty input gives Some([]).
    """
    values: list[T] = []
    for opt in options:
        if isinstance(opt, NothingType):
            return Nothing
        values.append(opt.value)
    return Some(values)


def first_some[T](options: Iterable[Option[T]]) -> Option[T]:
    """Return the first present option, or Nothing if there is none."""
    for opt in options:
        if isinstance(opt, Some):
            return opt
    return Nothing
