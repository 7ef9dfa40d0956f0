"""Control-flow exception behind ``Nothing.bail()`` and ``with Nothing``."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optionals.option import NothingType


class Propagate(Exception):  # noqa: N818
    """Carries Nothing out of a function body up to ``@early_return``.

    Escaping an undecorated function, its message says where the
    decorator is missing.
    """

    __slots__ = ('value',)

    def __init__(self, value: NothingType) -> None:
        from optionals.option import NothingType  # option imports this module

        if not isinstance(value, NothingType):
            raise TypeError(f'only Nothing can be propagated, got {value!r}')
        self.value = value
        super().__init__('Nothing bailed out of a function not decorated with @early_return')
