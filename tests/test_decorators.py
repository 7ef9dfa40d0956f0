"""Tests for the @early_return decorator."""

import pytest

from optionals import Nothing, Option, Propagate, Some, early_return


def create_greeting(sailor_name: str) -> str:
    return f'Ahoy, {sailor_name}!'


class TestEarlyReturnDecorator:
    """Tests for @early_return with bail()."""

    def test_bail_on_some_continues(self):
        """bail() on Some yields the value and the body keeps running."""

        @early_return
        def greeting(name: Option[str]) -> Option[str]:
            valid_name = name.bail()
            return Some(create_greeting(valid_name))

        assert greeting(Some('Daffy Duck')) == Some('Ahoy, Daffy Duck!')

    def test_bail_on_nothing_returns_nothing(self):
        """bail() on Nothing returns Nothing without running the rest of the body."""
        reached = []

        @early_return
        def greeting(name: Option[str]) -> Option[str]:
            valid_name = name.bail()
            reached.append(valid_name)
            return Some(create_greeting(valid_name))

        assert greeting(Nothing) is Nothing
        assert reached == []

    def test_with_binding(self):
        """`with opt as value` binds on Some and returns early on Nothing."""

        @early_return
        def shout(name: Option[str]) -> Option[str]:
            with name as valid_name:
                return Some(valid_name.upper())

        assert shout(Some('jenkins')) == Some('JENKINS')
        assert shout(Nothing) is Nothing

    def test_multiple_bails(self):
        @early_return
        def full_name(first: Option[str], last: Option[str]) -> Option[str]:
            return Some(f'{first.bail()} {last.bail()}')

        assert full_name(Some('Donald'), Some('Duck')) == Some('Donald Duck')
        assert full_name(Some('Donald'), Nothing) is Nothing
        assert full_name(Nothing, Some('Duck')) is Nothing

    def test_other_exceptions_propagate(self):
        @early_return
        def broken(name: Option[str]) -> Option[str]:
            raise ValueError('boom')

        with pytest.raises(ValueError, match='boom'):
            broken(Some('x'))

    def test_without_decorator_propagate_escapes(self):
        def undecorated(name: Option[str]) -> Option[str]:
            return Some(name.bail())

        with pytest.raises(Propagate):
            undecorated(Nothing)

    def test_preserves_function_name(self):
        @early_return
        def my_function() -> Option[int]:
            return Some(1)

        assert my_function.__name__ == 'my_function'

    def test_works_on_methods(self):
        class Ship:
            def __init__(self, captain: Option[str]) -> None:
                self.captain = captain

            @early_return
            def hail(self) -> Option[str]:
                return Some(create_greeting(self.captain.bail()))

        assert Ship(Some('Jenkins')).hail() == Some('Ahoy, Jenkins!')
        assert Ship(Nothing).hail() is Nothing


class TestEarlyReturnAsync:
    """Tests for @early_return on coroutine functions."""

    @pytest.mark.asyncio
    async def test_async_some(self):
        @early_return
        async def greeting(name: Option[str]) -> Option[str]:
            return Some(create_greeting(name.bail()))

        assert await greeting(Some('Donald')) == Some('Ahoy, Donald!')

    @pytest.mark.asyncio
    async def test_async_nothing(self):
        @early_return
        async def greeting(name: Option[str]) -> Option[str]:
            return Some(create_greeting(name.bail()))

        assert await greeting(Nothing) is Nothing

    @pytest.mark.asyncio
    async def test_async_bare_return_raises_type_error(self):
        @early_return
        async def greeting(name: Option[str]) -> Option[str]:
            return create_greeting(name.bail())  # type: ignore[return-value]

        with pytest.raises(TypeError, match='returned str'):
            await greeting(Some('Donald'))
        assert await greeting(Nothing) is Nothing


class TestEarlyReturnResultCheck:
    """Tests for the Option check on the decorated function's result."""

    def test_bare_value_raises_type_error(self):
        @early_return
        def greeting(name: Option[str]) -> Option[str]:
            return create_greeting(name.bail())  # type: ignore[return-value]

        with pytest.raises(TypeError, match=r'greeting\(\) returned str, expected Some or Nothing'):
            greeting(Some('Donald'))

    def test_missing_return_raises_type_error(self):
        @early_return
        def record(name: Option[str]) -> Option[str]:
            name.bail()

        with pytest.raises(TypeError, match='returned NoneType'):
            record(Some('Donald'))

    def test_bail_before_bad_return_still_returns_nothing(self):
        @early_return
        def greeting(name: Option[str]) -> Option[str]:
            return create_greeting(name.bail())  # type: ignore[return-value]

        assert greeting(Nothing) is Nothing

    def test_nothing_result_passes_through(self, sample_nothing):
        @early_return
        def passthrough() -> Option[str]:
            return sample_nothing

        assert passthrough() is Nothing


class TestPropagate:
    """Tests for the Propagate payload."""

    def test_rejects_some_payload(self, sample_some):
        with pytest.raises(TypeError, match='only Nothing can be propagated'):
            Propagate(sample_some)

    def test_rejects_plain_none(self):
        with pytest.raises(TypeError):
            Propagate(None)

    def test_message_names_missing_decorator(self, sample_nothing):
        assert '@early_return' in str(Propagate(sample_nothing))
        assert Propagate(sample_nothing).value is Nothing
