import asyncio

import pytest

from assertkit.assertions import python_exception
from assertkit.assertions.python_exception import raises, throws, throws_exactly
from assertkit.errors import AggregateAssertionError, AssertionFailedError
from assertkit.scope import assertion_scope


class CustomError(ValueError):
    pass


def _raise(error):
    def action():
        raise error

    return action


def test_throws_returns_the_exception():
    error = CustomError("bad input")

    assert throws(ValueError, _raise(error)) is error
    assert throws_exactly(CustomError, _raise(error)) is error


def test_throws_fails_when_nothing_is_raised():
    with pytest.raises(AssertionFailedError) as info:
        throws(ValueError, lambda: None, "parsing {0}", "x")

    assert info.value.record.message == "Expected exception type:<ValueError> but no exception was thrown. parsing x"


def test_throws_fails_on_wrong_type():
    with pytest.raises(AssertionFailedError) as info:
        throws(KeyError, _raise(ValueError("boom")))

    assert "Expected exception type:<KeyError> but exception type:<ValueError> was thrown. boom" in str(info.value)


def test_throws_exactly_rejects_subclass():
    with pytest.raises(AssertionFailedError, match="Expected exact exception type:<ValueError>"):
        throws_exactly(ValueError, _raise(CustomError("sub")))


def test_base_exceptions_propagate():
    with pytest.raises(KeyboardInterrupt):
        throws(ValueError, _raise(KeyboardInterrupt()))


def test_throws_inside_scope_returns_none():
    with pytest.raises(AggregateAssertionError) as info:
        with assertion_scope():
            assert throws(ValueError, lambda: None) is None
            assert throws(KeyError, _raise(ValueError())) is None

    assert [failure.record.assertion_name for failure in info.value.failures] == ["assert.throws", "assert.throws"]


@pytest.mark.asyncio
async def test_throws_async():
    async def failing():
        await asyncio.sleep(0)
        raise CustomError("async")

    async def passing():
        await asyncio.sleep(0)

    error = await python_exception.throws_async(ValueError, failing)
    assert isinstance(error, CustomError)
    assert await python_exception.throws_exactly_async(CustomError, failing) is not None

    with pytest.raises(AssertionFailedError, match="no exception was thrown"):
        await python_exception.throws_async(ValueError, passing)
    with pytest.raises(AssertionFailedError, match="exact exception type"):
        await python_exception.throws_exactly_async(ValueError, failing)


def test_raises_context_manager():
    with raises(KeyError) as caught:
        {}["missing"]

    assert isinstance(caught.value, KeyError)
    assert caught.value.args == ("missing",)


def test_raises_fails_without_exception():
    with pytest.raises(AssertionFailedError, match="no exception was thrown") as info:
        with raises(KeyError):
            pass

    assert info.value.record.location.function == "test_raises_fails_without_exception"


def test_raises_exact():
    with raises(ValueError):
        raise CustomError()
    with pytest.raises(AssertionFailedError, match="exact exception type"):
        with raises(ValueError, exact=True):
            raise CustomError()


def test_raises_swallows_wrong_exception_inside_scope():
    executed = []

    with pytest.raises(AssertionFailedError) as info:
        with assertion_scope():
            with raises(KeyError) as caught:
                raise ValueError("wrong")
            executed.append(caught.value)

    assert executed == [None]
    assert "exception type:<ValueError> was thrown" in str(info.value)
