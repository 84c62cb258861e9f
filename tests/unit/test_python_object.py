import math

import pytest

from assertkit.assertions import python_object
from assertkit.errors import AssertionFailedError, AssertionUsageError


class Base:
    pass


class Derived(Base):
    pass


@pytest.mark.parametrize("condition", [True, 1, "x", [0]])
def test_is_true_passes_on_truthy(condition):
    python_object.is_true(condition)


@pytest.mark.parametrize("condition", [False, 0, "", None])
def test_is_true_fails_on_falsy_and_none(condition):
    with pytest.raises(AssertionFailedError, match="Expected a true condition"):
        python_object.is_true(condition)


def test_is_false_rejects_none():
    python_object.is_false(False)
    python_object.is_false(0)
    with pytest.raises(AssertionFailedError, match=r"Actual:<None>"):
        python_object.is_false(None)


def test_user_message_is_formatted_with_parameters():
    with pytest.raises(AssertionFailedError) as info:
        python_object.is_true(False, "expected {0} items in {1}", 3, "cart")

    assert str(info.value) == "assert.is_true failed. Expected a true condition. Actual:<False>. expected 3 items in cart"


def test_user_message_without_parameters_is_not_formatted():
    with pytest.raises(AssertionFailedError) as info:
        python_object.is_true(False, "braces {stay}")

    assert str(info.value).endswith("braces {stay}")


def test_none_checks():
    python_object.is_none(None)
    python_object.is_not_none(0)
    with pytest.raises(AssertionFailedError, match=r"Expected None. Actual:<0>"):
        python_object.is_none(0)
    with pytest.raises(AssertionFailedError, match="Expected a value other than None"):
        python_object.is_not_none(None)


def test_are_same_and_are_not_same():
    item = object()
    python_object.are_same(item, item)
    python_object.are_not_same(item, object())

    with pytest.raises(AssertionFailedError) as info:
        python_object.are_same([1], [1])
    assert info.value.record.message == ""

    with pytest.raises(AssertionFailedError, match="Do not pass value types"):
        python_object.are_same(1.5, 2.5)

    with pytest.raises(AssertionFailedError, match="Expected any object except"):
        python_object.are_not_same(item, item)


def test_are_equal():
    python_object.are_equal([1, 2], [1, 2])
    with pytest.raises(AssertionFailedError, match=r"Expected:<1>. Actual:<2>"):
        python_object.are_equal(1, 2)


def test_are_equal_reports_different_types():
    with pytest.raises(AssertionFailedError, match=r"Expected:<1 \(int\)>. Actual:<'1' \(str\)>"):
        python_object.are_equal(1, "1")


def test_are_equal_strings_and_case():
    python_object.are_equal("Hello", "hello", ignore_case=True)
    with pytest.raises(AssertionFailedError, match="Case is different"):
        python_object.are_equal("Hello", "hello")
    with pytest.raises(AssertionFailedError, match=r"Expected:<'a'>. Actual:<'b'>"):
        python_object.are_equal("a", "b")


def test_are_equal_with_delta():
    python_object.are_equal(1.0, 1.05, delta=0.1)
    python_object.are_equal(math.nan, math.nan, delta=0.0)
    with pytest.raises(AssertionFailedError, match="difference no greater than <0.01>"):
        python_object.are_equal(1.0, 1.05, delta=0.01)
    with pytest.raises(AssertionFailedError):
        python_object.are_equal(1.0, math.nan, delta=1.0)


@pytest.mark.parametrize("delta", [-1.0, math.nan])
def test_invalid_delta_is_usage_error(delta):
    with pytest.raises(AssertionUsageError, match="delta"):
        python_object.are_equal(1.0, 1.0, delta=delta)


def test_are_not_equal():
    python_object.are_not_equal(1, 2)
    python_object.are_not_equal("a", "A")
    python_object.are_not_equal(1.0, 1.5, delta=0.1)
    with pytest.raises(AssertionFailedError, match="Expected any value except"):
        python_object.are_not_equal(1, 1)
    with pytest.raises(AssertionFailedError):
        python_object.are_not_equal("a", "A", ignore_case=True)
    with pytest.raises(AssertionFailedError, match="difference greater than"):
        python_object.are_not_equal(1.0, 1.05, delta=0.1)


def test_instance_checks():
    python_object.is_instance_of_type(Derived(), Base)
    python_object.is_not_instance_of_type(Base(), Derived)
    python_object.is_not_instance_of_type(None, Base)
    python_object.is_exact_instance_of_type(Derived(), Derived)

    with pytest.raises(AssertionFailedError, match=r"Actual type:<None>"):
        python_object.is_instance_of_type(None, Base)
    with pytest.raises(AssertionFailedError, match="Wrong type"):
        python_object.is_not_instance_of_type(Derived(), Base)
    with pytest.raises(AssertionFailedError, match="Expected exact type"):
        python_object.is_exact_instance_of_type(Derived(), Base)


def test_instance_check_requires_type():
    with pytest.raises(AssertionUsageError, match="expected_type"):
        python_object.is_instance_of_type(1, None)


def test_usage_error_is_not_an_assertion_failure():
    assert not issubclass(AssertionUsageError, AssertionError)
