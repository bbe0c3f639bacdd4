import pytest
from yue.functional.conditions import (
    or_,
    any_of,
    and_,
    equals_any,
    equals_all,
    between,
    in_range,
    in_set,
    not_,
    all_match,
    any_match,
    none_match,
)


def is_even(x):
    return x % 2 == 0


def test_or_matches_any_option():
    assert or_(3, 1, 2, 3)
    assert not or_(4, 1, 2, 3)
    assert not or_(4)


def test_or_uses_value_equality():
    assert or_("a", "b", "a")
    assert or_((1, 2), (1, 2))


def test_any_of():
    assert any_of(False, True)
    assert not any_of(False, False)
    assert not any_of()


def test_and_all_true():
    assert and_(lambda: True, lambda: 1 < 2)
    assert not and_(lambda: True, lambda: False)


def test_and_empty_is_vacuously_true():
    assert and_()


def test_and_evaluates_left_to_right():
    order = []

    def record(name, result):
        def condition():
            order.append(name)
            return result

        return condition

    assert and_(record("a", True), record("b", True), record("c", True))
    assert order == ["a", "b", "c"]


def test_equals_any_is_or():
    assert equals_any(2, 1, 2) == or_(2, 1, 2)
    assert equals_any(5, 1, 2) == or_(5, 1, 2)


def test_equals_all():
    assert equals_all(5)
    assert equals_all(5, 5, 5)
    assert not equals_all(5, 5, 6)


def test_between_inclusive():
    assert between(5, 1, 10)
    assert between(1, 1, 10)
    assert between(10, 1, 10)
    assert not between(11, 1, 10)


def test_between_exclusive():
    assert not between(1, 1, 10, inclusive=False)
    assert not between(10, 1, 10, inclusive=False)
    assert between(2, 1, 10, inclusive=False)


@pytest.mark.parametrize("value", [-5, 1, 5, 10, 15])
@pytest.mark.parametrize("inclusive", [True, False])
def test_between_inverted_range_is_empty(value, inclusive):
    assert not between(value, 10, 1, inclusive=inclusive)


def test_between_other_comparable_types():
    assert between(2.5, 1.0, 3.0)
    assert between("m", "a", "z")
    assert not between("m", "n", "z")


def test_in_range_is_between():
    assert in_range(5, 1, 10)
    assert not in_range(1, 1, 10, inclusive=False)
    assert not in_range(5, 10, 1)


def test_in_set():
    assert in_set(2, {1, 2, 3})
    assert in_set("b", ["a", "b"])
    assert not in_set(4, (1, 2, 3))
    assert not in_set(1, [])


def test_not():
    assert not_(False)
    assert not not_(True)


def test_all_match():
    assert all_match([2, 4, 6], is_even)
    assert not all_match([2, 3], is_even)
    assert all_match([], is_even)


def test_any_match():
    assert any_match([1, 2], is_even)
    assert not any_match([1, 3], is_even)
    assert not any_match([], is_even)


def test_none_match():
    assert none_match([1, 3], is_even)
    assert not none_match([1, 2], is_even)
    assert none_match([], is_even)


@pytest.mark.parametrize("values", [[], [1], [2], [1, 2, 3], [2, 4]])
def test_none_match_negates_any_match(values):
    assert none_match(values, is_even) == not_(any_match(values, is_even))


def test_equals_all_agrees_with_or_on_nan():
    nan = float("nan")
    assert or_(nan, nan)
    assert equals_all(nan, nan)
    assert equals_all(nan, nan, nan) == or_(nan, nan)
