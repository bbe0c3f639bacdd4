"""Boolean-logic combinators over values, predicates and ranges.

Helpers taking variadic options follow the vacuous-truth convention:
universal checks (``and_``, ``equals_all``, ``all_match``, ``none_match``)
are ``True`` for no inputs and existential checks (``or_``, ``any_of``,
``any_match``) are ``False``.

Equality helpers use ``==``; range helpers use ``<`` and ``<=`` and accept any
:class:`yue.core.types.Comparable` value, not only numbers.
"""

import typing as tp

from yue.core.types import C, T

__all__ = [
    "or_",
    "any_of",
    "and_",
    "equals_any",
    "equals_all",
    "between",
    "in_range",
    "in_set",
    "not_",
    "all_match",
    "any_match",
    "none_match",
]


def or_(value: T, *options: T) -> bool:
    """Check whether ``value`` equals any of ``options``.

    Args:
        value: The value to look for.
        *options: Candidate values.

    Returns:
        True if some option equals ``value``, False otherwise or if no options
        are given.
    """
    return value in options


def any_of(*options: bool) -> bool:
    """Check whether at least one of the boolean ``options`` is true."""
    return any(options)


def and_(*conditions: tp.Callable[[], bool]) -> bool:
    """Evaluate zero-argument conditions left to right.

    Evaluation stops at the first condition returning false.

    Args:
        *conditions: Callables returning a boolean.

    Returns:
        True if every condition returns true, including when none are given.
    """
    return all(condition() for condition in conditions)


def equals_any(value: T, *options: T) -> bool:
    """Alias of :func:`or_`."""
    return or_(value, *options)


def equals_all(value: T, *options: T) -> bool:
    """Check whether ``value`` equals every one of ``options``.

    Identity counts as equality, as it does for ``or_``, so the same ``nan``
    object matches itself.

    Returns:
        True if all options equal ``value``, including when none are given.
    """
    return all(option is value or option == value for option in options)


def between(value: C, lower: C, upper: C, inclusive: bool = True) -> bool:
    """Check whether ``value`` lies between ``lower`` and ``upper``.

    Bounds are used as given; with ``lower > upper`` the range is empty and
    the result is always False.

    Args:
        value: The value to check.
        lower: Lower bound.
        upper: Upper bound.
        inclusive: Whether the bounds themselves are part of the range.

    Returns:
        ``lower <= value <= upper`` if inclusive, else ``lower < value < upper``.
    """
    if inclusive:
        return lower <= value <= upper
    return lower < value < upper


def in_range(value: C, lower: C, upper: C, inclusive: bool = True) -> bool:
    """Alias of :func:`between`."""
    return between(value, lower, upper, inclusive=inclusive)


def in_set(value: T, set_: tp.Iterable[T]) -> bool:
    """Check whether ``set_`` contains an element equal to ``value``.

    Any container or iterable works; hashed containers give constant-time
    lookup.
    """
    return value in set_


def not_(condition: bool) -> bool:
    return not condition


def all_match(values: tp.Iterable[T], condition: tp.Callable[[T], bool]) -> bool:
    """True if every element satisfies ``condition`` (True when empty)."""
    return all(condition(value) for value in values)


def any_match(values: tp.Iterable[T], condition: tp.Callable[[T], bool]) -> bool:
    """True if at least one element satisfies ``condition`` (False when empty)."""
    return any(condition(value) for value in values)


def none_match(values: tp.Iterable[T], condition: tp.Callable[[T], bool]) -> bool:
    """True if no element satisfies ``condition`` (True when empty)."""
    return not_(any_match(values, condition))
