"""Helpers for manipulating single variables.

Operations that write back into caller storage (``swap``, ``toggle`` and the
memoising form of ``lazy_load``) take a :class:`yue.core.base_models.Ref`
cell and mutate only that cell.

Note:
    ``round_to_nearest`` uses NumPy rounding, which rounds halves to the
    nearest even multiple (``round_to_nearest(0.25, 0.5) == 0.0``). A zero
    increment is not special-cased: the result is ``nan`` and NumPy emits a
    ``RuntimeWarning``.
"""

import typing as tp

import numpy as np

from yue.core.base_models import Ref
from yue.core.types import C, T
from yue.logger.logger import logger

__all__ = [
    "swap",
    "default_if_none",
    "coalesce",
    "lazy_load",
    "min_max",
    "clamp",
    "toggle",
    "round_to_nearest",
]


def swap(x: Ref[T], y: Ref[T]) -> None:
    """Exchange the values held by two cells in place.

    Args:
        x: First cell.
        y: Second cell.
    """
    x.value, y.value = y.value, x.value


def default_if_none(variable: tp.Optional[T], default_value: T) -> T:
    """Return ``variable`` unless it is None, else ``default_value``.

    Only None counts as absent; falsy values such as ``0`` or ``""`` are kept.
    """
    return default_value if variable is None else variable


def coalesce(*values: tp.Optional[T]) -> tp.Optional[T]:
    """Return the first argument that is not None, or None if there is none."""
    return next((value for value in values if value is not None), None)


def lazy_load(
    initializer: tp.Callable[[], T], cell: tp.Optional[Ref[T]] = None
) -> T:
    """Initialize a value on first access.

    The cached value lives in ``cell``, which the caller owns and keeps between
    calls. ``initializer`` runs only while the cell is empty; afterwards the
    stored value is returned. An initializer returning None leaves the cell
    empty, so it will run again on the next call.

    Without a cell there is nowhere to keep the result and every call runs
    ``initializer``.

    Args:
        initializer: Zero-argument factory for the value.
        cell: Caller-owned storage for the cached value.

    Returns:
        The stored or freshly initialized value.

    Examples:
        >>> config = Ref()
        >>> lazy_load(lambda: {"debug": True}, config)
        {'debug': True}
        >>> lazy_load(lambda: {"debug": False}, config)
        {'debug': True}
    """
    if cell is None:
        return initializer()

    if cell.is_empty:
        logger.debug("Initializing lazy cell")
        cell.set(initializer())
    return cell.get()


def min_max(sequence: tp.Iterable[C]) -> tp.Tuple[C, C]:
    """Find the minimum and maximum of ``sequence`` in a single pass.

    Works with one-shot iterators as well as sequences.

    Args:
        sequence: Values with a total order.

    Returns:
        A ``(min, max)`` tuple.

    Raises:
        ValueError: If ``sequence`` is empty.
    """
    iterator = iter(sequence)
    try:
        lowest = highest = next(iterator)
    except StopIteration:
        logger.debug("min_max called on an empty sequence")
        raise ValueError("min_max() arg is an empty sequence") from None

    for item in iterator:
        if item < lowest:
            lowest = item
        elif highest < item:
            highest = item
    return lowest, highest


def clamp(value: C, min_value: C, max_value: C) -> C:
    """Restrict ``value`` to the range ``[min_value, max_value]``.

    The lower bound is checked first, so with ``min_value > max_value`` any
    value below ``min_value`` returns ``min_value`` and everything else
    returns ``max_value``.
    """
    if value < min_value:
        return min_value
    if max_value < value:
        return max_value
    return value


def toggle(flag: Ref[bool]) -> None:
    """Flip the boolean held by ``flag`` in place."""
    flag.value = not flag.value


def round_to_nearest(value: tp.Any, increment: tp.Any) -> tp.Any:
    """Round ``value`` to the nearest multiple of ``increment``.

    Args:
        value: Scalar or array-like to round.
        increment: Step size to round to.

    Returns:
        ``round(value / increment) * increment`` as a NumPy float or array.
        A zero increment gives ``nan`` along with a ``RuntimeWarning``.
    """
    return np.round(np.divide(value, increment)) * increment
