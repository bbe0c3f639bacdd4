"""Sequence transformation and loop helpers.

This module wraps the common collection operations behind a uniform,
sequence-first call signature:

    - **map_ / filter_**: Lazy, single-use iterators over the source.
    - **reduce_**: Left fold with an explicit initial value.
    - **chunk**: Partition into consecutive fixed-size groups.
    - **repeat / while_true**: Loop helpers driven by a count or a predicate.

Note:
    ``map_``, ``filter_`` and ``chunk`` return iterators, not lists. Nothing
    is computed until the result is consumed, and each result can be consumed
    once. Iterate again by calling the helper again on a re-iterable source.

Examples:
    >>> from yue.functional.collections import chunk, map_, reduce_
    >>> list(map_([1, 2, 3], lambda x: x * 2))
    [2, 4, 6]
    >>> reduce_([1, 2, 3], lambda acc, x: acc + x, 0)
    6
    >>> list(chunk(range(1, 8), 3))
    [[1, 2, 3], [4, 5, 6], [7]]
"""

import functools
import typing as tp

from yue.core.types import A, T, U, validate_chunk_size
from yue.logger.logger import logger

__all__ = [
    "map_",
    "filter_",
    "reduce_",
    "repeat",
    "while_true",
    "chunk",
]


def map_(sequence: tp.Iterable[T], transform: tp.Callable[[T], U]) -> tp.Iterator[U]:
    """Lazily apply ``transform`` to every element of ``sequence``.

    Args:
        sequence: The elements to transform.
        transform: Function applied to each element.

    Returns:
        An iterator yielding ``transform(x)`` for each ``x``, in order.
    """
    return map(transform, sequence)


def filter_(
    sequence: tp.Iterable[T], predicate: tp.Callable[[T], bool]
) -> tp.Iterator[T]:
    """Lazily keep the elements of ``sequence`` that satisfy ``predicate``.

    Args:
        sequence: The elements to filter.
        predicate: Condition each kept element must satisfy.

    Returns:
        An iterator over the matching elements, in their original order.
    """
    return filter(predicate, sequence)


def reduce_(
    sequence: tp.Iterable[T],
    accumulator: tp.Callable[[A, T], A],
    initial_value: A,
) -> A:
    """Fold ``sequence`` from left to right into a single value.

    Each step computes ``acc = accumulator(acc, item)`` starting from
    ``initial_value``.

    Args:
        sequence: The elements to fold.
        accumulator: Combines the running value with the next element.
        initial_value: Starting value, returned unchanged for an empty sequence.

    Returns:
        The final accumulated value.
    """
    return functools.reduce(accumulator, sequence, initial_value)


def repeat(times: int, action: tp.Callable[[], tp.Any]) -> None:
    """Call ``action`` ``times`` times. Non-positive counts do nothing."""
    for _ in range(times):
        action()


def while_true(
    condition: tp.Callable[[], bool], action: tp.Callable[[], tp.Any]
) -> None:
    """Call ``action`` for as long as ``condition()`` holds.

    ``condition`` is evaluated before every call, so ``action`` may never run.
    The loop does not terminate if ``condition`` never turns false.
    """
    while condition():
        action()


def chunk(sequence: tp.Iterable[T], chunk_size: int) -> tp.Iterator[tp.List[T]]:
    """Split ``sequence`` into consecutive groups of ``chunk_size`` elements.

    The size is validated and the source is read once when ``chunk`` is
    called; the groups themselves are produced lazily. The last group holds
    the remainder and may be shorter.

    Args:
        sequence: The elements to partition.
        chunk_size: Number of elements per group. Must be positive.

    Returns:
        An iterator of lists.

    Raises:
        ValueError: If ``chunk_size`` is not a positive integer (raised as
            ``pydantic.ValidationError``).
    """
    try:
        chunk_size = validate_chunk_size(chunk_size)
    except ValueError:
        logger.debug(f"Rejected chunk size {chunk_size!r}")
        raise

    items = list(sequence)
    length = len(items)
    return (items[i : i + chunk_size] for i in range(0, length, chunk_size))
