"""Reusable type definitions for the Yue functional helpers.

This module provides type variables, capability protocols and constrained types
shared by the collection, condition and variable helpers.

Type Aliases:
    ChunkSize: A strictly positive integer used as a partition size.

Protocols:
    Comparable: Any type supporting ``<``, required by ordering helpers such as
        ``between``, ``clamp`` and ``min_max``.
"""

import operator
import typing as tp

import annotated_types as at
from pydantic import TypeAdapter
from pydantic.functional_validators import BeforeValidator

__all__ = [
    "T",
    "U",
    "A",
    "C",
    "Comparable",
    "ChunkSize",
    "validate_chunk_size",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
A = tp.TypeVar("A")


class Comparable(tp.Protocol):
    """Structural type for values with a total order."""

    def __lt__(self, other: tp.Any, /) -> bool: ...


C = tp.TypeVar("C", bound=Comparable)


def as_index(value: tp.Any) -> int:
    """Validator to convert integer-like values (e.g. ``np.int64``) to ``int``.

    Raises:
        ValueError: If the value is a bool or does not implement ``__index__``.
    """
    if isinstance(value, bool):
        raise ValueError("Expected an integer, got a bool.")
    try:
        return operator.index(value)
    except TypeError:
        raise ValueError(
            f"Expected an integer, got {type(value).__name__}."
        ) from None


# A strictly positive integer, bools, floats and numeric strings rejected
ChunkSize = tp.Annotated[int, BeforeValidator(as_index), at.Gt(0)]

_chunk_size_adapter = TypeAdapter(ChunkSize)


def validate_chunk_size(chunk_size: tp.Any) -> int:
    """Validator to ensure a chunk size is a positive integer.

    Args:
        chunk_size: The candidate size.

    Returns:
        The size as a plain ``int`` if validation passes.

    Raises:
        pydantic.ValidationError: If the size is not an integer greater than zero.
            ``ValidationError`` is a ``ValueError`` subclass.
    """
    return _chunk_size_adapter.validate_python(chunk_size)
