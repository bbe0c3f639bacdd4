"""Base models for caller-owned mutable storage.

Python passes object references by value, so a function cannot rebind a
caller's local variable. Helpers that need to write back into caller storage
(``swap``, ``toggle``, ``lazy_load``) take a :class:`Ref` instead: a small
pydantic model holding one mutable ``value`` that both sides share.

Parametrised forms validate the initial value, e.g. ``Ref[bool](value=True)``
rejects non-boolean input at construction time. Validation never replaces a
valid container with a copy, so the cell holds the caller's object.

Examples:
    >>> from yue.core.base_models import Ref
    >>> counter = Ref[int](value=1)
    >>> counter.set(counter.get() + 1)
    >>> counter.value
    2
"""

import typing as tp

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "Ref",
]

T = tp.TypeVar("T")


class Ref(BaseModel, tp.Generic[T]):
    """Mutable single-value cell owned by the caller.

    Attributes:
        value: The stored value. ``None`` marks an empty cell.
    """

    value: tp.Optional[T] = Field(None, description="The stored value.")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("value", mode="wrap")
    @classmethod
    def keep_reference(cls, value: tp.Any, handler) -> tp.Any:
        """Validates the value but stores the caller's object itself.

        Pydantic rebuilds containers while validating them; the rebuilt copy
        is discarded so the cell shares the original. Coercions that change
        the type (``"3"`` to ``3`` for ``Ref[int]``) are kept.
        """
        validated = handler(value)
        if type(validated) is type(value):
            return value
        return validated

    def get(self) -> tp.Optional[T]:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    @property
    def is_empty(self) -> bool:
        """True if the cell holds no value."""
        return self.value is None
