"""Yue: small generic helpers for collections, conditions and variables."""

from yue.core.base_models import Ref
from yue.functional.collections import (
    chunk,
    filter_,
    map_,
    reduce_,
    repeat,
    while_true,
)
from yue.functional.conditions import (
    all_match,
    and_,
    any_match,
    any_of,
    between,
    equals_all,
    equals_any,
    in_range,
    in_set,
    none_match,
    not_,
    or_,
)
from yue.functional.variables import (
    clamp,
    coalesce,
    default_if_none,
    lazy_load,
    min_max,
    round_to_nearest,
    swap,
    toggle,
)

__all__ = [
    "Ref",
    "map_",
    "filter_",
    "reduce_",
    "repeat",
    "while_true",
    "chunk",
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
    "swap",
    "default_if_none",
    "coalesce",
    "lazy_load",
    "min_max",
    "clamp",
    "toggle",
    "round_to_nearest",
]
