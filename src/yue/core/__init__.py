"""Core types and models shared by the functional helpers."""

from yue.core.base_models import Ref
from yue.core.config import Settings
from yue.core.types import Comparable, ChunkSize

__all__ = [
    "Ref",
    "Settings",
    "Comparable",
    "ChunkSize",
]
