"""Functional primitives for Yue.

This module provides small convenience wrappers for collection transformation,
boolean logic and variable manipulation. Utilities are designed to be
stateless and side-effect-free so they can be composed freely; the only
exceptions are the helpers that write into a caller-owned
:class:`yue.core.base_models.Ref`.
"""
