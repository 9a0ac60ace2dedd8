"""
Casing module.

Provides the named casing transforms and the registry that orders them.
"""

from .types import CasingFunction
from .registry import CasingRegistry, DEFAULT_CASING_ORDER
from .words import split_words


__all__ = [
    "CasingFunction",
    "CasingRegistry",
    "DEFAULT_CASING_ORDER",
    "split_words",
]
