"""
Host module.

Abstract host interface plus in-memory and console implementations.
"""

from .base import Host
from .memory import MemoryHost
from .console import ConsoleHost, DEFAULT_CLIPBOARD


__all__ = [
    "Host",
    "MemoryHost",
    "ConsoleHost",
    "DEFAULT_CLIPBOARD",
]
