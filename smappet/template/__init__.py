"""
Template module.

Implements tagging, marker scanning, key substitution and rendering.
"""

from .markers import MarkerScanner, wrap
from .tagger import Tagger
from .substitution import KeySubstitutor, build_mapping
from .renderer import Renderer, UnknownMarkerPolicy

__all__ = [
    'MarkerScanner',
    'Tagger',
    'KeySubstitutor',
    'build_mapping',
    'Renderer',
    'UnknownMarkerPolicy',
    'wrap',
]
