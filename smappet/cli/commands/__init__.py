"""CLI command handlers."""

from .copy import copy_template
from .paste import paste_template
from .scan import scan_template

__all__ = ['copy_template', 'paste_template', 'scan_template']
