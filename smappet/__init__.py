"""
smappet: casing-aware snippet templating.

Turns concrete text into a template by tagging every casing variant of a set
of variable names, and renders such templates back with new values.
"""

__version__ = "0.1.0"
