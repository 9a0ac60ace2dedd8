"""Smappet exceptions."""

from typing import List
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class SmappetError(Exception):
    """Base class for errors surfaced to the user."""

    exit_code = 2


class ConfigValidationError(SmappetError):
    """Raised when configuration validation fails.

    This exception is raised by the config loader when validation errors occur,
    allowing the CLI to catch it and map to appropriate exit codes.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Config error at '{error.path}': {error.message}")
            else:
                messages.append(f"Config error: {error.message}")

        super().__init__("\n".join(messages))


class InvalidVariableNameError(SmappetError, ValueError):
    """Raised for a variable name that cannot be carried inside a marker."""

    def __init__(self, name: str, reason: str = "must not contain '{' or '}'"):
        self.name = name
        super().__init__(f"Invalid variable name '{name}': {reason}")


class MalformedMarkerError(SmappetError):
    """Raised when marker open/close tags do not pair up."""

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        super().__init__("\n".join(f"Malformed marker: {e.message}" for e in errors))


class UnknownCasingError(SmappetError):
    """Raised when a casing name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown casing '{name}'")
