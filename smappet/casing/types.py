"""
Casing type definitions.

A casing pairs a stable name, used as the marker tag, with a pure
string-to-string transform.
"""

from dataclasses import dataclass
from typing import Callable, List


MARKER_RESERVED_CHARS = "{}#/"


@dataclass(frozen=True)
class CasingFunction:
    """
    Named casing transform.

    Attributes:
        name: Stable identifier, also used as the marker tag (e.g. 'camelCase')
        transform: Pure, total function applied to variable text
    """
    name: str
    transform: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.transform(text)

    def validate(self) -> List[str]:
        """
        Validate the casing definition.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.name or self.name != self.name.strip():
            errors.append(f"Casing name '{self.name}' must be non-empty without surrounding whitespace")

        for char in MARKER_RESERVED_CHARS:
            if char in self.name:
                errors.append(f"Casing '{self.name}': character '{char}' not allowed in name")

        if not callable(self.transform):
            errors.append(f"Casing '{self.name}': transform must be callable")

        return errors
