"""
Key substitution.

Replaces every literal occurrence of each variable name in a template with
its new value, before markers are rendered.
"""

import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

from .markers import OPEN, iter_tags


logger = logging.getLogger(__name__)


def build_mapping(names: Sequence[str], values: Sequence[str]) -> Dict[str, Optional[str]]:
    """
    Pair names with values by position.

    Extra values are ignored; names without a value map to None.
    """
    mapping: Dict[str, Optional[str]] = {}
    for index, name in enumerate(names):
        mapping[name] = values[index] if index < len(values) else None
    return mapping


class KeySubstitutor:
    """
    Handles global literal replacement of variable names.

    Entries are applied in mapping order, and each later entry sees the text
    as rewritten by the earlier ones. Replacement is global, so a key that is
    part of a marker tag name rewrites the tag too; such collisions are
    recorded in ``tag_collisions`` and logged.
    """

    def __init__(self):
        """Initialize the substitutor."""
        self.unresolved: List[str] = []
        self.tag_collisions: List[Tuple[str, str]] = []

    def substitute(self, text: str, mapping: Dict[str, Optional[str]]) -> str:
        """
        Substitute variable names with values.

        Args:
            text: Template text
            mapping: Variable name to new value

        Returns:
            Text with every occurrence of each key replaced
        """
        self.unresolved = []
        self.tag_collisions = []

        for key, value in mapping.items():
            if not key or value is None:
                self.unresolved.append(key)
                continue

            if value != key:
                self._check_tag_collisions(text, key)

            pattern = re.compile(re.escape(key))
            # Callable replacement keeps backslashes in values literal
            text, count = pattern.subn(lambda _match: value, text)
            logger.debug(f"Replaced {count} occurrence(s) of '{key}'")

        if self.unresolved:
            logger.warning(f"No value supplied for: {self.unresolved}")

        return text

    def _check_tag_collisions(self, text: str, key: str) -> None:
        seen = set()
        for tag in iter_tags(text):
            if tag.kind != OPEN or tag.name in seen or key not in tag.name:
                continue
            seen.add(tag.name)
            self.tag_collisions.append((key, tag.name))
            logger.warning(
                f"Variable '{key}' occurs in marker tag '{tag.name}'; "
                f"substituting it rewrites the tag name"
            )
