"""
Casing registry.

Holds the ordered set of casing transforms shared by tagging and rendering.
Registration order is the Tagger's scan order.
"""

import logging
from typing import Dict, Iterable, List, Optional

from smappet.exceptions import UnknownCasingError
from .types import CasingFunction
from . import transforms


logger = logging.getLogger(__name__)


DEFAULT_CASING_ORDER = [
    "camelCase",
    "pascalCase",
    "capitalCase",
    "constantCase",
    "dotCase",
    "headerCase",
    "paramCase",
    "pathCase",
    "snakeCase",
]


class CasingRegistry:
    """
    Registry for casing functions.

    Starts with the built-in casings and accepts additional ones from
    embedding code. Lookup is by the casing's stable name.
    """

    def __init__(self, include_builtins: bool = True):
        """Initialize the registry, optionally with the built-in casings."""
        self._casings: Dict[str, CasingFunction] = {}
        if include_builtins:
            for casing in self._load_builtin_casings():
                self.register(casing)

    def _load_builtin_casings(self) -> List[CasingFunction]:
        """
        Load built-in casings in default scan order.

        Returns:
            List of built-in casing functions
        """
        builtins = {
            "camelCase": transforms.camel_case,
            "pascalCase": transforms.pascal_case,
            "capitalCase": transforms.capital_case,
            "constantCase": transforms.constant_case,
            "dotCase": transforms.dot_case,
            "headerCase": transforms.header_case,
            "paramCase": transforms.param_case,
            "pathCase": transforms.path_case,
            "snakeCase": transforms.snake_case,
        }
        return [CasingFunction(name=name, transform=builtins[name]) for name in DEFAULT_CASING_ORDER]

    def register(self, casing: CasingFunction) -> None:
        """
        Register a casing function.

        Args:
            casing: Casing to register

        Raises:
            ValueError: If the casing is invalid or the name is taken
        """
        errors = casing.validate()
        if errors:
            raise ValueError(f"Invalid casing: {'; '.join(errors)}")
        if casing.name in self._casings:
            raise ValueError(f"Casing already registered: {casing.name}")

        self._casings[casing.name] = casing
        logger.debug(f"Registered casing: {casing.name}")

    def get(self, name: str) -> Optional[CasingFunction]:
        """
        Get a casing by name.

        Args:
            name: Casing name

        Returns:
            Casing function or None if not found
        """
        return self._casings.get(name)

    def exists(self, name: str) -> bool:
        return name in self._casings

    def list_casings(self) -> List[str]:
        """List registered casing names in registration order."""
        return list(self._casings.keys())

    def select(self, names: Optional[Iterable[str]] = None) -> List[CasingFunction]:
        """
        Resolve an ordered subset of casings.

        Args:
            names: Casing names in the desired order, or None for all

        Returns:
            Casing functions in the requested order

        Raises:
            UnknownCasingError: If a name is not registered
        """
        if names is None:
            return list(self._casings.values())

        selected = []
        for name in names:
            casing = self.get(name)
            if casing is None:
                raise UnknownCasingError(name)
            selected.append(casing)
        return selected
