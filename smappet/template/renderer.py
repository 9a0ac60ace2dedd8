"""
Renderer: expands markers into case-converted text.

Templates are rendered with chevron, a Mustache implementation. Every marker
name is bound to a section lambda that renders the section body first and
then applies the named casing to the result.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

import chevron
from chevron.tokenizer import ChevronError

from smappet.casing import CasingFunction, CasingRegistry
from smappet.exceptions import MalformedMarkerError, UnknownCasingError, ValidationError
from .markers import OPEN, iter_tags, pairing_errors


logger = logging.getLogger(__name__)


SectionLambda = Callable[[str, Callable[..., str]], str]


class UnknownMarkerPolicy(str, Enum):
    """What to render for a marker whose name is not a registered casing."""
    EMPTY = "empty"
    VERBATIM = "verbatim"
    ERROR = "error"


def casing_section(casing: CasingFunction) -> SectionLambda:
    """Build a Mustache section lambda applying casing to the rendered body."""
    def section(text: str, render: Callable[..., str]) -> str:
        return casing(render(text))
    return section


def verbatim_section(text: str, render: Callable[..., str]) -> str:
    return render(text)


class Renderer:
    """Expands every marker using the casing registry."""

    def __init__(
        self,
        registry: Optional[CasingRegistry] = None,
        unknown_markers: UnknownMarkerPolicy = UnknownMarkerPolicy.EMPTY
    ):
        self.registry = registry or CasingRegistry()
        self.unknown_markers = UnknownMarkerPolicy(unknown_markers)

    def build_view(self, text: str) -> Dict[str, Any]:
        """
        Build the Mustache view for the marker names used in text.

        Registered casings become section lambdas. Unknown names are handled
        per the unknown marker policy: left out of the view (a falsy section
        renders nothing) or bound to a lambda rendering the body unchanged.

        Raises:
            UnknownCasingError: If a name is unknown and the policy is 'error'
        """
        view: Dict[str, Any] = {}
        for tag in iter_tags(text):
            if tag.kind != OPEN or tag.name in view:
                continue

            casing = self.registry.get(tag.name)
            if casing is not None:
                view[tag.name] = casing_section(casing)
                continue

            if self.unknown_markers == UnknownMarkerPolicy.ERROR:
                raise UnknownCasingError(tag.name)

            logger.warning(f"Unknown casing '{tag.name}', rendering {self.unknown_markers.value}")
            if self.unknown_markers == UnknownMarkerPolicy.VERBATIM:
                view[tag.name] = verbatim_section
        return view

    def render(self, text: str) -> str:
        """
        Render a template.

        Args:
            text: Template whose marker contents are already substituted values

        Returns:
            Text with each marker replaced by its cased content

        Raises:
            MalformedMarkerError: If tags do not nest and pair up
            UnknownCasingError: If a marker name is unknown and the policy is 'error'
        """
        errors = pairing_errors(text)
        if errors:
            raise MalformedMarkerError(errors)

        view = self.build_view(text)
        try:
            return chevron.render(text, view)
        except ChevronError as e:
            raise MalformedMarkerError([ValidationError(message=str(e))]) from e
