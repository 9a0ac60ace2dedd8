"""
Marker syntax and scanning.

A marker is ``{{#casing}}variable{{/casing}}``: the tag names the casing to
apply, the content is the variable name it was captured from.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, List

from smappet.exceptions import InvalidVariableNameError, MalformedMarkerError, ValidationError


logger = logging.getLogger(__name__)


OPEN = '#'
CLOSE = '/'

# Any {{#..}} or {{/..}} tag, in document order
TAG_PATTERN = re.compile(r'\{\{([#/])\s*(.*?)\s*\}\}')
# Marker shape only; open and close names are not required to agree
MARKER_PATTERN = re.compile(r'\{\{#(.*?)\}\}(.*?)\{\{/(.*?)\}\}')
# Marker with matching open and close names
PAIRED_MARKER_PATTERN = re.compile(r'\{\{#([^{}]+?)\}\}(.*?)\{\{/\1\}\}')


def open_tag(name: str) -> str:
    return '{{' + OPEN + name + '}}'


def close_tag(name: str) -> str:
    return '{{' + CLOSE + name + '}}'


def wrap(name: str, content: str) -> str:
    """Wrap content in a marker for the given casing name."""
    return open_tag(name) + content + close_tag(name)


def validate_variable_name(name: str) -> None:
    """
    Check that a variable name can be carried inside a marker.

    Raises:
        InvalidVariableNameError: If the name contains brace characters
    """
    if '{' in name or '}' in name:
        raise InvalidVariableNameError(name)


@dataclass
class Marker:
    """A marker found by structural scanning."""
    name: str
    content: str
    closing_name: str
    start: int
    end: int

    @property
    def is_paired(self) -> bool:
        return self.name == self.closing_name


@dataclass
class Tag:
    """A single opening or closing tag."""
    kind: str
    name: str
    start: int
    end: int


@dataclass
class Segment:
    """Piece of text that is either literal or a complete marker."""
    text: str
    is_marker: bool = False


def iter_tags(text: str) -> Iterator[Tag]:
    for match in TAG_PATTERN.finditer(text):
        yield Tag(kind=match.group(1), name=match.group(2), start=match.start(), end=match.end())


def pairing_errors(text: str) -> List[ValidationError]:
    """
    Check that opening and closing tags nest and pair by name.

    Args:
        text: Template text

    Returns:
        List of validation errors (empty if well formed)
    """
    errors = []
    stack: List[Tag] = []

    for tag in iter_tags(text):
        if tag.kind == OPEN:
            stack.append(tag)
            continue

        if not stack:
            errors.append(ValidationError(
                message=f"closing tag '{tag.name}' at offset {tag.start} has no opening tag",
                path=tag.name,
            ))
            continue

        opened = stack.pop()
        if opened.name != tag.name:
            errors.append(ValidationError(
                message=(
                    f"marker '{opened.name}' opened at offset {opened.start} "
                    f"is closed by '{tag.name}' at offset {tag.start}"
                ),
                path=opened.name,
            ))

    for opened in stack:
        errors.append(ValidationError(
            message=f"marker '{opened.name}' opened at offset {opened.start} is never closed",
            path=opened.name,
        ))

    return errors


def split_segments(text: str) -> List[Segment]:
    """
    Split text into literal runs and complete markers.

    Only markers whose open and close names match are treated as markers;
    anything else stays literal.
    """
    segments = []
    position = 0
    for match in PAIRED_MARKER_PATTERN.finditer(text):
        if match.start() > position:
            segments.append(Segment(text[position:match.start()]))
        segments.append(Segment(match.group(0), is_marker=True))
        position = match.end()
    if position < len(text):
        segments.append(Segment(text[position:]))
    return segments


class MarkerScanner:
    """
    Discovers which variable names a template references.

    Scanning is structural: it collects the inner content of every
    ``{{#..}}content{{/..}}`` span. In strict mode tag pairing is validated
    first and malformed templates are rejected.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def iter_markers(self, text: str) -> Iterator[Marker]:
        for match in MARKER_PATTERN.finditer(text):
            yield Marker(
                name=match.group(1),
                content=match.group(2),
                closing_name=match.group(3),
                start=match.start(),
                end=match.end(),
            )

    def scan(self, text: str) -> List[str]:
        """
        Extract distinct variable names from markers.

        Args:
            text: Template text

        Returns:
            Variable names in order of first appearance

        Raises:
            MalformedMarkerError: In strict mode, if tags do not pair up
        """
        if self.strict:
            errors = self.validate(text)
            if errors:
                raise MalformedMarkerError(errors)

        names = []
        seen = set()
        for marker in self.iter_markers(text):
            if marker.content not in seen:
                seen.add(marker.content)
                names.append(marker.content)

        logger.debug(f"Scanned {len(names)} variable name(s): {names}")
        return names

    def validate(self, text: str) -> List[ValidationError]:
        return pairing_errors(text)
