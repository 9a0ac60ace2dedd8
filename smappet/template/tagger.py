"""
Tagger: turns concrete text into a casing-aware template.

For each variable and each casing, every literal occurrence of the casing's
rendering of the variable is replaced by a marker holding the variable name.
Text already inside a marker is never rewritten.
"""

import logging
import re
from typing import List, Optional, Sequence

from smappet.casing import CasingFunction
from .markers import Segment, split_segments, validate_variable_name, wrap


logger = logging.getLogger(__name__)


class Tagger:
    """
    Wraps casing variants of known variables with markers.

    Casings are tried in the given order, so the first casing whose variant
    matches an occurrence wins it.
    """

    def __init__(self, casings: Sequence[CasingFunction]):
        self.casings = list(casings)

    def tag(
        self,
        text: Optional[str],
        variables: Optional[Sequence[str]],
        casings: Optional[Sequence[CasingFunction]] = None
    ) -> Optional[str]:
        """
        Tag all casing variants of the variables in text.

        Args:
            text: Concrete text, or None if nothing was selected
            variables: Variable names in declaration order, or None if not given
            casings: Overrides the casings given at construction

        Returns:
            Tagged template, or None if text or variables is absent

        Raises:
            InvalidVariableNameError: If a variable name contains braces
        """
        if text is None or variables is None:
            logger.debug("Nothing to tag: text or variables absent")
            return None

        casings = self.casings if casings is None else list(casings)
        segments = split_segments(text)

        for variable in variables:
            validate_variable_name(variable)
            for casing in casings:
                variant = casing(variable)
                if not variant:
                    logger.debug(f"Skipping empty {casing.name} variant of '{variable}'")
                    continue
                segments = self._wrap_variant(segments, variable, variant, casing.name)

        return ''.join(segment.text for segment in segments)

    def _wrap_variant(
        self,
        segments: List[Segment],
        variable: str,
        variant: str,
        casing_name: str
    ) -> List[Segment]:
        """
        Replace occurrences of variant in literal segments with markers.

        Args:
            segments: Current literal and marker segments
            variable: Variable name stored as marker content
            variant: Literal text to look for
            casing_name: Marker tag name

        Returns:
            New segment list
        """
        pattern = re.compile(re.escape(variant))
        marker = wrap(casing_name, variable)
        result = []
        count = 0

        for segment in segments:
            if segment.is_marker:
                result.append(segment)
                continue

            position = 0
            for match in pattern.finditer(segment.text):
                if match.start() > position:
                    result.append(Segment(segment.text[position:match.start()]))
                result.append(Segment(marker, is_marker=True))
                position = match.end()
                count += 1
            if position < len(segment.text):
                result.append(Segment(segment.text[position:]))

        if count:
            logger.debug(f"Tagged {count} occurrence(s) of '{variant}' as {casing_name}({variable})")
        return result
