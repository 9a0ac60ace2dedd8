"""
Capture and apply pipelines.

Capture: prompt for variable names, read the selection, tag it and write the
template to the clipboard. Apply: read the template from the clipboard, ask
for new values, substitute and render, and insert the result.
"""

import logging
from typing import List, Optional

from smappet.casing import CasingRegistry
from smappet.config import SmappetConfig
from smappet.host import Host
from smappet.template import KeySubstitutor, MarkerScanner, Renderer, Tagger, build_mapping


logger = logging.getLogger(__name__)


def parse_list(raw: Optional[str], separator: str = ',') -> Optional[List[str]]:
    """
    Split a prompted list into trimmed, non-empty items.

    Returns None when the prompt was cancelled.
    """
    if raw is None:
        return None

    items = []
    for item in raw.split(separator):
        item = item.strip()
        if item:
            items.append(item)
        else:
            logger.debug("Skipping empty list item")
    return items


def parse_values(raw: Optional[str], separator: str = ',') -> Optional[List[str]]:
    """
    Split a prompted list of values into trimmed items, keeping blanks.

    Values pair with names by position, so an empty item stays in place as
    an empty value. Returns None when the prompt was cancelled.
    """
    if raw is None:
        return None
    return [item.strip() for item in raw.split(separator)]


def capture_template(
    host: Host,
    config: Optional[SmappetConfig] = None,
    registry: Optional[CasingRegistry] = None
) -> Optional[str]:
    """
    Run the capture pipeline.

    Args:
        host: Hosting environment
        config: Effective configuration (defaults if omitted)
        registry: Casing registry (built-ins if omitted)

    Returns:
        The template written to the clipboard, or None if nothing was written

    Raises:
        InvalidVariableNameError: If a variable name contains braces
    """
    config = config or SmappetConfig()
    registry = registry or CasingRegistry()

    raw_names = host.prompt_comma_separated_list(
        config.variables_prompt.prompt,
        config.variables_prompt.placeholder,
    )
    variables = parse_list(raw_names, config.separator)
    text = host.read_selected_text()

    tagger = Tagger(registry.select(config.casings))
    template = tagger.tag(text, variables)
    if template is None:
        logger.info("Nothing captured: no selection or no variable names")
        return None

    host.write_clipboard_text(template)
    logger.info(f"Captured template for variables: {variables}")
    return template


def apply_template(
    host: Host,
    config: Optional[SmappetConfig] = None,
    registry: Optional[CasingRegistry] = None
) -> Optional[str]:
    """
    Run the apply pipeline.

    Args:
        host: Hosting environment
        config: Effective configuration (defaults if omitted)
        registry: Casing registry (built-ins if omitted)

    Returns:
        The rendered text that was inserted, or None if the values prompt was cancelled

    Raises:
        MalformedMarkerError: If the template's tags do not pair up
        UnknownCasingError: If a marker names an unknown casing and the policy is 'error'
    """
    config = config or SmappetConfig()
    registry = registry or CasingRegistry()

    template = host.read_clipboard_text()
    # Tags must pair up before the user is asked for anything
    names = MarkerScanner(strict=True).scan(template)

    values: List[str] = []
    if names:
        raw_values = host.prompt_comma_separated_list(
            config.values_prompt.prompt,
            config.values_placeholder(names),
        )
        parsed = parse_values(raw_values, config.separator)
        if parsed is None:
            logger.info("Apply cancelled: no values supplied")
            return None
        values = parsed
    else:
        logger.info("Clipboard template has no markers; rendering as is")

    substituted = KeySubstitutor().substitute(template, build_mapping(names, values))
    rendered = Renderer(registry, config.unknown_markers).render(substituted)

    host.insert_text_at_cursor(rendered)
    return rendered
