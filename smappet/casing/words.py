"""
Word splitting shared by every casing transform.

Runs of characters that are not ASCII letters or digits are folded into
underscores, then ``inflection.underscore`` breaks camel and acronym
boundaries. The result is the lowercase snake form every transform starts from.
"""

import re
from typing import List

import inflection


SEPARATOR_PATTERN = re.compile(r'[^A-Za-z0-9]+')


def to_snake(text: str) -> str:
    """
    Normalize free text to lowercase snake case.

    Examples:
        >>> to_snake("getHTTPResponse")
        'get_http_response'
        >>> to_snake("  first name ")
        'first_name'
    """
    return '_'.join(split_words(text))


def split_words(text: str) -> List[str]:
    """Split text into lowercase words."""
    underscored = inflection.underscore(SEPARATOR_PATTERN.sub('_', text))
    return [word for word in underscored.split('_') if word]
