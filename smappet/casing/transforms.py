"""Built-in casing transforms."""

import inflection

from .words import split_words, to_snake


def camel_case(text: str) -> str:
    """'first name' -> 'firstName'"""
    snake = to_snake(text)
    if not snake:
        return ''
    return inflection.camelize(snake, uppercase_first_letter=False)


def pascal_case(text: str) -> str:
    """'first name' -> 'FirstName'"""
    return inflection.camelize(to_snake(text))


def capital_case(text: str) -> str:
    """'first name' -> 'First Name'"""
    return ' '.join(word.capitalize() for word in split_words(text))


def constant_case(text: str) -> str:
    """'first name' -> 'FIRST_NAME'"""
    return to_snake(text).upper()


def dot_case(text: str) -> str:
    """'first name' -> 'first.name'"""
    return '.'.join(split_words(text))


def header_case(text: str) -> str:
    """'first name' -> 'First-Name'"""
    return inflection.dasherize(capital_case(text).replace(' ', '_'))


def param_case(text: str) -> str:
    """'first name' -> 'first-name'"""
    return inflection.dasherize(to_snake(text))


def path_case(text: str) -> str:
    """'first name' -> 'first/name'"""
    return '/'.join(split_words(text))


def snake_case(text: str) -> str:
    """'first name' -> 'first_name'"""
    return to_snake(text)
