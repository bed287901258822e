"""String case helpers built on the word filters.

One-call conversions for the common identifier styles. Each helper accepts
anything a word filter accepts and passes other values through unchanged.
"""

from typing import Any

from wordfilter.presets import (
    camel_case_to_dash,
    camel_case_to_underscore,
    dash_to_camel_case,
    dash_to_studly_case,
    dash_to_underscore,
    underscore_to_camel_case,
    underscore_to_dash,
    underscore_to_studly_case,
)


def snake_to_camel(text: Any) -> Any:
    """Convert snake_case to camelCase.

    Args:
        text: Snake case string.

    Returns:
        Camel case string, first letter lowercase.
    """
    return underscore_to_studly_case()(text)


def snake_to_studly(text: Any) -> Any:
    """Convert snake_case to StudlyCase ("snake_case" -> "SnakeCase")."""
    return underscore_to_camel_case()(text)


def camel_to_snake(text: Any) -> Any:
    """Convert camelCase or StudlyCase to snake_case.

    Acronyms stay together ("HTTPServerError" -> "http_server_error").

    Args:
        text: Camel case string.

    Returns:
        Snake case string.
    """
    return _lower(camel_case_to_underscore()(text))


def camel_to_kebab(text: Any) -> Any:
    """Convert camelCase or StudlyCase to kebab-case."""
    return _lower(camel_case_to_dash()(text))


def kebab_to_camel(text: Any) -> Any:
    """Convert kebab-case to camelCase."""
    return dash_to_studly_case()(text)


def kebab_to_studly(text: Any) -> Any:
    return dash_to_camel_case()(text)


def snake_to_kebab(text: Any) -> Any:
    return underscore_to_dash()(text)


def kebab_to_snake(text: Any) -> Any:
    return dash_to_underscore()(text)


def _lower(value: Any) -> Any:
    if isinstance(value, str):
        return value.lower()
    if isinstance(value, (list, tuple)):
        return type(value)(_lower(item) for item in value)
    return value
