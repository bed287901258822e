"""Input dispatch for word filters.

Filters only ever transform text. This module decides, once per value,
whether the value is a string, another scalar, an ordered sequence, or
something to leave alone, and applies a text transform accordingly.
"""

from enum import Enum
from typing import Any, Callable


StringTransform = Callable[[str], str]


class InputKind(Enum):
    """Kind of value handed to a filter.

    Values:
        STRING: A str, transformed directly.
        SCALAR: An int, float or bool, transformed through its text form.
        SEQUENCE: A list or tuple, transformed element by element.
        OTHER: Anything else, returned unchanged.
    """
    STRING = "string"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    OTHER = "other"


def classify(value: Any) -> InputKind:
    """Determine the InputKind of a value."""
    if isinstance(value, str):
        return InputKind.STRING
    if isinstance(value, (bool, int, float)):
        return InputKind.SCALAR
    if isinstance(value, (list, tuple)):
        return InputKind.SEQUENCE
    return InputKind.OTHER


def map_value(value: Any, transform: StringTransform) -> Any:
    """Apply a text transform to a value according to its kind.

    Scalars are transformed through ``str(value)``. When that leaves the
    text as it was, the original scalar is returned so numbers and
    booleans without anything to transform keep their type. Booleans
    become ``'True'`` / ``'False'`` rather than ``'1'`` / ``''``, so a
    case-changing transform can turn ``True`` into ``'true'`` while a
    splitting one returns ``True`` itself.

    Sequences come back as the same container type with each element
    dispatched on its own, so mixed and nested sequences are fine.

    Args:
        value: Value to transform.
        transform: Function from str to str.

    Returns:
        The transformed value, or ``value`` itself for unsupported kinds.
    """
    kind = classify(value)

    if kind is InputKind.STRING:
        return transform(value)

    if kind is InputKind.SCALAR:
        text = str(value)
        result = transform(text)
        return value if result == text else result

    if kind is InputKind.SEQUENCE:
        items = [map_value(item, transform) for item in value]
        if isinstance(value, tuple) and hasattr(value, '_fields'):
            return type(value)(*items)
        return type(value)(items)

    return value


__all__ = ['StringTransform', 'InputKind', 'classify', 'map_value']
