"""Utility modules for wordfilter."""

from utils.logging_utils import setup_logging
from utils.string_utils import (
    snake_to_camel,
    snake_to_studly,
    camel_to_snake,
    camel_to_kebab,
    kebab_to_camel,
    kebab_to_studly,
    snake_to_kebab,
    kebab_to_snake,
)

__all__ = [
    'setup_logging',
    'snake_to_camel',
    'snake_to_studly',
    'camel_to_snake',
    'camel_to_kebab',
    'kebab_to_camel',
    'kebab_to_studly',
    'snake_to_kebab',
    'kebab_to_snake',
]
