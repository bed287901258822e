"""Preconfigured word filters and lookup by name.

Each preset is a factory function returning a configured filter. Presets
can also be created by name, which accepts the usual spellings of a
filter name: ``CamelCaseToDash``, ``camel_case_to_dash`` and
``camel-case-to-dash`` all resolve to the same factory.
"""

import inspect
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from wordfilter.boundary import TextBoundaryPolicy, create_boundary_policy
from wordfilter.separator import DEFAULT_SEPARATOR, ConfigurationError, WordFilterError
from wordfilter.transforms import (
    WordFilter,
    CaseSplitter,
    SeparatorRecombiner,
    StudlyCaseAdapter,
    SeparatorSubstitution,
)


logger = logging.getLogger(__name__)


class UnknownFilterError(WordFilterError):
    """Exception raised when a filter name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown word filter: {name!r}")


# camelCase -> separated

def camel_case_to_separator(separator: Any = DEFAULT_SEPARATOR,
                            policy: Optional[TextBoundaryPolicy] = None) -> CaseSplitter:
    return CaseSplitter(separator, policy=policy)


def camel_case_to_dash(policy: Optional[TextBoundaryPolicy] = None) -> CaseSplitter:
    return CaseSplitter('-', policy=policy)


def camel_case_to_underscore(policy: Optional[TextBoundaryPolicy] = None) -> CaseSplitter:
    return CaseSplitter('_', policy=policy)


# separated -> StudlyCase / camelCase

def separator_to_camel_case(separator: Any = DEFAULT_SEPARATOR,
                            policy: Optional[TextBoundaryPolicy] = None) -> SeparatorRecombiner:
    return SeparatorRecombiner(separator, policy=policy)


def dash_to_camel_case(policy: Optional[TextBoundaryPolicy] = None) -> SeparatorRecombiner:
    return SeparatorRecombiner('-', policy=policy)


def underscore_to_camel_case(policy: Optional[TextBoundaryPolicy] = None) -> SeparatorRecombiner:
    return SeparatorRecombiner('_', policy=policy)


def underscore_to_studly_case(policy: Optional[TextBoundaryPolicy] = None) -> StudlyCaseAdapter:
    """Underscore words to a lowercase-first form ("studly_case" -> "studlyCase")."""
    return StudlyCaseAdapter('_', policy=policy)


def dash_to_studly_case(policy: Optional[TextBoundaryPolicy] = None) -> StudlyCaseAdapter:
    """Dash words to a lowercase-first form ("kebab-case" -> "kebabCase")."""
    return StudlyCaseAdapter('-', policy=policy)


# separator -> separator (literal substitution; no boundary policy)

def separator_to_separator(search_separator: Any = DEFAULT_SEPARATOR,
                           replacement_separator: Any = '-') -> SeparatorSubstitution:
    return SeparatorSubstitution(search_separator, replacement_separator)


def separator_to_dash(search_separator: Any = DEFAULT_SEPARATOR) -> SeparatorSubstitution:
    return SeparatorSubstitution(search_separator, '-')


def dash_to_separator(separator: Any = DEFAULT_SEPARATOR) -> SeparatorSubstitution:
    if isinstance(separator, Mapping):
        separator = separator.get('separator', DEFAULT_SEPARATOR)
    return SeparatorSubstitution('-', separator)


def dash_to_underscore() -> SeparatorSubstitution:
    return SeparatorSubstitution('-', '_')


def underscore_to_dash() -> SeparatorSubstitution:
    return SeparatorSubstitution('_', '-')


def underscore_to_separator(replacement_separator: Any = DEFAULT_SEPARATOR) -> SeparatorSubstitution:
    if isinstance(replacement_separator, Mapping):
        replacement_separator = replacement_separator.get('separator', DEFAULT_SEPARATOR)
    return SeparatorSubstitution('_', replacement_separator)


FILTERS: Dict[str, Callable[..., WordFilter]] = {
    factory.__name__: factory
    for factory in (
        camel_case_to_separator,
        camel_case_to_dash,
        camel_case_to_underscore,
        separator_to_camel_case,
        dash_to_camel_case,
        underscore_to_camel_case,
        underscore_to_studly_case,
        dash_to_studly_case,
        separator_to_separator,
        separator_to_dash,
        dash_to_separator,
        dash_to_underscore,
        underscore_to_dash,
        underscore_to_separator,
    )
}

# Presets whose first argument is configurable by name.
_CONFIGURABLE = {
    'camel_case_to_separator',
    'separator_to_camel_case',
    'separator_to_separator',
    'separator_to_dash',
    'dash_to_separator',
    'underscore_to_separator',
}


def _normalize_name(name: str) -> str:
    return name.replace('_', '').replace('-', '').lower()


_BY_NORMALIZED_NAME = {_normalize_name(name): name for name in FILTERS}


def _takes_policy(factory: Callable[..., WordFilter]) -> bool:
    return 'policy' in inspect.signature(factory).parameters


def available_filters() -> List[str]:
    """List the registered filter names."""
    return sorted(FILTERS)


def create_filter(
    name: str,
    options: Any = None,
    policy: Optional[TextBoundaryPolicy] = None,
    config: Optional[dict] = None,
) -> WordFilter:
    """Create a preset filter by name.

    Args:
        name: Filter name in any of its spellings.
        options: Separator string, option mapping, or None for the preset
            default. Only presets with a configurable separator accept it.
        policy: Boundary policy to use. Built from ``config`` when omitted.
            Substitution presets take no policy and ignore it.
        config: Optional configuration dictionary (see ``config/default.yaml``).

    Returns:
        A configured WordFilter.

    Raises:
        UnknownFilterError: If no preset is registered under the name.
        ConfigurationError: If options are given to a fixed preset or are invalid.
    """
    key = _BY_NORMALIZED_NAME.get(_normalize_name(name))
    if key is None:
        raise UnknownFilterError(name)

    factory = FILTERS[key]
    kwargs = {}
    if _takes_policy(factory):
        if policy is None and config is not None:
            policy = create_boundary_policy(config)
        kwargs['policy'] = policy
    if options is None:
        return factory(**kwargs)

    if key not in _CONFIGURABLE:
        raise ConfigurationError(f"Filter '{key}' does not accept options")

    logger.debug(f"Creating filter '{key}' with options {options!r}")
    return factory(options, **kwargs)


__all__ = [
    'UnknownFilterError',
    'FILTERS',
    'available_filters',
    'create_filter',
    'camel_case_to_separator',
    'camel_case_to_dash',
    'camel_case_to_underscore',
    'separator_to_camel_case',
    'dash_to_camel_case',
    'underscore_to_camel_case',
    'underscore_to_studly_case',
    'dash_to_studly_case',
    'separator_to_separator',
    'separator_to_dash',
    'dash_to_separator',
    'dash_to_underscore',
    'underscore_to_dash',
    'underscore_to_separator',
]
