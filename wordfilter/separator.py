"""Separator values and option normalization for word filters.

A filter is configured once with either a single separator (the splitting
and recombining filters) or a search/replacement pair (the substitution
filters). Both are frozen; changing a separator means building a new value.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


DEFAULT_SEPARATOR = ' '


class WordFilterError(Exception):
    """Base exception for the word filter library."""
    pass


class ConfigurationError(WordFilterError):
    """Exception raised when a filter is configured with invalid values."""
    pass


def _require_str(value: Any, label: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(
            f"{label} must be a string, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class Separator:
    """A single separator string.

    Attributes:
        value: Delimiter marking word boundaries. May be empty.
    """
    value: str = DEFAULT_SEPARATOR

    def __post_init__(self):
        _require_str(self.value, "Separator")

    @classmethod
    def from_options(cls, options: Any = None, default: str = DEFAULT_SEPARATOR) -> 'Separator':
        """Build a separator from a string or an option mapping.

        Args:
            options: A separator string, a mapping with a ``separator`` key,
                or None for the default.
            default: Separator used when options carry none.

        Returns:
            A Separator.

        Raises:
            ConfigurationError: If the separator is not a string.
        """
        if options is None:
            return cls(default)
        if isinstance(options, Mapping):
            return cls(options.get('separator', default))
        return cls(options)


@dataclass(frozen=True)
class SeparatorPair:
    """Search and replacement separators for literal substitution.

    The search separator may be left unset (None); filters using the pair
    reject it when they are invoked rather than when they are built.

    Attributes:
        search: Literal text to look for.
        replacement: Text substituted for every occurrence of ``search``.
    """
    search: Optional[str] = DEFAULT_SEPARATOR
    replacement: str = '-'

    def __post_init__(self):
        if self.search is not None:
            _require_str(self.search, "Search separator")
        _require_str(self.replacement, "Replacement separator")

    def require_search(self) -> str:
        """Return the search separator, failing if it was never set."""
        if self.search is None:
            raise ConfigurationError(
                "You must provide a search separator for this filter to work"
            )
        return self.search

    @classmethod
    def from_options(
        cls,
        search: Any = DEFAULT_SEPARATOR,
        replacement: Any = '-',
    ) -> 'SeparatorPair':
        """Build a pair from positional values or an option mapping.

        ``search`` may be a mapping with ``search_separator`` and
        ``replacement_separator`` keys, in which case ``replacement`` is
        used only as the fallback for a missing key.
        """
        if isinstance(search, Mapping):
            options = search
            search = options.get('search_separator', DEFAULT_SEPARATOR)
            replacement = options.get('replacement_separator', replacement)
        return cls(search, replacement)


__all__ = [
    'DEFAULT_SEPARATOR',
    'WordFilterError',
    'ConfigurationError',
    'Separator',
    'SeparatorPair',
]
