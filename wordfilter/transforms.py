"""Word filters: splitting, recombining and substituting separators.

Every filter is an immutable callable. Its separator(s) and boundary
policy are fixed when it is built, and its patterns are compiled then.
Calling a filter dispatches the input through ``map_value`` so strings,
scalars and sequences are handled alike and anything else passes through.

Example:
    from wordfilter.transforms import CaseSplitter, SeparatorRecombiner

    CaseSplitter('-')('CamelCaseWord')          # 'Camel-Case-Word'
    SeparatorRecombiner('-')('dash-to-camel')   # 'DashToCamel'
"""

from abc import ABC, abstractmethod
import logging
import re
from typing import Any, List, Optional

from wordfilter.boundary import TextBoundaryPolicy, get_default_policy
from wordfilter.separator import DEFAULT_SEPARATOR, Separator, SeparatorPair
from wordfilter.values import map_value


logger = logging.getLogger(__name__)


class WordFilter(ABC):
    """Abstract base class for word filters.

    Subclasses implement ``transform`` for a single str; ``filter`` and
    ``__call__`` apply it to any input.
    """

    @abstractmethod
    def transform(self, text: str) -> str:
        """Transform one string.

        Args:
            text: The string to transform.

        Returns:
            The transformed string.
        """
        pass

    def filter(self, value: Any) -> Any:
        """Filter a string, scalar or sequence; return anything else as is."""
        return map_value(value, self.transform)

    def __call__(self, value: Any) -> Any:
        return self.filter(value)


class _SingleSeparatorFilter(WordFilter):
    """Filter configured with one separator and a boundary policy.

    Subclasses compile their patterns in ``_compile``, which runs once the
    separator and policy are set.
    """

    default_separator = DEFAULT_SEPARATOR

    def __init__(
        self,
        separator: Any = None,
        policy: Optional[TextBoundaryPolicy] = None,
    ):
        self.policy = policy or get_default_policy()
        self._separator = Separator.from_options(separator, self.default_separator)
        self._compile()
        logger.debug(
            f"{type(self).__name__} built: separator={self.separator!r}, "
            f"policy={self.policy.name}"
        )

    @property
    def separator(self) -> str:
        return self._separator.value

    def with_separator(self, separator: str) -> '_SingleSeparatorFilter':
        """Return a copy of this filter using a different separator."""
        return type(self)(separator, policy=self.policy)

    @abstractmethod
    def _compile(self) -> None:
        """Compile patterns for the configured separator and policy."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(separator={self.separator!r}, policy={self.policy!r})"


class CaseSplitter(_SingleSeparatorFilter):
    """Insert a separator at every camelCase word boundary.

    A boundary is an uppercase letter that either follows a lowercase
    letter or digit, or ends a run of capitals and starts a capitalised
    word ("HTTPServer" -> "HTTP Server"). Nothing is inserted before the
    first character.
    """

    def _compile(self) -> None:
        p = self.policy
        # Acronym boundaries first, then lower/digit -> upper.
        self._patterns: List[re.Pattern] = [
            p.compile(f"(?<={p.upper})({p.upper}{p.lower})"),
            p.compile(f"(?<={p.lower}|{p.digit})({p.upper})"),
        ]

    def transform(self, text: str) -> str:
        insert = self.separator
        for pattern in self._patterns:
            text = pattern.sub(lambda m: insert + m.group(1), text)
        return text


class SeparatorRecombiner(_SingleSeparatorFilter):
    """Remove separators and capitalise the character that followed each.

    The first character is capitalised too, so the result is StudlyCase
    ("camel cased words" -> "CamelCasedWords"). A separator followed by a
    space character, or by nothing, is kept.
    """

    def _compile(self) -> None:
        p = self.policy
        quoted = re.escape(self.separator)
        self._separator_pattern = p.compile(f"{quoted}({p.non_space})")
        self._first_pattern = p.compile(f"^{p.non_space}")

    def transform(self, text: str) -> str:
        to_upper = self.policy.to_upper
        text = self._separator_pattern.sub(lambda m: to_upper(m.group(1)), text)
        return self._first_pattern.sub(lambda m: to_upper(m.group(0)), text, count=1)


class StudlyCaseAdapter(_SingleSeparatorFilter):
    """Recombine separated words, then lowercase the first character.

    The name is inherited from the filter it mirrors; the output is in fact
    camelCase ("under_score_case" -> "underScoreCase"). Plain
    SeparatorRecombiner output is the StudlyCase form.
    """

    default_separator = '_'

    def _compile(self) -> None:
        self._recombiner = SeparatorRecombiner(self.separator, policy=self.policy)

    def transform(self, text: str) -> str:
        text = self._recombiner.transform(text)
        if not text:
            return text
        return self.policy.to_lower(text[0]) + text[1:]


class SeparatorSubstitution(WordFilter):
    """Replace every literal occurrence of one separator with another."""

    def __init__(
        self,
        search_separator: Any = DEFAULT_SEPARATOR,
        replacement_separator: Any = '-',
    ):
        self._pair = SeparatorPair.from_options(search_separator, replacement_separator)
        self._pattern = None
        if self._pair.search is not None:
            self._pattern = re.compile(re.escape(self._pair.search))
        logger.debug(
            f"SeparatorSubstitution built: search={self.search_separator!r}, "
            f"replacement={self.replacement_separator!r}"
        )

    @property
    def search_separator(self) -> Optional[str]:
        return self._pair.search

    @property
    def replacement_separator(self) -> str:
        return self._pair.replacement

    def with_separators(
        self,
        search_separator: Optional[str] = None,
        replacement_separator: Optional[str] = None,
    ) -> 'SeparatorSubstitution':
        """Return a copy with either separator replaced."""
        return SeparatorSubstitution(
            self.search_separator if search_separator is None else search_separator,
            self.replacement_separator if replacement_separator is None else replacement_separator,
        )

    def transform(self, text: str) -> str:
        self._pair.require_search()
        replacement = self.replacement_separator
        return self._pattern.sub(lambda m: replacement, text)

    def __repr__(self) -> str:
        return (
            f"SeparatorSubstitution(search_separator={self.search_separator!r}, "
            f"replacement_separator={self.replacement_separator!r})"
        )


def split(value: Any, separator: str = DEFAULT_SEPARATOR,
          policy: Optional[TextBoundaryPolicy] = None) -> Any:
    """Split camelCase words in ``value`` with ``separator``."""
    return CaseSplitter(separator, policy=policy)(value)


def recombine(value: Any, separator: str = DEFAULT_SEPARATOR,
              policy: Optional[TextBoundaryPolicy] = None) -> Any:
    """Join ``separator``-delimited words in ``value`` into StudlyCase."""
    return SeparatorRecombiner(separator, policy=policy)(value)


def to_studly(value: Any, separator: str = '_',
              policy: Optional[TextBoundaryPolicy] = None) -> Any:
    """Join ``separator``-delimited words in ``value`` into camelCase."""
    return StudlyCaseAdapter(separator, policy=policy)(value)


def substitute(value: Any, search: Optional[str], replace: str) -> Any:
    """Replace every literal ``search`` in ``value`` with ``replace``."""
    return SeparatorSubstitution(search, replace)(value)


__all__ = [
    'WordFilter',
    'CaseSplitter',
    'SeparatorRecombiner',
    'StudlyCaseAdapter',
    'SeparatorSubstitution',
    'split',
    'recombine',
    'to_studly',
    'substitute',
]
