"""Character-class regimes used to detect word boundaries.

This module provides an abstract policy describing which characters count
as uppercase letters, lowercase letters, digits and word separators, with
a Unicode implementation (Unicode general categories) and an ASCII-only
fallback. Filters pick a policy once, when they are built, and compile
their patterns from it.
"""

from abc import ABC, abstractmethod
import functools
import logging
import re
import string
import sys
import unicodedata
from typing import Dict, List, Optional, Tuple

from config import get_config_value
from wordfilter.separator import WordFilterError, ConfigurationError


logger = logging.getLogger(__name__)

REGIMES = ('auto', 'unicode', 'ascii')


class BoundaryPolicyError(WordFilterError):
    """Exception raised when a boundary regime cannot be used."""

    def __init__(self, message: str, regime: Optional[str] = None):
        """Initialize the error.

        Args:
            message: Error description.
            regime: Name of the regime that was requested.
        """
        self.regime = regime
        super().__init__(message)


def _format_codepoint(code: int) -> str:
    if code <= 0xFFFF:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def _to_class_body(ranges: List[Tuple[int, int]]) -> str:
    parts = []
    for start, end in ranges:
        if start == end:
            parts.append(_format_codepoint(start))
        else:
            parts.append(f"{_format_codepoint(start)}-{_format_codepoint(end)}")
    return ''.join(parts)


@functools.lru_cache(maxsize=1)
def _unicode_category_classes() -> Dict[str, str]:
    """Scan the Unicode database once and build regex class bodies.

    Returns:
        Mapping of 'Lu', 'Ll' and 'Z' to character class bodies (without
        the surrounding brackets).
    """
    ranges: Dict[str, List[Tuple[int, int]]] = {'Lu': [], 'Ll': [], 'Z': []}

    for code in range(sys.maxunicode + 1):
        category = unicodedata.category(chr(code))
        key = 'Z' if category[0] == 'Z' else category
        bucket = ranges.get(key)
        if bucket is None:
            continue
        if bucket and bucket[-1][1] == code - 1:
            bucket[-1] = (bucket[-1][0], code)
        else:
            bucket.append((code, code))

    logger.debug(
        f"Built Unicode {unicodedata.unidata_version} classes: "
        + ", ".join(f"{k}={len(v)} ranges" for k, v in ranges.items())
    )
    return {key: _to_class_body(value) for key, value in ranges.items()}


class TextBoundaryPolicy(ABC):
    """Abstract base class for character-class regimes.

    Each property returns a regex fragment matching exactly one character.
    Patterns built from these fragments must be compiled with ``flags``.
    """

    name = 'abstract'

    @property
    @abstractmethod
    def upper(self) -> str:
        """Fragment matching one uppercase letter."""
        pass

    @property
    @abstractmethod
    def lower(self) -> str:
        """Fragment matching one lowercase letter."""
        pass

    @property
    @abstractmethod
    def digit(self) -> str:
        """Fragment matching one decimal digit."""
        pass

    @property
    @abstractmethod
    def non_space(self) -> str:
        """Fragment matching one character that is not a space/separator."""
        pass

    @property
    def flags(self) -> int:
        return 0

    @abstractmethod
    def to_upper(self, text: str) -> str:
        """Uppercase text under this regime."""
        pass

    @abstractmethod
    def to_lower(self, text: str) -> str:
        """Lowercase text under this regime."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this regime can be used on the running interpreter."""
        pass

    def compile(self, pattern: str) -> 're.Pattern':
        return re.compile(pattern, self.flags)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class UnicodeBoundaryPolicy(TextBoundaryPolicy):
    """Regime based on Unicode general categories.

    Uppercase is ``Lu``, lowercase is ``Ll``, digits are ``Nd`` and the
    separator class is every ``Z*`` category plus the ASCII whitespace
    controls matched by ``\\s`` in ASCII mode. Case mapping works on whole
    characters, so multi-byte and width-changing mappings are correct.
    """

    name = 'unicode'

    @property
    def upper(self) -> str:
        return f"[{_unicode_category_classes()['Lu']}]"

    @property
    def lower(self) -> str:
        return f"[{_unicode_category_classes()['Ll']}]"

    @property
    def digit(self) -> str:
        return r"\d"

    @property
    def non_space(self) -> str:
        return f"[^{_unicode_category_classes()['Z']}\\t\\n\\r\\f\\v]"

    def to_upper(self, text: str) -> str:
        return text.upper()

    def to_lower(self, text: str) -> str:
        return text.lower()

    def is_available(self) -> bool:
        try:
            return re.fullmatch(self.upper, 'É') is not None
        except re.error as e:
            logger.warning(f"Unicode character classes failed to compile: {e}")
            return False


_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class AsciiBoundaryPolicy(TextBoundaryPolicy):
    """ASCII-only fallback regime.

    Non-ASCII letters are never treated as boundaries and are left
    untouched by case mapping.
    """

    name = 'ascii'

    @property
    def upper(self) -> str:
        return "[A-Z]"

    @property
    def lower(self) -> str:
        return "[a-z]"

    @property
    def digit(self) -> str:
        return "[0-9]"

    @property
    def non_space(self) -> str:
        return r"\S"

    @property
    def flags(self) -> int:
        return re.ASCII

    def to_upper(self, text: str) -> str:
        return text.translate(_ASCII_UPPER)

    def to_lower(self, text: str) -> str:
        return text.translate(_ASCII_LOWER)

    def is_available(self) -> bool:
        return True


def create_boundary_policy(config: Optional[dict] = None) -> TextBoundaryPolicy:
    """Factory function to create the boundary policy for a configuration.

    Args:
        config: Optional configuration dictionary with a 'boundary' section.
            ``boundary.regime`` is one of 'auto', 'unicode' or 'ascii'.

    Returns:
        A TextBoundaryPolicy instance.

    Raises:
        ConfigurationError: If the regime name is not recognised.
        BoundaryPolicyError: If the requested regime is unavailable.
    """
    regime = str(get_config_value(config or {}, 'boundary.regime', 'auto')).lower()

    if regime not in REGIMES:
        raise ConfigurationError(
            f"Unknown boundary regime '{regime}', expected one of {', '.join(REGIMES)}"
        )

    if regime == 'ascii':
        logger.info("Using ASCII boundary policy")
        return AsciiBoundaryPolicy()

    unicode_policy = UnicodeBoundaryPolicy()
    if regime == 'unicode':
        if not unicode_policy.is_available():
            raise BoundaryPolicyError(
                "Unicode boundary policy requested but Unicode classes are unavailable",
                regime='unicode'
            )
        logger.info("Using Unicode boundary policy")
        return unicode_policy

    # auto
    if unicode_policy.is_available():
        logger.info("Auto-selected Unicode boundary policy")
        return unicode_policy

    logger.info("Auto-selected ASCII boundary policy (Unicode classes unavailable)")
    return AsciiBoundaryPolicy()


@functools.lru_cache(maxsize=1)
def get_default_policy() -> TextBoundaryPolicy:
    """Return the process-wide auto-selected policy."""
    return create_boundary_policy()


__all__ = [
    'REGIMES',
    'BoundaryPolicyError',
    'TextBoundaryPolicy',
    'UnicodeBoundaryPolicy',
    'AsciiBoundaryPolicy',
    'create_boundary_policy',
    'get_default_policy',
]
