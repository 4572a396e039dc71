"""
Naming utilities for safe code generation.

Cleans user-entered identifiers (class, field, method and parameter names)
before they are written into generated declarations.
"""

from functools import lru_cache
from typing import FrozenSet, Iterable, List, Optional
from collections import Counter

# Characters trimmed from both ends of a name once spaces and leading digits
# have been handled
DEFAULT_TRIM_SYMBOLS = frozenset("&*+-/<>='\\@`^!?.,;:|{}[]()\"")

DIGITS = "0123456789"

DEFAULT_CACHE_SIZE = 4096


class NameSanitizer:
    """Handles identifier sanitization and duplicate detection."""

    def __init__(
        self,
        trim_symbols: Optional[Iterable[str]] = None,
        cache_size: int = DEFAULT_CACHE_SIZE,
    ):
        """
        Initialize name sanitizer.

        Args:
            trim_symbols: Characters stripped from both ends of a name.
                Defaults to DEFAULT_TRIM_SYMBOLS.
            cache_size: Most recent results kept in memory
        """
        self.trim_symbols: FrozenSet[str] = (
            frozenset(trim_symbols) if trim_symbols is not None else DEFAULT_TRIM_SYMBOLS
        )
        self._strip_chars = "".join(sorted(self.trim_symbols))
        self._cached_sanitize = lru_cache(maxsize=cache_size)(self._sanitize)

    def sanitize_name(self, name: str) -> str:
        """
        Sanitize a name for use as an identifier.

        The steps run in a fixed order: trim whitespace, replace spaces with
        underscores, drop leading digits, then trim symbols from both ends.
        The pass is repeated until the name stops changing, so "-1abc" ends
        up as "abc" rather than "1abc".

        Args:
            name: Raw name as entered by the user

        Returns:
            Sanitized name, possibly empty
        """
        return self._cached_sanitize(name)

    def _sanitize(self, name: str) -> str:
        cleaned = self._clean_pass(name)
        previous = name
        while cleaned != previous:
            previous = cleaned
            cleaned = self._clean_pass(cleaned)
        return cleaned

    def _clean_pass(self, name: str) -> str:
        """Run the four cleanup steps once."""
        # Step 1: Surrounding whitespace
        cleaned = name.strip()

        # Step 2: Inner spaces
        cleaned = cleaned.replace(" ", "_")

        # Step 3: Identifiers cannot start with a digit
        cleaned = cleaned.lstrip(DIGITS)

        # Step 4: Symbols at either end
        return cleaned.strip(self._strip_chars)

    def is_valid_name(self, name: str) -> bool:
        """Check whether a raw name survives sanitization."""
        return bool(self.sanitize_name(name))

    def find_duplicates(self, names: Iterable[str]) -> List[str]:
        """
        Find sanitized names that occur more than once.

        Empty names are ignored since they never reach the output.

        Args:
            names: Raw names

        Returns:
            Duplicated sanitized names, in order of first appearance
        """
        counts = Counter()
        order = []
        for raw in names:
            sanitized = self.sanitize_name(raw)
            if not sanitized:
                continue
            if sanitized not in counts:
                order.append(sanitized)
            counts[sanitized] += 1

        return [name for name in order if counts[name] > 1]

    def clear_cache(self):
        """Drop cached sanitization results."""
        self._cached_sanitize.cache_clear()

    def cache_info(self):
        """Hit, miss and size counters of the result cache."""
        return self._cached_sanitize.cache_info()


# Shared default sanitizer
_default_sanitizer: Optional[NameSanitizer] = None


def get_default_sanitizer() -> NameSanitizer:
    """Get the default name sanitizer instance."""
    global _default_sanitizer
    if _default_sanitizer is None:
        _default_sanitizer = NameSanitizer()
    return _default_sanitizer


def sanitize_identifier(name: str) -> str:
    """Sanitize a name with the default symbol set."""
    return get_default_sanitizer().sanitize_name(name)
