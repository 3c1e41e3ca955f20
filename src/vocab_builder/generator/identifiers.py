"""
Identifier formatting: case conversion, sanitization and collision checks.
"""

import logging
import re
from typing import Iterable, List, Optional, Set, Union

from ..core.exceptions import IdentifierCollision
from ..shared.models import CaseFormat

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[_\-.\s]+")
# Acronym run before a capitalized word, capitalized word, bare acronym, digits,
# then any leftover symbols so no character is silently dropped
_WORDS = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[^\W\dA-Z_]+|[A-Z]+|\d+|[^\w\s]+")
_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")

DEFAULT_META_FIELDS = ("NAMESPACE", "PREFIX")


def split_words(raw: str) -> List[str]:
    """
    Split a local name into words on separators and camel-case boundaries.

    >>> split_words("hasXMLValue")
    ['has', 'XML', 'Value']
    """
    words: List[str] = []
    for chunk in _SEPARATORS.split(raw):
        if chunk:
            words.extend(_WORDS.findall(chunk) or [chunk])
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def format_case(raw: str, case_format: Union[CaseFormat, str, None]) -> str:
    """Apply a naming convention to ``raw``; None or ``none`` returns it unmodified."""
    if case_format is None:
        return raw
    case_format = CaseFormat(case_format)
    if case_format == CaseFormat.NONE:
        return raw
    if case_format == CaseFormat.UPPER:
        return raw.upper()
    if case_format == CaseFormat.LOWER:
        return raw.lower()

    words = split_words(raw)
    if not words:
        return raw
    if case_format == CaseFormat.UPPER_UNDERSCORE:
        return "_".join(word.upper() for word in words)
    if case_format == CaseFormat.LOWER_UNDERSCORE:
        return "_".join(word.lower() for word in words)
    if case_format == CaseFormat.UPPER_CAMEL:
        return "".join(_capitalize(word) for word in words)
    # LOWER_CAMEL
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


class IdentifierFormatter:
    """
    Produces valid identifiers for one target and tracks which ones have
    been emitted, so a formatter instance belongs to exactly one run.

    Args:
        reserved_words: Words the target language does not allow as names.
        meta_fields: Names the generated artifact already uses itself.
    """

    def __init__(self, reserved_words: Iterable[str] = (), meta_fields: Iterable[str] = DEFAULT_META_FIELDS):
        self.reserved_words: Set[str] = set(reserved_words)
        self.meta_fields: Set[str] = set(meta_fields)
        self._seen: Set[str] = set()
        self.emitted: List[str] = []

    def clean(self, identifier: str) -> str:
        """Make ``identifier`` syntactically valid and non-reserved."""
        cleaned = _INVALID_CHARS.sub("_", identifier)
        if not cleaned:
            return "_"
        if cleaned[0].isdigit():
            cleaned = "_" + cleaned
        if cleaned in self.reserved_words or cleaned in self.meta_fields:
            cleaned += "_"
        return cleaned

    def format(self, raw: str, case_format: Optional[CaseFormat] = None,
               prefix: str = "", suffix: str = "") -> str:
        return self.clean(f"{prefix or ''}{format_case(raw, case_format)}{suffix or ''}")

    def check_field(self, container: str, identifier: str) -> str:
        """
        Register ``identifier`` in ``container``.

        Raises:
            IdentifierCollision: If it was emitted before or shadows the container.
        """
        if identifier == container:
            raise IdentifierCollision(container, identifier, "has the same name as its container")
        if identifier in self._seen:
            raise IdentifierCollision(container, identifier, "is already defined")
        self._seen.add(identifier)
        self.emitted.append(identifier)
        logger.debug(f"{container}: {identifier}")
        return identifier
