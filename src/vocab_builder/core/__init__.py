"""
Core utilities and cross-cutting concerns for the vocabulary generator.

- Exceptions (GenerationException, ConfigurationError, IdentifierCollision,
  LocalNameCollision, ParseFailure)
- Input validation (InputValidator)

Usage:
    from vocab_builder.core import GenerationException, InputValidator
"""

from .exceptions import (
    GenerationException,
    ConfigurationError,
    IdentifierCollision,
    LocalNameCollision,
    ParseFailure,
)
from .validators import InputValidator

__all__ = [
    "GenerationException",
    "ConfigurationError",
    "IdentifierCollision",
    "LocalNameCollision",
    "ParseFailure",
    "InputValidator",
]
