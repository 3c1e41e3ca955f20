"""
Exception types raised while generating vocabulary source files.

Error kinds:
    GenerationException: base class for failures of a generation run
    ConfigurationError: blank/undetectable namespace or invalid config value
    IdentifierCollision: two constants format to the same identifier
    LocalNameCollision: duplicate local name under the ``fail`` policy
    ParseFailure: the input document could not be read as RDF

I/O failures are not wrapped; ``OSError`` propagates unchanged.
"""

from typing import Optional


class GenerationException(Exception):
    """Exception raised when a vocabulary cannot be generated."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(GenerationException):
    """Raised for an unusable generation configuration."""


class IdentifierCollision(GenerationException):
    """Raised when an identifier is emitted twice or shadows its container."""

    def __init__(self, container: str, identifier: str, reason: str):
        self.container = container
        self.identifier = identifier
        super().__init__(
            f"Identifier collision in {container}: '{identifier}' {reason}",
            details=reason,
        )


class LocalNameCollision(GenerationException):
    """Raised when two term IRIs share a local name and collisions are fatal."""

    def __init__(self, key: str, iri: str, existing: str):
        self.key = key
        self.iri = iri
        self.existing = existing
        super().__init__(
            f"Conflicting keys found: uri={iri} key={key} existing={existing}"
        )


class ParseFailure(Exception):
    """Exception raised when the input document cannot be parsed."""

    def __init__(self, message: str, file_path: Optional[str] = None, details: Optional[str] = None):
        self.file_path = file_path
        self.details = details
        super().__init__(message)
