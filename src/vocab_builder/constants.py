"""
Centralized configuration constants for the RDF vocabulary constant generator.

This module provides a single source of truth for all configuration constants,
default values, and limits used throughout the application.
"""

from enum import IntEnum
from typing import Final

# ============================================================================
# Exit Codes
# ============================================================================

class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    Following Unix conventions:
    - 0: Success
    - 1: General error
    - 2+: Specific error categories
    """
    SUCCESS = 0
    ERROR = 1
    PARSE_ERROR = 2
    CONFIG_ERROR = 3
    COLLISION_ERROR = 4
    FILE_NOT_FOUND = 5
    PERMISSION_DENIED = 6


# ============================================================================
# Memory Management
# ============================================================================

class MemoryLimits:
    """Memory management constants."""

    MAX_SAFE_FILE_MB: Final[int] = 500
    """Default maximum file size without explicit override (MB)."""

    MEMORY_MULTIPLIER: Final[float] = 3.5
    """RDFlib typically uses ~3-4x file size in memory."""

    MIN_AVAILABLE_MEMORY_MB: Final[int] = 256
    """Minimum available memory required before parsing (MB)."""

    LOAD_FACTOR: Final[float] = 0.7
    """Share of available memory treated as the safe threshold."""


# ============================================================================
# Generated Documentation
# ============================================================================

class DocumentationConfig:
    """Layout constants for generated source files."""

    WRAP_WIDTH: Final[int] = 70
    """Column at which titles, descriptions and comments are wrapped."""

    INDENT: Final[str] = "    "
    """One indentation level in generated code."""

    DEFAULT_LANGUAGE: Final[str] = "en"
    """Preferred language tag for labels and comments."""

    PROGRESS_THRESHOLD: Final[int] = 500
    """Progress bars are only shown for inputs larger than this."""


# ============================================================================
# File Extensions
# ============================================================================

class FileExtensions:
    """Supported file extensions."""

    RDF_EXTENSIONS: Final[tuple] = (
        '.ttl',
        '.turtle',
        '.rdf',
        '.owl',
        '.xml',
        '.n3',
        '.nt',
        '.nq',
        '.nquads',
        '.trig',
        '.trix',
        '.jsonld',
        '.json-ld',
    )
    """Valid RDF input file extensions."""

    CONFIG_EXTENSIONS: Final[tuple] = ('.json',)
    """Valid configuration file extensions."""


# ============================================================================
# RDF Formats
# ============================================================================

class RDFFormats:
    """rdflib parser format tokens accepted on the command line."""

    AUTO: Final[str] = "auto"
    """Detect the format from the file extension, then by sniffing."""

    SUPPORTED: Final[tuple[str, ...]] = (
        "auto",
        "turtle",
        "xml",
        "n3",
        "nt",
        "nquads",
        "trig",
        "trix",
        "json-ld",
    )

    SNIFF_ORDER: Final[tuple[str, ...]] = ("turtle", "xml", "json-ld")
    """Formats tried in order when the extension gives no hint."""


# ============================================================================
# Logging
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    """Default logging level."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log format string."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Default date format for logs."""

    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    """Human-readable formatter style."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """ISO-8601 timestamp format for structured logs."""

    SUPPORTED_FORMATS: Final[tuple[str, ...]] = ("text", "json")
    """Supported formatter styles."""

    MAX_LOG_FILE_MB: Final[int] = 10
    """Maximum log file size before rotation (MB)."""

    LOG_BACKUP_COUNT: Final[int] = 5
    """Number of backup log files to keep."""

    ROTATION_ENABLED: Final[bool] = True
    """Enable log rotation by default when a file handler is configured."""

    DEFAULT_LOG_FILENAME: Final[str] = "vocab_builder.log"
    """File name used when a log directory is configured without a name."""
