"""
RDF Parser Module

This module handles RDF document parsing with memory management and format
detection.

Components:
- MemoryManager: Pre-flight memory checks before parsing large files
- RDFGraphParser: Graph creation and parsing with format auto-detection
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

import psutil
from rdflib import Graph
from rdflib.util import guess_format

from ..constants import MemoryLimits, RDFFormats
from ..core.exceptions import ParseFailure

logger = logging.getLogger(__name__)


class MemoryManager:
    """
    Manage memory usage during RDF parsing to prevent out-of-memory crashes.

    Provides pre-flight memory checks before loading large vocabulary files
    to fail gracefully with helpful error messages instead of crashing.
    """

    MIN_AVAILABLE_MB = MemoryLimits.MIN_AVAILABLE_MEMORY_MB
    MAX_SAFE_FILE_MB = MemoryLimits.MAX_SAFE_FILE_MB
    MEMORY_MULTIPLIER = MemoryLimits.MEMORY_MULTIPLIER
    LOAD_FACTOR = MemoryLimits.LOAD_FACTOR

    @staticmethod
    def get_available_memory_mb() -> float:
        """Get available system memory in MB."""
        return psutil.virtual_memory().available / (1024 * 1024)

    @staticmethod
    def get_memory_usage_mb() -> float:
        """Get current process memory usage in MB."""
        return psutil.Process().memory_info().rss / (1024 * 1024)

    @classmethod
    def check_memory_available(cls, file_size_mb: float, force: bool = False) -> Tuple[bool, str]:
        """
        Check if enough memory is available to parse a file.

        Args:
            file_size_mb: Size of the file in MB.
            force: If True, skip safety checks and allow large files.

        Returns:
            Tuple of (can_proceed: bool, message: str)
        """
        estimated_usage_mb = file_size_mb * cls.MEMORY_MULTIPLIER

        if not force and file_size_mb > cls.MAX_SAFE_FILE_MB:
            return False, (
                f"File size ({file_size_mb:.1f}MB) exceeds safe limit ({cls.MAX_SAFE_FILE_MB}MB). "
                f"Estimated memory required: ~{estimated_usage_mb:.0f}MB. "
                f"To process anyway, use --force-memory."
            )

        available_mb = cls.get_available_memory_mb()

        if available_mb < cls.MIN_AVAILABLE_MB and not force:
            return False, (
                f"Insufficient free memory. "
                f"Available: {available_mb:.0f}MB, "
                f"Minimum required: {cls.MIN_AVAILABLE_MB}MB."
            )

        safe_threshold_mb = available_mb * cls.LOAD_FACTOR
        if estimated_usage_mb > safe_threshold_mb:
            if force:
                return True, (
                    f"WARNING: File may exceed safe memory limits. "
                    f"File: {file_size_mb:.1f}MB, "
                    f"Estimated usage: ~{estimated_usage_mb:.0f}MB, "
                    f"Safe threshold: {safe_threshold_mb:.0f}MB. "
                    f"Proceeding due to --force-memory."
                )
            return False, (
                f"Vocabulary may be too large for available memory. "
                f"File size: {file_size_mb:.1f}MB, "
                f"Estimated parsing memory: ~{estimated_usage_mb:.0f}MB, "
                f"Safe threshold: {safe_threshold_mb:.0f}MB "
                f"(Available: {available_mb:.0f}MB)."
            )

        return True, (
            f"Memory OK: File {file_size_mb:.1f}MB, "
            f"estimated usage ~{estimated_usage_mb:.0f}MB of {available_mb:.0f}MB available"
        )

    @classmethod
    def log_memory_status(cls, context: str = "") -> None:
        """Log current memory status for debugging."""
        prefix = f"[{context}] " if context else ""
        logger.debug(
            f"{prefix}Memory status: Process using {cls.get_memory_usage_mb():.0f}MB, "
            f"System available: {cls.get_available_memory_mb():.0f}MB"
        )


class RDFGraphParser:
    """
    Handles RDF parsing with memory management and format detection.

    Any parser error is reported as ``ParseFailure``; ``OSError`` raised while
    opening the file propagates unchanged.
    """

    @staticmethod
    def infer_format_from_path(path: Union[str, Path]) -> Optional[str]:
        """
        Guess the rdflib format token from a file extension.

        Returns:
            Format token (e.g. "turtle", "xml"), or None if unknown.
        """
        suffix = Path(path).suffix.lower()
        if suffix == '.json-ld':
            return 'json-ld'
        return guess_format(str(path))

    @staticmethod
    def _parse_into_graph(source: Path, rdf_format: str) -> Graph:
        graph = Graph()
        graph.parse(str(source), format=rdf_format)
        return graph

    @classmethod
    def _sniff_and_parse(cls, source: Path) -> Tuple[Graph, str]:
        """Try each known format in turn until one parses."""
        errors = []
        for candidate in RDFFormats.SNIFF_ORDER:
            try:
                return cls._parse_into_graph(source, candidate), candidate
            except OSError:
                raise
            except Exception as e:
                logger.debug(f"Not parseable as {candidate}: {e}")
                errors.append(f"{candidate}: {e}")
        raise ParseFailure(
            f"Could not detect the RDF format of {source}",
            file_path=str(source),
            details="; ".join(errors),
        )

    @classmethod
    def parse_file(
        cls,
        file_path: Union[str, Path],
        rdf_format: Optional[str] = None,
        force_large_file: bool = False,
    ) -> Tuple[Graph, str]:
        """
        Parse an RDF file into a graph with memory safety checks.

        Args:
            file_path: Path to the RDF document
            rdf_format: rdflib format token, or None / "auto" to detect
            force_large_file: If True, skip memory safety checks

        Returns:
            Tuple of (parsed Graph, format token used)

        Raises:
            FileNotFoundError: If file doesn't exist
            ParseFailure: If the document is malformed
            MemoryError: If insufficient memory is available
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        file_size_mb = path.stat().st_size / (1024 * 1024)
        logger.debug(f"File size: {file_size_mb:.2f} MB")

        can_proceed, memory_message = MemoryManager.check_memory_available(
            file_size_mb,
            force=force_large_file,
        )
        if not can_proceed:
            logger.error(f"Memory check failed: {memory_message}")
            raise MemoryError(memory_message)
        logger.debug(f"Memory check: {memory_message}")

        MemoryManager.log_memory_status("Before parsing")

        if rdf_format in (None, RDFFormats.AUTO):
            rdf_format = cls.infer_format_from_path(path)

        if rdf_format is None:
            logger.info(f"No format hint for {path.name}; sniffing content")
            graph, rdf_format = cls._sniff_and_parse(path)
        else:
            try:
                graph = cls._parse_into_graph(path, rdf_format)
            except OSError:
                raise
            except Exception as e:
                logger.error(f"Failed to parse {path} as {rdf_format}: {e}")
                raise ParseFailure(
                    f"Invalid RDF syntax in {path} ({rdf_format}): {e}",
                    file_path=str(path),
                    details=str(e),
                ) from e

        MemoryManager.log_memory_status("After parsing")

        triple_count = len(graph)
        if triple_count == 0:
            logger.warning(f"Parsed graph is empty - no triples found in {path}")
        logger.info(f"Successfully parsed {triple_count} triples from {path.name} ({rdf_format})")

        return graph, rdf_format

    @staticmethod
    def parse_content(content: str, rdf_format: str = "turtle") -> Graph:
        """
        Parse an in-memory RDF document.

        Raises:
            ParseFailure: If content is empty or malformed
        """
        if not content or not content.strip():
            raise ParseFailure("Empty RDF content provided")

        graph = Graph()
        try:
            graph.parse(data=content, format=rdf_format)
        except Exception as e:
            logger.error(f"Failed to parse RDF content: {e}")
            raise ParseFailure(f"Invalid RDF syntax ({rdf_format}): {e}", details=str(e)) from e

        logger.debug(f"Parsed {len(graph)} triples from in-memory content")
        return graph
