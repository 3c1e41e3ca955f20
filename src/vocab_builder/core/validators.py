"""
Path validation for every file the generator reads or writes.

    from vocab_builder.core.validators import InputValidator

    source = InputValidator.validate_input_path("foaf.rdf")
    target = InputValidator.validate_output_file_path("FOAF.py")

Paths with ``..`` components and symlinks are rejected before anything is
opened.
"""

import logging
import os
from pathlib import Path
from typing import Any, Iterable, Optional

from ..constants import FileExtensions

logger = logging.getLogger(__name__)


def _normalize_extensions(extensions: Iterable[str]) -> list:
    return [ext.lower() if ext.startswith('.') else f'.{ext.lower()}' for ext in extensions]


class InputValidator:
    """
    Centralized path checks for the generator's entry points.

    Every method returns a resolved ``Path`` or raises ``TypeError``,
    ``ValueError``, ``FileNotFoundError`` or ``PermissionError``.
    """

    RDF_EXTENSIONS = list(FileExtensions.RDF_EXTENSIONS)
    CONFIG_EXTENSIONS = list(FileExtensions.CONFIG_EXTENSIONS)

    @staticmethod
    def _as_text(path: Any) -> str:
        if isinstance(path, os.PathLike):
            path = os.fspath(path)
        if not isinstance(path, str):
            raise TypeError(f"File path must be str or path-like, got {type(path).__name__}")
        text = path.strip()
        if not text:
            raise ValueError("File path cannot be empty")
        return text

    @staticmethod
    def _reject_traversal(text: str) -> None:
        """
        Raises:
            ValueError: If any component of the path is ``..``.
        """
        parts = text.replace('\\', '/').split('/')
        if '..' in parts or '..' in Path(text).parts:
            raise ValueError(
                f"Path traversal detected in path: {text}. "
                f"Components equal to '..' are not allowed."
            )

    @staticmethod
    def _reject_symlink(candidate: Path, strict: bool) -> None:
        if not candidate.is_symlink():
            return
        message = f"Symlink detected: {candidate}. Pass the real file path instead."
        if strict:
            raise ValueError(message)
        logger.warning(message)

    @staticmethod
    def _require_extension(resolved: Path, allowed: Optional[Iterable[str]]) -> None:
        if not allowed:
            return
        extensions = _normalize_extensions(allowed)
        if resolved.suffix.lower() not in extensions:
            raise ValueError(
                f"Invalid file extension: '{resolved.suffix}'. "
                f"Expected one of: {', '.join(extensions)}"
            )

    @classmethod
    def _resolve(cls, path: Any, reject_symlinks: bool) -> Path:
        text = cls._as_text(path)
        cls._reject_traversal(text)
        # Must run before resolve(), which follows the link
        cls._reject_symlink(Path(text), strict=reject_symlinks)
        return Path(text).resolve()

    @classmethod
    def validate_file_path(
        cls,
        path: Any,
        allowed_extensions: Optional[Iterable[str]] = None,
        reject_symlinks: bool = True,
    ) -> Path:
        """
        Validate an existing, readable file.

        Args:
            path: ``str`` or path-like.
            allowed_extensions: Accepted suffixes; None accepts any.
            reject_symlinks: Raise on symlinks instead of only warning.
        """
        resolved = cls._resolve(path, reject_symlinks)
        if not resolved.exists():
            raise FileNotFoundError(f"File not found: {resolved}")
        if not resolved.is_file():
            raise ValueError(f"Path is not a file: {resolved}")
        cls._require_extension(resolved, allowed_extensions)
        if not os.access(resolved, os.R_OK):
            raise PermissionError(f"File is not readable: {resolved}")
        return resolved

    @classmethod
    def validate_input_path(cls, path: Any, check_extension: bool = False) -> Path:
        """
        Validate a vocabulary document.

        The extension is only enforced on request; vocabularies are often
        published under unusual suffixes and the parser sniffs the content.
        """
        return cls.validate_file_path(path, cls.RDF_EXTENSIONS if check_extension else None)

    @classmethod
    def validate_config_file_path(cls, path: Any) -> Path:
        return cls.validate_file_path(path, cls.CONFIG_EXTENSIONS)

    @classmethod
    def validate_output_file_path(
        cls,
        path: Any,
        allowed_extensions: Optional[Iterable[str]] = None,
        reject_symlinks: bool = True,
    ) -> Path:
        """
        Validate a file about to be written; it need not exist yet.

        Raises:
            ValueError: Empty path, traversal, bad extension or missing parent directory.
            PermissionError: If the directory or existing file is not writable.
        """
        resolved = cls._resolve(path, reject_symlinks)
        cls._require_extension(resolved, allowed_extensions)

        directory = resolved.parent
        if not directory.is_dir():
            raise ValueError(f"Parent directory does not exist: {directory}")
        if not os.access(directory, os.W_OK):
            raise PermissionError(f"Cannot write to directory: {directory}")
        if resolved.exists() and not os.access(resolved, os.W_OK):
            raise PermissionError(f"File exists but is not writable: {resolved}")
        return resolved
