"""
Base command class.

This module contains the base class that all CLI commands inherit from,
plus the mapping from error kinds to process exit codes.
"""

import argparse
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from ..helpers import (
    load_config,
    get_default_config_path,
    setup_logging,
    print_header,
    print_footer,
)
from ....constants import ExitCode
from ....core.exceptions import (
    ConfigurationError,
    GenerationException,
    IdentifierCollision,
    LocalNameCollision,
    ParseFailure,
)
from ....shared.models import CollisionPolicy, GenerationConfig, GenerationResult


logger = logging.getLogger(__name__)


# ============================================================================
# Helper Utilities
# ============================================================================

def exit_code_for(error: BaseException) -> ExitCode:
    """Map an error raised during a run to the CLI exit code."""
    if isinstance(error, ConfigurationError):
        return ExitCode.CONFIG_ERROR
    if isinstance(error, (IdentifierCollision, LocalNameCollision)):
        return ExitCode.COLLISION_ERROR
    if isinstance(error, ParseFailure):
        return ExitCode.PARSE_ERROR
    if isinstance(error, FileNotFoundError):
        return ExitCode.FILE_NOT_FOUND
    if isinstance(error, PermissionError):
        return ExitCode.PERMISSION_DENIED
    return ExitCode.ERROR


def print_generation_summary(result: GenerationResult, heading: Optional[str] = None) -> None:
    """Print a consistent summary for a generation result."""
    if heading:
        print_header(heading)
    print(result.get_summary())
    if heading:
        print_footer()


# ============================================================================
# Base Command Class
# ============================================================================

class BaseCommand(ABC):
    """
    Base class for CLI commands.

    Provides configuration loading, logging setup and translation of CLI
    flags into a ``GenerationConfig``. Subclasses implement ``execute()``.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the command.

        Args:
            config_path: Path to configuration file. When omitted the default
                file is used if it exists.
        """
        self._explicit_config = config_path is not None
        self.config_path = config_path or get_default_config_path()
        self._config: Optional[Dict[str, Any]] = None

    @property
    def config(self) -> Dict[str, Any]:
        """
        Lazy-load configuration.

        Raises:
            FileNotFoundError: If an explicitly given config file is missing.
            ValueError: If the file is not a valid configuration.
        """
        if self._config is None:
            if self._explicit_config or Path(self.config_path).exists():
                self._config = load_config(self.config_path)
            else:
                logger.debug(f"No configuration file at {self.config_path}; using defaults")
                self._config = {}
        return self._config

    def setup_logging_from_config(self, verbose: bool = False) -> None:
        """Configure logging from the ``logging`` section; ``verbose`` forces DEBUG."""
        log_config = dict(self.config.get('logging', {}))
        if verbose:
            log_config['level'] = 'DEBUG'
        setup_logging(config=log_config)

    def generation_config(self, args: argparse.Namespace) -> GenerationConfig:
        """
        Build the run configuration: config file ``generation`` section,
        overridden by any flags given on the command line.

        Raises:
            ConfigurationError: If a value cannot be interpreted.
        """
        base = GenerationConfig.from_dict(self.config.get('generation', {}))
        aliases = getattr(args, 'namespace_aliases', None)
        overrides = {
            'vocabulary_name': getattr(args, 'vocabulary_name', None),
            'namespace': getattr(args, 'namespace', None),
            'namespace_aliases': tuple(aliases) if aliases else None,
            'preferred_language': getattr(args, 'preferred_language', None),
            'constant_case': getattr(args, 'constant_case', None),
            'string_case': getattr(args, 'string_case', None),
            'string_prefix': getattr(args, 'string_prefix', None),
            'string_suffix': getattr(args, 'string_suffix', None),
            'collision_policy': CollisionPolicy.FAIL if getattr(args, 'strict_collisions', False) else None,
            'package_name': getattr(args, 'package_name', None),
        }
        config = base.with_overrides(**overrides)
        logger.debug(f"Generation config: {config.to_dict()}")
        return config

    def prepare(self, args: argparse.Namespace) -> Optional[int]:
        """
        Set up logging and validate the configuration file.

        Returns:
            None when the command may proceed, otherwise the exit code.
        """
        try:
            self.setup_logging_from_config(verbose=getattr(args, 'verbose', False))
        except FileNotFoundError as e:
            print(f"✗ {e}")
            return ExitCode.FILE_NOT_FOUND
        except PermissionError as e:
            print(f"✗ Cannot read configuration: {e}")
            return ExitCode.PERMISSION_DENIED
        except ValueError as e:
            print(f"✗ Invalid configuration: {e}")
            return ExitCode.CONFIG_ERROR
        return None

    def report_failure(self, error: Exception) -> int:
        """Print a one-line failure message and return its exit code."""
        logger.debug("Command failed", exc_info=True)
        if isinstance(error, GenerationException) and error.details and error.details not in error.message:
            print(f"✗ {error.message} ({error.details})")
        else:
            print(f"✗ {error}")
        return exit_code_for(error)

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 for success, non-zero for error).
        """
        pass
