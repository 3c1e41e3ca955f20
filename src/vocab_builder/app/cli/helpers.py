"""
CLI helper utilities.

Shared by every command:
- ``load_config``: JSON configuration file with ``generation`` and ``logging`` sections
- ``setup_logging``: root logger from the ``logging`` section
- ``print_header`` / ``print_footer``: console framing
"""

import json
import logging
import os
import sys
import tempfile
from dataclasses import dataclass
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ...constants import LoggingConfig
from ...core.validators import InputValidator

CONFIG_SECTIONS = ('generation', 'logging')

# Attributes every LogRecord carries; anything else came in through extra=
_STANDARD_RECORD_FIELDS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LoggingConfig.JSON_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        extra = {
            key: value for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_FIELDS and not key.startswith("_")
        }
        if extra:
            payload["extra"] = extra
        return json.dumps(payload, ensure_ascii=False, default=str)


@dataclass(frozen=True)
class LogSettings:
    """Normalized ``logging`` section of the configuration file."""
    level: int = logging.INFO
    file: Optional[str] = None
    structured: bool = False
    pattern: str = LoggingConfig.LOG_FORMAT
    date_format: str = LoggingConfig.DATE_FORMAT
    rotate: bool = LoggingConfig.ROTATION_ENABLED
    max_bytes: int = LoggingConfig.MAX_LOG_FILE_MB * 1024 * 1024
    backup_count: int = LoggingConfig.LOG_BACKUP_COUNT
    console: bool = True

    @classmethod
    def from_config(cls, section: Optional[Mapping[str, Any]], include_console: bool = True) -> "LogSettings":
        section = section or {}
        rotation = section.get('rotation') if isinstance(section.get('rotation'), dict) else {}
        level_name = str(section.get('level') or LoggingConfig.DEFAULT_LOG_LEVEL).upper()
        style = str(section.get('format') or LoggingConfig.DEFAULT_FORMAT_STYLE).lower()
        if style not in LoggingConfig.SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported logging format: '{style}'. "
                f"Expected one of: {', '.join(LoggingConfig.SUPPORTED_FORMATS)}"
            )
        return cls(
            level=getattr(logging, level_name, logging.INFO),
            file=section.get('file') or section.get('log_file') or None,
            structured=bool(section.get('structured')) or style == 'json',
            pattern=section.get('pattern') or LoggingConfig.LOG_FORMAT,
            date_format=section.get('date_format') or LoggingConfig.DATE_FORMAT,
            rotate=bool(rotation.get('enabled', LoggingConfig.ROTATION_ENABLED)),
            max_bytes=_positive_int(rotation.get('max_mb'), LoggingConfig.MAX_LOG_FILE_MB) * 1024 * 1024,
            backup_count=_positive_int(rotation.get('backup_count'), LoggingConfig.LOG_BACKUP_COUNT),
            console=include_console,
        )

    def formatter(self) -> logging.Formatter:
        if self.structured:
            return JSONFormatter()
        return logging.Formatter(fmt=self.pattern, datefmt=self.date_format)


_MANAGED_HANDLERS: List[logging.Handler] = []
_LOGGING_SIGNATURE: Optional[LogSettings] = None
_ACTIVE_LOG_FILE: Optional[str] = None


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _clear_managed_handlers() -> None:
    """Detach and close the handlers installed by ``setup_logging``."""
    global _MANAGED_HANDLERS
    root_logger = logging.getLogger()
    for handler in _MANAGED_HANDLERS:
        root_logger.removeHandler(handler)
        handler.close()
    _MANAGED_HANDLERS = []


def _open_log_file(settings: LogSettings) -> Optional[logging.Handler]:
    """
    Open the configured log file, falling back to the temp directory and
    then the home directory. Returns None when every location fails.
    """
    requested = settings.file
    filename = os.path.basename(requested) or LoggingConfig.DEFAULT_LOG_FILENAME
    candidates = [
        requested,
        os.path.join(tempfile.gettempdir(), filename),
        os.path.join(Path.home(), filename),
    ]
    for candidate in candidates:
        try:
            directory = os.path.dirname(candidate)
            if directory:
                os.makedirs(directory, exist_ok=True)
            if settings.rotate:
                handler: logging.Handler = RotatingFileHandler(
                    candidate,
                    maxBytes=settings.max_bytes,
                    backupCount=settings.backup_count,
                    encoding='utf-8',
                )
            else:
                handler = logging.FileHandler(candidate, encoding='utf-8')
        except OSError as exc:
            print(f"  Could not create log at {candidate}: {exc}")
            continue
        if candidate != requested:
            print(f"Note: Using fallback log file: {candidate}")
        return handler

    print(f"Warning: Could not write log file {requested} or its fallbacks; logging to console only")
    return None


def setup_logging(
    level: str = LoggingConfig.DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
    include_console: bool = True,
) -> Optional[str]:
    """
    Configure the root logger.

    Args:
        level: Level used when ``config`` names none.
        log_file: Log file taking precedence over ``config['file']``.
        config: The ``logging`` section of the configuration file.
        include_console: Whether to log to stdout as well.

    Returns:
        Path of the log file in use, or None for console-only logging.
    """
    global _LOGGING_SIGNATURE, _ACTIVE_LOG_FILE

    section = dict(config or {})
    section.setdefault('level', level)
    if log_file is not None:
        section['file'] = log_file
    settings = LogSettings.from_config(section, include_console=include_console)

    # Repeated calls with identical settings keep the existing handlers
    if settings == _LOGGING_SIGNATURE and _MANAGED_HANDLERS:
        return _ACTIVE_LOG_FILE

    formatter = settings.formatter()
    handlers: List[logging.Handler] = []
    active_file = None

    if settings.file:
        file_handler = _open_log_file(settings)
        if file_handler is not None:
            handlers.append(file_handler)
            active_file = file_handler.baseFilename

    if settings.console or not handlers:
        handlers.append(logging.StreamHandler(sys.stdout))

    _clear_managed_handlers()
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.level)
    logging.captureWarnings(True)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _MANAGED_HANDLERS.append(handler)

    _LOGGING_SIGNATURE = settings
    _ACTIVE_LOG_FILE = active_file
    if active_file:
        logging.getLogger(__name__).info(f"Logging to: {active_file}")
    return active_file


def get_default_config_path() -> str:
    """``vocab_builder.json`` in the current working directory."""
    return str(Path.cwd() / "vocab_builder.json")


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Read a JSON configuration file after path validation.

    Raises:
        FileNotFoundError: If the file does not exist.
        PermissionError: If the file cannot be read.
        ValueError: On a bad path, invalid JSON, or a malformed section.
    """
    if not config_path:
        raise ValueError("config_path cannot be empty")

    try:
        path = InputValidator.validate_config_file_path(config_path)
    except FileNotFoundError:
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Create vocab_builder.json in the working directory or pass --config"
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}")
    except UnicodeDecodeError as e:
        raise ValueError(f"File encoding error in {path}: {e}")

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(data).__name__}")
    for section in CONFIG_SECTIONS:
        if not isinstance(data.get(section, {}), dict):
            raise ValueError(f"Configuration section '{section}' must be a JSON object")
    return data


def print_header(title: str, width: int = 60) -> None:
    print("\n" + "=" * width)
    print(title)
    print("=" * width)


def print_footer(width: int = 60) -> None:
    print("=" * width + "\n")
