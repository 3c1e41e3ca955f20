"""
Target enumeration and emitter registry.

Each target language is a small rendering strategy registered by tag;
``get_emitter`` is the single dispatch point used by the pipeline and CLI.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, List, Union

from . import java, javascript, python, typescript
from .common import Emitter

logger = logging.getLogger(__name__)


class Target(str, Enum):
    """Built-in target languages."""
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    JAVA = "java"

    def __str__(self) -> str:
        return self.value


_EMITTERS: Dict[str, Emitter] = {}


def register_emitter(emitter: Emitter, replace: bool = False) -> None:
    """
    Register an emitter under its target tag.

    Raises:
        ValueError: If the tag is taken and ``replace`` is False.
    """
    if emitter.target in _EMITTERS and not replace:
        raise ValueError(f"Emitter already registered for target: {emitter.target}")
    _EMITTERS[emitter.target] = emitter
    logger.debug(f"Registered emitter: {emitter.target} ({', '.join(emitter.file_extensions)})")


def get_emitter(target: Union[Target, str]) -> Emitter:
    """
    Return the emitter registered for ``target``.

    Raises:
        ValueError: If no emitter is registered for the target.
    """
    tag = str(target).strip().lower()
    emitter = _EMITTERS.get(tag)
    if emitter is None:
        raise ValueError(
            f"No emitter registered for target: {target}. "
            f"Available targets: {', '.join(sorted(_EMITTERS))}"
        )
    return emitter


def list_emitters() -> List[Emitter]:
    """Registered emitters sorted by tag."""
    return [_EMITTERS[tag] for tag in sorted(_EMITTERS)]


def infer_target_from_path(path: Union[str, Path]) -> Emitter:
    """
    Pick the emitter registered for the output file's extension.

    Raises:
        ValueError: If no emitter claims the extension.
    """
    ext = Path(path).suffix.lower()
    for emitter in list_emitters():
        if ext in emitter.file_extensions:
            return emitter
    raise ValueError(
        f"Cannot infer target from extension '{ext}'. "
        f"Use --target to specify explicitly."
    )


def _register_defaults() -> None:
    for module in (python, javascript, typescript, java):
        register_emitter(module.EMITTER, replace=True)


# Auto-register on module load
_register_defaults()
