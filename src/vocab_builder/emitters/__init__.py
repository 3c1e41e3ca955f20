"""
Backend emitters - one rendering strategy per target language.

Components:
- common: identifier assignment, documentation wrapping, escaping
- registry: target tags, registration and lookup
- python, javascript, typescript, java: the built-in targets
"""

from .common import Emitter, RenderContext, RenderedConstant, build_render_context
from .registry import (
    Target,
    get_emitter,
    infer_target_from_path,
    list_emitters,
    register_emitter,
)

__all__ = [
    'Emitter',
    'RenderContext',
    'RenderedConstant',
    'build_render_context',
    'Target',
    'get_emitter',
    'infer_target_from_path',
    'list_emitters',
    'register_emitter',
]
