"""
Shared data models for the vocabulary generator.

Usage:
    from vocab_builder.shared.models import GenerationConfig, Term, TermTable
"""

from .config import (
    CaseFormat,
    CollisionPolicy,
    GenerationConfig,
)
from .terms import (
    LocalizedText,
    Term,
    VocabularyInfo,
    CollisionRecord,
    TermTable,
)
from .result import GenerationResult

__all__ = [
    # Configuration
    "CaseFormat",
    "CollisionPolicy",
    "GenerationConfig",
    # Term table
    "LocalizedText",
    "Term",
    "VocabularyInfo",
    "CollisionRecord",
    "TermTable",
    # Results
    "GenerationResult",
]
