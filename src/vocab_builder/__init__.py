"""
RDF vocabulary constant generator.

Reads a vocabulary document and emits a source file with one named constant
per vocabulary term, documented with the term's label and comment.

Usage:
    from vocab_builder import GenerationConfig, VocabularyGenerator

    generator = VocabularyGenerator(GenerationConfig(constant_case="upper_underscore"))
    generator.generate_file("foaf.rdf", "FOAF.py")
"""

from .core.exceptions import (
    GenerationException,
    ConfigurationError,
    IdentifierCollision,
    LocalNameCollision,
    ParseFailure,
)
from .shared.models import CaseFormat, CollisionPolicy, GenerationConfig, GenerationResult, TermTable
from .rdf.triple_store import TripleStore
from .emitters import Target, get_emitter, list_emitters, register_emitter
from .generator.pipeline import VocabularyGenerator

__version__ = "1.0.0"

__all__ = [
    "GenerationException",
    "ConfigurationError",
    "IdentifierCollision",
    "LocalNameCollision",
    "ParseFailure",
    "CaseFormat",
    "CollisionPolicy",
    "GenerationConfig",
    "GenerationResult",
    "TermTable",
    "TripleStore",
    "Target",
    "get_emitter",
    "list_emitters",
    "register_emitter",
    "VocabularyGenerator",
]
