"""
Generator package - from triple store to language-neutral term table.

Components:
- namespace: namespace prefix resolution and inference
- extractor: local-name extraction with collision handling
- metadata: label/comment resolution with language negotiation
- identifiers: case conversion and identifier collision checks
- pipeline: VocabularyGenerator composing the steps with an emitter
  (import from ``vocab_builder.generator.pipeline``; it depends on emitters)
"""

from .namespace import detect_namespace, detect_vocabulary_name, resolve_namespace
from .extractor import ExtractedTerms, extract_terms, sort_keys, split_local_name
from .metadata import COMMENT_PROPERTIES, LABEL_PROPERTIES, MetadataResolver, resolve_literal
from .identifiers import IdentifierFormatter, format_case, split_words

__all__ = [
    'detect_namespace',
    'detect_vocabulary_name',
    'resolve_namespace',
    'ExtractedTerms',
    'extract_terms',
    'sort_keys',
    'split_local_name',
    'COMMENT_PROPERTIES',
    'LABEL_PROPERTIES',
    'MetadataResolver',
    'resolve_literal',
    'IdentifierFormatter',
    'format_case',
    'split_words',
]
