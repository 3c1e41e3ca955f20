"""
Centralized test fixtures for the vocabulary generator test suite.

Usage:
    from fixtures import EXAMPLE_TTL, CASE_COLLISION_TTL

Or use the pytest fixtures in conftest.py which import from here.
"""

from .ttl_fixtures import (
    EXAMPLE_NAMESPACE,
    EXAMPLE_TTL,
    EXAMPLE_KEYS,
    LANGUAGE_TTL,
    CASE_COLLISION_TTL,
    ALIAS_TTL,
    SLASH_ONTOLOGY_TTL,
    HASHLESS_ONTOLOGY_TTL,
    TWO_ONTOLOGIES_TTL,
    UNDECLARED_TTL,
    BLANK_NODE_TTL,
    EXAMPLE_RDFXML,
    MALFORMED_TTL,
    generate_large_ttl,
)

__all__ = [
    "EXAMPLE_NAMESPACE",
    "EXAMPLE_TTL",
    "EXAMPLE_KEYS",
    "LANGUAGE_TTL",
    "CASE_COLLISION_TTL",
    "ALIAS_TTL",
    "SLASH_ONTOLOGY_TTL",
    "HASHLESS_ONTOLOGY_TTL",
    "TWO_ONTOLOGIES_TTL",
    "UNDECLARED_TTL",
    "BLANK_NODE_TTL",
    "EXAMPLE_RDFXML",
    "MALFORMED_TTL",
    "generate_large_ttl",
]
