"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Full pipeline tests writing files
    pytest -m cli           # Command-line interface tests
    pytest -m security      # Path validation tests

Fixtures are centralized in tests/fixtures/ for reuse across all test modules.
"""

import os
import sys

import pytest

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

from fixtures import (
    EXAMPLE_TTL,
    LANGUAGE_TTL,
    CASE_COLLISION_TTL,
    ALIAS_TTL,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Tests exercising the full generation pipeline")
    config.addinivalue_line("markers", "cli: Command-line interface tests")
    config.addinivalue_line("markers", "security: Path validation tests (traversal, symlinks)")


# =============================================================================
# Triple Store Fixtures
# =============================================================================

@pytest.fixture
def example_store():
    """Store holding the example vocabulary (Person, Organization, name, knows)."""
    from vocab_builder.rdf import TripleStore
    return TripleStore.from_content(EXAMPLE_TTL)


@pytest.fixture
def language_store():
    """Store with ex:Foo labelled "Foo Bar"@en and "Fu Bar"@de."""
    from vocab_builder.rdf import TripleStore
    return TripleStore.from_content(LANGUAGE_TTL)


@pytest.fixture
def alias_store():
    """Store whose terms are split between an http and an https namespace."""
    from vocab_builder.rdf import TripleStore
    return TripleStore.from_content(ALIAS_TTL)


# =============================================================================
# File Fixtures
# =============================================================================

@pytest.fixture
def example_ttl_file(tmp_path):
    """The example vocabulary written to a temporary .ttl file."""
    ttl_file = tmp_path / "example.ttl"
    ttl_file.write_text(EXAMPLE_TTL, encoding="utf-8")
    return ttl_file


@pytest.fixture
def case_collision_ttl_file(tmp_path):
    """Vocabulary with ex:AB and ex:Ab."""
    ttl_file = tmp_path / "collision.ttl"
    ttl_file.write_text(CASE_COLLISION_TTL, encoding="utf-8")
    return ttl_file


# =============================================================================
# Utility Fixtures
# =============================================================================

@pytest.fixture
def input_validator():
    """Get InputValidator class for path validation tests."""
    from vocab_builder.core.validators import InputValidator
    return InputValidator
