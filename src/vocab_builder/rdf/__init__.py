"""
RDF package - document parsing and the triple store adapter.

Components:
- rdf_parser: parsing with memory checks and format auto-detection
- triple_store: query contract used by the generator
"""

from .rdf_parser import MemoryManager, RDFGraphParser
from .triple_store import TripleStore

__all__ = [
    'MemoryManager',
    'RDFGraphParser',
    'TripleStore',
]
