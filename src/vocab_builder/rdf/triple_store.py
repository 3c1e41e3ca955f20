"""
Triple store adapter over an rdflib ``Graph``.

The generator only talks to the document through this query contract:
    subjects()                       all distinct subjects, in store order
    objects_of(s, p, language=None)  objects, optionally only matching literals
    filter(s, p, o)                  object values of matching triples
    contains(s, p, o)                membership test
    is_instance_of(s, class_iri)     rdf:type check
Any argument of ``filter``/``contains`` may be None as a wildcard.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Set, Union

from rdflib import Graph, RDF, URIRef
from rdflib.term import Literal, Node

from .rdf_parser import RDFGraphParser

logger = logging.getLogger(__name__)

TermLike = Union[Node, str, None]


def _as_node(value: TermLike) -> Optional[Node]:
    """Plain strings are taken to be IRIs."""
    if value is None or isinstance(value, Node):
        return value
    return URIRef(value)


class TripleStore:
    """Read-only view over one parsed vocabulary document."""

    def __init__(self, graph: Graph):
        self._graph = graph

    @classmethod
    def from_file(
        cls,
        file_path: Union[str, Path],
        rdf_format: Optional[str] = None,
        force_large_file: bool = False,
    ) -> "TripleStore":
        """Parse a file (format token or auto-detect) into a store."""
        graph, _ = RDFGraphParser.parse_file(file_path, rdf_format, force_large_file=force_large_file)
        return cls(graph)

    @classmethod
    def from_content(cls, content: str, rdf_format: str = "turtle") -> "TripleStore":
        return cls(RDFGraphParser.parse_content(content, rdf_format))

    @property
    def graph(self) -> Graph:
        return self._graph

    def __len__(self) -> int:
        return len(self._graph)

    def subjects(self) -> Iterator[Node]:
        """Yield each distinct subject once, in the store's native order."""
        seen: Set[Node] = set()
        for subject in self._graph.subjects():
            if subject not in seen:
                seen.add(subject)
                yield subject

    def objects_of(self, subject: TermLike, predicate: TermLike, language: Optional[str] = None) -> List[Node]:
        """
        Objects of (subject, predicate).

        When ``language`` is given only literals carrying that tag are
        returned (tags compare case-insensitively).
        """
        objects = list(self._graph.objects(_as_node(subject), _as_node(predicate)))
        if language is None:
            return objects
        wanted = language.lower()
        return [
            obj for obj in objects
            if isinstance(obj, Literal) and obj.language is not None and obj.language.lower() == wanted
        ]

    def literals_of(self, subject: TermLike, predicate: TermLike) -> List[Literal]:
        """Only the literal objects of (subject, predicate)."""
        return [obj for obj in self.objects_of(subject, predicate) if isinstance(obj, Literal)]

    def filter(self, subject: TermLike = None, predicate: TermLike = None, obj: TermLike = None) -> Set[Node]:
        """Object values of every triple matching the pattern."""
        pattern = (_as_node(subject), _as_node(predicate), _as_node(obj))
        return {o for _, _, o in self._graph.triples(pattern)}

    def contains(self, subject: TermLike = None, predicate: TermLike = None, obj: TermLike = None) -> bool:
        pattern = (_as_node(subject), _as_node(predicate), _as_node(obj))
        return pattern in self._graph

    def is_instance_of(self, subject: TermLike, class_iri: TermLike) -> bool:
        return self.contains(subject, RDF.type, class_iri)

    def subjects_of_type(self, class_iri: TermLike) -> List[Node]:
        """Distinct subjects typed with ``class_iri``, in store order."""
        found: List[Node] = []
        for subject in self._graph.subjects(RDF.type, _as_node(class_iri)):
            if subject not in found:
                found.append(subject)
        return found
