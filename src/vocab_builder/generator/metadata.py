"""
Metadata resolution with language negotiation.

For each candidate property in priority order, literal objects are
collected; a literal tagged with the preferred language wins, otherwise a
fallback literal of that property is used. The first property yielding any
literal decides.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from rdflib import RDFS, URIRef
from rdflib.namespace import DC, DCTERMS, SKOS
from rdflib.term import Literal
from tqdm import tqdm

from ..constants import DocumentationConfig
from ..rdf.triple_store import TripleStore
from ..shared.models import LocalizedText, Term, VocabularyInfo

logger = logging.getLogger(__name__)


LABEL_PROPERTIES: Tuple[URIRef, ...] = (
    SKOS.prefLabel,
    RDFS.label,
    DCTERMS.title,
    DC.title,
)
"""Label-like properties, most preferred first."""

COMMENT_PROPERTIES: Tuple[URIRef, ...] = (
    RDFS.comment,
    DCTERMS.description,
    SKOS.definition,
    DC.description,
)
"""Comment-like properties, most preferred first."""


def _fallback_order(literal: Literal) -> Tuple[int, str, str]:
    # Untagged first, then by (language, value) so reruns are stable
    return (0 if literal.language is None else 1, literal.language or "", str(literal))


def resolve_literal(
    store: TripleStore,
    subject,
    preferred_language: Optional[str],
    candidate_properties: Sequence[URIRef],
) -> Optional[Literal]:
    """
    Resolve the best literal for ``subject`` among ``candidate_properties``.

    Returns:
        The chosen literal, or None when no candidate property has one.
    """
    for prop in candidate_properties:
        literals = store.literals_of(subject, prop)
        if not literals:
            continue
        if preferred_language:
            wanted = preferred_language.lower()
            for literal in literals:
                if literal.language is not None and literal.language.lower() == wanted:
                    return literal
        return min(literals, key=_fallback_order)
    return None


def resolve_see_also(store: TripleStore, subject) -> Tuple[str, ...]:
    """IRI objects of rdfs:seeAlso, sorted; literals and blank nodes are skipped."""
    return tuple(sorted(str(value) for value in store.filter(subject, RDFS.seeAlso, None)
                        if isinstance(value, URIRef)))


class MetadataResolver:
    """Resolves labels, comments and see-also links for terms and the header."""

    def __init__(
        self,
        store: TripleStore,
        preferred_language: Optional[str] = DocumentationConfig.DEFAULT_LANGUAGE,
        label_properties: Sequence[URIRef] = LABEL_PROPERTIES,
        comment_properties: Sequence[URIRef] = COMMENT_PROPERTIES,
    ):
        self.store = store
        self.preferred_language = preferred_language
        self.label_properties = tuple(label_properties)
        self.comment_properties = tuple(comment_properties)

    def label(self, subject) -> Optional[LocalizedText]:
        return LocalizedText.from_literal(
            resolve_literal(self.store, subject, self.preferred_language, self.label_properties)
        )

    def comment(self, subject) -> Optional[LocalizedText]:
        return LocalizedText.from_literal(
            resolve_literal(self.store, subject, self.preferred_language, self.comment_properties)
        )

    def resolve_term(self, local_name: str, iri: str) -> Term:
        subject = URIRef(iri)
        return Term(
            local_name=local_name,
            iri=iri,
            label=self.label(subject),
            comment=self.comment(subject),
            see_also=resolve_see_also(self.store, subject),
        )

    def resolve_terms(self, iris: Dict[str, str], keys: List[str]) -> Dict[str, Term]:
        """Resolve every term, returning them in the order of ``keys``."""
        terms: Dict[str, Term] = {}
        for key in tqdm(
            keys,
            desc="Resolving metadata",
            unit="term",
            disable=len(keys) < DocumentationConfig.PROGRESS_THRESHOLD,
        ):
            terms[key] = self.resolve_term(key, iris[key])
        return terms

    def resolve_vocabulary(self, namespace: str, name: str) -> VocabularyInfo:
        """
        Header metadata, read from the namespace IRI itself and, failing
        that, from the namespace without its trailing '#'.
        """
        candidates = [URIRef(namespace)]
        if namespace.endswith('#') and len(namespace) > 1:
            candidates.append(URIRef(namespace[:-1]))

        title = description = None
        see_also: Tuple[str, ...] = ()
        for subject in candidates:
            title = title or self.label(subject)
            description = description or self.comment(subject)
            see_also = see_also or resolve_see_also(self.store, subject)

        return VocabularyInfo(
            namespace=namespace,
            name=name,
            title=title,
            description=description,
            see_also=see_also,
        )
