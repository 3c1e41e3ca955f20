"""
Namespace resolution.

An explicit namespace always wins. Otherwise, when inference is allowed, the
namespace is taken from ``vann:preferredNamespaceUri`` or from the single
``owl:Ontology`` declared in the document.
"""

import logging
from typing import List, Optional

from rdflib import OWL, URIRef
from rdflib.namespace import VANN
from rdflib.term import Literal

from ..core.exceptions import ConfigurationError
from ..rdf.triple_store import TripleStore

logger = logging.getLogger(__name__)

NO_PREFIX_MESSAGE = "could not detect prefix, please set explicitly"


def _ontology_namespace(ontology: URIRef) -> str:
    iri = str(ontology)
    if iri.endswith(('#', '/')):
        return iri
    return iri + '#'


def detect_namespace(store: TripleStore) -> Optional[str]:
    """
    Infer the namespace prefix from the document.

    Returns:
        The detected prefix, or None if the document is ambiguous.
    """
    preferred = sorted({
        str(value) for value in store.filter(None, VANN.preferredNamespaceUri, None)
        if isinstance(value, (Literal, URIRef)) and str(value).strip()
    })
    if len(preferred) == 1:
        logger.debug(f"Namespace from vann:preferredNamespaceUri: {preferred[0]}")
        return preferred[0]
    if len(preferred) > 1:
        logger.warning(f"Multiple vann:preferredNamespaceUri values found: {', '.join(preferred)}")
        return None

    ontologies: List[URIRef] = [
        subject for subject in store.subjects_of_type(OWL.Ontology)
        if isinstance(subject, URIRef)
    ]
    if len(ontologies) == 1:
        namespace = _ontology_namespace(ontologies[0])
        logger.debug(f"Namespace from owl:Ontology {ontologies[0]}: {namespace}")
        return namespace
    if len(ontologies) > 1:
        logger.warning(f"Found {len(ontologies)} owl:Ontology declarations; cannot pick a namespace")
    return None


def detect_vocabulary_name(store: TripleStore) -> Optional[str]:
    """Short name from ``vann:preferredNamespacePrefix``, if declared once."""
    names = sorted({
        str(value).strip() for value in store.filter(None, VANN.preferredNamespacePrefix, None)
        if str(value).strip()
    })
    return names[0] if len(names) == 1 else None


def resolve_namespace(
    explicit: Optional[str],
    store: Optional[TripleStore] = None,
    infer: bool = True,
) -> str:
    """
    Return a non-blank namespace prefix.

    Args:
        explicit: Namespace given by the caller, if any.
        store: Document to infer from when ``explicit`` is blank.
        infer: Whether inference is allowed at all.

    Raises:
        ConfigurationError: If no usable namespace is available.
    """
    if explicit is not None and explicit.strip():
        logger.debug(f"prefix: {explicit}")
        return explicit

    if infer and store is not None:
        detected = detect_namespace(store)
        if detected:
            logger.info(f"Detected namespace prefix: {detected}")
            return detected

    raise ConfigurationError(NO_PREFIX_MESSAGE)
