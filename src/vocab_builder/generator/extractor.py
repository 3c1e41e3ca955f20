"""
Term extraction.

Partitions the document's IRI subjects into (local name -> term IRI) pairs
under the vocabulary namespace. The first IRI seen for a local name wins;
later ones are collisions, logged once each and discarded unless the
``fail`` policy is configured.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from rdflib import URIRef
from tqdm import tqdm

from ..constants import DocumentationConfig
from ..core.exceptions import LocalNameCollision
from ..rdf.triple_store import TripleStore
from ..shared.models import CollisionPolicy, CollisionRecord

logger = logging.getLogger(__name__)


def sort_keys(keys) -> List[str]:
    """Canonical emission order: case-insensitive ascending, ties by raw key."""
    return sorted(keys, key=lambda key: (key.lower(), key))


def split_local_name(iri: str, prefixes: Sequence[str]) -> Optional[str]:
    """
    Strip the first matching prefix from ``iri``.

    Returns:
        The non-empty remainder, or None if no prefix matches.
    """
    for prefix in prefixes:
        if iri.startswith(prefix) and len(iri) > len(prefix):
            return iri[len(prefix):]
    return None


@dataclass
class ExtractedTerms:
    """Deduplicated mapping plus its canonical key order."""
    namespace: str
    iris: Dict[str, str] = field(default_factory=dict)
    collisions: List[CollisionRecord] = field(default_factory=list)

    @property
    def sorted_keys(self) -> List[str]:
        return sort_keys(self.iris)

    def __len__(self) -> int:
        return len(self.iris)


def extract_terms(
    store: TripleStore,
    namespace: str,
    aliases: Sequence[str] = (),
    policy: CollisionPolicy = CollisionPolicy.WARN,
) -> ExtractedTerms:
    """
    Collect the terms declared under ``namespace``.

    Subjects under the primary namespace are scanned before those under an
    alias, so primary terms win collisions with alias terms.

    Raises:
        LocalNameCollision: On the first collision when ``policy`` is FAIL.
    """
    result = ExtractedTerms(namespace=namespace)
    claimed = set()
    subjects = [subject for subject in store.subjects() if isinstance(subject, URIRef)]
    logger.debug(f"Scanning {len(subjects)} IRI subjects under {namespace}")

    for prefixes in ([namespace], list(aliases)):
        if not prefixes:
            continue
        for subject in tqdm(
            subjects,
            desc="Extracting terms",
            unit="subject",
            disable=len(subjects) < DocumentationConfig.PROGRESS_THRESHOLD,
        ):
            iri = str(subject)
            if iri in claimed:
                continue
            key = split_local_name(iri, prefixes)
            if key is None:
                continue
            claimed.add(iri)
            existing = result.iris.get(key)
            if existing is None:
                result.iris[key] = iri
                continue
            if policy == CollisionPolicy.FAIL:
                raise LocalNameCollision(key, iri, existing)
            logger.warning(f"Conflicting keys found: uri={iri} key={key} existing={existing}")
            result.collisions.append(CollisionRecord(key=key, iri=iri, existing=existing))

    logger.info(
        f"Extracted {len(result.iris)} terms under {namespace}"
        + (f" ({len(result.collisions)} collisions discarded)" if result.collisions else "")
    )
    return result
