"""
Language-neutral term table produced by extraction and consumed by emitters.

Emitters only ever see these records; they never query the triple store.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from rdflib.term import Literal


@dataclass(frozen=True)
class LocalizedText:
    """A resolved literal value with its optional language tag."""
    value: str
    language: Optional[str] = None

    @classmethod
    def from_literal(cls, literal: Optional[Literal]) -> Optional["LocalizedText"]:
        if literal is None:
            return None
        return cls(value=str(literal), language=literal.language)

    def normalized(self) -> str:
        """Value with all whitespace runs collapsed to single spaces."""
        return " ".join(self.value.split())


@dataclass(frozen=True)
class Term:
    """A vocabulary term destined to become one generated constant."""
    local_name: str
    iri: str
    label: Optional[LocalizedText] = None
    comment: Optional[LocalizedText] = None
    see_also: Tuple[str, ...] = ()


@dataclass(frozen=True)
class VocabularyInfo:
    """Header metadata for the generated artifact."""
    namespace: str
    name: str
    title: Optional[LocalizedText] = None
    description: Optional[LocalizedText] = None
    see_also: Tuple[str, ...] = ()

    @property
    def short_prefix(self) -> str:
        """Lower-cased vocabulary name used for the PREFIX constant."""
        return self.name.lower()


@dataclass(frozen=True)
class CollisionRecord:
    """A term IRI discarded because its local name was already taken."""
    key: str
    iri: str
    existing: str


@dataclass
class TermTable:
    """
    Result of term extraction and metadata resolution.

    Attributes:
        vocabulary: Header metadata.
        terms: Terms keyed by local name, in canonical emission order.
        collisions: Local-name collisions resolved first-write-wins.
    """
    vocabulary: VocabularyInfo
    terms: Dict[str, Term] = field(default_factory=dict)
    collisions: List[CollisionRecord] = field(default_factory=list)

    @property
    def keys(self) -> List[str]:
        return list(self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms.values())

    def get(self, key: str) -> Optional[Term]:
        return self.terms.get(key)

    def get_summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            f"Vocabulary: {self.vocabulary.name}",
            f"  Namespace: {self.vocabulary.namespace}",
            f"  Terms: {len(self.terms)}",
            f"  Labelled: {sum(1 for term in self if term.label is not None)}",
            f"  Commented: {sum(1 for term in self if term.comment is not None)}",
            f"  Local-name collisions: {len(self.collisions)}",
        ]
        return "\n".join(lines)
