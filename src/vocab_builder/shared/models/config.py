"""
Generation configuration record.

A ``GenerationConfig`` is built once per run (from a config file section,
CLI flags, or keyword arguments) and is never mutated afterwards; use
``with_overrides`` to derive a new one.
"""

import logging
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from ...constants import DocumentationConfig
from ...core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class CaseFormat(str, Enum):
    """Naming conventions applied to local names when building identifiers."""
    NONE = "none"
    UPPER = "upper"
    LOWER = "lower"
    UPPER_UNDERSCORE = "upper_underscore"
    LOWER_UNDERSCORE = "lower_underscore"
    UPPER_CAMEL = "upper_camel"
    LOWER_CAMEL = "lower_camel"

    def __str__(self) -> str:
        return self.value


class CollisionPolicy(str, Enum):
    """What to do when two term IRIs reduce to the same local name."""
    WARN = "warn"
    FAIL = "fail"

    def __str__(self) -> str:
        return self.value


# Alternative spellings accepted in config files
_KEY_ALIASES: Dict[str, str] = {
    "name": "vocabulary_name",
    "prefix": "namespace",
    "language": "preferred_language",
    "string_property_prefix": "string_prefix",
    "string_property_suffix": "string_suffix",
    "aliases": "namespace_aliases",
    "package": "package_name",
}


def _parse_enum(enum_cls, value: Any, key: str):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower().replace("-", "_"))
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(f"Invalid value for {key}: {value!r}. Expected one of: {choices}")


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value if str(value).strip() else None


@dataclass(frozen=True)
class GenerationConfig:
    """
    Immutable settings for one generation run.

    Attributes:
        vocabulary_name: Display name; defaults to the class name.
        namespace: Namespace prefix; inferred from the document when None.
        preferred_language: Language tag preferred for labels and comments.
        constant_case: Case convention for term constants (None = unmodified).
        string_case: Case convention for the string-literal constants.
        string_prefix: Prefix prepended to string-literal identifiers.
        string_suffix: Suffix appended to string-literal identifiers.
        collision_policy: Local-name collision handling (warn or fail).
        namespace_aliases: Extra prefixes scanned after ``namespace``.
        infer_namespace: Whether a missing namespace may be detected.
        wrap_width: Column at which documentation text is wrapped.
        package_name: Package declaration for targets that need one (Java).
    """
    vocabulary_name: Optional[str] = None
    namespace: Optional[str] = None
    preferred_language: Optional[str] = DocumentationConfig.DEFAULT_LANGUAGE
    constant_case: Optional[CaseFormat] = None
    string_case: Optional[CaseFormat] = None
    string_prefix: Optional[str] = None
    string_suffix: Optional[str] = None
    collision_policy: CollisionPolicy = CollisionPolicy.WARN
    namespace_aliases: Tuple[str, ...] = field(default_factory=tuple)
    infer_namespace: bool = True
    wrap_width: int = DocumentationConfig.WRAP_WIDTH
    package_name: Optional[str] = None

    def __post_init__(self) -> None:
        # Normalize once so every consumer sees canonical values
        object.__setattr__(self, "constant_case", _parse_enum(CaseFormat, self.constant_case, "constant_case"))
        object.__setattr__(self, "string_case", _parse_enum(CaseFormat, self.string_case, "string_case"))
        object.__setattr__(
            self,
            "collision_policy",
            _parse_enum(CollisionPolicy, self.collision_policy, "collision_policy") or CollisionPolicy.WARN,
        )
        if isinstance(self.namespace_aliases, str):
            object.__setattr__(self, "namespace_aliases", (self.namespace_aliases,))
        else:
            object.__setattr__(self, "namespace_aliases", tuple(self.namespace_aliases or ()))
        if any(not isinstance(alias, str) or not alias.strip() for alias in self.namespace_aliases):
            raise ConfigurationError("namespace_aliases must contain non-blank IRI strings")
        if isinstance(self.wrap_width, bool) or not isinstance(self.wrap_width, int) or self.wrap_width <= 0:
            raise ConfigurationError(f"wrap_width must be a positive integer, got {self.wrap_width!r}")

    @property
    def string_constants_enabled(self) -> bool:
        """True when any of the string-constant knobs is set."""
        return (
            self.string_case is not None
            or _blank_to_none(self.string_prefix) is not None
            or _blank_to_none(self.string_suffix) is not None
        )

    def resolved_name(self, class_name: str) -> str:
        """Vocabulary name, falling back to the generated class name."""
        return _blank_to_none(self.vocabulary_name) or class_name

    def with_overrides(self, **changes: Any) -> "GenerationConfig":
        """Return a copy with the given non-None fields replaced."""
        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied) if applied else self

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "GenerationConfig":
        """
        Build a config from a dictionary (e.g. the ``generation`` section of
        a JSON config file).

        Raises:
            ConfigurationError: If a value cannot be interpreted.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for raw_key, value in (data or {}).items():
            key = _KEY_ALIASES.get(raw_key, raw_key)
            if key not in known:
                logger.warning(f"Ignoring unknown generation option: {raw_key}")
                continue
            kwargs[key] = value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view, used for debug logging and reports."""
        return {
            "vocabulary_name": self.vocabulary_name,
            "namespace": self.namespace,
            "preferred_language": self.preferred_language,
            "constant_case": str(self.constant_case) if self.constant_case else None,
            "string_case": str(self.string_case) if self.string_case else None,
            "string_prefix": self.string_prefix,
            "string_suffix": self.string_suffix,
            "collision_policy": str(self.collision_policy),
            "namespace_aliases": list(self.namespace_aliases),
            "infer_namespace": self.infer_namespace,
            "wrap_width": self.wrap_width,
            "package_name": self.package_name,
        }
