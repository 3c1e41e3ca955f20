"""
Language-neutral rendering step shared by every target.

``build_render_context`` computes every identifier of a run (string block
first, then the term block) before any text is produced, so an
``IdentifierCollision`` aborts the run before a single line is rendered.
Target modules then turn the resulting ``RenderContext`` into source text.
"""

import logging
import textwrap
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List, Optional, Sequence, Tuple

from ..constants import DocumentationConfig
from ..generator.identifiers import DEFAULT_META_FIELDS, IdentifierFormatter
from ..shared.models import GenerationConfig, LocalizedText, TermTable

logger = logging.getLogger(__name__)

_SENTENCE_END = (".", "!", "?")


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------

def normalize_whitespace(text: str) -> str:
    return " ".join(text.split())


def wrap_text(text: str, width: int = DocumentationConfig.WRAP_WIDTH) -> List[str]:
    """Normalize whitespace and wrap at ``width`` without splitting words."""
    normalized = normalize_whitespace(text)
    if not normalized:
        return []
    return textwrap.wrap(normalized, width=width, break_long_words=False, break_on_hyphens=False)


def as_sentence(lines: List[str]) -> List[str]:
    """Terminate the last line with a period unless it already ends a sentence."""
    if lines and not lines[-1].endswith(_SENTENCE_END):
        lines = lines[:-1] + [lines[-1] + "."]
    return lines


def escape_double_quoted(value: str) -> str:
    """Body of a double-quoted string literal (Python, Java)."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def escape_single_quoted(value: str) -> str:
    """Body of a single-quoted string literal (JavaScript, TypeScript)."""
    return (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def escape_block_comment(text: str) -> str:
    """Keep text from terminating a ``/* ... */`` comment."""
    return text.replace("*/", "*&#47;")


def escape_docstring(text: str) -> str:
    """Keep text from terminating a triple-quoted Python docstring."""
    return text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


def render_doc_block(lines: Sequence[str], indent: str = "") -> List[str]:
    """Render ``/** ... */`` with one `` * `` line per entry; empty entries become `` *``."""
    out = [f"{indent}/**"]
    for line in lines:
        out.append(f"{indent} * {escape_block_comment(line)}" if line else f"{indent} *")
    out.append(f"{indent} */")
    return out


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderedConstant:
    """
    One generated constant with its documentation.

    Attributes:
        identifier: Formatted, collision-checked identifier.
        local_name: Raw local name; the string value for the string block and
            the suffix appended to the namespace for the term block.
        iri: Full term IRI.
        label: Whitespace-normalized label, if any.
        comment_lines: Comment wrapped at the configured width.
        see_also: Sorted see-also IRIs of the term.
        in_namespace: Whether ``NAMESPACE + local_name`` reproduces ``iri``;
            False for terms found under an alias prefix, which are emitted
            with their full IRI instead.
    """
    identifier: str
    local_name: str
    iri: str
    label: Optional[str] = None
    comment_lines: Tuple[str, ...] = ()
    see_also: Tuple[str, ...] = ()
    in_namespace: bool = True


@dataclass(frozen=True)
class RenderContext:
    """Everything a target needs to render one artifact; no store access."""
    class_name: str
    name: str
    namespace: str
    prefix: str
    title_lines: Tuple[str, ...] = ()
    description_lines: Tuple[str, ...] = ()
    see_also: Tuple[str, ...] = ()
    string_constants: Tuple[RenderedConstant, ...] = ()
    term_constants: Tuple[RenderedConstant, ...] = ()
    identifiers: Tuple[str, ...] = ()
    package_name: Optional[str] = None
    indent: str = DocumentationConfig.INDENT

    @property
    def has_string_block(self) -> bool:
        return bool(self.string_constants)


@dataclass(frozen=True)
class Emitter:
    """
    A registered target language.

    Attributes:
        target: Tag used on the command line and in the registry.
        display_name: Human-readable name.
        file_extensions: Output extensions mapped to this target; the first
            is the default.
        reserved_words: Identifiers the target language forbids.
        render: Turns a ``RenderContext`` into source text.
        meta_fields: Names the artifact itself defines.
    """
    target: str
    display_name: str
    file_extensions: Tuple[str, ...]
    reserved_words: FrozenSet[str]
    render: Callable[[RenderContext], str]
    meta_fields: Tuple[str, ...] = DEFAULT_META_FIELDS

    @property
    def default_extension(self) -> str:
        return self.file_extensions[0]

    def emit(self, class_name: str, config: GenerationConfig, table: TermTable) -> str:
        """
        Render ``table`` as source text for this target.

        Raises:
            IdentifierCollision: If two constants format to the same identifier.
        """
        return self.render(build_render_context(class_name, config, table, self))


def _text_lines(text: Optional[LocalizedText], width: int) -> Tuple[str, ...]:
    if text is None:
        return ()
    return tuple(wrap_text(text.value, width))


def build_render_context(
    class_name: str,
    config: GenerationConfig,
    table: TermTable,
    emitter: Emitter,
) -> RenderContext:
    """
    Format and collision-check every identifier, then collect documentation.

    ``class_name`` is cleaned like any other identifier, so a name taken
    from a file stem such as ``foaf-terms`` becomes ``foaf_terms``.

    Raises:
        IdentifierCollision: On a duplicate identifier or one equal to
            the class name.
    """
    formatter = IdentifierFormatter(emitter.reserved_words, emitter.meta_fields)
    width = config.wrap_width
    vocabulary = table.vocabulary

    container = formatter.clean(class_name)
    if container != class_name:
        logger.warning(f"Class name '{class_name}' is not a valid {emitter.display_name} identifier; using '{container}'")

    def constant(identifier: str, key: str) -> RenderedConstant:
        term = table.terms[key]
        return RenderedConstant(
            identifier=identifier,
            local_name=key,
            iri=term.iri,
            label=normalize_whitespace(term.label.value) if term.label else None,
            comment_lines=_text_lines(term.comment, width),
            see_also=term.see_also,
            in_namespace=term.iri == vocabulary.namespace + key,
        )

    string_constants: List[RenderedConstant] = []
    if config.string_constants_enabled:
        for key in table.keys:
            identifier = formatter.format(key, config.string_case, config.string_prefix, config.string_suffix)
            string_constants.append(constant(formatter.check_field(container, identifier), key))

    term_constants: List[RenderedConstant] = []
    for key in table.keys:
        identifier = formatter.format(key, config.constant_case)
        term_constants.append(constant(formatter.check_field(container, identifier), key))

    logger.debug(f"{emitter.target}: {len(formatter.emitted)} identifiers for {container}")
    return RenderContext(
        class_name=container,
        name=vocabulary.name,
        namespace=vocabulary.namespace,
        prefix=vocabulary.short_prefix,
        title_lines=tuple(as_sentence(list(_text_lines(vocabulary.title, width)))),
        description_lines=tuple(as_sentence(list(_text_lines(vocabulary.description, width)))),
        see_also=vocabulary.see_also,
        string_constants=tuple(string_constants),
        term_constants=tuple(term_constants),
        identifiers=tuple(formatter.emitted),
        package_name=config.package_name,
    )


def javadoc_header_lines(context: RenderContext) -> List[str]:
    """Header documentation in the javadoc/JSDoc layout."""
    lines: List[str] = []
    if context.title_lines:
        lines.extend(context.title_lines)
        lines.append("<p>")
    if context.description_lines:
        lines.extend(context.description_lines)
        lines.append("<p>")
    lines.append(f"Namespace {context.name}.")
    lines.append(f"Prefix: {{@code <{context.namespace}>}}")
    if context.see_also:
        lines.append("")
        lines.extend(f'@see <a href="{iri}">{iri}</a>' for iri in context.see_also)
    return lines


def javadoc_constant_lines(constant: RenderedConstant, link_key: bool = False) -> List[str]:
    """Per-constant documentation in the javadoc/JSDoc layout."""
    lines: List[str] = []
    if constant.label:
        lines.append(constant.label)
        lines.append("<p>")
    lines.append(f"{{@code {constant.iri}}}.")
    if constant.comment_lines:
        lines.append("<p>")
        lines.extend(constant.comment_lines)
    links = [f'@see <a href="{iri}">{iri}</a>' for iri in constant.see_also]
    if link_key:
        links.insert(0, f'@see <a href="{constant.iri}">{constant.local_name}</a>')
    if links:
        lines.append("")
        lines.extend(links)
    return lines
