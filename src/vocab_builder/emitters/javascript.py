"""
JavaScript target: an ES module whose default export is an object literal.

    const NAMESPACE = 'http://xmlns.com/foaf/0.1/';

    /** ... */
    const Foaf = {
        NAMESPACE: 'http://xmlns.com/foaf/0.1/',
        PREFIX: 'foaf',
        Agent: NAMESPACE + 'Agent'
    };

    export default Foaf;
"""

from typing import List, Tuple

from .common import (
    Emitter,
    RenderContext,
    RenderedConstant,
    escape_single_quoted,
    javadoc_constant_lines,
    javadoc_header_lines,
    render_doc_block,
)

# ECMAScript reserved words plus the strict-mode and literal names
RESERVED_WORDS = frozenset({
    "await", "break", "case", "catch", "class", "const", "continue",
    "debugger", "default", "delete", "do", "else", "enum", "export",
    "extends", "false", "finally", "for", "function", "if", "implements",
    "import", "in", "instanceof", "interface", "let", "new", "null",
    "package", "private", "protected", "public", "return", "static",
    "super", "switch", "this", "throw", "true", "try", "typeof", "var",
    "void", "while", "with", "yield", "arguments", "eval", "undefined",
    "NaN", "Infinity",
})


def term_value(constant: RenderedConstant) -> str:
    if constant.in_namespace:
        return f"NAMESPACE + '{escape_single_quoted(constant.local_name)}'"
    return f"'{escape_single_quoted(constant.iri)}'"


def object_entries(context: RenderContext) -> List[Tuple[List[str], str]]:
    """
    (documentation lines, ``key: value``) pairs of the object literal, in
    emission order. Shared with the TypeScript target.
    """
    q = escape_single_quoted
    entries: List[Tuple[List[str], str]] = [
        ([], f"NAMESPACE: '{q(context.namespace)}'"),
        ([], f"PREFIX: '{q(context.prefix)}'"),
    ]
    for constant in context.string_constants:
        entries.append((javadoc_constant_lines(constant), f"{constant.identifier}: '{q(constant.local_name)}'"))
    for constant in context.term_constants:
        entries.append((
            javadoc_constant_lines(constant, link_key=True),
            f"{constant.identifier}: {term_value(constant)}",
        ))
    return entries


def render_object_body(context: RenderContext) -> List[str]:
    """Object literal members separated by blank lines; no comma after the last."""
    indent = context.indent
    entries = object_entries(context)
    lines: List[str] = []
    for index, (doc, member) in enumerate(entries):
        lines.append("")
        if doc:
            lines.extend(render_doc_block(doc, indent))
        separator = "," if index < len(entries) - 1 else ""
        lines.append(f"{indent}{member}{separator}")
    return lines


def render(context: RenderContext) -> str:
    lines: List[str] = [f"const NAMESPACE = '{escape_single_quoted(context.namespace)}';", ""]
    lines.extend(render_doc_block(javadoc_header_lines(context)))
    lines.append(f"const {context.class_name} = {{")
    lines.extend(render_object_body(context))
    lines.append("};")
    lines.append("")
    lines.append(f"export default {context.class_name};")
    return "\n".join(lines) + "\n"


EMITTER = Emitter(
    target="javascript",
    display_name="JavaScript (ES module)",
    file_extensions=(".js", ".mjs"),
    reserved_words=RESERVED_WORDS,
    render=render,
)
