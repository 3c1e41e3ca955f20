"""
Java target: a non-instantiable final class of ``public static final String``
constants.
"""

from typing import List

from .common import (
    Emitter,
    RenderContext,
    RenderedConstant,
    escape_double_quoted,
    javadoc_constant_lines,
    javadoc_header_lines,
    render_doc_block,
)

RESERVED_WORDS = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch",
    "char", "class", "const", "continue", "default", "do", "double",
    "else", "enum", "extends", "final", "finally", "float", "for", "goto",
    "if", "implements", "import", "instanceof", "int", "interface", "long",
    "native", "new", "package", "private", "protected", "public", "return",
    "short", "static", "strictfp", "super", "switch", "synchronized",
    "this", "throw", "throws", "transient", "try", "void", "volatile",
    "while", "true", "false", "null", "var", "record", "yield", "sealed",
    "permits", "_",
})


def _field(indent: str, doc: List[str], identifier: str, value: str) -> List[str]:
    lines = [""]
    lines.extend(render_doc_block(doc, indent))
    lines.append(f"{indent}public static final String {identifier} = {value};")
    return lines


def _string_value(constant: RenderedConstant) -> str:
    return f'"{escape_double_quoted(constant.local_name)}"'


def _term_value(constant: RenderedConstant) -> str:
    if constant.in_namespace:
        return f"NAMESPACE + {_string_value(constant)}"
    return f'"{escape_double_quoted(constant.iri)}"'


def render(context: RenderContext) -> str:
    indent = context.indent
    lines: List[str] = []
    if context.package_name:
        lines.append(f"package {context.package_name};")
        lines.append("")

    lines.extend(render_doc_block(javadoc_header_lines(context)))
    lines.append(f"public final class {context.class_name} {{")

    lines.extend(_field(
        indent, [f"{{@code <{context.namespace}>}}"],
        "NAMESPACE", f'"{escape_double_quoted(context.namespace)}"',
    ))
    lines.extend(_field(
        indent, [f"{{@code {context.prefix}}}"],
        "PREFIX", f'"{escape_double_quoted(context.prefix)}"',
    ))

    for constant in context.string_constants:
        lines.extend(_field(indent, javadoc_constant_lines(constant), constant.identifier, _string_value(constant)))

    for constant in context.term_constants:
        lines.extend(_field(
            indent,
            javadoc_constant_lines(constant, link_key=True),
            constant.identifier,
            _term_value(constant),
        ))

    lines.append("")
    lines.append(f"{indent}private {context.class_name}() {{")
    lines.append(f"{indent}}}")
    lines.append("}")
    return "\n".join(lines) + "\n"


EMITTER = Emitter(
    target="java",
    display_name="Java",
    file_extensions=(".java",),
    reserved_words=RESERVED_WORDS,
    render=render,
)
