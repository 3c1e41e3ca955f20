"""
TypeScript target: the JavaScript layout with exported, ``as const`` typing.
"""

from typing import List

from .common import Emitter, RenderContext, escape_single_quoted, javadoc_header_lines, render_doc_block
from .javascript import RESERVED_WORDS as JAVASCRIPT_RESERVED_WORDS, render_object_body

RESERVED_WORDS = JAVASCRIPT_RESERVED_WORDS | frozenset({
    "any", "as", "boolean", "declare", "keyof", "module", "namespace",
    "never", "number", "readonly", "string", "symbol", "type", "unknown",
})


def render(context: RenderContext) -> str:
    lines: List[str] = [f"export const NAMESPACE = '{escape_single_quoted(context.namespace)}';", ""]
    lines.extend(render_doc_block(javadoc_header_lines(context)))
    lines.append(f"export const {context.class_name} = {{")
    lines.extend(render_object_body(context))
    lines.append("} as const;")
    lines.append("")
    lines.append(f"export type {context.class_name}Term = (typeof {context.class_name})[keyof typeof {context.class_name}];")
    lines.append("")
    lines.append(f"export default {context.class_name};")
    return "\n".join(lines) + "\n"


EMITTER = Emitter(
    target="typescript",
    display_name="TypeScript",
    file_extensions=(".ts",),
    reserved_words=RESERVED_WORDS,
    render=render,
)
