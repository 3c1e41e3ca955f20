"""
Python target: a class whose attributes are the vocabulary constants.

    class Foaf:
        ...
        NAMESPACE = "http://xmlns.com/foaf/0.1/"

        # foaf
        PREFIX = "foaf"

        # Agent
        # http://xmlns.com/foaf/0.1/Agent.
        # <a href="http://xmlns.com/foaf/0.1/Agent">Agent</a>
        Agent = NAMESPACE + "Agent"

Attributes refer to ``NAMESPACE`` directly since the class body is
evaluated top to bottom in its own scope.
"""

import keyword
from typing import List

from .common import Emitter, RenderContext, RenderedConstant, escape_docstring, escape_double_quoted

RESERVED_WORDS = frozenset(keyword.kwlist)


def _comment_lines(constant: RenderedConstant, indent: str, link_key: bool) -> List[str]:
    lines: List[str] = []
    if constant.label:
        lines.append(f"{indent}# {constant.label}")
    lines.append(f"{indent}# {constant.iri}.")
    lines.extend(f"{indent}# {line}" for line in constant.comment_lines)
    if link_key:
        lines.append(f'{indent}# <a href="{constant.iri}">{constant.local_name}</a>')
    lines.extend(f"{indent}# See also: {iri}" for iri in constant.see_also)
    return lines


def _term_value(constant: RenderedConstant) -> str:
    if constant.in_namespace:
        return f'NAMESPACE + "{escape_double_quoted(constant.local_name)}"'
    return f'"{escape_double_quoted(constant.iri)}"'


def _docstring(context: RenderContext) -> List[str]:
    indent = context.indent
    body: List[str] = []
    if context.title_lines:
        body.extend(context.title_lines)
        body.append("")
    if context.description_lines:
        body.extend(context.description_lines)
        body.append("")
    body.append(f"Namespace {context.name}.")
    body.append(f"Prefix: <{context.namespace}>")
    if context.see_also:
        body.append("")
        body.extend(f"See also: <{iri}>" for iri in context.see_also)

    lines = [f'{indent}"""']
    lines.extend(f"{indent}{escape_docstring(line)}" if line else "" for line in body)
    lines.append(f'{indent}"""')
    return lines


def render(context: RenderContext) -> str:
    indent = context.indent
    lines: List[str] = [f"class {context.class_name}:"]
    lines.extend(_docstring(context))
    lines.append("")

    lines.append(f"{indent}# {context.namespace}")
    lines.append(f'{indent}NAMESPACE = "{escape_double_quoted(context.namespace)}"')
    lines.append("")
    lines.append(f"{indent}# {context.prefix}")
    lines.append(f'{indent}PREFIX = "{escape_double_quoted(context.prefix)}"')

    for constant in context.string_constants:
        lines.append("")
        lines.extend(_comment_lines(constant, indent, link_key=False))
        lines.append(f'{indent}{constant.identifier} = "{escape_double_quoted(constant.local_name)}"')

    for constant in context.term_constants:
        lines.append("")
        lines.extend(_comment_lines(constant, indent, link_key=True))
        lines.append(f"{indent}{constant.identifier} = {_term_value(constant)}")

    return "\n".join(lines) + "\n"


EMITTER = Emitter(
    target="python",
    display_name="Python",
    file_extensions=(".py",),
    reserved_words=RESERVED_WORDS,
    render=render,
)
