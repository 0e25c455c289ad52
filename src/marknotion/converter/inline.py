"""Resolve phrasing (inline) nodes into Notion rich_text runs.

Handles: text, strong, emphasis, delete, inlineCode, link, inlineMath and
images in inline position.  ``break`` produces no run; paragraphs are split
on it by the block translator.  Any other node is silently skipped.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from marknotion.converter.annotations import DEFAULT_CONTEXT, AnnotationContext
from marknotion.converter.limits import LIMITS
from marknotion.markdown import ast
from marknotion.notion.rich_text import equation_run, text_run
from marknotion.utils.text_split import split_string


def resolve_inlines(
    nodes: Iterable[ast.PhrasingContent],
    context: AnnotationContext = DEFAULT_CONTEXT,
) -> list[dict[str, Any]]:
    """Resolve a sequence of sibling phrasing nodes, concatenating their runs."""
    runs: list[dict[str, Any]] = []
    for node in nodes:
        runs.extend(resolve_inline(node, context))
    return runs


def resolve_inline(
    node: ast.PhrasingContent,
    context: AnnotationContext = DEFAULT_CONTEXT,
) -> list[dict[str, Any]]:
    """Convert one phrasing node to rich_text runs.

    Parameters
    ----------
    node:
        The phrasing node to resolve.
    context:
        Annotations and link inherited from enclosing formatting nodes.

    Returns
    -------
    list[dict]
        Runs in document order.  Only ``text`` nodes longer than the
        2000-character content limit produce more than one run.
    """
    if isinstance(node, ast.Text):
        return text_runs(node.value, context)

    if isinstance(node, ast.Strong):
        return resolve_inlines(node.children, context.derive(bold=True))

    if isinstance(node, ast.Emphasis):
        return resolve_inlines(node.children, context.derive(italic=True))

    if isinstance(node, ast.Delete):
        return resolve_inlines(node.children, context.derive(strikethrough=True))

    if isinstance(node, ast.Link):
        return resolve_inlines(node.children, context.derive(link=node.url))

    if isinstance(node, ast.InlineCode):
        code_context = context.derive(code=True)
        return [text_run(node.value, code_context.annotations(), code_context.link)]

    if isinstance(node, ast.InlineMath):
        return [equation_run(node.value, context.annotations())]

    if isinstance(node, ast.Image):
        # Images cannot live inside rich text; keep a textual trace of them
        return text_runs(node.title or node.url, context)

    return []


def text_runs(value: str, context: AnnotationContext = DEFAULT_CONTEXT) -> list[dict[str, Any]]:
    """Split *value* into runs of at most the content limit, all sharing *context*."""
    annotations = context.annotations()
    return [
        text_run(chunk, annotations, context.link)
        for chunk in split_string(value, LIMITS.text_content)
    ]
