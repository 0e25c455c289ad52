"""Dedicated unit tests for inline.py and annotations.py.

Tests the phrasing-node resolver directly on hand-built trees, rather than
through the Markdown parser.
"""

import pytest

from marknotion.converter.annotations import DEFAULT_CONTEXT, AnnotationContext
from marknotion.converter.inline import resolve_inline, resolve_inlines, text_runs
from marknotion.markdown import ast


def _contents(runs):
    return [r["text"]["content"] for r in runs]


# =========================================================================
# AnnotationContext
# =========================================================================

class TestAnnotationContext:
    """Copy-on-derive formatting state."""

    def test_default_annotations(self):
        assert DEFAULT_CONTEXT.annotations() == {
            "bold": False,
            "italic": False,
            "strikethrough": False,
            "underline": False,
            "code": False,
            "color": "default",
        }
        assert DEFAULT_CONTEXT.link is None

    def test_derive_returns_new_object(self):
        derived = DEFAULT_CONTEXT.derive(bold=True)
        assert derived is not DEFAULT_CONTEXT
        assert derived.bold is True
        assert DEFAULT_CONTEXT.bold is False

    def test_derive_keeps_existing_flags(self):
        ctx = AnnotationContext(italic=True, link="https://a.example")
        derived = ctx.derive(code=True)
        assert derived.italic is True
        assert derived.code is True
        assert derived.link == "https://a.example"

    def test_context_is_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONTEXT.bold = True  # type: ignore[misc]


# =========================================================================
# Text
# =========================================================================

class TestResolveText:
    """Plain text nodes."""

    def test_single_run(self):
        runs = resolve_inline(ast.text("hello"))
        assert len(runs) == 1
        assert runs[0]["type"] == "text"
        assert runs[0]["text"] == {"content": "hello"}
        assert runs[0]["annotations"] == DEFAULT_CONTEXT.annotations()

    def test_no_link_key_without_link(self):
        runs = resolve_inline(ast.text("plain"))
        assert "link" not in runs[0]["text"]

    def test_long_text_is_chunked(self):
        runs = resolve_inline(ast.text("a" * 4500))
        assert [len(c) for c in _contents(runs)] == [2000, 2000, 500]

    def test_exactly_limit_is_one_run(self):
        runs = resolve_inline(ast.text("b" * 2000))
        assert len(runs) == 1

    def test_empty_text_produces_no_runs(self):
        assert resolve_inline(ast.text("")) == []

    def test_text_runs_helper_applies_context(self):
        ctx = AnnotationContext(bold=True, link="https://x.example")
        runs = text_runs("abc", ctx)
        assert runs[0]["annotations"]["bold"] is True
        assert runs[0]["text"]["link"] == {"url": "https://x.example"}


# =========================================================================
# Formatting containers
# =========================================================================

class TestResolveFormatting:
    """strong / emphasis / delete / inlineCode."""

    def test_strong(self):
        runs = resolve_inline(ast.strong(ast.text("b")))
        assert runs[0]["annotations"]["bold"] is True
        assert runs[0]["annotations"]["italic"] is False

    def test_emphasis(self):
        runs = resolve_inline(ast.emphasis(ast.text("i")))
        assert runs[0]["annotations"]["italic"] is True

    def test_delete(self):
        runs = resolve_inline(ast.strikethrough(ast.text("s")))
        assert runs[0]["annotations"]["strikethrough"] is True

    def test_inline_code(self):
        runs = resolve_inline(ast.inline_code("x = 1"))
        assert len(runs) == 1
        assert runs[0]["text"]["content"] == "x = 1"
        assert runs[0]["annotations"]["code"] is True

    def test_nested_union(self):
        node = ast.strong(ast.emphasis(ast.strikethrough(ast.text("all"))))
        ann = resolve_inline(node)[0]["annotations"]
        assert ann["bold"] and ann["italic"] and ann["strikethrough"]
        assert ann["code"] is False

    def test_inline_code_inherits_enclosing_flags(self):
        runs = resolve_inline(ast.strong(ast.inline_code("x")))
        assert runs[0]["annotations"]["bold"] is True
        assert runs[0]["annotations"]["code"] is True

    def test_siblings_do_not_leak(self):
        runs = resolve_inlines([
            ast.strong(ast.text("bold")),
            ast.text("plain"),
            ast.emphasis(ast.text("it")),
        ])
        assert [r["annotations"]["bold"] for r in runs] == [True, False, False]
        assert [r["annotations"]["italic"] for r in runs] == [False, False, True]

    def test_mixed_children_order(self):
        runs = resolve_inline(ast.strong(ast.text("a"), ast.emphasis(ast.text("b")), ast.text("c")))
        assert _contents(runs) == ["a", "b", "c"]
        assert [r["annotations"]["italic"] for r in runs] == [False, True, False]
        assert all(r["annotations"]["bold"] for r in runs)


# =========================================================================
# Links
# =========================================================================

class TestResolveLink:
    """Links propagate their URL to every run below them."""

    def test_link_url_on_run(self):
        runs = resolve_inline(ast.link("https://example.com", ast.text("site")))
        assert runs[0]["text"] == {"content": "site", "link": {"url": "https://example.com"}}

    def test_link_url_on_every_nested_run(self):
        node = ast.link(
            "https://example.com",
            ast.text("a "),
            ast.strong(ast.text("b")),
            ast.inline_code("c"),
        )
        runs = resolve_inline(node)
        assert len(runs) == 3
        for run in runs:
            assert run["text"]["link"] == {"url": "https://example.com"}

    def test_italic_link(self):
        runs = resolve_inline(ast.link("https://example.com", ast.emphasis(ast.text("url"))))
        assert runs[0]["annotations"]["italic"] is True
        assert runs[0]["text"]["link"]["url"] == "https://example.com"

    def test_empty_link_produces_no_runs(self):
        assert resolve_inline(ast.link("https://example.com")) == []


# =========================================================================
# Math, images and unsupported nodes
# =========================================================================

class TestResolveOther:
    """Equations, inline images and dropped nodes."""

    def test_inline_math(self):
        runs = resolve_inline(ast.inline_math("E = mc^2"))
        assert runs == [{
            "type": "equation",
            "annotations": DEFAULT_CONTEXT.annotations(),
            "equation": {"expression": "E = mc^2"},
        }]

    def test_inline_math_carries_annotations(self):
        runs = resolve_inline(ast.strong(ast.inline_math("x")))
        assert runs[0]["annotations"]["bold"] is True

    def test_image_renders_title(self):
        runs = resolve_inline(ast.image("https://example.com/a.png", title="A title"))
        assert _contents(runs) == ["A title"]

    def test_image_without_title_renders_url(self):
        runs = resolve_inline(ast.image("https://example.com/a.png"))
        assert _contents(runs) == ["https://example.com/a.png"]

    def test_break_produces_nothing(self):
        assert resolve_inline(ast.line_break()) == []

    def test_inline_html_dropped(self):
        assert resolve_inline(ast.InlineHtml(value="<b>")) == []

    @pytest.mark.parametrize("node", [object(), None, "raw string"])
    def test_unknown_nodes_dropped(self, node):
        assert resolve_inline(node) == []
