#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/renderers/html.py
"""HTML rendering for table of contents lists.

Produces an HTML fragment (no ``<html>`` wrapper) suitable for a navigation
sidebar or for splicing in place of a ToC directive.

"""

from __future__ import annotations

from html import escape as _html_escape

from sitetoc.ast.nodes import (
    ActiveLink,
    Code,
    Document,
    Emphasis,
    Heading,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strong,
    Text,
)
from sitetoc.ast.visitors import NodeVisitor
from sitetoc.exceptions import RenderingError
from sitetoc.options import HtmlRendererOptions
from sitetoc.renderers.base import BaseRenderer, InlineContentMixin


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from sitetoc.ast import Link, List, ListItem, Paragraph, Text
        >>> toc = List(ordered=False, items=[
        ...     ListItem(children=[Paragraph(content=[Link(url="a.html", content=[Text("A")])])])
        ... ])
        >>> print(HtmlRenderer().render_to_string(toc))
        <ul>
        <li><a href="a.html">A</a></li>
        </ul>

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []
        self._tight_stack: list[bool] = []

    def render_to_string(self, node: Node) -> str:
        """Render a node to an HTML fragment.

        Parameters
        ----------
        node : Node
            Node to render

        Returns
        -------
        str
            HTML fragment, without a trailing newline

        Raises
        ------
        RenderingError
            If ``node`` is not an AST node

        """
        if not isinstance(node, Node):
            raise RenderingError(f"Cannot render {type(node).__name__} as HTML", node_type=type(node).__name__)

        self._output = []
        self._tight_stack = []
        node.accept(self)
        return "".join(self._output).rstrip("\n")

    def _escape(self, text: str) -> str:
        return escape_html(text, enabled=self.options.escape_html)

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for child in node.children:
            child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<h{node.level}>{content}</h{node.level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        Paragraphs directly inside items of a tight list render without
        ``<p>`` tags.
        """
        content = self._render_inline_content(node.content)
        if self._tight_stack and self._tight_stack[-1]:
            self._output.append(content)
        else:
            self._output.append(f"<p>{content}</p>\n")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Parameters
        ----------
        node : List
            List to render

        """
        tag = "ol" if node.ordered else "ul"
        start_attr = f' start="{node.start}"' if node.ordered and node.start != 1 else ""

        self._output.append(f"<{tag}{start_attr}>\n")
        self._tight_stack.append(node.tight)
        for item in node.items:
            item.accept(self)
        self._tight_stack.pop()
        self._output.append(f"</{tag}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        Nested lists start on their own line after the item's link.
        """
        self._output.append("<li>")
        for child in node.children:
            if isinstance(child, List):
                self._output.append("\n")
            child.accept(self)
        self._output.append("</li>\n")

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(self._escape(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<em>{content}</em>")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<strong>{content}</strong>")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        self._output.append(f"<code>{self._escape(node.content)}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = self._render_inline_content(node.content)
        title_attr = f' title="{self._escape(node.title)}"' if node.title else ""
        href = self._escape(node.url)
        self._output.append(f'<a href="{href}"{title_attr}>{content}</a>')

    def visit_active_link(self, node: ActiveLink) -> None:
        """Render an ActiveLink node with the configured CSS class.

        Parameters
        ----------
        node : ActiveLink
            Link to the page being rendered

        """
        content = self._render_inline_content(node.content)
        href = self._escape(node.url)
        self._output.append(f'<a href="{href}" class="{self._escape(self.options.active_class)}">{content}</a>')
