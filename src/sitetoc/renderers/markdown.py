#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/renderers/markdown.py
"""Markdown rendering for table of contents lists.

Nested lists are indented by the width of their parent item's marker, so
``1. `` nests by three spaces and ``- `` by two, which CommonMark requires
for the nested list to belong to the item.

"""

from __future__ import annotations

import re

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
from sitetoc.options import MarkdownRendererOptions
from sitetoc.renderers.base import BaseRenderer, InlineContentMixin

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_\[\]])")
_UNSAFE_DESTINATION = re.compile(r"[\s()<>]")


def _link_destination(url: str) -> str:
    """Return ``url`` as a CommonMark link destination.

    URLs holding whitespace, parentheses or angle brackets are wrapped in
    ``<...>``, with any angle brackets inside escaped.

    Examples
    --------
        >>> _link_destination("a.html")
        'a.html'
        >>> _link_destination("my page.html")
        '<my page.html>'

    """
    if not _UNSAFE_DESTINATION.search(url):
        return url
    return "<" + url.replace("<", "\\<").replace(">", "\\>") + ">"


class MarkdownRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown rendering options

    Examples
    --------
        >>> from sitetoc.ast import Link, List, ListItem, Paragraph, Text
        >>> toc = List(ordered=True, items=[
        ...     ListItem(children=[Paragraph(content=[Link(url="a.html", content=[Text("A")])])])
        ... ])
        >>> MarkdownRenderer().render_to_string(toc)
        '1. [A](a.html)'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []
        self._list_marker_stack: list[str] = []

    def render_to_string(self, node: Node) -> str:
        """Render a node to Markdown.

        Parameters
        ----------
        node : Node
            Node to render

        Returns
        -------
        str
            Markdown text, without a trailing newline

        Raises
        ------
        RenderingError
            If ``node`` is not an AST node

        """
        if not isinstance(node, Node):
            raise RenderingError(f"Cannot render {type(node).__name__} as Markdown", node_type=type(node).__name__)

        self._output = []
        self._list_marker_stack = []
        node.accept(self)
        return "".join(self._output).rstrip("\n")

    def _current_indent(self) -> str:
        # Every enclosing item contributes the width of its marker
        return "".join(" " * len(marker) for marker in self._list_marker_stack[:-1])

    def visit_document(self, node: Document) -> None:
        """Render a Document node, separating blocks with blank lines."""
        for i, child in enumerate(node.children):
            if i > 0:
                self._output.append("\n")
            child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"{'#' * node.level} {content}\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(self._render_inline_content(node.content))
        self._output.append("\n")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Parameters
        ----------
        node : List
            List to render

        """
        for i, item in enumerate(node.items):
            if node.ordered:
                marker = f"{node.start + i}. "
            else:
                marker = f"{self.options.bullet_symbol} "

            self._list_marker_stack.append(marker)
            item.accept(self)
            self._list_marker_stack.pop()

            if not node.tight and i < len(node.items) - 1:
                self._output.append("\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        The first child follows the marker; nested lists are rendered
        beneath it at the next indentation level.
        """
        marker = self._list_marker_stack[-1] if self._list_marker_stack else "- "
        self._output.append(f"{self._current_indent()}{marker}")

        if not node.children:
            self._output.append("\n")

        for child in node.children:
            child.accept(self)

    def visit_text(self, node: Text) -> None:
        """Render a Text node, escaping Markdown syntax characters."""
        self._output.append(_MARKDOWN_SPECIAL.sub(r"\\\1", node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(f"*{self._render_inline_content(node.content)}*")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(f"**{self._render_inline_content(node.content)}**")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        fence = "``" if "`" in node.content else "`"
        self._output.append(f"{fence}{node.content}{fence}")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = self._render_inline_content(node.content)
        destination = _link_destination(node.url)
        if node.title:
            title = node.title.replace('"', '\\"')
            self._output.append(f'[{content}]({destination} "{title}")')
        else:
            self._output.append(f"[{content}]({destination})")

    def visit_active_link(self, node: ActiveLink) -> None:
        """Render an ActiveLink node, in bold unless disabled."""
        content = self._render_inline_content(node.content)
        link = f"[{content}]({_link_destination(node.url)})"
        self._output.append(f"**{link}**" if self.options.bold_active_link else link)
