#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/ast/__init__.py
"""Abstract Syntax Tree (AST) nodes for table of contents output.

A rendered table of contents is a generic nested list handed to whatever
renderer the surrounding site generator uses. The module consists of:

- nodes: AST node classes (List, ListItem, Link, ActiveLink, ...)
- visitors: Visitor base class for renderers
- utils: Text extraction helpers

Examples
--------
    >>> from sitetoc.ast import Link, List, ListItem, Paragraph, Text
    >>> toc = List(ordered=False, items=[
    ...     ListItem(children=[Paragraph(content=[Link(url="intro.html", content=[Text("Intro")])])])
    ... ])

"""

from __future__ import annotations

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
    get_node_children,
)
from sitetoc.ast.utils import extract_text
from sitetoc.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Node",
    "Document",
    "Heading",
    "Paragraph",
    "List",
    "ListItem",
    "Text",
    "Emphasis",
    "Strong",
    "Code",
    "Link",
    "ActiveLink",
    # Node helpers
    "get_node_children",
    # Visitors
    "NodeVisitor",
    # Utilities
    "extract_text",
]
