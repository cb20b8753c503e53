#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Renderers subclass :class:`NodeVisitor` and implement one ``visit_*`` method
per node type. Each node's ``accept`` dispatches to the matching method.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from sitetoc.ast.nodes import (
    ActiveLink,
    Code,
    Document,
    Emphasis,
    Heading,
    Link,
    List,
    ListItem,
    Paragraph,
    Strong,
    Text,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for every node type. Visit
    methods return Any (typically None for visitors that accumulate output).

    Examples
    --------
    Counting links in a rendered table of contents:

        >>> class LinkCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_link(self, node):
        ...         self.count += 1
        ...     # ... remaining visit_* methods recurse into children

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node.

        Parameters
        ----------
        node : List
            The list node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node.

        Parameters
        ----------
        node : ListItem
            The list item node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node.

        Parameters
        ----------
        node : Link
            The link node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_active_link(self, node: ActiveLink) -> Any:
        """Visit an ActiveLink node.

        Parameters
        ----------
        node : ActiveLink
            The link to the page currently being rendered

        Returns
        -------
        Any
            Result of processing this node

        """
        pass
