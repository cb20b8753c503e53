#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/ast/utils.py
"""Utility functions for working with AST nodes.

Examples
--------
Extract text from a heading:

    >>> from sitetoc.ast import Heading, Text, Emphasis
    >>> from sitetoc.ast.utils import extract_text
    >>>
    >>> heading = Heading(level=1, content=[
    ...     Text(content="Hello "),
    ...     Emphasis(content=[Text(content="world")])
    ... ])
    >>> extract_text(heading, joiner="")
    'Hello world'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Union

from sitetoc.ast.nodes import Code, Text, get_node_children

if TYPE_CHECKING:
    from sitetoc.ast.nodes import Node


def extract_text(node_or_nodes: Union[Node, Sequence[Node]], joiner: str = " ") -> str:
    """Extract plain text from a node or a list or tuple of nodes.

    Recursively concatenates the content of Text and Code nodes, joining
    the parts found at each level of the tree with ``joiner``.

    Parameters
    ----------
    node_or_nodes : Node or sequence of Node
        A single node or list of nodes to extract text from
    joiner : str, default = " "
        String used to join text parts. Use "" when the Text nodes already
        carry their own spacing (as heading labels usually do).

    Returns
    -------
    str
        Concatenated text content

    Examples
    --------
        >>> from sitetoc.ast import List, ListItem, Text, Paragraph
        >>> lst = List(ordered=False, items=[
        ...     ListItem(children=[Paragraph(content=[Text(content="Item 1")])]),
        ...     ListItem(children=[Paragraph(content=[Text(content="Item 2")])])
        ... ])
        >>> extract_text(lst)
        'Item 1 Item 2'

    """
    if isinstance(node_or_nodes, (list, tuple)):
        text_parts = []
        for node in node_or_nodes:
            extracted = extract_text(node, joiner=joiner)
            if extracted:
                text_parts.append(extracted)
        return joiner.join(text_parts)

    node = node_or_nodes

    if isinstance(node, (Text, Code)):
        return node.content

    text_parts = []
    for child in get_node_children(node):
        extracted = extract_text(child, joiner=joiner)
        if extracted:
            text_parts.append(extracted)

    return joiner.join(text_parts)


__all__ = [
    "extract_text",
]
