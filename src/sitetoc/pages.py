#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/pages.py
"""Page and header labels for site trees.

A documentation site is a ``Tree[Page]``: each node's label is a
:class:`Page`, and the node's children are its sub-pages. Each page carries
its own in-page section tree as a forest of ``Tree[Header]``. Both label
types satisfy the :class:`Linkable` protocol, which is all the table of
contents builder needs to emit an entry.

Functions
---------
header_forest : Nest a flat sequence of headers by level
page_from_document : Build a Page from a parsed Document's headings

Examples
--------
    >>> from sitetoc.ast import Document, Heading, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text("Guide")]),
    ...     Heading(level=2, content=[Text("Install")]),
    ...     Heading(level=3, content=[Text("From source")]),
    ... ])
    >>> page = page_from_document(doc, base="../", path="guide.html")
    >>> page.h1.path, [tree.label.path for tree in page.headers]
    ('#guide', ['#install'])

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional, Protocol, Sequence, Tuple, runtime_checkable

from sitetoc.ast.nodes import Document, Heading, Node, Text
from sitetoc.ast.utils import extract_text
from sitetoc.constants import HEADER_ANCHOR_PREFIX
from sitetoc.tree import Forest, Tree
from sitetoc.utils.text import slugify

logger = logging.getLogger(__name__)


@runtime_checkable
class Linkable(Protocol):
    """Anything that can appear as a table of contents entry.

    Attributes
    ----------
    path : str
        Link target relative to the base path of the entry's list
    label : sequence of Node
        Inline content displayed as the link text

    """

    path: str
    label: Sequence[Node]


@dataclass(frozen=True)
class Header:
    """A section header within a page.

    Parameters
    ----------
    path : str
        Anchor relative to the owning page (e.g. ``"#install"``)
    label : tuple of Node, default = ()
        Inline content of the heading. A list is frozen into a tuple.
    start_index : int, default = 0
        Position of the heading in the page source. Headers after a ToC
        directive are those whose ``start_index`` exceeds the directive's
        buffer offset.
    level : int, default = 1
        Heading level the header was built from

    Notes
    -----
    Headers hash by ``path``, ``start_index`` and ``level``.

    """

    path: str
    label: Tuple[Node, ...] = ()
    start_index: int = 0
    level: int = 1

    def __post_init__(self) -> None:
        """Freeze the label into a tuple."""
        if not isinstance(self.label, tuple):
            object.__setattr__(self, "label", tuple(self.label))

    def __hash__(self) -> int:
        """Hash by anchor and source position."""
        return hash((self.path, self.start_index, self.level))

    @property
    def title(self) -> str:
        """Plain text of the header label."""
        return extract_text(self.label, joiner="")


@dataclass(frozen=True)
class Page:
    """A page of a documentation site.

    Parameters
    ----------
    base : str
        Prefix that turns paths relative to the site root into paths
        relative to this page (e.g. ``"../"``)
    path : str
        Page path relative to the site root (e.g. ``"guide/install.html"``)
    label : tuple of Node
        Inline content used as the page's link text. A list is frozen into
        a tuple.
    h1 : Header
        The page's top header
    headers : tuple of Tree[Header], default = ()
        Section headers below ``h1``

    Notes
    -----
    Pages hash by ``base`` and ``path``, so a ``Tree[Page]`` can key a dict
    or sit in a set.

    """

    base: str
    path: str
    label: Tuple[Node, ...]
    h1: Header
    headers: Forest[Header] = ()

    def __post_init__(self) -> None:
        """Freeze the label and header forest into tuples."""
        if not isinstance(self.label, tuple):
            object.__setattr__(self, "label", tuple(self.label))
        if not isinstance(self.headers, tuple):
            object.__setattr__(self, "headers", tuple(self.headers))

    def __hash__(self) -> int:
        """Hash by base and path."""
        return hash((self.base, self.path))

    @property
    def title(self) -> str:
        """Plain text of the page label."""
        return extract_text(self.label, joiner="")

    def with_headers(self, headers: Sequence[Tree[Header]]) -> Page:
        """Return a copy of this page with a different header forest."""
        return replace(self, headers=tuple(headers))


def header_forest(headers: Sequence[Header]) -> Forest[Header]:
    """Nest a flat, source-ordered sequence of headers by level.

    Each header becomes a child of the nearest preceding header with a
    lower level. Level jumps (an h2 followed by an h4) nest directly, with no
    placeholder entries in between.

    Parameters
    ----------
    headers : sequence of Header
        Headers in source order

    Returns
    -------
    tuple of Tree[Header]
        The nested header forest

    Examples
    --------
        >>> forest = header_forest([
        ...     Header("#a", level=2), Header("#a1", level=3), Header("#b", level=2)
        ... ])
        >>> [(t.label.path, len(t.children)) for t in forest]
        [('#a', 1), ('#b', 0)]

    """
    top: list[tuple[Header, list[Any]]] = []
    # (level, children of the header at that level)
    stack: list[tuple[int, list[Any]]] = []

    for header in headers:
        while stack and stack[-1][0] >= header.level:
            stack.pop()

        children: list[Any] = []
        siblings = stack[-1][1] if stack else top
        siblings.append((header, children))
        stack.append((header.level, children))

    def freeze(entries: list[tuple[Header, list[Any]]]) -> Forest[Header]:
        return tuple(Tree(header, freeze(nested)) for header, nested in entries)

    return freeze(top)


def page_from_document(
    document: Document,
    base: str = "",
    path: str = "",
    title: Optional[str] = None,
) -> Page:
    """Build a Page from the headings of a parsed document.

    The first heading becomes the page's ``h1`` and label; the remaining
    headings become its header forest. Anchors are collision-free slugs of
    the heading text, and each header's ``start_index`` is the heading's
    index in ``document.children``.

    Parameters
    ----------
    document : Document
        Parsed page content
    base : str, default = ""
        Base path of the page
    path : str, default = ""
        Page path relative to the site root
    title : str or None, default = None
        Title used when the document has no headings. Falls back to
        ``document.metadata["title"]`` and then to ``path``.

    Returns
    -------
    Page
        The page, without sub-pages (those belong to the enclosing tree)

    """
    seen_slugs: set[str] = set()
    headers: list[Header] = []

    for index, node in enumerate(document.children):
        if not isinstance(node, Heading):
            continue
        text = extract_text(node.content, joiner="")
        anchor = HEADER_ANCHOR_PREFIX + slugify(text, seen_slugs=seen_slugs)
        headers.append(Header(path=anchor, label=tuple(node.content), start_index=index, level=node.level))

    if headers:
        h1, rest = headers[0], headers[1:]
    else:
        fallback = title or document.metadata.get("title") or path
        logger.debug(f"Page {path!r} has no headings, using {fallback!r} as its title")
        anchor = HEADER_ANCHOR_PREFIX + slugify(str(fallback), seen_slugs=seen_slugs)
        h1 = Header(path=anchor, label=(Text(content=str(fallback)),), start_index=-1)
        rest = []

    return Page(base=base, path=path, label=h1.label, h1=h1, headers=header_forest(rest))


__all__ = [
    "Linkable",
    "Header",
    "Page",
    "header_forest",
    "page_from_document",
]
