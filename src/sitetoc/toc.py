#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/toc.py
"""Table of contents lists for pages of a documentation site.

:class:`TableOfContents` turns a ``Tree[Page]`` (and the header forests of
its pages) into a nested :class:`~sitetoc.ast.List` of links. The list mirrors
the navigable hierarchy, collapsed below ``max_depth`` and, with
``auto_expand``, opened up along the path to the page being rendered.

Depth counting
--------------
The tree a list is rendered for sits at depth 0, so its entries are at
depth 1, their entries at depth 2, and so on. An entry at depth ``d`` gets a
nested list when ``d < max_depth``, or when one of the auto-expansion rules
applies:

- the entry is an ancestor of the active page (its nested list is needed to
  reach the active entry),
- the entry is the active page and ``max_expand_depth > 0`` (expansion
  starts here, at expand depth 0),
- the entry lies below the active page and its expand depth is still below
  ``max_expand_depth``.

Examples
--------
    >>> from sitetoc.tree import Location
    >>> toc = TableOfContents(max_depth=2, ordered=False)
    >>> nav = toc.render_root(Location.at(site, [0, 1]))  # doctest: +SKIP

"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from sitetoc.ast.nodes import ActiveLink, Link, List, ListItem, Node, Paragraph
from sitetoc.options import TocOptions
from sitetoc.pages import Header, Linkable, Page
from sitetoc.tree import Forest, Location, Tree

logger = logging.getLogger(__name__)


def headers_after(location: Optional[Location[Header]], buffer_offset: int) -> tuple[int, Forest[Header]]:
    """Find the headers that follow a position in the page source.

    Walks forward in pre-order from ``location`` to the first header whose
    ``start_index`` exceeds ``buffer_offset``.

    Parameters
    ----------
    location : Location[Header] or None
        Where to start scanning, typically ``Location.forest(page.headers)``
    buffer_offset : int
        Source position of a table of contents directive

    Returns
    -------
    tuple of (int, tuple of Tree[Header])
        The depth of the header found, and the forest made of its tree
        followed by its right siblings. ``(0, ())`` when no header starts
        after the offset.

    """
    if location is None:
        return 0, ()

    for current in location.iter_forward():
        if current.tree.label.start_index > buffer_offset:
            return current.depth, (current.tree,) + current.rights
    return 0, ()


class TableOfContents:
    """Builder for table of contents lists.

    Parameters
    ----------
    options : TocOptions or None, default = None
        Rendering options. Defaults to ``TocOptions()``.
    **overrides : Any
        Individual option values applied on top of ``options``

    Examples
    --------
        >>> toc = TableOfContents(TocOptions(max_depth=1), ordered=False)
        >>> toc.options.max_depth, toc.options.ordered
        (1, False)

    """

    def __init__(self, options: TocOptions | None = None, **overrides: Union[bool, int]):
        """Initialize the builder with its options."""
        options = options or TocOptions()
        self.options = options.create_updated(**overrides) if overrides else options

    def render_page(self, location: Location[Page]) -> List:
        """Render the table of contents below the page at ``location``.

        The page provides the base path and is the active entry.
        """
        return self.render_tree(location.tree.label.base, location, location.tree)

    def render_directive(self, location: Location[Page], buffer_offset: int) -> List:
        """Render the table of contents for a directive inside a page.

        Lists the page's headers that start after ``buffer_offset``: the
        first such header together with its right siblings. Sub-pages are
        listed too when that header is a top-level one, since the directive
        then continues the page's own level.

        Parameters
        ----------
        location : Location[Page]
            The page holding the directive
        buffer_offset : int
            Source position of the directive

        """
        page_tree = location.tree
        page = page_tree.label
        level, headers = headers_after(Location.forest(page.headers), buffer_offset)
        logger.debug(
            f"Directive at offset {buffer_offset} in {page.path!r} resolved to {len(headers)} header(s) at level {level}"
        )
        sub_pages = page_tree.children if level == 0 else ()
        return self.render_tree(page.base, location, Tree(page.with_headers(headers), sub_pages))

    def render_root(self, location: Location[Page]) -> List:
        """Render the table of contents of the whole site.

        The list starts at the root of the tree and ``location`` is the active
        entry.
        """
        return self.render_tree(location.tree.label.base, location, location.root.tree)

    def render_headers_only(self, location: Location[Page]) -> List:
        """Render the header hierarchy of the page at ``location``.

        The page's top header is the single top-level entry. Sub-pages are
        left out and no entry is active.
        """
        page = location.tree.label
        tree = Tree.leaf(page.with_headers([Tree(page.h1, page.headers)]))
        return self.render_tree(page.base, None, tree)

    def render_tree(self, base_path: str, active: Optional[Location[Page]], tree: Tree[Page]) -> List:
        """Render the table of contents for ``tree``.

        Parameters
        ----------
        base_path : str
            Prefix prepended to every entry's relative path
        active : Location[Page] or None
            The page being rendered, if any
        tree : Tree[Page]
            Tree whose entries are listed

        Returns
        -------
        List
            The nested list; empty when there is nothing to list

        """
        active_path = active.tree.label.path if active is not None else None
        logger.debug(f"Rendering table of contents for {tree.label.path!r} (active: {active_path!r})")
        result = self._sub_list(base_path, active, tree, depth=0, expand_depth=None)
        if result is None:
            logger.debug(f"Table of contents for {tree.label.path!r} has no entries")
            return self._list([])
        return result

    def _sub_list(
        self,
        base_path: str,
        active: Optional[Location[Page]],
        tree: Tree[Linkable],
        depth: int,
        expand_depth: Optional[int],
    ) -> Optional[List]:
        linkable = tree.label
        items: list[ListItem] = []
        if isinstance(linkable, Page):
            if self.options.include_headers:
                items += self._items(base_path + linkable.path, active, linkable.headers, depth, expand_depth)
            if self.options.include_pages:
                items += self._items(base_path, active, tree.children, depth, expand_depth)
        elif self.options.include_headers:
            items += self._items(base_path, active, tree.children, depth, expand_depth)
        return self._list(items) if items else None

    def _items(
        self,
        base_path: str,
        active: Optional[Location[Page]],
        forest: Sequence[Tree[Linkable]],
        depth: int,
        expand_depth: Optional[int],
    ) -> list[ListItem]:
        child_expand_depth = expand_depth + 1 if expand_depth is not None else None
        return [self._item(base_path, active, depth + 1, child_expand_depth, tree) for tree in forest]

    def _item(
        self,
        base_path: str,
        active: Optional[Location[Page]],
        depth: int,
        expand_depth: Optional[int],
        tree: Tree[Linkable],
    ) -> ListItem:
        linkable = tree.label
        item = ListItem(children=[Paragraph(content=[self._link(base_path, linkable, active)])])

        if (
            depth < self.options.max_depth
            or (expand_depth is not None and expand_depth < self.options.max_expand_depth)
            or self._is_active_ancestor(linkable, active)
            or self._begins_auto_expand(linkable, active)
        ):
            if expand_depth is None and self._begins_auto_expand(linkable, active):
                expand_depth = 0
            nested = self._sub_list(base_path, active, tree, depth, expand_depth)
            if nested is not None:
                item.children.append(nested)

        return item

    def _is_active_ancestor(self, linkable: Linkable, active: Optional[Location[Page]]) -> bool:
        if not self.options.auto_expand or active is None:
            return False
        return any(location.tree.label == linkable for location in active.path[1:])

    def _begins_auto_expand(self, linkable: Linkable, active: Optional[Location[Page]]) -> bool:
        return (
            self.options.auto_expand
            and active is not None
            and active.tree.label == linkable
            and self.options.max_expand_depth > 0
        )

    @staticmethod
    def _link(base_path: str, linkable: Linkable, active: Optional[Location[Page]]) -> Node:
        url = base_path + linkable.path
        content = list(linkable.label)
        if active is not None and active.tree.label.path == linkable.path:
            return ActiveLink(url=url, content=content)
        return Link(url=url, content=content, title="")

    def _list(self, items: list[ListItem]) -> List:
        return List(ordered=self.options.ordered, items=items, tight=True)


__all__ = [
    "TableOfContents",
    "headers_after",
]
