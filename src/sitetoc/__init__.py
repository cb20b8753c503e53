#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/__init__.py
"""sitetoc: navigable tables of contents for documentation sites.

Build a ``Tree[Page]`` for the site, point a ``Location`` at the page being
rendered, and ask a :class:`TableOfContents` for the list you need:

- ``render_page``: everything below the current page
- ``render_root``: the whole site, with the current page highlighted
- ``render_directive``: the headers following a ToC directive in a page
- ``render_headers_only``: the current page's own header hierarchy

The result is a generic :class:`sitetoc.ast.List` which the renderers in
:mod:`sitetoc.renderers` (or the site generator's own) turn into markup.

Examples
--------
    >>> from sitetoc import Header, Location, Page, TableOfContents, Tree
    >>> from sitetoc.ast import Text
    >>> def page(path, title):
    ...     return Page(base="", path=path, label=[Text(title)], h1=Header("#top", [Text(title)]))
    >>> site = Tree(page("index.html", "Home"), [Tree(page("guide.html", "Guide"))])
    >>> toc = TableOfContents(ordered=False)
    >>> nav = toc.render_root(Location.at(site, [0]))
    >>> nav.items[0].children[0].content[0].url
    'guide.html'

"""

from sitetoc.exceptions import (
    ConfigurationError,
    InvalidLocationError,
    RenderingError,
    SiteTocError,
    ValidationError,
)
from sitetoc.options import HtmlRendererOptions, MarkdownRendererOptions, TocOptions
from sitetoc.pages import Header, Linkable, Page, header_forest, page_from_document
from sitetoc.toc import TableOfContents, headers_after
from sitetoc.tree import Forest, Location, Tree

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Core
    "TableOfContents",
    "headers_after",
    "TocOptions",
    # Tree model
    "Tree",
    "Forest",
    "Location",
    # Labels
    "Linkable",
    "Page",
    "Header",
    "header_forest",
    "page_from_document",
    # Renderer options
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
    # Exceptions
    "SiteTocError",
    "ValidationError",
    "ConfigurationError",
    "InvalidLocationError",
    "RenderingError",
]
