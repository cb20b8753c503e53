#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/utils.py
"""Test utilities for the sitetoc test suite.

Builders for small documentation sites, and helpers that flatten rendered
table of contents lists into plain structures that are easy to compare.
"""

from typing import Any, Optional, Sequence

from sitetoc.ast import ActiveLink, Link, List, Paragraph, Text
from sitetoc.pages import Header, Page
from sitetoc.tree import Tree
from sitetoc.utils.text import slugify


def make_header(anchor: str, title: str, start_index: int = 0, level: int = 2) -> Header:
    """Create a header with a plain text label."""
    return Header(path=anchor, label=[Text(content=title)], start_index=start_index, level=level)


def make_page(
    path: str,
    title: str,
    headers: Sequence[Tree[Header]] = (),
    base: str = "",
) -> Page:
    """Create a page whose h1 anchor is derived from its title."""
    h1 = Header(path="#" + slugify(title), label=[Text(content=title)], start_index=0, level=1)
    return Page(base=base, path=path, label=[Text(content=title)], h1=h1, headers=headers)


def build_docs_site() -> Tree[Page]:
    """Build a three-page site with nested headers.

    ::

        index.html            Home       #welcome
        ├── guide.html        Guide      #install (#from-source), #usage
        │   └── guide/advanced.html      #tuning
        └── api.html          API

    """
    advanced = make_page("guide/advanced.html", "Advanced", [Tree(make_header("#tuning", "Tuning", 2))])
    guide = make_page(
        "guide.html",
        "Guide",
        [
            Tree(
                make_header("#install", "Install", 3),
                [Tree(make_header("#from-source", "From source", 5, level=3))],
            ),
            Tree(make_header("#usage", "Usage", 8)),
        ],
    )
    home = make_page("index.html", "Home", [Tree(make_header("#welcome", "Welcome", 2))])
    return Tree(home, [Tree(guide, [Tree(advanced)]), Tree(make_page("api.html", "API"))])


def first_link(item_paragraph: Paragraph) -> Any:
    """Return the link node of an entry's paragraph."""
    return item_paragraph.content[0]


def outline(toc: Optional[List]) -> list[tuple[str, list]]:
    """Flatten a table of contents into nested ``(url, children)`` tuples."""
    if toc is None:
        return []
    entries = []
    for item in toc.items:
        link = first_link(item.children[0])
        nested = item.children[1] if len(item.children) > 1 else None
        entries.append((link.url, outline(nested)))
    return entries


def active_urls(toc: List) -> list[str]:
    """Return the URLs of every active link in a table of contents."""
    urls = []
    for item in toc.items:
        link = first_link(item.children[0])
        if isinstance(link, ActiveLink):
            urls.append(link.url)
        for child in item.children[1:]:
            urls.extend(active_urls(child))
    return urls


def all_lists(toc: List) -> list[List]:
    """Return a list and every list nested inside it."""
    lists = [toc]
    for item in toc.items:
        for child in item.children[1:]:
            lists.extend(all_lists(child))
    return lists


def link_urls(toc: List) -> list[str]:
    """Return every link URL in a table of contents, in document order."""
    urls = []
    for item in toc.items:
        link = first_link(item.children[0])
        assert isinstance(link, (Link, ActiveLink))
        urls.append(link.url)
        for child in item.children[1:]:
            urls.extend(link_urls(child))
    return urls
