#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_toc.py
"""Tests for the TableOfContents builder."""

import logging

import pytest
from utils import active_urls, all_lists, build_docs_site, make_header, make_page, outline

from sitetoc.ast import ActiveLink, Link, List, ListItem, Paragraph, Text
from sitetoc.options import TocOptions
from sitetoc.toc import TableOfContents, headers_after
from sitetoc.tree import Location, Tree

GUIDE_SUBTREE = [
    ("guide.html#install", [("guide.html#from-source", [])]),
    ("guide.html#usage", []),
    ("guide/advanced.html", [("guide/advanced.html#tuning", [])]),
]

FULL_SITE = [
    ("index.html#welcome", []),
    ("guide.html", GUIDE_SUBTREE),
    ("api.html", []),
]


@pytest.mark.unit
class TestTableOfContentsInit:
    """Tests for builder construction."""

    def test_default_options(self):
        """Test that a builder without options uses the defaults."""
        assert TableOfContents().options == TocOptions()

    def test_overrides_apply_on_top_of_options(self):
        """Test keyword overrides on top of an options object."""
        toc = TableOfContents(TocOptions(max_depth=2, ordered=False), auto_expand=True)
        assert toc.options == TocOptions(max_depth=2, ordered=False, auto_expand=True)


@pytest.mark.unit
class TestEntryShape:
    """Tests for the structure of list entries."""

    def test_item_holds_paragraph_with_link(self, guide_location):
        """Test that each entry is a paragraph with a link, then a nested list."""
        result = TableOfContents().render_page(guide_location)
        assert isinstance(result, List)
        item = result.items[0]
        assert isinstance(item, ListItem)
        assert isinstance(item.children[0], Paragraph)
        link = item.children[0].content[0]
        assert isinstance(link, Link)
        assert link.url == "guide.html#install"
        assert link.content == [Text(content="Install")]
        assert isinstance(item.children[1], List)

    def test_links_have_empty_title(self, guide_location):
        """Test that plain entries carry an empty title."""
        result = TableOfContents().render_page(guide_location)
        assert result.items[0].children[0].content[0].title == ""

    def test_lists_are_tight(self, home_location):
        """Test that all emitted lists are tight."""
        result = TableOfContents().render_root(home_location)
        assert all(lst.tight for lst in all_lists(result))

    @pytest.mark.parametrize("ordered", [True, False])
    def test_ordered_applies_at_every_level(self, home_location, ordered):
        """Test that the ordered option is used for every nested list."""
        result = TableOfContents(ordered=ordered).render_root(home_location)
        lists = all_lists(result)
        assert len(lists) > 1
        assert all(lst.ordered is ordered for lst in lists)

    def test_label_content_is_copied(self, guide_location):
        """Test that entries do not share label lists with the pages."""
        result = TableOfContents().render_page(guide_location)
        link = result.items[0].children[0].content[0]
        header = guide_location.tree.label.headers[0].label
        assert link.content == list(header.label)
        assert link.content is not header.label


@pytest.mark.unit
class TestRenderRoot:
    """Tests for the whole-site table of contents."""

    def test_full_site(self, guide_location):
        """Test that the root list mirrors the site with headers first."""
        result = TableOfContents().render_root(guide_location)
        assert outline(result) == FULL_SITE

    def test_active_page_marked(self, guide_location):
        """Test that the link to the active page is an ActiveLink."""
        result = TableOfContents().render_root(guide_location)
        assert active_urls(result) == ["guide.html"]
        active = result.items[1].children[0].content[0]
        assert isinstance(active, ActiveLink)
        assert active.content == [Text(content="Guide")]

    def test_active_page_deep_in_tree(self, advanced_location):
        """Test marking a page below the top level."""
        result = TableOfContents().render_root(advanced_location)
        assert active_urls(result) == ["guide/advanced.html"]

    def test_active_match_uses_path(self, docs_site):
        """Test that a separately built cursor onto an equal page is still active."""
        rebuilt = build_docs_site()
        location = Location.at(rebuilt, [1])
        result = TableOfContents().render_tree("", location, docs_site)
        assert active_urls(result) == ["api.html"]

    def test_max_depth_one_collapses(self, guide_location):
        """Test that only the top level is listed at max_depth 1."""
        result = TableOfContents(max_depth=1).render_root(guide_location)
        assert outline(result) == [("index.html#welcome", []), ("guide.html", []), ("api.html", [])]

    def test_max_depth_two(self, home_location):
        """Test that max_depth 2 keeps two levels of entries."""
        result = TableOfContents(max_depth=2).render_root(home_location)
        assert outline(result) == [
            ("index.html#welcome", []),
            (
                "guide.html",
                [
                    ("guide.html#install", []),
                    ("guide.html#usage", []),
                    ("guide/advanced.html", []),
                ],
            ),
            ("api.html", []),
        ]

    def test_max_depth_zero_still_lists_top_level(self, home_location):
        """Test that max_depth 0 lists the top level without nesting."""
        result = TableOfContents(max_depth=0).render_root(home_location)
        assert outline(result) == [("index.html#welcome", []), ("guide.html", []), ("api.html", [])]

    def test_base_path_prefixes_links(self):
        """Test that the active page's base prefixes every URL."""
        child = make_page("docs/child.html", "Child", base="../")
        root = make_page("index.html", "Home", [Tree(make_header("#top", "Top"))], base="../")
        site = Tree(root, [Tree(child)])
        result = TableOfContents().render_root(Location.at(site, [0]))
        assert outline(result) == [("../index.html#top", []), ("../docs/child.html", [])]
        assert active_urls(result) == ["../docs/child.html"]

    def test_is_idempotent(self, advanced_location):
        """Test that rendering twice gives equal lists."""
        toc = TableOfContents(max_depth=1, auto_expand=True)
        assert toc.render_root(advanced_location) == toc.render_root(advanced_location)


@pytest.mark.unit
class TestIncludeFlags:
    """Tests for include_pages and include_headers."""

    def test_pages_only(self, home_location):
        """Test leaving headers out."""
        result = TableOfContents(include_headers=False).render_root(home_location)
        assert outline(result) == [("guide.html", [("guide/advanced.html", [])]), ("api.html", [])]

    def test_headers_only(self, home_location):
        """Test leaving sub-pages out of the root list."""
        result = TableOfContents(include_pages=False).render_root(home_location)
        assert outline(result) == [("index.html#welcome", [])]

    def test_headers_only_below_page(self, guide_location):
        """Test that sub-pages are also left out of nested lists."""
        result = TableOfContents(include_pages=False).render_page(guide_location)
        assert outline(result) == GUIDE_SUBTREE[:2]

    def test_nothing_included_gives_empty_list(self, home_location, caplog):
        """Test that excluding both kinds of entries gives an empty list."""
        toc = TableOfContents(include_pages=False, include_headers=False, ordered=False)
        with caplog.at_level(logging.DEBUG, logger="sitetoc.toc"):
            result = toc.render_root(home_location)
        assert result == List(ordered=False, items=[], tight=True)
        assert "has no entries" in caplog.text


@pytest.mark.unit
class TestAutoExpand:
    """Tests for expanding entries around the active page."""

    def test_ancestors_expand_beyond_max_depth(self, advanced_location):
        """Test that the path to the active page is always expanded."""
        toc = TableOfContents(max_depth=1, auto_expand=True, max_expand_depth=1)
        result = toc.render_root(advanced_location)
        assert outline(result) == [
            ("index.html#welcome", []),
            (
                "guide.html",
                [
                    ("guide.html#install", []),
                    ("guide.html#usage", []),
                    ("guide/advanced.html", [("guide/advanced.html#tuning", [])]),
                ],
            ),
            ("api.html", []),
        ]
        assert active_urls(result) == ["guide/advanced.html"]

    def test_no_expansion_below_active_at_zero(self, advanced_location):
        """Test that max_expand_depth 0 expands ancestors only."""
        toc = TableOfContents(max_depth=1, auto_expand=True, max_expand_depth=0)
        result = toc.render_root(advanced_location)
        guide_entries = outline(result)[1][1]
        assert guide_entries == [
            ("guide.html#install", []),
            ("guide.html#usage", []),
            ("guide/advanced.html", []),
        ]

    def test_expansion_below_active_is_bounded(self, guide_location):
        """Test that one extra level opens below the active page."""
        toc = TableOfContents(max_depth=1, auto_expand=True, max_expand_depth=1)
        result = toc.render_root(guide_location)
        assert outline(result)[1] == (
            "guide.html",
            [("guide.html#install", []), ("guide.html#usage", []), ("guide/advanced.html", [])],
        )

    def test_deeper_expansion(self, guide_location):
        """Test that max_expand_depth 2 opens two levels below the active page."""
        toc = TableOfContents(max_depth=1, auto_expand=True, max_expand_depth=2)
        result = toc.render_root(guide_location)
        assert outline(result)[1] == ("guide.html", GUIDE_SUBTREE)

    def test_siblings_stay_collapsed(self):
        """Test that pages off the active path are not expanded."""
        site = Tree(
            make_page("index.html", "Home"),
            [
                Tree(make_page("a.html", "A"), [Tree(make_page("a1.html", "A1"))]),
                Tree(make_page("b.html", "B"), [Tree(make_page("b1.html", "B1"))]),
            ],
        )
        toc = TableOfContents(max_depth=1, auto_expand=True)
        result = toc.render_root(Location.at(site, [0]))
        assert outline(result) == [("a.html", [("a1.html", [])]), ("b.html", [])]

    def test_disabled_auto_expand_ignores_active(self, advanced_location):
        """Test that without auto_expand the active page changes nothing but its link."""
        result = TableOfContents(max_depth=1).render_root(advanced_location)
        assert outline(result) == [("index.html#welcome", []), ("guide.html", []), ("api.html", [])]
        assert active_urls(result) == []

    def test_root_active_expands_first_level(self, home_location):
        """Test that the root being active does not count as an entry."""
        result = TableOfContents(max_depth=0, auto_expand=True).render_root(home_location)
        assert outline(result) == [("index.html#welcome", []), ("guide.html", []), ("api.html", [])]


@pytest.mark.unit
class TestRenderPage:
    """Tests for the list below a single page."""

    def test_lists_headers_then_sub_pages(self, guide_location):
        """Test that a page's list holds its headers followed by its sub-pages."""
        result = TableOfContents().render_page(guide_location)
        assert outline(result) == GUIDE_SUBTREE
        assert active_urls(result) == []

    def test_leaf_page_without_headers_is_empty(self, api_location):
        """Test that a page with nothing below it gives an empty list."""
        result = TableOfContents().render_page(api_location)
        assert result.items == []
        assert result.ordered is True

    def test_uses_page_base(self):
        """Test that the page's own base prefixes URLs."""
        page = make_page("guide/index.html", "Guide", [Tree(make_header("#a", "A"))], base="../")
        result = TableOfContents().render_page(Location.of(Tree(page)))
        assert outline(result) == [("../guide/index.html#a", [])]

    def test_max_depth_counts_from_page(self, guide_location):
        """Test that depth is counted from the page, not the site root."""
        result = TableOfContents(max_depth=1).render_page(guide_location)
        assert outline(result) == [
            ("guide.html#install", []),
            ("guide.html#usage", []),
            ("guide/advanced.html", []),
        ]


@pytest.mark.unit
class TestHeadersAfter:
    """Tests for locating the headers that follow a directive."""

    def test_none_location(self):
        """Test that no headers at all gives level 0 and nothing."""
        assert headers_after(None, 0) == (0, ())

    def test_first_top_level_header(self, docs_site):
        """Test finding a top-level header together with its right siblings."""
        headers = docs_site.children[0].label.headers
        level, forest = headers_after(Location.forest(headers), 0)
        assert level == 0
        assert [tree.label.path for tree in forest] == ["#install", "#usage"]

    def test_nested_header(self, docs_site):
        """Test finding a nested header reports its depth."""
        headers = docs_site.children[0].label.headers
        level, forest = headers_after(Location.forest(headers), 4)
        assert level == 1
        assert [tree.label.path for tree in forest] == ["#from-source"]

    def test_offset_between_headers(self, docs_site):
        """Test that headers before the offset are skipped."""
        headers = docs_site.children[0].label.headers
        level, forest = headers_after(Location.forest(headers), 6)
        assert level == 0
        assert [tree.label.path for tree in forest] == ["#usage"]

    def test_offset_is_exclusive(self, docs_site):
        """Test that a header starting exactly at the offset is not after it."""
        headers = docs_site.children[0].label.headers
        _, forest = headers_after(Location.forest(headers), 3)
        assert forest[0].label.path == "#from-source"

    def test_nothing_after_offset(self, docs_site):
        """Test an offset past the last header."""
        headers = docs_site.children[0].label.headers
        assert headers_after(Location.forest(headers), 100) == (0, ())


@pytest.mark.unit
class TestRenderDirective:
    """Tests for lists replacing a directive inside a page."""

    def test_directive_before_headers(self, guide_location):
        """Test a directive at the top of the page lists everything below it."""
        result = TableOfContents().render_directive(guide_location, 0)
        assert outline(result) == GUIDE_SUBTREE

    def test_directive_inside_section_omits_sub_pages(self, guide_location):
        """Test that a directive before a nested header lists that section only."""
        result = TableOfContents().render_directive(guide_location, 4)
        assert outline(result) == [("guide.html#from-source", [])]

    def test_directive_between_sections(self, guide_location):
        """Test that a directive between top-level sections keeps sub-pages."""
        result = TableOfContents().render_directive(guide_location, 6)
        assert outline(result) == [
            ("guide.html#usage", []),
            ("guide/advanced.html", [("guide/advanced.html#tuning", [])]),
        ]

    def test_directive_after_all_headers(self, guide_location):
        """Test that a directive after the last header lists only sub-pages."""
        result = TableOfContents().render_directive(guide_location, 100)
        assert outline(result) == [("guide/advanced.html", [("guide/advanced.html#tuning", [])])]

    def test_directive_on_leaf_page_is_empty(self, api_location):
        """Test a directive on a page with nothing to list."""
        result = TableOfContents().render_directive(api_location, 0)
        assert result.items == []

    def test_directive_logs_resolution(self, guide_location, caplog):
        """Test that directive resolution is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="sitetoc.toc"):
            TableOfContents().render_directive(guide_location, 4)
        assert "resolved to 1 header(s) at level 1" in caplog.text


@pytest.mark.unit
class TestRenderHeadersOnly:
    """Tests for the header hierarchy of a single page."""

    def test_h1_is_single_top_entry(self, guide_location):
        """Test that the page's h1 heads the list and sub-pages are omitted."""
        result = TableOfContents().render_headers_only(guide_location)
        assert outline(result) == [("guide.html#guide", GUIDE_SUBTREE[:2])]

    def test_no_active_entry(self, guide_location):
        """Test that headers-only lists have no active link."""
        result = TableOfContents(auto_expand=True).render_headers_only(guide_location)
        assert active_urls(result) == []

    def test_page_without_headers(self, api_location):
        """Test that a page without section headers lists only its h1."""
        result = TableOfContents().render_headers_only(api_location)
        assert outline(result) == [("api.html#api", [])]

    def test_respects_max_depth(self, guide_location):
        """Test that depth limits apply from the h1 down."""
        result = TableOfContents(max_depth=1).render_headers_only(guide_location)
        assert outline(result) == [("guide.html#guide", [])]


@pytest.mark.unit
class TestScenarios:
    """End-to-end expansion scenarios on small page trees."""

    def test_two_level_tree_at_depth_one(self):
        """Test that the root's children are the top entries and stay collapsed at max_depth 1."""
        site = Tree(
            make_page("a.html", "A"),
            [
                Tree(make_page("b.html", "B"), [Tree(make_page("b1.html", "B1"))]),
                Tree(make_page("c.html", "C")),
            ],
        )
        toc = TableOfContents(max_depth=1, include_headers=False)
        result = toc.render_root(Location.of(site))
        assert outline(result) == [("b.html", []), ("c.html", [])]

    def test_grandchild_expansion_with_zero_max_depth(self):
        """Test that the path to a deep active page opens while its ancestors' siblings stay closed."""
        site = Tree(
            make_page("index.html", "Home"),
            [
                Tree(
                    make_page("x.html", "X"),
                    [
                        Tree(
                            make_page("y.html", "Y"),
                            [
                                Tree(make_page("d.html", "D"), [Tree(make_page("d1.html", "D1"))]),
                                Tree(make_page("e.html", "E"), [Tree(make_page("e1.html", "E1"))]),
                            ],
                        ),
                        Tree(make_page("z.html", "Z"), [Tree(make_page("z1.html", "Z1"))]),
                    ],
                ),
                Tree(make_page("w.html", "W"), [Tree(make_page("w1.html", "W1"))]),
            ],
        )
        toc = TableOfContents(max_depth=0, auto_expand=True, max_expand_depth=1, include_headers=False)
        result = toc.render_root(Location.at(site, [0, 0, 0]))
        assert outline(result) == [
            (
                "x.html",
                [
                    (
                        "y.html",
                        [
                            ("d.html", [("d1.html", [])]),
                            ("e.html", []),
                        ],
                    ),
                    ("z.html", []),
                ],
            ),
            ("w.html", []),
        ]
        assert active_urls(result) == ["d.html"]
