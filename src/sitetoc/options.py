#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/options.py
"""Configuration options for table of contents rendering.

:class:`TocOptions` is an immutable set of the six knobs that control a
rendered table of contents. One instance is passed to each
:class:`~sitetoc.toc.TableOfContents` builder.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from sitetoc.constants import (
    DEFAULT_ACTIVE_LINK_CLASS,
    DEFAULT_AUTO_EXPAND,
    DEFAULT_BULLET_SYMBOL,
    DEFAULT_INCLUDE_HEADERS,
    DEFAULT_INCLUDE_PAGES,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_EXPAND_DEPTH,
    DEFAULT_ORDERED,
    BulletSymbol,
)
from sitetoc.exceptions import ValidationError

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class TocOptions(CloneFrozenMixin):
    """Options controlling which entries a table of contents contains.

    Parameters
    ----------
    include_pages : bool, default = True
        Emit entries for sub-pages
    include_headers : bool, default = True
        Emit entries for in-page section headers
    ordered : bool, default = True
        Render numbered (True) or bulleted (False) lists
    max_depth : int, default = 6
        Entries at a depth below this value get their nested list; deeper
        entries are collapsed unless auto-expansion applies
    auto_expand : bool, default = False
        Always expand the ancestors of the active page, and expand below the
        active page itself
    max_expand_depth : int, default = 1
        Number of levels beyond ``max_depth`` unlocked below the active page
        while auto-expanding

    Examples
    --------
        >>> options = TocOptions(max_depth=2, auto_expand=True)
        >>> options.create_updated(ordered=False).ordered
        False

    """

    include_pages: bool = field(
        default=DEFAULT_INCLUDE_PAGES,
        metadata={"help": "Include entries for sub-pages", "importance": "core"},
    )
    include_headers: bool = field(
        default=DEFAULT_INCLUDE_HEADERS,
        metadata={"help": "Include entries for in-page section headers", "importance": "core"},
    )
    ordered: bool = field(
        default=DEFAULT_ORDERED,
        metadata={"help": "Render numbered lists instead of bulleted lists", "importance": "core"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Depth below which entries are expanded", "type": int, "importance": "core"},
    )
    auto_expand: bool = field(
        default=DEFAULT_AUTO_EXPAND,
        metadata={"help": "Expand entries along the path to the active page", "importance": "advanced"},
    )
    max_expand_depth: int = field(
        default=DEFAULT_MAX_EXPAND_DEPTH,
        metadata={
            "help": "Levels unlocked below the active page when auto-expanding",
            "type": int,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option types and numeric ranges.

        Raises
        ------
        ValidationError
            If a flag is not a bool, or a depth is not a non-negative int.

        """
        for name in ("include_pages", "include_headers", "ordered", "auto_expand"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValidationError(
                    f"{name} must be a bool, got {type(value).__name__}",
                    parameter_name=name,
                    parameter_value=value,
                )

        for name in ("max_depth", "max_expand_depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    f"{name} must be an int, got {type(value).__name__}",
                    parameter_name=name,
                    parameter_value=value,
                )
            if value < 0:
                raise ValidationError(
                    f"{name} must be non-negative, got {value}",
                    parameter_name=name,
                    parameter_value=value,
                )

    @staticmethod
    def normalize_key(key: str) -> str:
        """Convert a camelCase or kebab-case option key to snake_case.

        Examples
        --------
            >>> TocOptions.normalize_key("maxExpandDepth")
            'max_expand_depth'
            >>> TocOptions.normalize_key("include-pages")
            'include_pages'

        """
        return _CAMEL_BOUNDARY.sub("_", key).replace("-", "_").lower()

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> TocOptions:
        """Build options from a configuration mapping.

        Parameters
        ----------
        config : Mapping[str, Any]
            Option values keyed by snake_case, camelCase, or kebab-case name

        Returns
        -------
        TocOptions
            Options with defaults for absent keys

        Raises
        ------
        ValidationError
            If a key is not a known option, or a value is invalid

        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in config.items():
            name = cls.normalize_key(str(key))
            if name not in known:
                raise ValidationError(
                    f"Unknown table of contents option: {key!r}. Valid options: {', '.join(sorted(known))}",
                    parameter_name=str(key),
                    parameter_value=value,
                )
            values[name] = value
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the options as a snake_case dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options."""


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Options for rendering table of contents lists as HTML.

    Parameters
    ----------
    active_class : str, default = "active"
        CSS class put on the link to the active page
    escape_html : bool, default = True
        Escape HTML special characters in text and attributes

    """

    active_class: str = field(
        default=DEFAULT_ACTIVE_LINK_CLASS,
        metadata={"help": "CSS class for the link to the active page", "importance": "core"},
    )
    escape_html: bool = field(
        default=True,
        metadata={"help": "Escape HTML special characters in text", "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate the active link class.

        Raises
        ------
        ValidationError
            If ``active_class`` is empty or contains whitespace.

        """
        if not self.active_class or any(char.isspace() for char in self.active_class):
            raise ValidationError(
                f"active_class must be a single non-empty CSS class, got {self.active_class!r}",
                parameter_name="active_class",
                parameter_value=self.active_class,
            )


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Options for rendering table of contents lists as Markdown.

    Parameters
    ----------
    bullet_symbol : {"-", "*", "+"}, default = "-"
        Marker for unordered list items
    bold_active_link : bool, default = True
        Wrap the link to the active page in ``**``

    """

    bullet_symbol: BulletSymbol = field(
        default=DEFAULT_BULLET_SYMBOL,
        metadata={"help": "Marker for unordered list items", "choices": ["-", "*", "+"], "importance": "core"},
    )
    bold_active_link: bool = field(
        default=True,
        metadata={"help": "Render the link to the active page in bold", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the bullet symbol.

        Raises
        ------
        ValidationError
            If ``bullet_symbol`` is not one of ``-``, ``*``, ``+``.

        """
        if self.bullet_symbol not in ("-", "*", "+"):
            raise ValidationError(
                f"bullet_symbol must be one of '-', '*', '+', got {self.bullet_symbol!r}",
                parameter_name="bullet_symbol",
                parameter_value=self.bullet_symbol,
            )


__all__ = [
    "CloneFrozenMixin",
    "TocOptions",
    "BaseRendererOptions",
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
]
