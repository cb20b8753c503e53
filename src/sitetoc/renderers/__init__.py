#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/renderers/__init__.py
"""Renderers turning table of contents lists into markup."""

from sitetoc.renderers.base import BaseRenderer, InlineContentMixin
from sitetoc.renderers.html import HtmlRenderer
from sitetoc.renderers.markdown import MarkdownRenderer

__all__ = [
    "BaseRenderer",
    "InlineContentMixin",
    "HtmlRenderer",
    "MarkdownRenderer",
]
