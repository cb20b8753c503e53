#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/sitetoc/renderers/base.py
"""Base classes for AST renderers.

Renderers turn a table of contents (or any node of the supported subset)
into markup a site generator can splice into a page.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from sitetoc.ast.nodes import Node
from sitetoc.exceptions import ValidationError
from sitetoc.options import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, node: Node) -> str:
        """Render a node to a string.

        Parameters
        ----------
        node : Node
            Node to render, typically the List returned by a TableOfContents

        Returns
        -------
        str
            Rendered markup

        """
        pass

    def render(self, node: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a node and write the result to a file or stream.

        Parameters
        ----------
        node : Node
            Node to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination. Paths are written as UTF-8.

        """
        self.write_text_output(self.render_to_string(node), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        ValidationError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise ValidationError(
                f"{renderer_name} renderer expects {expected_type.__name__}, got {type(options).__name__}",
                parameter_name="options",
                parameter_value=options,
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("- [Home](index.html)", buffer)
            >>> buffer.getvalue()
            '- [Home](index.html)'

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
            return

        try:
            output.write(text)  # type: ignore[arg-type]
        except TypeError:
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]


class InlineContentMixin:
    """Mixin providing inline content rendering for text-based renderers.

    The implementing class must have an ``_output`` list that its visitor
    methods append to.
    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of inline nodes to text.

        Temporarily captures the output produced by the nodes and returns it
        as a string.

        Parameters
        ----------
        content : list of Node
            Inline nodes to render

        Returns
        -------
        str
            Rendered inline content

        """
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
