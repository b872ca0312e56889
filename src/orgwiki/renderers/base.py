#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/renderers/base.py
"""Base classes for node renderers.

This module defines the base class node renderers inherit from. A renderer
holds the options it was built with and provides the handlers the exporter
calls; it does not walk the tree itself.

"""

from __future__ import annotations

from abc import ABC
from pathlib import Path
from typing import IO, Union

from orgwiki.exceptions import InvalidOptionsError
from orgwiki.options.base import BaseRendererOptions
from orgwiki.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(
        text: str, output: Union[str, Path, IO[bytes], IO[str]], encoding: str = "utf-8"
    ) -> None:
        """Write text output to file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination
        encoding : str, default "utf-8"
            Encoding for files and binary streams

        Examples
        --------
        Write to BytesIO:
            >>> from io import BytesIO
            >>> buffer = BytesIO()
            >>> BaseRenderer.write_text_output('"Hello"', buffer)
            >>> print(buffer.getvalue())
            b'"Hello"'

        """
        write_content(text, output, encoding=encoding)
