#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgwiki/utils/io_utils.py
"""I/O utilities for handling output destinations.

This module writes rendered text to files, text streams or binary streams,
encoding with the configured output coding where bytes are needed.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def _is_binary_stream(output: object) -> bool:
    """Detect whether a file-like object expects bytes."""
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, (StringIO, io.TextIOBase)):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(
    content: str, output: Union[str, Path, IO[bytes], IO[str]], encoding: str = "utf-8"
) -> None:
    """Write rendered text to an output destination.

    Parameters
    ----------
    content : str
        Rendered text
    output : str, Path, IO[bytes] or IO[str]
        File path, binary stream or text stream
    encoding : str, default "utf-8"
        Encoding used for file paths and binary streams. Text streams receive
        the string as is.

    Raises
    ------
    TypeError
        If ``output`` is not a supported destination
    UnicodeEncodeError
        If ``content`` cannot be represented in ``encoding``
    OSError
        If the file cannot be written

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("café", buffer, encoding="latin-1")
        >>> buffer.getvalue()
        b'caf\\xe9'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_bytes(content.encode(encoding))
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode(encoding))
    else:
        cast(IO[str], output).write(content)


__all__ = ["write_content"]
