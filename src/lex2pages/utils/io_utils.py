#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/utils/io_utils.py
"""I/O utilities for handling output destinations."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_text(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text to a file path or a text/binary file-like object.

    Parameters
    ----------
    content : str
        Text to write, encoded as UTF-8 for paths and binary streams
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    Raises
    ------
    TypeError
        If output type is not supported

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_text("<p>Hi</p>", buffer)
        >>> buffer.getvalue()
        b'<p>Hi</p>'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO) or isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)


__all__ = ["write_text"]
