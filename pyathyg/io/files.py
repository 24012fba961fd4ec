#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Whole-file text reader for catalog sources

The loader never opens files itself; it calls a reader with the
signature ``(path) -> str``.  :func:`read_all_text` is the default.
Tests and callers with other storage may pass any callable with the same
contract: return the complete text, or raise
:class:`~pyathyg.exceptions.InvalidPathError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pyathyg.exceptions import InvalidPathError
from pyathyg.utils.constants import DEFAULT_ENCODING

logger = logging.getLogger(__name__)


def read_all_text(path: Path | str, encoding: str = DEFAULT_ENCODING) -> str:
    """Read the full content of a catalog file

    Universal newlines are applied, so ``"\\r\\n"`` line endings read as
    ``"\\n"``.

    Parameters
    ----------
    path : Path | str
        Catalog file to read.
    encoding : str, optional
        Text encoding.  Default ``"utf-8"``.

    Returns
    -------
    str
        The file content.

    Raises
    ------
    InvalidPathError
        If *path* is not an existing file, or it cannot be opened or
        decoded.
    """
    filepath = Path(path)
    logger.debug("Opening catalog file: %s", filepath)

    if not filepath.is_file():
        raise InvalidPathError(f"Path is not valid: {filepath}")

    try:
        return filepath.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidPathError(f"Failed to read {filepath}: {exc}") from exc
