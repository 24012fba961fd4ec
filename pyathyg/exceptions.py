#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyATHYG package

All exceptions raised by PyATHYG inherit from :class:`PyATHYGError`, making it
possible to catch every library-specific error with a single ``except`` clause
while still allowing fine-grained handling when needed.

A field that cannot be decoded is never an error: it becomes ``None`` on the
record.  Only structural problems (missing files, short lines) raise.

Exception Hierarchy
-------------------
::

    PyATHYGError
    ├── InvalidPathError            # Source missing or cannot be opened
    ├── ParseError                  # Malformed catalog content
    │   └── FieldCountMismatchError # Data line has too few fields
    ├── SizeMismatchError           # Fixed-width contract violation
    └── SchemaError                 # Unknown version or bad descriptor
"""

from __future__ import annotations

from pathlib import Path


class PyATHYGError(Exception):
    """Base exception for all PyATHYG errors

    Every exception raised by PyATHYG is a subclass of this type.
    Catching ``PyATHYGError`` therefore catches any library-specific failure
    while still allowing standard Python exceptions (``KeyError``,
    ``TypeError``, etc.) to propagate normally.
    """


class InvalidPathError(PyATHYGError):
    """Raised when a catalog source does not exist or cannot be opened

    Fatal to the whole load: no records are returned.

    Parameters
    ----------
    message : str
        Description of the failure, including the offending path.
    """


class ParseError(PyATHYGError):
    """Raised when a catalog file contains structurally malformed content"""


class FieldCountMismatchError(ParseError):
    """Raised when a data line has fewer fields than the schema requires

    Surplus fields are silently dropped before this check, so the error
    only ever reports a short line.  It aborts the whole load; there is
    no per-line skipping.

    Parameters
    ----------
    path : Path | str | None
        Catalog file that contains the line, if known.
    line_number : int | None
        1-based line number within the file (the header is line 1).
    expected : int
        Field count required by the schema version.
    actual : int
        Field count found on the line.
    """

    def __init__(
        self,
        path: Path | str | None,
        line_number: int | None,
        expected: int,
        actual: int,
    ) -> None:
        self.path = None if path is None else Path(path)
        self.line_number = line_number
        self.expected = expected
        self.actual = actual

        where = ""
        if self.path is not None:
            where = f" in {self.path}"
        if line_number is not None:
            where += f" at line {line_number}"
        super().__init__(
            f"Number of fields not consistent with ATHYG version{where}: "
            f"expected {expected}, found {actual}."
        )


class SizeMismatchError(PyATHYGError):
    """Raised when a field sequence cannot be fixed to the requested width

    The loader validates field counts before materialising, so reaching
    this error from the loader indicates a bug.  Callers that use
    :func:`~pyathyg.utils.parsing.to_fixed` directly get it for any
    length mismatch.
    """


class SchemaError(PyATHYGError):
    """Raised for an unknown catalog version or an inconsistent descriptor

    This covers version identifiers other than V1/V2/V3, schema
    descriptors whose positions are not contiguous from zero or whose
    attribute names disagree with the record type, and mixing record
    versions where one version is required.
    """
