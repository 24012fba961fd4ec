#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Structural validation routines for ATHYG catalog data

Every validation function raises a :mod:`pyathyg.exceptions` error when a
constraint is violated.  Readers call them while parsing; schema
descriptors call them once, when they are defined.

Checked Constraints
-------------------
* A data line carries at least as many fields as its schema version.
* Schema positions are 0-indexed and contiguous, without duplicates.
* Schema attribute names match the record type's fields, in order.

Design Note
-----------
Validation functions accept plain sequences and scalars, **not** record
instances, so that the ``models`` layer does not depend on ``utils``::

    utils ← models ← readers ← converters
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from pyathyg.exceptions import FieldCountMismatchError, SchemaError

logger = logging.getLogger(__name__)


def truncate_fields(fields: list[str], expected: int) -> list[str]:
    """Drop fields beyond *expected* in place and return the list

    Surplus trailing columns are silently discarded; they never reach a
    record.
    """
    if len(fields) > expected:
        del fields[expected:]
    return fields


def validate_field_count(
    fields: Sequence[str],
    expected: int,
    *,
    path: Path | str | None = None,
    line_number: int | None = None,
) -> None:
    """Verify that a (truncated) data line has exactly *expected* fields

    Parameters
    ----------
    fields : Sequence[str]
        Fields of one data line, after surplus fields were dropped.
    expected : int
        Field count required by the schema version.
    path : Path | str | None, optional
        Source file, used in the error message.
    line_number : int | None, optional
        1-based line number, used in the error message.

    Raises
    ------
    FieldCountMismatchError
        If ``len(fields) != expected``.
    """
    if len(fields) != expected:
        raise FieldCountMismatchError(path, line_number, expected, len(fields))


def validate_positions(positions: Sequence[int], label: str = "schema") -> None:
    """Verify that field positions are exactly ``0, 1, ..., n - 1``

    Raises
    ------
    SchemaError
        If a position is missing, duplicated, or out of order.

    Examples
    --------
    >>> validate_positions([0, 1, 2])
    >>> validate_positions([0, 2])  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pyathyg.exceptions.SchemaError: ...
    """
    for expected, actual in enumerate(positions):
        if actual != expected:
            raise SchemaError(
                f"Positions of '{label}' are not contiguous from 0: "
                f"expected {expected}, found {actual}."
            )
    logger.debug("Positions of '%s' (%d fields) passed validation.", label, len(positions))


def validate_attribute_names(
    names: Sequence[str],
    record_fields: Sequence[str],
    label: str = "schema",
) -> None:
    """Verify that schema attribute names equal the record fields in order

    Raises
    ------
    SchemaError
        If the two name lists differ in content or order.
    """
    if tuple(names) != tuple(record_fields):
        missing = [n for n in record_fields if n not in names]
        extra = [n for n in names if n not in record_fields]
        raise SchemaError(
            f"Attributes of '{label}' do not match the record type: "
            f"missing={missing}, unexpected={extra}."
        )
