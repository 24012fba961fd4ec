#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Columnar NumPy view of parsed catalog records

Turns a list of records of one version into one array per attribute,
in schema column order, for vectorised analysis.  Nothing is written to
disk.

Column Layout
-------------
::

    integer columns   numpy.ma.MaskedArray  uint64 / int64, masked where absent
    float columns     numpy.ndarray         float64, NaN where absent
    bool columns      numpy.ndarray         bool
    text columns      numpy.ndarray         object (Python str)

Integer columns are masked rather than NaN-filled because catalog
identifiers such as ``gaia`` exceed the exact range of ``float64``.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from pyathyg.exceptions import SchemaError
from pyathyg.models.records import StarRecord
from pyathyg.readers.schemas import FieldSpec, RecordSchema, get_schema
from pyathyg.utils.parsing import FieldKind

logger = logging.getLogger(__name__)


def _column_array(spec: FieldSpec, values: list) -> np.ndarray:
    if spec.kind in (FieldKind.UNSIGNED_INT, FieldKind.SIGNED_INT):
        mask = np.fromiter((v is None for v in values), dtype=bool, count=len(values))
        data = np.array([0 if v is None else v for v in values], dtype=spec.dtype)
        return np.ma.MaskedArray(data, mask=mask)

    if spec.kind == FieldKind.FLOAT:
        return np.array(
            [math.nan if v is None else v for v in values],
            dtype=spec.dtype,
        )

    if spec.kind == FieldKind.BOOL:
        return np.array(values, dtype=bool)

    arr = np.empty(len(values), dtype=object)
    arr[:] = values
    return arr


def _resolve_schema(records: Sequence[StarRecord], schema) -> RecordSchema:
    if records:
        resolved = get_schema(type(records[0]))
        if schema is not None and get_schema(schema) is not resolved:
            raise SchemaError(
                f"Records are V{resolved.version} but V{get_schema(schema).version} "
                f"was requested."
            )
    elif schema is not None:
        resolved = get_schema(schema)
    else:
        raise SchemaError("A schema is required when no records are given.")

    record_type = resolved.record_type
    for index, record in enumerate(records):
        if type(record) is not record_type:
            raise SchemaError(
                f"Record {index} is {type(record).__name__}, expected "
                f"{record_type.__name__}; versions cannot be mixed."
            )
    return resolved


def records_to_columns(
    records: Sequence[StarRecord],
    *,
    schema: RecordSchema | int | str | None = None,
) -> dict[str, np.ndarray]:
    """Convert records of one catalog version into per-attribute arrays

    Parameters
    ----------
    records : Sequence[StarRecord]
        Records returned by :func:`~pyathyg.readers.athyg.load_catalog`.
    schema : RecordSchema | int | str, optional
        Expected version.  Required when *records* is empty; otherwise
        taken from the first record and, if given, checked against it.

    Returns
    -------
    dict[str, numpy.ndarray]
        One array of length ``len(records)`` per attribute, keyed by
        attribute name in column order.

    Raises
    ------
    SchemaError
        If records of different versions are mixed, if they do not match
        *schema*, or if *records* is empty and *schema* is not given.

    Examples
    --------
    >>> cols = records_to_columns(load_catalog(1, ["athyg_v1.csv"]))
    >>> cols["mag"].dtype
    dtype('float64')
    """
    resolved = _resolve_schema(records, schema)

    columns = {
        spec.name: _column_array(spec, [getattr(r, spec.name) for r in records])
        for spec in resolved.columns
    }
    logger.debug(
        "Built %d V%d columns for %d records",
        len(columns),
        resolved.version,
        len(records),
    )
    return columns


def present_counts(records: Sequence[StarRecord], *, schema=None) -> dict[str, int]:
    """Count, per attribute, the records holding a present value

    Counts are taken from the records rather than from
    :func:`records_to_columns`, so a decoded ``nan`` counts as present
    and text attributes, which are never absent, count every record.
    """
    resolved = _resolve_schema(records, schema)
    return {
        spec.name: sum(getattr(r, spec.name) is not None for r in records)
        for spec in resolved.columns
    }
