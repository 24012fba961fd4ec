#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
PyATHYG - Python library for reading the ATHYG star catalog

Parse the comma-delimited files of the ATHYG database (versions 1, 2 and
3) into immutable, strongly typed star records.

Pipeline
--------
1. **Split** each data line on commas.
2. **Check** the column count against the catalog version (surplus
   columns are dropped, missing columns abort the load).
3. **Coerce** every column into an ``int``, ``float`` or ``str``; empty or
   unparseable numeric columns become ``None``.
4. **Merge** the records of all files, in file order.

Modules
-------
readers
    Catalog reader, multi-file loader and V1/V2/V3 schemas.
models
    Frozen dataclass records returned by the readers.
converters
    Columnar NumPy view of parsed records.
io
    File reading and progress reporting collaborators.
utils
    Shared parsing helpers and validation logic.

Examples
--------
>>> from pyathyg import load_catalog
>>> stars = load_catalog(3, ["athyg_v31-1.csv", "athyg_v31-2.csv"])
>>> stars[0].proper
'Sol'
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pyathyg.models.records import StarRecord, StarV1, StarV2, StarV3
from pyathyg.readers.athyg import ATHYGReader, load_catalog
from pyathyg.readers.schemas import SCHEMA_V1, SCHEMA_V2, SCHEMA_V3, get_schema
from pyathyg.converters.columns import records_to_columns
from pyathyg.exceptions import (
    PyATHYGError,
    InvalidPathError,
    ParseError,
    FieldCountMismatchError,
    SizeMismatchError,
    SchemaError,
)

__all__ = [
    # Version
    "__version__",
    # Records
    "StarRecord",
    "StarV1",
    "StarV2",
    "StarV3",
    # Readers
    "ATHYGReader",
    "load_catalog",
    "SCHEMA_V1",
    "SCHEMA_V2",
    "SCHEMA_V3",
    "get_schema",
    # Converter
    "records_to_columns",
    # Exceptions
    "PyATHYGError",
    "InvalidPathError",
    "ParseError",
    "FieldCountMismatchError",
    "SizeMismatchError",
    "SchemaError",
]
