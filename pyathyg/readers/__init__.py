#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Readers for ATHYG catalog files

* :class:`~pyathyg.readers.athyg.ATHYGReader` - parses one CSV file.
* :func:`~pyathyg.readers.athyg.load_catalog` - loads and merges files.
* :mod:`~pyathyg.readers.schemas` - V1/V2/V3 column layouts.

All readers share the :class:`~pyathyg.readers.base.BaseReader` interface.
"""

from __future__ import annotations

from pyathyg.readers.athyg import ATHYGReader, load_catalog
from pyathyg.readers.schemas import (
    SCHEMA_V1,
    SCHEMA_V2,
    SCHEMA_V3,
    SUPPORTED_VERSIONS,
    FieldSpec,
    RecordSchema,
    get_schema,
)

__all__ = [
    "ATHYGReader",
    "load_catalog",
    "SCHEMA_V1",
    "SCHEMA_V2",
    "SCHEMA_V3",
    "SUPPORTED_VERSIONS",
    "FieldSpec",
    "RecordSchema",
    "get_schema",
]
