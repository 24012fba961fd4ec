#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Catalog-format constants for the ATHYG star database

All values that describe the on-disk layout of ATHYG CSV files live here,
so that readers, schemas, and the CLI agree on a single definition.

References
----------
.. [1] ATHYG database: https://github.com/astronexus/ATHYG-Database
.. [2] ATHYG version info:
       https://github.com/astronexus/ATHYG-Database/blob/main/version-info.md
"""

from __future__ import annotations

import numpy as np

# ---------------------------------------------------------------------------
# File layout
# ---------------------------------------------------------------------------

ATHYG_DELIMITER: str = ","
"""Field separator used by every ATHYG CSV file."""

ATHYG_HEADER_LINES: int = 1
"""Number of leading lines skipped without parsing (the column header)."""

DEFAULT_ENCODING: str = "utf-8"
"""Text encoding assumed when reading catalog files."""

# ---------------------------------------------------------------------------
# Field coercion
# ---------------------------------------------------------------------------

TRUTHY_TOKENS: frozenset[str] = frozenset({"true", "t", "1"})
"""Lower-cased tokens that decode to ``True`` for boolean fields."""

C_WHITESPACE: str = " \t\n\v\f\r"
"""Characters skipped before a numeral, as C's ``isspace`` in the "C" locale."""

DEFAULT_UNSIGNED_DTYPE = np.uint64
DEFAULT_SIGNED_DTYPE = np.int64
DEFAULT_FLOAT_DTYPE = np.float64
