#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Converters from parsed records to analysis-friendly structures

* :func:`~pyathyg.converters.columns.records_to_columns` - one NumPy
  array per attribute.
* :func:`~pyathyg.converters.columns.present_counts` - per-attribute
  count of records holding a value.
"""

from __future__ import annotations

from pyathyg.converters.columns import present_counts, records_to_columns

__all__ = ["records_to_columns", "present_counts"]
