#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for ATHYG catalog records

All models are frozen ``dataclasses`` holding decoded scalar values.
They are the sole output format of the reader layer and the sole input
format accepted by the converter layer.
"""

from __future__ import annotations

from pyathyg.models.records import (
    StarRecord,
    StarV1,
    StarV2,
    StarV3,
)

__all__ = [
    "StarRecord",
    "StarV1",
    "StarV2",
    "StarV3",
]
