#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for parsing and validation

This sub-package centralises the low-level line splitting, field
coercion, and structural validation routines so that no logic is
duplicated between the schema builder and the readers.
"""

from __future__ import annotations
