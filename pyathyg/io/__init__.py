#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
I/O collaborators of the catalog loader

* :mod:`pyathyg.io.files` - whole-file text reading.
* :mod:`pyathyg.io.progress` - per-source progress observers.
"""

from __future__ import annotations

from pyathyg.io.files import read_all_text
from pyathyg.io.progress import LoggingProgress, NullProgress, ProgressObserver

__all__ = ["read_all_text", "LoggingProgress", "NullProgress", "ProgressObserver"]
