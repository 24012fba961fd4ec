#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Progress observers notified while catalog sources are parsed

An observer is any object with ``started(path)`` and
``finished(path, count)`` methods.  The loader calls them around each
source; their return values are ignored and any exception they raise is
logged and swallowed, so an observer can never change a parse result.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class ProgressObserver(Protocol):
    """Receiver of per-source progress events"""

    def started(self, path: Path) -> None:
        ...

    def finished(self, path: Path, count: int) -> None:
        ...


class LoggingProgress:
    """Report progress through the ``pyathyg`` logger at INFO level"""

    def started(self, path: Path) -> None:
        logger.info('Parsing "%s"...', path)

    def finished(self, path: Path, count: int) -> None:
        logger.info('Done "%s" (%d records).', path, count)


class NullProgress:
    """Discard all progress events"""

    def started(self, path: Path) -> None:
        pass

    def finished(self, path: Path, count: int) -> None:
        pass


def notify_started(observer: ProgressObserver, path: Path) -> None:
    try:
        observer.started(path)
    except Exception:
        logger.warning("Progress observer failed on start of %s", path, exc_info=True)


def notify_finished(observer: ProgressObserver, path: Path, count: int) -> None:
    try:
        observer.finished(path, count)
    except Exception:
        logger.warning("Progress observer failed on end of %s", path, exc_info=True)
