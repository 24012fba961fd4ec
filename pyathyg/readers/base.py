#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract base class for catalog readers

Every concrete reader inherits from :class:`BaseReader` and implements
the :meth:`read` method, which returns the typed records of one source
file as models from :mod:`pyathyg.models`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pyathyg.models.records import StarRecord

logger = logging.getLogger(__name__)


class BaseReader(ABC):
    """Abstract base for delimited-text catalog readers

    Subclasses must override :meth:`read` to obtain the text of one
    source, delegate line handling to :mod:`pyathyg.utils.parsing`,
    validate structure via :mod:`pyathyg.utils.validation`, and return
    the records in line order.

    Notes
    -----
    Readers never aggregate several sources and never report progress;
    both are the responsibility of
    :func:`~pyathyg.readers.athyg.load_catalog`.  The dependency
    direction is::

        utils ← models ← readers ← converters
    """

    @abstractmethod
    def read(self, path: Path | str) -> list[StarRecord]:
        """Parse one catalog file and return its records

        Parameters
        ----------
        path : Path | str
            Filesystem path to the catalog file.

        Returns
        -------
        list[StarRecord]
            One record per data line, in file order.

        Raises
        ------
        InvalidPathError
            If the file does not exist or cannot be opened.
        FieldCountMismatchError
            If any data line has too few fields.
        """
        ...
