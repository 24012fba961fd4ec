#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ATHYG catalog reader and multi-file loader

Parses ATHYG CSV files into the frozen record types of
:mod:`pyathyg.models.records`, using the column layout of one schema
version.

Processing Steps
----------------
For every source, in order:

1. Read the whole file through the text-reader collaborator.
2. Discard the header line without parsing it.
3. For every data line: split on commas, drop columns beyond the
   version's count, require exactly that many columns, fix the fields to
   a tuple, and build the record.

Failure Policy
--------------
A missing file or a short line aborts the whole load.  Nothing is
returned for sources that parsed successfully before the failure.

References
----------
.. [1] ATHYG database: https://github.com/astronexus/ATHYG-Database
"""

from __future__ import annotations

import concurrent.futures
import functools
import logging
import os
from pathlib import Path
from typing import Callable, Iterable

from pyathyg.io.files import read_all_text
from pyathyg.io.progress import (
    LoggingProgress,
    ProgressObserver,
    notify_finished,
    notify_started,
)
from pyathyg.models.records import StarRecord
from pyathyg.readers.base import BaseReader
from pyathyg.readers.schemas import RecordSchema, get_schema
from pyathyg.utils.constants import ATHYG_DELIMITER, ATHYG_HEADER_LINES, DEFAULT_ENCODING
from pyathyg.utils.parsing import iter_data_lines, split_fields, to_fixed
from pyathyg.utils.validation import truncate_fields, validate_field_count

logger = logging.getLogger(__name__)

TextReader = Callable[[Path], str]
"""Callable returning the full text of a source or raising InvalidPathError."""


class ATHYGReader(BaseReader):
    """Reader for ATHYG catalog CSV files of one version

    Parameters
    ----------
    version : int | str | type | RecordSchema
        Catalog version, resolved with
        :func:`~pyathyg.readers.schemas.get_schema`.
    encoding : str, optional
        Text encoding of the files.  Ignored when *text_reader* is given.
    text_reader : TextReader, optional
        Replacement for :func:`~pyathyg.io.files.read_all_text`.

    Examples
    --------
    >>> reader = ATHYGReader(3)
    >>> stars = reader.read("athyg_v31-1.csv")
    >>> stars[0].proper
    'Sol'
    """

    def __init__(
        self,
        version,
        *,
        encoding: str = DEFAULT_ENCODING,
        text_reader: TextReader | None = None,
    ) -> None:
        self.schema: RecordSchema = get_schema(version)
        self._read_text = text_reader or functools.partial(read_all_text, encoding=encoding)

    def read(self, path: Path | str) -> list[StarRecord]:
        """Parse one ATHYG CSV file

        Raises
        ------
        InvalidPathError
            If the text reader cannot provide the file.
        FieldCountMismatchError
            If a data line has fewer columns than the version requires.
        """
        filepath = Path(path)
        text = self._read_text(filepath)
        records = self.parse_text(text, path=filepath)
        logger.debug(
            "ATHYG V%d parse complete for %s: %d records",
            self.schema.version,
            filepath,
            len(records),
        )
        return records

    def parse_text(self, text: str, *, path: Path | None = None) -> list[StarRecord]:
        """Parse the full text of one catalog file, header line included

        *path* is only used in error messages.
        """
        schema = self.schema
        count = schema.element_count
        records: list[StarRecord] = []

        for line_number, line in iter_data_lines(text, ATHYG_HEADER_LINES):
            fields = truncate_fields(split_fields(line, ATHYG_DELIMITER), count)
            validate_field_count(fields, count, path=path, line_number=line_number)
            records.append(schema.build(to_fixed(fields, count)))

        return records


def load_catalog(
    version,
    paths: Iterable[Path | str] | Path | str,
    *,
    workers: int = 1,
    progress: ProgressObserver | None = None,
    encoding: str = DEFAULT_ENCODING,
    text_reader: TextReader | None = None,
) -> list[StarRecord]:
    """Load and merge ATHYG catalog files of one version

    Parameters
    ----------
    version : int | str | type | RecordSchema
        Catalog version (V1, V2 or V3) shared by all files.
    paths : Iterable[Path | str] | Path | str
        Catalog files, or a single file.
    workers : int, optional
        Number of threads parsing files concurrently.  ``1`` (default)
        parses sequentially.  The result order is the same either way.
    progress : ProgressObserver, optional
        Receives ``started`` / ``finished`` events per file.  Defaults to
        :class:`~pyathyg.io.progress.LoggingProgress`.
    encoding : str, optional
        Text encoding of the files.
    text_reader : TextReader, optional
        Replacement for :func:`~pyathyg.io.files.read_all_text`.

    Returns
    -------
    list[StarRecord]
        Records of every file, in file order and then line order.

    Raises
    ------
    SchemaError
        If *version* is not V1, V2 or V3.
    InvalidPathError
        If any file does not exist or cannot be opened.
    FieldCountMismatchError
        If any data line has fewer columns than the version requires.
        With several failures, the one from the earliest file is raised.
    """
    reader = ATHYGReader(version, encoding=encoding, text_reader=text_reader)
    observer = progress if progress is not None else LoggingProgress()

    if isinstance(paths, (str, os.PathLike)):
        paths = [paths]
    sources = [Path(p) for p in paths]

    def _load_source(source: Path) -> list[StarRecord]:
        notify_started(observer, source)
        records = reader.read(source)
        notify_finished(observer, source, len(records))
        return records

    if workers <= 1 or len(sources) <= 1:
        chunks = [_load_source(source) for source in sources]
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=int(workers)) as pool:
            chunks = list(pool.map(_load_source, sources))

    result: list[StarRecord] = []
    for chunk in chunks:
        result.extend(chunk)

    logger.debug(
        "Loaded %d ATHYG V%d records from %d file(s)",
        len(result),
        reader.schema.version,
        len(sources),
    )
    return result
