#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for PyATHYG tests

Provides synthetic ATHYG lines and catalog files for testing the parser,
the schemas, and the loader without requiring the real catalog.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pyathyg.readers.schemas import get_schema


class RecordingProgress:
    """Progress observer that remembers every event"""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def started(self, path: Path) -> None:
        self.events.append(("started", path.name))

    def finished(self, path: Path, count: int) -> None:
        self.events.append(("finished", path.name, count))


@pytest.fixture
def make_line():
    """Build a data line for a version from ``attribute=value`` pairs

    Columns not named are left empty.  ``extra`` appends surplus columns.
    """

    def _make_line(version, extra: tuple[str, ...] = (), **values: str) -> str:
        schema = get_schema(version)
        unknown = set(values) - set(schema.names)
        assert not unknown, f"unknown columns {unknown}"
        fields = [values.get(name, "") for name in schema.names]
        return ",".join(fields + list(extra))

    return _make_line


@pytest.fixture
def make_header():
    def _make_header(version) -> str:
        return ",".join(get_schema(version).names)

    return _make_header


@pytest.fixture
def write_catalog(tmp_path, make_header):
    """Write a catalog file (header plus *lines*) and return its path"""

    def _write(name: str, version, lines: list[str], *, trailing_newline: bool = True) -> Path:
        text = "\n".join([make_header(version)] + lines)
        if trailing_newline:
            text += "\n"
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sol_v3(make_line) -> str:
    """V3 line for the Sun, in the shape of the published catalog"""
    return make_line(
        3,
        id="0",
        hyg="0",
        proper="Sol",
        ra="0.0",
        dec="0.0",
        pos_src="HYG",
        dist="0.0",
        x0="0.000005",
        y0="0.0",
        z0="0.0",
        dist_src="NONE",
        mag="-26.7",
        absmag="4.85",
        ci="0.656",
        mag_src="NONE",
        rv="0.0",
        rv_src="NONE",
        pm_ra="0.0",
        pm_dec="0.0",
        vx="0.0",
        vy="0.0",
        vz="0.0",
        spect_src="G2V",
    )


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()
