#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the ATHYG reader and multi-file loader

Covers per-line coercion, surplus-column truncation, fatal short lines,
multi-file ordering, threaded loading, progress reporting, and the file
reader collaborator.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

import pytest

from pyathyg import load_catalog
from pyathyg.exceptions import (
    FieldCountMismatchError,
    InvalidPathError,
    ParseError,
    PyATHYGError,
    SchemaError,
)
from pyathyg.io.files import read_all_text
from pyathyg.io.progress import NullProgress
from pyathyg.models.records import StarV1, StarV2, StarV3
from pyathyg.readers.athyg import ATHYGReader

EXAMPLE_V1_LINE = "1,,100,,,,,,,,,,10.5,20.5,,,,,,,,5.2,,"


# -----------------------------------------------------------------------
# Single file
# -----------------------------------------------------------------------

class TestReadV1:
    """Reading version 1 files"""

    def test_example_line(self, write_catalog) -> None:
        path = write_catalog("v1.csv", 1, [EXAMPLE_V1_LINE])
        stars = ATHYGReader(1).read(path)

        assert len(stars) == 1
        star = stars[0]
        assert isinstance(star, StarV1)
        assert star.id == 1
        assert star.tyc == ""
        assert star.gaia == 100
        assert star.ra == pytest.approx(10.5)
        assert star.dec == pytest.approx(20.5)
        # column 21 of the line is absmag; the 24th column is surplus
        assert star.absmag == pytest.approx(5.2)
        assert star.mag is None

        numeric = {"hyg", "hip", "hd", "hr", "dist", "x0", "y0", "z0"}
        text = {"gl", "bayer", "flam", "con", "proper", "pos_src", "dist_src", "mag_src"}
        for name in numeric:
            assert getattr(star, name) is None, name
        for name in text:
            assert getattr(star, name) == "", name

    def test_header_is_not_parsed(self, tmp_path, make_line) -> None:
        path = tmp_path / "v1.csv"
        path.write_text("this,is,not,a,star\n" + make_line(1, id="3") + "\n")
        stars = ATHYGReader(1).read(path)
        assert [s.id for s in stars] == [3]

    def test_last_line_without_newline(self, write_catalog, make_line) -> None:
        lines = [make_line(1, id="1"), make_line(1, id="2")]
        path = write_catalog("v1.csv", 1, lines, trailing_newline=False)
        assert [s.id for s in ATHYGReader(1).read(path)] == [1, 2]

    def test_crlf_line_endings(self, tmp_path, make_header, make_line) -> None:
        path = tmp_path / "v1.csv"
        text = "\r\n".join([make_header(1), make_line(1, id="1", mag_src="HYG")]) + "\r\n"
        path.write_bytes(text.encode("utf-8"))
        star = ATHYGReader(1).read(path)[0]
        assert star.mag_src == "HYG"

    def test_header_only(self, write_catalog) -> None:
        path = write_catalog("v1.csv", 1, [])
        assert ATHYGReader(1).read(path) == []

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.csv"
        path.write_text("")
        assert ATHYGReader(1).read(path) == []

    def test_unparseable_numeric_is_absent(self, write_catalog, make_line) -> None:
        path = write_catalog("v1.csv", 1, [make_line(1, hip="n/a", dist="far", mag="5.2x")])
        star = ATHYGReader(1).read(path)[0]
        assert star.hip is None
        assert star.dist is None
        assert star.mag == pytest.approx(5.2)


class TestTruncationAndMismatch:
    """Surplus columns and short lines"""

    def test_surplus_columns_dropped(self, write_catalog, make_line) -> None:
        line = make_line(1, id="1", mag_src="HYG", extra=("surplus", "99"))
        path = write_catalog("v1.csv", 1, [line])
        star = ATHYGReader(1).read(path)[0]
        assert star.mag_src == "HYG"
        values = dataclasses.astuple(star)
        assert "surplus" not in values
        assert 99 not in values

    def test_v3_line_read_as_v1_is_truncated(self, write_catalog, sol_v3) -> None:
        path = write_catalog("v3.csv", 1, [sol_v3])
        star = ATHYGReader(1).read(path)[0]
        assert isinstance(star, StarV1)
        assert star.proper == "Sol"
        assert star.mag_src == "0.656"

    def test_short_line_is_fatal(self, write_catalog, make_line) -> None:
        lines = [make_line(1, id="1"), ",".join(["0"] * 20)]
        path = write_catalog("v1.csv", 1, lines)
        with pytest.raises(FieldCountMismatchError) as info:
            ATHYGReader(1).read(path)
        assert info.value.expected == 23
        assert info.value.actual == 20
        assert info.value.line_number == 3
        assert info.value.path == path

    def test_blank_line_is_fatal(self, write_catalog, make_line) -> None:
        path = write_catalog("v1.csv", 1, [make_line(1, id="1"), "", make_line(1, id="2")])
        with pytest.raises(FieldCountMismatchError):
            ATHYGReader(1).read(path)

    def test_mismatch_is_a_parse_error(self) -> None:
        assert issubclass(FieldCountMismatchError, ParseError)
        assert issubclass(FieldCountMismatchError, PyATHYGError)


class TestReadV2V3:
    """Reading the wider versions"""

    def test_v3_sol(self, write_catalog, sol_v3) -> None:
        path = write_catalog("v3.csv", 3, [sol_v3])
        star = ATHYGReader("v3").read(path)[0]
        assert isinstance(star, StarV3)
        assert star.id == 0
        assert star.proper == "Sol"
        assert star.mag == pytest.approx(-26.7)
        assert star.absmag == pytest.approx(4.85)
        assert star.ci == pytest.approx(0.656)
        assert star.mag_src == "NONE"
        assert star.rv == 0.0
        assert star.pm_src is None
        assert star.spect is None
        assert star.spect_src == "G2V"
        assert star.gaia is None

    def test_v2(self, write_catalog, make_line) -> None:
        line = make_line(2, id="7", rv="-12.5", rv_src="GCRV", pm_ra="1.5", vz="0.25")
        star = ATHYGReader(StarV2).read(write_catalog("v2.csv", 2, [line]))[0]
        assert isinstance(star, StarV2)
        assert star.rv == pytest.approx(-12.5)
        assert star.rv_src == "GCRV"
        assert star.pm_ra == pytest.approx(1.5)
        assert star.vz == pytest.approx(0.25)

    def test_v2_line_too_short_for_v3(self, write_catalog, make_line) -> None:
        path = write_catalog("v2.csv", 2, [make_line(2, id="1")])
        with pytest.raises(FieldCountMismatchError) as info:
            ATHYGReader(3).read(path)
        assert info.value.actual == 33

    def test_parse_text_directly(self, make_header, make_line) -> None:
        text = make_header(1) + "\n" + make_line(1, id="5") + "\n"
        assert [s.id for s in ATHYGReader(1).parse_text(text)] == [5]


# -----------------------------------------------------------------------
# Multiple files
# -----------------------------------------------------------------------

class TestLoadCatalog:
    """Merging several files"""

    def test_source_then_line_order(self, write_catalog, make_line) -> None:
        a = write_catalog("a.csv", 1, [make_line(1, id="1"), make_line(1, id="2")])
        b = write_catalog("b.csv", 1, [make_line(1, id="3")])
        stars = load_catalog(1, [a, b], progress=NullProgress())
        assert [s.id for s in stars] == [1, 2, 3]

        stars = load_catalog(1, [b, a], progress=NullProgress())
        assert [s.id for s in stars] == [3, 1, 2]

    def test_single_path(self, write_catalog, make_line) -> None:
        path = write_catalog("a.csv", 1, [make_line(1, id="1")])
        assert len(load_catalog(1, path, progress=NullProgress())) == 1
        assert len(load_catalog(1, str(path), progress=NullProgress())) == 1

    def test_no_paths(self) -> None:
        assert load_catalog(1, [], progress=NullProgress()) == []

    def test_idempotent(self, write_catalog, sol_v3) -> None:
        path = write_catalog("v3.csv", 3, [sol_v3, sol_v3])
        first = load_catalog(3, [path], progress=NullProgress())
        second = load_catalog(3, [path], progress=NullProgress())
        assert first == second
        assert first is not second

    def test_missing_file_fails_whole_load(self, write_catalog, make_line, tmp_path) -> None:
        good = write_catalog("good.csv", 1, [make_line(1, id="1")])
        with pytest.raises(InvalidPathError):
            load_catalog(1, [good, tmp_path / "missing.csv"], progress=NullProgress())

    def test_directory_is_invalid(self, tmp_path) -> None:
        with pytest.raises(InvalidPathError):
            load_catalog(1, [tmp_path], progress=NullProgress())

    def test_mismatch_in_later_file_fails_whole_load(self, write_catalog, make_line) -> None:
        good = write_catalog("good.csv", 1, [make_line(1, id="1")])
        bad = write_catalog("bad.csv", 1, ["1,2,3"])
        with pytest.raises(FieldCountMismatchError):
            load_catalog(1, [good, bad], progress=NullProgress())

    def test_unsupported_version(self, write_catalog, make_line) -> None:
        path = write_catalog("a.csv", 1, [make_line(1, id="1")])
        with pytest.raises(SchemaError):
            load_catalog(4, [path])

    def test_threaded_preserves_order(self, write_catalog, make_line) -> None:
        paths = [
            write_catalog(f"part{i}.csv", 2, [make_line(2, id=str(10 * i + j)) for j in range(5)])
            for i in range(6)
        ]
        sequential = load_catalog(2, paths, progress=NullProgress())
        threaded = load_catalog(2, paths, workers=4, progress=NullProgress())
        assert threaded == sequential
        assert [s.id for s in threaded] == [10 * i + j for i in range(6) for j in range(5)]

    def test_threaded_failure_raises(self, write_catalog, make_line, tmp_path) -> None:
        good = write_catalog("good.csv", 1, [make_line(1, id="1")])
        with pytest.raises(InvalidPathError):
            load_catalog(1, [good, tmp_path / "nope.csv", good], workers=3, progress=NullProgress())


class TestCollaborators:
    """Progress observer and text reader"""

    def test_progress_events(self, write_catalog, make_line, progress) -> None:
        a = write_catalog("a.csv", 1, [make_line(1, id="1"), make_line(1, id="2")])
        b = write_catalog("b.csv", 1, [])
        load_catalog(1, [a, b], progress=progress)
        assert progress.events == [
            ("started", "a.csv"),
            ("finished", "a.csv", 2),
            ("started", "b.csv"),
            ("finished", "b.csv", 0),
        ]

    def test_failing_observer_is_ignored(self, write_catalog, make_line, caplog) -> None:
        class Broken:
            def started(self, path):
                raise RuntimeError("console gone")

            def finished(self, path, count):
                raise RuntimeError("console gone")

        path = write_catalog("a.csv", 1, [make_line(1, id="1")])
        with caplog.at_level(logging.WARNING, logger="pyathyg"):
            stars = load_catalog(1, [path], progress=Broken())
        assert [s.id for s in stars] == [1]
        assert "Progress observer failed" in caplog.text

    def test_default_progress_logs(self, write_catalog, make_line, caplog) -> None:
        path = write_catalog("a.csv", 1, [make_line(1, id="1")])
        with caplog.at_level(logging.INFO, logger="pyathyg"):
            load_catalog(1, [path])
        assert "Parsing" in caplog.text
        assert "a.csv" in caplog.text

    def test_custom_text_reader(self, make_header, make_line) -> None:
        files = {
            "a.csv": make_header(1) + "\n" + make_line(1, id="1") + "\n",
            "b.csv": make_header(1) + "\n" + make_line(1, id="2"),
        }

        def reader(path: Path) -> str:
            try:
                return files[path.name]
            except KeyError:
                raise InvalidPathError(str(path)) from None

        stars = load_catalog(1, ["a.csv", "b.csv"], text_reader=reader, progress=NullProgress())
        assert [s.id for s in stars] == [1, 2]

        with pytest.raises(InvalidPathError):
            load_catalog(1, ["c.csv"], text_reader=reader, progress=NullProgress())

    def test_read_all_text_missing(self, tmp_path) -> None:
        with pytest.raises(InvalidPathError):
            read_all_text(tmp_path / "missing.csv")

    def test_read_all_text_bad_encoding(self, tmp_path) -> None:
        path = tmp_path / "latin.csv"
        path.write_bytes("h\nB\xe9ta\n".encode("latin-1"))
        with pytest.raises(InvalidPathError):
            read_all_text(path)
        assert read_all_text(path, encoding="latin-1") == "h\nBéta\n"

    def test_encoding_option(self, tmp_path, make_header, make_line) -> None:
        path = tmp_path / "latin.csv"
        text = make_header(1) + "\n" + make_line(1, id="1", proper="Bételgeuse") + "\n"
        path.write_bytes(text.encode("latin-1"))
        stars = load_catalog(1, [path], encoding="latin-1", progress=NullProgress())
        assert stars[0].proper == "Bételgeuse"
