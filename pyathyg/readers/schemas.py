#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Declarative schema descriptors for the three ATHYG catalog versions

A :class:`RecordSchema` maps each column position to a target
:class:`~pyathyg.utils.parsing.FieldKind` and a record attribute.  One
generic routine, :meth:`RecordSchema.build`, turns a fixed-width field
tuple into a record for any version; there is no per-version
constructor code.

The descriptors are the single source of truth for column order.  The
CSV header row is never consulted.

Column Layout
-------------
* V1 - 23 columns, ``id`` … ``mag_src``.
* V2 - 33 columns, V1 followed by ``rv`` … ``spect_src``.
* V3 - 34 columns, V2 with ``ci`` inserted at position 22, shifting
  ``mag_src`` and every later column by one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Sequence

import numpy as np

from pyathyg.exceptions import SchemaError
from pyathyg.models.records import StarRecord, StarV1, StarV2, StarV3
from pyathyg.utils.parsing import DEFAULT_DTYPES, NUMERIC_KINDS, FieldKind, coerce_field
from pyathyg.utils.validation import validate_attribute_names, validate_positions

logger = logging.getLogger(__name__)

U = FieldKind.UNSIGNED_INT
F = FieldKind.FLOAT
T = FieldKind.TEXT

_DTYPE_KINDS = {
    FieldKind.UNSIGNED_INT: "u",
    FieldKind.SIGNED_INT: "i",
    FieldKind.FLOAT: "f",
}


@dataclass(frozen=True)
class FieldSpec:
    """One column of a schema: where it is, what it becomes, and how wide

    Parameters
    ----------
    position : int
        0-based column index in a data line.
    name : str
        Record attribute receiving the decoded value.
    kind : FieldKind
        Target value kind.
    dtype : numpy dtype | None
        Width for numeric kinds.  ``None`` selects the kind's default.
    """

    position: int
    name: str
    kind: FieldKind
    dtype: type | None = None

    def __post_init__(self) -> None:
        if self.kind in NUMERIC_KINDS:
            if self.dtype is None:
                object.__setattr__(self, "dtype", DEFAULT_DTYPES[self.kind])
            elif np.dtype(self.dtype).kind != _DTYPE_KINDS[self.kind]:
                raise SchemaError(
                    f"Column '{self.name}': dtype {np.dtype(self.dtype)} "
                    f"does not fit kind {self.kind.value}."
                )


@dataclass(frozen=True)
class RecordSchema:
    """Column layout of one ATHYG catalog version

    Parameters
    ----------
    version : int
        Catalog version number (1, 2 or 3).
    record_type : type
        Frozen dataclass built for each data line.
    columns : tuple[FieldSpec, ...]
        One spec per column, ordered by position.

    Raises
    ------
    SchemaError
        If positions are not contiguous from zero or the column names do
        not match the record type's fields in order.
    """

    version: int
    record_type: type
    columns: tuple[FieldSpec, ...]

    def __post_init__(self) -> None:
        label = f"V{self.version}"
        validate_positions([c.position for c in self.columns], label=label)
        validate_attribute_names(
            [c.name for c in self.columns],
            [f.name for f in fields(self.record_type)],
            label=label,
        )
        if self.record_type.element_count != len(self.columns):
            raise SchemaError(
                f"{label} declares {self.record_type.element_count} fields but "
                f"its schema has {len(self.columns)} columns."
            )

    @property
    def element_count(self) -> int:
        """Number of fields in a data line of this version."""
        return len(self.columns)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self.columns)

    def build(self, values: Sequence[str]) -> StarRecord:
        """Construct a record from a fixed-width field tuple

        Each column is coerced independently according to its spec; no
        column depends on another.  Given ``len(values) ==
        element_count`` (guaranteed by
        :func:`~pyathyg.utils.parsing.to_fixed`) this cannot fail.
        """
        return self.record_type(
            **{
                c.name: coerce_field(values[c.position], c.kind, c.dtype)
                for c in self.columns
            }
        )


def _columns(layout: Sequence[tuple[str, FieldKind]]) -> tuple[FieldSpec, ...]:
    return tuple(
        FieldSpec(position, name, kind)
        for position, (name, kind) in enumerate(layout)
    )


_IDENTIFICATION = [
    ("id", U),
    ("tyc", T),
    ("gaia", U),
    ("hyg", U),
    ("hip", U),
    ("hd", U),
    ("hr", U),
    ("gl", T),
    ("bayer", T),
    ("flam", T),
    ("con", T),
    ("proper", T),
    ("ra", F),
    ("dec", F),
    ("pos_src", T),
    ("dist", F),
    ("x0", F),
    ("y0", F),
    ("z0", F),
    ("dist_src", T),
    ("mag", F),
    ("absmag", F),
]

_KINEMATICS = [
    ("rv", F),
    ("rv_src", T),
    ("pm_ra", F),
    ("pm_dec", F),
    ("pm_src", F),
    ("vx", F),
    ("vy", F),
    ("vz", F),
    ("spect", F),
    ("spect_src", T),
]

SCHEMA_V1 = RecordSchema(
    version=1,
    record_type=StarV1,
    columns=_columns(_IDENTIFICATION + [("mag_src", T)]),
)

SCHEMA_V2 = RecordSchema(
    version=2,
    record_type=StarV2,
    columns=_columns(_IDENTIFICATION + [("mag_src", T)] + _KINEMATICS),
)

SCHEMA_V3 = RecordSchema(
    version=3,
    record_type=StarV3,
    columns=_columns(_IDENTIFICATION + [("ci", F), ("mag_src", T)] + _KINEMATICS),
)

SCHEMAS: dict[int, RecordSchema] = {
    1: SCHEMA_V1,
    2: SCHEMA_V2,
    3: SCHEMA_V3,
}

SUPPORTED_VERSIONS: tuple[int, ...] = tuple(SCHEMAS)
"""Catalog versions with a schema, in ascending order."""


def get_schema(version) -> RecordSchema:
    """Resolve a catalog version to its schema descriptor

    Parameters
    ----------
    version : int | str | type | RecordSchema
        ``1``/``2``/``3``, ``"v1"``/``"V2"``/``"3"``, one of the record
        types, or a schema instance (returned unchanged).

    Raises
    ------
    SchemaError
        If *version* does not name V1, V2 or V3.

    Examples
    --------
    >>> get_schema("v3").element_count
    34
    """
    if isinstance(version, RecordSchema):
        return version

    if isinstance(version, type):
        for schema in SCHEMAS.values():
            if schema.record_type is version:
                return schema
        raise SchemaError(f"{version.__name__} is not an ATHYG record type.")

    if isinstance(version, bool) or not isinstance(version, (int, str)):
        raise SchemaError(
            f"Unsupported ATHYG version {version!r}; expected an int, a str, "
            f"a record type or a RecordSchema."
        )

    key = version
    if isinstance(version, str):
        text = version.strip().lower().removeprefix("v")
        key = int(text) if text.isdecimal() else None

    if key not in SCHEMAS:
        raise SchemaError(
            f"Unsupported ATHYG version {version!r}; expected one of "
            f"{', '.join(f'V{v}' for v in SCHEMAS)}."
        )
    logger.debug("Resolved ATHYG version %r to V%d", version, key)
    return SCHEMAS[key]
