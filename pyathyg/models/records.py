#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for ATHYG catalog stars

Every model is a frozen ``dataclass`` with one attribute per catalog
column, declared in column order.  Models are the sole output of the
reader layer and the sole input accepted by the converter layer.

Hierarchy
---------
::

    StarV1   - 23 columns: identifiers, names, position, distance, magnitude
    StarV2   - 33 columns: V1 plus radial velocity, proper motion,
               space velocity and spectral information
    StarV3   - 34 columns: V2 with the color index ``ci`` inserted
               between ``absmag`` and ``mag_src``

Values
------
* Numeric attributes are ``int`` / ``float``, or ``None`` when the column
  was empty or unparseable.
* Text attributes are always ``str``; an empty column is ``""``.
* ``ra`` is in hours, ``dec`` in degrees, ``dist`` in parsecs, and
  ``x0``/``y0``/``z0`` in parsecs (equatorial cartesian).
* ``rv`` is in km/s, ``pm_ra``/``pm_dec`` in mas/yr, and ``vx``/``vy``/``vz``
  in km/s.

``pm_src`` and ``spect`` are decoded as floats, the historical typing of
these columns; non-numeric content in them decodes to ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class StarV1:
    """A star from version 1 of the ATHYG catalog

    Parameters
    ----------
    id : int | None
        ATHYG row identifier.
    tyc : str
        Tycho-2 identifier.
    gaia : int | None
        Gaia DR3 source identifier.
    hyg, hip, hd, hr : int | None
        HYG, Hipparcos, Henry Draper and Harvard Revised identifiers.
    gl, bayer, flam, con, proper : str
        Gliese id, Bayer letter, Flamsteed number, constellation and
        proper name.
    ra, dec : float | None
        Right ascension (hours) and declination (degrees).
    pos_src : str
        Source of the position.
    dist, x0, y0, z0 : float | None
        Distance and cartesian coordinates (parsecs).
    dist_src : str
        Source of the distance.
    mag, absmag : float | None
        Apparent and absolute visual magnitude.
    mag_src : str
        Source of the magnitude.
    """

    version: ClassVar[int] = 1
    element_count: ClassVar[int] = 23

    id: int | None
    tyc: str
    gaia: int | None
    hyg: int | None
    hip: int | None
    hd: int | None
    hr: int | None
    gl: str
    bayer: str
    flam: str
    con: str
    proper: str
    ra: float | None
    dec: float | None
    pos_src: str
    dist: float | None
    x0: float | None
    y0: float | None
    z0: float | None
    dist_src: str
    mag: float | None
    absmag: float | None
    mag_src: str


@dataclass(frozen=True)
class StarV2:
    """A star from version 2 of the ATHYG catalog

    Columns 0–22 are those of :class:`StarV1`.  Additional parameters:

    Parameters
    ----------
    rv : float | None
        Radial velocity (km/s).
    rv_src : str
        Source of the radial velocity.
    pm_ra, pm_dec : float | None
        Proper motion in right ascension and declination (mas/yr).
    pm_src : float | None
        Source of the proper motion.
    vx, vy, vz : float | None
        Space velocity components (km/s).
    spect : float | None
        Spectral type column.
    spect_src : str
        Source of the spectral type.
    """

    version: ClassVar[int] = 2
    element_count: ClassVar[int] = 33

    id: int | None
    tyc: str
    gaia: int | None
    hyg: int | None
    hip: int | None
    hd: int | None
    hr: int | None
    gl: str
    bayer: str
    flam: str
    con: str
    proper: str
    ra: float | None
    dec: float | None
    pos_src: str
    dist: float | None
    x0: float | None
    y0: float | None
    z0: float | None
    dist_src: str
    mag: float | None
    absmag: float | None
    mag_src: str
    rv: float | None
    rv_src: str
    pm_ra: float | None
    pm_dec: float | None
    pm_src: float | None
    vx: float | None
    vy: float | None
    vz: float | None
    spect: float | None
    spect_src: str


@dataclass(frozen=True)
class StarV3:
    """A star from version 3 of the ATHYG catalog

    Same attributes as :class:`StarV2` plus ``ci`` (B-V color index,
    ``float | None``) stored between ``absmag`` and ``mag_src``.
    """

    version: ClassVar[int] = 3
    element_count: ClassVar[int] = 34

    id: int | None
    tyc: str
    gaia: int | None
    hyg: int | None
    hip: int | None
    hd: int | None
    hr: int | None
    gl: str
    bayer: str
    flam: str
    con: str
    proper: str
    ra: float | None
    dec: float | None
    pos_src: str
    dist: float | None
    x0: float | None
    y0: float | None
    z0: float | None
    dist_src: str
    mag: float | None
    absmag: float | None
    ci: float | None
    mag_src: str
    rv: float | None
    rv_src: str
    pm_ra: float | None
    pm_dec: float | None
    pm_src: float | None
    vx: float | None
    vy: float | None
    vz: float | None
    spect: float | None
    spect_src: str


StarRecord = Union[StarV1, StarV2, StarV3]
"""Type alias for the union of all catalog record types."""
