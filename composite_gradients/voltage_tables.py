# composite_gradients/voltage_tables.py
from __future__ import annotations

"""
Luma/saturation voltage tables.

Exports:
  build_voltage_table(n)      -> VoltageTable with step 1/(n+2)
  build_skip_voltage_table()  -> 8-sample table on steps {1,3,6,8} of 1/10
  APPROX_NES_TABLE, NES_TABLE -> hand-authored 4-sample tables
  VOLTAGE_TABLES              -> {n: VoltageTable} for every supported n
  voltage_table(n)            -> lookup into VOLTAGE_TABLES
  ascending_luma(table)       -> pairs reordered dark to light

Notes:
  For the first half of each table the low voltage is 0, for the second half
  the high voltage is 1, so the second half mirrors the first around 0.5 and
  saturation (half the swing) equals luma mirrored the same way.
"""

from typing import Dict, Sequence

import numpy as np

from .constants import (
    APPROX_NES_LUMA,
    APPROX_NES_SATURATION,
    NES_LUMA,
    NES_SATURATION,
    SAMPLE_COUNTS,
)
from .core_types import VoltageTable


def _mirrored_table(first_half: Sequence[float]) -> VoltageTable:
    """Complete a table from its lower half: lum[n-1-k] = 1 - lum[k], sat mirrors lum."""
    half = len(first_half)
    n = 2 * half
    luma = np.empty(n, dtype=np.float64)
    saturation = np.empty(n, dtype=np.float64)
    for k, lum in enumerate(first_half):
        luma[k] = lum
        luma[n - 1 - k] = 1.0 - lum
        saturation[k] = lum
        saturation[n - 1 - k] = lum
    return VoltageTable(n, luma, saturation)


def build_voltage_table(sample_count: int) -> VoltageTable:
    """Uniform table: lum[k] = (k+1) / (n+2) for the lower half."""
    step = 1.0 / (sample_count + 2)
    return _mirrored_table([(k + 1) * step for k in range(sample_count // 2)])


def build_skip_voltage_table() -> VoltageTable:
    """
    8-sample table that skips steps: lower half sits on {1,3,6,8} / 10
    instead of {1,2,3,4} / 10. Result is [.1, .3, .6, .8, .2, .4, .7, .9].
    """
    step = 1.0 / (8 + 2)
    return _mirrored_table(
        [((2 * k + 1) if k < 2 else (2 * k + 2)) * step for k in range(4)]
    )


def _literal_table(luma: Sequence[float], saturation: Sequence[float]) -> VoltageTable:
    return VoltageTable(
        len(luma),
        np.array(luma, dtype=np.float64),
        np.array(saturation, dtype=np.float64),
    )


APPROX_NES_TABLE: VoltageTable = _literal_table(APPROX_NES_LUMA, APPROX_NES_SATURATION)
NES_TABLE: VoltageTable = _literal_table(NES_LUMA, NES_SATURATION)
SKIP_08_TABLE: VoltageTable = build_skip_voltage_table()

VOLTAGE_TABLES: Dict[int, VoltageTable] = {
    n: build_voltage_table(n) for n in SAMPLE_COUNTS
}


def voltage_table(sample_count: int) -> VoltageTable:
    """Shared uniform table for a supported sample count. KeyError otherwise."""
    return VOLTAGE_TABLES[sample_count]


def ascending_luma(table: VoltageTable) -> VoltageTable:
    """
    The same (luma, saturation) pairs ordered dark to light.
    Tables that already ascend are returned as is.
    """
    if np.all(np.diff(table.luma) > 0):
        return table
    order = np.argsort(table.luma, kind="stable")
    return VoltageTable(table.sample_count, table.luma[order], table.saturation[order])


__all__ = [
    "build_voltage_table",
    "build_skip_voltage_table",
    "APPROX_NES_TABLE",
    "NES_TABLE",
    "SKIP_08_TABLE",
    "VOLTAGE_TABLES",
    "voltage_table",
    "ascending_luma",
]
