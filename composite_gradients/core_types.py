# composite_gradients/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, errors, and lightweight helpers.
"""

import re
from dataclasses import dataclass, field
from typing import List, Literal, NamedTuple, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

# Basic aliases

HexStr = str

Levels = NDArray[np.float64]  # (N,) luma or saturation levels in [0, 1]
U8Colors = NDArray[np.uint8]  # (N, 3)

GreyBand = Literal["none", "bookend", "leading"]
HalfPart = Literal["full", "lower", "upper"]

# Errors


class GradientError(Exception):
    """Base class for palette derivation failures."""


class UnknownSource(GradientError, LookupError):
    """Requested source name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown source {name!r}")
        self.name = name


class CapacityExceeded(GradientError):
    """A hue group or the palette would grow past its fixed capacity."""


class InvalidWindowRequest(GradientError, ValueError):
    """A tone window does not fit inside the hue group it was asked of."""


# Value objects


class Color(NamedTuple):
    """8-bit RGB colour."""

    r: int
    g: int
    b: int

    @property
    def hex(self) -> HexStr:
        return rgb_to_hex(self)[1:]


class VoltageSample(NamedTuple):
    luma: float
    saturation: float


@dataclass(frozen=True, eq=False)
class VoltageTable:
    """
    Paired luma/saturation levels for one sample count.

    Arrays are float64 [N] and made read-only on construction.
    """

    sample_count: int
    luma: Levels
    saturation: Levels

    def __post_init__(self) -> None:
        if self.luma.shape != (self.sample_count,) or self.saturation.shape != (
            self.sample_count,
        ):
            raise ValueError("luma/saturation must both have sample_count entries")
        self.luma.setflags(write=False)
        self.saturation.setflags(write=False)

    def __len__(self) -> int:
        return self.sample_count

    def samples(self) -> List[VoltageSample]:
        return [
            VoltageSample(float(lum), float(sat))
            for lum, sat in zip(self.luma.tolist(), self.saturation.tolist())
        ]

    def index_range(self, part: HalfPart = "full") -> range:
        """Table indices covered by the full table or one of its halves."""
        half = self.sample_count // 2
        if part == "lower":
            return range(0, half)
        if part == "upper":
            return range(half, self.sample_count)
        return range(0, self.sample_count)


@dataclass(frozen=True)
class HueSpec:
    """
    One hue of a source profile.

    When upper_degrees is set the hue is a blend: the lower half of the table
    is decoded at `degrees` and the upper half at `upper_degrees`.
    """

    label: str
    degrees: float
    upper_degrees: Optional[float] = None

    @property
    def is_blend(self) -> bool:
        return self.upper_degrees is not None


@dataclass(frozen=True)
class SourceProfile:
    """Fixed numeric profile for one named source."""

    name: str
    display_name: str
    table: VoltageTable
    hues: Tuple[HueSpec, ...]
    grey_band: GreyBand
    hue_step_degrees: Optional[float] = None  # None for explicit hue lists
    hue_start_degrees: float = 0.0
    rotated: bool = False

    @property
    def sample_count(self) -> int:
        return self.table.sample_count

    @property
    def bracketed(self) -> bool:
        """True when every group is wrapped in pure black and pure white."""
        return self.grey_band == "bookend"


@dataclass(frozen=True)
class HueGroup:
    """Dark-to-light run of colours at one hue (degrees is None for greys)."""

    label: str
    colors: Tuple[Color, ...]
    degrees: Optional[float] = None

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def is_grey(self) -> bool:
        return self.degrees is None


@dataclass(frozen=True)
class Palette:
    source: str
    groups: Tuple[HueGroup, ...] = field(default_factory=tuple)

    @property
    def hue_count(self) -> int:
        return sum(1 for g in self.groups if not g.is_grey)

    def colors(self) -> List[Color]:
        """Flat colour sequence in group order."""
        return [c for g in self.groups for c in g.colors]


class ToneWindow(NamedTuple):
    label: str
    start: int
    length: int

    @property
    def stop(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class RenderUnit:
    """One gradient ready for rendering: labels plus (colour, offset) stops."""

    source_display_name: str
    hue_label: Optional[str]
    gradient_label: str
    stops: Tuple[Tuple[Color, float], ...]


# Small helpers


def rgb_to_hex(rgb: Sequence[int]) -> HexStr:
    """RGB triple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def slugify_label(label: str) -> str:
    """'Deep Shadow' -> 'deep_shadow'. Used for file names."""
    return re.sub(r"[^a-z0-9]+", "_", label.strip().lower()).strip("_")


__all__ = [
    # aliases / types
    "HexStr",
    "Levels",
    "U8Colors",
    "GreyBand",
    "HalfPart",
    # errors
    "GradientError",
    "UnknownSource",
    "CapacityExceeded",
    "InvalidWindowRequest",
    # value objects
    "Color",
    "VoltageSample",
    "VoltageTable",
    "HueSpec",
    "SourceProfile",
    "HueGroup",
    "Palette",
    "ToneWindow",
    "RenderUnit",
    # helpers
    "rgb_to_hex",
    "slugify_label",
]
