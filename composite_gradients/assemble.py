# composite_gradients/assemble.py
from __future__ import annotations

"""
Palette assembly.

Maps a SourceProfile to its ordered hue groups:
  bookend : [black, greys..., white], then [black, hue..., white] per hue
  leading : [greys...], then [hue...] per hue
  none    : [hue...] per hue

Groups are capacity-checked while they grow (MAX_SHADES colours per group,
MAX_HUES chromatic groups per palette). Overflow raises CapacityExceeded and
nothing is returned.
Groups always run dark to light: tables whose levels do not ascend are
reordered by luma before decoding.
"""

from typing import Iterable, List, Optional

from .colour_synth import generate_blend, generate_greys, generate_hue
from .constants import BLACK_RGB, MAX_HUES, MAX_SHADES, WHITE_RGB
from .core_types import (
    CapacityExceeded,
    Color,
    HueGroup,
    HueSpec,
    Palette,
    SourceProfile,
    VoltageTable,
)
from .voltage_tables import ascending_luma

GREY_LABEL = "Greys"


class _GroupBuilder:
    """Growing hue group with a hard colour limit."""

    def __init__(self, label: str, degrees: Optional[float], limit: int = MAX_SHADES):
        self.label = label
        self.degrees = degrees
        self.limit = limit
        self._colors: List[Color] = []

    def add(self, color: Color) -> None:
        if len(self._colors) >= self.limit:
            raise CapacityExceeded(
                f"hue group {self.label!r}: no room for more than {self.limit} colours"
            )
        self._colors.append(Color(*color))

    def extend(self, colors: Iterable[Color]) -> None:
        for c in colors:
            self.add(c)

    def build(self) -> HueGroup:
        return HueGroup(self.label, tuple(self._colors), self.degrees)


class _PaletteBuilder:
    """Ordered hue groups with a hard limit on chromatic groups."""

    def __init__(self, source: str, max_hues: int = MAX_HUES):
        self.source = source
        self.max_hues = max_hues
        self._groups: List[HueGroup] = []
        self._hues = 0

    def add(self, group: HueGroup) -> None:
        if not group.is_grey:
            if self._hues >= self.max_hues:
                raise CapacityExceeded(
                    f"palette {self.source!r}: no room for more than {self.max_hues} hues"
                )
            self._hues += 1
        self._groups.append(group)

    def build(self) -> Palette:
        return Palette(self.source, tuple(self._groups))


def _hue_colors(table: VoltageTable, hue: HueSpec) -> List[Color]:
    if hue.is_blend:
        return generate_blend(table, hue.degrees, hue.upper_degrees)  # type: ignore[arg-type]
    return generate_hue(table, hue.degrees)


def _group(
    label: str, degrees: Optional[float], colors: List[Color], bracketed: bool
) -> HueGroup:
    builder = _GroupBuilder(label, degrees)
    if bracketed:
        builder.add(Color(*BLACK_RGB))
    builder.extend(colors)
    if bracketed:
        builder.add(Color(*WHITE_RGB))
    return builder.build()


def assemble_palette(profile: SourceProfile, *, greys_only: bool = False) -> Palette:
    """
    Build the full palette for one source.

    Args:
      profile: resolved SourceProfile
      greys_only: emit only the grey group (single-group palette)

    Returns:
      Palette with groups in output order: grey group first when the profile
      has one, then hues in profile order.
    """
    pal = _PaletteBuilder(profile.name)
    bracketed = profile.bracketed
    table = ascending_luma(profile.table)

    if profile.grey_band != "none" or greys_only:
        pal.add(_group(GREY_LABEL, None, generate_greys(table), bracketed))
    if greys_only:
        return pal.build()

    for hue in profile.hues:
        pal.add(_group(hue.label, hue.degrees, _hue_colors(table, hue), bracketed))
    return pal.build()


__all__ = ["GREY_LABEL", "assemble_palette"]
