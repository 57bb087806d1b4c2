# composite_gradients/tone_windows.py
from __future__ import annotations

"""
Tone windows: named, overlapping slices of a hue group.

Exports:
  WINDOW_TABLE                       # {sample_count: [(label, start, length), ...]}
  BOOKEND_WINDOWS                    # answer for black/white bracketed groups
  windows_for(profile, three_tone)   -> list[ToneWindow]
  window_colors(group, window)       -> list[Color]   (InvalidWindowRequest)
  stop_offsets(n)                    -> list[float]   (interval midpoints)
"""

from typing import Dict, List, Sequence, Tuple

from .core_types import Color, HueGroup, InvalidWindowRequest, SourceProfile, ToneWindow

FIVE_LABELS: Tuple[str, ...] = ("Deep Shadow", "Shadow", "Mid", "Hilite", "Deep Hilite")
THREE_LABELS: Tuple[str, ...] = ("Shadow", "Mid", "Hilite")


def _windows(length: int, starts: Sequence[int]) -> List[ToneWindow]:
    labels = FIVE_LABELS if len(starts) == 5 else THREE_LABELS
    return [ToneWindow(label, s, length) for label, s in zip(labels, starts)]


# 4 tone shadow/mid/hilite over [black, 4 greys, white]
BOOKEND_WINDOWS: List[ToneWindow] = _windows(4, (0, 1, 2))

WINDOW_TABLE: Dict[int, List[ToneWindow]] = {
    6: _windows(4, (0, 1, 2)),
    8: _windows(4, (0, 1, 2, 3, 4)),
    12: _windows(6, (0, 1, 3, 5, 6)),
    16: _windows(8, (0, 2, 4, 6, 8)),
    18: _windows(10, (0, 2, 4, 6, 8)),
    24: _windows(12, (0, 3, 6, 9, 12)),
    32: _windows(16, (0, 4, 8, 12, 16)),
    36: _windows(18, (0, 4, 9, 14, 18)),
    48: _windows(24, (0, 6, 12, 18, 24)),
}


def _check_tables() -> None:
    for n, windows in WINDOW_TABLE.items():
        assert all(w.stop <= n for w in windows), f"window overruns {n} colours"
    assert all(w.stop <= 6 for w in BOOKEND_WINDOWS)


_check_tables()


def windows_for(profile: SourceProfile, *, three_tone: bool = False) -> List[ToneWindow]:
    """
    Windows for every hue group of a profile.

    three_tone keeps the outer and centre windows of a five-window answer
    (relabelled Shadow/Mid/Hilite), so 8 samples give starts 0, 2, 4.
    """
    if profile.bracketed:
        windows = BOOKEND_WINDOWS
    else:
        windows = WINDOW_TABLE[profile.sample_count]
    if three_tone and len(windows) == 5:
        return [
            ToneWindow(label, w.start, w.length)
            for label, w in zip(THREE_LABELS, windows[0::2])
        ]
    return list(windows)


def window_colors(group: HueGroup, window: ToneWindow) -> List[Color]:
    """Colours covered by a window. Never truncates."""
    if window.start < 0 or window.length <= 0 or window.stop > len(group):
        raise InvalidWindowRequest(
            f"window {window.label!r} [{window.start}, {window.stop}) does not fit "
            f"{len(group)} colours of {group.label!r}"
        )
    return list(group.colors[window.start : window.stop])


def stop_offsets(count: int) -> List[float]:
    """Midpoint of each of `count` equal intervals over [0, 1]."""
    return [((k / count) + ((k + 1) / count)) / 2.0 for k in range(count)]


__all__ = [
    "FIVE_LABELS",
    "THREE_LABELS",
    "BOOKEND_WINDOWS",
    "WINDOW_TABLE",
    "windows_for",
    "window_colors",
    "stop_offsets",
]
