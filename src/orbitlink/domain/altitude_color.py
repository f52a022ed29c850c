# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Altitude-based satellite coloring.

Altitudes are normalized against a 2nd–98th percentile window of the
current tick, so a few highly elliptical orbits do not compress the
gradient for the rest of the constellation. Normalized altitude maps
to hue from red (low) to green (high).
"""
import colorsys
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from orbitlink.domain.constants import RenderConstants

LOW_PERCENTILE = 0.02
HIGH_PERCENTILE = 0.98
MIN_WINDOW_WIDTH = 1e-6
MAX_HUE = 0.35          # green
SATURATION = 1.0
LIGHTNESS = 0.5


@dataclass(frozen=True)
class AltitudeWindow:
    """Normalization window in render units above the reference surface."""
    low: float
    high: float

    @property
    def width(self) -> float:
        return self.high - self.low


def altitude(position: tuple[float, float, float]) -> float:
    """Height above the reference surface, in render units."""
    x, y, z = position
    return math.sqrt(x * x + y * y + z * z) - RenderConstants.REFERENCE_RADIUS_UNITS


def altitude_window(altitudes: Sequence[float]) -> AltitudeWindow:
    """
    Percentile-clamped window over this tick's valid altitudes.

    Takes sorted values at indices floor(n * 0.02) and floor(n * 0.98).
    A window narrower than 1e-6 is widened by 1e-6. With no altitudes
    at all the window is [0, 1].
    """
    if len(altitudes) == 0:
        return AltitudeWindow(low=0.0, high=1.0)

    ordered = np.sort(np.asarray(altitudes, dtype=float))
    n = ordered.size
    low = float(ordered[math.floor(n * LOW_PERCENTILE)])
    high = float(ordered[math.floor(n * HIGH_PERCENTILE)])

    if high - low < MIN_WINDOW_WIDTH:
        high = low + MIN_WINDOW_WIDTH
    return AltitudeWindow(low=low, high=high)


def normalize_altitude(alt: float, window: AltitudeWindow) -> float:
    """Position of ``alt`` within ``window``, clamped to [0, 1]."""
    return float(np.clip((alt - window.low) / window.width, 0.0, 1.0))


def altitude_color(normalized: float) -> tuple[float, float, float]:
    """HSL(normalized * 0.35, 1, 0.5) as RGB floats in [0, 1]."""
    return colorsys.hls_to_rgb(normalized * MAX_HUE, LIGHTNESS, SATURATION)


def altitude_colors(
    positions: Sequence[tuple[float, float, float] | None],
) -> list[tuple[float, float, float] | None]:
    """
    Color for every satellite; None where there is no position this tick.

    ``positions[i]`` belongs to satellite id i.
    """
    altitudes = [altitude(p) if p is not None else None for p in positions]
    window = altitude_window([a for a in altitudes if a is not None])

    return [
        altitude_color(normalize_altitude(a, window)) if a is not None else None
        for a in altitudes
    ]
