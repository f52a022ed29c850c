# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
State value objects exchanged between propagators and the domain.

No external dependencies — only stdlib dataclasses.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class StateVector:
    """Inertial (TEME) position in km and velocity in km/s."""
    position_km: tuple[float, float, float]
    velocity_km_s: tuple[float, float, float]


@dataclass(frozen=True)
class GeodeticState:
    """Sub-satellite point, height above the ellipsoid and scalar speed."""
    latitude_deg: float
    longitude_deg: float
    height_km: float
    speed_km_s: float
