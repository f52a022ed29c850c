# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Render-space and physical constants plus simulation configuration.

Render space uses one unit per mean Earth radius, so the primary body's
surface sits at distance 1.0 from the origin.
No external dependencies — only stdlib dataclasses/datetime.
"""
from dataclasses import dataclass, field
from datetime import timedelta


@dataclass(frozen=True)
class _RenderConstants:
    """Scale factors and reference radii (WGS84 values where applicable)."""
    EARTH_RADIUS_KM: float = 6371.0                 # km — mean radius
    RENDER_UNITS_PER_KM: float = 1.0 / 6371.0       # render units per km
    REFERENCE_RADIUS_UNITS: float = 1.0             # surface radius in render units
    # WGS84 ellipsoid
    R_EARTH_EQUATORIAL_KM: float = 6378.137         # km — semi-major axis
    R_EARTH_POLAR_KM: float = 6356.7523142          # km — semi-minor axis
    E_SQUARED: float = 0.00669437999014             # first eccentricity squared


RenderConstants: _RenderConstants = _RenderConstants()

MAX_LINK_RANGE_UNITS = 0.4   # ~2550 km optical terminal range
MAX_LINKS_PER_SATELLITE = 4
ORBIT_PATH_SAMPLES = 100
ORBIT_PATH_STEP = timedelta(seconds=60)


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable tuning for one simulation session."""
    link_range_units: float = MAX_LINK_RANGE_UNITS
    max_links: int = MAX_LINKS_PER_SATELLITE
    path_samples: int = ORBIT_PATH_SAMPLES
    path_step: timedelta = field(default=ORBIT_PATH_STEP)
    show_links: bool = True
