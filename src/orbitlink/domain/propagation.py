# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbit state queries on top of the propagator port.

Turns raw inertial state vectors into render-space positions, geodetic
detail and precomputed orbit paths. Every query can come back empty:
decayed orbits and numerical breakdown are normal outcomes here.
No external dependencies — only stdlib math/datetime.
"""
import logging
import math
from datetime import datetime, timedelta

from orbitlink.domain.constants import ORBIT_PATH_SAMPLES, ORBIT_PATH_STEP
from orbitlink.domain.coordinate_frames import (
    gmst_rad,
    eci_to_ecef,
    ecef_to_geodetic,
    eci_to_render,
)
from orbitlink.domain.state import GeodeticState
from orbitlink.ports.propagation import Propagator

logger = logging.getLogger(__name__)

PositionSample = tuple[float, float, float] | None


def render_position(propagator: Propagator, instant: datetime) -> PositionSample:
    """
    Render-space position of a satellite at ``instant``.

    Returns:
        (x, y, z) in render units, or None if the propagator has no state.
    """
    state = propagator.compute(instant)
    if state is None:
        return None
    return eci_to_render(state.position_km)


def compute_geodetic(propagator: Propagator, instant: datetime) -> GeodeticState | None:
    """
    Geodetic sub-satellite point, height and speed at ``instant``.

    Both position and velocity come from the same propagation call; the
    inertial position is rotated by GMST before the ellipsoid conversion.

    Returns:
        GeodeticState, or None when position or velocity is unavailable
        (shown to the user as signal lost).
    """
    state = propagator.compute(instant)
    if state is None or state.position_km is None or state.velocity_km_s is None:
        return None

    pos_ecef = eci_to_ecef(state.position_km, gmst_rad(instant))
    lat_deg, lon_deg, height_km = ecef_to_geodetic(pos_ecef)
    vx, vy, vz = state.velocity_km_s

    return GeodeticState(
        latitude_deg=lat_deg,
        longitude_deg=lon_deg,
        height_km=height_km,
        speed_km_s=math.sqrt(vx**2 + vy**2 + vz**2),
    )


def precompute_orbit_path(
    propagator: Propagator,
    start: datetime,
    samples: int = ORBIT_PATH_SAMPLES,
    step: timedelta = ORBIT_PATH_STEP,
) -> tuple[tuple[float, float, float], ...]:
    """
    Sample the future track of a satellite as a static polyline.

    Samples are taken at ``start + k * step`` for k in [0, samples).
    Failed samples are dropped, never padded or interpolated, so the
    path may be shorter than ``samples``.

    Returns:
        Render-space points in time order.
    """
    if samples < 0:
        raise ValueError(f"samples must be non-negative, got {samples}")

    path = []
    for k in range(samples):
        instant = start + k * step
        try:
            position = render_position(propagator, instant)
        except (ArithmeticError, ValueError) as e:
            logger.debug("Path sample at %s failed: %s", instant.isoformat(), e)
            continue
        if position is not None:
            path.append(position)
    return tuple(path)
