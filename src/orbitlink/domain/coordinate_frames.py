# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Frames used between SGP4 output and the screen.

SGP4 reports TEME positions in km with +Z toward the north pole. The
renderer wants +Y up and one unit per mean Earth radius, so inertial
positions are remapped and scaled for drawing. The detail panel instead
rotates the same position by the Earth rotation angle into the
Earth-fixed frame and reads latitude, longitude and height off the
WGS84 ellipsoid.
"""
import math
from datetime import datetime, timezone

from orbitlink.domain.constants import RenderConstants

_J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def gmst_rad(epoch: datetime) -> float:
    """
    Earth rotation angle at ``epoch``, in radians within [0, 2π).

    This is the angle the Earth mesh is turned by each frame and the
    angle that takes SGP4 output into the Earth-fixed frame. Naive
    datetimes count as UTC.
    """
    if epoch.tzinfo is None:
        epoch = epoch.replace(tzinfo=timezone.utc)

    days = (epoch - _J2000).total_seconds() / 86400.0
    centuries = days / 36525.0

    # IAU 1982 mean sidereal time, degrees
    angle_deg = (
        280.46061837
        + 360.98564736629 * days
        + 0.000387933 * centuries**2
        - centuries**3 / 38710000.0
    )
    return math.radians(angle_deg % 360.0)


def eci_to_render(
    pos_eci_km: tuple[float, float, float],
) -> tuple[float, float, float]:
    """
    Map an inertial position to render space.

    The inertial frame has +Z toward the north pole while render space
    is +Y up, so the axes are remapped as
        render-X =  ECI-X
        render-Y =  ECI-Z
        render-Z = -ECI-Y
    and scaled from kilometres to render units.
    """
    scale = RenderConstants.RENDER_UNITS_PER_KM
    x, y, z = pos_eci_km
    return (x * scale, z * scale, -y * scale)


def eci_to_ecef(
    pos_eci: tuple[float, float, float],
    gmst_angle_rad: float,
) -> tuple[float, float, float]:
    """
    Rotate an ECI position into ECEF by GMST.

    The rotation matrix R_z(-θ) rotates from inertial to Earth-fixed:
        [x_ecef]   [ cos(θ)  sin(θ)  0] [x_eci]
        [y_ecef] = [-sin(θ)  cos(θ)  0] [y_eci]
        [z_ecef]   [   0       0     1] [z_eci]
    """
    cos_t = math.cos(gmst_angle_rad)
    sin_t = math.sin(gmst_angle_rad)

    return (
        cos_t * pos_eci[0] + sin_t * pos_eci[1],
        -sin_t * pos_eci[0] + cos_t * pos_eci[1],
        pos_eci[2],
    )


def _prime_vertical_km(sin_lat: float) -> float:
    c = RenderConstants
    return c.R_EARTH_EQUATORIAL_KM / math.sqrt(1.0 - c.E_SQUARED * sin_lat**2)


def ecef_to_geodetic(
    pos_ecef_km: tuple[float, float, float],
) -> tuple[float, float, float]:
    """
    Sub-satellite latitude and longitude plus height above the ellipsoid.

    Returns:
        (latitude_deg, longitude_deg, height_km) with latitude in
        [-90, 90] and longitude in (-180, 180].
    """
    e2 = RenderConstants.E_SQUARED
    x, y, z = pos_ecef_km
    rho = math.hypot(x, y)

    lat = math.atan2(z, rho * (1.0 - e2))
    for _ in range(10):
        sin_lat = math.sin(lat)
        lat = math.atan2(z + e2 * _prime_vertical_km(sin_lat) * sin_lat, rho)

    cos_lat = math.cos(lat)
    if abs(cos_lat) > 1e-10:
        height = rho / cos_lat - _prime_vertical_km(math.sin(lat))
    else:
        # On the polar axis
        height = abs(z) - RenderConstants.R_EARTH_POLAR_KM

    return math.degrees(lat), math.degrees(math.atan2(y, x)), height
