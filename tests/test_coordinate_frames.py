# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for coordinate frame conversions (ECI→render, ECI→ECEF→Geodetic)."""
import math
from datetime import datetime, timezone

import pytest

from orbitlink.domain.constants import RenderConstants
from orbitlink.domain.coordinate_frames import (
    gmst_rad,
    eci_to_render,
    eci_to_ecef,
    ecef_to_geodetic,
)


# ── GMST computation ──────────────────────────────────────────────

class TestGMST:

    def test_gmst_returns_radians_in_range(self):
        """GMST must be in [0, 2π)."""
        epoch = datetime(2026, 3, 20, 12, 0, 0, tzinfo=timezone.utc)
        theta = gmst_rad(epoch)
        assert 0 <= theta < 2 * math.pi

    def test_gmst_j2000_epoch_reference(self):
        """At J2000.0 (2000-01-01 12:00 UTC), GMST ≈ 280.46°."""
        j2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert gmst_rad(j2000) == pytest.approx(math.radians(280.46061837), abs=1e-9)

    def test_naive_datetime_treated_as_utc(self):
        aware = datetime(2026, 10, 15, 6, 30, 0, tzinfo=timezone.utc)
        naive = datetime(2026, 10, 15, 6, 30, 0)
        assert gmst_rad(naive) == gmst_rad(aware)

    def test_gmst_advances_with_time(self):
        """6 hours ≈ π/2 radians of Earth rotation."""
        t1 = datetime(2026, 6, 15, 0, 0, 0, tzinfo=timezone.utc)
        t2 = datetime(2026, 6, 15, 6, 0, 0, tzinfo=timezone.utc)
        diff = (gmst_rad(t2) - gmst_rad(t1)) % (2 * math.pi)
        assert abs(diff - math.pi / 2) < math.radians(2)


# ── ECI → render ──────────────────────────────────────────────────

class TestECItoRender:

    def test_axis_remap(self):
        """render = (X, Z, -Y) scaled to render units."""
        r = RenderConstants.EARTH_RADIUS_KM
        assert eci_to_render((r, 0.0, 0.0)) == pytest.approx((1.0, 0.0, 0.0))
        assert eci_to_render((0.0, r, 0.0)) == pytest.approx((0.0, 0.0, -1.0))
        assert eci_to_render((0.0, 0.0, r)) == pytest.approx((0.0, 1.0, 0.0))

    def test_north_is_up(self):
        """A point over the north pole has positive render-Y only."""
        x, y, z = eci_to_render((0.0, 0.0, 7000.0))
        assert y > 0
        assert x == 0.0 and z == 0.0

    def test_magnitude_scaled(self):
        pos = (3000.0, -4000.0, 5000.0)
        render = eci_to_render(pos)
        mag_km = math.sqrt(sum(c * c for c in pos))
        mag_units = math.sqrt(sum(c * c for c in render))
        assert mag_units == pytest.approx(mag_km / RenderConstants.EARTH_RADIUS_KM)


# ── ECI → ECEF ────────────────────────────────────────────────────

class TestECItoECEF:

    def test_identity_at_zero_gmst(self):
        pos = (7000.0, 10.0, -20.0)
        assert eci_to_ecef(pos, 0.0) == pytest.approx(pos)

    def test_quarter_turn(self):
        """θ = 90°: ECI +Y lies on ECEF +X."""
        x, y, z = eci_to_ecef((0.0, 7000.0, 0.0), math.pi / 2)
        assert x == pytest.approx(7000.0)
        assert y == pytest.approx(0.0, abs=1e-9)
        assert z == 0.0

    def test_rotation_preserves_magnitude(self):
        pos = (4000.0, 5000.0, 1000.0)
        out = eci_to_ecef(pos, 1.234)
        assert math.dist(out, (0, 0, 0)) == pytest.approx(math.dist(pos, (0, 0, 0)))


# ── ECEF → Geodetic ───────────────────────────────────────────────

class TestECEFtoGeodetic:

    def test_equator_prime_meridian(self):
        a = RenderConstants.R_EARTH_EQUATORIAL_KM
        lat, lon, h = ecef_to_geodetic((a + 500.0, 0.0, 0.0))
        assert lat == pytest.approx(0.0, abs=1e-9)
        assert lon == pytest.approx(0.0, abs=1e-9)
        assert h == pytest.approx(500.0, abs=1e-6)

    def test_north_pole(self):
        b = RenderConstants.R_EARTH_POLAR_KM
        lat, _lon, h = ecef_to_geodetic((0.0, 0.0, b + 400.0))
        assert lat == pytest.approx(90.0, abs=1e-6)
        assert h == pytest.approx(400.0, abs=1e-3)

    def test_longitude_west(self):
        a = RenderConstants.R_EARTH_EQUATORIAL_KM
        _lat, lon, _h = ecef_to_geodetic((0.0, -(a + 550.0), 0.0))
        assert lon == pytest.approx(-90.0)

    def test_southern_latitude_sign(self):
        lat, _lon, _h = ecef_to_geodetic((5000.0, 0.0, -4000.0))
        assert lat < 0
