# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
SGP4 adapter: propagates TLE records with the sgp4 library.

External dependencies (sgp4) are confined to this layer.

SGP4 propagation:
    TLE mean elements are SGP4-specific, NOT pure Keplerian.
    The sgp4 library returns TEME state vectors in km and km/s,
    together with an error code that is non-zero once the model
    breaks down (e.g. decayed orbit).
"""
import logging
import math
from datetime import datetime, timezone

from sgp4.api import Satrec, jday

from orbitlink.domain.elements import ElementRecord
from orbitlink.domain.state import StateVector
from orbitlink.ports.propagation import Propagator, PropagatorFactory

logger = logging.getLogger(__name__)


def _as_utc(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (treat naive as UTC)."""
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _datetime_to_jd(dt: datetime) -> tuple[float, float]:
    dt = _as_utc(dt).astimezone(timezone.utc)
    return jday(dt.year, dt.month, dt.day, dt.hour, dt.minute,
                dt.second + dt.microsecond / 1e6)


def _is_finite(vector) -> bool:
    return all(math.isfinite(component) for component in vector)


class Sgp4Propagator(Propagator):
    """Propagates one satellite record with SGP4 (WGS72 constants)."""

    def __init__(self, satrec: Satrec, name: str = ""):
        self._satrec = satrec
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def compute(self, instant: datetime) -> StateVector | None:
        jd, fr = _datetime_to_jd(instant)
        error_code, position_km, velocity_km_s = self._satrec.sgp4(jd, fr)
        if error_code != 0:
            return None
        if not (_is_finite(position_km) and _is_finite(velocity_km_s)):
            return None
        return StateVector(
            position_km=tuple(position_km),
            velocity_km_s=tuple(velocity_km_s),
        )


class UnavailablePropagator(Propagator):
    """Stands in for a record sgp4 could not decode; never yields a state."""

    def __init__(self, name: str = ""):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def compute(self, instant: datetime) -> StateVector | None:
        return None


class Sgp4PropagatorFactory(PropagatorFactory):
    """Builds SGP4 propagators from parsed element records."""

    def from_record(self, record: ElementRecord) -> Propagator:
        try:
            satrec = Satrec.twoline2rv(record.line1, record.line2)
        except (ValueError, IndexError) as e:
            logger.warning("Cannot decode elements for %s: %s", record.name, e)
            return UnavailablePropagator(record.name)
        return Sgp4Propagator(satrec, record.name)
