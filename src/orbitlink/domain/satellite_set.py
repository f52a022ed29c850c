# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Immutable satellite set built from one import batch.

A set is constructed in full, orbit paths included, before anyone sees
it. Importing new elements builds a fresh set and swaps the reference;
an existing set is never modified.
"""
import itertools
import numbers
from dataclasses import dataclass
from datetime import datetime, timedelta

from orbitlink.domain.constants import ORBIT_PATH_SAMPLES, ORBIT_PATH_STEP
from orbitlink.domain.elements import ElementRecord
from orbitlink.domain.propagation import precompute_orbit_path
from orbitlink.ports.propagation import Propagator, PropagatorFactory

_generation_counter = itertools.count(1)


@dataclass(frozen=True)
class SatelliteState:
    """A satellite ready for per-tick queries."""
    id: int
    name: str
    propagator: Propagator
    orbit_path: tuple[tuple[float, float, float], ...]


@dataclass(frozen=True)
class SatelliteSet:
    """Snapshot of all satellites from one import.

    ``generation`` differs between any two sets built in this process,
    so a stored selection can tell whether its set is still current.
    """
    satellites: tuple[SatelliteState, ...]
    epoch: datetime | None
    generation: int

    def __len__(self) -> int:
        return len(self.satellites)

    def __iter__(self):
        return iter(self.satellites)

    def get(self, sat_id: int) -> SatelliteState | None:
        """Look up a satellite by id; ids are positions within the set."""
        if isinstance(sat_id, bool) or not isinstance(sat_id, numbers.Integral):
            return None
        sat_id = int(sat_id)
        if 0 <= sat_id < len(self.satellites) and self.satellites[sat_id].id == sat_id:
            return self.satellites[sat_id]
        return None


def empty_satellite_set() -> SatelliteSet:
    return SatelliteSet(satellites=(), epoch=None, generation=next(_generation_counter))


def build_satellite_set(
    records: list[ElementRecord],
    factory: PropagatorFactory,
    epoch: datetime,
    path_samples: int = ORBIT_PATH_SAMPLES,
    path_step: timedelta = ORBIT_PATH_STEP,
) -> SatelliteSet:
    """
    Build a satellite set, precomputing each orbit path from ``epoch``.

    Args:
        records: Parsed records with ids 0..n-1.
        factory: Creates one propagator per record.
        epoch: Instant of import; first orbit path sample.
        path_samples: Target path length.
        path_step: Simulated time between path samples.

    Returns:
        New SatelliteSet with a fresh generation number.
    """
    satellites = []
    for record in records:
        propagator = factory.from_record(record)
        path = precompute_orbit_path(propagator, epoch, path_samples, path_step)
        satellites.append(SatelliteState(
            id=record.id,
            name=record.name,
            propagator=propagator,
            orbit_path=path,
        ))

    return SatelliteSet(
        satellites=tuple(satellites),
        epoch=epoch,
        generation=next(_generation_counter),
    )
