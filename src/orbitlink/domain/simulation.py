# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Simulation session: the per-frame update behind a constellation view.

A Simulation owns the clock, the active satellite set, the selection
and its own scratch buffers, so independent sessions never share state.
Each tick runs in a fixed order:

    1. advance the clock
    2. compute every satellite position at the new instant
    3. derive colors and link segments from that single snapshot

Per-satellite failures only hide that satellite for the tick.
"""
import logging
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from orbitlink.domain.altitude_color import altitude_colors
from orbitlink.domain.clock import SimulationClock
from orbitlink.domain.constants import SimulationConfig
from orbitlink.domain.coordinate_frames import gmst_rad
from orbitlink.domain.elements import parse_element_text
from orbitlink.domain.link_topology import (
    LinkSegment,
    edges_to_segments,
    nearest_link_edges,
    pack_positions,
)
from orbitlink.domain.propagation import compute_geodetic, render_position
from orbitlink.domain.satellite_set import (
    SatelliteSet,
    SatelliteState,
    build_satellite_set,
    empty_satellite_set,
)
from orbitlink.domain.state import GeodeticState
from orbitlink.ports.propagation import PropagatorFactory

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No valid TLE data found in input."


@dataclass(frozen=True)
class ImportResult:
    """Outcome of an element import."""
    count: int
    accepted: bool
    message: str


@dataclass(frozen=True)
class SelectedView:
    """Selected satellite's orbit polyline and live marker position."""
    id: int
    name: str
    orbit_path: tuple[tuple[float, float, float], ...]
    marker: tuple[float, float, float] | None


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything a renderer needs for one frame."""
    instant: datetime
    positions: tuple[tuple[float, float, float] | None, ...]
    colors: tuple[tuple[float, float, float] | None, ...]
    segments: tuple[LinkSegment, ...]
    selected: SelectedView | None
    earth_rotation_rad: float

    @property
    def visible_count(self) -> int:
        return sum(1 for p in self.positions if p is not None)


class Simulation:
    """Clock, satellite set and selection for one constellation view."""

    def __init__(
        self,
        factory: PropagatorFactory,
        config: SimulationConfig | None = None,
        clock: SimulationClock | None = None,
    ):
        self._factory = factory
        self._config = config or SimulationConfig()
        self._clock = clock or SimulationClock.now()
        self._satellites = empty_satellite_set()
        self._selected_id: int | None = None
        self._selected_generation: int | None = None
        self._show_links = self._config.show_links
        self._scratch = np.zeros((0, 3), dtype=float)

    @property
    def clock(self) -> SimulationClock:
        return self._clock

    @property
    def satellites(self) -> SatelliteSet:
        return self._satellites

    @property
    def show_links(self) -> bool:
        return self._show_links

    # ── Import ────────────────────────────────────────────────────

    def import_elements(self, text: str) -> ImportResult:
        """
        Replace the satellite set with the elements found in ``text``.

        If nothing valid is found the current set stays in place and the
        result carries a message for the user. Any selection is cleared
        on success, since ids restart at 0 in the new set.
        """
        records = parse_element_text(text)
        if not records:
            logger.warning("Import rejected: %s", NO_DATA_MESSAGE)
            return ImportResult(count=0, accepted=False, message=NO_DATA_MESSAGE)

        new_set = build_satellite_set(
            records,
            self._factory,
            self._clock.current_instant,
            path_samples=self._config.path_samples,
            path_step=self._config.path_step,
        )
        self._satellites = new_set
        self.clear_selection()
        logger.info("Imported %d satellites.", len(new_set))
        return ImportResult(
            count=len(new_set),
            accepted=True,
            message=f"Imported {len(new_set)} satellites.",
        )

    # ── Selection ─────────────────────────────────────────────────

    def select(self, sat_id: int) -> SatelliteState | None:
        """Select by id in the current set; unknown ids clear the selection."""
        satellite = self._satellites.get(sat_id)
        if satellite is None:
            self.clear_selection()
            return None
        self._selected_id = satellite.id
        self._selected_generation = self._satellites.generation
        return satellite

    def clear_selection(self) -> None:
        self._selected_id = None
        self._selected_generation = None

    @property
    def selected(self) -> SatelliteState | None:
        if self._selected_id is None:
            return None
        if self._selected_generation != self._satellites.generation:
            self.clear_selection()
            return None
        return self._satellites.get(self._selected_id)

    def selected_detail(self) -> GeodeticState | None:
        """Geodetic detail for the selection; None means signal lost."""
        satellite = self.selected
        if satellite is None:
            return None
        try:
            return compute_geodetic(satellite.propagator, self._clock.current_instant)
        except (ArithmeticError, ValueError) as e:
            logger.warning("Geodetic state unavailable for %s: %s", satellite.name, e)
            return None

    # ── Clock controls ────────────────────────────────────────────

    def toggle_pause(self) -> None:
        self._clock = self._clock.toggle_pause()

    def change_speed(self, factor: float) -> None:
        self._clock = self._clock.change_speed(factor)

    def reset_clock(self, now: datetime | None = None) -> None:
        self._clock = self._clock.reset(now)

    def toggle_links(self) -> None:
        self._show_links = not self._show_links

    # ── Per-frame update ──────────────────────────────────────────

    def _position(self, satellite: SatelliteState, instant: datetime):
        try:
            return render_position(satellite.propagator, instant)
        except (ArithmeticError, ValueError) as e:
            logger.warning("Propagation failed for %s: %s", satellite.name, e)
            return None

    def tick(self, dt_seconds: float) -> FrameSnapshot:
        """Advance by ``dt_seconds`` of wall time and compute one frame."""
        self._clock = self._clock.advance(dt_seconds)
        return self.frame()

    def frame(self) -> FrameSnapshot:
        """Compute a frame at the current instant without advancing."""
        satellites = self._satellites
        instant = self._clock.current_instant

        positions = tuple(self._position(sat, instant) for sat in satellites)
        colors = tuple(altitude_colors(positions))

        segments: tuple[LinkSegment, ...] = ()
        if self._show_links and positions:
            coords, valid = pack_positions(positions, out=self._scratch)
            self._scratch = coords
            edges = nearest_link_edges(
                coords, valid,
                max_range=self._config.link_range_units,
                max_links=self._config.max_links,
            )
            segments = tuple(edges_to_segments(edges, positions))

        selected_view = None
        selected = self.selected
        if selected is not None:
            selected_view = SelectedView(
                id=selected.id,
                name=selected.name,
                orbit_path=selected.orbit_path,
                marker=positions[selected.id],
            )

        return FrameSnapshot(
            instant=instant,
            positions=positions,
            colors=colors,
            segments=segments,
            selected=selected_view,
            earth_rotation_rad=gmst_rad(instant),
        )
