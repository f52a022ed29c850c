# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
OrbitLink

Computation core for a live constellation view with optical
inter-satellite links: TLE parsing, SGP4-backed render positions and
geodetic detail, precomputed orbit paths, capped nearest-neighbour link
topology, percentile-scaled altitude coloring and a simulation clock.
"""

from orbitlink.domain.elements import (
    ElementRecord,
    parse_element_text,
)
from orbitlink.domain.state import (
    StateVector,
    GeodeticState,
)
from orbitlink.domain.constants import (
    RenderConstants,
    SimulationConfig,
)
from orbitlink.domain.coordinate_frames import (
    gmst_rad,
    eci_to_render,
    eci_to_ecef,
    ecef_to_geodetic,
)
from orbitlink.domain.propagation import (
    render_position,
    compute_geodetic,
    precompute_orbit_path,
)
from orbitlink.domain.satellite_set import (
    SatelliteState,
    SatelliteSet,
    build_satellite_set,
)
from orbitlink.domain.link_topology import (
    LinkEdge,
    LinkSegment,
    build_link_edges,
    build_link_segments,
)
from orbitlink.domain.altitude_color import (
    AltitudeWindow,
    altitude,
    altitude_window,
    normalize_altitude,
    altitude_color,
    altitude_colors,
)
from orbitlink.domain.clock import SimulationClock
from orbitlink.domain.simulation import (
    FrameSnapshot,
    ImportResult,
    SelectedView,
    Simulation,
)

__version__ = "0.3.0"
