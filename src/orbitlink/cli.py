# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line driver for headless constellation runs.

Usage:
    # Bundled sample constellation, one frame at the current time
    orbitlink

    # Your own TLE file, 600 ticks of 1/60 s at 60x speed
    orbitlink --tle starlink.tle --ticks 600 --dt 0.0166667 --speed 60

    # Inspect one satellite and export the last frame for a renderer
    orbitlink --tle stations.tle --select 0 --export-frame frame.json
"""
import argparse
import logging
import sys
from datetime import datetime, timezone

from orbitlink.adapters.frame_exporter import JsonFrameExporter
from orbitlink.adapters.sample_data import SAMPLE_ELEMENTS, read_element_file
from orbitlink.adapters.sgp4_propagator import Sgp4PropagatorFactory
from orbitlink.domain.clock import SimulationClock
from orbitlink.domain.constants import SimulationConfig
from orbitlink.domain.simulation import NO_DATA_MESSAGE, FrameSnapshot, Simulation


def _parse_start(value: str) -> datetime:
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def run(
    text: str,
    ticks: int = 0,
    dt: float = 1.0 / 60.0,
    speed: float = 1.0,
    start: datetime | None = None,
    show_links: bool = True,
    select_id: int | None = None,
) -> tuple[Simulation, FrameSnapshot | None]:
    """
    Import ``text`` and run ``ticks`` frames.

    Returns:
        (simulation, last_frame); last_frame is None when the import was
        rejected.
    """
    clock = SimulationClock(current_instant=start) if start else SimulationClock.now()
    sim = Simulation(
        Sgp4PropagatorFactory(),
        config=SimulationConfig(show_links=show_links),
        clock=clock,
    )
    result = sim.import_elements(text)
    if not result.accepted:
        return sim, None

    if speed != 1.0:
        sim.change_speed(speed)
    if select_id is not None:
        sim.select(select_id)

    frame = sim.frame()
    for _ in range(ticks):
        frame = sim.tick(dt)
    return sim, frame


def _print_detail(sim: Simulation) -> None:
    satellite = sim.selected
    if satellite is None:
        print("Selection: none")
        return
    print(f"Selection: {satellite.name} (ID: {satellite.id})")
    detail = sim.selected_detail()
    if detail is None:
        print("  Signal Lost (Decayed?)")
        return
    print(f"  Position: {detail.latitude_deg:.2f}°, {detail.longitude_deg:.2f}°")
    print(f"  Altitude: {detail.height_km:.2f} km")
    print(f"  Velocity: {detail.speed_km_s:.2f} km/s")


def main():
    parser = argparse.ArgumentParser(
        description="Propagate a TLE constellation and compute optical cross-links"
    )
    parser.add_argument(
        '--tle',
        help="Path to a TLE file (2- or 3-line sets). Default: bundled sample"
    )
    parser.add_argument(
        '--ticks', type=int, default=0,
        help="Number of frames to simulate (default: 0)"
    )
    parser.add_argument(
        '--dt', type=float, default=1.0 / 60.0,
        help="Wall-clock seconds per frame (default: 1/60)"
    )
    parser.add_argument(
        '--speed', type=float, default=1.0,
        help="Simulation speed multiplier (default: 1)"
    )
    parser.add_argument(
        '--start',
        help="Start instant, ISO 8601 UTC (default: now)"
    )
    parser.add_argument(
        '--no-links', action='store_true', default=False,
        help="Skip the optical link computation"
    )
    parser.add_argument(
        '--select', type=int,
        help="Satellite id to select and report on"
    )
    parser.add_argument(
        '--export-frame',
        help="Write the last frame as JSON"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log progress at INFO level"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.ticks < 0:
        parser.error("--ticks must be non-negative")
    if args.dt < 0:
        parser.error("--dt must be non-negative")

    if args.tle:
        try:
            text = read_element_file(args.tle)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        text = SAMPLE_ELEMENTS

    start = None
    if args.start:
        try:
            start = _parse_start(args.start)
        except ValueError as e:
            parser.error(f"invalid --start: {e}")

    sim, frame = run(
        text,
        ticks=args.ticks,
        dt=args.dt,
        speed=args.speed,
        start=start,
        show_links=not args.no_links,
        select_id=args.select,
    )
    if frame is None:
        print(f"Error: {NO_DATA_MESSAGE}", file=sys.stderr)
        sys.exit(1)

    print(f"Simulated {len(sim.satellites)} satellites at {frame.instant.isoformat()}")
    print(f"  Visible: {frame.visible_count}")
    print(f"  Links:   {len(frame.segments)}")
    print(f"  Speed:   {sim.clock.speed_multiplier:g}x")
    if args.select is not None:
        _print_detail(sim)

    if args.export_frame:
        count = JsonFrameExporter().export(frame, args.export_frame)
        print(f"Exported frame with {count} visible satellites to {args.export_frame}")


if __name__ == '__main__':
    main()
