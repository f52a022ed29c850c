# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Simulation clock.

Two states, running and paused. While running, each tick advances
simulated time by wall-clock delta times the speed multiplier; while
paused, ticks leave it untouched. Every transition returns a new clock.

Elapsed simulated time is summed as float seconds from a fixed anchor
instant, so n ticks of dt land on anchor + n·dt·s without per-tick
microsecond rounding. The speed magnitude lies in [1, MAX_SPEED_MULTIPLIER]
and the instant saturates at the datetime range instead of overflowing.
"""
import math
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone

MAX_SPEED_MULTIPLIER = 1.0e6


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def _limits(anchor: datetime) -> tuple[datetime, datetime]:
    return (
        datetime.min.replace(tzinfo=anchor.tzinfo),
        datetime.max.replace(tzinfo=anchor.tzinfo),
    )


def _offset_instant(anchor: datetime, seconds: float) -> datetime:
    """anchor + seconds, saturated at the representable range."""
    earliest, latest = _limits(anchor)
    try:
        return anchor + timedelta(seconds=seconds)
    except OverflowError:
        return latest if seconds > 0 else earliest


@dataclass(frozen=True)
class SimulationClock:
    """Immutable clock state.

    ``anchor_instant`` and ``elapsed_seconds`` are bookkeeping for
    :meth:`advance`; a clock built from ``current_instant`` alone
    anchors itself there on the first tick.
    """
    current_instant: datetime
    speed_multiplier: float = 1.0
    paused: bool = False
    anchor_instant: datetime | None = field(default=None, repr=False)
    elapsed_seconds: float = field(default=0.0, repr=False)

    @classmethod
    def now(cls) -> "SimulationClock":
        return cls(current_instant=_utc_now())

    def advance(self, dt_seconds: float) -> "SimulationClock":
        """
        Apply one tick of ``dt_seconds`` elapsed wall time.

        Raises:
            ValueError: If dt is negative or not finite.
        """
        if not math.isfinite(dt_seconds) or dt_seconds < 0:
            raise ValueError(f"dt must be a finite non-negative number, got {dt_seconds}")
        if self.paused:
            return self

        anchor = self.anchor_instant
        elapsed = self.elapsed_seconds
        if anchor is None:
            anchor, elapsed = self.current_instant, 0.0

        earliest, latest = _limits(anchor)
        elapsed += dt_seconds * self.speed_multiplier
        # Keep the sum bounded once the instant has saturated
        elapsed = min(max(elapsed, (earliest - anchor).total_seconds()),
                      (latest - anchor).total_seconds())

        return replace(
            self,
            current_instant=_offset_instant(anchor, elapsed),
            anchor_instant=anchor,
            elapsed_seconds=elapsed,
        )

    def toggle_pause(self) -> "SimulationClock":
        return replace(self, paused=not self.paused)

    def change_speed(self, factor: float) -> "SimulationClock":
        """
        Multiply the speed by ``factor``.

        A result with magnitude below 1 snaps to ±1 keeping its sign;
        a zero result snaps to +1. Magnitudes above
        MAX_SPEED_MULTIPLIER are capped there, sign kept.

        Raises:
            ValueError: If factor is not finite.
        """
        if not math.isfinite(factor):
            raise ValueError(f"Speed factor must be finite, got {factor}")
        speed = self.speed_multiplier * factor
        if speed == 0:
            speed = 1.0
        elif abs(speed) < 1:
            speed = math.copysign(1.0, speed)
        elif abs(speed) > MAX_SPEED_MULTIPLIER:
            speed = math.copysign(MAX_SPEED_MULTIPLIER, speed)
        return replace(self, speed_multiplier=speed)

    def reset(self, now: datetime | None = None) -> "SimulationClock":
        """Back to real time, 1x speed, running."""
        return SimulationClock(
            current_instant=now if now is not None else _utc_now(),
            speed_multiplier=1.0,
            paused=False,
        )
