# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for orbit propagation.

Adapters wrap a concrete orbital-mechanics library behind these so the
domain never sees that library's types.
"""
from datetime import datetime
from typing import Protocol, runtime_checkable

from orbitlink.domain.elements import ElementRecord
from orbitlink.domain.state import StateVector


@runtime_checkable
class Propagator(Protocol):
    """Port for computing one satellite's state at an instant."""

    def compute(self, instant: datetime) -> StateVector | None:
        """
        Propagate to ``instant``.

        Returns:
            Inertial state vector, or None when the model has no state
            (decayed orbit, numerical breakdown). None is a normal
            per-instant outcome, not an error.
        """
        ...


@runtime_checkable
class PropagatorFactory(Protocol):
    """Port for turning element records into propagators."""

    def from_record(self, record: ElementRecord) -> Propagator:
        """Build a propagator for one element record."""
        ...
