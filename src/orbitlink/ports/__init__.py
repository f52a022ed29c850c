# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces between the domain and external libraries.

Adapters implement these to plug in a concrete propagation model.
"""
from orbitlink.ports.propagation import Propagator, PropagatorFactory

__all__ = ["Propagator", "PropagatorFactory"]
