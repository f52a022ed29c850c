# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for propagation, element sources and frame export.

External dependencies (sgp4, json, file I/O) are confined to this layer.
"""
from orbitlink.adapters.sgp4_propagator import (
    Sgp4Propagator,
    Sgp4PropagatorFactory,
    UnavailablePropagator,
)
from orbitlink.adapters.sample_data import SAMPLE_ELEMENTS, read_element_file
from orbitlink.adapters.frame_exporter import JsonFrameExporter, frame_to_dict

__all__ = [
    "Sgp4Propagator",
    "Sgp4PropagatorFactory",
    "UnavailablePropagator",
    "SAMPLE_ELEMENTS",
    "read_element_file",
    "JsonFrameExporter",
    "frame_to_dict",
]
