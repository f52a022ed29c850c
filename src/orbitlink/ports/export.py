# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for frame export.

Adapters implement this to hand computed frames to an external
renderer or to a file.
"""
from typing import Protocol, runtime_checkable

from orbitlink.domain.simulation import FrameSnapshot


@runtime_checkable
class FrameExporter(Protocol):
    """Port for exporting one computed frame."""

    def export(self, frame: FrameSnapshot, path: str) -> int:
        """
        Write a frame snapshot to ``path``.

        Returns:
            Number of visible satellites written.
        """
        ...
