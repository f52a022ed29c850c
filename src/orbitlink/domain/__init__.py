# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Domain layer: element parsing, frames, links, coloring, clock, session.

No external dependencies beyond numpy.
"""
