# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Element text sources: bundled sample data and TLE files.

The sample is two adjacent planes of eight satellites each at ~550 km,
53° inclination, epoch 2026-10-15 12:00 UTC. Neighbours sit 8° apart
in mean anomaly, close enough for optical cross-links.
"""
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SAMPLE_ELEMENTS = """\
ORBLINK-101
1 90001U 26001A   26288.50000000  .00000000  00000-0  00000-0 0  9990
2 90001  53.0000  40.0000 0001000   0.0000   0.0000 15.05000000    17
ORBLINK-102
1 90002U 26001B   26288.50000000  .00000000  00000-0  00000-0 0  9991
2 90002  53.0000  40.0000 0001000   0.0000   8.0000 15.05000000    16
ORBLINK-103
1 90003U 26001C   26288.50000000  .00000000  00000-0  00000-0 0  9992
2 90003  53.0000  40.0000 0001000   0.0000  16.0000 15.05000000    16
ORBLINK-104
1 90004U 26001D   26288.50000000  .00000000  00000-0  00000-0 0  9993
2 90004  53.0000  40.0000 0001000   0.0000  24.0000 15.05000000    16
ORBLINK-105
1 90005U 26001E   26288.50000000  .00000000  00000-0  00000-0 0  9994
2 90005  53.0000  40.0000 0001000   0.0000  32.0000 15.05000000    16
ORBLINK-106
1 90006U 26001F   26288.50000000  .00000000  00000-0  00000-0 0  9995
2 90006  53.0000  40.0000 0001000   0.0000  40.0000 15.05000000    16
ORBLINK-107
1 90007U 26001G   26288.50000000  .00000000  00000-0  00000-0 0  9996
2 90007  53.0000  40.0000 0001000   0.0000  48.0000 15.05000000    15
ORBLINK-108
1 90008U 26001H   26288.50000000  .00000000  00000-0  00000-0 0  9997
2 90008  53.0000  40.0000 0001000   0.0000  56.0000 15.05000000    15
ORBLINK-201
1 90009U 26001I   26288.50000000  .00000000  00000-0  00000-0 0  9998
2 90009  53.0000  45.0000 0001000   0.0000   4.0000 15.05000000    14
ORBLINK-202
1 90010U 26001J   26288.50000000  .00000000  00000-0  00000-0 0  9990
2 90010  53.0000  45.0000 0001000   0.0000  12.0000 15.05000000    15
ORBLINK-203
1 90011U 26001K   26288.50000000  .00000000  00000-0  00000-0 0  9991
2 90011  53.0000  45.0000 0001000   0.0000  20.0000 15.05000000    15
ORBLINK-204
1 90012U 26001L   26288.50000000  .00000000  00000-0  00000-0 0  9992
2 90012  53.0000  45.0000 0001000   0.0000  28.0000 15.05000000    14
ORBLINK-205
1 90013U 26001M   26288.50000000  .00000000  00000-0  00000-0 0  9993
2 90013  53.0000  45.0000 0001000   0.0000  36.0000 15.05000000    14
ORBLINK-206
1 90014U 26001N   26288.50000000  .00000000  00000-0  00000-0 0  9994
2 90014  53.0000  45.0000 0001000   0.0000  44.0000 15.05000000    14
ORBLINK-207
1 90015U 26001O   26288.50000000  .00000000  00000-0  00000-0 0  9995
2 90015  53.0000  45.0000 0001000   0.0000  52.0000 15.05000000    14
ORBLINK-208
1 90016U 26001P   26288.50000000  .00000000  00000-0  00000-0 0  9996
2 90016  53.0000  45.0000 0001000   0.0000  60.0000 15.05000000    14
"""


def read_element_file(path: str) -> str:
    """
    Read TLE text from a file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"TLE file not found: {path}")
    text = file_path.read_text(encoding="utf-8", errors="replace")
    logger.debug("Read %d characters from %s", len(text), path)
    return text
