"""
Equipment Catalog

The ND filter kit and the shutter speeds of a Canon 90D. Both lists are fixed
and validated once on import, so a broken catalog stops the program before
any table is printed.
"""

import os
import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from models import Filter, Shutter
from generators import validate_base_filters

# Order matters: the hand-picked stacks refer to these positions
BASE_FILTERS = (
    Filter(10, "1k"),  # ND1000
    Filter(6, "64"),   # ND64
    Filter(3, "8"),    # ND8
    Filter(2, "4"),    # ND4
)

# Fastest to slowest; this is the row order of every table.
# 1/8000, 1/6400 and 1/5000 are supported by the camera but left out.
BASE_SHUTTERS = tuple(
    [Shutter.from_fraction(d) for d in (
        4000, 3200, 2500, 2000, 1600, 1250, 1000, 800, 640, 500,
        400, 320, 250, 200, 160, 125, 100, 80, 60, 50,
        40, 30, 25, 20, 15, 13, 10, 8, 6, 5,
        4,
    )]
    + [Shutter.from_seconds(s, t) for s, t in (
        (0, 3), (0, 4), (0, 5), (0, 6), (0, 8),
        (1, 0), (1, 3), (1, 6), (2, 0), (2, 5),
        (3, 2), (4, 0), (5, 0), (6, 0), (8, 0),
        (10, 0), (13, 0), (15, 0), (20, 0), (25, 0),
        (30, 0),
    )]
)

validate_base_filters(BASE_FILTERS)
