"""Generate sample layouts and vehicle traffic for the Parking Allocation Platform."""

import random
from typing import List, Tuple
import pandas as pd

from config.defaults import (
    VEHICLE_CATEGORIES, LAYOUT_FLOOR_COLUMN, LAYOUT_SPOTS_COLUMN,
    DEFAULT_FLOOR_COUNT, DEFAULT_SPOTS_PER_FLOOR,
)


def generate_layout_df(
    num_floors: int = DEFAULT_FLOOR_COUNT,
    spots_per_floor: int = DEFAULT_SPOTS_PER_FLOOR,
) -> pd.DataFrame:
    """Uniform layout: every floor has the same number of spots."""
    return pd.DataFrame([
        {LAYOUT_FLOOR_COLUMN: i, LAYOUT_SPOTS_COLUMN: spots_per_floor}
        for i in range(num_floors)
    ])


def generate_arrivals(count: int, seed: int = 42) -> List[Tuple[str, str]]:
    """Random (license_plate, category) pairs for demo traffic."""
    rng = random.Random(seed)
    categories = list(VEHICLE_CATEGORIES)
    arrivals = []
    for i in range(count):
        plate = f"{rng.choice('ABCDEFGHJKLMNPRSTUVWXYZ')}{rng.choice('ABCDEFGHJKLMNPRSTUVWXYZ')}-{i:04d}"
        arrivals.append((plate, rng.choice(categories)))
    return arrivals
