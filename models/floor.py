"""A single parking floor: an ordered, fixed-length row of spots."""

from typing import List, Optional, Sequence
from models.spot import Spot


class Floor:
    def __init__(self, floor_index: int, num_spots: int):
        if num_spots < 0:
            raise ValueError(f"Floor {floor_index}: spot count cannot be negative ({num_spots}).")
        self.floor_index = floor_index
        self.spots: List[Spot] = [Spot(floor_index, i) for i in range(num_spots)]

    @property
    def capacity(self) -> int:
        return len(self.spots)

    def find_candidates(self, required_units: int) -> List[int]:
        """First-fit search. Returns spot indexes to commit, or [] if none fit.

        One unit takes the lowest free index. Two units take the lowest pair
        (i, i+1) where both are free; pairs never wrap around the row.
        """
        if required_units == 1:
            for spot in self.spots:
                if not spot.occupied:
                    return [spot.spot_index]
        elif required_units == 2:
            for i in range(len(self.spots) - 1):
                if not self.spots[i].occupied and not self.spots[i + 1].occupied:
                    return [i, i + 1]
        return []

    def commit(self, spot_indexes: Sequence[int], occupant_id: str) -> bool:
        """Assign all listed spots to one occupant, or none of them."""
        if not spot_indexes:
            return False
        # Validate everything before the first assignment
        for idx in spot_indexes:
            if idx < 0 or idx >= len(self.spots) or self.spots[idx].occupied:
                return False
        if len(set(spot_indexes)) != len(spot_indexes):
            return False

        for idx in spot_indexes:
            self.spots[idx].assign(occupant_id)
        return True

    def release(self, occupant_id: str) -> bool:
        released = False
        for spot in self.spots:
            if spot.occupied and spot.occupant_id == occupant_id:
                spot.release()
                released = True
        return released

    def available_count(self) -> int:
        return sum(1 for s in self.spots if not s.occupied)

    def occupied_count(self) -> int:
        return self.capacity - self.available_count()

    def occupancy(self) -> List[Optional[str]]:
        """Occupant id per spot, None where free."""
        return [s.occupant_id for s in self.spots]

    def __repr__(self) -> str:
        return f"Floor({self.floor_index}, {self.available_count()}/{self.capacity} free)"
