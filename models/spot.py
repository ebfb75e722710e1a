from dataclasses import dataclass
from typing import Optional


@dataclass
class Spot:
    floor_index: int
    spot_index: int
    occupied: bool = False
    occupant_id: Optional[str] = None   # set iff occupied

    def assign(self, occupant_id: str) -> bool:
        if self.occupied:
            return False
        self.occupied = True
        self.occupant_id = occupant_id
        return True

    def release(self) -> bool:
        if not self.occupied:
            return False
        self.occupied = False
        self.occupant_id = None
        return True
