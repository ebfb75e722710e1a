from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class AllocationStatus(Enum):
    PARKED = "parked"
    ALREADY_PARKED = "already_parked"
    NO_SPACE_AVAILABLE = "no_space_available"
    RELEASED = "released"
    FOUND = "found"
    NOT_FOUND = "not_found"


class InternalConsistencyError(RuntimeError):
    """The allocation index and the spot arena disagree."""


@dataclass(frozen=True)
class Location:
    floor_index: int
    spot_indexes: Tuple[int, ...]

    @property
    def units(self) -> int:
        return len(self.spot_indexes)

    def describe(self) -> str:
        spots = " ".join(str(s) for s in self.spot_indexes)
        return f"floor {self.floor_index} at spot(s): {spots}"


@dataclass(frozen=True)
class ParkResult:
    status: AllocationStatus
    occupant_id: str
    location: Optional[Location] = None

    @property
    def ok(self) -> bool:
        return self.status is AllocationStatus.PARKED


@dataclass(frozen=True)
class ReleaseResult:
    status: AllocationStatus
    occupant_id: str
    floor_index: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status is AllocationStatus.RELEASED


@dataclass(frozen=True)
class LocateResult:
    status: AllocationStatus
    occupant_id: str
    location: Optional[Location] = None

    @property
    def ok(self) -> bool:
        return self.status is AllocationStatus.FOUND
