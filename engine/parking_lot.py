"""Thread-safe allocator: owns every floor and the occupant -> location index."""

import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional, Sequence

from models.floor import Floor
from models.vehicle import Vehicle
from models.audit import AuditEntry
from config.defaults import AUDIT_LOG_LIMIT
from models.allocation import (
    AllocationStatus, InternalConsistencyError, Location,
    ParkResult, ReleaseResult, LocateResult,
)

log = logging.getLogger(__name__)


class ParkingLot:
    """Multi-floor parking lot.

    A single lock serializes every public method for its full duration, so no
    caller observes a partially applied park or release. Floors are created
    once and indexed by position; callers only ever receive value copies.
    """

    def __init__(self, spot_counts: Sequence[int], audit_limit: Optional[int] = AUDIT_LOG_LIMIT):
        """Build a lot whose floor i holds spot_counts[i] spots."""
        if not spot_counts:
            raise ValueError("Layout must contain at least one floor.")
        self._lock = threading.Lock()
        self._floors: List[Floor] = [Floor(i, n) for i, n in enumerate(spot_counts)]
        self._locations: Dict[str, Location] = {}
        self._categories: Dict[str, str] = {}
        # Oldest entries fall off once the limit is reached
        self._audit: Deque[AuditEntry] = deque(maxlen=audit_limit)

    @classmethod
    def uniform(cls, num_floors: int, spots_per_floor: int, **kwargs) -> "ParkingLot":
        """Every floor holds the same number of spots."""
        if num_floors <= 0:
            raise ValueError(f"Number of floors must be positive, got {num_floors}.")
        if spots_per_floor < 0:
            raise ValueError(f"Spots per floor cannot be negative, got {spots_per_floor}.")
        return cls([spots_per_floor] * num_floors, **kwargs)

    @property
    def num_floors(self) -> int:
        return len(self._floors)

    @property
    def total_capacity(self) -> int:
        return sum(f.capacity for f in self._floors)

    # --- Mutations ---

    def park(self, vehicle: Vehicle) -> ParkResult:
        """Place a vehicle on the first floor that has room for it.

        Floors are tried in ascending order. The first floor reporting a
        candidate gets the commit; if that commit fails re-validation the call
        ends with NO_SPACE_AVAILABLE rather than trying anywhere else.
        """
        occupant_id = vehicle.occupant_id
        required = vehicle.required_units

        with self._lock:
            if occupant_id in self._locations:
                log.info("Vehicle %s is already parked", occupant_id)
                return self._record_park(vehicle, AllocationStatus.ALREADY_PARKED)

            for floor in self._floors:
                candidates = floor.find_candidates(required)
                if not candidates:
                    continue
                if not floor.commit(candidates, occupant_id):
                    log.warning(
                        "Commit of spots %s on floor %d failed re-validation for %s",
                        candidates, floor.floor_index, occupant_id,
                    )
                    break

                location = Location(floor.floor_index, tuple(candidates))
                self._locations[occupant_id] = location
                self._categories[occupant_id] = vehicle.category
                log.info("Parked %s on %s", occupant_id, location.describe())
                return self._record_park(vehicle, AllocationStatus.PARKED, location)

            log.info("No suitable spot available for %s (%s)", occupant_id, vehicle.category)
            return self._record_park(vehicle, AllocationStatus.NO_SPACE_AVAILABLE)

    def release(self, occupant_id: str) -> ReleaseResult:
        with self._lock:
            location = self._locations.get(occupant_id)
            if location is None:
                log.info("Vehicle %s not found", occupant_id)
                self._audit.append(AuditEntry(
                    action="release",
                    occupant_id=occupant_id,
                    outcome=AllocationStatus.NOT_FOUND.value,
                ))
                return ReleaseResult(AllocationStatus.NOT_FOUND, occupant_id)

            floor = self._floors[location.floor_index]
            if not floor.release(occupant_id):
                log.error(
                    "Vehicle %s is indexed on floor %d but holds no spot there",
                    occupant_id, location.floor_index,
                )
                raise InternalConsistencyError(
                    f"Vehicle {occupant_id} recorded on floor {location.floor_index} "
                    f"spots {list(location.spot_indexes)} but the floor could not release it."
                )

            del self._locations[occupant_id]
            category = self._categories.pop(occupant_id, None)
            self._audit.append(AuditEntry(
                action="release",
                occupant_id=occupant_id,
                outcome=AllocationStatus.RELEASED.value,
                category=category,
                floor_index=location.floor_index,
                spot_indexes=location.spot_indexes,
            ))
            log.info("Vehicle %s removed from floor %d", occupant_id, location.floor_index)
            return ReleaseResult(AllocationStatus.RELEASED, occupant_id, location.floor_index)

    def _record_park(
        self,
        vehicle: Vehicle,
        status: AllocationStatus,
        location: Optional[Location] = None,
    ) -> ParkResult:
        self._audit.append(AuditEntry(
            action="park",
            occupant_id=vehicle.occupant_id,
            outcome=status.value,
            category=vehicle.category,
            floor_index=location.floor_index if location else None,
            spot_indexes=location.spot_indexes if location else (),
        ))
        return ParkResult(status, vehicle.occupant_id, location)

    # --- Queries ---

    def available_per_floor(self) -> List[int]:
        with self._lock:
            return [f.available_count() for f in self._floors]

    def is_full(self) -> bool:
        with self._lock:
            return all(f.available_count() == 0 for f in self._floors)

    def locate(self, occupant_id: str) -> LocateResult:
        with self._lock:
            location = self._locations.get(occupant_id)
        if location is None:
            return LocateResult(AllocationStatus.NOT_FOUND, occupant_id)
        return LocateResult(AllocationStatus.FOUND, occupant_id, location)

    def parked_count(self) -> int:
        with self._lock:
            return len(self._locations)

    def snapshot(self) -> List[dict]:
        """Consistent per-floor view: capacity plus occupant id per spot."""
        with self._lock:
            return [{
                "floor_index": f.floor_index,
                "capacity": f.capacity,
                "spots": f.occupancy(),
                "categories": {
                    oid: self._categories.get(oid)
                    for oid in set(f.occupancy()) if oid is not None
                },
            } for f in self._floors]

    def audit_log(self) -> List[AuditEntry]:
        with self._lock:
            return list(self._audit)

    def check_invariants(self):
        """Raise InternalConsistencyError unless index and spots agree exactly."""
        with self._lock:
            held: Dict[str, List[tuple]] = {}
            for floor in self._floors:
                for spot in floor.spots:
                    if spot.occupied != (spot.occupant_id is not None):
                        raise InternalConsistencyError(
                            f"Spot {floor.floor_index}/{spot.spot_index} occupancy flag "
                            f"disagrees with occupant {spot.occupant_id!r}."
                        )
                    if spot.occupied:
                        held.setdefault(spot.occupant_id, []).append(
                            (floor.floor_index, spot.spot_index)
                        )

            expected = {
                oid: [(loc.floor_index, s) for s in loc.spot_indexes]
                for oid, loc in self._locations.items()
            }
            if held != expected:
                raise InternalConsistencyError(
                    f"Allocation index {expected} does not match occupied spots {held}."
                )
