"""Tests for the parking lot allocator."""

import sys
import os
import random
import threading
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from engine.parking_lot import ParkingLot
from models.vehicle import Vehicle
from models.allocation import AllocationStatus, InternalConsistencyError, Location


def make_lot(floors=1, spots=3):
    return ParkingLot.uniform(floors, spots)


def car(plate):
    return Vehicle(plate, "Car")


def truck(plate):
    return Vehicle(plate, "Truck")


def occupied_spots(lot):
    return sum(1 for f in lot.snapshot() for s in f["spots"] if s is not None)


class TestConstruction:
    def test_uniform_dimensions(self):
        lot = make_lot(floors=3, spots=4)
        assert lot.num_floors == 3
        assert lot.total_capacity == 12
        assert lot.available_per_floor() == [4, 4, 4]

    def test_per_floor_layout(self):
        lot = ParkingLot([2, 0, 5])
        assert lot.available_per_floor() == [2, 0, 5]
        assert lot.total_capacity == 7

    def test_invalid_dimensions(self):
        with pytest.raises(ValueError):
            ParkingLot.uniform(0, 5)
        with pytest.raises(ValueError):
            ParkingLot.uniform(2, -1)
        with pytest.raises(ValueError):
            ParkingLot([])
        with pytest.raises(ValueError):
            ParkingLot([3, -2])

    def test_uniform_matches_explicit_layout(self):
        uniform = ParkingLot.uniform(2, 3)
        explicit = ParkingLot([3, 3])
        assert type(uniform) is ParkingLot
        assert uniform.available_per_floor() == explicit.available_per_floor()
        assert uniform.park(car("A")).location == explicit.park(car("A")).location


class TestPark:
    def test_reference_scenario(self):
        lot = make_lot(floors=1, spots=3)

        a = lot.park(car("A"))
        assert a.status is AllocationStatus.PARKED
        assert a.location == Location(0, (0,))

        b = lot.park(truck("B"))
        assert b.status is AllocationStatus.PARKED
        assert b.location == Location(0, (1, 2))

        assert lot.park(car("C")).status is AllocationStatus.NO_SPACE_AVAILABLE
        assert lot.release("A").status is AllocationStatus.RELEASED

        c = lot.park(car("C"))
        assert c.status is AllocationStatus.PARKED
        assert c.location == Location(0, (0,))

    def test_is_full_scenario(self):
        lot = make_lot(floors=1, spots=3)
        lot.park(car("A"))
        lot.park(truck("B"))
        assert lot.is_full() is True
        lot.release("A")
        assert lot.is_full() is False

    def test_double_park(self):
        lot = make_lot(floors=2, spots=5)
        assert lot.park(car("A")).ok
        second = lot.park(car("A"))
        assert second.status is AllocationStatus.ALREADY_PARKED
        assert second.location is None
        assert lot.parked_count() == 1

    def test_double_park_with_different_category(self):
        lot = make_lot(floors=1, spots=5)
        lot.park(car("A"))
        assert lot.park(truck("A")).status is AllocationStatus.ALREADY_PARKED

    def test_first_fit_prefers_lowest_floor(self):
        lot = make_lot(floors=3, spots=2)
        lot.park(car("A"))
        result = lot.park(car("B"))
        assert result.location == Location(0, (1,))
        assert lot.park(car("C")).location == Location(1, (0,))

    def test_first_fit_is_repeatable(self):
        results = []
        for _ in range(3):
            lot = make_lot(floors=2, spots=4)
            lot.park(car("A"))
            lot.park(truck("T"))
            lot.release("A")
            results.append(lot.park(car("B")).location)
        assert results == [Location(0, (0,))] * 3

    def test_truck_moves_to_next_floor_when_no_pair(self):
        lot = make_lot(floors=2, spots=3)
        lot.park(car("A"))   # F0 spot 0
        lot.park(car("B"))   # F0 spot 1
        result = lot.park(truck("T"))
        assert result.location == Location(1, (0, 1))

    def test_truck_never_spans_floors(self):
        lot = make_lot(floors=2, spots=1)
        assert lot.park(truck("T")).status is AllocationStatus.NO_SPACE_AVAILABLE
        assert lot.available_per_floor() == [1, 1]

    def test_truck_skips_fragmented_gaps(self):
        lot = make_lot(floors=1, spots=5)
        for plate in ["A", "B", "C", "D", "E"]:
            lot.park(car(plate))
        lot.release("B")
        lot.release("D")
        assert lot.park(truck("T")).status is AllocationStatus.NO_SPACE_AVAILABLE
        lot.release("C")
        assert lot.park(truck("T")).location == Location(0, (1, 2))

    def test_failed_commit_does_not_fall_through(self, monkeypatch):
        lot = make_lot(floors=2, spots=3)
        first_floor = lot._floors[0]
        monkeypatch.setattr(first_floor, "commit", lambda idx, oid: False)

        result = lot.park(car("A"))
        assert result.status is AllocationStatus.NO_SPACE_AVAILABLE
        assert lot.available_per_floor() == [3, 3]
        assert lot.locate("A").status is AllocationStatus.NOT_FOUND

    def test_zero_spot_floor_is_skipped(self):
        lot = ParkingLot([0, 2])
        assert lot.park(car("A")).location == Location(1, (0,))


class TestRelease:
    def test_unknown_vehicle(self):
        lot = make_lot()
        result = lot.release("GHOST")
        assert result.status is AllocationStatus.NOT_FOUND
        assert result.floor_index is None

    def test_release_twice(self):
        lot = make_lot()
        lot.park(car("A"))
        assert lot.release("A").ok
        assert lot.release("A").status is AllocationStatus.NOT_FOUND

    def test_release_frees_both_truck_spots(self):
        lot = make_lot(floors=1, spots=4)
        lot.park(truck("T"))
        result = lot.release("T")
        assert result.floor_index == 0
        assert lot.available_per_floor() == [4]

    def test_inconsistent_record_raises(self):
        lot = make_lot()
        lot.park(car("A"))
        # Corrupt the arena behind the index's back
        lot._floors[0].spots[0].release()
        with pytest.raises(InternalConsistencyError):
            lot.release("A")


class TestQueries:
    def test_locate_round_trip(self):
        lot = make_lot(floors=2, spots=3)
        lot.park(car("A"))
        parked = lot.park(truck("T"))
        found = lot.locate("T")
        assert found.status is AllocationStatus.FOUND
        assert found.location == parked.location

    def test_locate_unknown(self):
        assert make_lot().locate("NOPE").status is AllocationStatus.NOT_FOUND

    def test_available_per_floor_order(self):
        lot = ParkingLot([1, 3])
        lot.park(car("A"))
        lot.park(car("B"))
        assert lot.available_per_floor() == [0, 2]

    def test_is_full_requires_every_floor(self):
        lot = make_lot(floors=2, spots=1)
        lot.park(car("A"))
        assert lot.is_full() is False
        lot.park(car("B"))
        assert lot.is_full() is True

    def test_snapshot_is_a_copy(self):
        lot = make_lot(floors=1, spots=2)
        lot.park(truck("T"))
        snap = lot.snapshot()
        assert snap[0]["spots"] == ["T", "T"]
        assert snap[0]["categories"] == {"T": "Truck"}
        snap[0]["spots"][0] = None
        assert lot.snapshot()[0]["spots"] == ["T", "T"]

    def test_audit_log_records_outcomes(self):
        lot = make_lot(floors=1, spots=1)
        lot.park(car("A"))
        lot.park(car("B"))
        lot.release("A")
        lot.release("A")
        outcomes = [(e.action, e.occupant_id, e.outcome) for e in lot.audit_log()]
        assert outcomes == [
            ("park", "A", "parked"),
            ("park", "B", "no_space_available"),
            ("release", "A", "released"),
            ("release", "A", "not_found"),
        ]

    def test_audit_log_keeps_most_recent_entries(self):
        lot = ParkingLot([2], audit_limit=3)
        for plate in ["A", "B", "C", "D"]:
            lot.park(car(plate))
        entries = lot.audit_log()
        assert isinstance(entries, list)
        assert [e.occupant_id for e in entries] == ["B", "C", "D"]
        assert lot.parked_count() == 2


class TestInvariants:
    def test_random_sequence_keeps_index_consistent(self):
        rng = random.Random(7)
        lot = make_lot(floors=3, spots=5)
        parked = {}
        for step in range(400):
            plate = f"V{rng.randint(0, 20)}"
            if rng.random() < 0.6:
                vehicle = Vehicle(plate, rng.choice(["Bike", "Car", "Truck"]))
                result = lot.park(vehicle)
                if plate in parked:
                    assert result.status is AllocationStatus.ALREADY_PARKED
                elif result.ok:
                    parked[plate] = result.location
            else:
                result = lot.release(plate)
                if plate in parked:
                    assert result.ok
                    del parked[plate]
                else:
                    assert result.status is AllocationStatus.NOT_FOUND

            for loc in parked.values():
                if loc.units == 2:
                    assert loc.spot_indexes[1] == loc.spot_indexes[0] + 1
            assert occupied_spots(lot) == sum(loc.units for loc in parked.values())
            lot.check_invariants()

    def test_check_invariants_detects_orphan_spot(self):
        lot = make_lot(floors=1, spots=3)
        lot._floors[0].spots[2].assign("ORPHAN")
        with pytest.raises(InternalConsistencyError):
            lot.check_invariants()


class TestConcurrency:
    def test_parallel_parking_never_double_allocates(self):
        lot = make_lot(floors=4, spots=25)
        results = []
        results_lock = threading.Lock()

        def worker(worker_id):
            for i in range(40):
                category = "Truck" if i % 3 == 0 else "Car"
                r = lot.park(Vehicle(f"W{worker_id}-{i}", category))
                with results_lock:
                    results.append(r)

        threads = [threading.Thread(target=worker, args=(w,)) for w in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        claimed = []
        for r in results:
            if r.ok:
                claimed.extend((r.location.floor_index, s) for s in r.location.spot_indexes)
        assert len(claimed) == len(set(claimed))
        assert occupied_spots(lot) == len(claimed)
        lot.check_invariants()

    def test_parallel_same_plate_parks_once(self):
        lot = make_lot(floors=2, spots=10)
        statuses = []
        barrier = threading.Barrier(10)

        def worker():
            barrier.wait()
            statuses.append(lot.park(car("SAME")).status)

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert statuses.count(AllocationStatus.PARKED) == 1
        assert statuses.count(AllocationStatus.ALREADY_PARKED) == 9

    def test_parallel_park_and_release(self):
        lot = make_lot(floors=2, spots=6)

        def cycle(worker_id):
            for i in range(50):
                plate = f"C{worker_id}-{i % 3}"
                lot.park(car(plate))
                lot.release(plate)

        threads = [threading.Thread(target=cycle, args=(w,)) for w in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert lot.available_per_floor() == [6, 6]
        assert lot.parked_count() == 0
        lot.check_invariants()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
