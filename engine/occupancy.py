"""Per-floor occupancy statistics and capacity alerts."""

from typing import Dict, List
import pandas as pd

from models.audit import AuditEntry
from config.defaults import FLOOR_SATURATION_THRESHOLD


def get_floor_occupancy(snapshot: List[dict]) -> List[dict]:
    """Compute occupancy stats per floor from a ParkingLot.snapshot()."""
    results = []
    for floor in snapshot:
        spots = floor["spots"]
        total = floor["capacity"]
        occupied = sum(1 for s in spots if s is not None)

        vehicles: Dict[str, List[int]] = {}
        for idx, oid in enumerate(spots):
            if oid is not None:
                vehicles.setdefault(oid, []).append(idx)

        results.append({
            "floor_index": floor["floor_index"],
            "total_spots": total,
            "occupied_spots": occupied,
            "available_spots": total - occupied,
            "occupancy_pct": occupied / total if total > 0 else 0,
            "vehicle_count": len(vehicles),
            "vehicles": vehicles,
        })
    return results


def occupancy_dataframe(floor_occupancy: List[dict]) -> pd.DataFrame:
    """Tabular floor summary for display."""
    rows = []
    for fo in floor_occupancy:
        vehicles_str = ", ".join(
            f"{oid}: {'/'.join(str(s) for s in spots)}"
            for oid, spots in fo["vehicles"].items()
        ) if fo["vehicles"] else "—"
        rows.append({
            "Floor": fo["floor_index"],
            "Total Spots": fo["total_spots"],
            "Occupied": fo["occupied_spots"],
            "Available": fo["available_spots"],
            "Occupancy": fo["occupancy_pct"],
            "# Vehicles": fo["vehicle_count"],
            "Vehicles (spots)": vehicles_str,
        })
    return pd.DataFrame(rows, columns=[
        "Floor", "Total Spots", "Occupied", "Available",
        "Occupancy", "# Vehicles", "Vehicles (spots)",
    ])


def spot_grid(snapshot: List[dict]) -> List[List[int]]:
    """Matrix of 1 (occupied) / 0 (free) / -1 (no spot), one row per floor.

    Rows are padded to the widest floor so layouts with uneven floors still
    form a rectangle.
    """
    width = max((f["capacity"] for f in snapshot), default=0)
    grid = []
    for floor in snapshot:
        row = [1 if s is not None else 0 for s in floor["spots"]]
        row.extend([-1] * (width - len(row)))
        grid.append(row)
    return grid


def audit_dataframe(entries: List[AuditEntry]) -> pd.DataFrame:
    """Audit trail as a DataFrame, newest last."""
    return pd.DataFrame([{
        "Timestamp": e.timestamp,
        "Action": e.action,
        "Vehicle": e.occupant_id,
        "Type": e.category or "",
        "Outcome": e.outcome,
        "Floor": e.floor_index,
        "Spots": " ".join(str(s) for s in e.spot_indexes),
    } for e in entries], columns=[
        "Timestamp", "Action", "Vehicle", "Type", "Outcome", "Floor", "Spots",
    ])


def get_capacity_alerts(floor_occupancy: List[dict], threshold: float = None) -> List[dict]:
    """Flag saturated floors and a completely full lot."""
    threshold = FLOOR_SATURATION_THRESHOLD if threshold is None else threshold
    alerts = []

    for fo in floor_occupancy:
        if fo["total_spots"] == 0:
            continue
        if fo["available_spots"] == 0:
            alerts.append({
                "type": "floor_full",
                "severity": "warning",
                "floor_index": fo["floor_index"],
                "message": f"Floor {fo['floor_index']} is full.",
            })
        elif fo["occupancy_pct"] >= threshold:
            alerts.append({
                "type": "floor_saturated",
                "severity": "info",
                "floor_index": fo["floor_index"],
                "message": (
                    f"Floor {fo['floor_index']} is {fo['occupancy_pct']:.0%} occupied "
                    f"({fo['available_spots']} spots left)."
                ),
            })

    if floor_occupancy and all(fo["available_spots"] == 0 for fo in floor_occupancy):
        alerts.insert(0, {
            "type": "lot_full",
            "severity": "error",
            "floor_index": None,
            "message": "Parking lot is full.",
        })
    return alerts
