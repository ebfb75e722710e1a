"""Schema validation for uploaded lot layout files."""

from dataclasses import dataclass, field
from typing import List
import pandas as pd

from config.defaults import LAYOUT_REQUIRED_COLUMNS, LAYOUT_FLOOR_COLUMN, LAYOUT_SPOTS_COLUMN


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def validate_layout(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, LAYOUT_REQUIRED_COLUMNS, "Lot Layout")
    if not result.is_valid:
        return result

    floors = pd.to_numeric(df[LAYOUT_FLOOR_COLUMN], errors="coerce")
    spots = pd.to_numeric(df[LAYOUT_SPOTS_COLUMN], errors="coerce")

    if floors.isna().any() or spots.isna().any():
        result.is_valid = False
        result.errors.append("Lot Layout: Floor Number and Total Spots must be numeric.")
        return result

    if (floors % 1 != 0).any() or (spots % 1 != 0).any():
        result.is_valid = False
        result.errors.append("Lot Layout: Floor Number and Total Spots must be whole numbers.")
        return result

    if (spots < 0).any():
        result.is_valid = False
        result.errors.append("Lot Layout: Total Spots cannot be negative.")

    dupes = floors.duplicated(keep=False)
    if dupes.any():
        result.is_valid = False
        result.errors.append(
            f"Lot Layout: Duplicate floor entries: {sorted(floors[dupes].astype(int).unique().tolist())}"
        )
    elif sorted(floors.astype(int).tolist()) != list(range(len(floors))):
        result.is_valid = False
        result.errors.append("Lot Layout: Floor numbers must run contiguously from 0.")

    if result.is_valid and (spots == 0).any():
        empty = floors[spots == 0].astype(int).tolist()
        result.warnings.append(f"Lot Layout: Floors with no spots: {empty}")
    if result.is_valid and (spots == 1).any():
        result.warnings.append("Lot Layout: Single-spot floors can never hold a Truck.")

    return result
