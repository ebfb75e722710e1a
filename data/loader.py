"""Layout file parsing — CSV/XLSX into per-floor spot counts."""

from typing import List
import pandas as pd

from config.defaults import LAYOUT_FLOOR_COLUMN, LAYOUT_SPOTS_COLUMN
from data.validator import validate_layout


def parse_layout(df: pd.DataFrame) -> List[int]:
    """Convert a layout DataFrame into spot counts ordered by floor number."""
    result = validate_layout(df)
    if not result.is_valid:
        raise ValueError("; ".join(result.errors))
    ordered = df.assign(
        _floor=df[LAYOUT_FLOOR_COLUMN].astype(int),
    ).sort_values("_floor")
    return [int(n) for n in ordered[LAYOUT_SPOTS_COLUMN]]


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


def load_layout_path(path: str) -> List[int]:
    """Load a layout file from a local path and return per-floor spot counts."""
    lower = str(path).lower()
    if lower.endswith(".csv"):
        df = pd.read_csv(path)
    elif lower.endswith(".xlsx") or lower.endswith(".xls"):
        df = pd.read_excel(path, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {path}. Use CSV or XLSX.")
    return parse_layout(df)
