"""
Household file loader for batch estimation.

Reads a table of households (CSV, JSON array or JSON lines) into a DataFrame
and turns rows back into TaxCreditInput records.
"""

import json
import math
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import pandas as pd

from ..models import TaxCreditInput

SUPPORTED_SUFFIXES = (".csv", ".json", ".jsonl")


def load_households(
    path: Union[str, Path],
    sample_size: Optional[int] = None,
    random_state: int = 42,
) -> pd.DataFrame:
    """
    Load households from a file.

    CSV files carry each household's children as a JSON array in a
    ``children`` column. A ``household_id`` column is added when missing.

    Args:
        path: .csv, .json (array of objects) or .jsonl file
        sample_size: If set, randomly sample this many households
        random_state: Random seed for reproducible sampling

    Returns:
        DataFrame with one row per household

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file type is not supported
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"{path} not found")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path)
    elif suffix == ".json":
        df = pd.read_json(path, orient="records", dtype=False)
    elif suffix == ".jsonl":
        df = pd.read_json(path, orient="records", lines=True, dtype=False)
    else:
        raise ValueError(
            f"Unsupported household file type '{suffix}' "
            f"(expected one of {', '.join(SUPPORTED_SUFFIXES)})"
        )

    if "household_id" not in df.columns:
        df.insert(0, "household_id", range(1, len(df) + 1))

    if sample_size and sample_size < len(df):
        df = df.sample(n=sample_size, random_state=random_state)

    return df.reset_index(drop=True)


def row_to_input(row: Union[pd.Series, Mapping[str, Any]]) -> TaxCreditInput:
    """
    Build a TaxCreditInput from one household row.

    Raises:
        ValueError: If a required field is missing or a value is not
            recognized
    """
    data: Dict[str, Any] = {
        key: value for key, value in dict(row).items() if not _is_missing(value)
    }

    children = data.get("children")
    if isinstance(children, str):
        children = json.loads(children) if children.strip() else []
    data["children"] = children or []

    return TaxCreditInput.from_dict(data)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)

