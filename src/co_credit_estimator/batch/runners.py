"""
Runners: execute the estimator over a table of households.
"""

from typing import Any, Dict, List

import pandas as pd
from tqdm import tqdm

from ..engine import calculate_all_credits
from ..models import CREDIT_NAMES
from .loader import row_to_input

ESTIMATE_PREFIX = "est_"
STATUS_PREFIX = "status_"


def run_estimator(df: pd.DataFrame, show_progress: bool = True) -> pd.DataFrame:
    """
    Estimate every household in a DataFrame.

    Args:
        df: DataFrame with household data (from load_households)
        show_progress: Show progress bar

    Returns:
        DataFrame with household_id, est_<credit>, status_<credit> and
        est_total columns
    """
    results: List[Dict[str, Any]] = []
    iterator = (
        tqdm(df.iterrows(), total=len(df), desc="Estimating")
        if show_progress
        else df.iterrows()
    )

    for _, row in iterator:
        estimate = calculate_all_credits(row_to_input(row))

        record: Dict[str, Any] = {"household_id": row["household_id"]}
        for name, result in estimate.items():
            record[f"{ESTIMATE_PREFIX}{name}"] = result.estimated_benefit
            record[f"{STATUS_PREFIX}{name}"] = result.status.value
        record[f"{ESTIMATE_PREFIX}total"] = estimate.total_estimated_benefit
        results.append(record)

    columns = ["household_id"]
    for name in CREDIT_NAMES:
        columns += [f"{ESTIMATE_PREFIX}{name}", f"{STATUS_PREFIX}{name}"]
    columns.append(f"{ESTIMATE_PREFIX}total")
    return pd.DataFrame(results, columns=columns)
