"""
Batch estimation over a table of households.

- Load households from CSV, JSON or JSON lines
- Run the estimator on every household
"""

from .loader import load_households, row_to_input
from .runners import run_estimator

__all__ = [
    "load_households",
    "row_to_input",
    "run_estimator",
]
