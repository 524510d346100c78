"""
Step 4: Validate the monthly table

Report-only checks on a Result Table (the fetcher already fails loud):
- Row count: exactly 12
- Order: months Jan..Dec
- Values: nulls, infinities, negatives (irradiance is never negative), min/max per metric
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

import numpy as np
import pandas as pd

from .prepare import METRICS, MONTHS


@dataclass
class ValidationResult:
    """Results of monthly table validation"""
    is_valid: bool
    n_rows: int
    months_in_order: bool
    n_nulls: int
    n_negative: int
    n_infinite: int = 0
    value_ranges: Dict[str, Tuple[float, float]] = field(default_factory=dict)


def validate_monthly_table(df: pd.DataFrame) -> ValidationResult:
    """
    Validate a Result Table.

    Args:
        df: DataFrame with columns [month, avg_dni, avg_ghi, avg_lat_tilt]

    Returns:
        ValidationResult with detailed findings
    """
    months_in_order = "month" in df.columns and tuple(df["month"]) == MONTHS

    present = [m for m in METRICS if m in df.columns]
    values = df[present].apply(pd.to_numeric, errors="coerce")

    n_nulls = int(values.isna().sum().sum()) + (len(METRICS) - len(present)) * len(df)
    n_negative = int((values < 0).sum().sum())
    n_infinite = int(np.isinf(values.to_numpy(dtype=float)).sum())

    value_ranges = {
        m: (float(values[m].min()), float(values[m].max())) for m in present
    }

    is_valid = (
        len(df) == len(MONTHS)
        and months_in_order
        and n_nulls == 0
        and n_negative == 0
        and n_infinite == 0
    )

    return ValidationResult(
        is_valid=is_valid,
        n_rows=len(df),
        months_in_order=months_in_order,
        n_nulls=n_nulls,
        n_negative=n_negative,
        n_infinite=n_infinite,
        value_ranges=value_ranges,
    )


def print_validation_report(result: ValidationResult) -> None:
    """Print a human-readable validation report"""
    status = "PASS" if result.is_valid else "FAIL"
    print(f"\n=== Validation Report: {status} ===")
    print(f"Rows: {result.n_rows}")
    print(f"Months in calendar order: {result.months_in_order}")
    print(f"Null values: {result.n_nulls}")
    print(f"Negative values: {result.n_negative}")
    print(f"Infinite values: {result.n_infinite}")
    for metric, (lo, hi) in result.value_ranges.items():
        print(f"{metric}: {lo:.2f} to {hi:.2f}")
