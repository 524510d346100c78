"""
Step 3: Typed decode + reshape

Turn the decoded NREL payload into the monthly Result Table:
- outputs.{avg_dni, avg_ghi, avg_lat_tilt}.monthly must all be present
- each monthly block has exactly 12 values (list, or jan..dec mapping)
- every cell flattens to one float

Any shape violation raises MalformedPayload naming the offending path.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np
import pandas as pd

from .errors import MalformedPayload

MONTHS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
METRICS: Tuple[str, ...] = ("avg_dni", "avg_ghi", "avg_lat_tilt")


@dataclass(frozen=True)
class MonthlyOutputs:
    """Decoded monthly averages, calendar order (kWh/m2/day)"""
    avg_dni: Tuple[float, ...]
    avg_ghi: Tuple[float, ...]
    avg_lat_tilt: Tuple[float, ...]


def to_scalar(value: Any, *, path: str) -> float:
    """
    Flatten one cell to a float.

    Accepts a number, a numeric string, or a singleton container such as
    [5.1] or [[5.1]]. Rejects None, booleans, empty and multi-element
    containers, and NaN / infinity in any form.
    """
    if value is None or isinstance(value, bool):
        raise MalformedPayload(f"expected a number, got {value!r}", path)

    try:
        arr = np.asarray(value, dtype=float)
    except (TypeError, ValueError) as e:
        raise MalformedPayload(f"expected a number, got {value!r}", path) from e

    if arr.size != 1:
        raise MalformedPayload(f"expected a single number, got {arr.size} values", path)

    result = float(arr.reshape(-1)[0])
    if not math.isfinite(result):
        raise MalformedPayload(f"expected a finite number, got {value!r}", path)
    return result


def _monthly_values(raw: Any, *, path: str) -> Tuple[float, ...]:
    # Live API returns {"jan": .., ..., "dec": ..}; older docs show a plain list.
    if isinstance(raw, Mapping):
        by_month = {}
        for k, v in raw.items():
            key = str(k).lower()
            if key in by_month:
                raise MalformedPayload(f"duplicate month key {k!r}", path)
            by_month[key] = v
        missing = [m for m in MONTHS if m.lower() not in by_month]
        if missing:
            raise MalformedPayload(f"missing months {missing}", path)
        items = [by_month[m.lower()] for m in MONTHS]
    elif isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        if len(raw) != len(MONTHS):
            raise MalformedPayload(f"expected {len(MONTHS)} monthly values, got {len(raw)}", path)
        items = list(raw)
    else:
        raise MalformedPayload(f"expected a list or month mapping, got {type(raw).__name__}", path)

    return tuple(to_scalar(v, path=f"{path}[{i}]") for i, v in enumerate(items))


def parse_monthly_outputs(payload: Any) -> MonthlyOutputs:
    """
    Validate and decode outputs.<metric>.monthly for every metric.

    Args:
        payload: Decoded JSON body

    Returns:
        MonthlyOutputs with three 12-tuples in calendar order
    """
    if not isinstance(payload, Mapping):
        raise MalformedPayload(f"payload is not a JSON object (type={type(payload).__name__})")

    errors = payload.get("errors")
    if errors:
        msg = "; ".join(map(str, errors)) if isinstance(errors, list) else str(errors)
        raise MalformedPayload(f"API reported errors: {msg}", "errors")

    outputs = payload.get("outputs")
    if not isinstance(outputs, Mapping):
        raise MalformedPayload(
            f"missing or not an object (keys={list(payload.keys())[:25]})", "outputs"
        )

    decoded = {}
    for metric in METRICS:
        block = outputs.get(metric)
        if not isinstance(block, Mapping):
            raise MalformedPayload("missing or not an object", f"outputs.{metric}")
        if "monthly" not in block:
            raise MalformedPayload("missing", f"outputs.{metric}.monthly")
        decoded[metric] = _monthly_values(block["monthly"], path=f"outputs.{metric}.monthly")

    return MonthlyOutputs(**decoded)


def build_monthly_table(outputs: MonthlyOutputs) -> pd.DataFrame:
    """
    Zip the three monthly series with Jan..Dec by position.

    Returns:
        DataFrame with columns [month, avg_dni, avg_ghi, avg_lat_tilt], 12 rows
    """
    df = pd.DataFrame({"month": list(MONTHS)})
    for metric in METRICS:
        df[metric] = pd.Series(getattr(outputs, metric), dtype="float64")
    return df
