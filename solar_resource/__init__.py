"""
Solar Resource: NREL API -> monthly table

Simple, step-by-step functions for learning:
1. config - Load API key and request settings
2. ingest - One GET with fail-loud status / content-type gates
3. prepare - Typed decode of outputs.*.monthly into a 12-row table
4. validate - Check the monthly table's integrity
"""

from .config import Settings, load_settings
from .errors import ContentTypeMismatch, HTTPFailure, MalformedPayload, SolarResourceError
from .ingest import fetch_solar_table
from .prepare import METRICS, MONTHS, MonthlyOutputs, build_monthly_table, parse_monthly_outputs
from .validate import ValidationResult, print_validation_report, validate_monthly_table

__all__ = [
    "Settings",
    "load_settings",
    "SolarResourceError",
    "HTTPFailure",
    "ContentTypeMismatch",
    "MalformedPayload",
    "fetch_solar_table",
    "METRICS",
    "MONTHS",
    "MonthlyOutputs",
    "build_monthly_table",
    "parse_monthly_outputs",
    "ValidationResult",
    "validate_monthly_table",
    "print_validation_report",
]
