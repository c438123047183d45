"""Core building blocks for the anomaly dashboard package."""
from anomaly_dashboard.core.logging import configure_logging
from anomaly_dashboard.core.models import (
    FILTER_ALL,
    SEVERITIES,
    SEVERITY_FILTERS,
    SORT_NEWEST,
    SORT_OLDEST,
    SORT_ORDERS,
    AnomalyDraft,
    AnomalyRecord,
    ValidationResult,
    ViewState,
)
from anomaly_dashboard.core.seed import DEMO_ANOMALIES, demo_records
from anomaly_dashboard.core.utils import get_config_value, load_env_file

__all__ = [
    "configure_logging",
    "FILTER_ALL",
    "SEVERITIES",
    "SEVERITY_FILTERS",
    "SORT_NEWEST",
    "SORT_OLDEST",
    "SORT_ORDERS",
    "AnomalyDraft",
    "AnomalyRecord",
    "ValidationResult",
    "ViewState",
    "DEMO_ANOMALIES",
    "demo_records",
    "get_config_value",
    "load_env_file",
]
