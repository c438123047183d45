"""In-memory state engine for an AI anomaly reporting dashboard."""
from anomaly_dashboard.core import (
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
    configure_logging,
    demo_records,
)
from anomaly_dashboard.engine import AnomalyEngine
from anomaly_dashboard.intake import validate_draft
from anomaly_dashboard.reporting import records_to_rows, write_csv, write_excel
from anomaly_dashboard.store import RecordStore
from anomaly_dashboard.view import project, severity_counts

__all__ = [
    "FILTER_ALL",
    "SEVERITIES",
    "SEVERITY_FILTERS",
    "SORT_NEWEST",
    "SORT_OLDEST",
    "SORT_ORDERS",
    "AnomalyDraft",
    "AnomalyEngine",
    "AnomalyRecord",
    "RecordStore",
    "ValidationResult",
    "ViewState",
    "configure_logging",
    "demo_records",
    "project",
    "records_to_rows",
    "severity_counts",
    "validate_draft",
    "write_csv",
    "write_excel",
]
