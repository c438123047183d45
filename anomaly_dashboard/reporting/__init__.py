"""Export helpers for anomaly snapshots."""
from anomaly_dashboard.reporting.sinks import (
    rows_to_csv_bytes,
    rows_to_excel_bytes,
    write_csv,
    write_excel,
)
from anomaly_dashboard.reporting.templates import (
    TEMPLATE_HEADERS,
    format_reported_at,
    record_to_template_row,
    records_to_rows,
)

__all__ = [
    "TEMPLATE_HEADERS",
    "format_reported_at",
    "record_to_template_row",
    "records_to_rows",
    "rows_to_csv_bytes",
    "rows_to_excel_bytes",
    "write_csv",
    "write_excel",
]
