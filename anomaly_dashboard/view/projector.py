"""Derive the filtered, sorted anomaly list and summary counts for display."""
from typing import Dict, Iterable, List

from anomaly_dashboard.core.models import (
    FILTER_ALL,
    SEVERITIES,
    SORT_OLDEST,
    AnomalyRecord,
    normalize_filter,
    normalize_sort_order,
)


def project(
    records: Iterable[AnomalyRecord], severity_filter: str, sort_order: str
) -> List[AnomalyRecord]:
    """Return the records to display for the given filter and sort order.

    ``sorted`` is stable, so records sharing a timestamp keep their store
    order in both directions.
    """

    severity_filter = normalize_filter(severity_filter)
    sort_order = normalize_sort_order(sort_order)

    visible = [
        record
        for record in records
        if severity_filter == FILTER_ALL or record.severity == severity_filter
    ]
    return sorted(
        visible,
        key=lambda record: record.reported_at,
        reverse=sort_order != SORT_OLDEST,
    )


def severity_counts(records: Iterable[AnomalyRecord]) -> Dict[str, int]:
    """Count records per severity across the whole store, ignoring any filter."""

    counts = {severity: 0 for severity in SEVERITIES}
    for record in records:
        counts[record.severity] = counts.get(record.severity, 0) + 1
    return counts
