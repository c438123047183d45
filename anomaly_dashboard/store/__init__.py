"""Record storage for reported anomalies."""
from anomaly_dashboard.store.records import RecordStore

__all__ = ["RecordStore"]
