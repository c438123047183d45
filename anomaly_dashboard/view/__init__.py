"""View projection helpers for the anomaly list."""
from anomaly_dashboard.view.projector import project, severity_counts

__all__ = ["project", "severity_counts"]
