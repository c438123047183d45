"""Intake validation for newly reported anomalies."""
from anomaly_dashboard.intake.validation import validate_draft

__all__ = ["validate_draft"]
