"""Intake checks that gate a draft before it becomes a stored anomaly."""
import logging

from anomaly_dashboard.core.models import AnomalyDraft, ValidationResult


logger = logging.getLogger(__name__)


def validate_draft(draft: AnomalyDraft) -> ValidationResult:
    """Return per-field failures for a draft without touching any store."""

    # Whitespace-only input counts as empty.
    result = ValidationResult(
        title=not (draft.title or "").strip(),
        description=not (draft.description or "").strip(),
    )
    if not result.ok:
        logger.warning("Anomaly draft rejected: %s", ", ".join(result.failed_fields()))
    return result
