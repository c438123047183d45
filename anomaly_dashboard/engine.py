"""Command/query facade tying the record store, intake checks and view state together."""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from anomaly_dashboard.core.models import (
    AnomalyDraft,
    AnomalyRecord,
    ValidationResult,
    ViewState,
    normalize_filter,
    normalize_severity,
    normalize_sort_order,
)
from anomaly_dashboard.core.seed import demo_records
from anomaly_dashboard.core.utils import get_config_value, load_dashboard_env, utc_now
from anomaly_dashboard.intake.validation import validate_draft
from anomaly_dashboard.store.records import RecordStore
from anomaly_dashboard.view.projector import project, severity_counts

logger = logging.getLogger(__name__)


class AnomalyEngine:
    """Single-session state for the anomaly dashboard.

    Commands mutate the store, the view state or the intake draft; queries
    derive what the renderer should show. Callers issue a query after each
    command instead of relying on implicit re-rendering.
    """

    def __init__(
        self,
        seed: Iterable[AnomalyRecord] = (),
        clock: Callable[[], datetime] = utc_now,
        view: ViewState | None = None,
    ) -> None:
        self.store = RecordStore(seed, clock=clock)
        self.view = view or ViewState()
        self.draft = AnomalyDraft()
        self.form_errors = ValidationResult()
        self.form_visible = False

    @classmethod
    def from_config(cls, clock: Callable[[], datetime] = utc_now) -> "AnomalyEngine":
        """Build an engine using ``ANOMALY_SEED`` and the default view settings."""

        load_dashboard_env()
        seed_mode = get_config_value("ANOMALY_SEED", "demo").strip().lower()
        if seed_mode not in {"demo", "empty"}:
            logger.warning("Unknown ANOMALY_SEED %r, using the demo dataset", seed_mode)
            seed_mode = "demo"
        seed = demo_records() if seed_mode == "demo" else []
        view = ViewState(
            severity_filter=normalize_filter(get_config_value("ANOMALY_DEFAULT_FILTER", "All")),
            sort_order=normalize_sort_order(get_config_value("ANOMALY_DEFAULT_SORT", "newest")),
        )
        return cls(seed, clock=clock, view=view)

    # Commands

    def submit_anomaly(self, title: str, description: str, severity: str) -> ValidationResult:
        """Validate the given fields and create a record when every field passes.

        On failure the draft keeps exactly what was submitted so the operator
        can correct it; nothing is added to the store.
        """

        self.draft = AnomalyDraft(title=title, description=description, severity=severity)
        return self.submit_draft()

    def submit_draft(self) -> ValidationResult:
        result = validate_draft(self.draft)
        self.form_errors = result
        if not result.ok:
            return result

        self.store.create(self.draft)
        self.draft = AnomalyDraft()
        self.form_visible = False
        return result

    def update_draft(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        severity: Optional[str] = None,
    ) -> AnomalyDraft:
        """Apply form edits to the draft; ``None`` leaves a field unchanged."""

        updates = {"title": title, "description": description, "severity": severity}
        changed = {key: value for key, value in updates.items() if value is not None}
        if "severity" in changed:
            changed["severity"] = normalize_severity(changed["severity"])
        self.draft = replace(self.draft, **changed)
        return self.draft

    def toggle_form(self) -> bool:
        """Show or hide the intake form. The draft survives being hidden."""

        self.form_visible = not self.form_visible
        return self.form_visible

    def set_severity_filter(self, value: str) -> None:
        self.view.severity_filter = normalize_filter(value)
        logger.debug("Severity filter set to %s", self.view.severity_filter)

    def set_sort_order(self, value: str) -> None:
        self.view.sort_order = normalize_sort_order(value)
        logger.debug("Sort order set to %s", self.view.sort_order)

    def toggle_expanded(self, record_id: int) -> None:
        expanded = self.view.toggle_expanded(record_id)
        logger.debug("Anomaly %s %s", record_id, "expanded" if expanded else "collapsed")

    # Queries

    def get_visible_anomalies(self) -> List[AnomalyRecord]:
        return project(self.store.all(), self.view.severity_filter, self.view.sort_order)

    def get_severity_counts(self) -> Dict[str, int]:
        return severity_counts(self.store.all())

    def is_expanded(self, record_id: int) -> bool:
        return self.view.is_expanded(record_id)

    def total_count(self) -> int:
        return len(self.store)

    def get_record(self, record_id: int) -> Optional[AnomalyRecord]:
        return self.store.get(record_id)
