"""Data models for reported AI anomalies and the dashboard view state."""
import logging
from dataclasses import dataclass, asdict, field
from datetime import datetime
from typing import Any, Dict, FrozenSet, List, Set

logger = logging.getLogger(__name__)

SEVERITY_LOW = "Low"
SEVERITY_MEDIUM = "Medium"
SEVERITY_HIGH = "High"
SEVERITIES = (SEVERITY_LOW, SEVERITY_MEDIUM, SEVERITY_HIGH)
DEFAULT_SEVERITY = SEVERITY_MEDIUM

FILTER_ALL = "All"
SEVERITY_FILTERS = (FILTER_ALL, *SEVERITIES)

SORT_NEWEST = "newest"
SORT_OLDEST = "oldest"
SORT_ORDERS = (SORT_NEWEST, SORT_OLDEST)


def _match_choice(value: Any, choices: tuple, fallback: str, label: str) -> str:
    # Case-insensitive lookup; unknown values fall back instead of raising.
    if isinstance(value, str):
        lowered = value.strip().lower()
        for choice in choices:
            if choice.lower() == lowered:
                return choice
    logger.warning("Unknown %s %r, falling back to %s", label, value, fallback)
    return fallback


def normalize_severity(value: Any) -> str:
    """Return the canonical severity label, defaulting to ``Medium``."""

    return _match_choice(value, SEVERITIES, DEFAULT_SEVERITY, "severity")


def normalize_filter(value: Any) -> str:
    """Return the canonical severity filter, defaulting to ``All``."""

    return _match_choice(value, SEVERITY_FILTERS, FILTER_ALL, "severity filter")


def normalize_sort_order(value: Any) -> str:
    """Return the canonical sort order, defaulting to newest first."""

    return _match_choice(value, SORT_ORDERS, SORT_NEWEST, "sort order")


@dataclass(frozen=True)
class AnomalyRecord:
    """A single reported anomaly. Records never change once created."""

    id: int
    title: str
    description: str
    severity: str
    reported_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dictionary representation for tabular rendering."""

        return asdict(self)


@dataclass(frozen=True)
class AnomalyDraft:
    """Unvalidated intake form input."""

    title: str = ""
    description: str = ""
    severity: str = DEFAULT_SEVERITY


@dataclass(frozen=True)
class ValidationResult:
    """Per-field intake failures; ``True`` marks a field that failed."""

    title: bool = False
    description: bool = False

    @property
    def ok(self) -> bool:
        return not (self.title or self.description)

    def failed_fields(self) -> List[str]:
        return [name for name, failed in self.to_dict().items() if failed]

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


@dataclass
class ViewState:
    """Ephemeral browsing state: active filter, sort order and expanded records."""

    severity_filter: str = FILTER_ALL
    sort_order: str = SORT_NEWEST
    _expanded: Set[int] = field(default_factory=set, repr=False)

    @property
    def expanded_ids(self) -> FrozenSet[int]:
        return frozenset(self._expanded)

    def toggle_expanded(self, record_id: int) -> bool:
        """Flip the expanded flag for ``record_id`` and return the new value.

        Identifiers that are not in the store are accepted; they simply never
        match a visible record.
        """

        if record_id in self._expanded:
            self._expanded.discard(record_id)
            return False
        self._expanded.add(record_id)
        return True

    def is_expanded(self, record_id: int) -> bool:
        return record_id in self._expanded
