"""In-memory record store holding anomalies in creation order."""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Tuple

from anomaly_dashboard.core.models import AnomalyDraft, AnomalyRecord, normalize_severity
from anomaly_dashboard.core.utils import as_utc, utc_now

logger = logging.getLogger(__name__)


def _normalize_seed(record: AnomalyRecord) -> AnomalyRecord:
    """Coerce seeded severities and timestamps to the values created records use."""

    severity = normalize_severity(record.severity)
    reported_at = as_utc(record.reported_at)
    if severity == record.severity and reported_at.tzinfo is record.reported_at.tzinfo:
        return record
    return replace(record, severity=severity, reported_at=reported_at)


class RecordStore:
    """Canonical, insertion-ordered collection of anomaly records.

    Identifiers are assigned as ``max(existing ids) + 1`` so a seeded dataset
    may start from any id (or have gaps) and new ids still never collide.
    """

    def __init__(
        self,
        seed: Iterable[AnomalyRecord] = (),
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._clock = clock
        self._records: List[AnomalyRecord] = []
        seen: set[int] = set()
        for record in seed:
            if record.id in seen:
                raise ValueError(f"Duplicate anomaly id {record.id} in seed data")
            seen.add(record.id)
            self._records.append(_normalize_seed(record))
        if self._records:
            logger.info("Seeded record store with %d anomalies", len(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def next_id(self) -> int:
        return max((record.id for record in self._records), default=0) + 1

    def create(self, draft: AnomalyDraft) -> AnomalyRecord:
        """Append a record built from an already validated draft and return it."""

        record = AnomalyRecord(
            id=self.next_id(),
            title=draft.title,
            description=draft.description,
            severity=normalize_severity(draft.severity),
            reported_at=self._clock(),
        )
        self._records.append(record)
        logger.info("Created anomaly %d (%s): %s", record.id, record.severity, record.title)
        return record

    def all(self) -> Tuple[AnomalyRecord, ...]:
        """Return a read-only snapshot in insertion order."""

        return tuple(self._records)

    def get(self, record_id: int) -> Optional[AnomalyRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None
