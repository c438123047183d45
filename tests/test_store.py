"""Record store identifier assignment and ordering."""
from datetime import datetime, timezone

import pytest

from anomaly_dashboard.core.models import AnomalyDraft, AnomalyRecord
from anomaly_dashboard.store.records import RecordStore


def _record(record_id: int, severity: str = "Low") -> AnomalyRecord:
    return AnomalyRecord(
        id=record_id,
        title=f"Record {record_id}",
        description="details",
        severity=severity,
        reported_at=datetime(2025, 1, record_id % 28 + 1, tzinfo=timezone.utc),
    )


def test_empty_store_starts_at_one(clock):
    store = RecordStore(clock=clock)
    record = store.create(AnomalyDraft(title="T", description="D", severity="High"))
    assert record.id == 1
    assert len(store) == 1


def test_next_id_follows_max_seeded_id(clock):
    store = RecordStore([_record(7), _record(3), _record(42)], clock=clock)
    record = store.create(AnomalyDraft(title="T", description="D"))
    assert record.id == 43


def test_created_records_get_clock_timestamp_and_append(clock):
    store = RecordStore([_record(1)], clock=clock)
    first = store.create(AnomalyDraft(title="A", description="D"))
    second = store.create(AnomalyDraft(title="B", description="D"))
    assert [r.id for r in store.all()] == [1, 2, 3]
    assert first.reported_at < second.reported_at
    assert first.reported_at.tzinfo is not None


def test_ids_are_unique_over_many_creations(clock):
    store = RecordStore([_record(5)], clock=clock)
    for index in range(25):
        store.create(AnomalyDraft(title=f"T{index}", description="D"))
    ids = [record.id for record in store.all()]
    assert len(ids) == len(set(ids))


def test_snapshot_is_read_only(clock):
    store = RecordStore([_record(1)], clock=clock)
    snapshot = store.all()
    store.create(AnomalyDraft(title="T", description="D"))
    assert len(snapshot) == 1
    assert isinstance(snapshot, tuple)


def test_create_does_not_touch_existing_records(clock):
    seed = _record(1)
    store = RecordStore([seed], clock=clock)
    store.create(AnomalyDraft(title="T", description="D"))
    assert store.get(1) is seed


def test_unknown_severity_is_stored_as_default(clock):
    store = RecordStore(clock=clock)
    record = store.create(AnomalyDraft(title="T", description="D", severity="Severe"))
    assert record.severity == "Medium"


def test_duplicate_seed_ids_are_rejected():
    with pytest.raises(ValueError):
        RecordStore([_record(1), _record(1)])


def test_get_missing_record_returns_none():
    assert RecordStore().get(99) is None


def test_naive_seed_timestamps_are_treated_as_utc(clock):
    naive = AnomalyRecord(1, "Old", "D", "Low", datetime(2025, 1, 1, 9, 0))
    store = RecordStore([naive], clock=clock)
    store.create(AnomalyDraft(title="New", description="D", severity="High"))

    seeded = store.get(1)
    assert seeded.reported_at == datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)
    assert sorted(record.reported_at for record in store.all())


def test_seed_severity_is_normalized(clock):
    store = RecordStore(
        [
            AnomalyRecord(1, "A", "D", "high", datetime(2025, 1, 1, tzinfo=timezone.utc)),
            AnomalyRecord(2, "B", "D", "Critical", datetime(2025, 1, 2, tzinfo=timezone.utc)),
        ],
        clock=clock,
    )
    assert [record.severity for record in store.all()] == ["High", "Medium"]
