"""Pytest configuration to make the local package importable without installation."""
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from anomaly_dashboard.core.seed import demo_records
from anomaly_dashboard.engine import AnomalyEngine


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep local env files and shell settings out of the tests."""

    monkeypatch.setenv("ANOMALY_DASHBOARD_ENV_FILE", str(tmp_path / "missing.env"))
    for key in ("ANOMALY_SEED", "ANOMALY_DEFAULT_FILTER", "ANOMALY_DEFAULT_SORT"):
        monkeypatch.delenv(key, raising=False)


class StepClock:
    """Deterministic clock that advances one minute per call."""

    def __init__(self, start: datetime, step: timedelta = timedelta(minutes=1)) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def clock() -> StepClock:
    return StepClock(datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def frozen_clock():
    """Clock that always returns the same instant, for tie-break checks."""

    instant = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    return lambda: instant


@pytest.fixture
def seeded_engine(clock: StepClock) -> AnomalyEngine:
    """Engine preloaded with the three demo anomalies."""

    return AnomalyEngine(demo_records(), clock=clock)
