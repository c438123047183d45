"""Demo anomalies used to seed a fresh dashboard session."""
from typing import Any, Dict, Iterable, List

from anomaly_dashboard.core.models import AnomalyRecord, normalize_severity
from anomaly_dashboard.core.utils import as_utc, parse_timestamp

DEMO_ANOMALIES: List[Dict[str, Any]] = [
    {
        "id": 1,
        "title": "Biased Recommendation Algorithm",
        "description": (
            "Algorithm consistently favored certain demographics in job recommendations, "
            "leading to unequal opportunity distribution across different user groups. "
            "The bias was traced to training data imbalances."
        ),
        "severity": "Medium",
        "reported_at": "2025-03-15T10:00:00Z",
    },
    {
        "id": 2,
        "title": "LLM Hallucination in Critical Info",
        "description": (
            "LLM provided incorrect safety procedure information when asked about emergency "
            "protocols in a chemical plant. This could have led to dangerous situations if the "
            "information had been followed in a real emergency."
        ),
        "severity": "High",
        "reported_at": "2025-04-01T14:30:00Z",
    },
    {
        "id": 3,
        "title": "Minor Data Leak via Chatbot",
        "description": (
            "Chatbot inadvertently exposed non-sensitive user metadata during conversation. "
            "While no critical information was revealed, this indicates a potential "
            "vulnerability in the information boundary management."
        ),
        "severity": "Low",
        "reported_at": "2025-03-20T09:15:00Z",
    },
]


def record_from_dict(data: Dict[str, Any]) -> AnomalyRecord:
    """Build a record from a plain mapping with an ISO-8601 ``reported_at``."""

    reported_at = data["reported_at"]
    if isinstance(reported_at, str):
        reported_at = parse_timestamp(reported_at)
    else:
        reported_at = as_utc(reported_at)
    return AnomalyRecord(
        id=int(data["id"]),
        title=data["title"],
        description=data["description"],
        severity=normalize_severity(data["severity"]),
        reported_at=reported_at,
    )


def records_from_dicts(rows: Iterable[Dict[str, Any]]) -> List[AnomalyRecord]:
    return [record_from_dict(row) for row in rows]


def demo_records() -> List[AnomalyRecord]:
    """Return fresh copies of the demo dataset."""

    return records_from_dicts(DEMO_ANOMALIES)
