"""Export rows and sinks for snapshots of the anomaly list."""
import csv
import io
from datetime import datetime, timezone
from pathlib import Path

from openpyxl import load_workbook

from anomaly_dashboard.core.models import AnomalyRecord
from anomaly_dashboard.core.seed import demo_records
from anomaly_dashboard.reporting.sinks import (
    rows_to_csv_bytes,
    rows_to_excel_bytes,
    write_csv,
    write_excel,
)
from anomaly_dashboard.reporting.templates import (
    TEMPLATE_HEADERS,
    format_reported_at,
    record_to_template_row,
    records_to_rows,
)


def test_template_row_collapses_whitespace_and_uses_utc_iso():
    record = AnomalyRecord(
        id=7,
        title="  Drift \n detected ",
        description="line one\n\nline two",
        severity="High",
        reported_at=datetime(2025, 4, 1, 14, 30, tzinfo=timezone.utc),
    )
    row = record_to_template_row(record)
    assert list(row) == TEMPLATE_HEADERS
    assert row["Title"] == "Drift detected"
    assert row["Description"] == "line one line two"
    assert row["Reported_At"] == "2025-04-01T14:30:00Z"


def test_format_reported_at_matches_list_display():
    assert format_reported_at(datetime(2025, 3, 5, 9, 15, tzinfo=timezone.utc)) == "Mar 5, 2025 - 09:15"


def test_write_csv_round_trips_headers(tmp_path: Path):
    output = tmp_path / "nested" / "anomalies.csv"
    write_csv(records_to_rows(demo_records()), output)

    with output.open(encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))

    assert len(rows) == 3
    assert rows[1]["Severity"] == "High"


def test_write_csv_with_no_rows_still_writes_header(tmp_path: Path):
    output = tmp_path / "empty.csv"
    write_csv([], output)
    assert output.read_text(encoding="utf-8").strip() == ",".join(TEMPLATE_HEADERS)


def test_write_excel_creates_named_sheet(tmp_path: Path):
    output = tmp_path / "anomalies.xlsx"
    write_excel(records_to_rows(demo_records()), output)

    sheet = load_workbook(output).active
    assert sheet.title == "anomalies"
    assert sheet.max_row - 1 == 3


def test_download_payloads():
    rows = records_to_rows(demo_records())
    csv_text = rows_to_csv_bytes(rows).decode("utf-8")
    assert csv_text.startswith("ID,Title,Severity")

    workbook = load_workbook(io.BytesIO(rows_to_excel_bytes(rows)))
    assert workbook.active["B2"].value == "Biased Recommendation Algorithm"
