"""Streamlit dashboard to report, browse, filter and sort AI anomalies."""
from pathlib import Path

import streamlit as st

# Allow running via "streamlit run anomaly_dashboard/ui/dashboard.py" without installing the
# package by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from anomaly_dashboard.core.logging import configure_logging
from anomaly_dashboard.core.models import (
    SEVERITIES,
    SEVERITY_FILTERS,
    SORT_NEWEST,
    SORT_ORDERS,
    AnomalyRecord,
)
from anomaly_dashboard.engine import AnomalyEngine
from anomaly_dashboard.reporting.sinks import rows_to_csv_bytes, rows_to_excel_bytes
from anomaly_dashboard.reporting.templates import format_reported_at, records_to_rows

SORT_LABELS = {"newest": "Newest First", "oldest": "Oldest First"}


def _session_engine() -> AnomalyEngine:
    """Create the engine once per browser session."""

    if "engine" not in st.session_state:
        st.session_state.engine = AnomalyEngine.from_config()
    return st.session_state.engine


def _severity_badge(severity: str) -> str:
    """Return a color-coded severity label."""

    mapping = {
        "Low": "🟢 Low",
        "Medium": "🟡 Medium",
        "High": "🔴 High",
    }
    return mapping.get(severity, f"⚪ {severity}")


def _toggle_label(expanded: bool) -> str:
    return "Hide Analysis ▲" if expanded else "View Analysis ▼"


def _load_draft_widgets(engine: AnomalyEngine) -> None:
    """Copy the engine draft into the intake widgets before they render."""

    st.session_state["draft_title"] = engine.draft.title
    st.session_state["draft_description"] = engine.draft.description
    st.session_state["draft_severity"] = engine.draft.severity


def _on_toggle_form() -> None:
    engine: AnomalyEngine = st.session_state.engine
    if engine.toggle_form():
        _load_draft_widgets(engine)


def _on_toggle_expanded(record_id: int) -> None:
    st.session_state.engine.toggle_expanded(record_id)


def _on_draft_change() -> None:
    st.session_state.engine.update_draft(
        title=st.session_state.get("draft_title"),
        description=st.session_state.get("draft_description"),
        severity=st.session_state.get("draft_severity"),
    )


def _on_submit() -> None:
    """Submit the engine draft; the inputs are cleared only when a record was created."""

    engine: AnomalyEngine = st.session_state.engine
    _on_draft_change()
    if engine.submit_draft().ok:
        _load_draft_widgets(engine)
        st.session_state["last_action"] = "Anomaly report submitted."


def _summary(engine: AnomalyEngine) -> None:
    """Render totals over the whole store, independent of the active filter."""

    counts = engine.get_severity_counts()
    cols = st.columns(4)
    cols[0].metric("Total Anomalies", engine.total_count())
    cols[1].metric("High Severity", counts["High"])
    cols[2].metric("Medium Severity", counts["Medium"])
    cols[3].metric("Low Severity", counts["Low"])


def _intake_form(engine: AnomalyEngine) -> None:
    # Widget edits go straight into the engine draft so it survives Cancel.
    for key, value in (
        ("draft_title", engine.draft.title),
        ("draft_description", engine.draft.description),
        ("draft_severity", engine.draft.severity),
    ):
        st.session_state.setdefault(key, value)

    st.subheader("Report New Anomaly")
    st.caption("Document unexpected AI behavior for system improvement")
    errors = engine.form_errors
    with st.container():
        st.text_input("Anomaly Title", key="draft_title", on_change=_on_draft_change)
        if errors.title:
            st.error("Title is required.")
        st.text_area(
            "Detailed Analysis", key="draft_description", height=120, on_change=_on_draft_change
        )
        if errors.description:
            st.error("Description is required.")
        st.radio(
            "Severity Level",
            options=list(SEVERITIES),
            key="draft_severity",
            horizontal=True,
            on_change=_on_draft_change,
        )
        st.button("Submit Anomaly Report", key="submit_anomaly", type="primary", on_click=_on_submit)


def _controls(engine: AnomalyEngine) -> None:
    st.session_state.setdefault("severity_filter", engine.view.severity_filter)
    st.session_state.setdefault("sort_order", engine.view.sort_order)

    cols = st.columns(2)
    with cols[0]:
        severity_filter = st.selectbox(
            "Filter by Severity", options=list(SEVERITY_FILTERS), key="severity_filter"
        )
    with cols[1]:
        sort_order = st.selectbox(
            "Sort by Date",
            options=list(SORT_ORDERS),
            format_func=lambda value: SORT_LABELS.get(value, value),
            key="sort_order",
        )
    engine.set_severity_filter(severity_filter)
    engine.set_sort_order(sort_order or SORT_NEWEST)


def _anomaly_card(engine: AnomalyEngine, record: AnomalyRecord) -> None:
    expanded = engine.is_expanded(record.id)
    with st.container():
        header = st.columns([4, 1])
        with header[0]:
            st.markdown(f"**{record.title}**")
            st.caption(format_reported_at(record.reported_at))
        with header[1]:
            st.markdown(_severity_badge(record.severity))
        st.button(
            _toggle_label(expanded),
            key=f"toggle_{record.id}",
            on_click=_on_toggle_expanded,
            args=(record.id,),
        )
        if expanded:
            st.write(record.description)
        st.divider()


def main() -> None:
    """Launch the anomaly monitoring dashboard."""

    configure_logging()
    st.set_page_config(page_title="AI Safety Incident Dashboard", layout="wide")

    engine = _session_engine()

    st.title("AI Safety Incident Dashboard")
    st.caption("Monitor, filter and report anomalous AI behavior.")
    _summary(engine)

    st.button(
        "Cancel" if engine.form_visible else "Report Anomaly",
        key="toggle_form",
        on_click=_on_toggle_form,
    )

    last_action = st.session_state.pop("last_action", None)
    if last_action:
        st.success(last_action)

    if engine.form_visible:
        _intake_form(engine)

    _controls(engine)

    visible = engine.get_visible_anomalies()
    if not visible:
        st.info("No anomalies detected matching the current filters.")
    for record in visible:
        _anomaly_card(engine, record)

    if visible:
        rows = records_to_rows(visible)
        export_cols = st.columns(2)
        export_cols[0].download_button(
            "Download CSV",
            data=rows_to_csv_bytes(rows),
            file_name="anomalies.csv",
            mime="text/csv",
        )
        export_cols[1].download_button(
            "Download Excel",
            data=rows_to_excel_bytes(rows),
            file_name="anomalies.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )

    st.caption("AI Safety Monitoring System v1.0.2")


if __name__ == "__main__":
    main()
