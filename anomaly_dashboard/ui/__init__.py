"""Streamlit presentation layer for the anomaly dashboard."""
