"""Streamlit dashboard and HTML export."""
