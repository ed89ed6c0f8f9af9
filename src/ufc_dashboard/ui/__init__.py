"""Streamlit web UI."""

from .state import get_dashboard_data, load_dataset

__all__ = [
    "load_dataset",
    "get_dashboard_data",
]
