"""State management and caching for the Streamlit app."""

import streamlit as st

from ufc_dashboard.analytics import DashboardData, compute_dashboard
from ufc_dashboard.data import Dataset, DashboardLoader


@st.cache_data(show_spinner=False)
def load_dataset(fights_source: str, fighters_source: str) -> Dataset:
    """
    Fetch and parse both datasets.

    Failures are not cached, so a later rerun retries the load.

    Raises:
        DataLoadError: If either resource cannot be fetched
    """
    loader = DashboardLoader(fights_source=fights_source, fighters_source=fighters_source)
    return loader.load()


@st.cache_data(show_spinner=False)
def get_dashboard_data(
    fights_source: str,
    fighters_source: str,
    division: str,
    method: str,
) -> DashboardData:
    """Dashboard statistics for a filter selection, memoized per input."""
    dataset = load_dataset(fights_source, fighters_source)
    return compute_dashboard(dataset.fights, dataset.fighters, division=division, method=method)
