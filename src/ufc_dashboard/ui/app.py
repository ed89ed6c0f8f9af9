"""Streamlit web application for UFC fight analytics."""

import sys
from pathlib import Path

# Add src to path for imports when running directly
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

import streamlit as st

from ufc_dashboard.data import DataLoadError
from ufc_dashboard.data.loader import DEFAULT_FIGHTERS_SOURCE, DEFAULT_FIGHTS_SOURCE
from ufc_dashboard.ui.components import (
    render_accuracy_chart,
    render_division_count_chart,
    render_division_table,
    render_filters,
    render_finish_rate_chart,
    render_insights,
    render_method_chart,
    render_summary_metrics,
    render_top_fighters_chart,
    render_win_rate_table,
)
from ufc_dashboard.ui.state import get_dashboard_data, load_dataset


def main():
    """Main Streamlit application."""
    st.set_page_config(
        page_title="UFC Analytics Dashboard",
        page_icon="🥊",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("🥊 UFC Analytics Dashboard")
    st.caption("Fight outcomes, divisions and fighter performance")

    # Sidebar
    with st.sidebar:
        st.header("Filters")
        division, method = render_filters()

        st.divider()
        st.header("Data")
        fights_source = st.text_input("Fight CSV", value=DEFAULT_FIGHTS_SOURCE)
        fighters_source = st.text_input("Fighter CSV", value=DEFAULT_FIGHTERS_SOURCE)

    # Load data
    try:
        with st.spinner("Loading UFC data..."):
            dataset = load_dataset(fights_source, fighters_source)
    except DataLoadError as e:
        st.error(f"**Error Loading Data:** {e}")
        return

    data = get_dashboard_data(fights_source, fighters_source, division, method)

    if data.is_empty:
        st.warning(
            "No fight or fighter records found. Check the CSV sources:\n\n"
            f"- `{fights_source}`\n- `{fighters_source}`"
        )
        return

    if dataset.skipped_fights or dataset.skipped_fighters:
        st.caption(
            f"Skipped {dataset.skipped_fights} malformed fight rows and "
            f"{dataset.skipped_fighters} malformed fighter rows."
        )

    render_summary_metrics(data)

    st.divider()
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Fight Methods Distribution")
        render_method_chart(data)

    with col2:
        st.subheader("Top Divisions by Fight Count")
        render_division_count_chart(data.division_data)

    st.divider()
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Top Fighters by Wins")
        render_top_fighters_chart(data.top_fighters)

    with col2:
        st.subheader("Finish Rates by Division")
        render_finish_rate_chart(data.division_data)

    st.divider()
    st.subheader("Fighter Performance: Strike Accuracy vs Win Rate")
    render_accuracy_chart(data)

    st.divider()
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Division Analysis")
        render_division_table(data.division_data)

    with col2:
        st.subheader("Top Fighters by Win Rate (Min 10 fights)")
        render_win_rate_table(data.top_win_rate_fighters)

    st.divider()
    st.subheader("Key Insights")
    render_insights(data)


if __name__ == "__main__":
    main()
