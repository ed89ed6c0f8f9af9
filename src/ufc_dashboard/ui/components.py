"""UI components for the Streamlit app."""

import plotly.graph_objects as go
import streamlit as st

from ufc_dashboard.analytics.models import (
    ALL,
    MAIN_DIVISIONS,
    MAIN_METHODS,
    DashboardData,
    DivisionSummary,
    FighterSummary,
)

# UFC-inspired palette
COLORS = {
    "red": "#dc2626",
    "gold": "#fbbf24",
    "green": "#059669",
    "blue": "#2563eb",
    "silver": "#94a3b8",
}

# Method bars shown in the distribution chart
MAX_METHOD_BARS = 8


def render_filters() -> tuple[str, str]:
    """
    Render division and method selectors in the sidebar.

    Returns:
        Tuple of (division, method), each either a value or ALL
    """
    division = st.selectbox(
        "Division",
        options=[ALL] + MAIN_DIVISIONS,
        format_func=lambda d: "All Divisions" if d == ALL else d.capitalize(),
        key="division",
    )
    method = st.selectbox(
        "Method",
        options=[ALL] + MAIN_METHODS,
        format_func=lambda m: "All Methods" if m == ALL else m,
        key="method",
    )
    return division, method


def render_summary_metrics(data: DashboardData):
    """Render headline counts."""
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Total Fights", f"{data.total_fights:,}")

    with col2:
        st.metric("Title Fights", f"{data.title_fights:,}")

    with col3:
        st.metric("Fighters", f"{data.total_fighters:,}")

    with col4:
        st.metric("Finish Rate", f"{data.finish_rate}%")


def _bar_layout(fig: go.Figure, height: int = 400, tick_angle: int = -45):
    fig.update_layout(
        xaxis=dict(tickangle=tick_angle),
        margin=dict(l=40, r=20, t=20, b=120),
        height=height,
        bargap=0.2,
    )


def render_method_chart(data: DashboardData):
    """Render the fight method distribution."""
    methods = data.method_data[:MAX_METHOD_BARS]
    if not methods:
        st.info("No fights match the current filters.")
        return

    fig = go.Figure(
        go.Bar(
            x=[m.method for m in methods],
            y=[m.count for m in methods],
            marker_color=COLORS["red"],
        )
    )
    _bar_layout(fig)
    st.plotly_chart(fig, use_container_width=True)


def render_division_count_chart(divisions: list[DivisionSummary]):
    """Render the busiest divisions by fight count."""
    fig = go.Figure(
        go.Bar(
            x=[d.division for d in divisions],
            y=[d.count for d in divisions],
            marker_color=COLORS["gold"],
        )
    )
    _bar_layout(fig)
    st.plotly_chart(fig, use_container_width=True)


def render_finish_rate_chart(divisions: list[DivisionSummary]):
    """Render submission and knockout rates per division."""
    names = [d.division for d in divisions]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=names,
            y=[float(d.submission_rate) for d in divisions],
            name="Submission %",
            marker_color=COLORS["green"],
        )
    )
    fig.add_trace(
        go.Bar(
            x=names,
            y=[float(d.knockout_rate) for d in divisions],
            name="KO/TKO %",
            marker_color=COLORS["red"],
        )
    )
    fig.update_layout(barmode="group")
    _bar_layout(fig)
    st.plotly_chart(fig, use_container_width=True)


def render_top_fighters_chart(fighters: list[FighterSummary]):
    """Render the fighters with the most wins."""
    fig = go.Figure(
        go.Bar(
            x=[f.name for f in fighters],
            y=[f.wins for f in fighters],
            marker_color=COLORS["blue"],
            customdata=[f.fighter.record for f in fighters],
            hovertemplate="%{x}<br>Wins: %{y}<br>Record: %{customdata}<extra></extra>",
        )
    )
    _bar_layout(fig, height=450)
    st.plotly_chart(fig, use_container_width=True)


def render_accuracy_chart(data: DashboardData):
    """Render striking accuracy against win rate."""
    points = data.accuracy_data
    if not points:
        st.info("No fighters with enough fights and accuracy data.")
        return

    fig = go.Figure(
        go.Scatter(
            x=[p.accuracy for p in points],
            y=[p.win_rate for p in points],
            mode="markers",
            marker=dict(color=COLORS["green"], size=9, opacity=0.7),
            text=[p.name for p in points],
            customdata=[p.total_fights for p in points],
            hovertemplate=(
                "<b>%{text}</b><br>Strike Accuracy: %{x}%<br>"
                "Win Rate: %{y:.1f}%<br>Total Fights: %{customdata}<extra></extra>"
            ),
        )
    )
    fig.update_layout(
        xaxis_title="Strike Accuracy %",
        yaxis_title="Win Rate %",
        margin=dict(l=40, r=20, t=20, b=40),
        height=450,
    )
    st.plotly_chart(fig, use_container_width=True)


def render_division_table(divisions: list[DivisionSummary]):
    """Render the per-division outcome table."""
    rows = [
        {
            "Division": d.division,
            "Fights": d.count,
            "Submission %": f"{d.submission_rate}%",
            "KO/TKO %": f"{d.knockout_rate}%",
            "Decision %": f"{d.decision_rate}%",
        }
        for d in divisions
    ]
    st.dataframe(rows, use_container_width=True, hide_index=True)


def render_win_rate_table(fighters: list[FighterSummary]):
    """Render the best win rates among experienced fighters."""
    if not fighters:
        st.info("No fighters with at least 10 fights.")
        return

    rows = [
        {
            "Fighter": f.name,
            "Record": f.fighter.record,
            "Win Rate": f"{f.win_rate:.1f}%",
            "Strike Acc": f"{f.str_acc or 0}%",
        }
        for f in fighters
    ]
    st.dataframe(rows, use_container_width=True, hide_index=True)


def render_insights(data: DashboardData):
    """Render short takeaways drawn from the current statistics."""
    col1, col2, col3 = st.columns(3)

    with col1:
        st.markdown("**Fight Outcomes**")
        leader = data.method_data[0].method if data.method_data else "N/A"
        st.write(
            f"{leader} is the most common result. The leading decision type "
            f"accounts for {data.decision_count:,} fights, and {data.finish_rate}% "
            "of fights end before the judges are needed."
        )

    with col2:
        st.markdown("**Popular Divisions**")
        busiest = [d.division for d in data.division_data[:2]]
        if busiest:
            st.write(f"The most active divisions are {' and '.join(busiest)}.")
        else:
            st.write("No division has enough fights to rank yet.")

    with col3:
        st.markdown("**Performance Metrics**")
        st.write(
            f"{len(data.accuracy_data)} experienced fighters are plotted. Strike "
            "accuracy alone does not decide win rate."
        )
