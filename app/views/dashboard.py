"""
Dashboard View
==============
Displays the generated schedule, coverage and per-person statistics.
"""
import pandas as pd
import plotly.express as px
import streamlit as st

from app.components.styling import color_cell
from app.state.session import SessionStateManager
from oncall.io.csv_export import build_schedule_grid
from oncall.models.shift import WEEKDAY_NAMES
from oncall.solver.stats import stats_to_dict_list


def render_dashboard(state: SessionStateManager):
    """Render the results dashboard."""
    result = state.result
    if result is None:
        st.info("👋 Upload availability and generate a schedule to see results.")
        return

    _render_hero_kpis(result)
    _render_diagnostic_banner(result)

    t1, t2, t3 = st.tabs(["📊 Schedule", "📅 Coverage", "👥 People"])
    with t1:
        _render_matrix(result)
    with t2:
        _render_coverage(result)
    with t3:
        _render_person_stats(result)


def _render_hero_kpis(result):
    summary = result.summary()
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("People", summary["people"])
    col2.metric("Points / person", summary["points_per_person"])
    col3.metric("Slots filled", f"{summary['filled_slots']}/{summary['required_slots']}")
    col4.metric("Coverage", f"{result.validation.coverage_rate:.0%}")


def _render_diagnostic_banner(result):
    validation = result.validation
    if validation.unfilled_slots:
        days = ", ".join(str(d) for d in validation.short_days())
        st.warning(f"⚠️ {validation.unfilled_slots} slots left open (days {days})")
    else:
        st.success("✅ Every required slot is filled")
    if validation.double_bookings:
        st.warning(f"⚠️ {validation.double_bookings} double bookings")


def _weekday_label(result, day: int) -> str:
    first = result.context.requirements.first_day_of_month
    return f"{day} {WEEKDAY_NAMES[(first + day - 1) % 7]}"


def _render_matrix(result):
    grid = build_schedule_grid(result.people, result.context.days).set_index("Name")
    grid.columns = [_weekday_label(result, d) for d in grid.columns]
    st.dataframe(grid.style.map(color_cell), width="stretch")


def _render_coverage(result):
    ctx = result.context
    rows = []
    for day in range(1, ctx.days + 1):
        req = ctx.day_requirements[day]
        rows.append({
            "Day": _weekday_label(result, day),
            "Type": req.shift_type.value,
            "Required": req.required,
            "Assigned": ctx.schedule.count(day),
            "On call": ", ".join(ctx.schedule.names_on(day)),
        })
    df = pd.DataFrame(rows)
    df["Gap"] = df["Assigned"] - df["Required"]
    st.dataframe(df, width="stretch", hide_index=True)


def _render_person_stats(result):
    df = pd.DataFrame(stats_to_dict_list(result.stats))
    st.dataframe(df, width="stretch", hide_index=True)
    if not df.empty:
        fig = px.bar(df, x="Name", y="Points", title="Points per person")
        fig.add_hline(y=result.context.points_per_person, line_dash="dash")
        st.plotly_chart(fig, width="stretch")
