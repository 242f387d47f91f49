"""
UI components for patent analytics
"""
import logging
from typing import cast
import altair as alt
import streamlit as st

from clients.patents import analytics_client
from clients.patents.reports import aggregate
from constants.patents import (
    DEFAULT_NUMBER_OF_YEARS,
    MAX_NUMBER_OF_YEARS,
    MIN_NUMBER_OF_YEARS,
)
from visualization.charts import ChartType, compose_dashboard
from visualization.export import PNG_MIME, export_filename, export_png

from .state import ExportSnapshot, get_analytics_state, get_coordinator

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def generate_charts(keyword: str, number_of_years: int):
    """
    Fetch the yearwise series for the keyword into the analytics state
    """
    with st.spinner("Fetching yearwise counts..."):
        result = analytics_client.yearwise_counts(keyword, number_of_years)

    get_analytics_state().apply(result, keyword)


def export_charts(chart: alt.TopLevelMixin, keyword: str):
    """
    Snapshot the charts to PNG (named with the time of the request)
    """
    state = get_analytics_state()
    with st.spinner("Exporting charts..."):
        png = export_png(chart)

    if png is None:
        state.export = None
        st.error("Failed to export charts")
        return

    state.export = ExportSnapshot(png, export_filename(keyword), chart.to_json())


def render_analytics():
    """
    Render the analytics dashboard (controls, charts and export)
    """
    coordinator = get_coordinator()
    query = coordinator.last_search_query
    results = coordinator.last_search_results
    state = get_analytics_state()

    st.subheader("Analytics Dashboard")

    with st.container(border=True):
        years_col, type_col, generate_col, export_col = st.columns(
            4, vertical_alignment="bottom"
        )
        number_of_years = years_col.number_input(
            "Number of Years",
            min_value=MIN_NUMBER_OF_YEARS,
            max_value=MAX_NUMBER_OF_YEARS,
            value=DEFAULT_NUMBER_OF_YEARS,
            step=1,
        )
        chart_type = type_col.selectbox(
            "Chart Type",
            options=list(ChartType),
            format_func=lambda c: c.label,
        )
        if generate_col.button(
            "Generate Charts", type="primary", disabled=not coordinator.has_searched
        ):
            generate_charts(query, int(number_of_years))

        summary = aggregate(results)
        chart = compose_dashboard(
            state.series_for(query),
            summary.domains,
            summary.assignees,
            cast(ChartType, chart_type),
        )

        exported = export_col.button("Export PNG", disabled=chart is None)
        if exported and chart is not None:
            export_charts(chart, query)

        snapshot = state.export_for(chart.to_json()) if chart is not None else None
        if snapshot is not None:
            export_col.download_button(
                "Download",
                data=snapshot.png,
                file_name=snapshot.file_name,
                mime=PNG_MIME,
            )

        if query:
            st.caption(f'Analyzing data for: **"{query}"**')

    if chart is None:
        st.info("Search for patents and generate charts to see analytics data")
        return

    st.altair_chart(chart)
