"""
Per-session view state (bound to streamlit's session_state)
"""

from dataclasses import dataclass, field
import streamlit as st

from core.view_coordinator import ViewCoordinator
from typings.client import ClientResult
from typings.patents import PatentRecord, YearCount

COORDINATOR_KEY = "view_coordinator"
SEARCH_PANEL_KEY = "search_panel"
ANALYTICS_KEY = "analytics"


@dataclass
class SearchPanelState:
    """
    Outcome of the search panel's last search (None if nothing searched yet)

    Unlike the coordinator, this also reflects failed searches.
    """

    result: ClientResult[list[PatentRecord]] | None = None

    def apply(
        self,
        result: ClientResult[list[PatentRecord]],
        keyword: str,
        coordinator: ViewCoordinator,
    ):
        """
        Route a search outcome

        - skipped (blank keyword): nothing changes
        - failed: the panel shows no results; the coordinator keeps the last good search
        - ok: the panel and the coordinator both get the results
        """
        if result.skipped:
            return

        self.result = result

        if result.ok:
            coordinator.on_search_results(result.value, keyword)


@dataclass(frozen=True)
class ExportSnapshot:
    png: bytes
    file_name: str
    chart_json: str


@dataclass
class AnalyticsState:
    """
    Analytics panel state: the last yearwise series (and the query it was fetched for)
    and the last exported chart snapshot
    """

    year_series: list[YearCount] = field(default_factory=list)
    query: str = ""
    export: ExportSnapshot | None = None

    def apply(self, result: ClientResult[list[YearCount]], keyword: str):
        """
        Route a yearwise count outcome (failures leave an empty series)
        """
        if result.skipped:
            return

        self.year_series = result.value
        self.query = keyword

    def series_for(self, query: str) -> list[YearCount]:
        """
        The series, if it belongs to `query` (else empty)
        """
        return self.year_series if self.query == query else []

    def export_for(self, chart_json: str) -> ExportSnapshot | None:
        """
        The export snapshot, if it was taken of this chart
        """
        if self.export is not None and self.export.chart_json == chart_json:
            return self.export
        return None


def get_coordinator() -> ViewCoordinator:
    if COORDINATOR_KEY not in st.session_state:
        st.session_state[COORDINATOR_KEY] = ViewCoordinator()
    return st.session_state[COORDINATOR_KEY]


def get_search_panel() -> SearchPanelState:
    if SEARCH_PANEL_KEY not in st.session_state:
        st.session_state[SEARCH_PANEL_KEY] = SearchPanelState()
    return st.session_state[SEARCH_PANEL_KEY]


def get_analytics_state() -> AnalyticsState:
    if ANALYTICS_KEY not in st.session_state:
        st.session_state[ANALYTICS_KEY] = AnalyticsState()
    return st.session_state[ANALYTICS_KEY]
