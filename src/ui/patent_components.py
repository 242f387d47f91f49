"""
UI components for patents
"""
import logging
from pydash import compact
import streamlit as st

from clients.patents import search_client
from constants.patents import MAX_TECHNOLOGY_CHIPS
from typings.patents import PatentRecord
from utils.string import truncate

from .common import (
    get_horizontal_list,
    get_markdown_link,
    get_name_description_list,
    or_na,
)
from .state import get_coordinator, get_search_panel

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

ABSTRACT_PREVIEW_LENGTH = 280
SEARCH_PLACEHOLDER = "Enter keywords (e.g., 'curved mobile screen', 'android mobile')"


def run_search(keyword: str):
    """
    Search and route the results to the view state (see SearchPanelState.apply)
    """
    with st.spinner("Searching patents..."):
        result = search_client.search(keyword)

    get_search_panel().apply(result, keyword, get_coordinator())


def render_search_box():
    """
    Render the header and keyword search form
    """
    st.title("Patent Search & Analytics")
    st.markdown(
        "Search patents using keywords and analyze trends with interactive charts"
    )

    with st.form("patent-search", border=False):
        query_col, button_col = st.columns([10, 1], vertical_alignment="bottom")
        with query_col:
            keyword = st.text_input(
                "Keywords",
                placeholder=SEARCH_PLACEHOLDER,
                label_visibility="collapsed",
            )
        with button_col:
            submitted = st.form_submit_button(
                "Search", type="primary", use_container_width=True
            )

    if submitted:
        run_search(keyword)


def render_result_card(patent: PatentRecord, idx: int):
    """
    Render one search result (click to select)

    Args:
        patent (PatentRecord): patent to render
        idx (int): position in results (patent ids aren't guaranteed unique)
    """
    coordinator = get_coordinator()
    with st.container(border=True):
        title_col, date_col = st.columns([5, 1])
        title_col.markdown(f"**{patent.title}**")
        date_col.caption(patent.date)

        st.caption(
            " • ".join(
                compact(
                    [f"Patent ID: {patent.patent_id}", patent.assignee, patent.domain]
                )
            )
        )
        st.write(truncate(patent.abstract, ABSTRACT_PREVIEW_LENGTH))

        tech_names = [pair.name for pair in patent.technology_pairs]
        if len(tech_names) > 0:
            st.markdown(get_horizontal_list(tech_names, limit=MAX_TECHNOLOGY_CHIPS))

        st.button(
            "View details",
            key=f"select-{idx}-{patent.patent_id}",
            on_click=coordinator.select_patent,
            args=(patent,),
        )


def render_results():
    """
    Render the results of the last search (nothing if no search yet)
    """
    result = get_search_panel().result

    if result is None:
        return

    patents = result.value
    st.subheader(f"Search Results ({len(patents)})")

    if len(patents) == 0:
        st.info("No patents found for your search query.")
        return

    for idx, patent in enumerate(patents):
        render_result_card(patent, idx)


def render_detail(patent: PatentRecord):
    """
    Render a patent detail in streamlit app

    Args:
        patent (PatentRecord): patent to render
    """
    st.header(patent.title)
    st.caption(patent.date)
    if patent.patent_url:
        st.markdown(get_markdown_link(patent.patent_url, "View original patent →"))
    st.markdown(get_horizontal_list(compact([patent.type, patent.domain])))
    st.divider()

    mcol1, mcol2 = st.columns(2)
    mcol1.markdown(f"**Patent ID**  \n{or_na(patent.patent_id)}")
    mcol1.markdown(f"**Assignee**  \n{or_na(patent.assignee)}")
    mcol1.markdown(f"**Company**  \n{or_na(patent.company)}")
    mcol1.markdown(f"**Inventor**  \n{or_na(patent.inventor_name)}")
    mcol2.markdown(f"**Country**  \n{or_na(patent.assignee_country)}")
    mcol2.markdown(f"**Attorney**  \n{or_na(patent.attorney_org)}")
    mcol2.markdown(f"**CPC Group**  \n{or_na(patent.cpc_group_id)}")

    st.divider()
    st.subheader("Abstract")
    st.write(patent.abstract)

    if len(patent.technologies) > 0:
        st.subheader("Technologies")
        st.markdown(get_name_description_list(patent.technology_pairs))

    if len(patent.use_cases) > 0:
        st.subheader("Use Cases")
        st.markdown(get_name_description_list(patent.use_case_pairs))


def render_detail_panel():
    """
    Render the selected patent, or a prompt to select one
    """
    selected = get_coordinator().selected_patent

    if selected is None:
        st.info("Select a patent from the search results to view details")
        return

    st.subheader("Patent Details")
    with st.container(border=True):
        render_detail(selected)
