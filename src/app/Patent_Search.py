"""
Patent search & analytics dashboard

Run: `streamlit run src/app/Patent_Search.py`
"""
import streamlit as st

import system

system.initialize()

from ui.analytics_components import render_analytics
from ui.patent_components import (
    render_detail_panel,
    render_results,
    render_search_box,
)

st.set_page_config(page_title="Patent Search", page_icon="📜", layout="wide")


search_tab, analytics_tab = st.tabs(["🔎 Search & View", "📊 Analytics"])

with search_tab:
    search_col, detail_col = st.columns(2, gap="large")

    with search_col:
        render_search_box()
        render_results()

    with detail_col:
        render_detail_panel()

with analytics_tab:
    render_analytics()
