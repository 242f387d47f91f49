"""
Patent analytics charts
"""

from enum import Enum
import json
import logging
from typing import Sequence
import altair as alt
import pandas as pd

from typings.patents import GroupCount, YearCount

from .colors import PALETTE, PRIMARY, SECONDARY

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

CHART_WIDTH = 600
CHART_HEIGHT = 320
PIE_RADIUS = 120
PIE_LABEL_RADIUS = 150
LABEL_LIMIT = 150


class ChartType(Enum):
    BAR = "bar"
    LINE = "line"
    PIE = "pie"

    def __str__(self):
        return self.value

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Chart"


def _to_df(records: Sequence[YearCount] | Sequence[GroupCount]) -> pd.DataFrame:
    return pd.DataFrame([record.asdict() for record in records])


def _pie_chart(df: pd.DataFrame, category: str, title: str) -> alt.LayerChart:
    """
    Pie chart of `count` by `category`, each slice labeled "category: pct%"
    """
    base = (
        alt.Chart(df)
        .transform_joinaggregate(total="sum(count)")
        .transform_calculate(
            caption=f"datum['{category}'] + ': ' + format(datum.count / datum.total, '.0%')"
        )
        .encode(
            theta=alt.Theta("count:Q", stack=True),
            color=alt.Color(
                f"{category}:N", scale=alt.Scale(range=PALETTE), legend=None, sort=None
            ),
            order=alt.Order("index:Q"),
            tooltip=[
                alt.Tooltip(f"{category}:N"),
                alt.Tooltip("count:Q", title="Patents"),
            ],
        )
    )
    arcs = base.mark_arc(outerRadius=PIE_RADIUS)
    labels = base.mark_text(radius=PIE_LABEL_RADIUS, size=11).encode(
        text="caption:N"
    )
    return alt.layer(arcs, labels).properties(
        title=title, width=CHART_WIDTH, height=CHART_HEIGHT
    )


def year_chart(
    series: Sequence[YearCount], chart_type: ChartType = ChartType.BAR
) -> alt.Chart | alt.LayerChart:
    """
    Chart of yearwise patent counts

    Args:
        series (Sequence[YearCount]): yearwise counts, ordered by year
        chart_type (ChartType, optional): bar, line or pie. Defaults to ChartType.BAR.
    """
    df = _to_df(series).reset_index()
    title = f"Year-wise Patent Count ({len(series)} years)"

    if chart_type == ChartType.PIE:
        return _pie_chart(df, "year", title)

    encodings = {
        "x": alt.X("year:O", axis=alt.Axis(title="", labelAngle=0)),
        "y": alt.Y("count:Q", axis=alt.Axis(title="")),
        "tooltip": [
            alt.Tooltip("year:O", title="Year"),
            alt.Tooltip("count:Q", title="Patents"),
        ],
    }
    chart = alt.Chart(df, title=title, width=CHART_WIDTH, height=CHART_HEIGHT)

    if chart_type == ChartType.LINE:
        return chart.mark_line(
            color=PRIMARY,
            strokeWidth=3,
            point=alt.OverlayMarkDef(color=PRIMARY, size=80),
        ).encode(**encodings)

    return chart.mark_bar(
        color=PRIMARY, cornerRadiusTopLeft=4, cornerRadiusTopRight=4
    ).encode(**encodings)


def domain_chart(domains: Sequence[GroupCount]) -> alt.LayerChart:
    """
    Pie chart of patents by domain

    Args:
        domains (Sequence[GroupCount]): domain distribution
    """
    df = _to_df(domains).rename(columns={"label": "domain"}).reset_index()
    return _pie_chart(df, "domain", "Patents by Domain")


def assignee_chart(assignees: Sequence[GroupCount]) -> alt.Chart:
    """
    Horizontal bar chart of top assignees (in ranking order)

    Bars are keyed by rank, since truncated labels can collide.

    Args:
        assignees (Sequence[GroupCount]): assignee ranking
    """
    df = (
        _to_df(assignees)
        .rename(columns={"label": "assignee"})
        .reset_index()
        .rename(columns={"index": "rank"})
    )
    labels = json.dumps(df["assignee"].tolist())
    chart_encodings = {
        "x": alt.X("count:Q", axis=alt.Axis(title="")),
        "y": alt.Y(
            "rank:O",
            axis=alt.Axis(
                labelExpr=f"{labels}[datum.value]",
                labelLimit=LABEL_LIMIT,
                title="",
            ),
            sort=None,
        ),
        "tooltip": [
            alt.Tooltip("assignee:N"),
            alt.Tooltip("count:Q", title="Patents"),
        ],
    }
    return (
        alt.Chart(
            df, title="Top Patent Assignees", width=CHART_WIDTH, height=CHART_HEIGHT
        )
        .mark_bar(color=SECONDARY, cornerRadiusEnd=4)
        .encode(**chart_encodings)
    )


def compose_dashboard(
    series: Sequence[YearCount],
    domains: Sequence[GroupCount],
    assignees: Sequence[GroupCount],
    chart_type: ChartType = ChartType.BAR,
) -> alt.VConcatChart | None:
    """
    Stack the charts that have data (yearwise, domains, assignees)

    Returns None if there's nothing to chart.
    """
    charts: list[alt.Chart | alt.LayerChart] = []

    if len(series) > 0:
        charts.append(year_chart(series, chart_type))
    if len(domains) > 0:
        charts.append(domain_chart(domains))
    if len(assignees) > 0:
        charts.append(assignee_chart(assignees))

    if len(charts) == 0:
        logger.debug("No chart data")
        return None

    return alt.vconcat(*charts, spacing=40).resolve_scale(color="independent")
