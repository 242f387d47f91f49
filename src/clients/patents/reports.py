"""
Patent reports (client-side aggregation of search results)
"""

from typing import Sequence
import polars as pl
import logging

from constants.patents import MAX_LABEL_LENGTH, TOP_ASSIGNEE_LIMIT, UNKNOWN_LABEL
from typings.patents import AnalyticsSummary, GroupCount, PatentRecord, YearCount
from utils.string import truncate

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def _group_count(records: Sequence[PatentRecord], field: str) -> pl.DataFrame:
    """
    Count records per value of `field` (falsey values count as UNKNOWN_LABEL)

    Groups come back in first-seen order.
    """
    df = pl.DataFrame(
        {"label": [getattr(record, field) or UNKNOWN_LABEL for record in records]},
        schema={"label": pl.Utf8},
    )
    return df.group_by("label", maintain_order=True).agg(
        pl.len().cast(pl.Int64).alias("count")
    )


def domain_distribution(records: Sequence[PatentRecord]) -> list[GroupCount]:
    """
    Patents per domain, in order of first appearance

    Args:
        records (Sequence[PatentRecord]): search results
    """
    grouped = _group_count(records, "domain")
    return [GroupCount(**row) for row in grouped.to_dicts()]


def assignee_ranking(
    records: Sequence[PatentRecord],
    limit: int = TOP_ASSIGNEE_LIMIT,
    max_label_length: int = MAX_LABEL_LENGTH,
) -> list[GroupCount]:
    """
    Top assignees by patent count (descending; ties keep first-seen order)

    Args:
        records (Sequence[PatentRecord]): search results
        limit (int, optional): max number of assignees. Defaults to TOP_ASSIGNEE_LIMIT.
        max_label_length (int, optional): labels longer than this are cut and get an ellipsis.
            Defaults to MAX_LABEL_LENGTH.
    """
    grouped = (
        _group_count(records, "assignee")
        .sort("count", descending=True, maintain_order=True)
        .head(limit)
    )
    return [
        GroupCount(label=truncate(row["label"], max_label_length), count=row["count"])
        for row in grouped.to_dicts()
    ]


def year_series(counts: Sequence[YearCount]) -> list[YearCount]:
    """
    Order a (remotely computed) yearwise series by year, ascending

    Args:
        counts (Sequence[YearCount]): year counts, in any order
    """
    return sorted(counts, key=lambda c: c.year)


def aggregate(records: Sequence[PatentRecord]) -> AnalyticsSummary:
    """
    Aggregate search results for charting

    Usage:
    ```
    import system; system.initialize();
    from clients.patents import search_client
    from clients.patents.reports import aggregate
    patents = search_client.search("android mobile").value
    summary = aggregate(patents)
    ```
    """
    if len(records) == 0:
        logger.debug("No records to aggregate")

    return AnalyticsSummary(
        domains=domain_distribution(records),
        assignees=assignee_ranking(records),
    )
