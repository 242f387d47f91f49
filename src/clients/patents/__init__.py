from . import analytics_client, search_client
from .analytics_client import yearwise_counts
from .reports import aggregate, assignee_ranking, domain_distribution, year_series
from .search_client import search

__all__ = [
    "aggregate",
    "analytics_client",
    "assignee_ranking",
    "domain_distribution",
    "search",
    "search_client",
    "year_series",
    "yearwise_counts",
]
