from .patents import analytics_client, search_client
from .patents import reports as patent_reports

__all__ = [
    "analytics_client",
    "patent_reports",
    "search_client",
]
