"""
View state shared between the search, detail and analytics views
"""

from dataclasses import dataclass, field
import logging
from typing import Sequence

from typings.patents import PatentRecord

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


@dataclass
class ViewCoordinator:
    """
    Holds the selected patent and the last successful search

    Usage:
    ```
    coordinator = ViewCoordinator()
    coordinator.on_search_results(patents, "android mobile")
    coordinator.select_patent(patents[0])
    ```
    """

    selected_patent: PatentRecord | None = None
    last_search_results: list[PatentRecord] = field(default_factory=list)
    last_search_query: str = ""

    def on_search_results(self, results: Sequence[PatentRecord], query: str):
        """
        Replace the search results and query; clears the selection
        """
        logger.info("Got %s results for '%s'", len(results), query)
        self.last_search_results = list(results)
        self.last_search_query = query
        self.selected_patent = None

    def select_patent(self, patent: PatentRecord):
        """
        Select a patent for the detail view (search results untouched)
        """
        logger.debug("Selected patent %s", patent.patent_id)
        self.selected_patent = patent

    @property
    def has_searched(self) -> bool:
        return len(self.last_search_query) > 0
