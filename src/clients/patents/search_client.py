"""
Patent search client
"""

import logging
from typing import Any
from pydantic import ValidationError

from constants.core import SEARCH_PATH
from typings.client import ClientResult, KeywordSearchParams
from typings.patents import PatentRecord

from .http import ParseError, PatentApiError, get_json

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def _parse_search_response(data: Any) -> list[PatentRecord]:
    """
    Parse the search response body (`{"response": [...patents]}`)

    A missing or non-list `response` is treated as no results;
    a patent that doesn't fit PatentRecord fails the whole response.
    """
    records = data.get("response") if isinstance(data, dict) else None

    if not isinstance(records, list):
        logger.warning("No patent list in search response: %s", str(data)[0:200])
        return []

    try:
        return [PatentRecord.model_validate(record) for record in records]
    except ValidationError as e:
        raise ParseError(f"Malformed patent in search response: {e}") from e


def search(keyword: str) -> ClientResult[list[PatentRecord]]:
    """
    Search patents by keyword

    Never raises; failures are logged and returned as an empty result with `error` set.

    Usage:
    ```
    import system; system.initialize();
    from clients.patents import search_client
    result = search_client.search("curved mobile screen")
    patents = result.value
    ```

    Args:
        keyword (str): free-text query; blank keywords issue no request
    """
    p = KeywordSearchParams(keyword=keyword)

    if p.is_blank:
        logger.debug("Skipping search for blank keyword")
        return ClientResult.skip([])

    try:
        data = get_json(SEARCH_PATH, p.to_query())
        patents = _parse_search_response(data)
    except PatentApiError as e:
        logger.error("Search failed for keyword '%s' (%s): %s", keyword, e.kind, e)
        return ClientResult.failure([], e.kind, e.message)

    logger.info("Found %s patents for keyword '%s'", len(patents), keyword)
    return ClientResult.success(patents)
