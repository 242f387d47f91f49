"""
Patent analytics client (yearwise counts)
"""

import logging
from typing import Any

from constants.core import YEARWISE_COUNT_PATH
from typings.client import ClientResult, YearwiseCountParams
from typings.patents import YearCount

from .http import ParseError, PatentApiError, get_json
from .reports import year_series

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def _to_int(value: Any, field: str) -> int:
    """
    Integral value (int, integral float or numeric string); anything else is a ParseError
    """
    if isinstance(value, bool):
        raise ParseError(f"Expected an integer {field}, got: {value}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as e:
            raise ParseError(f"Expected an integer {field}, got: {value}") from e
    raise ParseError(f"Expected an integer {field}, got: {value}")


def _parse_year_count(item: Any) -> YearCount:
    if not isinstance(item, dict):
        raise ParseError(f"Expected a year count object, got: {item}")
    if "year" not in item or "count" not in item:
        raise ParseError(f"Malformed year count: {item}")
    return YearCount(
        year=_to_int(item["year"], "year"), count=_to_int(item["count"], "count")
    )


def _parse_yearwise_response(data: Any) -> list[YearCount]:
    """
    Parse the yearwise count response body (`[{"year": 2020, "count": 5}, ...]`)
    """
    if not isinstance(data, list):
        raise ParseError(f"Expected a list of year counts, got: {str(data)[0:200]}")
    return [_parse_year_count(item) for item in data]


def yearwise_counts(
    keyword: str, number_of_years: int
) -> ClientResult[list[YearCount]]:
    """
    Get patent counts per year for a keyword, ordered by year (ascending)

    Never raises; failures are logged and returned as an empty series with `error` set.

    Usage:
    ```
    import system; system.initialize();
    from clients.patents import analytics_client
    series = analytics_client.yearwise_counts("android mobile", 5).value
    ```

    Args:
        keyword (str): keyword (usually the last search query); blank keywords issue no request
        number_of_years (int): size of the year window (passed through; the api decides what it means)
    """
    p = YearwiseCountParams(keyword=keyword, number_of_years=number_of_years)

    if p.is_blank:
        logger.debug("Skipping yearwise counts for blank keyword")
        return ClientResult.skip([])

    try:
        data = get_json(YEARWISE_COUNT_PATH, p.to_query())
        counts = _parse_yearwise_response(data)
    except PatentApiError as e:
        logger.error(
            "Yearwise counts failed for keyword '%s' (%s): %s", keyword, e.kind, e
        )
        return ClientResult.failure([], e.kind, e.message)

    logger.info("Got %s years of counts for keyword '%s'", len(counts), keyword)
    return ClientResult.success(year_series(counts))
