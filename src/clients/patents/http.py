"""
Low-level access to the patent api
"""

import logging
from typing import Any, Mapping
import requests

from constants.core import PATENT_API_TIMEOUT, PATENT_API_URL
from typings.client import ErrorKind

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class PatentApiError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(PatentApiError):
    """
    Request failed (connection, dns, timeout, non-2xx status)
    """

    kind = ErrorKind.TRANSPORT


class ParseError(PatentApiError):
    """
    Response wasn't in the expected shape
    """

    kind = ErrorKind.PARSE


def get_json(
    path: str,
    params: Mapping[str, Any],
    base_url: str = PATENT_API_URL,
    timeout: float = PATENT_API_TIMEOUT,
) -> Any:
    """
    GET a patent api endpoint and decode the JSON body

    Args:
        path (str): endpoint path (e.g. /ask)
        params (Mapping[str, Any]): query params (url-encoded by requests)
        base_url (str, optional): api base url. Defaults to PATENT_API_URL.
        timeout (float, optional): request timeout in seconds. Defaults to PATENT_API_TIMEOUT.

    Raises:
        TransportError: if the request fails or returns a non-2xx status
        ParseError: if the body isn't JSON
    """
    url = f"{base_url}{path}"
    logger.info("Calling patent api %s with params: %s", url, params)

    try:
        response = requests.get(url, params=params, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise TransportError(f"Request to {url} failed: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f"Response from {url} is not JSON: {e}") from e
