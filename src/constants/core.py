import logging
import os

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


logger.info("Environment is: %s", os.environ.get("ENV", "local"))

# remote patent api (search + yearwise counts)
PATENT_API_URL = (os.environ.get("PATENT_API_URL") or "http://localhost:5000").rstrip(
    "/"
)
PATENT_API_TIMEOUT: float = float(os.environ.get("PATENT_API_TIMEOUT") or 30)

SEARCH_PATH = "/ask"
YEARWISE_COUNT_PATH = "/yearwise_count"
