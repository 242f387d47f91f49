"""
Patent analytics constants
"""

UNKNOWN_LABEL = "Unknown"

TOP_ASSIGNEE_LIMIT = 10
MAX_LABEL_LENGTH = 20
ELLIPSIS = "..."

DEFAULT_NUMBER_OF_YEARS = 5
MIN_NUMBER_OF_YEARS = 1
MAX_NUMBER_OF_YEARS = 20

MAX_TECHNOLOGY_CHIPS = 3
