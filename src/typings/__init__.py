from .client import (
    ClientResult,
    ErrorKind,
    KeywordSearchParams,
    YearwiseCountParams,
)
from .patents import (
    AnalyticsSummary,
    GroupCount,
    NameDescription,
    PatentRecord,
    YearCount,
    split_name_description,
)

__all__ = [
    "AnalyticsSummary",
    "ClientResult",
    "ErrorKind",
    "GroupCount",
    "KeywordSearchParams",
    "NameDescription",
    "PatentRecord",
    "split_name_description",
    "YearCount",
    "YearwiseCountParams",
]
