from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Generic, TypeVar
from pydantic import BaseModel, Field

from constants.patents import DEFAULT_NUMBER_OF_YEARS
from utils.string import is_blank

T = TypeVar("T")


class KeywordSearchParams(BaseModel):
    """
    Parameters for keyword search (GET /ask)
    """

    keyword: Annotated[str, Field(validate_default=True)] = ""

    @property
    def is_blank(self) -> bool:
        return is_blank(self.keyword)

    def to_query(self) -> dict[str, str]:
        return {"input_text": self.keyword}


class YearwiseCountParams(KeywordSearchParams):
    """
    Parameters for yearwise counts (GET /yearwise_count)

    number_of_years isn't range-checked here; the api owns windowing
    """

    number_of_years: Annotated[int, Field(validate_default=True)] = (
        DEFAULT_NUMBER_OF_YEARS
    )

    def to_query(self) -> dict[str, str | int]:
        return {"no_of_years": self.number_of_years, "keyword": self.keyword}


class ErrorKind(Enum):
    TRANSPORT = "TRANSPORT"  # network, dns, timeout, non-2xx
    PARSE = "PARSE"  # response not in the expected shape

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class ClientResult(Generic[T]):
    """
    Outcome of a patent api call

    On failure, `value` holds the empty fallback so callers can degrade without branching.
    """

    value: T
    error: ErrorKind | None = None
    message: str | None = None
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ClientResult[T]":
        return cls(value=value)

    @classmethod
    def skip(cls, value: T) -> "ClientResult[T]":
        """
        No request was issued (e.g. blank keyword)
        """
        return cls(value=value, skipped=True)

    @classmethod
    def failure(cls, value: T, error: ErrorKind, message: str) -> "ClientResult[T]":
        return cls(value=value, error=error, message=message)
