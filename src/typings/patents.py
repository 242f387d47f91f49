"""
Patent types
"""

from dataclasses import dataclass
from typing import Any, NamedTuple, Sequence
from pydantic import ConfigDict, Field, field_validator

from typings.core import Dataclass, ResultBase


STRING_FIELDS = [
    "patent_id",
    "patent_url",
    "title",
    "abstract",
    "type",
    "domain",
    "date",
    "assignee",
    "assignee_country",
    "company",
    "attorney_org",
    "inventor_name",
    "cpc_group_id",
]
PAIR_FIELDS = ["technologies", "use_cases"]


class NameDescription(NamedTuple):
    name: str
    description: str | None


def split_name_description(value: str) -> NameDescription:
    """
    Split a "name: description" string on the first colon

    Example:
    ```
    split_name_description("OLED: flexible display panel") -> ("OLED", "flexible display panel")
    split_name_description("OLED") -> ("OLED", None)
    ```
    """
    name, sep, description = value.partition(":")
    if not sep or not description.strip():
        return NameDescription(name.strip(), None)
    return NameDescription(name.strip(), description.strip())


class PatentRecord(ResultBase):
    """
    A patent as returned by the search api

    Unknown keys are kept (see `extras`) rather than dropped.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    patent_id: str = ""
    patent_url: str = ""
    title: str = ""
    abstract: str = ""
    type: str = ""
    domain: str = ""
    date: str = ""
    assignee: str = ""
    assignee_country: str = ""
    company: str = ""
    attorney_org: str = ""
    inventor_name: str = ""
    cpc_group_id: str = ""
    technologies: list[str] = Field(default_factory=list)
    use_cases: list[str] = Field(default_factory=list)

    @field_validator(*STRING_FIELDS, mode="before")
    @classmethod
    def string_from_scalar(cls, v):
        if v is None:
            return ""
        # ids and dates sometimes arrive as numbers
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator(*PAIR_FIELDS, mode="before")
    @classmethod
    def list_from_null(cls, v):
        if v is None:
            return []
        return v

    @property
    def extras(self) -> dict[str, Any]:
        """
        Fields sent by the api that aren't part of the known schema
        """
        return dict(self.model_extra or {})

    @property
    def technology_pairs(self) -> list[NameDescription]:
        return [split_name_description(t) for t in self.technologies]

    @property
    def use_case_pairs(self) -> list[NameDescription]:
        return [split_name_description(u) for u in self.use_cases]


@dataclass(frozen=True)
class YearCount(Dataclass):
    year: int
    count: int


@dataclass(frozen=True)
class GroupCount(Dataclass):
    label: str
    count: int


@dataclass(frozen=True)
class AnalyticsSummary(Dataclass):
    domains: Sequence[GroupCount]
    assignees: Sequence[GroupCount]

    @property
    def is_empty(self) -> bool:
        return len(self.domains) == 0 and len(self.assignees) == 0
