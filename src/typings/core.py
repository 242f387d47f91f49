from dataclasses import asdict, dataclass
from typing import Any
from pydantic import BaseModel


@dataclass(frozen=True)
class Dataclass:
    """
    Frozen dataclass base
    """

    def asdict(self) -> dict[str, Any]:
        return asdict(self)


class ResultBase(BaseModel):
    """
    Base class for records received from the patent api
    """

    def serialize(self) -> dict[str, Any]:
        """
        Prep for JSON serialization of the object (known fields and extras)
        """
        return self.model_dump()
