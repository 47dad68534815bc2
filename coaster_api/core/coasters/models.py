"""
Domain models for roller coasters.

The Coaster record is the only entity the service manages. It is a frozen
dataclass: every value handed out by a store is immutable, so a caller
serializing a list can never observe another request's write halfway through.

Request bodies are parsed with Pydantic into a ``CoasterPayload`` and then
turned into a Coaster once the system has decided which id it gets.
"""

from dataclasses import asdict, dataclass, replace
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from .errors import InvalidCoasterError

# Heights are stored as signed 64-bit integers.
HEIGHT_MIN = -(2**63)
HEIGHT_MAX = 2**63 - 1


@dataclass(frozen=True)
class Coaster:
    """
    A roller coaster record.

    ``id`` is always assigned by the system: by the id generator on create,
    by the request path on update.
    """
    id: str = ""
    name: str = ""
    manufacturer: str = ""
    in_park: str = ""
    height: int = 0

    def with_id(self, coaster_id: str) -> "Coaster":
        return replace(self, id=coaster_id)

    def to_dict(self) -> dict[str, Any]:
        """JSON shape used on the wire."""
        return asdict(self)


class CoasterPayload(BaseModel):
    """
    Body accepted by create and update.

    Missing fields fall back to empty values and unknown fields (including
    any ``id``) are ignored. Types are strict: ``"50"`` is not a height, and
    a height must fit in a signed 64-bit integer.
    """
    model_config = ConfigDict(extra="ignore")

    name: StrictStr = ""
    manufacturer: StrictStr = ""
    in_park: StrictStr = ""
    height: Annotated[StrictInt, Field(ge=HEIGHT_MIN, le=HEIGHT_MAX)] = 0

    def to_coaster(self, coaster_id: str) -> Coaster:
        return Coaster(
            id=coaster_id,
            name=self.name,
            manufacturer=self.manufacturer,
            in_park=self.in_park,
            height=self.height,
        )


def _describe_validation_error(exc: ValidationError) -> str:
    """Flatten Pydantic's error list into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request body"


def parse_coaster_payload(body: bytes | str) -> CoasterPayload:
    """
    Parse a raw JSON request body.

    Raises:
        InvalidCoasterError: body is not JSON or does not describe a coaster
    """
    try:
        return CoasterPayload.model_validate_json(body)
    except ValidationError as e:
        raise InvalidCoasterError(_describe_validation_error(e)) from e
