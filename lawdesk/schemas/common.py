"""Shared schema configuration and field types."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from lawdesk.shared.utils.datetime import ensure_utc, isoformat_utc


def _parse_datetime(value: Any) -> Any:
    """Accept ISO dates ("2024-05-01") as well as ISO datetimes ("...Z")."""
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return value
    return value


UtcDatetime = Annotated[
    datetime,
    BeforeValidator(_parse_datetime),
    AfterValidator(ensure_utc),
    PlainSerializer(isoformat_utc, return_type=str, when_used="json"),
]

# 24h clock, as sent by <input type="time">.
TimeOfDay = Annotated[str, Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")]


class CamelModel(BaseModel):
    """Base for request bodies: camelCase keys, unknown keys ignored, strings stripped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class CamelResponse(BaseModel):
    """Base for response bodies (serialized by alias)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserRefResponse(CamelResponse):
    """Embedded user reference (createdBy)."""

    id: str = Field(alias="_id")
    name: str
    email: str


class SuccessMessageResponse(CamelResponse):
    success: bool = True
    message: str
