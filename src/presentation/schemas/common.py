"""Shared schema building blocks: camelCase models and wire timestamps."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_timestamp(value: Any) -> Any:
    """
    Accept 'yyyy-MM-dd HH:mm:ss' as well as ISO 8601 strings.

    Timestamps are local wall-clock times; values carrying a UTC offset
    are rejected.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValueError(f"Timestamp must look like 2023-02-28 15:49:20, got {value!r}")
    if isinstance(value, datetime) and value.tzinfo is not None:
        raise ValueError(f"Timestamp must not carry a UTC offset, got {value.isoformat()}")
    return value


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


class CamelModel(BaseModel):
    """Base schema exchanging camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
