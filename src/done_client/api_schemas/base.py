from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
)
from pydantic.alias_generators import to_camel


def ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        # Assume naive datetime is UTC
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def format_timestamp(value: datetime) -> str:
    """Render a datetime the way the Done service writes it.

    UTC with a ``Z`` suffix. Whole seconds carry no fraction, otherwise
    milliseconds are written, or microseconds when the value has
    sub-millisecond precision. A zero fraction such as ``.000Z`` is
    written back as whole seconds.
    """
    value = ensure_utc(value)
    if value.microsecond % 1000:
        timespec = "microseconds"
    elif value.microsecond:
        timespec = "milliseconds"
    else:
        timespec = "seconds"
    return value.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"


def _require_timestamp_text(value: Any) -> Any:
    if isinstance(value, (str, datetime)):
        return value
    raise ValueError(
        f"timestamp must be an ISO-8601 string, got {type(value).__name__}"
    )


Timestamp = Annotated[
    datetime,
    BeforeValidator(_require_timestamp_text),
    AfterValidator(ensure_utc),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


# Base Pydantic model configuration
class BaseSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,  # Wire format is camelCase
        populate_by_name=True,  # Allows using field names as well as aliases
    )
