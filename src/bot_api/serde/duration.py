from datetime import timedelta
from typing import Annotated

from pydantic import AfterValidator, PlainSerializer


def encode_duration(value: timedelta) -> int:
    """The Bot API takes durations and timestamps as whole seconds."""
    return int(value.total_seconds())


def _require_non_negative(value: timedelta) -> timedelta:
    if value < timedelta(0):
        raise ValueError(f"Duration must not be negative, got {value}")
    return value


ApiDuration = Annotated[
    timedelta,
    AfterValidator(_require_non_negative),
    PlainSerializer(encode_duration, return_type = int),
]
