"""Workout Schemas - Pydantic request bodies, the date type, and the response envelope.

Invariants:
    - Dates on the wire are exactly YYYY-MM-DD strings (paths and bodies alike)
    - WorkoutCreate requires date, non-empty wtype and non-null data
    - WorkoutUpdate carries data only: date and type are not mutable
    - data is accepted as any JSON value and never inspected further
    - Envelope omits data/error when absent: {success, data?, error?}

Design Decisions:
    - Wire names (wtype, data) kept as field names: the HTTP contract predates this code
    - Structural checks only; duplicate/not-found rules live in the store
    - Envelope built as a plain dict: a response_model with exclude_none would also
      strip nulls inside the opaque exercise data
"""

import datetime as dt
import re
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field, field_validator

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: Any) -> dt.date:
    """Accept only 'YYYY-MM-DD' strings naming a real calendar date."""
    if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
        return value
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise ValueError("date must be formatted as YYYY-MM-DD")
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"{value} is not a valid calendar date")


IsoDate = Annotated[dt.date, BeforeValidator(parse_iso_date)]


def _require_payload(v: Any) -> Any:
    if v is None or v == "":
        raise ValueError("data cannot be null or empty")
    return v


class WorkoutCreate(BaseModel):
    """Body of POST /addworkout."""
    date: IsoDate
    wtype: str = Field(min_length=1, max_length=200)
    data: Any

    @field_validator("wtype")
    @classmethod
    def strip_wtype(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("wtype cannot be empty or whitespace")
        return v

    @field_validator("data")
    @classmethod
    def data_present(cls, v: Any) -> Any:
        return _require_payload(v)


class WorkoutUpdate(BaseModel):
    """Body of PATCH /updateworkout/{date}."""
    data: Any

    @field_validator("data")
    @classmethod
    def data_present(cls, v: Any) -> Any:
        return _require_payload(v)


def ok(data: Any) -> dict:
    """Success envelope."""
    return {"success": True, "data": data}


def failed(error: str) -> dict:
    """Failure envelope."""
    return {"success": False, "error": error}
