"""
Pydantic models for the parts of the Open-Meteo forecast payload we read.

Fields we do not use are ignored; everything listed here must be present
and well typed or validation fails. Numbers must arrive as JSON numbers and
timestamps must parse as ISO 8601, but the timestamp strings themselves are
kept as sent so they can be echoed back unchanged.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, List, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)


def _iso_datetime(value: str) -> str:
    datetime.fromisoformat(value)
    return value


def _iso_date(value: str) -> str:
    date.fromisoformat(value)
    return value


IsoDateTime = Annotated[StrictStr, AfterValidator(_iso_datetime)]
IsoDate = Annotated[StrictStr, AfterValidator(_iso_date)]


def _check_same_length(model: BaseModel, *fields: str) -> None:
    lengths = {name: len(getattr(model, name)) for name in fields}
    if len(set(lengths.values())) > 1:
        raise ValueError(f"series lengths differ: {lengths}")


class Current(BaseModel):
    time: IsoDateTime
    temperature_2m: StrictFloat
    relative_humidity_2m: StrictFloat


class Hourly(BaseModel):
    time: List[IsoDateTime]
    temperature_2m: List[StrictFloat]

    @model_validator(mode="after")
    def _paired(self) -> "Hourly":
        _check_same_length(self, "time", "temperature_2m")
        return self


class Daily(BaseModel):
    time: List[IsoDate]
    sunset: List[IsoDateTime]
    temperature_2m_max: List[Optional[StrictFloat]]
    temperature_2m_min: List[Optional[StrictFloat]]

    @model_validator(mode="after")
    def _paired(self) -> "Daily":
        _check_same_length(self, "time", "sunset", "temperature_2m_max", "temperature_2m_min")
        if not self.time:
            raise ValueError("daily series is empty")
        return self


class OpenMeteoForecast(BaseModel):
    latitude: StrictFloat
    longitude: StrictFloat
    utc_offset_seconds: StrictInt
    timezone: StrictStr
    current: Current
    hourly: Hourly
    daily: Daily
