from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TimeWindow(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def _ordered(self) -> "TimeWindow":
        if self.start >= self.end:
            raise ValueError("window start must be before its end")
        return self


class Reading(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    component: str
    value: float


class SensorValue(BaseModel):
    comp: str
    value: float


class TimePoint(BaseModel):
    timestamp: datetime
    sensors: list[SensorValue] = Field(default_factory=list)

    def readings(self) -> list[Reading]:
        return [Reading(timestamp=self.timestamp, component=s.comp, value=s.value) for s in self.sensors]


class AirDataResponse(BaseModel):
    """Body of the Awair ``air-data/raw`` endpoint; ``score`` and ``indices`` are ignored."""

    data: list[TimePoint] = Field(default_factory=list)
