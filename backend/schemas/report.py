from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field


def _as_utc(value: datetime) -> datetime:
    # offset-less timestamps are read as UTC so event math never mixes naive and aware
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


Timestamp = Annotated[datetime, AfterValidator(_as_utc)]


def _null_as_empty(value):
    return [] if value is None else value


class _ReportModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Tag(_ReportModel):
    key: str
    value: str


class Step(_ReportModel):
    name: str
    id: int
    parent_id: int | None = Field(default=None, alias="parentId")
    tags: Annotated[list[Tag], BeforeValidator(_null_as_empty)] = Field(default_factory=list)


class Event(_ReportModel):
    step: Step = Field(alias="startupStep")
    start_time: Timestamp = Field(alias="startTime")
    end_time: Timestamp = Field(alias="endTime")


class Timeline(_ReportModel):
    start_time: Timestamp = Field(alias="startTime")
    events: Annotated[list[Event], BeforeValidator(_null_as_empty)] = Field(default_factory=list)


class StartupReport(_ReportModel):
    version: str | None = Field(default=None, alias="springBootVersion")
    timeline: Timeline
