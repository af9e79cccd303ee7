"""Client message and metric schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field

from app.schemas.common import CamelModel, UtcDatetime


class ClientMessageCreate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(..., min_length=1)


class ClientMessageRead(CamelModel):
    id: int
    client_id: int
    content: str
    created_at: UtcDatetime


class ClientMetricCreate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    value: float
    unit: str | None = Field(None, max_length=50)
    recorded_at: datetime | None = None


class ClientMetricRead(CamelModel):
    id: int
    client_id: int
    name: str
    value: float
    unit: str | None = None
    recorded_at: UtcDatetime
    created_at: UtcDatetime
