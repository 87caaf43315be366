"""OpenCage forward geocoding response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OpenCageBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OpenCageGeometry(OpenCageBaseModel):
    lat: float
    lng: float


class OpenCageResult(OpenCageBaseModel):
    geometry: OpenCageGeometry
    confidence: int | None = None
    formatted: str | None = None


class OpenCageStatus(OpenCageBaseModel):
    code: int
    message: str


class OpenCageResponse(OpenCageBaseModel):
    results: list[OpenCageResult] = Field(default_factory=list)
    status: OpenCageStatus | None = None
    total_results: int = 0
