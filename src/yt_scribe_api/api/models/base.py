"""Base response models for the API."""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field


T = TypeVar('T')


class BaseResponse(BaseModel):
    """Base response model."""

    success: bool
    timestamp: datetime = Field(default_factory=datetime.now)
    request_id: Optional[str] = None


class SuccessResponse(BaseResponse, Generic[T]):
    """Success response model."""

    success: bool = True
    data: T


class HealthStatus(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime = Field(default_factory=datetime.now)
    version: str
    message: Optional[str] = None


class HealthResponse(SuccessResponse[HealthStatus]):
    """Health check response model."""
    pass
