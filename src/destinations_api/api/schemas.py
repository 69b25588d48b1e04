"""Pydantic models for API response validation"""
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    service: str
    version: str
    environment: str
    catalog_loaded: bool = Field(..., description="True once the catalog file was loaded")
    destination_count: int = Field(..., ge=0, description="Number of records being served")


class ErrorResponse(BaseModel):
    """Error body returned with 5xx responses"""

    detail: str
