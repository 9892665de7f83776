"""Schemas for admin auth and image upload endpoints."""

from typing import Any

from pydantic import BaseModel


class AdminAuthRequest(BaseModel):
    """Body for POST /api/admin/auth. Any JSON value is compared as a string."""

    password: Any = None


class AdminAuthResponse(BaseModel):
    success: bool
    message: str


class UploadResponse(BaseModel):
    """Response from POST /api/upload."""

    success: bool
    url: str
    filename: str
