"""
Phonebook Backend: Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between frontend and backend.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation.

Request bodies declare name and number as optional on purpose: a missing
field is a business rule ("content missing", 400) handled by the service,
not a schema failure.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class PersonPayload(BaseModel):
    """Body of POST /api/persons and PUT /api/persons/{id}."""
    name: Optional[str] = Field(default=None, description="Person's name (unique)")
    number: Optional[str] = Field(default=None, description="Phone number")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class PersonResponse(BaseModel):
    """
    What:  JSON representation of a phonebook entry.
    Who:   Returned by list, get, create and update.

    Example:
        {"id": "1f0c...", "name": "Ada", "number": "123"}
    """
    id: uuid.UUID = Field(description="Database-assigned identifier")
    name: str = Field(description="Person's name")
    number: str = Field(description="Phone number")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every failing endpoint.

    Example:
        {"error": "that name is already in the phonebook"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
