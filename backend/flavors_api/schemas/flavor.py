"""
Acme Flavors Backend: Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract.
Why:   Type coercion of request bodies, serialization of rows, and OpenAPI
       docs generated from one definition.

Schemas are separate from the SQLAlchemy model so the wire format can be
controlled independently of the table (e.g. `updated_at` semantics).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class FlavorCreate(BaseModel):
    """Body of POST /api/flavors. `is_favorite` may be omitted."""
    name: str = Field(description="Flavor name")
    is_favorite: bool = Field(default=False, description="Favorite flag (default false)")


class FlavorUpdate(BaseModel):
    """Body of PUT /api/flavors/{id}. Both fields overwrite the stored row."""
    name: str = Field(description="New flavor name")
    is_favorite: bool = Field(description="New favorite flag")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class FlavorResponse(BaseModel):
    """
    What:  Full representation of a flavor row.
    Who:   Returned by every /api/flavors endpoint (alone or in an array).
    """
    id: int = Field(description="Unique flavor identifier")
    name: str = Field(description="Flavor name")
    is_favorite: bool = Field(description="Favorite flag")
    created_at: datetime = Field(description="When the row was inserted")
    updated_at: datetime = Field(description="When the row was last written")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    Standardized error body for 404 and 500 responses.

    Example:
        {
            "error": "not_found",
            "message": "flavor with ID '42' was not found",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Body of GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
