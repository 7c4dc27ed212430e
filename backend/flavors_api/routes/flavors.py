"""
Acme Flavors Backend: Flavor Route Handlers
===========================================

What:  The five /api/flavors endpoints.
How:   Each handler calls one FlavorRepository method and hands the Result
       to `unwrap`, which decides the response:
           ok        → 200 with the row (or rows)
           not_found → NotFoundError → 404 (200 + null in legacy mode)
           failed    → DatabaseError → 500 generic body
Who:   Called by the documentation page examples and any HTTP client.

Routes are THIN: no SQL here, no status-code decisions in the repository.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from flavors_api.database import get_db_session
from flavors_api.exceptions import DatabaseError, NotFoundError
from flavors_api.schemas.flavor import (
    ErrorResponse,
    FlavorCreate,
    FlavorResponse,
    FlavorUpdate,
)
from flavors_api.services.flavor_repository import FlavorRepository
from flavors_api.services.result import Result

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Flavors"])

ERROR_RESPONSES = {
    404: {"description": "Flavor not found", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


def get_flavor_repository(
    db: AsyncSession = Depends(get_db_session),
) -> FlavorRepository:
    """FastAPI dependency: one repository per request, bound to its session."""
    return FlavorRepository(db)


def unwrap(request: Request, result: Result, flavor_id: Optional[int] = None):
    """Map a repository Result onto the HTTP outcome."""
    if result.is_ok:
        return result.value
    if result.is_not_found:
        if request.app.state.settings.legacy_not_found:
            return None
        raise NotFoundError(resource="flavor", resource_id=str(flavor_id))
    raise DatabaseError(context={"error_type": type(result.error).__name__})


@router.get(
    "/flavors",
    response_model=List[FlavorResponse],
    responses={500: ERROR_RESPONSES[500]},
    summary="Get all flavors",
)
async def list_flavors(
    request: Request,
    repo: FlavorRepository = Depends(get_flavor_repository),
):
    """Every flavor row, in whatever order the store returns them."""
    return unwrap(request, await repo.list_flavors())


@router.get(
    "/flavors/{flavor_id}",
    response_model=Optional[FlavorResponse],
    responses=ERROR_RESPONSES,
    summary="Get a flavor",
)
async def get_flavor(
    flavor_id: int,
    request: Request,
    repo: FlavorRepository = Depends(get_flavor_repository),
):
    return unwrap(request, await repo.get_flavor(flavor_id), flavor_id)


@router.post(
    "/flavors",
    response_model=FlavorResponse,
    responses={500: ERROR_RESPONSES[500]},
    summary="Create a flavor",
)
async def create_flavor(
    body: FlavorCreate,
    request: Request,
    repo: FlavorRepository = Depends(get_flavor_repository),
):
    """
    Insert a flavor. `is_favorite` defaults to false.

    Answers 200 (not 201) with the created row, like every other endpoint.
    """
    return unwrap(request, await repo.create_flavor(body))


@router.put(
    "/flavors/{flavor_id}",
    response_model=Optional[FlavorResponse],
    responses=ERROR_RESPONSES,
    summary="Update a flavor",
)
async def update_flavor(
    flavor_id: int,
    body: FlavorUpdate,
    request: Request,
    repo: FlavorRepository = Depends(get_flavor_repository),
):
    return unwrap(request, await repo.update_flavor(flavor_id, body), flavor_id)


@router.delete(
    "/flavors/{flavor_id}",
    response_model=Optional[FlavorResponse],
    responses=ERROR_RESPONSES,
    summary="Delete a flavor",
)
async def delete_flavor(
    flavor_id: int,
    request: Request,
    repo: FlavorRepository = Depends(get_flavor_repository),
):
    """Returns the row as it existed before removal."""
    return unwrap(request, await repo.delete_flavor(flavor_id), flavor_id)
