"""
Acme Flavors Backend: Documentation Page and Static Assets
==========================================================

What:  Serves index.html at `/` and the public/ directory for every other
       path the API does not claim.
How:   A plain route for `/` plus a Starlette StaticFiles mount at the root.
       The mount is registered last in create_app(), so /api/*, /health
       and /docs are always matched first.
"""

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

router = APIRouter(include_in_schema=False)


@router.get("/")
async def index(request: Request) -> FileResponse:
    return FileResponse(request.app.state.settings.index_file, media_type="text/html")


def mount_static(app: FastAPI, directory: str) -> None:
    """Catch-all static mount; call after every router is included."""
    app.mount("/", StaticFiles(directory=directory, check_dir=False), name="static")
