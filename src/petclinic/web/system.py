"""
Welcome page and the deliberately failing endpoint.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from .dependencies import templates

router = APIRouter(tags=["system"])


@router.get("/", response_class=HTMLResponse)
async def welcome(request: Request):
    return templates.TemplateResponse(request, "welcome.html", {})


@router.get("/oups")
async def trigger_exception(request: Request):
    """Raise on purpose so the error page can be seen."""
    raise RuntimeError(
        "Expected: controller used to showcase what happens when an exception is thrown"
    )
