"""
Owner pages: create, find, show and edit.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..models import Owner
from ..repositories import OwnerRepository
from ..schemas import OwnerForm, OwnerSearchForm
from ..utils import ValidationResult, bind_form, validate_owner
from .dependencies import get_owner_repository, templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/owners", tags=["owners"])

VIEWS_OWNER_CREATE_OR_UPDATE_FORM = "owners/createOrUpdateOwnerForm.html"


def render_owner_form(
    request: Request,
    form: OwnerForm,
    result: Optional[ValidationResult[Any]] = None,
    owner: Optional[Owner] = None,
) -> HTMLResponse:
    context: Dict[str, Any] = {
        "form": form,
        "errors": result.as_dict() if result else {},
        "owner": owner,
    }
    return templates.TemplateResponse(
        request, VIEWS_OWNER_CREATE_OR_UPDATE_FORM, context
    )


async def bind_owner_form(request: Request) -> ValidationResult[OwnerForm]:
    """Bind and validate a submitted owner form. Any ``id`` field is ignored."""
    submitted = dict(await request.form())
    submitted.pop("id", None)
    result = bind_form(OwnerForm, submitted)
    validate_owner(result.value, result)
    return result


@router.get("/new", response_class=HTMLResponse)
async def init_creation_form(request: Request):
    return render_owner_form(request, OwnerForm())


@router.post("/new", response_class=HTMLResponse)
async def process_creation_form(
    request: Request, owners: OwnerRepository = Depends(get_owner_repository)
):
    result = await bind_owner_form(request)
    if not result.is_valid:
        return render_owner_form(request, result.value, result)

    owner = await owners.save(result.value.to_model())
    return RedirectResponse(f"/owners/{owner.id}", status_code=303)


@router.get("/find", response_class=HTMLResponse)
async def init_find_form(request: Request):
    return templates.TemplateResponse(
        request, "owners/findOwners.html", {"form": OwnerSearchForm(), "errors": {}}
    )


@router.get("", response_class=HTMLResponse)
async def process_find_form(
    request: Request,
    last_name: str = "",
    owners: OwnerRepository = Depends(get_owner_repository),
):
    """
    Find owners by last-name prefix.

    No match re-renders the search form, a single match goes straight to
    that owner, several matches are listed.
    """
    search = OwnerSearchForm(last_name=last_name)
    results = await owners.find_by_last_name(search.last_name)

    if not results:
        return templates.TemplateResponse(
            request,
            "owners/findOwners.html",
            {"form": search, "errors": {"last_name": ["not found"]}},
        )
    if len(results) == 1:
        return RedirectResponse(f"/owners/{results[0].id}", status_code=303)
    return templates.TemplateResponse(
        request, "owners/ownersList.html", {"selections": results}
    )


@router.get("/{owner_id}/edit", response_class=HTMLResponse)
async def init_update_owner_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
):
    owner = await owners.find_by_id(owner_id)
    return render_owner_form(request, OwnerForm.model_validate(owner), owner=owner)


@router.post("/{owner_id}/edit", response_class=HTMLResponse)
async def process_update_owner_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
):
    owner = await owners.find_by_id(owner_id)
    result = await bind_owner_form(request)
    if not result.is_valid:
        return render_owner_form(request, result.value, result, owner)

    result.value.apply_to(owner)
    await owners.save(owner)
    return RedirectResponse(f"/owners/{owner_id}", status_code=303)


@router.get("/{owner_id}", response_class=HTMLResponse)
async def show_owner(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
):
    """Owner details with the owner's pets and their visits."""
    owner = await owners.find_by_id(owner_id)
    return templates.TemplateResponse(
        request, "owners/ownerDetails.html", {"owner": owner}
    )
