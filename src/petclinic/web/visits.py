"""
Visit pages: record a new visit for a pet.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..exceptions import EntityNotFoundException
from ..models import Pet
from ..repositories import OwnerRepository, PetRepository, VisitRepository
from ..schemas import VisitForm
from ..utils import bind_form, validate_visit
from .dependencies import (
    get_owner_repository,
    get_pet_repository,
    get_visit_repository,
    templates,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/owners/{owner_id}/pets/{pet_id}", tags=["visits"])

VIEWS_VISIT_CREATE_OR_UPDATE_FORM = "pets/createOrUpdateVisitForm.html"


async def load_pet(
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
) -> Pet:
    """Resolve the pet from the URL, checking it belongs to the owner."""
    owner = await owners.find_by_id(owner_id)
    pet = await pets.find_by_id(pet_id)
    if pet.owner_id != owner.id:
        raise EntityNotFoundException("Pet", pet_id)
    return pet


@router.get("/visits/new", response_class=HTMLResponse)
async def init_new_visit_form(request: Request, pet: Pet = Depends(load_pet)):
    return templates.TemplateResponse(
        request,
        VIEWS_VISIT_CREATE_OR_UPDATE_FORM,
        {"pet": pet, "form": VisitForm(), "errors": {}},
    )


@router.post("/visits/new", response_class=HTMLResponse)
async def process_new_visit_form(
    request: Request,
    owner_id: int,
    pet: Pet = Depends(load_pet),
    visits: VisitRepository = Depends(get_visit_repository),
):
    result = bind_form(VisitForm, await request.form())
    validate_visit(result.value, result)
    if not result.is_valid:
        return templates.TemplateResponse(
            request,
            VIEWS_VISIT_CREATE_OR_UPDATE_FORM,
            {"pet": pet, "form": result.value, "errors": result.as_dict()},
        )

    visit = result.value.to_model()
    pet.add_visit(visit)
    await visits.save(visit)
    logger.info(f"Recorded visit {visit.id} for pet {pet.id}")
    return RedirectResponse(f"/owners/{owner_id}", status_code=303)
