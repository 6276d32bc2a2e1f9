"""
Pet pages: add a pet to an owner and edit an existing pet.

A new pet is validated before it is attached to its owner; only a valid pet
joins the owner's pet collection and is saved.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ..exceptions import EntityNotFoundException
from ..models import Owner, Pet
from ..repositories import OwnerRepository, PetRepository, ReferenceData
from ..schemas import PetForm
from ..utils import (
    TYPE_MISMATCH,
    ValidationResult,
    bind_form,
    check_duplicate_pet_name,
    validate_pet,
)
from .dependencies import (
    get_owner_repository,
    get_pet_repository,
    get_reference_data,
    templates,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/owners/{owner_id}", tags=["pets"])

VIEWS_PET_CREATE_OR_UPDATE_FORM = "pets/createOrUpdatePetForm.html"


def render_pet_form(
    request: Request,
    owner: Owner,
    form: PetForm,
    reference: ReferenceData,
    is_new: bool,
    result: Optional[ValidationResult[Any]] = None,
) -> HTMLResponse:
    context: Dict[str, Any] = {
        "owner": owner,
        "form": form,
        "is_new": is_new,
        "types": reference.sorted_pet_types,
        "errors": result.as_dict() if result else {},
    }
    return templates.TemplateResponse(request, VIEWS_PET_CREATE_OR_UPDATE_FORM, context)


async def bind_pet_form(
    request: Request,
    owner: Owner,
    reference: ReferenceData,
    is_new: bool,
) -> ValidationResult[PetForm]:
    """Bind the submitted pet, run the field checks and the duplicate-name rule."""
    result = bind_form(PetForm, await request.form())
    form = result.value
    validate_pet(form, is_new, result)
    if form.type is not None and reference.pet_type_by_name(form.type) is None:
        result.add_error("type", TYPE_MISMATCH, f"unknown pet type '{form.type}'")
    check_duplicate_pet_name(result, owner, form.name, is_new)
    return result


async def apply_pet_form(
    form: PetForm, pet: Pet, pets: PetRepository, reference: ReferenceData
) -> None:
    pet.name = form.name
    pet.birth_date = form.birth_date
    if form.type is not None:
        lookup = reference.pet_type_by_name(form.type)
        pet.type = await pets.find_pet_type(lookup.id)


@router.get("/pets/new", response_class=HTMLResponse)
async def init_creation_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    reference: ReferenceData = Depends(get_reference_data),
):
    owner = await owners.find_by_id(owner_id)
    return render_pet_form(request, owner, PetForm(), reference, is_new=True)


@router.post("/pets/new", response_class=HTMLResponse)
async def process_creation_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
    reference: ReferenceData = Depends(get_reference_data),
):
    owner = await owners.find_by_id(owner_id)
    result = await bind_pet_form(request, owner, reference, is_new=True)
    if not result.is_valid:
        logger.debug(f"Rejected new pet for owner {owner_id}: {result.errors}")
        return render_pet_form(request, owner, result.value, reference, True, result)

    pet = Pet()
    await apply_pet_form(result.value, pet, pets, reference)
    owner.add_pet(pet)
    await pets.save(pet)
    return RedirectResponse(f"/owners/{owner_id}", status_code=303)


async def find_owned_pet(owner: Owner, pet_id: int, pets: PetRepository) -> Pet:
    pet = await pets.find_by_id(pet_id)
    if pet.owner_id != owner.id:
        raise EntityNotFoundException("Pet", pet_id)
    return pet


@router.get("/pets/{pet_id}/edit", response_class=HTMLResponse)
async def init_update_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
    reference: ReferenceData = Depends(get_reference_data),
):
    owner = await owners.find_by_id(owner_id)
    pet = await find_owned_pet(owner, pet_id, pets)
    return render_pet_form(
        request, owner, PetForm.from_model(pet), reference, is_new=False
    )


@router.post("/pets/{pet_id}/edit", response_class=HTMLResponse)
async def process_update_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
    reference: ReferenceData = Depends(get_reference_data),
):
    owner = await owners.find_by_id(owner_id)
    pet = await find_owned_pet(owner, pet_id, pets)
    result = await bind_pet_form(request, owner, reference, is_new=False)
    if not result.is_valid:
        return render_pet_form(request, owner, result.value, reference, False, result)

    await apply_pet_form(result.value, pet, pets, reference)
    owner.add_pet(pet)
    await pets.save(pet)
    return RedirectResponse(f"/owners/{owner_id}", status_code=303)
