"""
Vet listing, as an HTML page and as JSON.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from ..repositories import VetRepository
from ..schemas import VetListResponse, VetResponse
from .dependencies import get_vet_repository, templates

router = APIRouter(tags=["vets"])


@router.get("/vets.html", response_class=HTMLResponse)
async def show_vet_list(
    request: Request, vets: VetRepository = Depends(get_vet_repository)
):
    return templates.TemplateResponse(
        request, "vets/vetList.html", {"vets": await vets.find_all()}
    )


@router.get("/vets", response_model=VetListResponse)
async def show_resources_vet_list(vets: VetRepository = Depends(get_vet_repository)):
    """All vets with their specialties, wrapped in ``vet_list``."""
    return VetListResponse(
        vet_list=[VetResponse.model_validate(vet) for vet in await vets.find_all()]
    )
