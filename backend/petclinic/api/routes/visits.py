"""Module: visits."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse

from petclinic.api.routes.deps import get_owner_repository, get_pet_repository, get_visit_repository
from petclinic.api.templating import render_not_found, templates
from petclinic.core.outcomes import NotFound
from petclinic.db.models.visit import Visit
from petclinic.repositories.owners import OwnerRepository
from petclinic.repositories.pets import PetRepository
from petclinic.repositories.visits import VisitRepository
from petclinic.schemas.forms import VisitForm
from petclinic.validation import VISIT_VALIDATORS, parse_date, validate

logger = logging.getLogger(__name__)

router = APIRouter()

FORM_VIEW = "pets/createOrUpdateVisitForm.html"


def visit_form(
    visit_date: str = Form(default="", alias="date"),
    description: str = Form(default=""),
) -> VisitForm:
    return VisitForm(date=visit_date, description=description)


# Endpoint: new visit form, showing the pet and its previous visits.
@router.get("/new", summary="New visit form")
def init_new_visit_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
):
    owner_lookup = owners.find_by_id(owner_id)
    if isinstance(owner_lookup, NotFound):
        return render_not_found(request, owner_lookup)
    pet_lookup = pets.find_for_owner(owner_id, pet_id)
    if isinstance(pet_lookup, NotFound):
        return render_not_found(request, pet_lookup)

    return templates.TemplateResponse(
        request,
        FORM_VIEW,
        {
            "visit": VisitForm.blank(),
            "pet": pet_lookup.record,
            "owner": owner_lookup.record,
            "errors": {},
        },
    )


# Endpoint: record a visit; future dates are accepted.
@router.post("/new", summary="Create a visit")
def process_new_visit_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    form: VisitForm = Depends(visit_form),
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
    visits: VisitRepository = Depends(get_visit_repository),
):
    owner_lookup = owners.find_by_id(owner_id)
    if isinstance(owner_lookup, NotFound):
        return render_not_found(request, owner_lookup)
    pet_lookup = pets.find_for_owner(owner_id, pet_id)
    if isinstance(pet_lookup, NotFound):
        return render_not_found(request, pet_lookup)
    pet = pet_lookup.record

    errors = validate(form, VISIT_VALIDATORS)
    if errors:
        return templates.TemplateResponse(
            request,
            FORM_VIEW,
            {"visit": form, "pet": pet, "owner": owner_lookup.record, "errors": errors},
        )

    visit = visits.save(
        Visit(
            pet_id=pet.id,
            visit_date=parse_date(form.date) or date.today(),
            description=form.description,
        )
    )
    logger.info("Recorded visit %s for pet %s on %s", visit.id, pet.id, visit.visit_date)
    return RedirectResponse(f"/owners/{owner_id}", status_code=302)
