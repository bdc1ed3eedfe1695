"""Module: pets."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse

from petclinic.api.routes.deps import (
    get_owner_repository,
    get_pet_repository,
    get_pet_type_repository,
)
from petclinic.api.templating import render_not_found, templates
from petclinic.core.outcomes import NotFound
from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet
from petclinic.db.models.pet_type import PetType
from petclinic.repositories.owners import OwnerRepository
from petclinic.repositories.pets import PetRepository, PetTypeRepository
from petclinic.schemas.forms import PetForm
from petclinic.validation import parse_date, pet_validators, validate

logger = logging.getLogger(__name__)

router = APIRouter()

FORM_VIEW = "pets/createOrUpdatePetForm.html"


def pet_form(
    name: str = Form(default=""),
    birth_date: str = Form(default="", alias="birthDate"),
    type: str = Form(default=""),
) -> PetForm:
    return PetForm(name=name, birth_date=birth_date, type=type)


def _render_form(
    request: Request,
    owner: Owner,
    form: PetForm,
    types: list[PetType],
    errors: dict,
    pet_id: int | None = None,
):
    return templates.TemplateResponse(
        request,
        FORM_VIEW,
        {
            "pet": form,
            "owner": owner,
            "types": types,
            "errors": errors,
            "pet_id": pet_id,
            "is_new": pet_id is None,
        },
    )


def _apply(form: PetForm, pet: Pet, types: list[PetType]) -> Pet:
    # Only called after validation, so the date parses and the type exists.
    pet.name = form.name.strip()
    pet.birth_date = parse_date(form.birth_date)
    pet.type = next(t for t in types if t.name == form.type)
    return pet


@router.get("/new", summary="New pet form")
def init_creation_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pet_types: PetTypeRepository = Depends(get_pet_type_repository),
):
    lookup = owners.find_by_id(owner_id)
    if isinstance(lookup, NotFound):
        return render_not_found(request, lookup)
    return _render_form(request, lookup.record, PetForm(), pet_types.find_all(), {})


@router.post("/new", summary="Create pet for an owner")
def process_creation_form(
    request: Request,
    owner_id: int,
    form: PetForm = Depends(pet_form),
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
    pet_types: PetTypeRepository = Depends(get_pet_type_repository),
):
    lookup = owners.find_by_id(owner_id)
    if isinstance(lookup, NotFound):
        return render_not_found(request, lookup)
    owner = lookup.record
    types = pet_types.find_all()

    errors = validate(form, pet_validators(owner, [t.name for t in types]))
    if errors:
        return _render_form(request, owner, form, types, errors)

    pet = _apply(form, Pet(), types)
    owner.pets.append(pet)
    pets.save(pet)
    logger.info("Added pet %s (%s) to owner %s", pet.id, pet.name, owner.id)
    return RedirectResponse(f"/owners/{owner.id}", status_code=302)


@router.get("/{pet_id}/edit", summary="Edit pet form")
def init_update_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
    pet_types: PetTypeRepository = Depends(get_pet_type_repository),
):
    owner_lookup = owners.find_by_id(owner_id)
    if isinstance(owner_lookup, NotFound):
        return render_not_found(request, owner_lookup)
    pet_lookup = pets.find_for_owner(owner_id, pet_id)
    if isinstance(pet_lookup, NotFound):
        return render_not_found(request, pet_lookup)

    return _render_form(
        request,
        owner_lookup.record,
        PetForm.from_pet(pet_lookup.record),
        pet_types.find_all(),
        {},
        pet_id=pet_id,
    )


@router.post("/{pet_id}/edit", summary="Update pet details")
def process_update_form(
    request: Request,
    owner_id: int,
    pet_id: int,
    form: PetForm = Depends(pet_form),
    owners: OwnerRepository = Depends(get_owner_repository),
    pets: PetRepository = Depends(get_pet_repository),
    pet_types: PetTypeRepository = Depends(get_pet_type_repository),
):
    owner_lookup = owners.find_by_id(owner_id)
    if isinstance(owner_lookup, NotFound):
        return render_not_found(request, owner_lookup)
    pet_lookup = pets.find_for_owner(owner_id, pet_id)
    if isinstance(pet_lookup, NotFound):
        return render_not_found(request, pet_lookup)

    owner = owner_lookup.record
    types = pet_types.find_all()
    errors = validate(form, pet_validators(owner, [t.name for t in types], pet_id=pet_id))
    if errors:
        return _render_form(request, owner, form, types, errors, pet_id=pet_id)

    pet = pets.save(_apply(form, pet_lookup.record, types))
    logger.info("Updated pet %s of owner %s", pet.id, owner.id)
    return RedirectResponse(f"/owners/{owner.id}", status_code=302)
