"""Module: owners."""

import logging

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import RedirectResponse

from petclinic.api.routes.deps import get_owner_repository, get_owner_search
from petclinic.api.templating import render_not_found, templates
from petclinic.core.outcomes import NotFound, SingleMatch
from petclinic.core.pagination import parse_page
from petclinic.db.models.owner import Owner
from petclinic.repositories.owners import OwnerRepository
from petclinic.schemas.forms import OwnerForm, OwnerSearchForm
from petclinic.services.owner_search import OwnerSearch
from petclinic.validation import NOT_FOUND, OWNER_VALIDATORS, validate

logger = logging.getLogger(__name__)

router = APIRouter()

FIND_VIEW = "owners/findOwners.html"
LIST_VIEW = "owners/ownersList.html"
DETAILS_VIEW = "owners/ownerDetails.html"
FORM_VIEW = "owners/createOrUpdateOwnerForm.html"


# Collect submitted owner fields; missing inputs arrive as empty strings.
def owner_form(
    first_name: str = Form(default="", alias="firstName"),
    last_name: str = Form(default="", alias="lastName"),
    address: str = Form(default=""),
    city: str = Form(default=""),
    telephone: str = Form(default=""),
) -> OwnerForm:
    return OwnerForm(
        first_name=first_name,
        last_name=last_name,
        address=address,
        city=city,
        telephone=telephone,
    )


def _render_form(request: Request, form: OwnerForm, errors: dict, owner_id: int | None = None):
    return templates.TemplateResponse(
        request,
        FORM_VIEW,
        {"owner": form, "errors": errors, "owner_id": owner_id, "is_new": owner_id is None},
    )


# Endpoint: empty search form.
@router.get("/find", summary="Find owners form")
def init_find_form(request: Request):
    return templates.TemplateResponse(request, FIND_VIEW, {"owner": OwnerSearchForm(), "errors": {}})


# Endpoint: last-name search; redirects on a single match, lists several, re-shows the form on none.
@router.get("", summary="Search owners by last name")
def process_find_form(
    request: Request,
    last_name: str | None = Query(default=None, alias="lastName"),
    page: str | None = Query(default=None),
    search: OwnerSearch = Depends(get_owner_search),
):
    outcome = search.resolve(last_name, parse_page(page))

    if isinstance(outcome, NotFound):
        return templates.TemplateResponse(
            request,
            FIND_VIEW,
            {
                "owner": OwnerSearchForm(last_name=last_name or ""),
                "errors": {"lastName": [NOT_FOUND]},
            },
        )

    if isinstance(outcome, SingleMatch):
        return RedirectResponse(f"/owners/{outcome.record_id}", status_code=302)

    return templates.TemplateResponse(
        request,
        LIST_VIEW,
        {
            "listOwners": outcome.items,
            "currentPage": outcome.current_page,
            "totalPages": outcome.total_pages,
            "totalItems": outcome.total_items,
            "lastName": last_name or "",
        },
    )


@router.get("/new", summary="New owner form")
def init_creation_form(request: Request):
    return _render_form(request, OwnerForm(), {})


@router.post("/new", summary="Create owner")
def process_creation_form(
    request: Request,
    form: OwnerForm = Depends(owner_form),
    owners: OwnerRepository = Depends(get_owner_repository),
):
    errors = validate(form, OWNER_VALIDATORS)
    if errors:
        return _render_form(request, form, errors)

    owner = owners.save(form.apply_to(Owner()))
    logger.info("Created owner %s (%s %s)", owner.id, owner.first_name, owner.last_name)
    return RedirectResponse(f"/owners/{owner.id}", status_code=302)


@router.get("/{owner_id}", summary="Owner details")
def show_owner(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
):
    lookup = owners.find_by_id(owner_id)
    if isinstance(lookup, NotFound):
        return render_not_found(request, lookup)
    return templates.TemplateResponse(request, DETAILS_VIEW, {"owner": lookup.record})


@router.get("/{owner_id}/edit", summary="Edit owner form")
def init_update_form(
    request: Request,
    owner_id: int,
    owners: OwnerRepository = Depends(get_owner_repository),
):
    lookup = owners.find_by_id(owner_id)
    if isinstance(lookup, NotFound):
        return render_not_found(request, lookup)
    return _render_form(request, OwnerForm.from_owner(lookup.record), {}, owner_id=owner_id)


@router.post("/{owner_id}/edit", summary="Update owner")
def process_update_form(
    request: Request,
    owner_id: int,
    form: OwnerForm = Depends(owner_form),
    owners: OwnerRepository = Depends(get_owner_repository),
):
    lookup = owners.find_by_id(owner_id)
    if isinstance(lookup, NotFound):
        return render_not_found(request, lookup)

    errors = validate(form, OWNER_VALIDATORS)
    if errors:
        return _render_form(request, form, errors, owner_id=owner_id)

    owner = owners.save(form.apply_to(lookup.record))
    logger.info("Updated owner %s", owner.id)
    return RedirectResponse(f"/owners/{owner.id}", status_code=302)
