"""Module: system."""

from fastapi import APIRouter, Request

from petclinic.api.templating import templates

router = APIRouter()


@router.get("/", summary="Welcome page")
def welcome(request: Request):
    return templates.TemplateResponse(request, "welcome.html", {})


# Endpoint: lightweight health probe for service liveness.
@router.get("/health")
def health():
    return {"status": "ok"}


# Endpoint: always fails, to exercise the error page.
@router.get("/oups", summary="Trigger an error")
def trigger_exception():
    raise RuntimeError("Expected: route used to showcase what happens when an exception is raised")
