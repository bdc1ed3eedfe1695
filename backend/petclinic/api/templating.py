"""Module: templating."""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from petclinic.core.outcomes import NotFound

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


def render_error(request: Request, status_code: int, message: str):
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": status_code, "message": message},
        status_code=status_code,
    )


def render_not_found(request: Request, outcome: NotFound):
    return render_error(request, 404, outcome.message)
