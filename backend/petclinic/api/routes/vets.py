"""Module: vets."""

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, Response

from petclinic.api.routes.deps import get_settings, get_vet_repository
from petclinic.api.templating import templates
from petclinic.core.config import Settings
from petclinic.core.pagination import parse_page
from petclinic.repositories.vets import VetRepository
from petclinic.schemas.vets import VetOut, VetsOut

router = APIRouter()

JSON_TYPE = "application/json"
XML_TYPES = ("application/xml", "text/xml")


def _accepts(accept: str) -> dict[str, float]:
    # Media ranges from an Accept header with their quality values.
    ranges: dict[str, float] = {}
    for part in accept.split(","):
        pieces = [p.strip() for p in part.split(";")]
        media = pieces[0].lower()
        if not media:
            continue
        quality = 1.0
        for param in pieces[1:]:
            if param.startswith("q="):
                try:
                    quality = float(param[2:])
                except ValueError:
                    quality = 0.0
        ranges[media] = max(quality, ranges.get(media, 0.0))
    return ranges


def prefers_xml(accept: str | None) -> bool:
    # JSON wins ties and is the default when no Accept header is sent.
    if not accept:
        return False
    ranges = _accepts(accept)
    xml_q = max(ranges.get(t, 0.0) for t in XML_TYPES)
    json_q = ranges.get(JSON_TYPE, ranges.get("application/*", ranges.get("*/*", 0.0)))
    return xml_q > json_q


# Endpoint: paginated HTML vet list.
@router.get("/vets.html", summary="Vet list page")
def show_vet_list(
    request: Request,
    page: str | None = Query(default=None),
    vets: VetRepository = Depends(get_vet_repository),
    cfg: Settings = Depends(get_settings),
):
    result = vets.find_page(cfg.vets_page_size, parse_page(page))
    return templates.TemplateResponse(
        request,
        "vets/vetList.html",
        {
            "listVets": result.items,
            "currentPage": result.current_page,
            "totalPages": result.total_pages,
            "totalItems": result.total_items,
        },
    )


# Endpoint: full vet list as JSON or XML, chosen from the Accept header.
@router.get("/vets", summary="Vet list resource")
def show_resources_vet_list(request: Request, vets: VetRepository = Depends(get_vet_repository)):
    document = VetsOut(vet_list=[VetOut.model_validate(v) for v in vets.find_all()])
    if prefers_xml(request.headers.get("accept")):
        return Response(content=document.to_xml(), media_type="application/xml")
    return JSONResponse(content=document.model_dump(by_alias=True))
