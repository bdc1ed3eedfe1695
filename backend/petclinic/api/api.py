"""Module: api."""

from fastapi import APIRouter

from petclinic.api.routes.system import router as system_router
from petclinic.api.routes.owners import router as owners_router
from petclinic.api.routes.pets import router as pets_router
from petclinic.api.routes.visits import router as visits_router
from petclinic.api.routes.vets import router as vets_router

api_router = APIRouter()

# Welcome, health and error-demo endpoints.
api_router.include_router(system_router, tags=["system"])

# Owner records and the pets/visits nested beneath them.
api_router.include_router(owners_router, prefix="/owners", tags=["owners"])
api_router.include_router(pets_router, prefix="/owners/{owner_id}/pets", tags=["pets"])
api_router.include_router(visits_router, prefix="/owners/{owner_id}/pets/{pet_id}/visits", tags=["visits"])

# Vet directory (HTML and JSON/XML).
api_router.include_router(vets_router, tags=["vets"])
