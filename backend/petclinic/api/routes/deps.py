"""Module: deps."""

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from petclinic.core.config import Settings, settings
from petclinic.db.session import SessionLocal
from petclinic.repositories import (
    OwnerRepository,
    PetRepository,
    PetTypeRepository,
    VetRepository,
    VisitRepository,
)
from petclinic.services.owner_search import OwnerSearch


# Dependency provider: one DB session per request lifecycle.
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Overridable in tests.
def get_settings() -> Settings:
    return settings


def get_owner_repository(db: Session = Depends(get_db)) -> OwnerRepository:
    return OwnerRepository(db)


def get_pet_repository(db: Session = Depends(get_db)) -> PetRepository:
    return PetRepository(db)


def get_pet_type_repository(db: Session = Depends(get_db)) -> PetTypeRepository:
    return PetTypeRepository(db)


def get_visit_repository(db: Session = Depends(get_db)) -> VisitRepository:
    return VisitRepository(db)


def get_vet_repository(db: Session = Depends(get_db)) -> VetRepository:
    return VetRepository(db)


def get_owner_search(
    owners: OwnerRepository = Depends(get_owner_repository),
    cfg: Settings = Depends(get_settings),
) -> OwnerSearch:
    return OwnerSearch(
        owners,
        page_size=cfg.owners_page_size,
        trim_whitespace=cfg.owner_search_trim_whitespace,
        case_sensitive=cfg.owner_search_case_sensitive,
    )
