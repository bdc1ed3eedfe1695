from petclinic.repositories.owners import OwnerRepository
from petclinic.repositories.pets import PetRepository, PetTypeRepository
from petclinic.repositories.vets import VetRepository
from petclinic.repositories.visits import VisitRepository

__all__ = [
    "OwnerRepository",
    "PetRepository",
    "PetTypeRepository",
    "VetRepository",
    "VisitRepository",
]
