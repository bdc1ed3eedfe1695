"""Module: vet."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.db.base import Base
from petclinic.db.models.specialty import Specialty, vet_specialties


class Vet(Base):
    __tablename__ = "vets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False)

    specialties: Mapped[list[Specialty]] = relationship(
        secondary=vet_specialties,
        order_by=Specialty.name,
        lazy="selectin",
    )

    @property
    def nr_of_specialties(self) -> int:
        return len(self.specialties)
