"""Module: owner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from petclinic.db.base import Base

if TYPE_CHECKING:
    from petclinic.db.models.pet import Pet


class Owner(Base):
    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    # Case-folded copy of last_name for case-insensitive prefix search.
    last_name_folded: Mapped[str] = mapped_column(String(90), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(80), nullable=False)
    telephone: Mapped[str] = mapped_column(String(20), nullable=False)

    pets: Mapped[list["Pet"]] = relationship(
        back_populates="owner",
        order_by="Pet.name",
        cascade="all, delete-orphan",
    )

    @validates("last_name")
    def _fold_last_name(self, key, value):
        self.last_name_folded = (value or "").casefold()
        return value

    def get_pet(self, name: str, exclude_id: int | None = None) -> "Pet | None":
        # Pet names are unique per owner, compared case-insensitively.
        wanted = name.strip().lower()
        for pet in self.pets:
            if pet.id is not None and pet.id == exclude_id:
                continue
            if pet.name.strip().lower() == wanted:
                return pet
        return None
