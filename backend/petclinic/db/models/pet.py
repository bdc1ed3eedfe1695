"""Module: pet."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.db.base import Base
from petclinic.db.models.pet_type import PetType

if TYPE_CHECKING:
    from petclinic.db.models.owner import Owner
    from petclinic.db.models.visit import Visit


# Pet profile; belongs to exactly one owner and carries its visit history.
class Pet(Base):
    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=True)

    type_id: Mapped[int] = mapped_column(ForeignKey("types.id"), nullable=False)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type: Mapped[PetType] = relationship(lazy="joined")
    owner: Mapped["Owner"] = relationship(back_populates="pets")
    visits: Mapped[list["Visit"]] = relationship(
        back_populates="pet",
        order_by="Visit.visit_date",
        cascade="all, delete-orphan",
    )
