"""Module: forms."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet


# Submitted form values are kept as raw strings so a rejected form can be
# re-rendered exactly as the user typed it. Aliases are the HTML field names.
class FormModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=False)

    @classmethod
    def field_name(cls, attr: str) -> str:
        info = cls.model_fields[attr]
        return info.alias or attr


class OwnerForm(FormModel):
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    address: str = ""
    city: str = ""
    telephone: str = ""

    @classmethod
    def from_owner(cls, owner: Owner) -> "OwnerForm":
        return cls(
            first_name=owner.first_name,
            last_name=owner.last_name,
            address=owner.address,
            city=owner.city,
            telephone=owner.telephone,
        )

    def apply_to(self, owner: Owner) -> Owner:
        owner.first_name = self.first_name
        owner.last_name = self.last_name
        owner.address = self.address
        owner.city = self.city
        owner.telephone = self.telephone
        return owner


class PetForm(FormModel):
    name: str = ""
    birth_date: str = Field(default="", alias="birthDate")
    type: str = ""

    @classmethod
    def from_pet(cls, pet: Pet) -> "PetForm":
        return cls(
            name=pet.name,
            birth_date=pet.birth_date.isoformat() if pet.birth_date else "",
            type=pet.type.name if pet.type else "",
        )


class VisitForm(FormModel):
    date: str = ""
    description: str = ""

    @classmethod
    def blank(cls, today: datetime.date | None = None) -> "VisitForm":
        return cls(date=(today or datetime.date.today()).isoformat())


# Owner search filter shown on the find form.
class OwnerSearchForm(FormModel):
    last_name: str = Field(default="", alias="lastName")
