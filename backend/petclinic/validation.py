"""Module: validation.

Form validation as explicit, ordered lists of validator functions. A
validator takes the submitted form and yields ``FieldViolation`` entries;
``validate`` folds them into a ``{field: [message, ...]}`` mapping that the
views render next to the inputs. An empty mapping means the form is valid.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable, Sequence

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet
from petclinic.db.models.visit import Visit
from petclinic.schemas.forms import FormModel

MUST_NOT_BE_BLANK = "must not be blank"
REQUIRED = "is required"
DUPLICATE = "is already in use"
NOT_FOUND = "has not been found"
INVALID_DATE = "invalid date"
INVALID_TELEPHONE = "Telephone must be a 10-digit number"
TOO_LONG = "must be at most {limit} characters"

TELEPHONE_PATTERN = re.compile(r"[0-9]{10}")


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


Validator = Callable[[FormModel], Iterable[FieldViolation]]


def validate(form: FormModel, validators: Sequence[Validator]) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for validator in validators:
        for violation in validator(form):
            errors.setdefault(violation.field, []).append(violation.message)
    return errors


def parse_date(value: str | None) -> date | None:
    # ISO calendar dates only; anything else is treated as unparsable.
    if not value or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def not_blank(attr: str, message: str = MUST_NOT_BE_BLANK) -> Validator:
    def check(form: FormModel) -> list[FieldViolation]:
        if _is_blank(getattr(form, attr)):
            return [FieldViolation(form.field_name(attr), message)]
        return []

    return check


def telephone(attr: str = "telephone") -> Validator:
    # Blank values are reported by not_blank; only check the format here.
    def check(form: FormModel) -> list[FieldViolation]:
        value = getattr(form, attr)
        if _is_blank(value) or TELEPHONE_PATTERN.fullmatch(value):
            return []
        return [FieldViolation(form.field_name(attr), INVALID_TELEPHONE)]

    return check


def max_length(attr: str, limit: int) -> Validator:
    def check(form: FormModel) -> list[FieldViolation]:
        value = getattr(form, attr)
        if value is not None and len(value) > limit:
            return [FieldViolation(form.field_name(attr), TOO_LONG.format(limit=limit))]
        return []

    return check


def column_length(model, column: str) -> int:
    return model.__table__.c[column].type.length


def valid_date(attr: str, required: bool, allow_future: bool, today: date | None = None) -> Validator:
    def check(form: FormModel) -> list[FieldViolation]:
        raw = getattr(form, attr)
        field = form.field_name(attr)
        if _is_blank(raw):
            return [FieldViolation(field, REQUIRED)] if required else []
        parsed = parse_date(raw)
        if parsed is None:
            return [FieldViolation(field, INVALID_DATE)]
        if not allow_future and parsed > (today or date.today()):
            return [FieldViolation(field, INVALID_DATE)]
        return []

    return check


def unique_pet_name(owner: Owner, pet_id: int | None = None) -> Validator:
    def check(form: FormModel) -> list[FieldViolation]:
        name = getattr(form, "name")
        if _is_blank(name):
            return []
        if owner.get_pet(name, exclude_id=pet_id) is not None:
            return [FieldViolation(form.field_name("name"), DUPLICATE)]
        return []

    return check


def known_pet_type(type_names: Iterable[str]) -> Validator:
    names = set(type_names)

    def check(form: FormModel) -> list[FieldViolation]:
        value = getattr(form, "type")
        if _is_blank(value):
            return [FieldViolation(form.field_name("type"), REQUIRED)]
        if value not in names:
            return [FieldViolation(form.field_name("type"), NOT_FOUND)]
        return []

    return check


OWNER_VALIDATORS: list[Validator] = [
    not_blank("first_name"),
    not_blank("last_name"),
    not_blank("address"),
    not_blank("city"),
    not_blank("telephone"),
    telephone(),
    max_length("first_name", column_length(Owner, "first_name")),
    max_length("last_name", column_length(Owner, "last_name")),
    max_length("address", column_length(Owner, "address")),
    max_length("city", column_length(Owner, "city")),
]


def pet_validators(
    owner: Owner,
    type_names: Iterable[str],
    pet_id: int | None = None,
    today: date | None = None,
) -> list[Validator]:
    return [
        not_blank("name", REQUIRED),
        unique_pet_name(owner, pet_id),
        max_length("name", column_length(Pet, "name")),
        valid_date("birth_date", required=True, allow_future=False, today=today),
        known_pet_type(type_names),
    ]


# Visit dates may lie in the future; a blank date means today.
VISIT_VALIDATORS: list[Validator] = [
    valid_date("date", required=False, allow_future=True),
    not_blank("description"),
    max_length("description", column_length(Visit, "description")),
]
