"""Module: vets."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from petclinic.core.pagination import Page, page_window
from petclinic.db.models.vet import Vet


class VetRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[Vet]:
        return list(self.db.execute(select(Vet).order_by(Vet.id)).scalars())

    def find_page(self, page_size: int, page: int) -> Page[Vet]:
        total = self.db.execute(select(func.count(Vet.id))).scalar_one()
        window = page_window(total, page_size, page)
        items: list[Vet] = []
        if window.limit:
            items = list(
                self.db.execute(
                    select(Vet).order_by(Vet.id).offset(window.offset).limit(window.limit)
                ).scalars()
            )
        return Page(
            items=items,
            current_page=window.current_page,
            total_pages=window.total_pages,
            total_items=window.total_items,
        )
