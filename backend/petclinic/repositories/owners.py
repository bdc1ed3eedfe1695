"""Module: owners."""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from petclinic.core.outcomes import Found, Lookup, NotFound
from petclinic.core.pagination import Page, page_window
from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet

logger = logging.getLogger(__name__)


def _last_name_prefix(prefix: str, case_sensitive: bool):
    # Compare the leading characters directly so LIKE wildcards in the filter stay literal.
    # Case-insensitive search uses the column folded in Python, not the database's lower().
    if case_sensitive:
        return func.substr(Owner.last_name, 1, len(prefix)) == prefix
    folded = prefix.casefold()
    return func.substr(Owner.last_name_folded, 1, len(folded)) == folded


class OwnerRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, owner_id: int) -> Lookup[Owner]:
        owner = self.db.execute(
            select(Owner)
            .where(Owner.id == owner_id)
            .options(selectinload(Owner.pets).selectinload(Pet.visits))
        ).scalar_one_or_none()
        if owner is None:
            logger.warning("Owner %s not found", owner_id)
            return NotFound("owner", owner_id)
        return Found(owner)

    def search_by_last_name(
        self,
        prefix: str,
        page_size: int,
        page: int,
        case_sensitive: bool = True,
    ) -> Page[Owner]:
        """
        Owners whose last name starts with ``prefix``, ordered by id.

        An empty prefix matches every owner.
        """
        count_stmt = select(func.count(Owner.id))
        stmt = select(Owner).options(selectinload(Owner.pets))
        if prefix:
            clause = _last_name_prefix(prefix, case_sensitive)
            count_stmt = count_stmt.where(clause)
            stmt = stmt.where(clause)

        total = self.db.execute(count_stmt).scalar_one()
        window = page_window(total, page_size, page)

        items: list[Owner] = []
        if window.limit:
            items = list(
                self.db.execute(
                    stmt.order_by(Owner.id).offset(window.offset).limit(window.limit)
                ).scalars()
            )
        return Page(
            items=items,
            current_page=window.current_page,
            total_pages=window.total_pages,
            total_items=window.total_items,
        )

    def save(self, owner: Owner) -> Owner:
        self.db.add(owner)
        self.db.commit()
        self.db.refresh(owner)
        return owner
