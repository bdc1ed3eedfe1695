"""Module: visits."""

from sqlalchemy.orm import Session

from petclinic.db.models.visit import Visit


class VisitRepository:
    def __init__(self, db: Session):
        self.db = db

    def save(self, visit: Visit) -> Visit:
        self.db.add(visit)
        self.db.commit()
        self.db.refresh(visit)
        return visit
