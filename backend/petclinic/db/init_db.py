"""Module: init_db."""

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from petclinic.db.base import Base

# IMPORTANT: import models so they register with Base.metadata
import petclinic.db.models  # noqa: F401
from petclinic.scripts.seed_data import seed_reference_data

logger = logging.getLogger(__name__)


def init_db(bind: Engine, seed: bool = True) -> None:
    Base.metadata.create_all(bind=bind)
    if not seed:
        return
    with Session(bind) as session:
        if seed_reference_data(session):
            logger.info("Loaded reference dataset")
