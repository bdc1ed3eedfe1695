"""Alembic environment for the pet clinic schema."""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool

import petclinic.db.models  # noqa: F401  (registers the tables)
from petclinic.core.config import settings
from petclinic.db.base import Base
from petclinic.db.session import make_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)


# Migrations target the same database as the app (DATABASE_URL / .env).
def run_migrations() -> None:
    connectable = make_engine(settings.database_url, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=Base.metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


run_migrations()
