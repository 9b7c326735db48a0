"""Explicit schema migration step run at startup or deploy time."""

from __future__ import annotations

import logging

from sqlalchemy import select

from lms.domain.entities import DEFAULT_ROLES
from lms.infrastructure.database import Base, Database

logger = logging.getLogger(__name__)


def run_migrations(database: Database) -> None:
    """Create missing tables and make sure the built-in roles exist."""

    from lms.infrastructure import models  # noqa: F401  # register every table

    Base.metadata.create_all(bind=database.engine, checkfirst=True)
    seed_roles(database)


def seed_roles(database: Database) -> None:
    from lms.infrastructure.models import RoleModel

    with database.transaction() as session:
        existing = {alias for (alias,) in session.execute(select(RoleModel.alias))}
        for name, alias in DEFAULT_ROLES:
            if alias in existing:
                continue
            session.add(RoleModel(name=name, alias=alias))
            logger.info("Seeded role %s", alias)


__all__ = ["run_migrations", "seed_roles"]
