"""
Database layer for the UCSB example API.

Structure:
- entities/: SQLModel table definitions, one module per record type
- repositories/: Data access layer, one repository per entity
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session, table creation)
"""

from .base import Base
from .session import (
    async_session_maker,
    dispose_engine,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    normalize_database_url,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "dispose_engine",
    "engine",
    "get_session",
    "init_db",
    "normalize_database_url",
]
