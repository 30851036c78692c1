"""
Database Connection and Session Management for the server.

Re-exports the shared engine, session dependency and table setup so routers
and the application lifespan depend on a single server-side module.
"""

from ucsb_api.core.database import (  # noqa: F401
    async_session_maker,
    dispose_engine,
    engine,
    get_session,
    init_db,
)
