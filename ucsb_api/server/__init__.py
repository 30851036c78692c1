"""
UCSB Example API Server Package.

This package contains the web server implementation. It includes the API
definition, configuration, authentication and error handling.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration, constants and database connections.
    exception_handlers: Mapping of application errors to HTTP responses.
    middleware: Request logging.
    services: Dependencies for authentication and repository injection.
"""
