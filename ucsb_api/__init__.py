"""UCSB example CRUD API.

This package serves a small set of campus records (help requests, dining
commons menu items and their reviews, articles and student organizations)
over a JSON REST API backed by a relational database.

Core subpackages
----------------

- ``ucsb_api.core``:

  - Logging configuration and the shared error types.
  - SQLModel entities and one async repository per entity.
  - Pydantic I/O schemas that define the JSON contract (camelCase fields).

- ``ucsb_api.server``:

  - The FastAPI application, settings and lifespan.
  - Bearer-token authentication and ``ROLE_USER`` / ``ROLE_ADMIN`` checks.
  - One router per entity with list, get-by-id, create, update and delete.

Every router follows the same shape: check the caller's role, look the record
up (answering 404 when it is absent), then save or delete it through the
entity's repository.
"""
