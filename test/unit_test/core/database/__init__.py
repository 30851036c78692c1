"""Unit tests for the database layer.

This package contains tests for the entity tables and repositories in
ucsb_api/core/database, run against in-memory SQLite.
"""
