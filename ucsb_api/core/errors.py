"""
Error types shared by the API layers.

The exception class name is part of the HTTP contract: the not-found handler
reports it verbatim in the ``type`` field of the error body.
"""

from __future__ import annotations

from typing import Any


class EntityNotFoundException(Exception):
    """Raised when a record looked up by primary key does not exist."""

    def __init__(self, entity_type: type | str, entity_id: Any) -> None:
        self.entity_name = entity_type if isinstance(entity_type, str) else entity_type.__name__
        self.entity_id = entity_id
        super().__init__(f"{self.entity_name} with id {entity_id} not found")

    @property
    def message(self) -> str:
        return str(self)
