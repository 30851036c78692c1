"""
Common base for API I/O schemas.

The JSON contract uses camelCase field names while Python code uses
snake_case attributes; the alias generator bridges the two.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema base that reads from ORM objects and (de)serializes camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
