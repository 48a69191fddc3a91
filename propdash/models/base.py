"""
Base models and utilities for Pydantic v2.
"""
from typing import Any, Dict

from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseModel(PydanticBaseModel):
    """Base model with common configuration and methods."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class RecordModel(BaseModel):
    """Immutable dashboard record.

    Source datasets use camelCase keys (``propertyName``, ``issueDate``);
    records accept either those aliases or the snake_case field names, and
    expose snake_case attributes to the list-view engine.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        extra="ignore",
        frozen=True,
        alias_generator=to_camel,
    )

    def to_row(self) -> Dict[str, Any]:
        """Flat snake_case mapping used for tabular display."""
        return self.model_dump()
