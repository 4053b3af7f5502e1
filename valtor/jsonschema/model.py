"""JSON Schema document model.

The parsed form of a JSON Schema node, covering the keywords the adapter
understands. Unknown keywords are ignored. Numeric bounds are kept raw
(number or numeric string) so an unreadable bound surfaces as a build
error in the adapter rather than a document parse error.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class JSONSchema(BaseModel):
    """One node of a JSON Schema document."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    type: str = ""

    # string
    min_length: int | None = Field(default=None, alias="minLength", ge=0)
    max_length: int | None = Field(default=None, alias="maxLength", ge=0)
    pattern: str = ""

    # integer / number
    minimum: int | float | str | None = None
    maximum: int | float | str | None = None

    # array
    items: JSONSchema | None = None
    min_items: int | None = Field(default=None, alias="minItems", ge=0)
    max_items: int | None = Field(default=None, alias="maxItems", ge=0)
    unique_items: bool = Field(default=False, alias="uniqueItems")

    # object
    properties: dict[str, JSONSchema | None] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)

    @classmethod
    def from_json(cls, text: str | bytes) -> JSONSchema:
        """Parse a JSON Schema document."""
        return cls.model_validate_json(text)


JSONSchema.model_rebuild()
