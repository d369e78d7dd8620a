"""Pydantic model for property inserts."""

from __future__ import annotations

from pydantic import BaseModel, Field

PROPERTY_INSERT_COLUMNS: tuple[str, ...] = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "country",
    "street",
    "city",
    "province",
    "post_code",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


class NewProperty(BaseModel):
    """Property listing as submitted by an owner. ``cost_per_night`` is in cents."""

    owner_id: int
    title: str
    description: str | None = None
    thumbnail_photo_url: str | None = None
    cover_photo_url: str | None = None
    cost_per_night: int = Field(ge=0)
    country: str
    street: str
    city: str
    province: str
    post_code: str
    parking_spaces: int = Field(default=0, ge=0)
    number_of_bathrooms: int = Field(default=0, ge=0)
    number_of_bedrooms: int = Field(default=0, ge=0)

    def insert_values(self) -> tuple[object, ...]:
        """Return column values in ``PROPERTY_INSERT_COLUMNS`` order."""
        return tuple(getattr(self, column) for column in PROPERTY_INSERT_COLUMNS)
