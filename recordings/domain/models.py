"""
Domain models for the recordings client.

Defines the album schema aligned with `db/init.sql`. The model is used for row
decoding, validation, and type hints across the repository and the CLI.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class Album(BaseModel):
    """
    Representation of a single row in the `album` table.

    `id` stays unset until the database assigns it on insert.
    """

    id: Optional[int] = Field(None, description="Primary key (SERIAL), set by the database.")
    title: str = Field(..., description="Album title.")
    artist: str = Field(..., description="Performing artist.")
    price: Decimal = Field(
        ..., description="Price, NUMERIC(5,2).", max_digits=5, decimal_places=2
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def with_id(self, album_id: int) -> "Album":
        """Return a copy carrying the database-assigned id."""
        return self.model_copy(update={"id": album_id})


__all__ = ["Album"]
