"""
models/resource.py - Pydantic model for a catalog resource record.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from helpshelf_shared.constants import Category, Level, PriceType, SupportNeed


class Resource(BaseModel):
    """One curated support resource, as written to the resources file."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    title: str
    url: str
    description: str = ""
    why_it_helps: str = ""
    category: Category = "tool"
    support_needs: tuple[SupportNeed, ...] = ()
    sensory_load: Level = "low"
    setup_effort: Level = "low"
    price_type: PriceType = "freemium"
    featured: bool = False
    affiliate_url: str | None = None
    is_affiliate: bool = False
    domain: str = "unknown"

    @field_validator("support_needs", mode="after")
    @classmethod
    def dedupe_support_needs(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(v))

    @classmethod
    def from_record(cls, row: dict[str, Any]) -> "Resource":
        return cls(**row)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
