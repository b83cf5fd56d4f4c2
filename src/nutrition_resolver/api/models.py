"""Pydantic models for nutrition API requests."""

from pydantic import BaseModel, Field


class ResolveRequest(BaseModel):
    """Free-text food with an optional measurement."""

    food_name: str = Field(min_length=1, max_length=200)
    measurement: str = Field(default="", max_length=100)


class PortionRequest(BaseModel):
    """Food with an explicit weight in grams."""

    food_name: str = Field(min_length=1, max_length=200)
    grams: float = Field(ge=0, le=100_000)


class BatchRequest(BaseModel):
    """Several foods resolved together."""

    items: list[ResolveRequest] = Field(min_length=1, max_length=25)
