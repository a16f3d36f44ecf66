"""Models for food identification results."""

from pydantic import BaseModel, Field


class FoodIdentification(BaseModel):
    """Structured output for photo-based food identification."""

    food: str = Field(min_length=1)
