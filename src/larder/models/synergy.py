"""Synergy recommendation models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from larder.models.recipe import Recipe


class SynergyRecommendation(BaseModel):
    """Non-planned recipe that reuses core ingredients already on the shopping list."""

    recipe: Recipe
    matched_ingredient_names: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def match_count(self) -> int:
        return len(self.matched_ingredient_names)


__all__ = ["SynergyRecommendation"]
