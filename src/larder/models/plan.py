"""Plan membership model."""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from larder.models.recipe import Recipe, RecipeId


class PlanSet(BaseModel):
    """Ordered set of planned recipe ids for a household.

    Order only matters for display; membership is what drives consolidation and
    synergy matching. The plan store owns mutation; the engine
    only reads a snapshot of it.
    """

    recipe_ids: tuple[RecipeId, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    @field_validator("recipe_ids", mode="after")
    @classmethod
    def _drop_duplicates(cls, value: tuple[RecipeId, ...]) -> tuple[RecipeId, ...]:
        return tuple(dict.fromkeys(value))

    @classmethod
    def of(cls, recipe_ids: Iterable[RecipeId]) -> "PlanSet":
        return cls(recipe_ids=tuple(recipe_ids))

    def __contains__(self, recipe_id: Any) -> bool:
        return recipe_id in self.recipe_ids

    def __len__(self) -> int:
        return len(self.recipe_ids)

    def select(self, catalog: Iterable[Recipe]) -> list[Recipe]:
        """Return the planned recipes from ``catalog`` in plan order, skipping unknown ids."""

        by_id = {recipe.id: recipe for recipe in catalog}
        return [by_id[recipe_id] for recipe_id in self.recipe_ids if recipe_id in by_id]


__all__ = ["PlanSet"]
