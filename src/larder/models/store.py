"""Raw row shapes returned by the recipe and plan stores."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from larder.models.plan import PlanSet
from larder.models.recipe import IngredientId, Quantity, RecipeId


class IngredientRow(BaseModel):
    """``ingredients`` table row embedded in a recipe ingredient line."""

    id: Optional[IngredientId] = Field(default=None)
    name: Optional[str] = Field(default=None)
    default_unit: Optional[str] = Field(default=None)
    is_synergy_core: Optional[bool] = Field(default=None)
    supermarket_section: Optional[str] = Field(default=None)

    model_config = ConfigDict(frozen=True)


class RecipeIngredientRow(BaseModel):
    """``recipe_ingredients`` join row with its nested ingredient, when resolved."""

    ingredient_id: Optional[IngredientId] = Field(default=None)
    quantity: Optional[Quantity] = Field(default=None)
    unit: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)
    ingredients: Optional[IngredientRow] = Field(default=None)

    model_config = ConfigDict(frozen=True)


class RecipeRow(BaseModel):
    """``recipes`` table row with nested ingredient lines."""

    id: RecipeId
    title: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    pre_minutes: Optional[int] = Field(default=None, ge=0)
    cook_minutes: Optional[int] = Field(default=None, ge=0)
    servings: Optional[int] = Field(default=None, ge=0)
    heat: Optional[int] = Field(default=None, ge=0)
    recipe_ingredients: list[RecipeIngredientRow] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class PlanSnapshot(BaseModel):
    """Consistent read of a household's plan membership and the recipe catalog."""

    plan: list[RecipeId] = Field(default_factory=list)
    recipes: list[RecipeRow] = Field(default_factory=list)
    checked: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def plan_set(self) -> PlanSet:
        return PlanSet.of(self.plan)


__all__ = ["IngredientRow", "PlanSnapshot", "RecipeIngredientRow", "RecipeRow"]
