"""Pydantic models defining shared data contracts."""

from larder.models.plan import PlanSet
from larder.models.recipe import (
    Ingredient,
    Recipe,
    RecipeIngredientLine,
)
from larder.models.shopping import (
    ConsolidatedItem,
    RecipeSummary,
    SectionGroup,
    ShoppingList,
)
from larder.models.store import (
    IngredientRow,
    PlanSnapshot,
    RecipeIngredientRow,
    RecipeRow,
)
from larder.models.synergy import SynergyRecommendation

__all__ = [
    "PlanSet",
    "Ingredient",
    "Recipe",
    "RecipeIngredientLine",
    "ConsolidatedItem",
    "RecipeSummary",
    "SectionGroup",
    "ShoppingList",
    "IngredientRow",
    "PlanSnapshot",
    "RecipeIngredientRow",
    "RecipeRow",
    "SynergyRecommendation",
]
