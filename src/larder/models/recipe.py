"""Hydrated recipe and ingredient models."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

RecipeId = Union[int, str]
IngredientId = Union[int, str]
Quantity = Union[int, float, str]

UNNAMED_INGREDIENT = "Unnamed ingredient"
UNTITLED_RECIPE = "Untitled recipe"


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class Ingredient(BaseModel):
    """Catalog-level ingredient shared by every recipe that uses it."""

    id: Optional[IngredientId] = Field(default=None)
    name: str = Field(default=UNNAMED_INGREDIENT)
    default_unit: Optional[str] = Field(default=None)
    is_core: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_core", "is_synergy_core"),
    )
    supermarket_section: Optional[str] = Field(default=None)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("name", mode="before")
    @classmethod
    def _fallback_name(cls, value: Any) -> Any:
        return UNNAMED_INGREDIENT if _blank(value) else value

    @field_validator("is_core", mode="before")
    @classmethod
    def _missing_flag_is_not_core(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("supermarket_section", mode="before")
    @classmethod
    def _normalize_section(cls, value: Any) -> Any:
        if _blank(value):
            return None
        return value.strip() if isinstance(value, str) else value


class RecipeIngredientLine(BaseModel):
    """A recipe's use of one ingredient: how much, in which unit, with which notes."""

    ingredient: Ingredient = Field(default_factory=Ingredient)
    quantity: Optional[Quantity] = Field(default=None)
    unit: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)

    model_config = ConfigDict(frozen=True)

    @property
    def ingredient_id(self) -> Optional[IngredientId]:
        return self.ingredient.id

    @property
    def ingredient_name(self) -> str:
        return self.ingredient.name

    @property
    def resolved_unit(self) -> str:
        """Line unit, falling back to the ingredient's default unit, then ``""``."""
        return self.unit or self.ingredient.default_unit or ""

    @property
    def is_core(self) -> bool:
        return self.ingredient.is_core

    @property
    def supermarket_section(self) -> Optional[str]:
        return self.ingredient.supermarket_section


class Recipe(BaseModel):
    """Recipe with its hydrated ingredient lines."""

    id: RecipeId
    title: str = Field(default=UNTITLED_RECIPE)
    description: Optional[str] = Field(default=None)
    pre_minutes: Optional[int] = Field(default=None, ge=0)
    cook_minutes: Optional[int] = Field(default=None, ge=0)
    servings: Optional[int] = Field(default=None, ge=0)
    heat: Optional[int] = Field(default=None, ge=0)
    ingredients: list[RecipeIngredientLine] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("title", mode="before")
    @classmethod
    def _fallback_title(cls, value: Any) -> Any:
        return UNTITLED_RECIPE if _blank(value) else value


__all__ = [
    "Ingredient",
    "IngredientId",
    "Quantity",
    "Recipe",
    "RecipeId",
    "RecipeIngredientLine",
    "UNNAMED_INGREDIENT",
    "UNTITLED_RECIPE",
]
