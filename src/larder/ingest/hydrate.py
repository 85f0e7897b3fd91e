"""Turn raw recipe store rows into hydrated recipe models."""

from __future__ import annotations

import logging
from typing import Iterable, List

from larder.models.recipe import Ingredient, Recipe, RecipeIngredientLine
from larder.models.store import RecipeIngredientRow, RecipeRow

from larder.planner.sections import alphabetical_key

logger = logging.getLogger(__name__)


class HydrationError(ValueError):
    """A store row references an ingredient that was not resolved by the query."""

    def __init__(self, recipe_id: object, position: int):
        super().__init__(
            f"Recipe {recipe_id!r} ingredient line {position} has no resolved ingredient record"
        )
        self.recipe_id = recipe_id
        self.position = position


def hydrate_line(row: RecipeIngredientRow) -> RecipeIngredientLine:
    nested = row.ingredients
    if nested is None:
        ingredient = Ingredient(id=row.ingredient_id)
    else:
        ingredient = Ingredient(
            id=nested.id if nested.id is not None else row.ingredient_id,
            name=nested.name,
            default_unit=nested.default_unit,
            is_core=nested.is_synergy_core,
            supermarket_section=nested.supermarket_section,
        )
    return RecipeIngredientLine(
        ingredient=ingredient,
        quantity=row.quantity,
        unit=row.unit,
        notes=row.notes,
    )


def hydrate_recipe(row: RecipeRow, *, strict: bool = True) -> Recipe:
    """Build a :class:`Recipe` from a store row, sorting its lines by ingredient name.

    With ``strict`` set, a line whose nested ingredient record is missing raises
    :class:`HydrationError`; otherwise the line degrades to an unnamed, non-core ingredient.
    """

    lines: List[RecipeIngredientLine] = []
    for position, line_row in enumerate(row.recipe_ingredients):
        if line_row.ingredients is None:
            if strict:
                raise HydrationError(row.id, position)
            logger.warning(
                "Recipe %s line %s has no ingredient record; treating it as unnamed and non-core",
                row.id,
                position,
            )
        lines.append(hydrate_line(line_row))

    lines.sort(key=lambda line: alphabetical_key(line.ingredient_name))
    return Recipe(
        id=row.id,
        title=row.title,
        description=row.description,
        pre_minutes=row.pre_minutes,
        cook_minutes=row.cook_minutes,
        servings=row.servings,
        heat=row.heat,
        ingredients=lines,
    )


def hydrate_catalog(rows: Iterable[RecipeRow], *, strict: bool = True) -> List[Recipe]:
    return [hydrate_recipe(row, strict=strict) for row in rows]


__all__ = ["HydrationError", "hydrate_catalog", "hydrate_line", "hydrate_recipe"]
