"""Recommend catalog recipes that reuse the plan's perishable ingredients."""

from __future__ import annotations

from typing import Iterable, List, Set

from larder.models.recipe import IngredientId, Recipe, RecipeId
from larder.models.synergy import SynergyRecommendation


def core_ingredient_ids(recipes: Iterable[Recipe]) -> Set[IngredientId]:
    """Ids of every core ingredient used anywhere in ``recipes``."""

    return {
        line.ingredient_id
        for recipe in recipes
        for line in recipe.ingredients
        if line.is_core and line.ingredient_id is not None
    }


def shared_core_names(recipe: Recipe, core_ids: Set[IngredientId]) -> List[str]:
    """Names of ``recipe``'s core ingredients found in ``core_ids``, first-seen order."""

    matches: dict[str, None] = {}
    for line in recipe.ingredients:
        if line.is_core and line.ingredient_id in core_ids:
            matches.setdefault(line.ingredient_name, None)
    return list(matches)


def find_synergy_recipes(
    planned: Iterable[Recipe],
    catalog: Iterable[Recipe],
) -> List[SynergyRecommendation]:
    """Return catalog recipes outside the plan that share at least one core ingredient with it.

    Results follow catalog order and carry no ranking. Planned recipes are never
    recommended, so adding a recommendation to the plan removes it on the next call.
    """

    planned = list(planned)
    planned_ids: Set[RecipeId] = {recipe.id for recipe in planned}
    core_ids = core_ingredient_ids(planned)
    if not core_ids:
        return []

    recommendations: List[SynergyRecommendation] = []
    for recipe in catalog:
        if recipe.id in planned_ids:
            continue
        matches = shared_core_names(recipe, core_ids)
        if matches:
            recommendations.append(
                SynergyRecommendation(recipe=recipe, matched_ingredient_names=matches)
            )
    return recommendations


__all__ = ["core_ingredient_ids", "find_synergy_recipes", "shared_core_names"]
