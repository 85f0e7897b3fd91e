"""Filtering and ordering of recipes that can still be added to the plan."""

from __future__ import annotations

import math
from typing import Callable, Collection, Dict, Iterable, List, Optional

from larder.models.plan import PlanSet
from larder.models.recipe import Recipe
from larder.models.synergy import SynergyRecommendation

from .sections import alphabetical_key

SORT_ALPHABETICAL = "alphabetical"
SORT_COOK_TIME = "cook-time"
SORT_HEAT_LEVEL = "heat-level"

_SORT_METRICS: Dict[str, Callable[[Recipe], Optional[int]]] = {
    SORT_ALPHABETICAL: lambda recipe: None,
    SORT_COOK_TIME: lambda recipe: recipe.cook_minutes,
    SORT_HEAT_LEVEL: lambda recipe: recipe.heat,
}
SORT_OPTIONS = tuple(_SORT_METRICS)


def ingredient_options(recipes: Iterable[Recipe]) -> List[str]:
    """Distinct non-blank ingredient names across ``recipes``, for filter pickers."""

    names = {
        line.ingredient_name.strip()
        for recipe in recipes
        for line in recipe.ingredients
        if line.ingredient_name.strip()
    }
    return sorted(names, key=alphabetical_key)


def filter_addable_recipes(
    catalog: Iterable[Recipe],
    plan: PlanSet,
    ingredient_names: Collection[str] = (),
    servings: Optional[int] = None,
    sort_by: str = SORT_ALPHABETICAL,
    direction: str = "asc",
) -> List[Recipe]:
    """Catalog recipes not yet planned, filtered and ordered for the "add another" picker.

    Recipes match the ingredient filter when they use any of the selected names. Missing
    cook times or heat levels sort last; ties fall back to the title.
    """

    if sort_by not in _SORT_METRICS:
        raise ValueError(f"Unknown sort option '{sort_by}'; expected one of {', '.join(SORT_OPTIONS)}")

    selected = set(ingredient_names)
    addable = [recipe for recipe in catalog if recipe.id not in plan]
    if selected:
        addable = [
            recipe
            for recipe in addable
            if any(line.ingredient_name in selected for line in recipe.ingredients)
        ]
    if servings is not None:
        addable = [recipe for recipe in addable if recipe.servings == servings]

    metric = _SORT_METRICS[sort_by]

    def _key(recipe: Recipe):
        value = metric(recipe)
        return (math.inf if value is None else value, alphabetical_key(recipe.title))

    ordered = sorted(addable, key=_key)
    if direction == "desc":
        ordered.reverse()
    return ordered


def sort_recommendations(
    recommendations: Iterable[SynergyRecommendation],
    by: str = "title",
) -> List[SynergyRecommendation]:
    """Order recommendations by recipe title, or by match count (most first) then title."""

    if by == "title":
        return sorted(recommendations, key=lambda rec: alphabetical_key(rec.recipe.title))
    if by == "matches":
        return sorted(
            recommendations,
            key=lambda rec: (-rec.match_count, alphabetical_key(rec.recipe.title)),
        )
    raise ValueError(f"Unknown recommendation ordering '{by}'; expected 'title' or 'matches'")


__all__ = [
    "SORT_ALPHABETICAL",
    "SORT_COOK_TIME",
    "SORT_HEAT_LEVEL",
    "SORT_OPTIONS",
    "filter_addable_recipes",
    "ingredient_options",
    "sort_recommendations",
]
