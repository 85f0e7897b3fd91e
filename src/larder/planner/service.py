"""Entry points that run the planner over a store snapshot."""

from __future__ import annotations

import logging
from typing import Collection, List, Optional, Tuple

from larder import metrics
from larder.config import Settings, get_settings
from larder.ingest.hydrate import hydrate_catalog
from larder.models.recipe import Recipe
from larder.models.shopping import RecipeSummary, ShoppingList
from larder.models.store import PlanSnapshot
from larder.models.synergy import SynergyRecommendation

from .browse import (
    SORT_ALPHABETICAL,
    filter_addable_recipes,
    ingredient_options,
    sort_recommendations,
)
from .consolidator import consolidate
from .export import planned_recipe_titles, render_shopping_text, render_synergy_text
from .sections import alphabetical_key, group_items_by_section, partition_checked
from .synergy import find_synergy_recipes

logger = logging.getLogger(__name__)


def _hydrate(snapshot: PlanSnapshot, settings: Settings) -> Tuple[List[Recipe], List[Recipe]]:
    catalog = hydrate_catalog(snapshot.recipes, strict=settings.strict_hydration)
    planned = snapshot.plan_set.select(catalog)
    if len(planned) != len(snapshot.plan_set):
        logger.warning(
            "Plan references %s recipe(s) missing from the catalog",
            len(snapshot.plan_set) - len(planned),
        )
    return catalog, planned


def build_shopping_list(snapshot: PlanSnapshot, settings: Optional[Settings] = None) -> ShoppingList:
    """Consolidate the planned recipes and group the result for display."""

    settings = settings or get_settings()
    _, planned = _hydrate(snapshot, settings)

    items = consolidate(planned)
    unchecked, checked = partition_checked(items, snapshot.checked)
    shopping_list = ShoppingList(
        recipes=sorted(
            (RecipeSummary(id=recipe.id, title=recipe.title) for recipe in planned),
            key=lambda summary: alphabetical_key(summary.title),
        ),
        items=items,
        sections=group_items_by_section(unchecked, settings.section_order),
        checked_sections=group_items_by_section(checked, settings.section_order),
    )

    metrics.CONSOLIDATED_ITEMS.observe(len(items))
    logger.info(
        "Consolidated %s planned recipe(s) into %s item(s) (%s checked)",
        len(planned),
        len(items),
        len(checked),
        extra={"plan_size": len(planned), "item_count": len(items)},
    )
    return shopping_list


def shopping_list_text(
    snapshot: PlanSnapshot,
    supermarket: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Plain-text export of the items that are still unchecked."""

    settings = settings or get_settings()
    _, planned = _hydrate(snapshot, settings)
    unchecked, _ = partition_checked(consolidate(planned), snapshot.checked)
    return render_shopping_text(
        unchecked,
        planned_recipe_titles(planned),
        supermarket=supermarket or settings.default_supermarket,
    )


def recommend_recipes(
    snapshot: PlanSnapshot,
    sort_by: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> List[SynergyRecommendation]:
    """Synergy recommendations for the plan, optionally ordered by title or match count."""

    settings = settings or get_settings()
    catalog, planned = _hydrate(snapshot, settings)

    recommendations = find_synergy_recipes(planned, catalog)
    if sort_by:
        recommendations = sort_recommendations(recommendations, by=sort_by)

    metrics.SYNERGY_RECOMMENDATIONS.inc(len(recommendations))
    logger.info(
        "Found %s synergy recipe(s) for %s planned recipe(s)",
        len(recommendations),
        len(planned),
        extra={
            "plan_size": len(planned),
            "catalog_size": len(catalog),
            "recommendation_count": len(recommendations),
        },
    )
    for recommendation in recommendations:
        logger.debug(
            "Synergy recipe %s shares %s",
            recommendation.recipe.title,
            ", ".join(recommendation.matched_ingredient_names),
        )
    return recommendations


def addable_recipes(
    snapshot: PlanSnapshot,
    ingredient_names: Collection[str] = (),
    servings: Optional[int] = None,
    sort_by: str = SORT_ALPHABETICAL,
    direction: str = "asc",
    settings: Optional[Settings] = None,
) -> List[Recipe]:
    settings = settings or get_settings()
    catalog, _ = _hydrate(snapshot, settings)
    return filter_addable_recipes(
        catalog,
        snapshot.plan_set,
        ingredient_names=ingredient_names,
        servings=servings,
        sort_by=sort_by,
        direction=direction,
    )


def addable_ingredient_options(snapshot: PlanSnapshot, settings: Optional[Settings] = None) -> List[str]:
    """Ingredient names to offer as filters for the recipes that can still be added."""

    settings = settings or get_settings()
    catalog, _ = _hydrate(snapshot, settings)
    return ingredient_options(filter_addable_recipes(catalog, snapshot.plan_set))


def synergy_text(
    snapshot: PlanSnapshot,
    sort_by: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> str:
    return render_synergy_text(recommend_recipes(snapshot, sort_by=sort_by, settings=settings))


__all__ = [
    "addable_ingredient_options",
    "addable_recipes",
    "build_shopping_list",
    "recommend_recipes",
    "shopping_list_text",
    "synergy_text",
]
