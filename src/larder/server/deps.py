"""Dependency definitions for the Larder API server."""

from __future__ import annotations

from typing import Callable, Collection, List, Optional

from fastapi import Depends, HTTPException, Request, status

from larder.config import get_settings
from larder.models.recipe import Recipe
from larder.models.shopping import ShoppingList
from larder.models.store import PlanSnapshot
from larder.models.synergy import SynergyRecommendation
from larder.planner import service

ShoppingListBuilder = Callable[[PlanSnapshot], ShoppingList]
ShoppingTextRenderer = Callable[[PlanSnapshot, Optional[str]], str]
SynergyRecommender = Callable[[PlanSnapshot, Optional[str]], List[SynergyRecommendation]]
SynergyTextRenderer = Callable[[PlanSnapshot, Optional[str]], str]
AddableRecipesProvider = Callable[
    [PlanSnapshot, Collection[str], Optional[int], str, str],
    List[Recipe],
]
IngredientOptionsProvider = Callable[[PlanSnapshot], List[str]]


def get_shopping_list_builder() -> ShoppingListBuilder:
    """Return the default shopping list builder implementation."""

    return service.build_shopping_list


def get_shopping_text_renderer() -> ShoppingTextRenderer:
    return lambda snapshot, supermarket: service.shopping_list_text(snapshot, supermarket=supermarket)


def get_synergy_recommender() -> SynergyRecommender:
    return lambda snapshot, sort_by: service.recommend_recipes(snapshot, sort_by=sort_by)


def get_synergy_text_renderer() -> SynergyTextRenderer:
    return lambda snapshot, sort_by: service.synergy_text(snapshot, sort_by=sort_by)


def get_addable_recipes_provider() -> AddableRecipesProvider:
    return lambda snapshot, ingredient_names, servings, sort_by, direction: service.addable_recipes(
        snapshot,
        ingredient_names=ingredient_names,
        servings=servings,
        sort_by=sort_by,
        direction=direction,
    )


def get_ingredient_options_provider() -> IngredientOptionsProvider:
    return service.addable_ingredient_options


def require_api_token(
    request: Request,
    settings = Depends(get_settings),
) -> None:
    """Ensure requests carry the configured API token when required."""

    token = settings.api_token
    if not token:
        return

    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.split("Bearer ")[-1].strip() == token:
        return

    if request.headers.get("X-API-Key") == token:
        return

    if request.query_params.get("api_token") == token:
        return

    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
