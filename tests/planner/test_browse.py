"""Addable recipe filtering and recommendation ordering tests."""

from __future__ import annotations

import pytest

from larder.models.plan import PlanSet
from larder.models.synergy import SynergyRecommendation
from larder.planner.browse import (
    filter_addable_recipes,
    ingredient_options,
    sort_recommendations,
)
from tests.factories import make_line, make_recipe


@pytest.fixture()
def catalog():
    return [
        make_recipe(1, make_line("tomato", 2), title="Tomato Pasta", cook_minutes=25, servings=2, heat=1),
        make_recipe(2, make_line("chilli", 1), title="Chilli Con Carne", cook_minutes=60, servings=4, heat=3),
        make_recipe(3, make_line("tomato", 1), title="Bruschetta", cook_minutes=10, servings=2),
        make_recipe(4, make_line("oats", 50), title="Apple Crumble", servings=6, heat=0),
    ]


def _ids(recipes):
    return [recipe.id for recipe in recipes]


def test_planned_recipes_are_excluded_and_titles_sorted(catalog):
    result = filter_addable_recipes(catalog, PlanSet.of([1]))

    assert _ids(result) == [4, 3, 2]


def test_ingredient_filter_keeps_recipes_using_any_selected(catalog):
    result = filter_addable_recipes(catalog, PlanSet(), ingredient_names=["tomato", "oats"])

    assert _ids(result) == [4, 3, 1]


def test_servings_filter_is_exact(catalog):
    result = filter_addable_recipes(catalog, PlanSet(), servings=2)

    assert _ids(result) == [3, 1]


def test_cook_time_sort_places_missing_values_last(catalog):
    result = filter_addable_recipes(catalog, PlanSet(), sort_by="cook-time")

    assert _ids(result) == [3, 1, 2, 4]


def test_heat_sort_descending_reverses_order(catalog):
    result = filter_addable_recipes(catalog, PlanSet(), sort_by="heat-level", direction="desc")

    assert _ids(result) == [3, 2, 1, 4]


def test_unknown_sort_option_is_rejected(catalog):
    with pytest.raises(ValueError):
        filter_addable_recipes(catalog, PlanSet(), sort_by="calories")


def test_ingredient_options_are_distinct_and_sorted(catalog):
    assert ingredient_options(catalog) == ["chilli", "oats", "tomato"]


def test_sort_recommendations_by_matches_then_title():
    recommendations = [
        SynergyRecommendation(recipe=make_recipe(1, title="Soup"), matched_ingredient_names=["leek"]),
        SynergyRecommendation(
            recipe=make_recipe(2, title="Stew"), matched_ingredient_names=["leek", "carrot"]
        ),
        SynergyRecommendation(recipe=make_recipe(3, title="Pie"), matched_ingredient_names=["carrot"]),
    ]

    by_matches = sort_recommendations(recommendations, by="matches")
    by_title = sort_recommendations(recommendations, by="title")

    assert [rec.recipe.title for rec in by_matches] == ["Stew", "Pie", "Soup"]
    assert [rec.recipe.title for rec in by_title] == ["Pie", "Soup", "Stew"]


def test_sort_recommendations_rejects_unknown_ordering():
    with pytest.raises(ValueError):
        sort_recommendations([], by="popularity")
