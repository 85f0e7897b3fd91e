"""Planner service tests over a full store snapshot."""

from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from larder.config import Settings
from larder.ingest import HydrationError
from larder.models.store import PlanSnapshot
from larder.planner import service


def _sample(name: str) -> float:
    return REGISTRY.get_sample_value(name) or 0.0


def test_build_shopping_list_consolidates_planned_recipes(sample_snapshot):
    shopping_list = service.build_shopping_list(sample_snapshot)

    displays = {item.display_text for item in shopping_list.items}
    assert displays == {"a handful basil", "500 g flour", "a pinch salt", "5 tomato"}
    assert [summary.title for summary in shopping_list.recipes] == ["Pizza Night", "Tomato Pasta"]
    assert [group.section for group in shopping_list.sections] == [
        "Fruit & Vegtables",
        "Cupboard",
        "Unclassified",
    ]
    assert [item.name for item in shopping_list.sections[0].items] == ["basil", "tomato"]
    assert shopping_list.checked_sections == []

    salt = next(item for item in shopping_list.items if item.name == "salt")
    assert salt.freeform_notes == ["flaky"]


def test_build_shopping_list_moves_checked_items(sample_snapshot_payload):
    sample_snapshot_payload["checked"] = ["flour|||g"]
    snapshot = PlanSnapshot.model_validate(sample_snapshot_payload)

    shopping_list = service.build_shopping_list(snapshot)

    assert [group.section for group in shopping_list.checked_sections] == ["Cupboard"]
    assert all(
        item.name != "flour" for group in shopping_list.sections for item in group.items
    )


def test_build_shopping_list_uses_configured_section_order(sample_snapshot):
    settings = Settings(section_order=("Cupboard", "Fruit & Vegtables"))

    shopping_list = service.build_shopping_list(sample_snapshot, settings=settings)

    assert [group.section for group in shopping_list.sections][:2] == ["Cupboard", "Fruit & Vegtables"]


def test_build_shopping_list_records_metric(sample_snapshot):
    before = _sample("larder_consolidated_items_count")

    service.build_shopping_list(sample_snapshot)

    assert _sample("larder_consolidated_items_count") == before + 1


def test_recommend_recipes_returns_catalog_order(sample_snapshot):
    before = _sample("larder_synergy_recommendations_total")

    recommendations = service.recommend_recipes(sample_snapshot)

    assert [rec.recipe.title for rec in recommendations] == ["Caprese Toast", "Tomato Soup"]
    assert recommendations[0].matched_ingredient_names == ["basil", "tomato"]
    assert recommendations[1].matched_ingredient_names == ["tomato"]
    assert _sample("larder_synergy_recommendations_total") == before + 2


def test_recommend_recipes_sorted_by_matches(sample_snapshot):
    recommendations = service.recommend_recipes(sample_snapshot, sort_by="matches")

    assert [rec.match_count for rec in recommendations] == [2, 1]


def test_shopping_list_text_skips_checked_items(sample_snapshot_payload):
    sample_snapshot_payload["checked"] = ["salt|||", "basil|||"]
    snapshot = PlanSnapshot.model_validate(sample_snapshot_payload)

    text = service.shopping_list_text(snapshot)

    assert text.splitlines() == [
        "Recipes: Pizza Night, Tomato Pasta",
        "",
        "- 500 g flour",
        "- 5 tomato",
    ]


def test_shopping_list_text_uses_default_supermarket(sample_snapshot):
    settings = Settings(default_supermarket="Ocado")

    text = service.shopping_list_text(sample_snapshot, settings=settings)

    assert "- 500 g flour <https://www.ocado.com/search?q=flour>" in text.splitlines()


def test_addable_recipes_excludes_plan(sample_snapshot):
    recipes = service.addable_recipes(sample_snapshot, sort_by="cook-time")

    assert [recipe.title for recipe in recipes] == ["Caprese Toast", "Tomato Soup", "Cream Tea"]


def test_strict_hydration_rejects_unresolved_lines(sample_snapshot_payload):
    sample_snapshot_payload["recipes"][0]["recipe_ingredients"][0]["ingredients"] = None
    snapshot = PlanSnapshot.model_validate(sample_snapshot_payload)

    with pytest.raises(HydrationError):
        service.build_shopping_list(snapshot)

    lenient = service.build_shopping_list(snapshot, settings=Settings(strict_hydration=False))
    assert any(item.name == "Unnamed ingredient" for item in lenient.items)


def test_unknown_plan_ids_are_ignored(sample_snapshot_payload):
    sample_snapshot_payload["plan"] = [2, 999]
    snapshot = PlanSnapshot.model_validate(sample_snapshot_payload)

    shopping_list = service.build_shopping_list(snapshot)

    assert [summary.id for summary in shopping_list.recipes] == [2]


def test_addable_ingredient_options_cover_unplanned_recipes(sample_snapshot):
    assert service.addable_ingredient_options(sample_snapshot) == [
        "basil",
        "double cream",
        "sourdough",
        "tomato",
    ]


def test_synergy_text_renders_recipe_cards(sample_snapshot):
    text = service.synergy_text(sample_snapshot, sort_by="matches")

    assert text.splitlines() == [
        "Caprese Toast (shares basil, tomato)",
        "  - basil",
        "  - 1 loaf sourdough",
        "  - 1 tomato",
        "",
        "Tomato Soup (shares tomato)",
        "  - 100 ml double cream",
        "  - 4 tomato",
    ]
