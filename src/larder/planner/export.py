"""Plain-text exports of the shopping list and synergy recipes, plus supermarket search links."""

from __future__ import annotations

from typing import Iterable, List, Optional
from urllib.parse import quote

from larder.models.recipe import Recipe, RecipeIngredientLine
from larder.models.shopping import ConsolidatedItem
from larder.models.synergy import SynergyRecommendation

from .formatting import format_line_quantity
from .sections import alphabetical_key

SUPERMARKET_SEARCH_URLS = {
    "Sainsburys": "https://www.sainsburys.co.uk/gol-ui/SearchResults/{query}",
    "Waitrose": "https://www.waitrose.com/ecom/shop/search?searchTerm={query}",
    "Ocado": "https://www.ocado.com/search?q={query}",
    "Asda": "https://groceries.asda.com/search/{query}",
    "Tesco": "https://www.tesco.com/groceries/en-GB/search?query={query}",
}

# Characters encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_supermarket_search_url(supermarket: Optional[str], ingredient_name: Optional[str]) -> str:
    """Search URL for ``ingredient_name`` at ``supermarket``; ``""`` when either is unusable."""

    query = quote((ingredient_name or "").strip(), safe=_URI_COMPONENT_SAFE)
    template = SUPERMARKET_SEARCH_URLS.get(supermarket or "")
    if not query or template is None:
        return ""
    return template.format(query=query)


def planned_recipe_titles(recipes: Iterable[Recipe]) -> List[str]:
    return sorted((recipe.title for recipe in recipes if recipe.title), key=alphabetical_key)


def render_item_line(item: ConsolidatedItem, supermarket: Optional[str] = None) -> str:
    line = f"- {item.display_text}"
    if item.freeform_notes:
        line += f" ({item.notes_text})"
    if supermarket and (url := build_supermarket_search_url(supermarket, item.name)):
        line += f" <{url}>"
    return line


def render_shopping_text(
    items: Iterable[ConsolidatedItem],
    recipe_titles: Iterable[str] = (),
    supermarket: Optional[str] = None,
) -> str:
    """Text suitable for pasting into a message: recipe header, then one line per item.

    Returns an empty string when there is nothing left to buy.
    """

    lines = [render_item_line(item, supermarket) for item in items]
    if not lines:
        return ""
    titles = list(recipe_titles)
    header = [f"Recipes: {', '.join(titles)}", ""] if titles else []
    return "\n".join(header + lines)


def render_recipe_line(line: RecipeIngredientLine) -> str:
    """One recipe ingredient as listed on a recipe card: ``"200 g flour (sifted)"``."""

    label = format_line_quantity(line.quantity, line.unit, line.ingredient.default_unit)
    text = " ".join(part for part in (label, line.ingredient_name) if part)
    if line.notes:
        text += f" ({line.notes})"
    return text


def render_synergy_text(recommendations: Iterable[SynergyRecommendation]) -> str:
    """Recipe cards for recommendations, each headed by the ingredients it shares with the plan."""

    blocks = []
    for recommendation in recommendations:
        shared = ", ".join(recommendation.matched_ingredient_names)
        lines = [f"{recommendation.recipe.title} (shares {shared})"]
        lines.extend(f"  - {render_recipe_line(line)}" for line in recommendation.recipe.ingredients)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


__all__ = [
    "SUPERMARKET_SEARCH_URLS",
    "build_supermarket_search_url",
    "planned_recipe_titles",
    "render_item_line",
    "render_recipe_line",
    "render_shopping_text",
    "render_synergy_text",
]
