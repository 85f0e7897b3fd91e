"""Shopping list models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from larder.models.recipe import RecipeId

UNCLASSIFIED_SECTION = "Unclassified"
ITEM_KEY_SEPARATOR = "|||"


def item_key(name: str, unit: str) -> str:
    """Render a merge key the way checked-item state is keyed by the presentation layer."""
    return f"{name}{ITEM_KEY_SEPARATOR}{unit}"


class ConsolidatedItem(BaseModel):
    """One merged shopping list line covering every use of an ingredient in the plan."""

    name: str
    unit: str = Field(default="")
    numeric_total: float = Field(default=0.0)
    has_numeric: bool = Field(default=False)
    non_numeric_quantity_notes: list[str] = Field(default_factory=list)
    freeform_notes: list[str] = Field(default_factory=list)
    section: str = Field(default=UNCLASSIFIED_SECTION)
    display_text: str

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> str:
        return item_key(self.name, self.unit)

    @property
    def notes_text(self) -> str:
        return "; ".join(self.freeform_notes)


class SectionGroup(BaseModel):
    """Shopping list items that share a supermarket section."""

    section: str
    items: list[ConsolidatedItem] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class RecipeSummary(BaseModel):
    """Planned recipe reference shown above the shopping list."""

    id: RecipeId
    title: str

    model_config = ConfigDict(frozen=True)


class ShoppingList(BaseModel):
    """Consolidated shopping list for the current plan."""

    recipes: list[RecipeSummary] = Field(default_factory=list)
    items: list[ConsolidatedItem] = Field(default_factory=list)
    sections: list[SectionGroup] = Field(default_factory=list)
    checked_sections: list[SectionGroup] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


__all__ = [
    "ConsolidatedItem",
    "ITEM_KEY_SEPARATOR",
    "RecipeSummary",
    "SectionGroup",
    "ShoppingList",
    "UNCLASSIFIED_SECTION",
    "item_key",
]
