"""Merge the ingredient lines of every planned recipe into one shopping list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from larder.models.recipe import Recipe, RecipeIngredientLine
from larder.models.shopping import UNCLASSIFIED_SECTION, ConsolidatedItem

from .formatting import format_number, is_absent, is_count_unit, parse_numeric

MergeKey = Tuple[str, str]


@dataclass
class _Accumulator:
    """Running totals for one ``(name, unit)`` merge key."""

    name: str
    unit: str
    numeric_total: float = 0.0
    has_numeric: bool = False
    quantity_notes: List[str] = field(default_factory=list)
    notes: Dict[str, None] = field(default_factory=dict)
    section: Optional[str] = None

    def absorb(self, line: RecipeIngredientLine) -> None:
        quantity = line.quantity
        numeric = parse_numeric(quantity)
        if numeric is not None:
            self.numeric_total += numeric
            self.has_numeric = True
        elif not is_absent(quantity):
            self.quantity_notes.append(str(quantity))

        if line.notes:
            self.notes.setdefault(line.notes, None)

        if self.section is None and line.supermarket_section:
            self.section = line.supermarket_section

    def build(self) -> ConsolidatedItem:
        return ConsolidatedItem(
            name=self.name,
            unit=self.unit,
            numeric_total=self.numeric_total,
            has_numeric=self.has_numeric,
            non_numeric_quantity_notes=list(self.quantity_notes),
            freeform_notes=list(self.notes),
            section=self.section or UNCLASSIFIED_SECTION,
            display_text=build_display_text(
                self.name,
                self.unit,
                self.numeric_total if self.has_numeric else None,
                self.quantity_notes,
            ),
        )


def build_display_text(
    name: str,
    unit: str,
    numeric_total: Optional[float],
    quantity_notes: Iterable[str] = (),
) -> str:
    """Render ``"500 g flour"``, ``"2 + a pinch tsp salt"`` or just ``"basil"``."""

    parts: List[str] = []
    if numeric_total is not None:
        parts.append(format_number(numeric_total))
    parts.extend(quantity_notes)

    phrase = " + ".join(parts)
    if not phrase:
        return name
    if unit and not is_count_unit(unit):
        phrase = f"{phrase} {unit}"
    return f"{phrase} {name}"


def merge_key(line: RecipeIngredientLine) -> MergeKey:
    """Names are compared exactly as authored; only the resolved unit is normalized."""
    return (line.ingredient_name, line.resolved_unit)


def consolidate(recipes: Iterable[Recipe]) -> List[ConsolidatedItem]:
    """Return one shopping list item per distinct ``(name, unit)`` across ``recipes``.

    Items come back in first-encounter order; callers should treat the result as a set
    and group it with :func:`larder.planner.sections.group_items_by_section`.
    """

    accumulators: Dict[MergeKey, _Accumulator] = {}
    for recipe in recipes:
        for line in recipe.ingredients:
            key = merge_key(line)
            accumulator = accumulators.get(key)
            if accumulator is None:
                accumulator = accumulators[key] = _Accumulator(name=key[0], unit=key[1])
            accumulator.absorb(line)

    return [accumulator.build() for accumulator in accumulators.values()]


__all__ = ["build_display_text", "consolidate", "merge_key"]
