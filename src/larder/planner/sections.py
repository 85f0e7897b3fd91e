"""Group shopping list items by supermarket section and split off checked items."""

from __future__ import annotations

from typing import Collection, Dict, Iterable, List, Sequence, Tuple

from larder.config import DEFAULT_SECTION_ORDER
from larder.models.shopping import UNCLASSIFIED_SECTION, ConsolidatedItem, SectionGroup


def alphabetical_key(value: str) -> Tuple[str, str]:
    return (value.casefold(), value)


def order_sections(
    sections: Iterable[str],
    section_order: Sequence[str] = DEFAULT_SECTION_ORDER,
) -> List[str]:
    """Known sections in canonical order, then unknown ones alphabetically, then Unclassified."""

    present = set(sections)
    known = [section for section in section_order if section in present]
    unknown = sorted(
        (
            section
            for section in present
            if section != UNCLASSIFIED_SECTION and section not in section_order
        ),
        key=alphabetical_key,
    )
    tail = [UNCLASSIFIED_SECTION] if UNCLASSIFIED_SECTION in present else []
    return known + unknown + tail


def group_items_by_section(
    items: Iterable[ConsolidatedItem],
    section_order: Sequence[str] = DEFAULT_SECTION_ORDER,
) -> List[SectionGroup]:
    grouped: Dict[str, List[ConsolidatedItem]] = {}
    for item in items:
        section = item.section.strip() or UNCLASSIFIED_SECTION
        grouped.setdefault(section, []).append(item)

    return [
        SectionGroup(
            section=section,
            items=sorted(grouped[section], key=lambda item: alphabetical_key(item.name)),
        )
        for section in order_sections(grouped, section_order)
    ]


def partition_checked(
    items: Iterable[ConsolidatedItem],
    checked_keys: Collection[str],
) -> Tuple[List[ConsolidatedItem], List[ConsolidatedItem]]:
    """Split items into ``(still to buy, already have)`` by their merge key."""

    checked = set(checked_keys)
    unchecked: List[ConsolidatedItem] = []
    have: List[ConsolidatedItem] = []
    for item in items:
        (have if item.key in checked else unchecked).append(item)
    return unchecked, have


__all__ = ["alphabetical_key", "group_items_by_section", "order_sections", "partition_checked"]
