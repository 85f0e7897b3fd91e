"""Plan consolidation and synergy matching."""

from larder.planner.consolidator import consolidate
from larder.planner.sections import group_items_by_section, partition_checked
from larder.planner.synergy import find_synergy_recipes

__all__ = [
    "consolidate",
    "find_synergy_recipes",
    "group_items_by_section",
    "partition_checked",
]
