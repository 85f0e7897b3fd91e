"""Boundary helpers that validate and hydrate data read from the recipe store."""

from larder.ingest.hydrate import HydrationError, hydrate_catalog, hydrate_recipe

__all__ = ["HydrationError", "hydrate_catalog", "hydrate_recipe"]
