"""
Larder meal-plan consolidation package.

The package turns a household's planned recipes into a single shopping list and
recommends further recipes that reuse the perishable ingredients already being bought.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
