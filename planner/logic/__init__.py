"""Core business logic layer.

Subpackages:
- shopping: building the aggregated shopping list from the weekly plan
- search: recipe search/filter and planner choices
- recipes: duplicate detection for new recipes
"""
__all__ = ["shopping", "search", "recipes"]
