from typing import Iterable

from planner.domain.Recipe import Recipe


def is_duplicate(existing: Iterable[Recipe], candidate: Recipe) -> bool:
    """True if a stored recipe has the same name (ignoring case) and the same ingredient list.

    Ingredient comparison is order-sensitive and exact on name, quantity and unit.
    """
    name = candidate.name.lower()
    return any(r.name.lower() == name and r.ingredients == candidate.ingredients for r in existing)

__all__ = ['is_duplicate']
