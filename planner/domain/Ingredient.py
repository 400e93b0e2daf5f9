"""Ingredient domain entity: name, quantity, unit."""
import math
from typing import Union

Number = Union[int, float]


class Ingredient:
    def __init__(self, name: str = "", quantity: Number = 0, unit: str = ""):
        self.name = name
        self.quantity = quantity
        self.unit = unit

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.quantity, self.unit) == (other.name, other.quantity, other.unit)

    def __hash__(self) -> int:
        return hash((self.name, self.quantity, self.unit))

    def __str__(self) -> str:
        return f"{self.quantity} {self.unit} {self.name}".strip()

    def __repr__(self) -> str:
        return f"Ingredient({self.name!r}, {self.quantity!r}, {self.unit!r})"

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        if not isinstance(data, dict):
            raise ValueError(f"Ingredient must be an object, got {type(data).__name__}")
        quantity = data.get("quantity", 0)
        if isinstance(quantity, bool) or not isinstance(quantity, (int, float)) \
                or not math.isfinite(quantity):
            raise ValueError(f"Invalid ingredient quantity: {quantity!r}")
        return Ingredient(
            name=str(data.get("name", "") or ""),
            quantity=quantity,
            unit=str(data.get("unit", "") or ""),
        )

    def to_dict(self):
        '''Converts the Ingredient object to a dictionary for JSON persistence.'''
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
        }
