"""Item and problem-instance models."""

from typing import Sequence, Tuple, Union
from pydantic import BaseModel, Field, StrictInt


class Item(BaseModel):
    """Represents a single knapsack item with a value and a weight."""
    
    value: StrictInt = Field(ge=0)
    weight: StrictInt = Field(ge=0)
    
    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {"value": 60, "weight": 10},
        },
    }
    
    @classmethod
    def from_pair(cls, pair: Union["Item", Tuple[int, int]]) -> "Item":
        """Build an item from a (value, weight) pair. Items pass through unchanged."""
        if isinstance(pair, Item):
            return pair
        value, weight = pair
        return cls(value=value, weight=weight)
    
    def __str__(self) -> str:
        return f"{{value: {self.value}, weight: {self.weight}}}"


ItemLike = Union[Item, Tuple[int, int]]


def to_catalog(items: Sequence[ItemLike]) -> Tuple[Item, ...]:
    """Convert a sequence of items or (value, weight) pairs to an immutable catalog."""
    return tuple(Item.from_pair(item) for item in items)


class KnapsackProblem(BaseModel):
    """Represents a problem instance: an ordered item catalog and a capacity.
    
    Capacity may be negative, in which case only zero-weight selections
    are feasible.
    """
    
    items: Tuple[Item, ...]
    capacity: StrictInt
    
    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "items": [
                    {"value": 60, "weight": 10},
                    {"value": 100, "weight": 20},
                    {"value": 120, "weight": 30},
                ],
                "capacity": 50,
            }
        },
    }
    
    @classmethod
    def from_pairs(cls, pairs: Sequence[ItemLike], capacity: int) -> "KnapsackProblem":
        """Build a problem from (value, weight) pairs."""
        return cls(items=to_catalog(pairs), capacity=capacity)
    
    @property
    def size(self) -> int:
        """Number of items, which is also the genome length."""
        return len(self.items)