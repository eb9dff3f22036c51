"""Problem models package."""

from .item import Item, ItemLike, KnapsackProblem, to_catalog

__all__ = [
    "Item",
    "ItemLike",
    "KnapsackProblem",
    "to_catalog",
]
