"""Type definitions for the genetic knapsack solver.

Contains the Individual class representing a solution candidate (chromosome)
and the Population alias.
"""

from typing import Iterable, Iterator, List, Tuple


class Individual:
    """Represents a solution candidate (chromosome).
    
    An individual is an immutable, fixed-length sequence of boolean genes;
    gene i set means item i of the catalog is selected. Operators never
    modify an individual, they build a new one.
    
    Attributes:
        genes: Tuple of selection flags, one per catalog item
    """
    
    __slots__ = ("_genes",)
    
    def __init__(self, genes: Iterable[bool] = ()):
        self._genes: Tuple[bool, ...] = tuple(bool(g) for g in genes)
    
    @classmethod
    def empty(cls, length: int) -> "Individual":
        """Create an individual of the given length with nothing selected."""
        return cls((False,) * length)
    
    @property
    def genes(self) -> Tuple[bool, ...]:
        return self._genes
    
    def flipped(self, index: int) -> "Individual":
        """Return a copy with the gene at index inverted."""
        genes = list(self._genes)
        genes[index] = not genes[index]
        return Individual(genes)
    
    def selected_indices(self) -> List[int]:
        """Indices of the selected items, in catalog order."""
        return [i for i, gene in enumerate(self._genes) if gene]
    
    def to_list(self) -> List[bool]:
        return list(self._genes)
    
    def __len__(self) -> int:
        return len(self._genes)
    
    def __getitem__(self, index):
        return self._genes[index]
    
    def __iter__(self) -> Iterator[bool]:
        return iter(self._genes)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, Individual):
            return NotImplemented
        return self._genes == other._genes
    
    def __hash__(self) -> int:
        return hash(self._genes)
    
    def __repr__(self) -> str:
        bits = "".join("1" if g else "0" for g in self._genes)
        return f"Individual({bits})"


# Ordered collection of candidates; duplicates are allowed
Population = List[Individual]
