"""Reporting of a solver result."""

from typing import List, Sequence
from pydantic import BaseModel

from .models.item import Item, KnapsackProblem
from .solver.fitness import total_value_and_weight
from .solver.types import Individual


class SolutionReport(BaseModel):
    """Summary of a selection against its problem instance."""
    
    items: List[Item]
    chosen: List[Item]
    chosen_indices: List[int]
    total_value: int
    total_weight: int
    capacity: int
    
    def is_feasible(self) -> bool:
        """Check if the selection fits within the capacity."""
        return self.total_weight <= self.capacity


def build_report(problem: KnapsackProblem, selection: Sequence[bool]) -> SolutionReport:
    """
    Derive totals and chosen items for a selection.
    
    Args:
        problem: Problem instance the selection was computed for
        selection: One flag per item
        
    Returns:
        SolutionReport
    """
    if len(selection) != problem.size:
        raise ValueError(
            f"Selection has {len(selection)} flags for {problem.size} items"
        )
    individual = Individual(selection)
    indices = individual.selected_indices()
    total_value, total_weight = total_value_and_weight(individual, problem.items)
    return SolutionReport(
        items=list(problem.items),
        chosen=[problem.items[i] for i in indices],
        chosen_indices=indices,
        total_value=total_value,
        total_weight=total_weight,
        capacity=problem.capacity,
    )


def format_report(report: SolutionReport) -> str:
    """Render a report as console text."""
    lines = ["Initial item set:"]
    lines.extend(str(item) for item in report.items)
    lines.append("")
    lines.append("The items chosen are:")
    lines.extend(str(item) for item in report.chosen)
    lines.append(
        f"For a total value of {report.total_value} "
        f"and a total weight of {report.total_weight}"
    )
    if not report.is_feasible():
        lines.append(f"Over capacity: weight exceeds {report.capacity}")
    return "\n".join(lines)
