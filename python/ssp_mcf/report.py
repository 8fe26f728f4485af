"""Plain-text rendering of graphs and solve results."""
from __future__ import annotations

from collections.abc import Iterable

from ._core import Augmentation
from .graph import ResidualGraph
from .solver import SolveResult
from .typing import Matrix

__all__ = [
    "format_augmentation",
    "format_edge_flows",
    "format_matrix",
    "format_report",
]

CELL_WIDTH = 5


def format_matrix(label: str, matrix: Matrix) -> str:
    """Render a square matrix with row and column indices."""
    n = len(matrix)
    lines = [f" {label} ", " " * CELL_WIDTH + "".join(f"{i:{CELL_WIDTH}d}" for i in range(n))]
    for i in range(n):
        cells = "".join(f"{int(value):{CELL_WIDTH}d}" for value in matrix[i])
        lines.append(f"{i:{CELL_WIDTH}d}{cells}")
    return "\n".join(lines)


def format_augmentation(aug: Augmentation) -> str:
    path = " -> ".join(str(vertex) for vertex in aug.path)
    return f"{path} ({aug.bottleneck})  ${aug.cost}"


def format_edge_flows(graph: ResidualGraph) -> str:
    lines = [
        f"Flow {u} -> {v} ({flow})  ${cost}" for u, v, flow, cost in graph.flow_edges()
    ]
    lines.append(f"TOTAL FLOW: {graph.total_flow}")
    return "\n".join(lines)


def _augmentation_lines(augmentations: Iterable[Augmentation]) -> list[str]:
    return [format_augmentation(aug) for aug in augmentations]


def format_report(
    name: str,
    graph: ResidualGraph,
    result: SolveResult,
    *,
    capacity: Matrix | None = None,
    show_matrices: bool = True,
) -> str:
    """Assemble the full report for one solved graph.

    ``capacity`` defaults to the graph's own capacity matrix, which
    augmentation never changes.
    """
    sections = [f"****Find Flow {name}"]
    if show_matrices:
        sections.append(format_matrix("Edge Cost", graph.cost_matrix))
        sections.append(
            format_matrix("Capacity", graph.capacity_matrix if capacity is None else capacity)
        )
    sections.append("\n".join(["WEIGHTED FLOW: ", *_augmentation_lines(result.augmentations)]))
    sections.append("FINAL EDGE FLOW: \n" + format_edge_flows(graph))
    sections.append(f"TOTAL COST: {graph.flow_cost()}")
    return "\n\n".join(sections) + "\n"
