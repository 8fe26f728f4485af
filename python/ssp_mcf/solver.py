"""Successive-shortest-path min-cost max-flow driver loop."""
from __future__ import annotations

from dataclasses import dataclass

from ._core import Augmentation, augment, cheapest_path
from .errors import InternalInvariantViolation
from .graph import ResidualGraph
from .logging import get_logger
from .typing import Vertex

__all__ = ["Augmentation", "SolveResult", "min_cost_max_flow"]

logger = get_logger(__name__)


@dataclass(frozen=True)
class SolveResult:
    """Outcome of one solve call.

    ``total_flow`` is the cumulative flow held by the graph after the call;
    ``augmentations`` lists only the paths pushed by this call.
    """

    total_flow: int
    augmentations: tuple[Augmentation, ...]

    @property
    def augmentation_count(self) -> int:
        return len(self.augmentations)

    @property
    def total_cost(self) -> int:
        return sum(aug.flow_cost for aug in self.augmentations)


def min_cost_max_flow(
    graph: ResidualGraph,
    source: Vertex | None = None,
    sink: Vertex | None = None,
    *,
    max_augmentations: int | None = None,
) -> SolveResult:
    """Augment along cheapest residual paths until the sink is unreachable.

    Args:
        graph: Residual graph, mutated in place.
        source: Source vertex; defaults to ``graph.source`` (vertex 0).
        sink: Sink vertex; defaults to ``graph.sink`` (the last vertex).
        max_augmentations: Optional upper bound on the number of augmenting
            paths. Valid input always terminates, so hitting the bound raises.

    Raises:
        OutOfRangeError: ``source`` or ``sink`` is not a vertex of ``graph``.
        ValueError: ``source`` equals ``sink``.
        InternalInvariantViolation: a predecessor chain is broken or the
            augmentation bound was exceeded.
    """
    source = graph.check_vertex(graph.source if source is None else source)
    sink = graph.check_vertex(graph.sink if sink is None else sink)
    if source == sink:
        raise ValueError("source and sink must be distinct vertices")
    if max_augmentations is not None and max_augmentations < 0:
        raise ValueError("max_augmentations must be non-negative")

    residual = graph._residual
    cost = graph._cost
    augmentations: list[Augmentation] = []

    while True:
        pred = cheapest_path(residual, cost, source, sink)
        if pred is None:
            break
        if max_augmentations is not None and len(augmentations) >= max_augmentations:
            raise InternalInvariantViolation(
                f"exceeded {max_augmentations} augmentations; "
                "the residual graph may contain a negative cycle"
            )
        step = augment(residual, cost, pred, source, sink)
        graph.total_flow += step.bottleneck
        augmentations.append(step)
        logger.debug(
            "augmented %s by %d at unit cost %d (total flow %d)",
            " -> ".join(map(str, step.path)),
            step.bottleneck,
            step.cost,
            graph.total_flow,
        )

    logger.debug(
        "solve finished after %d augmentations, total flow %d",
        len(augmentations),
        graph.total_flow,
    )
    return SolveResult(total_flow=graph.total_flow, augmentations=tuple(augmentations))
