"""Low-level array routines behind the successive-shortest-path solver.

Both routines work directly on the ``int64`` residual and cost matrices of a
:class:`~ssp_mcf.graph.ResidualGraph`; ``augment`` mutates the residual
matrix in place.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import InternalInvariantViolation
from .typing import Matrix, Vertex

__all__ = ["INF_COST", "UNREACHED", "Augmentation", "augment", "cheapest_path"]

UNREACHED: int = -1
INF_COST: int = int(np.iinfo(np.int64).max)


@dataclass(frozen=True)
class Augmentation:
    """One augmenting step: the path used, the flow pushed and its unit cost."""

    path: tuple[Vertex, ...]
    bottleneck: int
    cost: int

    @property
    def flow_cost(self) -> int:
        return self.bottleneck * self.cost


def cheapest_path(
    residual: Matrix,
    cost: Matrix,
    source: Vertex,
    sink: Vertex,
) -> np.ndarray | None:
    """Bellman-Ford label correction over the edges with spare capacity.

    Returns the predecessor array when ``sink`` is reachable from ``source``
    and ``None`` otherwise. ``pred[v] == UNREACHED`` marks vertices the search
    never labelled. Negative edge costs are allowed; negative cycles are not
    detected and leave the result undefined.
    """
    n = residual.shape[0]
    cost_to = np.full(n, INF_COST, dtype=np.int64)
    pred = np.full(n, UNREACHED, dtype=np.int64)
    cost_to[source] = 0

    admissible = residual != 0
    np.fill_diagonal(admissible, False)

    for _ in range(n):
        changed = False
        for u in range(n):
            base = cost_to[u]
            if base == INF_COST:
                continue
            # cost_to[u] is fixed while row u relaxes, so one vector step
            # matches the scalar loop over v.
            candidate = base + cost[u]
            improve = admissible[u] & (candidate < cost_to)
            if improve.any():
                cost_to[improve] = candidate[improve]
                pred[improve] = u
                changed = True
        if not changed:
            break

    if pred[sink] == UNREACHED:
        return None
    return pred


def _walk_back(pred: np.ndarray, source: Vertex, sink: Vertex) -> list[Vertex]:
    n = len(pred)
    path = [sink]
    vertex = sink
    for _ in range(n):
        if vertex == source:
            break
        vertex = int(pred[vertex])
        if vertex == UNREACHED:
            raise InternalInvariantViolation(
                f"predecessor chain from {sink} breaks before reaching {source}"
            )
        path.append(vertex)
    if vertex != source:
        raise InternalInvariantViolation(
            f"predecessor chain from {sink} does not reach {source} within {n} steps"
        )
    path.reverse()
    return path


def augment(
    residual: Matrix,
    cost: Matrix,
    pred: np.ndarray,
    source: Vertex,
    sink: Vertex,
) -> Augmentation:
    """Push the bottleneck amount along the path encoded in ``pred``.

    Forward residuals on the path shrink by the bottleneck and the reverse
    residuals grow by the same amount.
    """
    path = _walk_back(pred, source, sink)
    tails = np.asarray(path[:-1], dtype=np.intp)
    heads = np.asarray(path[1:], dtype=np.intp)

    bottleneck = int(residual[tails, heads].min())
    if bottleneck <= 0:
        raise InternalInvariantViolation(
            f"augmenting path {path} has non-positive bottleneck {bottleneck}"
        )

    residual[tails, heads] -= bottleneck
    residual[heads, tails] += bottleneck
    path_cost = int(cost[tails, heads].sum())
    return Augmentation(path=tuple(path), bottleneck=bottleneck, cost=path_cost)
