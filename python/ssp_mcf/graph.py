"""Residual graph store for the successive-shortest-path solver.

The store owns three ``vertex_count x vertex_count`` integer matrices:

* ``capacity[u, v]`` - original capacity of the forward edge ``u -> v``;
* ``residual[u, v]`` - capacity still available from ``u`` to ``v``;
* ``cost[u, v]`` - unit cost of moving flow from ``u`` to ``v``.

Adding ``u -> v`` with cost ``w`` also writes ``cost[v, u] = -w`` so that
pushing flow back along the reverse residual edge refunds its cost.

An edge is visible to the path search only while its residual capacity is
nonzero. A caller-supplied edge of capacity 0 is therefore the same as no
edge at all, and so is a saturated edge.
"""
from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import TYPE_CHECKING

import numpy as np

from .errors import OutOfRangeError
from .typing import Cost, EdgeRecord, Matrix, Vertex

if TYPE_CHECKING:
    from .solver import SolveResult

__all__ = ["ResidualGraph", "new_graph"]

_INT64 = np.iinfo(np.int64)


def _readonly(matrix: Matrix) -> Matrix:
    view = matrix.view()
    view.flags.writeable = False
    return view


class ResidualGraph:
    """Capacity, residual and cost matrices over vertices ``0..n-1``."""

    def __init__(self, vertex_count: int):
        vertex_count = operator.index(vertex_count)
        if vertex_count < 0:
            raise ValueError("vertex_count must be non-negative")
        self._n = vertex_count
        self._capacity = np.zeros((vertex_count, vertex_count), dtype=np.int64)
        self._residual = np.zeros((vertex_count, vertex_count), dtype=np.int64)
        self._cost = np.zeros((vertex_count, vertex_count), dtype=np.int64)
        self.total_flow = 0

    def __repr__(self) -> str:
        return (
            f"ResidualGraph(vertex_count={self._n}, edges={self.edge_count}, "
            f"total_flow={self.total_flow})"
        )

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def source(self) -> Vertex:
        return 0

    @property
    def sink(self) -> Vertex:
        return self._n - 1

    @property
    def edge_count(self) -> int:
        return int(np.count_nonzero(self._capacity))

    @property
    def capacity_matrix(self) -> Matrix:
        return _readonly(self._capacity)

    @property
    def residual_matrix(self) -> Matrix:
        return _readonly(self._residual)

    @property
    def cost_matrix(self) -> Matrix:
        return _readonly(self._cost)

    def check_vertex(self, vertex: int) -> Vertex:
        """Return ``vertex`` as an int, raising if it is not a valid id."""
        vertex = operator.index(vertex)
        if vertex < 0 or vertex >= self._n:
            raise OutOfRangeError(vertex, self._n)
        return vertex

    def add_edge(self, u: Vertex, v: Vertex, cap: int, weight: Cost) -> None:
        """Define the edge ``u -> v`` with capacity ``cap`` and unit cost ``weight``.

        Both endpoints and the capacity are validated before anything is
        written, so a failing call leaves the store untouched. Re-adding an
        existing pair, or adding ``v -> u`` after ``u -> v``, overwrites the
        earlier values.

        Raises:
            OutOfRangeError: ``u`` or ``v`` is outside ``[0, vertex_count)``.
            ValueError: ``cap`` is negative, or ``cap`` or ``weight`` (and
                its negation) does not fit in a signed 64-bit integer.
        """
        u = self.check_vertex(u)
        v = self.check_vertex(v)
        cap = operator.index(cap)
        weight = operator.index(weight)
        if cap < 0:
            raise ValueError("edge capacity must be non-negative")
        if cap > _INT64.max:
            raise ValueError(f"edge capacity {cap} does not fit in int64")
        # Both weight and -weight are stored.
        if not -_INT64.max <= weight <= _INT64.max:
            raise ValueError(f"edge cost {weight} does not fit in int64")
        self._capacity[u, v] = cap
        self._residual[u, v] = cap
        self._cost[u, v] = weight
        self._cost[v, u] = -weight

    def edge_exists(self, u: Vertex, v: Vertex) -> bool:
        """True while ``u -> v`` can carry more flow in the residual graph."""
        return bool(self._residual[self.check_vertex(u), self.check_vertex(v)] != 0)

    def residual_capacity(self, u: Vertex, v: Vertex) -> int:
        return int(self._residual[self.check_vertex(u), self.check_vertex(v)])

    def original_capacity(self, u: Vertex, v: Vertex) -> int:
        return int(self._capacity[self.check_vertex(u), self.check_vertex(v)])

    def edge_cost(self, u: Vertex, v: Vertex) -> Cost:
        return int(self._cost[self.check_vertex(u), self.check_vertex(v)])

    def edge_flow(self, u: Vertex, v: Vertex) -> int:
        """Flow realized on the defined edge ``u -> v``, or 0."""
        u = self.check_vertex(u)
        v = self.check_vertex(v)
        if self._capacity[u, v] == 0:
            return 0
        return max(0, int(self._capacity[u, v] - self._residual[u, v]))

    def edges(self) -> Iterator[EdgeRecord]:
        """Yield ``(u, v, capacity, cost)`` for every defined edge, row-major."""
        for u, v in zip(*np.nonzero(self._capacity)):
            yield int(u), int(v), int(self._capacity[u, v]), int(self._cost[u, v])

    def flow_edges(self) -> Iterator[EdgeRecord]:
        """Yield ``(u, v, flow, cost)`` for every defined edge carrying flow."""
        flow = self._capacity - self._residual
        mask = (self._capacity != 0) & (flow > 0)
        for u, v in zip(*np.nonzero(mask)):
            yield int(u), int(v), int(flow[u, v]), int(self._cost[u, v])

    def flow_cost(self) -> int:
        """Total cost of the flow currently routed through the graph."""
        return sum(flow * cost for _u, _v, flow, cost in self.flow_edges())

    def copy(self) -> ResidualGraph:
        clone = ResidualGraph(self._n)
        clone._capacity = self._capacity.copy()
        clone._residual = self._residual.copy()
        clone._cost = self._cost.copy()
        clone.total_flow = self.total_flow
        return clone

    def solve_min_cost_max_flow(
        self,
        source: Vertex | None = None,
        sink: Vertex | None = None,
        *,
        max_augmentations: int | None = None,
    ) -> SolveResult:
        """Push a min-cost max flow from ``source`` to ``sink`` in place.

        Defaults to vertex 0 as the source and the last vertex as the sink.
        See :func:`ssp_mcf.solver.min_cost_max_flow`.
        """
        from .solver import min_cost_max_flow

        return min_cost_max_flow(
            self, source, sink, max_augmentations=max_augmentations
        )


def new_graph(vertex_count: int) -> ResidualGraph:
    """Return an empty graph with ``vertex_count`` vertices."""
    return ResidualGraph(vertex_count)
