"""NetworkX adapter for ssp-mcf.

Maps an ``nx.DiGraph`` with ``capacity`` and ``weight`` (or ``cost``) edge
attributes onto a :class:`~ssp_mcf.graph.ResidualGraph`, solves it, and
returns the flow in NetworkX's dict-of-dicts format so results can be
compared with :func:`networkx.max_flow_min_cost`.
"""
from __future__ import annotations

import math
from typing import Dict, Tuple

from .graph import ResidualGraph
from .solver import SolveResult
from .typing import FlowDict, Node


def _order_nodes(G, source: Node, sink: Node) -> list:
    if source not in G:
        raise ValueError(f"Source {source!r} is not in the graph.")
    if sink not in G:
        raise ValueError(f"Sink {sink!r} is not in the graph.")
    if source == sink:
        raise ValueError("Source and sink must differ.")
    middle = [node for node in G.nodes() if node != source and node != sink]
    return [source, *middle, sink]


def graph_from_networkx(G, source: Node, sink: Node) -> Tuple[ResidualGraph, Dict[Node, int]]:
    """Build a residual graph with ``source`` at index 0 and ``sink`` last.

    Returns the graph and the node-to-index mapping.
    """
    if not G.is_directed():
        raise ValueError("Only directed graphs are supported.")
    if G.is_multigraph():
        raise ValueError("Parallel edges are not supported; use a DiGraph.")
    nodes = _order_nodes(G, source, sink)
    index = {node: idx for idx, node in enumerate(nodes)}
    graph = ResidualGraph(len(nodes))
    for u, v, data in G.edges(data=True):
        if u == v:
            continue
        if G.has_edge(v, u):
            raise ValueError(
                f"Antiparallel edges {u!r} <-> {v!r} are not supported; "
                "split one of them with an intermediate node."
            )
        if "capacity" not in data:
            raise ValueError("Each edge must specify a finite capacity.")
        capacity = data["capacity"]
        if not isinstance(capacity, (int, float)) or not math.isfinite(capacity):
            raise ValueError("Each edge must specify a finite capacity.")
        edge_cost = data.get("weight", data.get("cost", 0))
        if not isinstance(edge_cost, (int, float)) or not math.isfinite(edge_cost):
            raise ValueError("Edge cost must be a finite number.")
        graph.add_edge(index[u], index[v], int(capacity), int(edge_cost))
    return graph, index


def max_flow_min_cost_with_result(
    G, source: Node, sink: Node
) -> Tuple[FlowDict, SolveResult]:
    """Like :func:`max_flow_min_cost` but also return the raw solve result."""
    graph, index = graph_from_networkx(G, source, sink)
    result = graph.solve_min_cost_max_flow(index[source], index[sink])
    flow_dict: FlowDict = {node: {} for node in G.nodes()}
    for u, v in G.edges():
        if u == v:
            flow_dict[u][v] = 0
        else:
            flow_dict[u][v] = graph.edge_flow(index[u], index[v])
    return flow_dict, result


def max_flow_min_cost(G, source: Node, sink: Node) -> FlowDict:
    """Return a maximum ``source``-``sink`` flow of minimum cost."""
    flow_dict, _result = max_flow_min_cost_with_result(G, source, sink)
    return flow_dict


def cost_of_flow(G, flow_dict: FlowDict) -> int:
    """Compute the total cost of a flow dict in NetworkX format."""
    total = 0
    for u, v, data in G.edges(data=True):
        flow = flow_dict.get(u, {}).get(v, 0)
        edge_cost = data.get("weight", data.get("cost", 0))
        total += int(flow) * int(edge_cost)
    return total


__all__ = [
    "cost_of_flow",
    "graph_from_networkx",
    "max_flow_min_cost",
    "max_flow_min_cost_with_result",
]
