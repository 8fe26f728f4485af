"""Python interface for ssp-mcf.

Min-cost max flow by successive shortest augmenting paths over a dense
residual graph.

Example:
    >>> from ssp_mcf import new_graph
    >>> graph = new_graph(4)
    >>> graph.add_edge(0, 1, 2, 1)
    >>> graph.add_edge(0, 2, 1, 2)
    >>> graph.add_edge(1, 3, 1, 1)
    >>> graph.add_edge(2, 3, 1, 1)
    >>> result = graph.solve_min_cost_max_flow(0, 3)
    >>> result.total_flow, result.total_cost
    (2, 5)
"""

from ._core import Augmentation
from ._version import __version__
from .errors import (
    InternalInvariantViolation,
    MalformedInputError,
    OutOfRangeError,
    SspMcfError,
)
from .graph import ResidualGraph, new_graph
from .io import format_graph, parse_graph, read_graph, write_graph
from .nx import cost_of_flow, graph_from_networkx, max_flow_min_cost
from .solver import SolveResult, min_cost_max_flow
from .typing import FlowDict

__all__ = [
    "Augmentation",
    "FlowDict",
    "InternalInvariantViolation",
    "MalformedInputError",
    "OutOfRangeError",
    "ResidualGraph",
    "SolveResult",
    "SspMcfError",
    "cost_of_flow",
    "format_graph",
    "graph_from_networkx",
    "max_flow_min_cost",
    "min_cost_max_flow",
    "new_graph",
    "parse_graph",
    "read_graph",
    "write_graph",
    "__version__",
]
