"""Read and write the whitespace-separated edge list format.

The first token is the vertex count, followed by zero or more
``u v capacity weight`` quadruples::

    4
    0 1 2 1
    0 2 1 2
    1 3 1 1
    2 3 1 1
"""
from __future__ import annotations

import os
from pathlib import Path

import numpy as np

from .errors import MalformedInputError, OutOfRangeError
from .graph import ResidualGraph
from .logging import get_logger

__all__ = ["format_graph", "parse_graph", "read_graph", "write_graph"]

logger = get_logger(__name__)

_INT64 = np.iinfo(np.int64)


def _to_int(token: str, position: int) -> int:
    try:
        value = int(token)
    except ValueError:
        raise MalformedInputError(f"expected an integer, got {token!r}", position) from None
    if not _INT64.min <= value <= _INT64.max:
        raise MalformedInputError(f"integer {token} does not fit in int64", position)
    return value


def parse_graph(text: str) -> ResidualGraph:
    """Build a graph from an edge list; nothing is returned on failure.

    Raises:
        MalformedInputError: the vertex count is missing, negative or not an
            integer, a token is not an integer or overflows int64, or the input
            ends mid-quadruple.
        OutOfRangeError: a quadruple references a vertex outside the graph.
    """
    tokens = text.split()
    if not tokens:
        raise MalformedInputError("missing vertex count", 0)
    vertex_count = _to_int(tokens[0], 0)
    if vertex_count < 0:
        raise MalformedInputError(f"vertex count must be non-negative, got {vertex_count}", 0)

    body = tokens[1:]
    if len(body) % 4:
        raise MalformedInputError(
            f"input ends mid-quadruple ({len(body) % 4} trailing tokens)", len(tokens)
        )

    try:
        graph = ResidualGraph(vertex_count)
    except (ValueError, MemoryError) as exc:
        raise MalformedInputError(f"vertex count {vertex_count} is too large: {exc}", 0) from exc

    for index in range(len(body) // 4):
        offset = 1 + index * 4
        u, v, cap, weight = (
            _to_int(token, offset + k) for k, token in enumerate(body[index * 4 : index * 4 + 4])
        )
        try:
            graph.add_edge(u, v, cap, weight)
        except OutOfRangeError as exc:
            raise OutOfRangeError(
                exc.vertex,
                vertex_count,
                f"edge #{index} ({u} -> {v}): {exc}",
            ) from exc
        except ValueError as exc:
            raise MalformedInputError(f"edge #{index} ({u} -> {v}): {exc}", offset) from exc

    logger.debug("parsed graph with %d vertices and %d edges", vertex_count, graph.edge_count)
    return graph


def read_graph(path: str | os.PathLike[str]) -> ResidualGraph:
    """Parse the edge list stored at ``path``.

    A file that is not valid UTF-8 raises :class:`MalformedInputError`.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"{path} is not valid UTF-8: {exc.reason}", None) from exc
    return parse_graph(text)


def format_graph(graph: ResidualGraph) -> str:
    """Serialize the original capacities and costs of ``graph``."""
    lines = [str(graph.vertex_count)]
    lines.extend(f"{u} {v} {cap} {cost}" for u, v, cap, cost in graph.edges())
    return "\n".join(lines) + "\n"


def write_graph(graph: ResidualGraph, path: str | os.PathLike[str]) -> None:
    Path(path).write_text(format_graph(graph), encoding="utf-8")
