"""Type aliases for the ssp-mcf public API."""
from __future__ import annotations

from typing import Dict, Hashable

import numpy as np
import numpy.typing as npt

Vertex = int
Node = Hashable
Capacity = int
Cost = int
FlowValue = int

Matrix = npt.NDArray[np.int64]
EdgeRecord = tuple[Vertex, Vertex, Capacity, Cost]
FlowDict = Dict[Node, Dict[Node, FlowValue]]

__all__ = [
    "Capacity",
    "Cost",
    "EdgeRecord",
    "FlowDict",
    "FlowValue",
    "Matrix",
    "Node",
    "Vertex",
]
