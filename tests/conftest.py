from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
PYTHON_SRC = ROOT / "python"

if importlib.util.find_spec("ssp_mcf") is None:
    if str(PYTHON_SRC) not in sys.path:
        sys.path.insert(0, str(PYTHON_SRC))


@pytest.fixture
def diamond():
    from ssp_mcf import new_graph

    graph = new_graph(4)
    graph.add_edge(0, 1, 2, 1)
    graph.add_edge(0, 2, 1, 2)
    graph.add_edge(1, 3, 1, 1)
    graph.add_edge(2, 3, 1, 1)
    return graph


@pytest.fixture
def reset_ssp_logging():
    from ssp_mcf.logging import reset_logging

    yield
    reset_logging()
