"""Solve a small edge-list graph and print the report."""
from __future__ import annotations

from pathlib import Path

from ssp_mcf import read_graph
from ssp_mcf.report import format_report

DATA = Path(__file__).resolve().parent / "data"


def main() -> None:
    for name in ("diamond.txt", "transport0.txt"):
        graph = read_graph(DATA / name)
        result = graph.solve_min_cost_max_flow()
        print(format_report(name, graph, result))


if __name__ == "__main__":
    main()
