"""Quickstart example for ssp-mcf with NetworkX."""
import networkx as nx

from ssp_mcf import cost_of_flow, max_flow_min_cost


def main() -> None:
    graph = nx.DiGraph()
    graph.add_edge("s", "a", capacity=3, weight=1)
    graph.add_edge("s", "b", capacity=2, weight=4)
    graph.add_edge("a", "t", capacity=2, weight=1)
    graph.add_edge("b", "t", capacity=3, weight=1)

    flow = max_flow_min_cost(graph, "s", "t")
    print("flow:", flow)
    print("cost:", cost_of_flow(graph, flow))
    print("networkx cost:", nx.cost_of_flow(graph, nx.max_flow_min_cost(graph, "s", "t")))


if __name__ == "__main__":
    main()
