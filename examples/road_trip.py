"""Shortest weighted route, saved to a graph file for the CLI.

Run this script, then try for example::

    graphds path s z -g examples/road_trip.json
    graphds tree s -g examples/road_trip.json
"""

from pathlib import Path

import graphds as gd

graph = (
    gd.Graph()
    .add_edge("s", "t", 10, "s-t")
    .add_edge("s", "y", 5, "s-y")
    .add_edge("t", "y", 2, "t-y")
    .add_edge("y", "t", 3, "y-t")
    .add_edge("t", "x", 1, "t-x")
    .add_edge("y", "x", 9, "y-x")
    .add_edge("y", "z", 2, "y-z")
    .add_edge("x", "z", 4, "x-z")
    .add_edge("z", "x", 6, "z-x")
)

if __name__ == "__main__":
    route = graph.shortest_path("s", "x")
    print(" -> ".join(route), f"(weight {route.weight:g})")

    gd.save_graph(graph, Path(__file__).with_suffix(".json"))
