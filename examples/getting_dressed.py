"""Getting dressed: ordering tasks with a topological sort.

Each edge (a, b) means "put on a before b". Example from Cormen et al.,
"Introduction to Algorithms", p. 550.
"""

import graphds as gd

graph = (
    gd.Graph()
    .add_edge("socks", "shoes")
    .add_edge("shirt", "belt")
    .add_edge("shirt", "tie")
    .add_edge("tie", "jacket")
    .add_edge("belt", "jacket")
    .add_edge("pants", "shoes")
    .add_edge("underpants", "pants")
    .add_edge("pants", "belt")
)

if __name__ == "__main__":
    for step, item in enumerate(graph.topological_sort(), start=1):
        print(f"{step}. {item}")

    # Everything that has to happen once the pants are on
    print(graph.topological_sort(["pants"], include_source_nodes=False))

    graph.add_edge("jacket", "shirt")
    try:
        graph.topological_sort()
    except gd.CycleError:
        print("Cannot dress: cycles", graph.get_cycles())
