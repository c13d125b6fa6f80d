"""Exceptions raised by graph operations."""


class GraphError(Exception):
    """Base class for errors raised by graph algorithms."""


class CycleError(GraphError):
    """Raised when a traversal that requires an acyclic graph meets a back edge."""

    def __init__(self) -> None:
        msg = "Cycle found"
        super().__init__(msg)


class NodeNotInGraphError(GraphError):
    """Raised when a shortest-path endpoint is not a node of the graph."""

    def __init__(self, node: str, role: str) -> None:
        self.node = node
        self.role = role
        msg = f"{role} node is not in the graph: {node!r}"
        super().__init__(msg)


class NoPathError(GraphError):
    """Raised when the destination cannot be reached from the source."""

    def __init__(self, source: str, destination: str) -> None:
        self.source = source
        self.destination = destination
        msg = f"No path found from {source!r} to {destination!r}"
        super().__init__(msg)
