"""Reading and writing graphs as JSON files."""

import logging
from pathlib import Path

from ._graph import Graph
from ._serialize import SerializedGraph

logger = logging.getLogger(__name__)


def save_graph(graph: Graph, path: str | Path, *, indent: int = 2) -> None:
    """Write a graph to a JSON file in its serialized form.

    Args:
        graph: The graph to write.
        path: Destination file. Parent directories are created as needed.
        indent: JSON indentation spaces.

    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(graph.serialize().model_dump_json(indent=indent), encoding="utf-8")
    logger.debug(f"Saved graph to {path}")


def load_graph(path: str | Path) -> Graph:
    """Read a graph from a JSON file written by ``save_graph``.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If the file is not a serialized graph.

    """
    serialized = SerializedGraph.model_validate_json(Path(path).read_text(encoding="utf-8"))
    logger.debug(f"Loaded graph from {path}")
    return Graph(serialized)
