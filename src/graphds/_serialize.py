"""Pydantic models of the serialized graph form.

The serialized form is a record with a list of nodes and a list of links,
one link per directed edge occurrence::

    {
        "nodes": [{"id": "a"}, {"id": "b"}],
        "links": [{"source": "a", "target": "b", "weight": 1, "id": null}]
    }
"""

from pydantic import BaseModel, Field


class SerializedNode(BaseModel):
    """A node entry."""

    id: str


class SerializedLink(BaseModel):
    """A directed edge entry."""

    source: str
    target: str
    weight: float | None = None
    id: str | None = None


class SerializedGraph(BaseModel):
    """A whole graph as flat node and link lists."""

    nodes: list[SerializedNode] = Field(default_factory=list)
    links: list[SerializedLink] = Field(default_factory=list)
