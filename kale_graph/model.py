from dataclasses import dataclass, field
from typing import List, Tuple

INVISIBLE_VERTEX_PREFIX = '_'

Vertex = str
Edge = Tuple[int, int]


@dataclass(frozen=True)
class Flags:
    directed: bool = False
    simple: bool = False
    auto: bool = False
    flipped: bool = False


@dataclass(frozen=True)
class GraphModel:
    flags: Flags = field(default_factory=Flags)
    vertices: Tuple[Vertex, ...] = ()
    edges: Tuple[Edge, ...] = ()

    def __post_init__(self) -> None:
        # Lists are accepted for convenience and frozen into tuples.
        object.__setattr__(self, 'vertices', tuple(self.vertices))
        object.__setattr__(self, 'edges', tuple(tuple(edge) for edge in self.edges))

    @property
    def visible_vertices(self) -> List[Vertex]:
        return [name for name in self.vertices if not is_invisible(name)]

    def edge_names(self) -> List[Tuple[Vertex, Vertex]]:
        """Return the edges as (from, to) name pairs, in model order."""
        return [(self.vertices[a], self.vertices[b]) for a, b in self.edges]


def is_invisible(name: Vertex) -> bool:
    return name.startswith(INVISIBLE_VERTEX_PREFIX)


def visible_offsets(vertices: List[Vertex]) -> List[int]:
    """Map each visible vertex position to its index in ``vertices``.

    Entry ``k`` is ``k`` plus the number of invisible vertices declared before
    the ``k``-th visible one.
    """
    offsets: List[int] = []
    hidden = 0
    for name in vertices:
        if is_invisible(name):
            hidden += 1
            continue
        offsets.append(len(offsets) + hidden)
    return offsets
