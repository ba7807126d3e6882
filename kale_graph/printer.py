from typing import List

from .lexer import FLAG_PREFIX
from .model import Flags, GraphModel

# Matrices are materialized into edges, so "flipped" has nothing left to say.
_PRINTED_FLAGS = (('directed', 'd'), ('simple', 's'), ('auto', 'a'))


def flags_str(flags: Flags) -> str:
    letters = ''.join(letter for attr, letter in _PRINTED_FLAGS if getattr(flags, attr))
    return f'{FLAG_PREFIX}{letters}' if letters else ''


def print_graph(model: GraphModel) -> str:
    """Return canonical kale source for ``model``: flags, vertex list, edge list."""
    lines: List[str] = []
    flags = flags_str(model.flags)
    if flags:
        lines.append(flags)
    if model.vertices:
        lines.append(', '.join(model.vertices))
    if model.edges:
        lines.append(', '.join(f'({a},{b})' for a, b in model.edge_names()))
    return ''.join(line + '\n' for line in lines)
