"""Adjacency-matrix rows and their expansion into edges."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from .errors import (
    MatrixAsymmetryError,
    MatrixCellTooLargeError,
    MatrixDimensionMismatchError,
    MatrixOddSelfLoopError,
)
from .model import Edge, Flags

logger = logging.getLogger(__name__)

# Upper bound on a single cell, i.e. on parallel edges between one ordered pair.
MAX_MATRIX_CELL = 1000


def read_matrix_row(line: str, line_no: Optional[int] = None) -> List[int]:
    """Read one matrix row in compact (``0110``) or spaced (``0 12 1``) form."""
    cells = line.split()
    if len(cells) == 1:
        cells = list(cells[0])
    row: List[int] = []
    for column, cell in enumerate(cells, start=1):
        # Length check first so huge digit strings are never converted.
        if len(cell.lstrip('0')) > len(str(MAX_MATRIX_CELL)) or int(cell) > MAX_MATRIX_CELL:
            raise MatrixCellTooLargeError(
                f'adjacency matrix cell in column {column} exceeds the limit of '
                f'{MAX_MATRIX_CELL} edges',
                line=line_no,
            )
        row.append(int(cell))
    return row


def build_matrix(rows: Sequence[Sequence[int]], size: int) -> np.ndarray:
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise MatrixDimensionMismatchError(
            f'adjacency matrix rows must all have the same length, got lengths {sorted(widths)}'
        )
    width = widths.pop() if widths else 0
    if len(rows) != size or width != size:
        raise MatrixDimensionMismatchError(
            f'adjacency matrix must be {size}x{size} to match the number of visible vertices, '
            f'got {len(rows)}x{width}'
        )
    return np.array(rows, dtype=np.int64).reshape(size, size)


def matrix_edges(matrix: np.ndarray, flags: Flags, offsets: Sequence[int]) -> List[Edge]:
    """Unroll an adjacency matrix into edges over the full vertex index space.

    ``offsets[k]`` is the vertex index of the ``k``-th visible vertex. Rows are
    walked in order and, within a row, columns ascending; undirected graphs
    only consult the lower triangle.
    """
    cells = matrix.T if flags.flipped else matrix
    n = cells.shape[0]
    edges: List[Edge] = []
    for i in range(n):
        if flags.directed:
            for j in range(n):
                edges.extend([(offsets[i], offsets[j])] * int(cells[i, j]))
            continue
        for j in range(i + 1):
            count = int(cells[i, j])
            if i == j:
                if count % 2:
                    raise MatrixOddSelfLoopError(
                        f'adjacency matrix of an undirected graph must connect to itself '
                        f'an even amount of times (row {i + 1}, column {j + 1} is {count})'
                    )
                count //= 2
            elif count != int(cells[j, i]):
                raise MatrixAsymmetryError(
                    f'adjacency matrix of an undirected graph must be symmetrical '
                    f'(row {i + 1}, column {j + 1} is {count} but row {j + 1}, column {i + 1} '
                    f'is {int(cells[j, i])})'
                )
            edges.extend([(offsets[i], offsets[j])] * count)
    logger.debug("Adjacency matrix %dx%d produced %d edge(s)", n, n, len(edges))
    return edges
