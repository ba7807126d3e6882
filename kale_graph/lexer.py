import re
from enum import Enum
from typing import List, Optional, Tuple

FLAG_PREFIX = '-'

_comment_re = re.compile(r'//.*$')
_matrix_re = re.compile(r'^[\d\s]+$')
_edge_validate_re = re.compile(r'^(\(\s*\w+\s*,\s*\w+\s*\)(\s*,\s*)?)+$')
_edge_search_re = re.compile(r'\(\s*(\w+)\s*,\s*(\w+)\s*\)')
_vertex_validate_re = re.compile(r'^(\w+\s*,\s*)*\w+\s*,?$')
_path_validate_re = re.compile(r'^(\w+\s*-\s*)*\w+$')
_name_re = re.compile(r'\w+')


class LineKind(Enum):
    FLAGS = 'flags'
    MATRIX = 'matrix'
    EDGES = 'edges'
    VERTICES = 'vertices'
    PATH = 'path'


def preprocess(text: str) -> List[str]:
    """Strip comments and surrounding whitespace, dropping blank lines."""
    lines = (_comment_re.sub('', raw).strip() for raw in text.split('\n'))
    return [line for line in lines if line]


def classify_line(line: str, first: bool = False) -> Optional[LineKind]:
    # Order matters: "1" is a matrix row and "a" a vertex list, not a path.
    if first and line.startswith(FLAG_PREFIX):
        return LineKind.FLAGS
    if _matrix_re.match(line):
        return LineKind.MATRIX
    if _edge_validate_re.match(line):
        return LineKind.EDGES
    if _vertex_validate_re.match(line):
        return LineKind.VERTICES
    if _path_validate_re.match(line):
        return LineKind.PATH
    return None


def edge_pairs(line: str) -> List[Tuple[str, str]]:
    return [(m.group(1), m.group(2)) for m in _edge_search_re.finditer(line)]


def names(line: str) -> List[str]:
    return _name_re.findall(line)
