from .model import Flags, GraphModel, INVISIBLE_VERTEX_PREFIX, is_invisible, visible_offsets
from .parser import parse_source, parse_flags
from .renderer import render, assign_bends, bend_displacement, EdgePlacement, GraphRenderer
from .geometry import find_circle
from .settings import (
    RenderSettings,
    SettingsError,
    load_settings,
    get_default_settings,
    set_default_settings,
)
from .surface import Surface, DrawingContext
from .errors import (
    KaleError,
    ParseError,
    UnexpectedParseError,
    UndefinedVertexError,
    InvalidLineError,
    MatrixFormatConflictError,
    MatrixDimensionMismatchError,
    MatrixAsymmetryError,
    MatrixCellTooLargeError,
    MatrixOddSelfLoopError,
    RenderError,
    UnexpectedRenderError,
    InvisibleVertexEdgeError,
    describe_error,
)
from .printer import print_graph
from .blocks import extract_blocks, CodeBlock
from .tikz_codegen import generate_tikz_code, generate_tikz_document

__all__ = [
    'Flags',
    'GraphModel',
    'INVISIBLE_VERTEX_PREFIX',
    'is_invisible',
    'visible_offsets',
    'parse_source',
    'parse_flags',
    'render',
    'assign_bends',
    'bend_displacement',
    'EdgePlacement',
    'GraphRenderer',
    'find_circle',
    'RenderSettings',
    'SettingsError',
    'load_settings',
    'get_default_settings',
    'set_default_settings',
    'Surface',
    'DrawingContext',
    'KaleError',
    'ParseError',
    'UnexpectedParseError',
    'UndefinedVertexError',
    'InvalidLineError',
    'MatrixFormatConflictError',
    'MatrixDimensionMismatchError',
    'MatrixAsymmetryError',
    'MatrixCellTooLargeError',
    'MatrixOddSelfLoopError',
    'RenderError',
    'UnexpectedRenderError',
    'InvisibleVertexEdgeError',
    'describe_error',
    'print_graph',
    'extract_blocks',
    'CodeBlock',
    'generate_tikz_code',
    'generate_tikz_document',
]
