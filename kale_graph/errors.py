"""Error taxonomy for parsing and rendering kale graphs.

Errors are split along two axes: the stage that raised them (parse or
render) and whether they were caused by the input (user errors, safe to show
verbatim) or by a broken internal invariant (unexpected errors).
"""

from typing import Optional

REPORT_URL = "https://github.com/olillin/kale-graph/issues/new"


class KaleError(Exception):
    stage = "unknown"
    unexpected = False


class ParseError(KaleError):
    stage = "parse"

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"[line {line}] {message}"
        super().__init__(message)


class UnexpectedParseError(ParseError):
    unexpected = True


class UndefinedVertexError(ParseError):
    pass


class InvalidLineError(ParseError):
    pass


class MatrixFormatConflictError(ParseError):
    pass


class MatrixDimensionMismatchError(ParseError):
    pass


class MatrixAsymmetryError(ParseError):
    pass


class MatrixOddSelfLoopError(ParseError):
    pass


class MatrixCellTooLargeError(ParseError):
    pass


class RenderError(KaleError):
    stage = "render"


class UnexpectedRenderError(RenderError):
    unexpected = True


class InvisibleVertexEdgeError(RenderError):
    pass


_STAGE_TEXT = {
    "parse": "parsing kale code",
    "render": "rendering graph",
}


def describe_error(exc: BaseException) -> str:
    """Return the text a host shows for a failed parse or render."""
    if isinstance(exc, KaleError):
        action = _STAGE_TEXT.get(exc.stage, "processing graph")
        if not exc.unexpected:
            return f"An error occurred while {action}:\n{exc}"
        head = f"An unexpected error occurred while {action}:\n{exc}"
    else:
        head = f"An unexpected error occurred:\n{type(exc).__name__}: {exc}"
    return f"{head}\nPlease report this issue at {REPORT_URL}"
