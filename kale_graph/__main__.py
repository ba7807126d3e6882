import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from kale_graph import (
    KaleError,
    RenderSettings,
    Surface,
    describe_error,
    extract_blocks,
    get_default_settings,
    load_settings,
    parse_source,
    print_graph,
    render,
)
from kale_graph.blocks import DEFAULT_KEYWORD
from kale_graph.settings import SettingsError
from kale_graph.tikz_codegen import generate_tikz_code, standalone_document

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 700
DEFAULT_HEIGHT = 350


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _collect_sources(text: str, markdown: bool, keyword: str) -> List[Tuple[str, str]]:
    if not markdown:
        return [("graph", text)]
    return [(f"block at line {block.line}", block.source) for block in extract_blocks(text, keyword)]


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Parse and render kale graphs")
    parser.add_argument("path", help="Path to a kale source file (or a Markdown note with --markdown)")
    parser.add_argument(
        "--markdown",
        action="store_true",
        help="Treat the input as Markdown and render every fenced kale code block",
    )
    parser.add_argument(
        "--keyword",
        default=DEFAULT_KEYWORD,
        help=f"Code block language that marks a kale graph (default: {DEFAULT_KEYWORD})",
    )
    parser.add_argument("--settings", help="JSON file with render settings")
    parser.add_argument(
        "--width",
        type=float,
        default=DEFAULT_WIDTH,
        help=f"Surface width in pixels (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=float,
        default=DEFAULT_HEIGHT,
        help=f"Surface height in pixels (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument(
        "--print-model",
        action="store_true",
        help="Print the canonical kale source of every parsed graph",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document with every rendered graph to the given path",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    settings: RenderSettings = get_default_settings()
    if args.settings:
        try:
            settings = load_settings(args.settings)
        except (OSError, SettingsError) as exc:
            print(f"Invalid settings: {exc}", file=sys.stderr)
            raise SystemExit(2)

    with open(args.path, encoding="utf-8") as fin:
        text = fin.read()

    sources = _collect_sources(text, args.markdown, args.keyword)
    if not sources:
        logger.warning("No %r code blocks found in %s", args.keyword, args.path)
    logger.info("Rendering %d graph(s) from %s", len(sources), args.path)

    pictures: List[str] = []
    for label, source in sources:
        try:
            model = parse_source(source)
            ops = render(model, settings, Surface(args.width, args.height))
        except KaleError as exc:
            print(f"{label}: {describe_error(exc)}", file=sys.stderr)
            raise SystemExit(1)

        print(
            f"{label}: {len(model.vertices)} vertex(es), {len(model.edges)} edge(s), "
            f"{len(ops)} draw operation(s)"
        )
        if args.print_model:
            print(print_graph(model), end="")
        if args.tikz_output_path:
            pictures.append(generate_tikz_code(ops, args.width, args.height))

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        output_path.write_text(standalone_document(pictures), encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
