"""Command line interface for marktoc.

Usage:
    marktoc -i README.md                      # HTML to stdout
    marktoc -i README.md -o README.html       # HTML to a file
    marktoc -i doc.md --heading-class title --paragraph-class body -v
    marktoc -i doc.md --config marktoc.toml --toc-nesting compact

Exit Status:
    0  success
    1  input could not be read or converted, or output could not be written
    2  invalid configuration or usage
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from marktoc import Markdown, __version__
from marktoc.config import RenderConfig
from marktoc.errors import ConfigError, EventSourceError
from marktoc.policies import CELL_ROLE_POLICIES
from marktoc.toc import NESTING_STRATEGIES
from marktoc.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marktoc",
        description="Convert Markdown to HTML with a generated table of contents.",
    )
    parser.add_argument("-i", "--input-file", required=True, help="Markdown file to convert")
    parser.add_argument(
        "-o", "--output-file", help="Write HTML here instead of standard output"
    )
    parser.add_argument("--heading-class", help="CSS class added to every heading")
    parser.add_argument("--paragraph-class", help="CSS class added to every paragraph")
    parser.add_argument(
        "--config", type=Path, help="TOML file with render settings (a [marktoc] table)"
    )
    parser.add_argument(
        "--heading-ids",
        action="store_true",
        default=None,
        help="Give headings slug ids so TOC links resolve",
    )
    parser.add_argument(
        "--escape-attributes",
        action="store_true",
        default=None,
        help="HTML-escape URLs, alt text and class names in attributes",
    )
    parser.add_argument("--cell-role", choices=sorted(CELL_ROLE_POLICIES))
    parser.add_argument("--toc-nesting", choices=sorted(NESTING_STRATEGIES))
    parser.add_argument("-v", "--verbose", action="store_true", help="Report progress")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> RenderConfig:
    """Merge the optional config file with command line overrides.

    Raises:
        ConfigError: If the config file or a resulting value is invalid
    """
    config = RenderConfig.from_toml(args.config) if args.config else RenderConfig()
    overrides = {
        "heading_class": args.heading_class,
        "paragraph_class": args.paragraph_class,
        "heading_ids": args.heading_ids,
        "escape_attributes": args.escape_attributes,
        "cell_role": args.cell_role,
        "toc_nesting": args.toc_nesting,
    }
    # Flags left unset on the command line keep the file's values.
    return config.replace(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without the program name (sys.argv[1:] when None)

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    logger.info("Input file: %s", args.input_file)
    logger.info("Output file: %s", args.output_file or "<stdout>")

    try:
        config = load_config(args)
    except ConfigError as e:
        logger.error("%s", e)
        return EXIT_CONFIG_ERROR

    try:
        source = Path(args.input_file).read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Cannot read %s: %s", args.input_file, e.strerror or e)
        return EXIT_IO_ERROR

    try:
        html = Markdown(config=config)(source)
    except EventSourceError as e:
        logger.error("%s", e)
        return EXIT_IO_ERROR

    if args.output_file is None:
        sys.stdout.write(html)
        return EXIT_OK

    try:
        Path(args.output_file).write_text(html, encoding="utf-8")
    except OSError as e:
        logger.error("Cannot write %s: %s", args.output_file, e.strerror or e)
        return EXIT_IO_ERROR
    logger.info("Wrote %d characters", len(html))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
