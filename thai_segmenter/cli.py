"""Command-line interface for Thai word segmentation."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .config import Config
from .engines import ENGINES
from .pipeline import SegmentationPipeline
from .tokenize import word_tokenize


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="thai-segmenter",
        description="Segment Thai text into words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Tokenize text given on the command line
  thai-segmenter tokenize "ฉันไปโรงเรียน"

  # Use a custom word list and drop whitespace tokens
  thai-segmenter tokenize --dict words.txt --no-whitespace "สวัสดี ครับ"

  # Segment a file (one document per line, or JSONL records)
  thai-segmenter segment --input data/input.txt --output data/segmented

  # Using a config file with 4 worker processes
  thai-segmenter segment --config config.yaml --workers 4
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    tokenize_parser = subparsers.add_parser(
        "tokenize", help="Tokenize text and print Python lists"
    )
    setup_tokenize_parser(tokenize_parser)

    segment_parser = subparsers.add_parser("segment", help="Segment a text or JSONL file")
    setup_segment_parser(segment_parser)

    return parser


def setup_tokenize_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for tokenize command."""
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to tokenize (reads lines from stdin if omitted)",
    )
    parser.add_argument(
        "--dict",
        type=Path,
        dest="dict_path",
        help="Path to word list, one word per line",
    )
    parser.add_argument(
        "--engine",
        choices=ENGINES,
        default="newmm",
        help="Segmentation engine (default: newmm)",
    )
    parser.add_argument(
        "--no-whitespace",
        action="store_true",
        help="Drop whitespace tokens",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_segment_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for segment command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input text or JSONL file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory for CSV files",
    )
    parser.add_argument(
        "--dict",
        type=Path,
        dest="dict_path",
        help="Path to word list, one word per line",
    )
    parser.add_argument(
        "--engine",
        choices=ENGINES,
        help="Segmentation engine (default: newmm)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of parallel workers (default: 1)",
    )
    parser.add_argument(
        "--no-whitespace",
        action="store_true",
        help="Drop whitespace tokens",
    )
    parser.add_argument(
        "--no-token-rows",
        action="store_true",
        help="Skip writing tokens.csv",
    )
    parser.add_argument(
        "--no-line-rows",
        action="store_true",
        help="Skip writing lines.csv",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    # Start with config file if provided
    if args.config:
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    # Override with command-line arguments
    if args.input:
        config.input_file = args.input
    if args.output:
        config.output.output_dir = args.output
    if args.dict_path:
        config.dictionary.path = args.dict_path

    if args.engine:
        config.segmentation.engine = args.engine
    if args.workers is not None:
        config.segmentation.workers = args.workers
    if args.no_whitespace:
        config.segmentation.keep_whitespace = False

    if args.no_token_rows:
        config.output.save_token_rows = False
    if args.no_line_rows:
        config.output.save_line_rows = False

    # Assignments above skip validation
    return Config.model_validate(config.model_dump())


def handle_tokenize(args: argparse.Namespace) -> int:
    """Handle tokenize command."""
    texts = args.text or (line.rstrip("\r\n") for line in sys.stdin)
    try:
        for text in texts:
            tokens = word_tokenize(
                text,
                engine=args.engine,
                custom_dict=args.dict_path,
                keep_whitespace=not args.no_whitespace,
            )
            print(tokens)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def handle_segment(args: argparse.Namespace) -> int:
    """Handle segment command."""
    try:
        config = build_config(args)
    except (ValueError, ValidationError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1

    # Run the pipeline
    try:
        with SegmentationPipeline(config) as pipeline:
            line_count = pipeline.run()
        print(f"\nProcessed {line_count} lines")
        print(f"Output saved in: {config.output.output_dir}")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Segmentation failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    if args.command == "tokenize":
        return handle_tokenize(args)
    return handle_segment(args)


if __name__ == "__main__":
    sys.exit(main())
