#!/usr/bin/env python3
"""CLI for converting a markdown file into a header-keyed JSON file."""

import argparse
import logging
import os
import sys
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv

from mdsections.core import (
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_FILE,
    load_config,
    resolve_config,
)
from mdsections.conversion import convert_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split a markdown file on top-level '#' headers and write the sections as JSON"
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        help=f"Markdown file to read (default: {DEFAULT_INPUT_FILE})"
    )
    parser.add_argument(
        "output_file",
        nargs="?",
        help=f"JSON file to write (default: {DEFAULT_OUTPUT_FILE})"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional YAML config file with 'input' and 'output' keys"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the JSON instead of writing the output file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print debug information"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    load_dotenv(find_dotenv(usecwd=True))

    try:
        file_config = load_config(args.config) if args.config else {}
        config = resolve_config(
            input_file=args.input_file,
            output_file=args.output_file,
            file_config=file_config,
            environ=os.environ,
        )
        result = convert_file(config, write=not args.dry_run)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.dry_run:
        print(result.output)
        print(f"✓ Parsed {result.input_path} (dry run, {result.output_path} not written)")
    else:
        print(f"✓ Parsed {result.input_path} and wrote output to {result.output_path}")
    print(f"Found {result.header_count} header(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
