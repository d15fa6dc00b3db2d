#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Command Line
===========================================
Create ASCII images from jpg, png and gif files.
"""

import argparse
import logging
import os
import sys
import threading
from typing import List, Optional

from asciiframe.config import ConversionConfig
from asciiframe.constants import DEFAULT_BOUND, SEGMENT_SIZE
from asciiframe.pipeline import (
    ConversionFailure,
    render_to_file,
    render_to_terminal,
    render_to_text_file,
)

logger = logging.getLogger("asciiframe")


def setup_logging(verbose: bool) -> None:
    """Send package logs to stderr (DEBUG when verbose, WARNING otherwise)."""
    level = logging.DEBUG if verbose else logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='asciiframe',
        description='Create ASCII images from jpg, png and gif files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s cat.png                          # Print to the terminal
  %(prog)s cat.png dog.jpg -c               # Colored output, several files
  %(prog)s cat.png -d -s 120                # 70 character ramp, bound 120
  %(prog)s cat.png -m ' .oO'                # Custom ramp
  %(prog)s dance.gif                        # Play an animation
  %(prog)s dance.gif --save                 # Write ascii_dance.gif
  %(prog)s cat.png -o art.png -c            # Write a colored image
  %(prog)s cat.png -t cat.txt               # Write plain text
        """
    )

    # Input/Output
    parser.add_argument('files', nargs='+', help='File(s) to be converted into ascii art')
    parser.add_argument('--save', action='store_true',
                        help='Save an image next to each input (ascii_ prefix)')
    parser.add_argument('-o', '--output', help='Output image file (single input only)')
    parser.add_argument('-t', '--save-txt', metavar='PATH',
                        help='Save plain ascii output to a text file (single input only)')

    # Conversion options
    parser.add_argument('-s', '--scale', type=int, default=DEFAULT_BOUND,
                        help='Maximum bound used for the width')
    parser.add_argument('--preserve-aspect', action='store_true',
                        help='Fit inside the bound keeping the aspect ratio')
    parser.add_argument('-d', '--detailed', action='store_true',
                        help='Use 70 ascii characters instead of 10')
    parser.add_argument('-m', '--mapping', help='Custom characters, lightest first')

    # Color options
    parser.add_argument('-c', '--color', action='store_true', help='Enable color output')
    parser.add_argument('--truecolor', dest='truecolor', action='store_true', default=None,
                        help='Force 24-bit terminal colors')
    parser.add_argument('--no-truecolor', dest='truecolor', action='store_false',
                        help='Force 256-color terminal output')

    # Raster options
    parser.add_argument('--cell-size', type=int, default=SEGMENT_SIZE,
                        help='Pixels per character in saved images')
    parser.add_argument('--font', help='TrueType font for saved images')

    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    return parser


def build_config(args: argparse.Namespace) -> ConversionConfig:
    return ConversionConfig(
        bound=args.scale,
        preserve_aspect=args.preserve_aspect,
        mapping=args.mapping,
        detailed=args.detailed,
        colorize=args.color,
        truecolor=args.truecolor,
        output=args.output,
        cell_size=args.cell_size,
        font_path=args.font,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if len(args.files) > 1 and (args.output or args.save_txt):
        parser.error("--output and --save-txt take a single input file")
    if args.font and not os.path.isfile(args.font):
        parser.error(f"font not found: {args.font}")

    setup_logging(args.verbose)

    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    stop_event = threading.Event()
    failures: List[ConversionFailure] = []

    for path in args.files:
        if stop_event.is_set():
            break
        logger.debug("Processing %s", path)

        results = []
        if args.save or args.output:
            results.append(render_to_file(path, config))
        if args.save_txt:
            results.append(render_to_text_file(path, args.save_txt, config))
        if not results:
            results.append(render_to_terminal(path, config, stop_event=stop_event))

        for result in results:
            if isinstance(result, ConversionFailure):
                logger.error("%s: %s (%s)", result.path, result.kind.value, result.reason)
                failures.append(result)

    if failures:
        logger.debug("%d of %d files failed", len(failures), len(args.files))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
