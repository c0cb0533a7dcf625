"""Command-line entry point: ``ssimulacra ORIGINAL DISTORTED [PREFIX]``.

Prints the score with 8 decimals on stdout. Any failure prints a diagnostic
on stderr, nothing on stdout, and exits with -1.
"""

from __future__ import annotations

import argparse
import logging
import sys

from ssimulacra.errors import SsimulacraError
from ssimulacra.metric import SsimulacraMetric

logger = logging.getLogger(__name__)

EPILOG = (
    "Returns a value between 0 (images are identical) and 1 (images are very different). "
    "If the value is above 0.1 (or so), the distortion is likely to be perceptible / annoying. "
    "If the value is below 0.01 (or so), the distortion is likely to be imperceptible."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ssimulacra",
        description="Perceptual distortion score of a distorted image against its original.",
        epilog=EPILOG,
    )
    parser.add_argument("original", help="Path to the original image")
    parser.add_argument("distorted", help="Path to the distorted image")
    parser.add_argument(
        "prefix",
        nargs="?",
        help="Debug output prefix; accepted for compatibility, heatmaps are not written",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log per-scale progress to stderr"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if args.prefix is not None:
        logger.debug("Ignoring debug output prefix %s", args.prefix)

    try:
        score = SsimulacraMetric().compute_from_paths(args.original, args.distorted)
    except SsimulacraError as exc:
        logger.debug("Comparison failed", exc_info=True)
        print(str(exc), file=sys.stderr)
        return -1

    sys.stdout.write(f"{score:.8f}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
