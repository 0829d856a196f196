"""
Command line front end.

    swyft resize -i <dir> -o <dir> [-w N] [-h N] [-a] [-y] [-j N] [-v]

``-h`` belongs to ``--height``, so help is only reachable as ``--help``.
"""
import argparse
import logging
from typing import List, Optional

from .. import __version__
from ..core.batch_service import run_batch
from ..core.errors import SwyftError, ValidationError
from ..core.models import BatchRequest

logger = logging.getLogger(__name__)


def _positive_int(v: str) -> int:
    try:
        n = int(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {v!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {v}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="swyft", description="Resize images in batch")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.required = True

    rz = sub.add_parser("resize", help="Resize images in batch", add_help=False)
    rz.add_argument("--help", action="help", help="Show this help message and exit")
    rz.add_argument("-i", "--input", required=True, help="Input folder containing images")
    rz.add_argument("-o", "--output", required=True, help="Output folder for resized images")
    rz.add_argument("-w", "--width", type=_positive_int, help="Target width for resized images")
    rz.add_argument("-h", "--height", type=_positive_int, help="Target height for resized images")
    rz.add_argument("-a", "--keepAspectRatio", dest="keep_aspect", action="store_true",
                    help="Preserve aspect ratio when resizing. Only one of width or height "
                         "is required if this is set.")
    rz.add_argument("-y", "--overwrite", action="store_true",
                    help="Overwrite existing files in the output folder")
    rz.add_argument("-j", "--jobs", type=_positive_int, default=None,
                    help="Maximum number of images resized at the same time")
    rz.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
    return parser


def validate(args: argparse.Namespace) -> None:
    if args.keep_aspect and not (args.width or args.height):
        raise ValidationError("Either width or height is required when keeping aspect ratio.")
    if not args.keep_aspect and not (args.width and args.height):
        raise ValidationError("Both width and height are required when not preserving aspect ratio.")


def to_request(args: argparse.Namespace) -> BatchRequest:
    return BatchRequest(
        input_folder=args.input,
        output_folder=args.output,
        width=args.width,
        height=args.height,
        keep_aspect=args.keep_aspect,
        overwrite=args.overwrite,
        max_workers=args.jobs,
    )


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(message)s")
    logging.getLogger("swyft").setLevel(logging.DEBUG if verbose else logging.INFO)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        validate(args)
        summary = run_batch(to_request(args))
    except SwyftError as e:
        logger.error(str(e))
        return 1
    return 0 if summary.ok else 1
