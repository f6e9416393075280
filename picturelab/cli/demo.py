import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from ..errors import PictureError
from ..pipeline.chromakey_demo import DEFAULT_KEY_COLOR, DEFAULT_TOLERANCE, run_chromakey
from ..pipeline.filter_chain import FILTERS, apply_steps
from ..pipeline.steganography_demo import hide_and_reveal
from ..services.picture_service import PictureService

logger = logging.getLogger("picturelab.cli")


def _configure_logging(verbose: bool) -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def _parse_color(text: str):
    try:
        r, g, b = (int(v) for v in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected R,G,B, got '{text}'") from None
    return r, g, b


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="picturelab-demo",
        description="Apply picture transforms to image files.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    steps_help = f"filter step, e.g. solarize:127 (repeatable). Known: {', '.join(sorted(FILTERS))}"

    p_filter = sub.add_parser("filter", help="apply filter steps to one picture")
    p_filter.add_argument("input", type=Path)
    p_filter.add_argument("-s", "--step", action="append", required=True, help=steps_help)
    p_filter.add_argument("-o", "--output", type=Path, required=True)

    p_batch = sub.add_parser("batch", help="apply filter steps to every picture in a folder")
    p_batch.add_argument("folder", type=Path)
    p_batch.add_argument("-s", "--step", action="append", required=True, help=steps_help)
    p_batch.add_argument("-o", "--output-dir", type=Path, required=True)
    p_batch.add_argument("--recursive", action="store_true")

    p_key = sub.add_parser("chromakey", help="replace a key colour with a background picture")
    p_key.add_argument("foreground", type=Path)
    p_key.add_argument("background", type=Path)
    p_key.add_argument("-o", "--output", type=Path, required=True)
    p_key.add_argument("--color", type=_parse_color, default=DEFAULT_KEY_COLOR, help="R,G,B")
    p_key.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE)

    p_stego = sub.add_parser("stego", help="hide a message picture in a cover picture")
    p_stego.add_argument("cover", type=Path)
    p_stego.add_argument("message", type=Path)
    p_stego.add_argument("-o", "--output", type=Path, required=True,
                         help="encoded cover; the revealed message is saved beside it")

    return parser


def _run_filter(args, picture_service: PictureService) -> None:
    picture = picture_service.load(args.input)
    apply_steps(picture, args.step, picture_service=picture_service)
    picture_service.save(picture, args.output)


def _run_batch(args, picture_service: PictureService) -> None:
    gallery = list(picture_service.stream_gallery(args.folder, recursive=args.recursive))
    logger.info(f"Processing {len(gallery)} pictures from {args.folder}")
    for picture in tqdm(gallery, desc="filters", ncols=70):
        apply_steps(picture, args.step, picture_service=picture_service)
        relative = picture.path.relative_to(args.folder)
        picture_service.save(picture, args.output_dir / relative)


def _run_chromakey(args, picture_service: PictureService) -> None:
    foreground = picture_service.load(args.foreground)
    background = picture_service.load(args.background)
    composed = run_chromakey(foreground, background, key_color=args.color, tolerance=args.tolerance)
    picture_service.save(composed, args.output)


def _run_stego(args, picture_service: PictureService) -> None:
    cover = picture_service.load(args.cover)
    message = picture_service.load(args.message)
    encoded, revealed = hide_and_reveal(cover, message)
    # lossy formats would destroy the parity bits
    encoded_path = picture_service.save(encoded, args.output, lossless=True)
    picture_service.save(revealed, encoded_path.with_name(encoded_path.stem + "_revealed.png"), lossless=True)


_COMMANDS = {
    "filter": _run_filter,
    "batch": _run_batch,
    "chromakey": _run_chromakey,
    "stego": _run_stego,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    picture_service = PictureService()
    try:
        _COMMANDS[args.command](args, picture_service)
    except (PictureError, FileNotFoundError, NotADirectoryError) as err:
        logger.error(f"{args.command} failed: {err}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
