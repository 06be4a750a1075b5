"""Command line entry point."""

from __future__ import annotations
import argparse
import os
import sys
from typing import List, Optional, Sequence

from .config import DEFAULT_DEST_FOLDER, WINDOW_TITLE
from .errors import StartupError
from .image_utils import list_images
from .logging import log, log_error, set_quiet


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="carousel",
        description="Browse images one at a time and copy, move or delete them.",
    )
    parser.add_argument(
        "paths", nargs="+", metavar="PATH",
        help="Image files to browse, in order. Directories add their images sorted by name.",
    )
    parser.add_argument(
        "-d", "--dest", dest="dest_folder", default=DEFAULT_DEST_FOLDER,
        help=f"Folder that copied and moved images go to (default: {DEFAULT_DEST_FOLDER}).",
    )
    parser.add_argument(
        "--overwrite", action="store_true",
        help="Replace files that already exist in the destination folder.",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only print errors.",
    )
    return parser


def collect_images(paths: Sequence[str]) -> List[str]:
    """Expand the command line paths into the ordered image list.

    Files are kept as given, directories contribute their supported images.
    Raises StartupError for a path that does not exist.
    """
    images: List[str] = []
    for p in paths:
        if os.path.isdir(p):
            try:
                found = list_images(p)
            except OSError as e:
                raise StartupError(f"cannot read directory {p}: {e}") from e
            log(f"[ARGS] Found {len(found)} images in {p}")
            images.extend(found)
        elif os.path.isfile(p):
            images.append(p)
        else:
            raise StartupError(f"no such file or directory: {p}")
    return images


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    set_quiet(args.quiet)
    log("[MAIN] Starting application")

    try:
        images = collect_images(args.paths)
    except StartupError as e:
        log_error(f"[INIT][CRITICAL] {e}")
        return 1
    if not images:
        log("[ARGS] No images to show")

    from .app import Application
    from .fs import LocalFilesystem
    from .loader import RaylibDecoder
    from .state import ImageListState
    from .viewer import Viewer
    from .window import RaylibWindow

    try:
        window = RaylibWindow.open(WINDOW_TITLE)
    except StartupError as e:
        log_error(f"[INIT][CRITICAL] {e}")
        return 1

    viewer = Viewer(
        ImageListState(images),
        args.dest_folder,
        surface=window,
        decoder=RaylibDecoder(),
        fs=LocalFilesystem(overwrite=args.overwrite),
    )
    Application(viewer, window).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
