"""Точка входа: рисует фрагмент множества Мандельброта в BMP-файл.

Usage example:
    mandelbmp plot.bmp -1.5 -1 0.5 1 0.002 2.0 100
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from mandelbmp.controllers.render_controller import RenderController
from mandelbmp.models.render_config import (
    DEFAULT_BOUND,
    DEFAULT_MAX_ITER,
    DEFAULT_PIXEL_SIZE,
    RenderConfig,
)

HELP_FLAGS = ("--help", "-h", "/?")


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"max_iter is not a positive integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"max_iter is not a positive integer: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mandelbmp",
        description="Mandelbrot set drawer: saves a black-and-white plot fragment as a 24-bit BMP.",
    )
    parser.add_argument("file", help="name of file to which plot will be saved")
    parser.add_argument("x1", type=float, nargs="?", help="left bound of the plot (default=-1.0)")
    parser.add_argument("y1", type=float, nargs="?", help="bottom bound of the plot (default=-1.0)")
    parser.add_argument("x2", type=float, nargs="?", help="right bound of the plot (default=x1+2.0)")
    parser.add_argument("y2", type=float, nargs="?", help="top bound of the plot (default=y1+2.0)")
    parser.add_argument("pixel_size", type=float, nargs="?",
                        help=f"length of single pixel on plot (default={DEFAULT_PIXEL_SIZE})")
    parser.add_argument("bound", type=float, nargs="?",
                        help=f"maximal module of number before being rejected (default={DEFAULT_BOUND})")
    parser.add_argument("max_iter", type=non_negative_int, nargs="?",
                        help=f"number of iterations when checking if pixel is in set (default={DEFAULT_MAX_ITER})")
    parser.add_argument("-v", "--verbose", action="store_true", help="log render progress")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает аргументы и запускает рендер. Ошибки разбора чисел завершают процесс (argparse)."""
    args_list: List[str] = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if not args_list or any(arg in HELP_FLAGS for arg in args_list):
        parser.print_help()
        return 0

    args = parser.parse_args(args_list)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    RenderController().run(RenderConfig.from_namespace(args))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
