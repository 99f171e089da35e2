"""Построение фрагмента множества Мандельброта.

Цепочка: границы графика -> размеры и центр в пикселях -> генератор пикселей
(точка комплексной плоскости, чёрная если в множестве) -> `Bitmap` -> файл.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from mandelbmp.models.bitmap import Bitmap, PixelGenerator
from mandelbmp.models.complex_number import Complex
from mandelbmp.models.pixel import Pixel
from mandelbmp.services.bitmap_service import BitmapService

logger = logging.getLogger(__name__)


def is_bounded(c: Complex[float], bound_sq: float, max_iter: int) -> bool:
    """Проверяет, остаётся ли орбита z -> z² + c в пределах `bound_sq` за `max_iter` шагов.

    При `max_iter == 0` точка считается принадлежащей множеству.
    """
    z = Complex(0.0, 0.0)
    for _ in range(max_iter):
        z = z * z + c
        if z.module_sq() > bound_sq:
            return False
    return True


@dataclass(frozen=True)
class PlotGeometry:
    """Размер изображения и пиксель, в который попадает начало координат."""
    width: int
    height: int
    center: Tuple[int, int]


def compute_geometry(x1: float, y1: float, x2: float, y2: float, pixel_size: float) -> PlotGeometry:
    """Переводит границы графика в размеры изображения и центр.

    Ось y изображения направлена вниз, поэтому строка 0 соответствует `y2`.
    `round` встроенный: при .5 округляет к чётному.
    """
    width = max(0, math.ceil((x2 - x1) / pixel_size))
    height = max(0, math.ceil((y2 - y1) / pixel_size))
    center = (round(-x1 / pixel_size), round(y2 / pixel_size))
    return PlotGeometry(width=width, height=height, center=center)


def create_generator(center: Tuple[int, int], pixel_size: float, bound_sq: float, max_iter: int) -> PixelGenerator:
    cent_x, cent_y = center

    def generator(x: int, y: int) -> Pixel:
        c = Complex(float(x - cent_x), float(y - cent_y)) * pixel_size
        return Pixel.BLACK if is_bounded(c, bound_sq, max_iter) else Pixel.WHITE

    return generator


def render_bitmap(
    x1: float, y1: float, x2: float, y2: float, pixel_size: float, bound_sq: float, max_iter: int
) -> Bitmap:
    """Строит изображение фрагмента графика; `bound_sq` — уже возведённая в квадрат граница."""
    geometry = compute_geometry(x1, y1, x2, y2, pixel_size)
    logger.info(
        f"Rendering {geometry.width}x{geometry.height} pixels, center={geometry.center}, max_iter={max_iter}"
    )
    generator = create_generator(geometry.center, pixel_size, bound_sq, max_iter)
    return Bitmap.generated(generator, geometry.width, geometry.height)


def render(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    pixel_size: float,
    bound: float,
    max_iter: int,
    out_path: str | Path,
    bitmap_service: Optional[BitmapService] = None,
) -> Bitmap:
    """Строит фрагмент и сохраняет его в BMP.

    Raises:
        BitmapIOError: если файл не удалось записать.
    """
    bitmap = render_bitmap(x1, y1, x2, y2, pixel_size, bound * bound, max_iter)
    (bitmap_service or BitmapService()).save_as_bitmap(bitmap, out_path)
    return bitmap
