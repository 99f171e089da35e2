"""Параметры построения фрагмента множества Мандельброта."""
from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_X1 = -1.0
DEFAULT_Y1 = -1.0
DEFAULT_SPAN = 2.0
DEFAULT_PIXEL_SIZE = 0.001
DEFAULT_BOUND = 2.0
DEFAULT_MAX_ITER = 80


@dataclass(frozen=True)
class RenderConfig:
    """Неизменяемый набор параметров рендера.

    Fields:
        path: Файл, в который сохраняется изображение.
        x1, y1, x2, y2: Границы фрагмента графика.
        pixel_size: Длина одного пикселя в единицах графика.
        bound: Максимальный модуль числа до признания его убегающим.
        max_iter: Число итераций проверки принадлежности.
    """
    path: Path
    x1: float = DEFAULT_X1
    y1: float = DEFAULT_Y1
    x2: float = DEFAULT_X1 + DEFAULT_SPAN
    y2: float = DEFAULT_Y1 + DEFAULT_SPAN
    pixel_size: float = DEFAULT_PIXEL_SIZE
    bound: float = DEFAULT_BOUND
    max_iter: int = DEFAULT_MAX_ITER

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> RenderConfig:
        """Собирает конфигурацию из аргументов CLI; x2/y2 по умолчанию отсчитываются от x1/y1."""
        x1 = DEFAULT_X1 if args.x1 is None else args.x1
        y1 = DEFAULT_Y1 if args.y1 is None else args.y1
        return cls(
            path=Path(args.file),
            x1=x1,
            y1=y1,
            x2=x1 + DEFAULT_SPAN if args.x2 is None else args.x2,
            y2=y1 + DEFAULT_SPAN if args.y2 is None else args.y2,
            pixel_size=DEFAULT_PIXEL_SIZE if args.pixel_size is None else args.pixel_size,
            bound=DEFAULT_BOUND if args.bound is None else args.bound,
            max_iter=DEFAULT_MAX_ITER if args.max_iter is None else args.max_iter,
        )

    def validate(self) -> Optional[str]:
        """Возвращает сообщение о первом нарушении или None, если параметры корректны."""
        for name in ("x1", "y1", "x2", "y2", "pixel_size", "bound"):
            value = getattr(self, name)
            if not math.isfinite(value):
                return f"Wrong arguments: {name} should be a finite number, but it is {value}"
        if not self.x1 < self.x2:
            return f"Wrong arguments: x1 should be less than x2, but {self.x1} >= {self.x2}"
        if not self.y1 < self.y2:
            return f"Wrong arguments: y1 should be less than y2, but {self.y1} >= {self.y2}"
        if not self.pixel_size > 0.0:
            return f"Wrong arguments: pixel_size needs to be greater than 0, but {self.pixel_size} <= 0"
        if not self.bound > 0.0:
            return f"Wrong arguments: bound needs to be greater than 0, but {self.bound} <= 0"
        return None
