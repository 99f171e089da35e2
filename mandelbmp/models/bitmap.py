"""Модель растрового изображения: прямоугольная сетка 24-битных пикселей.

Принципы:
- SRP: хранение пикселей и их изменение (точка, линия); кодирование в файл
  вынесено в `BitmapService`.
- Данные хранятся в numpy-массиве `uint8` формы (width, height, 3),
  индексация `[x, y]` как у столбцов исходной сетки.
"""
from __future__ import annotations

from typing import Callable, Sequence, Tuple

import numpy as np

from mandelbmp.models.errors import PixelIndexError, ShapeError
from mandelbmp.models.pixel import Pixel

PixelGenerator = Callable[[int, int], Pixel]


class Bitmap:
    def __init__(self, data: np.ndarray) -> None:
        """Оборачивает готовый массив формы (width, height, 3).

        Обычно используются фабрики `from_rows`, `filled`, `generated`.

        Raises:
            ShapeError: если форма массива не (width, height, 3).
            ValueError: если тип элементов не uint8.
        """
        if data.ndim != 3 or data.shape[2] != 3:
            raise ShapeError(f"Ожидался массив (width, height, 3), получено {data.shape}")
        if data.dtype != np.uint8:
            raise ValueError(f"Ожидался массив uint8, получено {data.dtype}")
        if data.shape[0] == 0:
            # zero-width grid has no rows either
            data = np.zeros((0, 0, 3), dtype=np.uint8)
        self._data = data

    # ---- Фабрики ----
    @classmethod
    def from_rows(cls, data: Sequence[Sequence[Pixel]]) -> Bitmap:
        """Строит изображение из вложенной последовательности столбцов.

        Args:
            data: `data[x][y]` — пиксель в столбце x, строке y.

        Raises:
            ShapeError: если длины столбцов различаются.
        """
        width = len(data)
        if width == 0:
            return cls(np.zeros((0, 0, 3), dtype=np.uint8))
        height = len(data[0])
        for x, column in enumerate(data):
            if len(column) != height:
                raise ShapeError(
                    f"Данные не прямоугольные: в столбце {x} пикселей {len(column)}, ожидалось {height}"
                )
        arr = np.zeros((width, height, 3), dtype=np.uint8)
        for x, column in enumerate(data):
            for y, pixel in enumerate(column):
                arr[x, y] = pixel.as_tuple()
        return cls(arr)

    @classmethod
    def filled(cls, color: Pixel, width: int, height: int) -> Bitmap:
        """Изображение, залитое одним цветом."""
        arr = np.empty((width, height, 3), dtype=np.uint8)
        arr[...] = color.as_tuple()
        return cls(arr)

    @classmethod
    def generated(cls, generator: PixelGenerator, width: int, height: int) -> Bitmap:
        """Заполняет каждую ячейку значением `generator(x, y)`.

        Ячейки независимы друг от друга; обход — по столбцам, внутри по строкам.
        """
        arr = np.empty((width, height, 3), dtype=np.uint8)
        for x in range(width):
            for y in range(height):
                arr[x, y] = generator(x, y).as_tuple()
        return cls(arr)

    # ---- Свойства ----
    @property
    def width(self) -> int:
        return int(self._data.shape[0])

    @property
    def height(self) -> int:
        return int(self._data.shape[1])

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def to_array(self) -> np.ndarray:
        """Копия данных в виде массива (width, height, 3)."""
        return self._data.copy()

    # ---- Доступ к пикселям ----
    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PixelIndexError(x, y, self.width, self.height)

    def get_pixel(self, x: int, y: int) -> Pixel:
        self._check_bounds(x, y)
        r, g, b = (int(v) for v in self._data[x, y])
        return Pixel(r, g, b)

    def set_pixel(self, x: int, y: int, color: Pixel) -> None:
        self._check_bounds(x, y)
        self._data[x, y] = color.as_tuple()

    def draw_line(self, start: Tuple[int, int], end: Tuple[int, int], color: Pixel) -> None:
        """Рисует отрезок толщиной в один пиксель от `start` до `end`.

        Шаг идёт по доминирующей оси (x, если |dx| > |dy|, иначе y), вторая
        координата интерполируется и округляется встроенным `round`
        (к ближайшему чётному при .5).

        Raises:
            PixelIndexError: если точка отрезка выходит за границы изображения.
        """
        x1, y1 = start
        x2, y2 = end
        if abs(x1 - x2) > abs(y1 - y2):
            s_x, s_y, f_x, f_y = (x1, y1, x2, y2) if x1 < x2 else (x2, y2, x1, y1)
            slope = (f_y - s_y) / (f_x - s_x)
            for x in range(s_x, f_x + 1):
                y = round((x - s_x) * slope + s_y)
                self.set_pixel(x, y, color)
        else:
            s_x, s_y, f_x, f_y = (x1, y1, x2, y2) if y1 < y2 else (x2, y2, x1, y1)
            slope = (f_x - s_x) / (f_y - s_y) if y1 != y2 else 0.0
            for y in range(s_y, f_y + 1):
                x = round((y - s_y) * slope + s_x)
                self.set_pixel(x, y, color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(np.array_equal(self._data, other._data))

    def __repr__(self) -> str:
        return f"Bitmap(width={self.width}, height={self.height})"
