"""Ошибки предметной области: форма сетки, индексы пикселей, запись файла."""
from __future__ import annotations


class ShapeError(ValueError):
    """Данные пикселей не образуют прямоугольник."""


class PixelIndexError(IndexError):
    """Координаты пикселя вне границ изображения."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Пиксель ({x}, {y}) вне изображения {width}x{height}")
        self.x = x
        self.y = y


class BitmapIOError(OSError):
    """Не удалось записать файл изображения; хранит сообщение исходной ошибки."""
