"""Модель 24-битного пикселя.

Принципы:
- SRP: только значение цвета, без логики отрисовки.
- Чистый код: неизменяемость (`frozen=True`), пиксель копируется как значение.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Tuple


@dataclass(frozen=True)
class Pixel:
    """Цвет RGB, по 8 бит на канал.

    Fields:
        red: Красный канал, 0..255.
        green: Зелёный канал, 0..255.
        blue: Синий канал, 0..255.
    """
    red: int
    green: int
    blue: int

    BLACK: ClassVar["Pixel"]
    WHITE: ClassVar["Pixel"]
    RED: ClassVar["Pixel"]
    GREEN: ClassVar["Pixel"]
    BLUE: ClassVar["Pixel"]

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Канал {name} вне диапазона 0..255: {value}")

    def with_rgb(self, red: int, green: int, blue: int) -> Pixel:
        """Возвращает новый пиксель с заданными каналами."""
        return replace(self, red=red, green=green, blue=blue)

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue

    def __str__(self) -> str:
        return f"RGB({self.red}, {self.green}, {self.blue})"


# Useful colors
Pixel.BLACK = Pixel(0, 0, 0)
Pixel.WHITE = Pixel(255, 255, 255)
Pixel.RED = Pixel(255, 0, 0)
Pixel.GREEN = Pixel(0, 255, 0)
Pixel.BLUE = Pixel(0, 0, 255)
