"""Комплексное число над произвольным числовым типом.

Принципы:
- Неизменяемость: каждая операция возвращает новое значение.
- Обобщённость: работает с любым N, поддерживающим +, -, *, / и унарный минус
  (float, int, Fraction, numpy-скаляры). Деление на ноль не проверяется:
  поведение определяет сам тип N.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

N = TypeVar("N")


@dataclass(frozen=True)
class Complex(Generic[N]):
    """Пара (re, im) одного числового типа."""
    re: N
    im: N

    def __add__(self, other: Complex[N]) -> Complex[N]:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.re + other.re, self.im + other.im)

    def __sub__(self, other: Complex[N]) -> Complex[N]:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.re - other.re, self.im - other.im)

    def __neg__(self) -> Complex[N]:
        return Complex(-self.re, -self.im)

    def __mul__(self, other: Any) -> Complex[N]:
        """Умножение на комплексное число или на скаляр типа N."""
        if isinstance(other, Complex):
            re = self.re * other.re - self.im * other.im
            im = self.re * other.im + self.im * other.re
            return Complex(re, im)
        return Complex(self.re * other, self.im * other)

    def __truediv__(self, other: Any) -> Complex[N]:
        """Деление на комплексное число (через сопряжённое) или на скаляр.

        Знаменатель `other.module_sq()` не проверяется на ноль.
        """
        if isinstance(other, Complex):
            numerator = self * other.conjugate()
            denominator = other.module_sq()
            return Complex(numerator.re / denominator, numerator.im / denominator)
        return Complex(self.re / other, self.im / other)

    def conjugate(self) -> Complex[N]:
        return Complex(self.re, -self.im)

    def module_sq(self) -> N:
        """Квадрат модуля `re² + im²` (без извлечения корня)."""
        return self.re * self.re + self.im * self.im

    def __str__(self) -> str:
        return f"({self.re})+({self.im})i"
