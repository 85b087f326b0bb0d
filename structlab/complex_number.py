"""Complex numbers with componentwise arithmetic and a plain text form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


def _is_integral(*values: Number) -> bool:
    return all(isinstance(value, int) for value in values)


def _format_component(value: Number) -> str:
    if isinstance(value, int):
        return str(value)
    return format(value, "g")


def _parse_component(token: str) -> Number:
    try:
        return int(token)
    except ValueError:
        return float(token)


@dataclass(frozen=True)
class Complex:
    """A complex number ``real + imag*i``.

    When every component involved in an operation is an integer, the result
    keeps integer components, truncating toward zero where needed.
    """

    real: Number = 0
    imag: Number = 0

    def _build(self, real: Number, imag: Number, integral: bool) -> Complex:
        if integral:
            return Complex(int(real), int(imag))
        return Complex(real, imag)

    def _integral_with(self, other: Complex) -> bool:
        return _is_integral(self.real, self.imag, other.real, other.imag)

    def __add__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return self._build(
            self.real + other.real, self.imag + other.imag, self._integral_with(other)
        )

    def __sub__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return self._build(
            self.real - other.real, self.imag - other.imag, self._integral_with(other)
        )

    def __mul__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        real = self.real * other.real - self.imag * other.imag
        imag = self.real * other.imag + self.imag * other.real
        return self._build(real, imag, self._integral_with(other))

    def __truediv__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        norm = other.real * other.real + other.imag * other.imag
        if norm == 0:
            raise ZeroDivisionError("division by a zero complex number")
        real = (self.real * other.real + self.imag * other.imag) / norm
        imag = (self.imag * other.real - self.real * other.imag) / norm
        return self._build(real, imag, self._integral_with(other))

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imag)

    def __str__(self) -> str:
        return f"{_format_component(self.real)} {_format_component(self.imag)}i"

    @classmethod
    def parse(cls, text: str) -> Complex:
        """Read a complex number written as two whitespace-separated numbers."""
        tokens = text.split()
        if len(tokens) != 2:
            raise ValueError(
                f"expected a real and an imaginary part, got {len(tokens)} value(s)"
            )
        return cls(_parse_component(tokens[0]), _parse_component(tokens[1]))