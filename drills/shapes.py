"""Shapes with area and perimeter, and discountable store products."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

VAT_RATE = 0.21


class Shape(ABC):
    """A plane figure with an area and a perimeter."""

    @abstractmethod
    def area(self) -> float:
        """Return the area."""

    @abstractmethod
    def perimeter(self) -> float:
        """Return the perimeter."""


@dataclass(frozen=True)
class Circle(Shape):
    radius: float

    def area(self) -> float:
        return math.pi * self.radius**2

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)


def _format_number(value: float) -> str:
    number = float(value)
    return str(int(number)) if number.is_integer() else repr(number)


@dataclass
class Product:
    """An item for sale with a name and a price."""

    name: str
    price: float

    def apply_discount(self, percentage: float) -> None:
        """Reduce the price by ``percentage`` percent."""
        self.price -= self.price * (percentage / 100)

    def describe(self) -> str:
        """Return the kind, name and price on one line."""
        return f"{type(self).__name__} {self.name} {_format_number(self.price)}"

    def vat(self) -> float:
        """Return the value added tax due on the price."""
        return self.price * VAT_RATE


@dataclass
class Book(Product):
    author: str = ""


@dataclass
class Game(Product):
    pass


_STORE_DISCOUNTS: tuple[tuple[type[Product], float], ...] = ((Book, 10.0), (Game, 20.0))


def apply_store_discount(product: Product) -> float:
    """Apply the store discount for the product's kind and return the new price.

    Books get 10% off and games 20%; other products raise TypeError.
    """
    for kind, percentage in _STORE_DISCOUNTS:
        if isinstance(product, kind):
            product.apply_discount(percentage)
            return product.price
    raise TypeError(f"no store discount for {type(product).__name__}")