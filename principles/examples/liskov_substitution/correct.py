"""
Liskov Substitution - correct implementation

Shape only promises an area. Rectangle and Square are separate immutable
shapes; resizing returns a new shape of the same kind, so nothing written
against Rectangle can be handed a Square that quietly changes both sides.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Iterable


class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def resized(self, width: float, height: float) -> "Rectangle":
        return replace(self, width=width, height=height)


@dataclass(frozen=True)
class Square(Shape):
    side: float

    def area(self) -> float:
        return self.side * self.side

    def resized(self, side: float) -> "Square":
        return replace(self, side=side)


def print_area(shape: Shape) -> None:
    print(f"{type(shape).__name__} area: {shape.area()}")


def total_area(shapes: Iterable[Shape]) -> float:
    return sum(shape.area() for shape in shapes)


def stretch(rectangle: Rectangle) -> float:
    """Any Rectangle resized to 10x20 has area 200."""
    return rectangle.resized(10, 20).area()


def main():
    rectangle = Rectangle(5, 10)
    square = Square(5)
    print_area(rectangle)
    print_area(square)
    print(f"Total area: {total_area([rectangle, square])}")

    print(f"\nRectangle stretched to 10x20: {stretch(rectangle)}")
    print(f"Square resized to 8: {square.resized(8).area()}")
    print(f"Square is a Rectangle: {isinstance(square, Rectangle)}")


if __name__ == "__main__":
    main()
