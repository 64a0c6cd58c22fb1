"""
Liskov Substitution - violation

Square inherits from Rectangle and keeps its sides equal by making the width
and height setters change both. Code written for rectangles sets width 10
and height 20, expects 200 and gets 400 when handed a square.
"""


class Rectangle:
    def __init__(self, width, height):
        self._width = width
        self._height = height

    @property
    def width(self):
        return self._width

    @width.setter
    def width(self, value):
        self._width = value

    @property
    def height(self):
        return self._height

    @height.setter
    def height(self, value):
        self._height = value

    def area(self):
        return self._width * self._height


class Square(Rectangle):
    def __init__(self, side):
        super().__init__(side, side)

    @Rectangle.width.setter
    def width(self, value):
        self._width = self._height = value

    @Rectangle.height.setter
    def height(self, value):
        self._width = self._height = value


def resize_rectangle(rectangle):
    rectangle.width = 10
    rectangle.height = 20
    return rectangle.area()


def main():
    print(f"Rectangle area after resize: {resize_rectangle(Rectangle(5, 5))}")
    area = resize_rectangle(Square(5))
    print(f"Square area after resize: {area}")
    if area != 200:
        print("Expected 200: a Square cannot stand in for a Rectangle")


if __name__ == "__main__":
    main()
