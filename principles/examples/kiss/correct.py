"""
KISS - correct implementation

The calculator does what it is asked with plain methods. Division by zero is
the only rule worth checking, so it is the only one checked.
"""


class Calculator:
    def add(self, a, b):
        return a + b

    def subtract(self, a, b):
        return a - b

    def multiply(self, a, b):
        return a * b

    def divide(self, a, b):
        if b == 0:
            raise ZeroDivisionError("Division by zero is not allowed")
        return a / b


def main():
    calculator = Calculator()
    print(f"Addition: 5 + 3 = {calculator.add(5, 3)}")
    print(f"Subtraction: 10 - 4 = {calculator.subtract(10, 4)}")
    print(f"Multiplication: 6 * 7 = {calculator.multiply(6, 7)}")
    print(f"Division: 20 / 5 = {calculator.divide(20, 5)}")
    try:
        calculator.divide(10, 0)
    except ZeroDivisionError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
