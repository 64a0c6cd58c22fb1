"""
KISS - violation

Four arithmetic operations become an Operation hierarchy, a factory, a
registry initialised at construction, a timestamped history, memory
registers and statistics. The same four results need six classes.
"""

from abc import ABC, abstractmethod
from collections import Counter
from datetime import datetime


class Operation(ABC):
    def __init__(self, name, symbol):
        self.name = name
        self.symbol = symbol

    @abstractmethod
    def execute(self, a, b): ...

    def description(self):
        return f"{self.name} operation ({self.symbol})"


class AddOperation(Operation):
    def __init__(self):
        super().__init__("Addition", "+")

    def execute(self, a, b):
        return a + b


class SubtractOperation(Operation):
    def __init__(self):
        super().__init__("Subtraction", "-")

    def execute(self, a, b):
        return a - b


class MultiplyOperation(Operation):
    def __init__(self):
        super().__init__("Multiplication", "*")

    def execute(self, a, b):
        return a * b


class DivideOperation(Operation):
    def __init__(self):
        super().__init__("Division", "/")

    def execute(self, a, b):
        if b == 0:
            raise ZeroDivisionError("Division by zero is not allowed")
        return a / b


class OperationFactory:
    _registry = {
        "add": AddOperation,
        "subtract": SubtractOperation,
        "multiply": MultiplyOperation,
        "divide": DivideOperation,
    }

    @classmethod
    def create(cls, kind):
        try:
            return cls._registry[kind.lower()]()
        except KeyError:
            raise ValueError(f"Unknown operation type: {kind}")


class OverEngineeredCalculator:
    def __init__(self):
        self.operations = {}
        self.history = []
        self.memory = 0
        self.initialize_operations()

    def initialize_operations(self):
        for kind in ("add", "subtract", "multiply", "divide"):
            self.operations[kind] = OperationFactory.create(kind)

    def perform_operation(self, kind, a, b):
        if kind not in self.operations:
            raise ValueError(f"Operation not supported: {kind}")
        operation = self.operations[kind]
        result = operation.execute(a, b)
        self.history.append({"timestamp": datetime.now(), "operation": operation,
                             "operands": (a, b), "result": result})
        return result

    def add(self, a, b):
        return self.perform_operation("add", a, b)

    def subtract(self, a, b):
        return self.perform_operation("subtract", a, b)

    def multiply(self, a, b):
        return self.perform_operation("multiply", a, b)

    def divide(self, a, b):
        return self.perform_operation("divide", a, b)

    def memory_store(self, value):
        self.memory = value

    def memory_recall(self):
        return self.memory

    def memory_add(self, value):
        self.memory += value

    def memory_clear(self):
        self.memory = 0

    def operation_counts(self):
        return Counter(entry["operation"].name for entry in self.history)

    def average_result(self):
        if not self.history:
            return 0
        return sum(entry["result"] for entry in self.history) / len(self.history)


def main():
    calculator = OverEngineeredCalculator()
    print(f"Addition: 5 + 3 = {calculator.add(5, 3)}")
    print(f"Subtraction: 10 - 4 = {calculator.subtract(10, 4)}")
    print(f"Multiplication: 6 * 7 = {calculator.multiply(6, 7)}")
    print(f"Division: 20 / 5 = {calculator.divide(20, 5)}")

    calculator.memory_store(10)
    calculator.memory_add(5)
    print(f"Memory value: {calculator.memory_recall()}")

    print("Operation history:")
    for entry in calculator.history:
        a, b = entry["operands"]
        op = entry["operation"]
        print(f"  {op.description()}: {a} {op.symbol} {b} = {entry['result']}")
    print(f"Operation counts: {dict(calculator.operation_counts())}")
    print(f"Average result: {calculator.average_result()}")


if __name__ == "__main__":
    main()
