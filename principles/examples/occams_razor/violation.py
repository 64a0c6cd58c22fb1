"""
Occam's Razor - violation

The same three formatting jobs behind a strategy hierarchy, a factory, a
manager with per-call history and statistics, an address cache and an
international phone mode nobody asked for. The output is identical; the
amount of code to read and keep working is not.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class FormatterStrategy(ABC):
    def __init__(self, name):
        self.name = name
        self.format_count = 0
        self.last_used = None

    def format(self, *args):
        self.format_count += 1
        self.last_used = datetime(2024, 1, 1)
        return self._format(*args)

    @abstractmethod
    def _format(self, *args): ...

    def statistics(self):
        return {"name": self.name, "format_count": self.format_count}


class CapitalizationFormatter(FormatterStrategy):
    def __init__(self):
        super().__init__("Capitalization")

    def _format(self, text):
        return text[:1].upper() + text[1:].lower()


class NameFormatter(FormatterStrategy):
    def __init__(self, capitalization_formatter):
        super().__init__("Name")
        self.capitalization_formatter = capitalization_formatter

    def _format(self, first_name, last_name):
        return (f"{self.capitalization_formatter.format(first_name)} "
                f"{self.capitalization_formatter.format(last_name)}")


class AddressFormatter(FormatterStrategy):
    def __init__(self):
        super().__init__("Address")
        self.cache = {}

    def _format(self, street, city, state, zip_code):
        key = (street, city, state, zip_code)
        if key in self.cache:
            print("Using cached address format")
            return self.cache[key]
        self.cache[key] = f"{street}, {city}, {state} {zip_code}"
        return self.cache[key]


class PhoneNumberFormatter(FormatterStrategy):
    SUPPORTED_FORMATS = ("US", "International")

    def __init__(self):
        super().__init__("Phone")
        self.current_format = "US"

    def set_format(self, fmt):
        if fmt not in self.SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported format: {fmt}")
        self.current_format = fmt

    def _format(self, phone):
        if not phone.isdigit():
            raise ValueError("Phone number must contain only digits")
        if self.current_format == "US":
            if len(phone) != 10:
                raise ValueError("US phone numbers must be 10 digits")
            return f"({phone[:3]}) {phone[3:6]}-{phone[6:]}"
        return f"+{phone}"


class FormatterFactory:
    @staticmethod
    def create(kind, **dependencies):
        kinds = {
            "capitalization": CapitalizationFormatter,
            "name": lambda: NameFormatter(dependencies["capitalization_formatter"]),
            "address": AddressFormatter,
            "phone": PhoneNumberFormatter,
        }
        if kind not in kinds:
            raise ValueError(f"Unknown formatter type: {kind}")
        return kinds[kind]()


class TextFormatterManager:
    def __init__(self):
        self.history = []
        capitalization = FormatterFactory.create("capitalization")
        self.formatters = {
            "capitalization": capitalization,
            "name": FormatterFactory.create("name", capitalization_formatter=capitalization),
            "address": FormatterFactory.create("address"),
            "phone": FormatterFactory.create("phone"),
        }

    def _record(self, kind, inputs, output=None, error=None):
        self.history.append({"type": kind, "input": inputs, "output": output,
                             "error": error, "success": error is None})

    def format_name(self, first_name, last_name):
        result = self.formatters["name"].format(first_name, last_name)
        self._record("name", (first_name, last_name), result)
        return result

    def format_address(self, street, city, state, zip_code):
        result = self.formatters["address"].format(street, city, state, zip_code)
        self._record("address", (street, city, state, zip_code), result)
        return result

    def format_phone_number(self, phone):
        try:
            result = self.formatters["phone"].format(phone)
        except ValueError as e:
            self._record("phone", (phone,), error=str(e))
            return phone
        self._record("phone", (phone,), result)
        return result

    def set_phone_format(self, fmt):
        self.formatters["phone"].set_format(fmt)

    def statistics(self):
        return {name: formatter.statistics() for name, formatter in self.formatters.items()}


def main():
    manager = TextFormatterManager()
    print(f"Formatted name: {manager.format_name('john', 'doe')}")
    print(f"Formatted address: {manager.format_address('123 Main St', 'Anytown', 'CA', '12345')}")
    print(f"Formatted phone: {manager.format_phone_number('1234567890')}")

    manager.set_phone_format("US")  # already the default
    print(f"Formatting history: {manager.history}")
    print(f"Formatting statistics: {manager.statistics()}")


if __name__ == "__main__":
    main()
