"""
Principle of Least Astonishment - correct implementation

Every helper takes the thing it works on first, does what its name says,
leaves its arguments untouched and always returns the same type. Bad
input fails loudly with the same exception everywhere instead of each
helper inventing its own sentinel.
"""

from datetime import date
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

DATE_FORMATS = {
    "MM/DD/YYYY": "%m/%d/%Y",
    "DD/MM/YYYY": "%d/%m/%Y",
    "YYYY-MM-DD": "%Y-%m-%d",
}


def _require_str(value) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value


def capitalize(text: str) -> str:
    text = _require_str(text)
    return text[:1].upper() + text[1:]


def truncate(text: str, max_length: int) -> str:
    text = _require_str(text)
    return text if len(text) <= max_length else text[:max_length] + "..."


def pad_left(text: str, length: int, fill: str = " ") -> str:
    return _require_str(text).rjust(length, fill)


def pad_right(text: str, length: int, fill: str = " ") -> str:
    return _require_str(text).ljust(length, fill)


def first(items: Sequence[T]) -> Optional[T]:
    return items[0] if items else None


def last(items: Sequence[T]) -> Optional[T]:
    return items[-1] if items else None


def positives(numbers: Sequence[float]) -> List[float]:
    return [n for n in numbers if n > 0]


def doubled(numbers: Sequence[float]) -> List[float]:
    return [n * 2 for n in numbers]


def format_date(value: date, fmt: str = "MM/DD/YYYY") -> str:
    """Format ``value``; an unknown format raises ValueError rather than guessing."""
    if fmt not in DATE_FORMATS:
        raise ValueError(f"Unknown date format {fmt!r}; expected one of {', '.join(DATE_FORMATS)}")
    return value.strftime(DATE_FORMATS[fmt])


def main():
    print(capitalize("hello world"))
    print(truncate("This is a long text", 10))
    print(pad_left("42", 5, "0"))
    print(pad_right("ab", 4, "."))

    numbers = [1, 2, 3, 4, 5]
    print(first(numbers), last(numbers), first([]))
    print(positives([-1, 0, 2, -3, 4]))
    print(doubled(numbers))
    print(f"Original list untouched: {numbers}")

    day = date(2023, 1, 15)
    print(format_date(day))
    print(format_date(day, "YYYY-MM-DD"))

    for bad_call in (lambda: capitalize(None), lambda: format_date(day, "short")):
        try:
            bad_call()
        except (TypeError, ValueError) as e:
            print(f"{type(e).__name__}: {e}")


if __name__ == "__main__":
    main()
