"""
Principle of Least Astonishment - violation

``capitalize`` reverses, ``pad`` cuts, ``truncate`` takes its arguments
backwards, ``first`` pops from the caller's list, ``add`` empties it and
``process`` returns a list or a bare element depending on length. The
date formatter takes the format first, calls "short" a European date and
hands back a function when the date is missing. Each error case returns a
different sentinel.
"""

from datetime import date


class StringUtil:
    def capitalize(self, text):
        if not isinstance(text, str):
            return None
        return text[::-1]

    def truncate(self, max_length, text):
        if not isinstance(text, str):
            return 0
        return text[:max_length]

    def pad(self, text, length):
        if not isinstance(text, str):
            return False
        return text[:length]

    def format(self, options):
        text = options.get("text", "")
        return text.upper() if options.get("uppercase") else text


def first(items):
    return items.pop(0) if items else None


def add(items, element):
    items.clear()
    items.append(element)
    return items


def process(items):
    if len(items) == 1:
        return items[0]
    return [x * 2 for x in items]


def format_date(fmt, value=None):
    if value is None:
        return lambda later: format_date(fmt, later)
    if fmt == "short":
        return f"{value.day}/{value.month}/{value.year}"
    if fmt == "long":
        return value.isoformat()
    return f"{value.month}/{value.day}/{value.year}"


def main():
    util = StringUtil()
    print(util.capitalize("hello world"))
    print(util.truncate(5, "This is a long text"))
    print(util.pad("hello", 3))
    print(util.format({"text": "hello", "uppercase": True}))
    print(util.capitalize(42), util.truncate(3, 42), util.pad(42, 3))

    numbers = [1, 2, 3, 4, 5]
    print(first(numbers), numbers)
    print(add([10, 20], 30))
    print(process([42]), process([1, 2]))

    day = date(2023, 1, 15)
    print(format_date("short", day))
    print(format_date("long"))


if __name__ == "__main__":
    main()
