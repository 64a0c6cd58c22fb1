"""
Occam's Razor - correct implementation

The requirement is to format a name, an address and a US phone number.
Three plain functions do exactly that. Anything that is not a ten digit
number is returned unchanged rather than rejected.
"""


def format_name(first_name: str, last_name: str) -> str:
    return f"{first_name.capitalize()} {last_name.capitalize()}"


def format_address(street: str, city: str, state: str, zip_code: str) -> str:
    return f"{street}, {city}, {state} {zip_code}"


def format_phone_number(phone: str) -> str:
    if len(phone) != 10 or not phone.isdigit():
        return phone
    return f"({phone[:3]}) {phone[3:6]}-{phone[6:]}"


def main():
    print(f"Formatted name: {format_name('john', 'doe')}")
    print(f"Formatted address: {format_address('123 Main St', 'Anytown', 'CA', '12345')}")
    print(f"Formatted phone: {format_phone_number('1234567890')}")
    print(f"Unrecognised phone: {format_phone_number('+44 20 7946 0958')}")


if __name__ == "__main__":
    main()
