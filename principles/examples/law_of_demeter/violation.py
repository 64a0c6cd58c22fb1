"""
Law of Demeter - violation

OrderProcessor pulls the wallet and the address out of the customer and
works on them directly: it reads each address field to format a label and
checks the balance before removing money itself. Any change to how a
customer stores money or addresses breaks the processor.
"""


class Wallet:
    def __init__(self, amount):
        self.amount = amount

    def remove_money(self, amount):
        if amount > self.amount:
            return False
        self.amount -= amount
        return True

    def get_balance(self):
        return self.amount


class Address:
    def __init__(self, street, city, zip_code):
        self.street = street
        self.city = city
        self.zip_code = zip_code


class Customer:
    def __init__(self, name):
        self.name = name
        self.wallet = Wallet(100)
        self.address = Address("123 Main St", "Anytown", "12345")

    def get_wallet(self):
        return self.wallet

    def get_address(self):
        return self.address


class Item:
    def __init__(self, name, price):
        self.name = name
        self.price = price


class Order:
    def __init__(self):
        self.items = []
        self.status = "New"

    def total(self):
        return sum(item.price for item in self.items)


class OrderProcessor:
    def process_order(self, customer, order):
        print(f"Processing order for {customer.name}")
        address = customer.get_address()
        print(f"Shipping to: {address.street}, {address.city}, {address.zip_code}")
        total = order.total()
        print(f"Order total: ${total:.2f}")
        if customer.get_wallet().get_balance() >= total:
            customer.get_wallet().remove_money(total)
            print("Payment successful")
            order.status = "Paid"
            return True
        print("Payment failed")
        order.status = "Payment Failed"
        return False


def main():
    customer = Customer("John Doe")
    order = Order()
    order.items.append(Item("Book", 15.99))
    order.items.append(Item("Coffee Mug", 8.99))
    OrderProcessor().process_order(customer, order)
    print(f"Order status: {order.status}")

    print("\nThe customer now keeps several wallets; the processor still assumes one:")
    customer.wallet = [Wallet(20), Wallet(80)]
    try:
        OrderProcessor().process_order(customer, order)
    except AttributeError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
