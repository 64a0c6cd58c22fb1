"""
Encapsulation - violation

Every field is public and nothing is validated. Callers set the balance,
overdraw without limit, forge history entries and even replace the
withdraw method on the instance.
"""

import random
import types
from datetime import datetime


class BankAccount:
    def __init__(self, owner, initial_balance=0):
        self.account_number = f"ACCT-{random.randrange(10_000_000):07d}"
        self.balance = initial_balance
        self.owner = owner
        self.transaction_history = []
        if initial_balance > 0:
            self.add_transaction("Initial deposit", initial_balance)

    def add_transaction(self, kind, amount):
        self.transaction_history.append(
            {"type": kind, "amount": amount, "balance": self.balance, "date": datetime.now()}
        )

    def deposit(self, amount):
        self.balance += amount
        self.add_transaction("Deposit", amount)
        return self.balance

    def withdraw(self, amount):
        self.balance -= amount
        self.add_transaction("Withdrawal", -amount)
        return self.balance

    def print_statement(self):
        print(f"\nAccount Statement for {self.account_number}")
        print(f"Owner: {self.owner}")
        print(f"Current Balance: ${self.balance:.2f}")
        print("\nTransaction History:")
        for index, t in enumerate(self.transaction_history, 1):
            print(f"{index}. {t['type']}: ${abs(t['amount']):.2f} | Balance: ${t['balance']:.2f}")


def main():
    account = BankAccount("John Doe", 1000)
    print(f"Account Number: {account.account_number}")
    print(f"Initial Balance: ${account.balance}")

    account.deposit(500)
    print(f"Balance after deposit: ${account.balance}")

    account.balance = 10_000_000
    print(f"Balance after direct modification: ${account.balance}")

    account.balance = -5000
    print(f"Balance after setting negative amount: ${account.balance}")

    account.withdraw(20_000_000)
    print(f"Balance after excessive withdrawal: ${account.balance}")

    account.transaction_history.append(
        {"type": "Fake deposit", "amount": 1_000_000, "balance": 1_000_000, "date": datetime.now()}
    )
    account.add_transaction("Unauthorized transfer", -500_000)

    def intercepted(self, amount):
        print(f"Intercepted withdrawal of ${amount}")
        self.add_transaction("Withdrawal attempt", 0)
        return self.balance

    account.withdraw = types.MethodType(intercepted, account)
    account.withdraw(100)
    print(f"Balance after intercepted withdrawal: ${account.balance}")

    account.print_statement()


if __name__ == "__main__":
    main()
