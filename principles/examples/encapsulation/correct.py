"""
Encapsulation - correct implementation

State lives in underscore attributes behind read-only properties, slots stop
callers from bolting on new attributes, deposit and withdraw validate every
change, and the history is handed out as an immutable copy.
"""

import random
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Transaction:
    kind: str
    amount: float
    balance: float


class BankAccount:
    __slots__ = ("_account_number", "_owner", "_balance", "_history")

    def __init__(self, owner: str, initial_balance: float = 0):
        if initial_balance < 0:
            raise ValueError("Initial balance cannot be negative")
        self._account_number = f"ACCT-{random.randrange(10_000_000):07d}"
        self._owner = owner
        self._balance = initial_balance
        self._history = []
        if initial_balance > 0:
            self._record("Initial deposit", initial_balance)

    def _record(self, kind: str, amount: float) -> None:
        self._history.append(Transaction(kind, amount, self._balance))

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def balance(self) -> float:
        return self._balance

    def deposit(self, amount: float) -> float:
        if amount <= 0:
            raise ValueError("Deposit amount must be positive")
        self._balance += amount
        self._record("Deposit", amount)
        return self._balance

    def withdraw(self, amount: float) -> float:
        if amount <= 0:
            raise ValueError("Withdrawal amount must be positive")
        if amount > self._balance:
            raise ValueError("Insufficient funds")
        self._balance -= amount
        self._record("Withdrawal", -amount)
        return self._balance

    def transaction_history(self) -> Tuple[Transaction, ...]:
        return tuple(self._history)

    def print_statement(self) -> None:
        print(f"\nAccount Statement for {self._account_number}")
        print(f"Owner: {self._owner}")
        print(f"Current Balance: ${self._balance:.2f}")
        print("\nTransaction History:")
        for index, t in enumerate(self._history, 1):
            print(f"{index}. {t.kind}: ${abs(t.amount):.2f} | Balance: ${t.balance:.2f}")


def main():
    account = BankAccount("John Doe", 1000)
    print(f"Account Number: {account.account_number}")
    print(f"Initial Balance: ${account.balance}")
    print(f"Owner: {account.owner}")

    account.deposit(500)
    print(f"Balance after deposit: ${account.balance}")
    account.withdraw(200)
    print(f"Balance after withdrawal: ${account.balance}")

    print("\nTrying to set the balance directly:")
    try:
        account.balance = 10_000_000
    except AttributeError as e:
        print(f"Error: {e}")

    print("Trying to attach a new attribute:")
    try:
        account.overdraft_limit = 1_000_000
    except AttributeError as e:
        print(f"Error: {e}")

    print("Trying to overdraw:")
    try:
        account.withdraw(20_000_000)
    except ValueError as e:
        print(f"Error: {e}")

    print("Trying to append to the history:")
    history = account.transaction_history()
    try:
        history.append(Transaction("Fake deposit", 1_000_000, 1_000_000))
    except AttributeError as e:
        print(f"Error: {e}")

    account.print_statement()


if __name__ == "__main__":
    main()
