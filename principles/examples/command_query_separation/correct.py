"""
Command-Query Separation - correct implementation

BankAccount exposes commands (deposit, withdraw, change_owner_name) that
return None and queries (balance, owner_name, transaction_history,
has_sufficient_funds) that never modify the account. Queries can be repeated
freely and the history is handed out as a copy.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Transaction:
    kind: str
    amount: float


class BankAccount:
    def __init__(self, account_number: str, owner_name: str, initial_balance: float = 0):
        self._account_number = account_number
        self._owner_name = owner_name
        self._balance = initial_balance
        self._transactions: List[Transaction] = []
        if initial_balance > 0:
            self._transactions.append(Transaction("Initial deposit", initial_balance))

    # Commands

    def deposit(self, amount: float) -> None:
        if amount <= 0:
            raise ValueError("Deposit amount must be positive")
        self._balance += amount
        self._transactions.append(Transaction("Deposit", amount))

    def withdraw(self, amount: float) -> None:
        if amount <= 0:
            raise ValueError("Withdrawal amount must be positive")
        if amount > self._balance:
            raise ValueError("Insufficient funds")
        self._balance -= amount
        self._transactions.append(Transaction("Withdrawal", amount))

    def change_owner_name(self, new_name: str) -> None:
        if not isinstance(new_name, str) or not new_name.strip():
            raise ValueError("Valid name is required")
        self._owner_name = new_name
        self._transactions.append(Transaction("Owner name changed", 0))

    # Queries

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def owner_name(self) -> str:
        return self._owner_name

    @property
    def balance(self) -> float:
        return self._balance

    def transaction_history(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    def has_sufficient_funds(self, amount: float) -> bool:
        return self._balance >= amount


def main():
    print("Creating a new bank account:")
    account = BankAccount("12345678", "John Doe", 1000)
    print(f"Account Number: {account.account_number}")
    print(f"Owner: {account.owner_name}")
    print(f"Initial Balance: ${account.balance}")

    print("\nPerforming transactions:")
    print("Depositing $500...")
    account.deposit(500)
    print("Withdrawing $200...")
    account.withdraw(200)
    print("Changing owner name...")
    account.change_owner_name("John Smith")

    print("\nUpdated account information:")
    print(f"Owner: {account.owner_name}")
    print(f"Current Balance: ${account.balance}")

    amount = 2000
    print(f"\nCan withdraw ${amount}? {'Yes' if account.has_sufficient_funds(amount) else 'No'}")

    print("\nTransaction History:")
    for index, transaction in enumerate(account.transaction_history(), 1):
        print(f"{index}. {transaction.kind}: ${transaction.amount}")

    first = account.transaction_history()
    second = account.transaction_history()
    print(f"\nAsking twice gives the same answer: {first == second}")


if __name__ == "__main__":
    main()
