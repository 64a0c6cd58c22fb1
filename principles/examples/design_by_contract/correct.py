"""
Design by Contract - correct implementation

BankAccount checks preconditions on entry, postconditions on exit and its
class invariant around every public method. A broken contract raises
ContractViolation naming the clause, at the point where it was broken.
"""

import functools
import math
from dataclasses import dataclass
from typing import List, Tuple


class ContractViolation(Exception):
    pass


def require(condition: bool, message: str) -> None:
    if not condition:
        raise ContractViolation(f"Contract violation: {message}")


ensure = require


def checks_invariants(method):
    """Run the instance's invariant before and after ``method``."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        self._check_invariants()
        result = method(self, *args, **kwargs)
        self._check_invariants()
        return result

    return wrapper


def _is_amount(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


@dataclass(frozen=True)
class Transaction:
    kind: str
    amount: float


class BankAccount:
    def __init__(self, account_number: str, owner_name: str, initial_balance: float = 0):
        require(isinstance(account_number, str) and account_number != "",
                "Account number must be a non-empty string")
        require(isinstance(owner_name, str) and owner_name.strip() != "",
                "Owner name must be a non-empty string")
        require(_is_amount(initial_balance) and initial_balance >= 0,
                "Initial balance must be a non-negative number")

        self._account_number = account_number
        self._owner_name = owner_name
        self._balance = initial_balance
        self._transactions: List[Transaction] = []
        self._active = True
        if initial_balance > 0:
            self._transactions.append(Transaction("Initial deposit", initial_balance))

        ensure(self._balance == initial_balance, "Balance was not set correctly")
        self._check_invariants()

    def _check_invariants(self) -> None:
        require(isinstance(self._balance, (int, float)) and math.isfinite(self._balance),
                "Balance must remain a finite number")
        require(self._balance >= 0, "Balance must never be negative")
        require(self._active or self._balance == 0, "A closed account must hold no money")

    @checks_invariants
    def deposit(self, amount: float) -> None:
        require(self._active, "Account must be active to make deposits")
        require(_is_amount(amount), "Deposit amount must be a finite number")
        require(amount > 0, "Deposit amount must be positive")
        old_balance = self._balance

        self._balance += amount
        self._transactions.append(Transaction("Deposit", amount))

        ensure(self._balance == old_balance + amount, "Balance must increase by exactly the deposit amount")
        ensure(self._transactions[-1] == Transaction("Deposit", amount), "Deposit must be recorded")

    @checks_invariants
    def withdraw(self, amount: float) -> None:
        require(self._active, "Account must be active to make withdrawals")
        require(_is_amount(amount), "Withdrawal amount must be a finite number")
        require(amount > 0, "Withdrawal amount must be positive")
        require(self._balance >= amount, "Insufficient funds for withdrawal")
        old_balance = self._balance
        old_count = len(self._transactions)

        self._balance -= amount
        self._transactions.append(Transaction("Withdrawal", amount))

        ensure(self._balance == old_balance - amount, "Balance must decrease by exactly the withdrawal amount")
        ensure(len(self._transactions) == old_count + 1, "Exactly one transaction must be recorded")

    @checks_invariants
    def close(self) -> None:
        require(self._active, "Account must be active to be closed")
        require(self._balance == 0, "Account balance must be zero to close the account")
        self._active = False
        self._transactions.append(Transaction("Account closed", 0))
        ensure(not self._active, "Account must be inactive after closing")

    @property
    def balance(self) -> float:
        return self._balance

    @property
    def active(self) -> bool:
        return self._active

    def transaction_history(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)


def main():
    print("Creating a new bank account:")
    account = BankAccount("12345678", "John Doe", 1000)
    print(f"Initial Balance: ${account.balance}")

    print("\nPerforming transactions:")
    try:
        print("Depositing $500...")
        account.deposit(500)
        print(f"New Balance: ${account.balance}")
        print("\nWithdrawing $200...")
        account.withdraw(200)
        print(f"New Balance: ${account.balance}")
        print("\nAttempting to withdraw more than the balance...")
        account.withdraw(2000)
    except ContractViolation as e:
        print(f"Error: {e}")

    for bad in ("100", float("nan"), -5):
        try:
            account.deposit(bad)
        except ContractViolation as e:
            print(f"Deposit of {bad!r} refused. {e}")

    print("\nTransaction History:")
    for index, transaction in enumerate(account.transaction_history(), 1):
        print(f"{index}. {transaction.kind}: ${transaction.amount}")

    print("\nAttempting to close account with non-zero balance:")
    try:
        account.close()
    except ContractViolation as e:
        print(f"Error: {e}")

    print("\nWithdrawing remaining balance...")
    account.withdraw(1300)
    print(f"New Balance: ${account.balance}")

    print("\nClosing account...")
    account.close()
    print(f"Account active: {account.active}")

    print("\nDepositing to the closed account:")
    try:
        account.deposit(100)
    except ContractViolation as e:
        print(f"Error: {e}")

    print("\nCreating an account with an empty owner:")
    try:
        BankAccount("1", "  ")
    except ContractViolation as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
