"""
Design by Contract - violation

Nothing is promised and nothing is checked. Bad input is sometimes fixed
up, sometimes ignored and sometimes accepted; small deposits are not
recorded; reading the balance writes to the history; an account can be
closed with money in it and still take deposits.
"""

from datetime import datetime


class BankAccount:
    def __init__(self, account_number, owner_name, initial_balance=0):
        self.account_number = account_number
        self.owner_name = owner_name
        if initial_balance < 0:
            print("Warning: negative initial balance provided, setting to 0")
            self.balance = 0
        else:
            self.balance = initial_balance
        self.transactions = []
        self.is_active = True
        if initial_balance > 0:
            self._record("Initial deposit", initial_balance)

    def _record(self, kind, amount):
        self.transactions.append({"type": kind, "amount": amount, "at": datetime.now()})

    def deposit(self, amount):
        if amount <= 0:
            print("Deposit amount must be positive")
            return self.balance
        self.balance += amount
        if amount > 100:
            # small deposits never reach the history
            self._record("Deposit", amount)
        return self.balance

    def withdraw(self, amount):
        if amount <= 0:
            return False
        if self.balance < amount:
            raise ValueError("Insufficient funds")
        self.balance -= amount
        self._record("Withdrawal", amount)
        return True

    def close_account(self):
        self.is_active = False
        return True

    def transfer_to(self, target, amount):
        if amount <= 0 or self.balance < amount:
            print("Transfer refused")
            return False
        self.balance -= amount
        target.deposit(amount)
        self._record("Transfer out", amount)
        return True

    def get_balance(self):
        self._record("Balance checked", 0)
        return self.balance

    def get_transaction_history(self):
        return self.transactions

    def apply_interest(self, rate):
        interest = self.balance * rate
        self.balance += interest
        return interest


def main():
    print("Creating accounts:")
    account1 = BankAccount("", "", -1000)  # empty id and owner accepted
    print(f"Account 1 Balance: ${account1.get_balance()}")
    account2 = BankAccount("12345678", "Jane Doe", 500)
    print(f"Account 2 Balance: ${account2.get_balance()}")

    print("\nDepositing $50 (not recorded):")
    account1.deposit(50)
    print(f"New Balance: ${account1.get_balance()}")

    print("\nWithdrawing $0:")
    print(f"Withdrawal successful: {account1.withdraw(0)} (no reason given)")

    print("\nDirectly modifying balance...")
    account1.balance += 1000
    print(f"Modified Balance: ${account1.get_balance()}")

    print("\nModifying transaction history...")
    account1.get_transaction_history().append({"type": "FAKE TRANSACTION", "amount": 9999, "at": datetime.now()})
    for index, transaction in enumerate(account1.get_transaction_history(), 1):
        print(f"{index}. {transaction['type']}: ${transaction['amount']}")

    print("\nTransferring between accounts...")
    account1.transfer_to(account2, 200)
    print(f"Account 1 Balance: ${account1.get_balance()}")
    print(f"Account 2 Balance: ${account2.get_balance()}")

    print("\nClosing account with non-zero balance...")
    account1.close_account()
    print(f"Account closed: {not account1.is_active}, remaining balance: ${account1.balance}")

    print("\nDepositing to closed account...")
    account1.deposit(100)
    print(f"New Balance: ${account1.balance}")

    print("\nApplying NaN interest:")
    account1.apply_interest(float("nan"))
    print(f"Balance is now: {account1.balance}")
    print(f"Withdrawing $10 from a NaN balance: {account1.withdraw(10)}")


if __name__ == "__main__":
    main()
