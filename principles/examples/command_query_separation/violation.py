"""
Command-Query Separation - violation

Commands return the new balance, reading the history records an access
event and hands out the live list, asking for the balance can quietly add
interest, and methods return a different type depending on the branch taken.
"""

from datetime import datetime


class BankAccount:
    def __init__(self, account_number, owner_name, initial_balance=0):
        self.account_number = account_number
        self.owner_name = owner_name
        self.balance = initial_balance
        self.transactions = []
        if initial_balance > 0:
            self._record("Initial deposit", initial_balance)

    def _record(self, kind, amount):
        self.transactions.append({"type": kind, "amount": amount, "at": datetime.now()})

    def deposit(self, amount):
        if amount <= 0:
            raise ValueError("Deposit amount must be positive")
        self.balance += amount
        self._record("Deposit", amount)
        return self.balance

    def withdraw(self, amount):
        if amount <= 0:
            raise ValueError("Withdrawal amount must be positive")
        if amount > self.balance:
            raise ValueError("Insufficient funds")
        self.balance -= amount
        self._record("Withdrawal", amount)
        return self.balance

    def get_transaction_history(self):
        # reading the history changes it
        self._record("History accessed", 0)
        return self.transactions

    def get_balance_with_possible_interest(self, add_interest_if_eligible=False):
        if add_interest_if_eligible and self.balance >= 1000:
            old_balance = self.balance
            interest = self.balance * 0.05
            self.balance += interest
            self._record("Interest added", interest)
            return {"oldBalance": old_balance, "interestAdded": interest, "newBalance": self.balance}
        return self.balance

    def change_owner_name(self, new_name):
        if not new_name or not isinstance(new_name, str):
            return False
        if not new_name.strip():
            return "Invalid name"
        old_name = self.owner_name
        self.owner_name = new_name
        self._record("Owner name changed", 0)
        if old_name == new_name:
            return "No change needed"
        return {"success": True, "oldName": old_name, "newName": new_name}

    def perform_monthly_maintenance(self):
        fee = 0
        if self.balance < 500:
            fee = 25
            self.balance -= fee
        interest = 0
        if self.balance > 1000:
            interest = self.balance * 0.03
            self.balance += interest
        count = len(self.transactions)
        if count > 10:
            self.transactions = self.transactions[-10:]
        return {"maintenanceFee": fee, "interestAdded": interest, "newBalance": self.balance,
                "transactionsPruned": count - len(self.transactions)}


def main():
    print("Creating a new bank account:")
    account = BankAccount("12345678", "John Doe", 1000)

    print("\nPerforming transactions:")
    print("Depositing $500...")
    print(f"New balance returned from deposit: ${account.deposit(500)}")
    print("Withdrawing $200...")
    print(f"New balance returned from withdrawal: ${account.withdraw(200)}")

    print("\nGetting transaction history (which also logs an access event):")
    history = account.get_transaction_history()
    print(f"Transaction count: {len(history)}")
    print(f"Asking again: {len(account.get_transaction_history())}")

    print("\nModifying the returned history list (which changes the account):")
    history.append({"type": "EXTERNAL MODIFICATION", "amount": 999, "at": datetime.now()})

    print("\nGetting balance with possible interest:")
    print("Result:", account.get_balance_with_possible_interest(True))
    print("Same call again:", account.get_balance_with_possible_interest(True))

    print("\nChanging owner name:")
    print("Result:", account.change_owner_name("Jane Doe"))
    print("Result for an empty name:", account.change_owner_name(""))
    print("Result for a blank name:", account.change_owner_name("   "))

    print("\nPerforming monthly maintenance:")
    print("Result:", account.perform_monthly_maintenance())

    print("\nFinal transaction history:")
    for index, transaction in enumerate(account.get_transaction_history(), 1):
        print(f"{index}. {transaction['type']}: ${transaction['amount']:.2f}")


if __name__ == "__main__":
    main()
