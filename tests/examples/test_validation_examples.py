"""
Behaviour of the input-handling examples: boundary validation, contracts,
liberal parsing, failing fast and result values.
"""

import json
import sqlite3

import pytest

from principles.examples.boundary_defense.correct import (
    OrderService,
    PaymentService,
    UserService,
    ValidationError,
    require_age,
    require_email,
    require_id,
)
from principles.examples.design_by_contract.correct import BankAccount, ContractViolation
from principles.examples.exceptions_should_be_exceptional.correct import (
    Result,
    UserDatabase,
    UserDataProcessor,
    age_group,
)
from principles.examples.fail_fast.correct import RegistrationError, UserRegistration
from principles.examples.postels_robustness.correct import (
    Response,
    UserProfileService,
    normalize_age,
    normalize_email,
    normalize_name,
    normalize_preferences,
)


# boundary defense

@pytest.mark.parametrize("value, expected", [(42, 42), ("42", 42), (" 7 ", 7)])
def test_require_id_accepts_positive_integers(value, expected):
    assert require_id(value) == expected


@pytest.mark.parametrize("value", [True, 0, -1, "-1", "1; DROP TABLE users", None, 3.5, "abc"])
def test_require_id_rejects_everything_else(value):
    with pytest.raises(ValidationError):
        require_id(value)


def test_require_email_normalises_and_rejects_unsafe_input():
    assert require_email("Ann@Example.com") == "ann@example.com"

    for bad in ("not-an-email", "a@b.c;rm -rf", "<script>@x.io", 42, None):
        with pytest.raises(ValidationError):
            require_email(bad)


def test_require_age_bounds():
    assert require_age("30") == 30
    assert require_age(0) == 0
    for bad in (151, -1, True, "thirty", 30.5):
        with pytest.raises(ValidationError):
            require_age(bad)


def test_create_user_never_trusts_client_role():
    service = UserService()

    user = service.create_user({"id": "5", "email": "bob@example.com", "age": 40,
                                "role": "admin", "is_admin": True})

    assert user.role == "user"
    assert service.users[5] is user


def test_load_from_row_rejects_corrupt_role(capsys):
    with pytest.raises(ValidationError, match="data integrity"):
        UserService().load_from_row({"id": 1, "email": "a@b.co", "age": 20, "role": "superuser"})


def test_import_orders_skips_invalid_entries():
    service = OrderService()
    content = json.dumps([
        {"id": 1, "amount": 9.5, "items": ["book"], "userId": 3},
        {"id": "x", "amount": 1, "items": [], "userId": 3},
        {"id": 2, "amount": -4, "items": ["pen"], "userId": 3},
        "not an object",
    ])

    assert service.import_orders(content) == 1
    assert service.orders[0].items == ["book"]

    with pytest.raises(ValidationError):
        service.import_orders("{broken")
    with pytest.raises(ValidationError):
        service.import_orders('{"id": 1}')


def test_process_message_checks_status():
    service = OrderService()

    order = service.process_message({"payload": {"id": 9, "total": "12.5", "status": "pending"}})
    assert order.amount == 12.5
    assert order.user_id == 0

    with pytest.raises(ValidationError):
        service.process_message({"payload": {"id": 9, "total": 1, "status": "hacked"}})
    with pytest.raises(ValidationError):
        service.process_message("payload")


def test_payment_service_stores_only_last_four_digits():
    db = sqlite3.connect(":memory:")
    db.execute("CREATE TABLE payments (id INTEGER PRIMARY KEY, user_id INTEGER, amount REAL, card TEXT)")
    service = PaymentService(db)

    row_id = service.process_payment("3", "19.99", "4111 1111 1111 1234")

    assert db.execute("SELECT user_id, amount, card FROM payments WHERE id = ?", (row_id,)).fetchone() == (
        3, 19.99, "1234")
    with pytest.raises(ValidationError):
        service.process_payment("3", "19.99", "1234")
    assert service.receipt_command(7, "a@b.co") == ["generate-pdf", "--order", "7", "--email", "a@b.co"]


# design by contract

def test_bank_account_preconditions():
    account = BankAccount("ACC-1", "Ann", 100)

    for call in (lambda: account.withdraw(150), lambda: account.deposit(-5),
                 lambda: account.deposit(True), lambda: account.deposit(float("inf")),
                 lambda: account.close()):
        with pytest.raises(ContractViolation):
            call()

    assert account.balance == 100
    assert len(account.transaction_history()) == 1


def test_bank_account_constructor_contract():
    with pytest.raises(ContractViolation):
        BankAccount("", "Ann")
    with pytest.raises(ContractViolation):
        BankAccount("ACC-2", "   ")
    with pytest.raises(ContractViolation):
        BankAccount("ACC-2", "Ann", -1)


def test_bank_account_lifecycle():
    account = BankAccount("ACC-1", "Ann", 50)
    account.deposit(25)
    account.withdraw(75)
    account.close()

    assert account.active is False
    assert [t.kind for t in account.transaction_history()] == [
        "Initial deposit", "Deposit", "Withdrawal", "Account closed"]
    with pytest.raises(ContractViolation, match="active"):
        account.deposit(1)


def test_invariant_catches_tampering():
    account = BankAccount("ACC-1", "Ann", 10)
    account._balance = -1

    with pytest.raises(ContractViolation, match="never be negative"):
        account.deposit(1)


# postel's robustness

def test_normalize_name():
    assert normalize_name("  ada   lovelace ") == "ada lovelace"
    assert normalize_name(None) == "Anonymous User"
    assert normalize_name("   ") == "Anonymous User"
    assert normalize_name(42) == "42"


def test_normalize_email():
    assert normalize_email(" Ann@Example.COM ") == "ann@example.com"
    with pytest.raises(ValueError, match="required"):
        normalize_email("")
    with pytest.raises(ValueError, match="Invalid"):
        normalize_email("ann at example")


@pytest.mark.parametrize(
    "raw, expected",
    [("29.6", 30), (41, 41), ("abc", None), (-1, None), (float("nan"), None),
     (float("inf"), None), (True, None), (None, None)],
)
def test_normalize_age(raw, expected):
    assert normalize_age(raw) == expected


def test_normalize_preferences():
    assert normalize_preferences('{"theme": "dark"}') == {"theme": "dark"}
    assert normalize_preferences({"lang": "fi"}) == {"lang": "fi"}
    assert normalize_preferences("not json") == {}
    assert normalize_preferences(["theme"]) == {}


def test_profile_service_returns_one_response_shape():
    service = UserProfileService()

    created = service.create_user({"email": "A@B.COM", "name": "  Bob ", "age": "41"})
    refused = service.create_user({"email": "nope"})
    missing = service.get_user_profile("ghost")

    assert created == Response(True, user={"id": "user_0001", "name": "Bob", "email": "a@b.com"})
    assert refused == Response(False, error="Invalid email format")
    assert missing == Response(False, error="User not found")
    assert service.get_user_profile("user_0001").user["age"] == 41
    assert service.update_email("user_0001", " NEW@B.COM ").user["email"] == "new@b.com"


# fail fast

def test_invalid_registration_consumes_nothing():
    registration = UserRegistration()

    with pytest.raises(RegistrationError, match="uppercase"):
        registration.register_user({"username": "ann", "email": "ann@example.com", "password": "lowercase1"})
    with pytest.raises(RegistrationError, match="Email is required"):
        registration.register_user({"username": "ann", "password": "Secret123"})

    assert registration.saved == []
    user = registration.register_user({"username": "ann", "email": "ann@example.com", "password": "Secret123"})
    assert user["id"] == "user_0001"


# exceptions should be exceptional

def test_expected_outcomes_are_results():
    processor = UserDataProcessor(UserDatabase(failure_rate=0))

    assert processor.process_user_data() == Result.fail("User ID is required")
    assert processor.process_user_data("99") == Result.fail("User not found")

    found = processor.process_user_data("1")
    assert found.success is True
    assert found.data["age_group"] == "adult"

    assert processor.save_user_report("99", {"x": 1}) == Result.fail("User not found")
    assert processor.save_user_report("1", {"x": 1}).data == "/reports/user_1_1.json"


def test_age_groups():
    assert [age_group(a) for a in (17, 18, 64, 65)] == ["minor", "adult", "adult", "senior"]
