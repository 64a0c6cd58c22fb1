"""
Recoverable Change - violation

The column is renamed in place, so the previous release crashes on its
first query and the untested down migration cannot bring the data back.
Feature flags have no owner or expiry and nest inside each other. The
order workflow charges the card and then fails on the email with no
compensation, and rolling anything back needs three approvals and a
meeting.
"""

import sqlite3


class DestructiveMigration:
    def __init__(self, conn):
        self.conn = conn

    def rename_email_column(self):
        self.conn.execute("ALTER TABLE users RENAME COLUMN email TO contact_email")

    def down(self):
        # written once, never run
        self.conn.execute("ALTER TABLE users RENAME COLUMN contact_mail TO email")


FLAGS = {"new_checkout": True, "new_checkout_v2": True, "fast_path": False, "temp_fix_2019": True}


def checkout_path():
    if FLAGS["new_checkout"]:
        if FLAGS["new_checkout_v2"]:
            return "v2-fast" if FLAGS["fast_path"] else "v2"
        return "v1-new"
    return "legacy" if FLAGS["temp_fix_2019"] else "legacy-unfixed"


class IrreversibleOrderProcessor:
    def __init__(self):
        self.effects = []

    def process_order(self, order_id):
        self.effects.append(f"inventory reserved for {order_id}")
        self.effects.append(f"card charged for {order_id}")
        self.effects.append(f"order {order_id} saved")
        raise ConnectionError("email service unavailable")


class CoordinatedRollback:
    APPROVERS = ("engineering manager", "release manager", "DBA")

    def rollback(self, approvals):
        missing = [a for a in self.APPROVERS if a not in approvals]
        if missing:
            return f"Rollback blocked, waiting for: {', '.join(missing)}"
        return "Rollback scheduled after the coordination meeting"


def main():
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, email TEXT)")
    conn.execute("INSERT INTO users (email) VALUES ('a@example.com')")
    migration = DestructiveMigration(conn)
    migration.rename_email_column()

    print("Previous release queries the old column:")
    try:
        conn.execute("SELECT email FROM users").fetchall()
    except sqlite3.OperationalError as e:
        print(f"  crash: {e}")
    print("Running the down migration:")
    try:
        migration.down()
    except sqlite3.OperationalError as e:
        print(f"  down migration failed too: {e}")
    conn.close()

    print(f"\nCheckout path with four ownerless flags: {checkout_path()}")
    print("Which flags can be deleted? Nobody knows who owns temp_fix_2019.")

    processor = IrreversibleOrderProcessor()
    try:
        processor.process_order("ORD-1")
    except ConnectionError as e:
        print(f"\nOrder failed: {e}")
    print(f"Left behind with no undo: {processor.effects}")

    print(f"\n3 AM rollback: {CoordinatedRollback().rollback(approvals=['DBA'])}")


if __name__ == "__main__":
    main()
