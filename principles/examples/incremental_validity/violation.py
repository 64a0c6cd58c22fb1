"""
Incremental Validity - violation

Long operations run as one all-or-nothing unit with progress kept only in
memory. A crash near the end of a batch rolls back everything, an upload
restarts from byte zero, a form loses every step on refresh and a multi-step
order stops halfway with payment taken and no shipment.
"""


class Crash(Exception):
    pass


class InMemoryDatabase:
    def __init__(self):
        self.records = {}
        self.pending = []

    def begin(self):
        self.pending = []

    def insert(self, record):
        self.pending.append(record)

    def commit(self):
        for record in self.pending:
            self.records[record["id"]] = record
        self.pending = []

    def rollback(self):
        self.pending = []


class MonolithicBatchProcessor:
    def __init__(self, database, crash_at=None):
        self.database = database
        self.crash_at = crash_at
        self.processed = 0

    def process_records(self, records):
        print(f"Starting to process {len(records)} records in one transaction...")
        self.database.begin()
        try:
            for record in records:
                if self.processed + 1 == self.crash_at:
                    raise Crash(f"Simulated crash at record {self.crash_at}")
                self.database.insert({"id": record["id"], "data": record["data"].upper()})
                self.processed += 1
            self.database.commit()
        except Crash as e:
            self.database.rollback()
            print(f"Processing failed: {e}")
            print(f"Lost {self.processed} processed records")
            raise


class MonolithicUploader:
    def __init__(self, fail_at_byte=None):
        self.fail_at_byte = fail_at_byte
        self.uploaded = 0

    def upload(self, data):
        try:
            for _ in data:
                if self.uploaded == self.fail_at_byte:
                    raise Crash("Network connection lost")
                self.uploaded += 1
        except Crash:
            print(f"Upload failed at byte {self.uploaded} of {len(data)}, must restart from the beginning")
            self.uploaded = 0
            raise
        return self.uploaded


class StatelessFormWizard:
    def __init__(self):
        self.form_data = {}
        self.current_step = 1

    def set_step_data(self, step, data):
        self.form_data[f"step{step}"] = data
        self.current_step = step + 1
        print(f"Step {step} data saved (in memory only)")


class MonolithicOrderProcessor:
    def __init__(self):
        self.completed_steps = []

    def process_order(self, order_id):
        try:
            self.completed_steps.append("inventory")
            self.completed_steps.append("payment")
            raise RuntimeError("Shipping service unavailable")
        except RuntimeError as e:
            print(f"Order {order_id} failed: {e}")
            print(f"Completed steps: {', '.join(self.completed_steps)}")
            print("Payment was taken and inventory held, nothing undoes them")


def main():
    records = [{"id": f"record-{i}", "data": f"data {i}"} for i in range(1, 51)]
    database = InMemoryDatabase()
    try:
        MonolithicBatchProcessor(database, crash_at=48).process_records(records)
    except Crash:
        print(f"Records in database after the crash: {len(database.records)}")

    uploader = MonolithicUploader(fail_at_byte=450)
    try:
        uploader.upload(bytes(500))
    except Crash:
        print(f"Bytes kept: {uploader.uploaded}")

    wizard = StatelessFormWizard()
    wizard.set_step_data(1, {"name": "John Doe"})
    wizard.set_step_data(2, {"city": "Anytown"})
    print("[page refresh]")
    wizard = StatelessFormWizard()
    print(f"Form after refresh: step {wizard.current_step}, data {wizard.form_data}")

    MonolithicOrderProcessor().process_order("ORDER-002")


if __name__ == "__main__":
    main()
