"""
Incremental Validity - correct implementation

Work is committed in small steps, each leaving the system valid and each
recorded in a checkpoint store that outlives the worker:

* resume: batch processing, chunked uploads, table-by-table migrations and
  offset-tracked streams restart from the last checkpoint; a form wizard
  keeps every completed step as a draft
* compensate: a saga undoes completed steps in reverse when a later one fails
* reconcile: a sync records failed items and a later job retries only those
"""

import json
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


class CheckpointStore:
    """Stands in for durable storage; values are stored as JSON copies."""

    def __init__(self):
        self._checkpoints: Dict[str, str] = {}
        self.records: Dict[str, Dict[str, dict]] = {}

    def save_checkpoint(self, key: str, state: dict) -> None:
        self._checkpoints[key] = json.dumps(state)

    def checkpoint(self, key: str) -> Optional[dict]:
        raw = self._checkpoints.get(key)
        return json.loads(raw) if raw is not None else None

    def clear_checkpoint(self, key: str) -> None:
        self._checkpoints.pop(key, None)

    def save(self, collection: str, record_id: str, data: dict) -> None:
        self.records.setdefault(collection, {})[record_id] = data

    def count(self, collection: str) -> int:
        return len(self.records.get(collection, {}))


class Crash(Exception):
    pass


def crash_on(n: int, message: str) -> Callable[[], None]:
    """Returns a hook that raises on its n-th call."""
    calls = 0

    def hook():
        nonlocal calls
        calls += 1
        if calls == n:
            raise Crash(message)

    return hook


def report(operation: str, current: int, total: int, phase: str = "processing") -> None:
    print(f"[Progress] {operation}: {round(current / total * 100)}% ({current}/{total}) - {phase}")


class CheckpointBatchProcessor:
    def __init__(self, store: CheckpointStore, operation_id: str, batch_size: int = 10,
                 before_record: Callable[[], None] = lambda: None):
        self.store = store
        self.operation_id = operation_id
        self.batch_size = batch_size
        self.before_record = before_record

    def process_records(self, records: List[dict]) -> dict:
        checkpoint = self.store.checkpoint(self.operation_id)
        start = checkpoint["last_index"] + 1 if checkpoint else 0
        if start:
            print(f"Resuming from checkpoint at index {start}")
        try:
            for i in range(start, len(records), self.batch_size):
                batch = records[i:i + self.batch_size]
                for record in batch:
                    self.before_record()
                    self.store.save("processed", record["id"], {"id": record["id"], "data": record["data"].upper()})
                last = i + len(batch) - 1
                self.store.save_checkpoint(self.operation_id, {"last_index": last, "total": len(records)})
                report(self.operation_id, last + 1, len(records))
        except Crash as e:
            saved = self.store.checkpoint(self.operation_id)
            print(f"Processing failed: {e}")
            print(f"Restart will resume from index {saved['last_index'] + 1 if saved else 0}")
            raise
        self.store.clear_checkpoint(self.operation_id)
        return {"success": True, "processed": len(records), "resumed_from": start}


class ResumableUploader:
    def __init__(self, store: CheckpointStore, chunk_size: int = 50,
                 before_chunk: Callable[[], None] = lambda: None):
        self.store = store
        self.chunk_size = chunk_size
        self.before_chunk = before_chunk
        self.received: Dict[str, bytearray] = {}

    def upload(self, data: bytes, upload_id: str) -> dict:
        key = f"upload-{upload_id}"
        session = self.store.checkpoint(key)
        start_chunk = session["completed_chunks"] if session else 0
        total_chunks = -(-len(data) // self.chunk_size)
        if start_chunk:
            print(f"Resuming upload from chunk {start_chunk} ({start_chunk * self.chunk_size} bytes already sent)")
        target = self.received.setdefault(upload_id, bytearray())
        try:
            for index in range(start_chunk, total_chunks):
                self.before_chunk()
                chunk = data[index * self.chunk_size:(index + 1) * self.chunk_size]
                target.extend(chunk)
                self.store.save_checkpoint(key, {"completed_chunks": index + 1, "bytes": len(target)})
                report(key, index + 1, total_chunks, "uploading")
        except Crash as e:
            saved = self.store.checkpoint(key) or {"bytes": 0}
            print(f"Upload failed: {e}; {saved['bytes']} bytes are safe")
            raise
        self.store.clear_checkpoint(key)
        return {"success": True, "bytes": len(target), "resumed_from": start_chunk * self.chunk_size}


class IncrementalMigration:
    """Migrates one table per step; a half-migrated schema is still a valid state."""

    def __init__(self, store: CheckpointStore, migration_id: str,
                 migrate_table: Callable[[str], None] = lambda table: None):
        self.store = store
        self.migration_id = migration_id
        self.migrate_table = migrate_table

    def run(self, tables: List[str]) -> dict:
        state = self.store.checkpoint(self.migration_id) or {"completed_tables": [], "status": "not_started"}
        pending = [t for t in tables if t not in state["completed_tables"]]
        if state["completed_tables"]:
            print(f"Resuming migration; already migrated: {', '.join(state['completed_tables'])}")
        state["status"] = "in_progress"
        self.store.save_checkpoint(self.migration_id, state)

        try:
            for table in pending:
                self.migrate_table(table)
                state["completed_tables"].append(table)
                self.store.save_checkpoint(self.migration_id, state)
                self.store.save("migration_log", f"{self.migration_id}-{table}",
                                {"migration_id": self.migration_id, "table": table})
                report(self.migration_id, len(state["completed_tables"]), len(tables), f"migrated {table}")
        except Crash as e:
            state["status"], state["error"] = "failed", str(e)
            self.store.save_checkpoint(self.migration_id, state)
            print(f"Migration failed: {e}; resume continues at table {len(state['completed_tables']) + 1}")
            raise

        state["status"] = "completed"
        self.store.save_checkpoint(self.migration_id, state)
        return {"success": True, "migrated_tables": state["completed_tables"], "total_tables": len(tables)}


class OffsetTrackedStreamProcessor:
    """Commits the offset after every item so a restart replays nothing twice."""

    def __init__(self, store: CheckpointStore, stream_id: str,
                 before_item: Callable[[], None] = lambda: None):
        self.store = store
        self.key = f"stream-{stream_id}"
        self.stream_id = stream_id
        self.before_item = before_item

    def committed_offset(self) -> int:
        state = self.store.checkpoint(self.key)
        return state["offset"] if state else 0

    def process(self, items: List[dict]) -> dict:
        start = self.committed_offset()
        if start:
            print(f"Resuming stream {self.stream_id} from offset {start}")
        try:
            for offset in range(start, len(items)):
                self.before_item()
                self.store.save("stream_results", f"{self.stream_id}-{offset}",
                                dict(items[offset], processed=True, offset=offset))
                self.store.save_checkpoint(self.key, {"offset": offset + 1})
                if (offset + 1) % 10 == 0 or offset == len(items) - 1:
                    report(self.key, offset + 1, len(items))
        except Crash as e:
            print(f"Stream processing failed: {e}; committed offset {self.committed_offset()}")
            raise
        return {"success": True, "processed": len(items), "resumed_from": start}


class DraftFormWizard:
    TOTAL_STEPS = 5

    def __init__(self, store: CheckpointStore, form_id: str):
        self.store = store
        self.key = f"form-{form_id}"

    def load_or_create(self) -> dict:
        draft = self.store.checkpoint(self.key)
        if draft:
            print(f"Loaded existing draft at step {draft['current_step']}")
            return draft
        draft = {"current_step": 1, "data": {}}
        self.store.save_checkpoint(self.key, draft)
        return draft

    def save_step(self, step: int, data: dict) -> dict:
        draft = self.load_or_create()
        draft["data"][f"step{step}"] = data
        draft["current_step"] = step + 1
        self.store.save_checkpoint(self.key, draft)
        print(f"Step {step} saved to draft")
        return draft

    def progress(self) -> int:
        draft = self.store.checkpoint(self.key) or {"current_step": 1}
        return round((draft["current_step"] - 1) / self.TOTAL_STEPS * 100)

    def submit(self, send: Callable[[dict], None]) -> None:
        draft = self.load_or_create()
        send(draft["data"])
        self.store.clear_checkpoint(self.key)
        print("Form submitted, draft cleared")


@dataclass
class SagaStep:
    name: str
    execute: Callable[[], None]
    compensate: Callable[[], None]


@dataclass
class Saga:
    store: CheckpointStore
    saga_id: str
    steps: List[SagaStep]
    completed: List[str] = field(default_factory=list)
    compensated: List[str] = field(default_factory=list)

    def _save(self, status: str) -> None:
        self.store.save_checkpoint(self.saga_id, {
            "status": status, "completed": self.completed, "compensated": self.compensated})

    def run(self) -> str:
        self._save("started")
        try:
            for step in self.steps:
                step.execute()
                self.completed.append(step.name)
                self._save("in_progress")
        except Exception as e:
            print(f"Step failed: {e}; compensating {len(self.completed)} completed steps")
            by_name = {step.name: step for step in self.steps}
            for name in reversed(self.completed):
                by_name[name].compensate()
                self.compensated.append(name)
                self._save("compensating")
            self._save("compensated")
            return "compensated"
        self._save("completed")
        return "completed"


def order_saga(store: CheckpointStore, order_id: str, total: float, shipping_up: bool = True) -> Saga:
    def say(text):
        return lambda: print(f"  {text}")

    def ship():
        if not shipping_up:
            raise RuntimeError("Shipping service unavailable")
        print(f"  Shipment created for {order_id}")

    return Saga(store, f"saga-{order_id}", [
        SagaStep("reserve_inventory", say(f"Inventory reserved for {order_id}"),
                 say(f"Inventory released for {order_id}")),
        SagaStep("charge_payment", say(f"Payment charged: ${total}"), say(f"Payment refunded: ${total}")),
        SagaStep("create_shipment", ship, say(f"Shipment cancelled for {order_id}")),
        SagaStep("send_confirmation", say(f"Confirmation sent for {order_id}"),
                 say(f"Cancellation notice sent for {order_id}")),
    ])


class ReconcileLaterSync:
    def __init__(self, store: CheckpointStore, push: Callable[[dict], None]):
        self.store = store
        self.push = push

    def sync(self, sync_id: str, records: List[dict]) -> dict:
        state = {"succeeded": [], "failed": []}
        for record in records:
            try:
                self.push(record)
                state["succeeded"].append(record["id"])
            except ConnectionError as e:
                print(f"  Record {record['id']} failed: {e} (marked for reconciliation)")
                state["failed"].append(record)
            self.store.save_checkpoint(sync_id, state)
        status = "completed" if not state["failed"] else "partial_success" if state["succeeded"] else "failed"
        return {"status": status, "succeeded": len(state["succeeded"]), "failed": len(state["failed"])}

    def reconcile(self, sync_id: str) -> dict:
        state = self.store.checkpoint(sync_id)
        if state is None:
            raise KeyError(f"Sync {sync_id} not found")
        still_failed = []
        for record in state["failed"]:
            try:
                self.push(record)
                state["succeeded"].append(record["id"])
            except ConnectionError:
                still_failed.append(record)
        reconciled = len(state["failed"]) - len(still_failed)
        state["failed"] = still_failed
        self.store.save_checkpoint(sync_id, state)
        return {"reconciled": reconciled, "still_failed": len(still_failed)}


def main():
    store = CheckpointStore()

    print("--- Checkpointed batch processing ---")
    records = [{"id": f"record-{i}", "data": f"data for record {i}"} for i in range(1, 51)]
    crashing = CheckpointBatchProcessor(store, "batch-demo", before_record=crash_on(35, "Simulated crash at record 35"))
    try:
        crashing.process_records(records)
    except Crash:
        print(f"Records already stored: {store.count('processed')}")
    result = CheckpointBatchProcessor(store, "batch-demo").process_records(records)
    print(f"Final: {store.count('processed')} records, resumed from index {result['resumed_from']}")

    print("\n--- Resumable upload ---")
    payload = bytes(range(250)) * 2
    uploader = ResumableUploader(store, before_chunk=crash_on(7, "Network connection lost"))
    try:
        uploader.upload(payload, "demo")
    except Crash:
        pass
    uploader.before_chunk = lambda: None
    done = uploader.upload(payload, "demo")
    print(f"Upload complete, resumed from byte {done['resumed_from']}, intact: {bytes(uploader.received['demo']) == payload}")

    print("\n--- Table-by-table migration ---")
    tables = ["users", "orders", "products", "inventory", "reviews"]

    def migrate(table):
        if table == "products" and not migrate.retried:
            migrate.retried = True
            raise Crash("Lock timeout on products")
        print(f"  Migrated {table}")

    migrate.retried = False
    migration = IncrementalMigration(store, "migration-demo", migrate)
    try:
        migration.run(tables)
    except Crash:
        pass
    print(migration.run(tables))

    print("\n--- Offset-tracked stream ---")
    events = [{"event": f"evt-{i}"} for i in range(25)]
    stream = OffsetTrackedStreamProcessor(store, "events", before_item=crash_on(18, "Consumer killed"))
    try:
        stream.process(events)
    except Crash:
        pass
    stream.before_item = lambda: None
    print(stream.process(events))
    print(f"Results stored: {store.count('stream_results')} (no duplicates)")

    print("\n--- Draft-saving form wizard ---")
    wizard = DraftFormWizard(store, "signup")
    wizard.save_step(1, {"name": "John Doe"})
    wizard.save_step(2, {"city": "Anytown"})
    print("[page refresh]")
    wizard = DraftFormWizard(store, "signup")
    print(f"Recovered {wizard.progress()}% of the form: {wizard.load_or_create()['data']}")
    for step in (3, 4, 5):
        wizard.save_step(step, {"done": True})
    wizard.submit(lambda data: print(f"Sending {len(data)} steps"))

    print("\n--- Saga with compensation ---")
    print(f"ORDER-001: {order_saga(store, 'ORDER-001', 99.99).run()}")
    print(f"ORDER-002: {order_saga(store, 'ORDER-002', 149.99, shipping_up=False).run()}")
    print(f"Saga checkpoint: {store.checkpoint('saga-ORDER-002')}")

    print("\n--- Mark and reconcile ---")
    down = {"sync-3", "sync-5"}

    def push(record):
        if record["id"] in down:
            raise ConnectionError("External service unavailable")

    syncer = ReconcileLaterSync(store, push)
    print(syncer.sync("sync-1", [{"id": f"sync-{i}"} for i in range(1, 8)]))
    down.clear()
    print(syncer.reconcile("sync-1"))


if __name__ == "__main__":
    main()
