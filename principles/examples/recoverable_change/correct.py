"""
Recoverable Change - correct implementation

Each kind of change carries its own recovery path:

* schema changes expand first (new column, dual write, batched backfill)
  so the previous release keeps working, and only contract once nothing
  reads the old column;
* feature flags have an owner, an expiry and a removal ticket, and can be
  switched off without a deploy;
* an order workflow registers a compensation for every external effect
  and unwinds them in reverse when a later step fails;
* a deployment that fails its health check rolls itself back, and any
  on-call engineer can roll back without approvals;
* old API versions stay served with Deprecation and Sunset headers until
  usage has stopped;
* whatever cannot be undone is written down as reversibility debt with an
  owner.
"""

import sqlite3
from dataclasses import dataclass, field
from datetime import date, timedelta
from itertools import count
from typing import Callable, Dict, List, Optional, Tuple


def log(level: str, message: str, **data) -> None:
    details = " ".join(f"{key}={value}" for key, value in data.items())
    print(f"[{level}] {message}" + (f" {details}" if details else ""))


# -- expand / contract migration -------------------------------------------

class ExpandContractMigration:
    """Rename ``users.email`` to ``contact_email`` without breaking old readers."""

    def __init__(self, conn: sqlite3.Connection, batch_size: int = 2):
        self.conn = conn
        self.batch_size = batch_size
        self.phase = 0
        self.dual_write = False

    def expand(self) -> None:
        columns = {row[1] for row in self.conn.execute("PRAGMA table_info(users)")}
        if "contact_email" not in columns:
            self.conn.execute("ALTER TABLE users ADD COLUMN contact_email TEXT")
        self.phase = 1
        log("INFO", "expand: contact_email added", rollback="old release ignores the column")

    def enable_dual_write(self) -> None:
        self.dual_write = True
        self.phase = 2
        log("INFO", "dual write enabled", rollback="turn the flag off")

    def save_user(self, user_id: int, email: str) -> None:
        if self.dual_write:
            self.conn.execute("UPDATE users SET email = ?, contact_email = ? WHERE id = ?",
                              (email, email, user_id))
        else:
            self.conn.execute("UPDATE users SET email = ? WHERE id = ?", (email, user_id))

    def backfill(self) -> int:
        processed = 0
        while True:
            ids = [row[0] for row in self.conn.execute(
                "SELECT id FROM users WHERE contact_email IS NULL AND email IS NOT NULL LIMIT ?",
                (self.batch_size,))]
            if not ids:
                break
            self.conn.executemany("UPDATE users SET contact_email = email WHERE id = ?", [(i,) for i in ids])
            processed += len(ids)
            log("INFO", "backfill batch", processed=processed)
        self.phase = 3
        return processed

    def verify_rollback_safety(self) -> Dict[str, object]:
        # the previous release still selects the old column
        old_reader_ok = self.conn.execute("SELECT email FROM users").fetchall() is not None
        missing = self.conn.execute(
            "SELECT COUNT(*) FROM users WHERE contact_email IS NOT email").fetchone()[0]
        return {"previous_version_compatible": old_reader_ok, "rows_out_of_sync": missing,
                "can_rollback": old_reader_ok and missing == 0}

    def can_contract(self, old_readers_running: int) -> bool:
        return self.phase >= 3 and old_readers_running == 0


# -- feature flags -----------------------------------------------------------

@dataclass
class FeatureFlag:
    name: str
    owner: str
    expires_at: date
    removal_ticket: str
    enabled: bool = True
    evaluation_count: int = 0
    last_evaluated: Optional[date] = None
    disabled_reason: Optional[str] = None


class FeatureFlags:
    def __init__(self, flags: List[FeatureFlag], today: Callable[[], date]):
        self.flags = {flag.name: flag for flag in flags}
        self.today = today

    def is_enabled(self, name: str) -> bool:
        flag = self.flags.get(name)
        if flag is None:
            log("WARN", "unknown feature flag", flag=name)
            return False
        flag.evaluation_count += 1
        flag.last_evaluated = self.today()
        days_left = (flag.expires_at - self.today()).days
        if days_left < 0:
            log("ERROR", "expired flag still in use", flag=name, owner=flag.owner)
        elif days_left < 14:
            log("WARN", "flag expiring soon", flag=name, owner=flag.owner, days_left=days_left)
        return flag.enabled

    def disable(self, name: str, reason: str) -> Dict[str, object]:
        flag = self.flags[name]
        flag.enabled = False
        flag.disabled_reason = reason
        log("WARN", "flag disabled", flag=name, reason=reason)
        return {"flag": name, "no_deployment_required": True}

    def expiring(self, within_days: int = 14) -> List[str]:
        horizon = self.today() + timedelta(days=within_days)
        return sorted(flag.name for flag in self.flags.values() if flag.expires_at <= horizon)

    def can_remove(self, name: str, quiet_days: int = 30) -> bool:
        flag = self.flags[name]
        if flag.enabled:
            return False
        return flag.last_evaluated is None or (self.today() - flag.last_evaluated).days >= quiet_days


# -- compensating workflow -------------------------------------------------

class StepFailed(Exception):
    pass


@dataclass
class ExternalServices:
    """In-memory stand-ins that record every effect and its undo."""

    fail_at: Optional[str] = None
    effects: List[str] = field(default_factory=list)

    def act(self, step: str, detail: str) -> str:
        if step == self.fail_at:
            raise StepFailed(f"{step} failed")
        self.effects.append(f"{step}:{detail}")
        return f"{step}-{len(self.effects)}"

    def undo(self, step: str, detail: str) -> None:
        self.effects.append(f"undo-{step}:{detail}")


class RecoverableOrderProcessor:
    STEPS = ("reserve_inventory", "charge_payment", "save_order", "send_confirmation", "notify_partners")

    def __init__(self, services: ExternalServices):
        self.services = services
        self.compensation_failures: List[Tuple[str, str]] = []

    def process_order(self, order_id: str) -> Dict[str, object]:
        done: List[Tuple[str, str]] = []
        for step in self.STEPS:
            try:
                reference = self.services.act(step, order_id)
            except StepFailed as e:
                log("ERROR", "order step failed, compensating", order=order_id, step=step)
                self.compensate(done)
                return {"success": False, "failed_step": step, "error": str(e),
                        "compensated": [name for name, _ in reversed(done)]}
            done.append((step, reference))
        return {"success": True, "steps": [name for name, _ in done]}

    def compensate(self, done: List[Tuple[str, str]]) -> None:
        for step, reference in reversed(done):
            try:
                self.services.undo(step, reference)
            except StepFailed as e:
                # left for a human, with enough context to finish it
                self.compensation_failures.append((step, str(e)))


# -- deployment ------------------------------------------------------------

class SelfServiceDeployment:
    def __init__(self, current: str):
        self.current = current
        self.previous: Optional[str] = None
        self.history: List[str] = [current]

    def deploy(self, version: str, healthy: Callable[[str], bool]) -> Dict[str, object]:
        self.previous, self.current = self.current, version
        self.history.append(version)
        if not healthy(version):
            log("ERROR", "health check failed, rolling back", version=version)
            return {"deployed": False, **self.rollback("automatic: failed health check")}
        return {"deployed": True, "version": version}

    def rollback(self, reason: str) -> Dict[str, object]:
        if self.previous is None:
            return {"success": False, "reason": "no previous version"}
        rolled_back_from, self.current = self.current, self.previous
        self.previous = None
        self.history.append(self.current)
        log("INFO", "rollback completed", frm=rolled_back_from, to=self.current, reason=reason)
        return {"success": True, "rolled_back_from": rolled_back_from,
                "rolled_back_to": self.current, "approval_required": False}


# -- API versions ----------------------------------------------------------

@dataclass
class ApiVersion:
    status: str
    sunset_at: Optional[date] = None
    usage_count: int = 0
    last_used: Optional[date] = None


class VersionedApi:
    USER = {"id": "123", "name": "John Doe", "email": "john@example.com", "created_at": "2025-01-15T10:30:00Z"}

    def __init__(self, today: Callable[[], date]):
        self.today = today
        self.versions = {"v1": ApiVersion("deprecated", sunset_at=date(2025, 7, 1)), "v2": ApiVersion("current")}

    def handle(self, headers: Dict[str, str]) -> Dict[str, object]:
        version = headers.get("Accept-Version", "v2")
        info = self.versions.get(version)
        if info is None:
            return {"status": 400, "error": "Unknown API version", "supported": sorted(self.versions)}
        info.usage_count += 1
        info.last_used = self.today()

        if version == "v1":
            response = {"status": 200, "body": dict(self.USER), "headers": {}}
        else:
            attributes = {"name": self.USER["name"], "email_address": self.USER["email"],
                          "created_at": self.USER["created_at"]}
            response = {"status": 200, "body": {"data": {"id": self.USER["id"], "attributes": attributes}},
                        "headers": {}}
        if info.status == "deprecated":
            response["headers"] = {"Deprecation": "true", "Sunset": info.sunset_at.isoformat(),
                                   "Link": '</api/v2>; rel="successor-version"'}
        return response

    def can_remove(self, version: str, quiet_days: int = 30) -> bool:
        info = self.versions[version]
        past_sunset = info.sunset_at is not None and self.today() > info.sunset_at
        quiet = info.last_used is None or (self.today() - info.last_used).days > quiet_days
        return past_sunset and quiet


# -- reversibility debt ----------------------------------------------------

@dataclass
class DebtItem:
    id: str
    component: str
    issue: str
    owner: str
    remediation_plan: str
    priority: str = "medium"
    status: str = "open"
    resolution: Optional[str] = None


class ReversibilityDebtTracker:
    def __init__(self):
        self.items: Dict[str, DebtItem] = {}
        self._ids = count(1)

    def record(self, component: str, issue: str, owner: str, remediation_plan: str,
               priority: str = "medium") -> str:
        item = DebtItem(f"debt-{next(self._ids):03d}", component, issue, owner, remediation_plan, priority)
        self.items[item.id] = item
        log("WARN", "reversibility debt recorded", id=item.id, component=component)
        return item.id

    def can_recover(self, component: str) -> Dict[str, object]:
        open_items = [i for i in self.items.values() if i.component == component and i.status != "resolved"]
        return {"component": component, "can_recover": not open_items,
                "restrictions": [(i.issue, i.remediation_plan) for i in open_items]}

    def resolve(self, debt_id: str, resolution: str) -> DebtItem:
        if debt_id not in self.items:
            raise KeyError(f"Debt item not found: {debt_id}")
        item = self.items[debt_id]
        item.status, item.resolution = "resolved", resolution
        return item

    def audit(self) -> Dict[str, int]:
        items = list(self.items.values())
        return {
            "total": len(items),
            "open": sum(i.status == "open" for i in items),
            "high_priority_open": sum(i.status == "open" and i.priority == "high" for i in items),
        }


def main():
    today = date(2025, 4, 5)

    print("=== Schema change: expand, dual write, backfill ===")
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, email TEXT)")
    conn.executemany("INSERT INTO users (email) VALUES (?)",
                     [("a@example.com",), ("b@example.com",), ("c@example.com",)])
    migration = ExpandContractMigration(conn)
    migration.expand()
    migration.enable_dual_write()
    migration.save_user(1, "a.new@example.com")
    print(f"Backfilled {migration.backfill()} rows")
    print(f"Rollback safety: {migration.verify_rollback_safety()}")
    print(f"Contract while v1 readers run: {migration.can_contract(old_readers_running=2)}")
    conn.close()

    print("\n=== 3 AM: error spike ===")
    flags = FeatureFlags([
        FeatureFlag("checkout-v2", "checkout-team", date(2025, 4, 15), "JIRA-4521"),
        FeatureFlag("payment-retry-logic", "payments-team", date(2025, 5, 1), "JIRA-4789"),
    ], today=lambda: today)
    flags.is_enabled("checkout-v2")
    print(flags.disable("checkout-v2", "error rate spike"))
    print(f"Expiring within 14 days: {flags.expiring()}")

    deployment = SelfServiceDeployment("v2.3.0")
    print(deployment.deploy("v2.3.1", healthy=lambda version: version != "v2.3.1"))

    print("\n=== Payment succeeded, confirmation email failed ===")
    services = ExternalServices(fail_at="send_confirmation")
    print(RecoverableOrderProcessor(services).process_order("ORD-1"))
    print(f"Effects: {services.effects}")

    print("\n=== Old API clients keep working ===")
    api = VersionedApi(today=lambda: today)
    print(api.handle({"Accept-Version": "v1"})["headers"])
    print(f"Can remove v1 today: {api.can_remove('v1')}")

    print("\n=== Known reversibility debt ===")
    tracker = ReversibilityDebtTracker()
    debt = tracker.record("search-index", "reindex cannot be undone", "search-team",
                          "keep the previous index for 7 days", priority="high")
    print(tracker.can_recover("search-index"))
    print(f"checkout-service recoverable: {tracker.can_recover('checkout-service')['can_recover']}")
    tracker.resolve(debt, "index snapshots retained")
    print(tracker.audit())


if __name__ == "__main__":
    main()
