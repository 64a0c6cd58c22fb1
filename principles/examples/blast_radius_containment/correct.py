"""
Blast Radius Containment - correct implementation

Per-tenant connection pools with admission control, circuit breakers that
announce their state changes, a product page whose optional features fail on
their own, priority bulkheads with timeouts, namespaced caches and admin
operations with explicit limits. Failures stay local and are reported.
"""

import asyncio
import json
import random
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional


class TenantPoolExhaustedError(Exception):
    http_status = 429

    def __init__(self, tenant_id: str):
        super().__init__(f"Connection pool exhausted for tenant: {tenant_id}")
        self.tenant_id = tenant_id


class GlobalPoolExhaustedError(Exception):
    http_status = 503

    def __init__(self):
        super().__init__("Global connection pool exhausted")


class CircuitOpenError(Exception):
    http_status = 503

    def __init__(self, name: str, retry_after: float):
        super().__init__(f"Circuit {name} is open")
        self.retry_after = retry_after


class BulkheadFullError(Exception):
    http_status = 429

    def __init__(self, bulkhead: str, request_id: str):
        super().__init__(f"Bulkhead {bulkhead} is full, request {request_id} rejected")


class BlastRadiusExceededError(Exception):
    http_status = 400

    def __init__(self, operation: str, attempted, limit):
        super().__init__(f"Blast radius exceeded for {operation}: attempted {attempted}, limit {limit}")


class Connection:
    def __init__(self, pool: "TenantIsolatedPool", tenant_id: str):
        self.pool = pool
        self.tenant_id = tenant_id

    def release(self) -> None:
        self.pool.active[self.tenant_id] -= 1


class TenantIsolatedPool:
    """Connections are counted per tenant and globally."""

    def __init__(self, per_tenant_max: int = 5, global_max: int = 50):
        self.per_tenant_max = per_tenant_max
        self.global_max = global_max
        self.active: Dict[str, int] = {}
        self.rejections: List[Dict[str, str]] = []

    def get_connection(self, tenant_id: str) -> Connection:
        in_use = self.active.setdefault(tenant_id, 0)
        if in_use >= self.per_tenant_max:
            self._reject(tenant_id, "tenant_pool_exhausted")
            raise TenantPoolExhaustedError(tenant_id)
        if sum(self.active.values()) >= self.global_max:
            self._reject(tenant_id, "global_pool_exhausted")
            raise GlobalPoolExhaustedError()
        self.active[tenant_id] = in_use + 1
        return Connection(self, tenant_id)

    def _reject(self, tenant_id: str, reason: str) -> None:
        self.rejections.append({"tenantId": tenant_id, "reason": reason})
        print(f"[METRIC] Connection rejected: tenant={tenant_id} reason={reason}")

    def metrics(self) -> dict:
        return {
            "globalActive": sum(self.active.values()),
            "tenants": dict(self.active),
            "rejections": len(self.rejections),
        }


class CircuitBreaker:
    """CLOSED -> OPEN after repeated failures, HALF_OPEN after a cool-down."""

    def __init__(self, name: str, failure_threshold: int = 3, recovery_timeout: float = 10.0,
                 success_threshold: int = 1, clock: Callable[[], float] = time.monotonic):
        self.name = name
        self.failure_threshold = failure_threshold
        self.recovery_timeout = recovery_timeout
        self.success_threshold = success_threshold
        self.clock = clock
        self.state = "CLOSED"
        self.failures = 0
        self.successes = 0
        self.last_failure: Optional[float] = None
        self.rejected = 0

    async def call(self, fn: Callable[[], Awaitable[Any]],
                   fallback: Optional[Callable[[], Any]] = None) -> Dict[str, Any]:
        if self.state == "OPEN":
            if self.clock() - self.last_failure >= self.recovery_timeout:
                self._transition("HALF_OPEN")
            else:
                self.rejected += 1
                if fallback is not None:
                    return {"result": fallback(), "degraded": True}
                raise CircuitOpenError(self.name, self.recovery_timeout - (self.clock() - self.last_failure))

        try:
            result = await fn()
        except Exception as e:
            self._on_failure(e)
            if fallback is not None:
                return {"result": fallback(), "degraded": True}
            raise
        self._on_success()
        return {"result": result, "degraded": False}

    def _on_success(self) -> None:
        if self.state == "HALF_OPEN":
            self.successes += 1
            if self.successes >= self.success_threshold:
                self._transition("CLOSED")
                self.failures = self.successes = 0
        else:
            self.failures = 0

    def _on_failure(self, error: Exception) -> None:
        self.last_failure = self.clock()
        self.failures += 1
        self.successes = 0
        print(f"[CIRCUIT {self.name}] Failure recorded: {error} ({self.failures}/{self.failure_threshold})")
        if self.state == "HALF_OPEN" or self.failures >= self.failure_threshold:
            self._transition("OPEN")

    def _transition(self, new_state: str) -> None:
        if new_state == self.state:
            return
        print(f"[CIRCUIT {self.name}] State change: {self.state} -> {new_state}")
        if new_state == "OPEN":
            print(f"[ALERT] Circuit {self.name} OPENED - dependency may be down!")
        self.state = new_state


class ResilientProductPage:
    """Product data is critical; recommendations and reviews are optional."""

    def __init__(self, get_product, get_recommendations, get_reviews):
        self.get_product = get_product
        self.get_recommendations = get_recommendations
        self.get_reviews = get_reviews
        self.recommendation_circuit = CircuitBreaker("recommendations")
        self.review_circuit = CircuitBreaker("reviews")

    async def render(self, product_id: str) -> dict:
        product = await self.get_product(product_id)
        recs = await self.recommendation_circuit.call(
            lambda: self.get_recommendations(product_id),
            lambda: [{"id": "popular-1", "name": "Popular Item", "isDefault": True}],
        )
        reviews = await self.review_circuit.call(
            lambda: self.get_reviews(product_id),
            lambda: [{"message": "Reviews temporarily unavailable", "isDefault": True}],
        )
        degraded = [name for name, r in (("recommendations", recs), ("reviews", reviews)) if r["degraded"]]
        return {
            "product": product,
            "recommendations": recs,
            "reviews": reviews,
            "degradedFeatures": degraded,
        }


class Bulkhead:
    def __init__(self, name: str, max_concurrent: int):
        self.name = name
        self.max_concurrent = max_concurrent
        self.active = 0
        self.rejected = 0
        self.succeeded = 0
        self.failed = 0

    def try_acquire(self) -> bool:
        if self.active >= self.max_concurrent:
            print(f"[BULKHEAD {self.name}] Rejected - at capacity ({self.active}/{self.max_concurrent})")
            self.rejected += 1
            return False
        self.active += 1
        return True

    def release(self) -> None:
        self.active -= 1

    def summary(self) -> dict:
        return {"active": self.active, "max": self.max_concurrent, "succeeded": self.succeeded,
                "failed": self.failed, "rejected": self.rejected}


class BulkheadRequestHandler:
    """Separate capacity and timeouts per priority class."""

    def __init__(self, critical: int = 20, normal: int = 15, background: int = 5, timeout: float = 0.2):
        self.bulkheads = {
            "critical": Bulkhead("critical", critical),
            "normal": Bulkhead("normal", normal),
            "background": Bulkhead("background", background),
        }
        self.timeouts = {"critical": timeout, "normal": timeout / 2, "background": timeout / 4}

    async def handle(self, request: dict) -> dict:
        priority = request.get("priority", "normal")
        bulkhead = self.bulkheads.get(priority, self.bulkheads["normal"])
        if not bulkhead.try_acquire():
            raise BulkheadFullError(bulkhead.name, request["id"])
        try:
            result = await asyncio.wait_for(self._process(request), self.timeouts.get(priority, self.timeouts["normal"]))
            bulkhead.succeeded += 1
            return result
        except Exception:
            bulkhead.failed += 1
            raise
        finally:
            bulkhead.release()

    async def _process(self, request: dict) -> dict:
        await asyncio.sleep(1.0 if request.get("type") == "export" else 0.005)
        return {"success": True, "requestId": request["id"]}

    def metrics(self) -> dict:
        return {name: b.summary() for name, b in self.bulkheads.items()}


class NamespacedCache:
    """Each service gets its own bounded namespace; eviction never crosses namespaces."""

    def __init__(self, per_namespace_max: int = 100):
        self.per_namespace_max = per_namespace_max
        self.namespaces: Dict[str, Dict[str, Any]] = {}

    def for_service(self, service: str) -> Dict[str, Any]:
        return self.namespaces.setdefault(service, {})

    def set(self, service: str, key: str, value: Any) -> None:
        namespace = self.for_service(service)
        if key not in namespace and len(namespace) >= self.per_namespace_max:
            namespace.pop(next(iter(namespace)))
        namespace[key] = value

    def get(self, service: str, key: str) -> Any:
        return self.for_service(service).get(key)


class SafeAdminService:
    """Bulk admin actions: explicit targets, limits, dry-run by default, audited."""

    def __init__(self, users: Dict[str, dict]):
        self.users = users
        self.audit_log: List[dict] = []

    def update_user_settings(self, user_ids: List[str], settings: dict, confirmed_by: str,
                             max_affected: int = 100, dry_run: bool = True) -> dict:
        if len(user_ids) > max_affected:
            raise BlastRadiusExceededError("update_user_settings", len(user_ids), max_affected)
        self.audit_log.append({"action": "update_user_settings", "by": confirmed_by,
                               "targets": len(user_ids), "dryRun": dry_run})
        if dry_run:
            return {"dryRun": True, "wouldAffect": len(user_ids), "preview": user_ids[:5]}
        for user_id in user_ids:
            self.users[user_id].update(settings)
        return {"updated": len(user_ids)}

    def deploy_feature_flag(self, flag: str, rollout_percent: int, confirmed_by: str,
                            segment: Optional[str] = None) -> dict:
        if rollout_percent > 50 and segment is None:
            raise BlastRadiusExceededError("deploy_feature_flag", f"{rollout_percent}% of all users",
                                           "50% maximum for initial rollout")
        self.audit_log.append({"action": "deploy_feature_flag", "flag": flag, "by": confirmed_by})
        return {"deployed": True, "flag": flag, "scope": segment or f"{rollout_percent}% of users"}


async def main():
    rng = random.Random(3)
    print("=== Blast radius contained ===\n")

    print("1. Tenant isolation")
    pool = TenantIsolatedPool(per_tenant_max=5)
    held = []
    for _ in range(6):
        try:
            held.append(pool.get_connection("tenant-A"))
        except TenantPoolExhaustedError as e:
            print(f"   Tenant A: {e} (HTTP {e.http_status})")
    conn_b = pool.get_connection("tenant-B")
    print("   Tenant B: connection acquired successfully")
    conn_b.release()
    for conn in held:
        conn.release()
    print("   Pool metrics:", json.dumps(pool.metrics()))

    print("\n2. Feature isolation")

    async def get_product(product_id):
        return {"id": product_id, "name": "Widget", "price": 29.99}

    async def get_recommendations(product_id):
        raise ConnectionError("Recommendations unavailable")

    async def get_reviews(product_id):
        if rng.random() < 0.3:
            raise ConnectionError("Reviews unavailable")
        return [{"rating": 5}]

    page = ResilientProductPage(get_product, get_recommendations, get_reviews)
    for i in range(4):
        rendered = await page.render("product-123")
        print(f"   Render {i + 1}: product={rendered['product']['name']} degraded={rendered['degradedFeatures']}")
    print("   (The product page always renders)")

    print("\n3. Request bulkheads")
    handler = BulkheadRequestHandler(background=5)
    background = [asyncio.create_task(handler.handle({"id": f"bg-{i}", "priority": "background", "type": "export"}))
                  for i in range(6)]
    await asyncio.sleep(0)
    critical = await handler.handle({"id": "critical-1", "priority": "critical", "type": "checkout"})
    print(f"   Critical request: {'SUCCESS' if critical['success'] else 'FAILED'}")
    outcomes = await asyncio.gather(*background, return_exceptions=True)
    timed_out = sum(isinstance(o, asyncio.TimeoutError) for o in outcomes)
    rejected = sum(isinstance(o, BulkheadFullError) for o in outcomes)
    print(f"   Background exports: {timed_out} timed out, {rejected} rejected")
    print("   Bulkhead metrics:", json.dumps(handler.metrics()))

    print("\n4. Cache namespaces")
    cache = NamespacedCache(per_namespace_max=20)
    cache.set("serviceB", "important-key", "important-value")
    for i in range(50):
        cache.set("serviceA", f"key-{i}", f"value-{i}")
    print(f"   Service A cache size: {len(cache.for_service('serviceA'))}")
    print(f"   Service B still has its key: {cache.get('serviceB', 'important-key')}")

    print("\n5. Admin actions with limits")
    users = {f"u{i}": {"theme": "light"} for i in range(500)}
    admin = SafeAdminService(users)
    try:
        admin.update_user_settings(list(users), {"theme": "dark"}, confirmed_by="ops")
    except BlastRadiusExceededError as e:
        print(f"   Refused: {e}")
    print("   Dry run:", admin.update_user_settings(["u1", "u2", "u3"], {"theme": "dark"}, confirmed_by="ops"))
    try:
        admin.deploy_feature_flag("new-checkout", 100, confirmed_by="ops")
    except BlastRadiusExceededError as e:
        print(f"   Refused: {e}")
    print("   Deployed:", admin.deploy_feature_flag("new-checkout", 10, confirmed_by="ops"))
    print(f"   Audit entries: {len(admin.audit_log)}")

    print("\n=== Result: failures contained to the scope that caused them ===")


if __name__ == "__main__":
    asyncio.run(main())
