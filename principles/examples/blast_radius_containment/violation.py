"""
Blast Radius Containment - violation

One connection pool for every tenant, no timeouts, optional features on the
critical path, one request pool shared by exports and checkouts, a single
cache every service can evict from and a fallback that hides outages. Any
single failure spreads to the whole system.
"""

import asyncio
import random


class SharedDatabasePool:
    def __init__(self, max_connections=10):
        self.max_connections = max_connections
        self.active = 0

    async def query(self, tenant_id, sql):
        # no per-tenant limit, one tenant can take every connection
        if self.active >= self.max_connections:
            raise RuntimeError("Connection pool exhausted")
        self.active += 1
        try:
            await asyncio.sleep(30 if "SLOW" in sql else 0.01)  # no query timeout
            return {"rows": []}
        finally:
            self.active -= 1


class ProductPage:
    def __init__(self, recommendations_up=False):
        self.recommendations_up = recommendations_up

    async def get_product(self, product_id):
        return {"id": product_id, "name": "Widget", "price": 29.99}

    async def get_recommendations(self, product_id):
        if not self.recommendations_up:
            raise ConnectionError("Recommendation service unavailable")
        return ["rec1", "rec2"]

    async def render(self, product_id):
        # nice-to-have features are awaited like critical ones
        product = await self.get_product(product_id)
        recommendations = await self.get_recommendations(product_id)
        return {"product": product, "recommendations": recommendations}


class RequestHandler:
    """One pool for everything; the wait queue has no bound and no timeout."""

    def __init__(self, max_concurrent=10):
        self.slots = asyncio.Semaphore(max_concurrent)
        self.waiting = 0

    async def handle(self, request):
        self.waiting += 1
        async with self.slots:
            self.waiting -= 1
            await asyncio.sleep(30 if request["type"] == "export" else 0.05)
            return {"success": True, "requestId": request["id"]}


class SharedCache:
    def __init__(self, max_size=100):
        self.max_size = max_size
        self.data = {}

    def set(self, key, value):
        if len(self.data) >= self.max_size:
            # evicts whoever happens to be oldest, any service
            self.data.pop(next(iter(self.data)))
        self.data[key] = value

    def get(self, key):
        return self.data.get(key)


class SilentlyDegradingService:
    def __init__(self, rng):
        self.rng = rng
        self.failures = 0
        self.is_open = False

    async def call(self):
        if self.is_open:
            return self.fallback()
        try:
            if self.rng.random() < 0.8:
                raise ConnectionError("External service unavailable")
            return {"data": "fresh", "stale": False}
        except ConnectionError:
            self.failures += 1
            if self.failures > 5:
                self.is_open = True  # nobody is told
            return self.fallback()

    def fallback(self):
        return {"data": "fallback", "stale": True, "staleSince": "2024-01-01"}


class AdminService:
    def __init__(self, users):
        self.users = users

    def update_all_user_settings(self, settings):
        # every user at once, no dry run, no limit, no undo
        for user in self.users.values():
            user.update(settings)
        return {"updated": len(self.users)}


async def main():
    print("=== Cascading failure ===\n")

    print("1. Tenant A runs expensive analytics queries...")
    pool = SharedDatabasePool()
    slow = [asyncio.create_task(pool.query("tenant-A", "SELECT SLOW ...")) for _ in range(10)]
    await asyncio.sleep(0)
    print("2. Tenant B tries a simple query...")
    try:
        await pool.query("tenant-B", "SELECT * FROM orders LIMIT 1")
    except RuntimeError as e:
        print(f"   Tenant B: BLOCKED - {e}")

    print("\n3. Recommendation service starts failing...")
    try:
        await ProductPage(recommendations_up=False).render("product-123")
    except ConnectionError as e:
        print(f"   Product page: COMPLETELY FAILED - {e}")
        print("   (Users cannot even see product details!)")

    print("\n4. Slow exports take every request slot...")
    handler = RequestHandler()
    exports = [asyncio.create_task(handler.handle({"id": i, "type": "export"})) for i in range(10)]
    await asyncio.sleep(0)
    try:
        await asyncio.wait_for(handler.handle({"id": "api-1", "type": "api"}), timeout=0.1)
    except asyncio.TimeoutError:
        print(f"   Fast API request: still queued behind exports (waiting={handler.waiting})")

    print("\n5. One service floods the shared cache...")
    cache = SharedCache(max_size=20)
    cache.set("serviceB:important-key", "important-value")
    for i in range(50):
        cache.set(f"serviceA:key-{i}", f"value-{i}")
    print(f"   Service B's key: {cache.get('serviceB:important-key')}")

    print("\n6. Silent degradation hides the outage...")
    service = SilentlyDegradingService(random.Random(1))
    for i in range(8):
        result = await service.call()
        if result["stale"]:
            print(f"   Request {i + 1}: serving STALE data (no alert, no metric)")

    print("\n7. Admin bulk update...")
    users = {f"u{i}": {"theme": "light"} for i in range(500)}
    print("  ", AdminService(users).update_all_user_settings({"theme": "broken"}))

    for task in slow + exports:
        task.cancel()
    await asyncio.gather(*slow, *exports, return_exceptions=True)

    print("\n=== Result: blast radius is the ENTIRE SYSTEM ===")


if __name__ == "__main__":
    asyncio.run(main())
