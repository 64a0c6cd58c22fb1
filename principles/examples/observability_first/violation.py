"""
Observability-First - violation

Two orders run at the same time and print free-text lines like
"starting", "reserving" and "error". Nothing ties a line to a request, the
real failure reason is swallowed, there are no counts or timings, and the
caller gets "something went wrong" with nothing to hand to support.
"""

import asyncio
import random


class PaymentService:
    def __init__(self, rng):
        self.rng = rng

    async def charge(self, user_id, amount_cents):
        print("charging user " + user_id + " for " + str(amount_cents))
        await asyncio.sleep(0.005)
        if amount_cents > 50000:
            raise Exception("bad things happened")
        print("charged")
        return {"id": self.rng.random()}


class InventoryService:
    def __init__(self, rng):
        self.rng = rng

    async def reserve(self, sku, qty):
        print("reserving")
        await asyncio.sleep(0.002)
        return {"id": self.rng.random()}


async def process_order(user_id, sku, qty, amount_cents, rng):
    print("starting")
    try:
        inv = await InventoryService(rng).reserve(sku, qty)
        pay = await PaymentService(rng).charge(user_id, amount_cents)
        print("done")
        return {"success": True, "inv": inv, "pay": pay}
    except Exception:
        print("error")
        return {"success": False, "error": "something went wrong"}


async def main():
    rng = random.Random(1)
    results = await asyncio.gather(
        process_order("u1", "SKU-1", 1, 2999, rng),
        process_order("u2", "SKU-2", 2, 99999, rng),
    )
    for result in results:
        print(result)
    print("Which 'error' belongs to which order, and why did it fail? The logs cannot say.")


if __name__ == "__main__":
    asyncio.run(main())
