"""
Temporal Decoupling - violation

Every ordering assumption is a sleep. The processor hopes initialisation
beats a fixed delay, events are collected in whatever order they happen
to arrive, cache freshness trusts wall clocks on different machines,
services start in parallel and check up on each other later, and two
transfers both read the same balance and both succeed, creating money.
"""

import asyncio
import random


class DataProcessor:
    def __init__(self):
        self.config = None

    def initialize(self, takes):
        asyncio.get_running_loop().call_later(takes, lambda: setattr(self, "config", {"max_items": 3}))

    async def process(self, items, wait=0.005):
        await asyncio.sleep(wait)  # "init is usually quicker than this"
        if self.config is None:
            raise RuntimeError("Processor not ready - increase the sleep?")
        return items[: self.config["max_items"]]


async def fetch_all(ids, rng):
    arrived = []

    async def fetch(event_id):
        await asyncio.sleep(rng.uniform(0, 0.01))
        arrived.append(event_id)

    tasks = [asyncio.ensure_future(fetch(i)) for i in ids]
    await asyncio.sleep(0.006)  # "everything is back by now"
    snapshot = list(arrived)
    await asyncio.gather(*tasks)
    return snapshot, arrived


class TimestampCache:
    def __init__(self):
        self.local = {}

    def offer(self, key, value, timestamp):
        current = self.local.get(key)
        if current is None or timestamp > current[1]:
            self.local[key] = (value, timestamp)
        return self.local[key][0]


class Account:
    def __init__(self, balance):
        self.balance = balance

    async def transfer(self, amount, to):
        current = self.balance
        await asyncio.sleep(0)
        if current >= amount:
            self.balance = current - amount
            to.balance += amount
            return True
        return False


async def main():
    print("1. Sleep-based readiness, on a slow day:")
    processor = DataProcessor()
    processor.initialize(takes=0.02)
    try:
        print(await processor.process([1, 2, 3, 4, 5]))
    except RuntimeError as e:
        print(f"   {e}")

    print("\n2. Collect whatever has arrived after a fixed wait:")
    early, final = await fetch_all("ABCD", random.Random(3))
    print(f"   after the wait: {early}; eventual arrival order: {final}")

    print("\n3. Freshness by wall clock across machines:")
    cache = TimestampCache()
    cache.offer("price", 10, timestamp=1_700_000_005.0)  # server with a fast clock
    print(f"   newer write from a slow-clock server ignored: {cache.offer('price', 11, timestamp=1_700_000_004.0)}")

    print("\n4. Two concurrent transfers of 80 from an account holding 100:")
    alice, bob = Account(100), Account(0)
    results = await asyncio.gather(alice.transfer(80, bob), alice.transfer(80, bob))
    print(f"   results: {results}; balances {alice.balance} / {bob.balance}; "
          f"total went from 100 to {alice.balance + bob.balance}")


if __name__ == "__main__":
    asyncio.run(main())
