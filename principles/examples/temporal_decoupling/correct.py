"""
Temporal Decoupling - correct implementation

Ordering is stated in the code instead of hoped for:

* DataProcessor waits on an asyncio.Event set once start() has finished;
* fetched events keep their request order because gather returns results
  in argument order, whatever order they complete in;
* cache freshness and causality use version numbers and vector clocks,
  never wall-clock timestamps;
* startup follows an explicit dependency graph;
* transfers use optimistic locking: read versions, compute, then
  compare-and-swap both accounts, retrying a bounded number of times;
* scheduled work hands back a future and time is injected, so tests
  advance a fake scheduler instead of sleeping.
"""

import asyncio
import graphlib
import itertools
import random
import time
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, Iterable, List, Mapping, Optional, Tuple


class DataProcessor:
    def __init__(self):
        self.config: Optional[dict] = None
        self._ready = asyncio.Event()
        self._started = False

    def start(self, delay: float = 0.01) -> asyncio.Task:
        """Begin initialising in the background; process() waits for it."""
        self._started = True
        return asyncio.ensure_future(self._initialize(delay))

    async def _initialize(self, delay: float) -> None:
        await asyncio.sleep(delay)
        self.config = {"max_items": 3}
        self._ready.set()

    async def process(self, items: List[int]) -> List[int]:
        if not self._started:
            raise RuntimeError("start() must be called first")
        await self._ready.wait()
        return items[: self.config["max_items"]]


async def fetch_in_order(ids: Iterable[str], fetch: Callable[[str], Awaitable[dict]]) -> List[dict]:
    return list(await asyncio.gather(*(fetch(i) for i in ids)))


# -- logical time ------------------------------------------------------------

@dataclass
class Versioned:
    value: object
    version: int


class VersionedCache:
    def __init__(self):
        self.local: Dict[str, Versioned] = {}

    def offer(self, key: str, remote: Versioned) -> Versioned:
        """Keep whichever entry has the higher version."""
        current = self.local.get(key)
        if current is None or remote.version > current.version:
            self.local[key] = remote
        return self.local[key]


class VectorClock:
    """Per-node event counters for tracking causality between nodes."""

    def __init__(self, node_id: str, initial: Optional[Mapping[str, int]] = None):
        self.node_id = node_id
        self.clock: Dict[str, int] = dict(initial or {})

    def increment(self) -> Dict[str, int]:
        self.clock[self.node_id] = self.clock.get(self.node_id, 0) + 1
        return dict(self.clock)

    def merge(self, other: Mapping[str, int]) -> Dict[str, int]:
        """Take the element-wise max with a received clock, then count the receive."""
        for node, counter in other.items():
            self.clock[node] = max(self.clock.get(node, 0), counter)
        return self.increment()

    @staticmethod
    def compare(a: Mapping[str, int], b: Mapping[str, int]) -> str:
        """Return "before", "after", "equal" or "concurrent" for ``a`` relative to ``b``."""
        nodes = set(a) | set(b)
        a_smaller = any(a.get(n, 0) < b.get(n, 0) for n in nodes)
        a_larger = any(a.get(n, 0) > b.get(n, 0) for n in nodes)
        if a_smaller and a_larger:
            return "concurrent"
        if a_smaller:
            return "before"
        if a_larger:
            return "after"
        return "equal"


# -- startup ordering --------------------------------------------------------

DEPENDENCIES = {
    "database": (),
    "cache": ("database",),
    "message_queue": (),
    "http_server": ("database", "cache", "message_queue"),
}


async def start_services(dependencies: Mapping[str, Tuple[str, ...]] = DEPENDENCIES,
                         rng: Optional[random.Random] = None) -> List[str]:
    """Start every service once all of its dependencies are up; returns start order."""
    unknown = sorted({dep for deps in dependencies.values() for dep in deps} - set(dependencies))
    if unknown:
        raise ValueError(f"unknown dependencies: {', '.join(unknown)}")
    # raises CycleError (a ValueError) before any task is scheduled
    graphlib.TopologicalSorter(dependencies).prepare()

    rng = rng or random.Random(0)
    started: List[str] = []
    tasks: Dict[str, asyncio.Task] = {}

    async def start(name: str) -> None:
        await asyncio.gather(*(tasks[dep] for dep in dependencies[name]))
        await asyncio.sleep(rng.uniform(0, 0.005))
        started.append(name)
        print(f"[Bootstrap] {name} ready")

    for name in dependencies:
        tasks[name] = asyncio.ensure_future(start(name))
    await asyncio.gather(*tasks.values())
    return started


# -- optimistic locking ----------------------------------------------------

class InsufficientFunds(Exception):
    pass


class ConcurrentModification(Exception):
    pass


@dataclass
class Account:
    balance: int
    version: int = 0


class AccountStore:
    def __init__(self, balances: Mapping[str, int]):
        self.accounts = {name: Account(balance) for name, balance in balances.items()}

    def read(self, name: str) -> Tuple[int, int]:
        account = self.accounts[name]
        return account.balance, account.version

    def compare_and_swap(self, updates: Mapping[str, Tuple[int, int]]) -> bool:
        """Apply ``{name: (expected_version, new_balance)}`` only if every version still matches."""
        if any(self.accounts[name].version != expected for name, (expected, _) in updates.items()):
            return False
        for name, (_, balance) in updates.items():
            account = self.accounts[name]
            account.balance = balance
            account.version += 1
        return True


@dataclass
class TransferResult:
    attempts: int
    balances: Dict[str, int] = field(default_factory=dict)


async def transfer(store: AccountStore, source: str, target: str, amount: int,
                   max_attempts: int = 3, delay: float = 0) -> TransferResult:
    """
    Move ``amount`` between two accounts with compare-and-swap.

    Raises:
        InsufficientFunds: the source cannot cover the amount (never retried)
        ValueError: the amount is not positive or both sides are the same account
        ConcurrentModification: every attempt lost a race
    """
    if amount <= 0:
        raise ValueError(f"transfer amount must be positive, got {amount}")
    if source == target:
        raise ValueError(f"cannot transfer from {source} to itself")

    for attempt in range(1, max_attempts + 1):
        source_balance, source_version = store.read(source)
        target_balance, target_version = store.read(target)
        if source_balance < amount:
            raise InsufficientFunds(f"{source} has {source_balance}, needs {amount}")

        await asyncio.sleep(delay)  # other transfers may run here

        if store.compare_and_swap({
            source: (source_version, source_balance - amount),
            target: (target_version, target_balance + amount),
        }):
            return TransferResult(attempt, {source: source_balance - amount, target: target_balance + amount})
        print(f"[Transfer] conflict on attempt {attempt}/{max_attempts}, retrying")
    raise ConcurrentModification(f"transfer {source}->{target} gave up after {max_attempts} attempts")


# -- injected time ---------------------------------------------------------

class FakeScheduler:
    """Runs scheduled callbacks only when the test advances time."""

    def __init__(self):
        self.now = 0.0
        self._tasks: List[Tuple[float, int, Callable[[], None]]] = []
        self._order = itertools.count()

    def schedule(self, callback: Callable[[], None], delay: float) -> None:
        self._tasks.append((self.now + delay, next(self._order), callback))
        self._tasks.sort()

    def advance(self, seconds: float) -> None:
        self.now += seconds
        while self._tasks and self._tasks[0][0] <= self.now:
            self._tasks.pop(0)[2]()

    def flush(self) -> None:
        while self._tasks:
            self._tasks.pop(0)[2]()


class LoopScheduler:
    def schedule(self, callback: Callable[[], None], delay: float) -> None:
        asyncio.get_running_loop().call_later(delay, callback)


class NotificationService:
    def __init__(self, scheduler=None, latency: float = 0.005):
        self.scheduler = scheduler or LoopScheduler()
        self.latency = latency
        self.sent: List[Tuple[str, str]] = []

    def send(self, user_id: str, message: str) -> asyncio.Future:
        """Queue a notification; the returned future resolves once it is sent."""
        done = asyncio.get_running_loop().create_future()

        def deliver():
            self.sent.append((user_id, message))
            if not done.done():
                done.set_result(True)

        self.scheduler.schedule(deliver, self.latency)
        return done


class SessionManager:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.sessions: Dict[str, float] = {}

    def create(self, user_id: str, ttl: float) -> float:
        self.sessions[user_id] = self.clock() + ttl
        return self.sessions[user_id]

    def is_valid(self, user_id: str) -> bool:
        expires = self.sessions.get(user_id)
        return expires is not None and self.clock() < expires


async def main():
    print("1. Ready signal instead of sleep:")
    processor = DataProcessor()
    init = processor.start()
    print(f"   processed {await processor.process([1, 2, 3, 4, 5])}")
    await init

    print("\n2. Request order survives random latency:")
    rng = random.Random(3)

    async def fetch(event_id):
        await asyncio.sleep(rng.uniform(0, 0.01))
        return {"id": event_id}

    events = await fetch_in_order("ABCD", fetch)
    print(f"   order: {', '.join(e['id'] for e in events)}")

    print("\n3. Versions and vector clocks instead of timestamps:")
    cache = VersionedCache()
    cache.offer("price", Versioned(10, version=2))
    print(f"   stale write ignored: {cache.offer('price', Versioned(9, version=1)).value}")
    node_a, node_b = VectorClock("A"), VectorClock("B")
    t1 = node_a.increment()
    t2 = node_b.increment()
    t3 = node_b.merge(t1)
    print(f"   t1={t1} t2={t2} t3={t3}")
    print(f"   t1 vs t3: {VectorClock.compare(t1, t3)}, t1 vs t2: {VectorClock.compare(t1, t2)}")

    print("\n4. Startup follows the dependency graph:")
    print(f"   order: {await start_services()}")

    print("\n5. Two concurrent transfers of 80 from an account holding 100:")
    store = AccountStore({"alice": 100, "bob": 0})
    results = await asyncio.gather(transfer(store, "alice", "bob", 80), transfer(store, "alice", "bob", 80),
                                   return_exceptions=True)
    for result in results:
        print(f"   {type(result).__name__}: {result}")
    print(f"   balances: {store.read('alice')[0]} / {store.read('bob')[0]} (no overdraft, nothing created)")

    print("\n6. Deterministic notification test with a fake scheduler:")
    scheduler = FakeScheduler()
    notifications = NotificationService(scheduler)
    pending = [notifications.send("user1", "Hello"), notifications.send("user2", "World")]
    print(f"   before advancing: {len(notifications.sent)} sent")
    scheduler.advance(notifications.latency)
    print(f"   after advancing: {len(notifications.sent)} sent, all resolved: {all(f.done() for f in pending)}")

    print("\n7. Sessions on an injected monotonic clock:")
    now = [0.0]
    sessions = SessionManager(clock=lambda: now[0])
    sessions.create("user1", ttl=1.0)
    now[0] = 0.5
    valid_early = sessions.is_valid("user1")
    now[0] = 1.5
    print(f"   valid at 0.5s: {valid_early}, valid at 1.5s: {sessions.is_valid('user1')}")


if __name__ == "__main__":
    asyncio.run(main())
