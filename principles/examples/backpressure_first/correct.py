"""
Backpressure-First - correct implementation

Ingress is rate limited by a token bucket, work is buffered in a bounded
queue, a worker pool caps concurrency and every job runs under a timeout.
When buffers are full the caller gets an explicit 429/503 instead of the
system silently growing.
"""

import asyncio
import json
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional


class TokenBucket:
    """Token-bucket rate limiter. ``clock`` returns seconds."""

    def __init__(self, rate_per_sec: float, burst: int, clock: Callable[[], float] = time.monotonic):
        self.rate = rate_per_sec
        self.capacity = burst
        self.tokens = float(burst)
        self.clock = clock
        self.last_refill = clock()

    def allow(self) -> bool:
        now = self.clock()
        to_add = max(0.0, now - self.last_refill) * self.rate
        if to_add >= 1:
            self.tokens = min(self.capacity, self.tokens + to_add)
            self.last_refill = now
        if self.tokens >= 1:
            self.tokens -= 1
            return True
        return False


@dataclass
class Admission:
    ok: bool
    code: int = 202
    message: str = "Accepted"


def accept_request(queue: asyncio.Queue, limiter: TokenBucket, job) -> Admission:
    """API boundary: rate limit first, then offer to the bounded queue."""
    if not limiter.allow():
        return Admission(False, 429, "Too Many Requests")
    try:
        queue.put_nowait(job)
    except asyncio.QueueFull:
        return Admission(False, 503, "Overloaded, try later")
    return Admission(True)


@dataclass
class Worker:
    queue: asyncio.Queue
    max_concurrency: int
    task_timeout: float
    completed: int = 0
    failed: int = 0
    timed_out: int = 0
    in_flight: int = 0
    _tasks: list = field(default_factory=list)

    async def _consume(self) -> None:
        while True:
            job = await self.queue.get()
            self.in_flight += 1
            try:
                await asyncio.wait_for(job(), timeout=self.task_timeout)
                self.completed += 1
            except asyncio.TimeoutError:
                self.timed_out += 1
                self.failed += 1
            except Exception:
                self.failed += 1
            finally:
                self.in_flight -= 1
                self.queue.task_done()

    def start(self) -> None:
        # concurrency is capped by the number of consumers
        self._tasks = [asyncio.create_task(self._consume()) for _ in range(self.max_concurrency)]

    async def stop(self) -> None:
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)


def make_work(rng: random.Random, very_slow_every: int = 40, very_slow: float = 0.3):
    """Job factory: short random latency with an occasional very slow job."""
    counter = 0

    def factory():
        nonlocal counter
        counter += 1
        delay = very_slow if counter % very_slow_every == 0 else rng.uniform(0.001, 0.01)

        async def job():
            await asyncio.sleep(delay)

        return job

    return factory


def snapshot(queue: asyncio.Queue, worker: Worker, limiter: TokenBucket) -> str:
    return json.dumps({
        "queueSize": queue.qsize(),
        "inFlight": worker.in_flight,
        "completed": worker.completed,
        "failed": worker.failed,
        "timedOut": worker.timed_out,
        "tokens": round(limiter.tokens),
    })


async def main(bursts: int = 5, burst_size: int = 200, drain_timeout: Optional[float] = 2.0):
    queue: asyncio.Queue = asyncio.Queue(maxsize=50)
    limiter = TokenBucket(rate_per_sec=300, burst=60)
    worker = Worker(queue, max_concurrency=8, task_timeout=0.1)
    worker.start()
    make_job = make_work(random.Random(7))

    accepted = shed = 0
    rejections = {429: 0, 503: 0}
    for _ in range(bursts):
        for _ in range(burst_size):
            result = accept_request(queue, limiter, make_job())
            if result.ok:
                accepted += 1
            else:
                shed += 1
                rejections[result.code] += 1
        print(snapshot(queue, worker, limiter))
        await asyncio.sleep(0.05)

    try:
        await asyncio.wait_for(queue.join(), timeout=drain_timeout)
    except asyncio.TimeoutError:
        print("Queue did not drain in time")
    await worker.stop()

    print(snapshot(queue, worker, limiter))
    print("Done (correct demo).", json.dumps({
        "accepted": accepted,
        "shed": shed,
        "rejected429": rejections[429],
        "rejected503": rejections[503],
        "queueSize": queue.qsize(),
        "completed": worker.completed,
        "timedOut": worker.timed_out,
    }))


if __name__ == "__main__":
    asyncio.run(main())
