"""
Backpressure-First - violation

Everything that arrives is accepted into an unbounded queue and the worker
starts a new task per job with no concurrency cap and no timeout. Slow jobs
pile up, the queue and the number of in-flight tasks grow with load, and the
caller never hears that the system is struggling.
"""

import asyncio
import json
import random


class UnboundedQueue:
    def __init__(self):
        self.items = []

    def enqueue(self, item):
        # no capacity check, always says yes
        self.items.append(item)
        return True

    def dequeue(self):
        return self.items.pop(0) if self.items else None

    def size(self):
        return len(self.items)


class NaiveWorker:
    def __init__(self, queue):
        self.queue = queue
        self.active = 0
        self.tasks = set()

    async def _run(self, job):
        self.active += 1
        try:
            await job()
        finally:
            self.active -= 1

    async def pump(self, per_tick=400):
        # grabs as much as it can every tick, nothing bounds self.active
        while True:
            for _ in range(per_tick):
                job = self.queue.dequeue()
                if job is None:
                    break
                task = asyncio.create_task(self._run(job))
                self.tasks.add(task)
                task.add_done_callback(self.tasks.discard)
            await asyncio.sleep(0)


def make_work(rng, very_slow_every=50, very_slow=5.0):
    counter = 0

    def factory():
        nonlocal counter
        counter += 1
        delay = very_slow if counter % very_slow_every == 0 else rng.uniform(0.005, 0.05)

        async def job():
            await asyncio.sleep(delay)  # no timeout anywhere

        return job

    return factory


async def main(total=20000, observe_for=0.5):
    queue = UnboundedQueue()
    worker = NaiveWorker(queue)
    pump = asyncio.create_task(worker.pump())

    make_job = make_work(random.Random(7))
    for _ in range(total):
        queue.enqueue(make_job())  # the caller is never pushed back

    for _ in range(5):
        print(json.dumps({"queueSize": queue.size(), "active": worker.active}))
        await asyncio.sleep(observe_for / 5)

    print("Done (violation demo). Queue size at end:", queue.size(),
          "| still running:", worker.active,
          "| stuck slow jobs:", sum(1 for _ in worker.tasks))

    pump.cancel()
    for task in list(worker.tasks):
        task.cancel()
    await asyncio.gather(pump, *worker.tasks, return_exceptions=True)


if __name__ == "__main__":
    asyncio.run(main())
