"""
Feedback Integrity - violation

Every response claims success. Orders are "created" before they are
processed, the health check never looks at its dependencies, a payment
timeout is reported as a card decline, a failed read returns a fabricated
profile, notifications are "sent" when no sender exists and the metrics
count every attempt as a success.
"""

import asyncio
import random


class OrderService:
    def __init__(self):
        self.queue = []

    def create_order(self, order):
        self.queue.append({"id": f"order_{len(self.queue) + 1:04d}", "data": order, "status": "pending"})
        return {"success": True, "message": "Order created successfully", "order_id": self.queue[-1]["id"]}

    def process_queue(self, rng):
        for order in self.queue:
            order["status"] = "failed" if rng.random() < 0.3 else "completed"


class HealthChecker:
    def __init__(self, db=None, cache=None):
        self.db = db
        self.cache = cache

    def check(self):
        return {"status": "healthy", "uptime": 12345}


class UserProfileService:
    def __init__(self, database):
        self.database = database

    def profile(self, user_id):
        try:
            return self.database[user_id]
        except (KeyError, TypeError):
            print("DB error, returning default")
            return {"id": user_id, "name": "User", "email": "unknown", "preferences": {}}


class PaymentProcessor:
    def process_payment(self, amount):
        try:
            raise TimeoutError("timeout after 5000ms")
        except TimeoutError:
            # a guess reported as fact
            return {"success": False, "error": "Card was declined by issuing bank"}


class NotificationService:
    email_service = None

    def send_notification(self, user_id, message):
        if self.email_service is not None:
            try:
                self.email_service.send(user_id, message)
            except Exception:
                pass
        return {"success": True, "message": "Notification sent successfully"}


class MetricsCollector:
    def __init__(self):
        self.attempted = 0
        self.succeeded = 0

    def record_request(self, operation):
        self.attempted += 1
        self.succeeded += 1

    def success_rate(self):
        return self.succeeded / self.attempted * 100


class AsyncJobService:
    def __init__(self):
        self.jobs = {}

    async def submit_job(self, data):
        job_id = f"job_{len(self.jobs) + 1:04d}"
        self.jobs[job_id] = {"status": "processing"}
        task = asyncio.create_task(self._process(job_id))
        return {"job_id": job_id, "task": task}

    async def _process(self, job_id):
        await asyncio.sleep(0.01)
        print(f"Job {job_id} finished, but status not updated")

    def job_status(self, job_id):
        return self.jobs.get(job_id, {"error": "Job not found"})


async def main():
    orders = OrderService()
    print("Order API response:", orders.create_order({"item": "widget", "qty": 1}))
    orders.process_queue(random.Random(3))
    print("What actually happened later:", orders.queue[0]["status"])

    print("\nHealth check with no database and no cache:", HealthChecker().check())

    print("\nPayment result after a timeout:", PaymentProcessor().process_payment(100))
    print("Profile for a missing user:", UserProfileService({}).profile("user_404"))
    print("Notification with no email service:", NotificationService().send_notification("user1", "Hello"))

    metrics = MetricsCollector()
    for name in ("op1", "op2", "op3"):
        metrics.record_request(name)
    print(f"Success rate: {metrics.success_rate():.0f}% (nothing was checked)")

    jobs = AsyncJobService()
    job = await jobs.submit_job({"task": "process"})
    await job["task"]
    print("Job status after completion:", jobs.job_status(job["job_id"]))


if __name__ == "__main__":
    asyncio.run(main())
