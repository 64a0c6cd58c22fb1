"""
DSDM - correct implementation

Requirements carry a MoSCoW priority, work happens in timeboxes that cannot
close with an unfinished Must-have, and the project only advances through
its phases when the gate for the next one is met.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List


class Priority(Enum):
    MUST = "Must have"
    SHOULD = "Should have"
    COULD = "Could have"
    WONT = "Won't have this time"


class Phase(Enum):
    PRE_PROJECT = "Pre-Project"
    FEASIBILITY = "Feasibility"
    FOUNDATIONS = "Foundations"
    EVOLUTIONARY_DEVELOPMENT = "Evolutionary Development"
    DEPLOYMENT = "Deployment"
    POST_PROJECT = "Post-Project"


class GateNotMet(Exception):
    pass


@dataclass
class Requirement:
    id: str
    description: str
    priority: Priority
    completed: bool = False

    def complete(self) -> None:
        self.completed = True


@dataclass
class Timebox:
    name: str
    duration_days: int
    start: date
    requirements: List[Requirement] = field(default_factory=list)
    status: str = "Not Started"

    def add(self, *requirements: Requirement) -> None:
        self.requirements.extend(requirements)

    def begin(self) -> None:
        self.status = "In Progress"
        print(f"Starting timebox: {self.name} ({self.duration_days} days from {self.start})")

    def close(self) -> None:
        open_musts = [r.id for r in self.requirements if r.priority is Priority.MUST and not r.completed]
        if open_musts:
            raise GateNotMet(f"Cannot complete timebox {self.name!r}: open Must-haves {open_musts}")
        deferred = [r.id for r in self.requirements if not r.completed]
        self.status = "Completed"
        suffix = f", deferred: {deferred}" if deferred else ""
        print(f"Completed timebox: {self.name} ({self.completion()}%{suffix})")

    def completion(self) -> int:
        if not self.requirements:
            return 0
        return round(100 * sum(r.completed for r in self.requirements) / len(self.requirements))


class DSDMProject:
    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.stakeholders: List[tuple] = []
        self.requirements: List[Requirement] = []
        self.timeboxes: List[Timebox] = []
        self.phase = Phase.PRE_PROJECT

    def add_stakeholder(self, name: str, role: str) -> None:
        self.stakeholders.append((name, role))

    def add_requirement(self, requirement: Requirement) -> None:
        self.requirements.append(requirement)

    def create_timebox(self, name: str, duration_days: int, start: date) -> Timebox:
        timebox = Timebox(name, duration_days, start)
        self.timeboxes.append(timebox)
        return timebox

    def _move_to(self, phase: Phase) -> None:
        self.phase = phase
        print(f"Project {self.name} moved to {phase.value} phase")

    def to_feasibility(self) -> None:
        self._move_to(Phase.FEASIBILITY)

    def to_foundations(self) -> None:
        if not self.stakeholders:
            raise GateNotMet("Cannot move to Foundations: no stakeholders defined")
        self._move_to(Phase.FOUNDATIONS)

    def to_evolutionary_development(self) -> None:
        if not self.requirements:
            raise GateNotMet("Cannot move to Evolutionary Development: no requirements defined")
        if not self.timeboxes:
            raise GateNotMet("Cannot move to Evolutionary Development: no timeboxes defined")
        self._move_to(Phase.EVOLUTIONARY_DEVELOPMENT)

    def to_deployment(self) -> None:
        if any(tb.status != "Completed" for tb in self.timeboxes):
            raise GateNotMet("Cannot move to Deployment: not all timeboxes are completed")
        self._move_to(Phase.DEPLOYMENT)

    def complete(self) -> None:
        if self.phase is not Phase.DEPLOYMENT:
            raise GateNotMet("Cannot complete project: not in Deployment phase")
        self.phase = Phase.POST_PROJECT
        print(f"Project {self.name} completed successfully")

    def status(self) -> dict:
        done = sum(r.completed for r in self.requirements)
        musts = [r for r in self.requirements if r.priority is Priority.MUST]
        return {
            "name": self.name,
            "phase": self.phase.value,
            "timeboxes": f"{sum(tb.status == 'Completed' for tb in self.timeboxes)}/{len(self.timeboxes)}",
            "requirements": f"{done}/{len(self.requirements)}",
            "must_haves": f"{sum(r.completed for r in musts)}/{len(musts)}",
        }


def main():
    project = DSDMProject("Customer Portal", "A web portal for customers to manage their accounts and orders")
    for name, role in [("John Smith", "Business Ambassador"), ("Sarah Johnson", "Technical Coordinator"),
                       ("Mike Brown", "Business Visionary"), ("Lisa Davis", "Business Analyst")]:
        project.add_stakeholder(name, role)

    project.to_feasibility()
    print("Conducting feasibility workshops with stakeholders...")
    project.to_foundations()

    reqs = [
        Requirement("REQ-001", "User login and authentication", Priority.MUST),
        Requirement("REQ-002", "View account details", Priority.MUST),
        Requirement("REQ-003", "Update personal information", Priority.SHOULD),
        Requirement("REQ-004", "View order history", Priority.MUST),
        Requirement("REQ-005", "Track order status", Priority.SHOULD),
        Requirement("REQ-006", "Cancel orders", Priority.COULD),
        Requirement("REQ-007", "Save favorite products", Priority.COULD),
        Requirement("REQ-008", "Integration with social media", Priority.WONT),
    ]
    for req in reqs:
        project.add_requirement(req)

    tb1 = project.create_timebox("Authentication & Basic Account", 10, date(2023, 1, 15))
    tb2 = project.create_timebox("Order Management", 15, date(2023, 1, 25))
    tb3 = project.create_timebox("Additional Features", 10, date(2023, 2, 10))
    tb1.add(reqs[0], reqs[1], reqs[2])
    tb2.add(reqs[3], reqs[4])
    tb3.add(reqs[5], reqs[6])

    project.to_evolutionary_development()

    print("\n--- Evolutionary Development ---")
    tb1.begin()
    reqs[0].complete()
    try:
        tb1.close()
    except GateNotMet as e:
        print(f"Gate: {e}")
    reqs[1].complete()
    print("Daily stand-up: discussing progress and challenges...")
    reqs[2].complete()
    tb1.close()

    tb2.begin()
    reqs[3].complete()
    reqs[4].complete()
    tb2.close()

    try:
        project.to_deployment()
    except GateNotMet as e:
        print(f"Gate: {e}")

    tb3.begin()
    reqs[5].complete()
    tb3.close()  # the Could-have REQ-007 is deferred, not blocking

    project.to_deployment()
    print("\n--- Deployment ---")
    print("Training users, finalising documentation, deploying to production...")
    project.complete()

    print("\n--- Final Project Status ---")
    for key, value in project.status().items():
        print(f"{key}: {value}")


if __name__ == "__main__":
    main()
