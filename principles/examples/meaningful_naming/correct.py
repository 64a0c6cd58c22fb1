"""
Meaningful Naming - correct implementation

A small task manager where class, method and variable names describe the
domain: ``Task.mark_as_completed``, ``TaskManager.overdue_tasks``,
``days_until_due``. Predicates start with ``is_``, collections are plural and
the priority values are an Enum instead of bare strings.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from itertools import count
from typing import Dict, List, Optional


class TaskPriority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass
class Task:
    id: int
    title: str
    description: str
    due_date: date
    priority: TaskPriority
    is_completed: bool = False
    completion_date: Optional[date] = None

    def mark_as_completed(self, completed_on: date) -> None:
        self.is_completed = True
        self.completion_date = completed_on

    def is_overdue(self, today: date) -> bool:
        return not self.is_completed and today > self.due_date

    def days_until_due(self, today: date) -> int:
        return (self.due_date - today).days


@dataclass
class TaskManager:
    today: date
    tasks: List[Task] = field(default_factory=list)
    _task_ids: count = field(default_factory=lambda: count(1), repr=False)

    def create_task(self, title: str, description: str, due_date: date, priority: TaskPriority) -> Task:
        new_task = Task(next(self._task_ids), title, description, due_date, priority)
        self.tasks.append(new_task)
        return new_task

    def find_task_by_id(self, task_id: int) -> Optional[Task]:
        return next((task for task in self.tasks if task.id == task_id), None)

    def completed_tasks(self) -> List[Task]:
        return [task for task in self.tasks if task.is_completed]

    def pending_tasks(self) -> List[Task]:
        return [task for task in self.tasks if not task.is_completed]

    def overdue_tasks(self) -> List[Task]:
        return [task for task in self.tasks if task.is_overdue(self.today)]

    def tasks_with_priority(self, priority: TaskPriority) -> List[Task]:
        return [task for task in self.tasks if task.priority is priority]

    def tasks_sorted_by_due_date(self) -> List[Task]:
        return sorted(self.tasks, key=lambda task: task.due_date)

    def complete_task(self, task_id: int) -> bool:
        task = self.find_task_by_id(task_id)
        if task is None:
            return False
        task.mark_as_completed(self.today)
        return True

    def delete_task(self, task_id: int) -> bool:
        remaining_tasks = [task for task in self.tasks if task.id != task_id]
        was_deleted = len(remaining_tasks) != len(self.tasks)
        self.tasks = remaining_tasks
        return was_deleted

    def task_statistics(self) -> Dict[str, float]:
        total_tasks = len(self.tasks)
        completed_tasks = len(self.completed_tasks())
        return {
            "total_tasks": total_tasks,
            "completed_tasks": completed_tasks,
            "pending_tasks": len(self.pending_tasks()),
            "overdue_tasks": len(self.overdue_tasks()),
            "completion_rate": completed_tasks / total_tasks * 100 if total_tasks else 0.0,
        }


def describe(task: Task) -> str:
    status = "completed" if task.is_completed else "pending"
    return f"- {task.title} ({task.priority.value} priority, due {task.due_date:%a %b %d %Y}, {status})"


def main():
    task_manager = TaskManager(today=date(2023, 7, 12))
    task_manager.create_task("Buy groceries", "Milk, eggs, bread and vegetables",
                             date(2023, 7, 15), TaskPriority.MEDIUM)
    task_manager.create_task("Complete project proposal", "Finish the budget and summary",
                             date(2023, 7, 10), TaskPriority.HIGH)
    exercise_task = task_manager.create_task("Go for a run", "30 minutes in the park",
                                             date(2023, 7, 8), TaskPriority.LOW)
    task_manager.complete_task(exercise_task.id)

    print("All tasks:")
    for task in task_manager.tasks_sorted_by_due_date():
        print(describe(task))

    print("\nOverdue tasks:")
    for task in task_manager.overdue_tasks():
        print(f"{describe(task)} {-task.days_until_due(task_manager.today)} days late")

    print("\nHigh priority tasks:")
    for task in task_manager.tasks_with_priority(TaskPriority.HIGH):
        print(describe(task))

    task_statistics = task_manager.task_statistics()
    print("\nTask statistics:")
    for name, value in task_statistics.items():
        label = name.replace("_", " ").capitalize()
        print(f"- {label}: {value:.2f}%" if name == "completion_rate" else f"- {label}: {value}")


if __name__ == "__main__":
    main()
