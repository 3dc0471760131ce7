"""Task record — the work item submitted to POST /tasks/create."""

from __future__ import annotations

from datetime import datetime
from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from acetics_cli.records.customer import Customer
from acetics_cli.records.staff import Staff

# Staff id used when nothing else assigns the task.
DEFAULT_ASSIGNED_STAFF_ID = 8


class TaskPriority(str, Enum):
    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    URGENT = "URGENT"


class TaskStatus(str, Enum):
    ONGOING = "ONGOING"
    CLOSED = "CLOSED"


class TaskType(IntEnum):
    """Acetics task type ids, sent as fk_type."""

    CUSTOMER_CALL = 1
    TECHNICAL = 2
    ADMINISTRATIVE = 3
    REMINDER = 4


class Task(BaseModel):
    """
    Work item sent to Acetics.

    Built with Task.new() and refined with the with_* methods, each of which
    returns a copy with exactly one field replaced. No validation happens
    here; required-field checks belong to the prompts collecting the values.
    """

    model_config = ConfigDict(frozen=True)

    fk_type: int = Field(description="TaskType id")
    fk_assigned_staff: Optional[int] = Field(default=DEFAULT_ASSIGNED_STAFF_ID)
    fk_assigned_group: Optional[int] = None
    fk_customer: Optional[int] = None
    fk_contract: Optional[int] = None

    title: str
    description: str = ""

    due_date: datetime = Field(default_factory=datetime.now)
    work_time: Optional[str] = Field(default=None, description="Elapsed time as HH:MM")
    estimated_time: Optional[str] = None

    priority: TaskPriority = TaskPriority.NORMAL
    status: TaskStatus = TaskStatus.ONGOING

    @classmethod
    def new(cls, task_type: TaskType, title: str, description: str) -> "Task":
        return cls(fk_type=int(task_type), title=title, description=description)

    def _with(self, **update) -> "Task":
        return self.model_copy(update=update)

    def with_assigned_staff(self, staff: Optional[Staff]) -> "Task":
        return self._with(fk_assigned_staff=staff.id if staff is not None else None)

    def with_assigned_group(self, group_id: Optional[int]) -> "Task":
        return self._with(fk_assigned_group=group_id)

    def with_customer(self, customer: Optional[Customer]) -> "Task":
        return self._with(fk_customer=customer.id if customer is not None else None)

    def with_contract(self, contract_id: Optional[int]) -> "Task":
        return self._with(fk_contract=contract_id)

    def with_due_date(self, due_date: datetime) -> "Task":
        return self._with(due_date=due_date)

    def with_work_time(self, work_time: Optional[str]) -> "Task":
        return self._with(work_time=work_time)

    def with_estimated_time(self, estimated_time: Optional[str]) -> "Task":
        return self._with(estimated_time=estimated_time)

    def with_priority(self, priority: TaskPriority) -> "Task":
        return self._with(priority=priority)

    def with_status(self, status: TaskStatus) -> "Task":
        return self._with(status=status)
