"""Acetics records — Task, Staff and Customer models."""

from acetics_cli.records.customer import Customer
from acetics_cli.records.staff import Staff
from acetics_cli.records.task import Task, TaskPriority, TaskStatus, TaskType

__all__ = ["Customer", "Staff", "Task", "TaskPriority", "TaskStatus", "TaskType"]
