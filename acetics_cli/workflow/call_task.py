"""
Call task workflow — the fixed prompt sequence that builds and submits a Task.

Order:
    start time → description → title → end time → assignee → status
    → (due date + due time, only when the task stays ongoing) → confirm

Derived values:
    - work_time: end − start as HH:MM (time of day only, no date)
    - due_date:  now for closed tasks, otherwise the entered date and time
                 with seconds forced to zero

Prompts run synchronously; only the submission is awaited.

Canceling the description skips it. Canceling any other prompt raises
AceticsOperatorAbort; declining the confirmation returns without sending.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime, time, timedelta
from typing import Any, Callable, Optional

from acetics_cli.engine.api_client import AceticsClient
from acetics_cli.engine.config import AceticsConfig
from acetics_cli.engine.errors import AceticsOperatorAbort, AceticsValidationError
from acetics_cli.records.staff import Staff
from acetics_cli.records.task import Task, TaskPriority, TaskStatus, TaskType
from acetics_cli.workflow.prompts import PromptCanceled, Prompter

logger = logging.getLogger("acetics_cli.workflow.call_task")

TIME_FORMAT = "%H:%M"
DATE_FORMAT = "%d/%m/%Y"
DATE_PLACEHOLDER = "dd/mm/yyyy"
DUE_TIME_OFFSET = timedelta(hours=1)
PREVIEW_MAX_CHARS = 20
PREVIEW_KEEP_CHARS = 17
SKIPPED = "<skipped>"

# Closed first: the cursor index for each status depends on this order.
STATUS_CHOICES = (TaskStatus.CLOSED, TaskStatus.ONGOING)


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------

def parse_time_of_day(value: str) -> time:
    """Parse "HH:MM" (or "HH:MM:SS"). Raises ValueError."""
    value = value.strip()
    for fmt in (TIME_FORMAT, "%H:%M:%S"):
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Invalid time of day: '{value}'")


def format_duration_to_hhmm(duration: timedelta) -> str:
    """
    Format a duration as zero-padded HH:MM.

    Hours and minutes are truncated toward zero, so a negative duration keeps
    its sign on both parts: -15 min → "00:-15", -75 min → "-1:-15".
    """
    total_minutes = int(duration.total_seconds() / 60)
    sign = -1 if total_minutes < 0 else 1
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign * hours:02d}:{sign * minutes:02d}"


def compute_work_time(start: time, end: time) -> str:
    """Elapsed time between two times of the same day, as HH:MM."""
    anchor = date.today()
    return format_duration_to_hhmm(datetime.combine(anchor, end) - datetime.combine(anchor, start))


def default_due_time(now: datetime) -> str:
    return (now + DUE_TIME_OFFSET).strftime(TIME_FORMAT)


def combine_due_date(due_day: date, due_time: time) -> datetime:
    return datetime.combine(due_day, due_time.replace(second=0, microsecond=0))


def format_description_preview(submission: str) -> str:
    char_count = len(submission)
    if char_count == 0:
        return SKIPPED
    if char_count <= PREVIEW_MAX_CHARS:
        return submission
    return submission[:PREVIEW_KEEP_CHARS] + "..."


def parse_due_date(value: str) -> date:
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


# ---------------------------------------------------------------------------
# Workflow
# ---------------------------------------------------------------------------

class CallTaskWorkflow:
    """
    Collects one task from the operator and submits it.

    Usage:
        workflow = CallTaskWorkflow(config, client, prompter)
        response = workflow.run()   # None when the operator declined
    """

    def __init__(
        self,
        config: AceticsConfig,
        client: AceticsClient,
        prompter: Prompter,
        task_type: TaskType = TaskType.CUSTOMER_CALL,
        priority: TaskPriority = TaskPriority.NORMAL,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config
        self.client = client
        self.prompter = prompter
        self.labels = prompter.labels
        self.task_type = task_type
        self.priority = priority
        self._now = clock

    # -- validators ---------------------------------------------------------

    def _validate_required(self, value: str) -> None:
        if not value.strip():
            raise AceticsValidationError(self.labels.get("error_required"), field="title")

    def _validate_time(self, value: str) -> None:
        try:
            parse_time_of_day(value)
        except ValueError:
            raise AceticsValidationError(self.labels.get("error_invalid_time"), field="time") from None

    # -- prompts ------------------------------------------------------------

    def _required(self, ask: Callable[[], Any]) -> Any:
        try:
            return ask()
        except PromptCanceled as e:
            logger.info(f"Operator canceled '{e.prompt}'")
            raise AceticsOperatorAbort(self.labels.get("canceled"), prompt=e.prompt) from None

    def ask_time(self, label_key: str, default: Optional[str] = None) -> time:
        if default is None:
            default = self._now().strftime(TIME_FORMAT)
        answer = self._required(lambda: self.prompter.text(
            self.labels.get(label_key),
            default=default,
            validator=self._validate_time,
        ))
        return parse_time_of_day(answer)

    def ask_description(self) -> str:
        message = self.labels.get("prompt_description")
        try:
            return self.prompter.editor(message, formatter=format_description_preview)
        except PromptCanceled:
            self.prompter.echo(message, SKIPPED)
            return ""

    def ask_title(self) -> str:
        return self._required(lambda: self.prompter.text(
            self.labels.get("prompt_title"),
            validator=self._validate_required,
        ))

    def ask_assignee(self) -> Staff:
        return self._required(lambda: self.prompter.select(
            self.labels.get("prompt_assignee"),
            self.config.staffs,
            starting_cursor=self.config.default_staff_index,
        ))

    def status_cursor(self, staff: Staff) -> int:
        """Default staff usually logs finished calls: favor Closed for them."""
        preferred = TaskStatus.CLOSED if self.config.is_default_staff(staff) else TaskStatus.ONGOING
        return STATUS_CHOICES.index(preferred)

    def status_label(self, status: TaskStatus) -> str:
        return self.labels.get(f"status_{status.value.lower()}")

    def ask_status(self, staff: Staff) -> TaskStatus:
        return self._required(lambda: self.prompter.select(
            self.labels.get("prompt_status"),
            STATUS_CHOICES,
            starting_cursor=self.status_cursor(staff),
            display=self.status_label,
        ))

    def ask_due_date(self, status: TaskStatus) -> datetime:
        if status is TaskStatus.CLOSED:
            return self._now()

        now = self._now()
        due_day = self._required(lambda: self.prompter.custom(
            self.labels.get("prompt_due_date"),
            parser=parse_due_date,
            starting_input=now.strftime(DATE_FORMAT),
            placeholder=DATE_PLACEHOLDER,
            error_message=self.labels.get("error_invalid_date"),
            formatter=lambda d: d.strftime(DATE_FORMAT),
        ))
        due_time = self.ask_time("prompt_due_time", default_due_time(now))
        return combine_due_date(due_day, due_time)

    def ask_confirm(self) -> bool:
        return self._required(lambda: self.prompter.confirm(
            self.labels.get("prompt_confirm"), default=True
        ))

    # -- flow ---------------------------------------------------------------

    def collect(self) -> Optional[Task]:
        """Run every prompt in order. Returns None when the operator declines."""
        start = self.ask_time("prompt_start_time")
        description = self.ask_description()
        title = self.ask_title()
        end = self.ask_time("prompt_end_time")
        work_time = compute_work_time(start, end)

        staff = self.ask_assignee()
        status = self.ask_status(staff)
        due_date = self.ask_due_date(status)

        if not self.ask_confirm():
            logger.info("Operator declined to save the task")
            return None

        return (
            Task.new(self.task_type, title, description)
            .with_assigned_staff(staff)
            .with_work_time(work_time)
            .with_due_date(due_date)
            .with_priority(self.priority)
            .with_status(status)
        )

    async def submit(self, task: Task) -> Any:
        logger.info(f"Submitting task '{task.title}' ({task.status.value})")
        return await self.client.create_task(task)

    def run(self) -> Optional[Any]:
        """
        Collect a task, then submit it in a fresh event loop. Returns the
        server response, or None when the operator declined.
        """
        task = self.collect()
        if task is None:
            return None
        return asyncio.run(self.submit(task))
