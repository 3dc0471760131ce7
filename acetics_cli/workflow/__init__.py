"""Acetics CLI workflow — prompts and the call task sequence."""

from acetics_cli.workflow.call_task import CallTaskWorkflow  # noqa: F401
from acetics_cli.workflow.prompts import PromptCanceled, Prompter  # noqa: F401

__all__ = ["CallTaskWorkflow", "PromptCanceled", "Prompter"]
