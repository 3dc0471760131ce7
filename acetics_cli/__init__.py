"""
Acetics CLI — Interactive task entry for the Acetics task-management API.

Prompts an operator for a call report (times, description, title, assignee,
status, due date) and submits it as a Task to POST {endpoint}/tasks/create.
"""

__version__ = "0.3.0"
__all__ = ["engine", "records", "translation_sets", "workflow"]
