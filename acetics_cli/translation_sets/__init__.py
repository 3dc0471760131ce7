"""Acetics CLI translation sets."""

from acetics_cli.translation_sets.labels import CALL_TASK_LABELS, DEFAULT_LANGUAGE, Labels

__all__ = ["CALL_TASK_LABELS", "DEFAULT_LANGUAGE", "Labels"]
