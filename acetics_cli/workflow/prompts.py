"""
Line-based interactive prompts used by the task workflow.

Each prompt reads one answer at a time through an injectable input function
and echoes a one-line summary once the answer is accepted:

    > Titre: Rappeler M. Martin

Validators raise AceticsValidationError; the message is printed and the
prompt asked again. End of input (Ctrl-D) raises PromptCanceled so callers
can decide between skipping the field and aborting.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
import tempfile
from typing import Callable, Optional, Sequence, TextIO, TypeVar

from acetics_cli.engine.config import DEFAULT_EDITOR
from acetics_cli.engine.errors import AceticsValidationError
from acetics_cli.translation_sets.labels import Labels

logger = logging.getLogger("acetics_cli.workflow.prompts")

T = TypeVar("T")

Validator = Callable[[str], None]

_YES = {"y", "yes", "o", "oui"}
_NO = {"n", "no", "non"}


class PromptCanceled(Exception):
    """The operator closed input (EOF) instead of answering."""

    def __init__(self, message: str):
        self.prompt = message
        super().__init__(f"Prompt canceled: {message}")


def launch_editor(command: str, initial: str = "", suffix: str = ".md") -> str:
    """
    Open *command* on a temporary file seeded with *initial* and return the
    saved contents without trailing newlines.
    """
    fd, path = tempfile.mkstemp(suffix=suffix, prefix="acetics-")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(initial)
        subprocess.run([*shlex.split(command), path], check=True)
        with open(path, "r", encoding="utf-8") as f:
            return f.read().rstrip("\n")
    finally:
        os.unlink(path)


class Prompter:
    """Asks questions on a terminal, one line per answer."""

    def __init__(
        self,
        labels: Labels,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
        editor_command: str = DEFAULT_EDITOR,
        editor_runner: Optional[Callable[[str, str, str], str]] = None,
    ):
        self.labels = labels
        self._input = input_func
        self._output = output
        self._editor_command = editor_command
        self._editor_runner = editor_runner or launch_editor

    # -----------------------------------------------------------------------
    # Output helpers
    # -----------------------------------------------------------------------

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _print(self, text: str) -> None:
        print(text, file=self.output)

    def echo(self, message: str, answer: str) -> None:
        self._print(f"> {message} {answer}")

    def _error(self, message: str) -> None:
        self._print(f"# {message}")

    def _ask(self, message: str, hint: Optional[str] = None) -> str:
        question = f"? {message} "
        if hint:
            question += f"({hint}) "
        try:
            return self._input(question)
        except EOFError:
            raise PromptCanceled(message) from None

    # -----------------------------------------------------------------------
    # Prompts
    # -----------------------------------------------------------------------

    def text(
        self,
        message: str,
        default: Optional[str] = None,
        validator: Optional[Validator] = None,
        formatter: Callable[[str], str] = str,
    ) -> str:
        """Free-text answer; an empty line takes *default* when one is set."""
        while True:
            answer = self._ask(message, default)
            if not answer and default is not None:
                answer = default
            if validator is not None:
                try:
                    validator(answer)
                except AceticsValidationError as e:
                    self._error(e.message)
                    continue
            self.echo(message, formatter(answer))
            return answer

    def custom(
        self,
        message: str,
        parser: Callable[[str], T],
        starting_input: str,
        error_message: str,
        formatter: Callable[[T], str] = str,
        placeholder: Optional[str] = None,
    ) -> T:
        """
        Parsed answer. An empty line submits *starting_input*; a value the
        parser rejects with ValueError prints *error_message* and asks again.
        """
        hint = f"{placeholder}: {starting_input}" if placeholder else starting_input
        while True:
            answer = self._ask(message, hint) or starting_input
            try:
                value = parser(answer)
            except ValueError:
                self._error(error_message)
                continue
            self.echo(message, formatter(value))
            return value

    def select(
        self,
        message: str,
        options: Sequence[T],
        starting_cursor: int = 0,
        display: Callable[[T], str] = str,
    ) -> T:
        """Pick one of *options* by number; an empty line picks the cursor."""
        if not options:
            raise ValueError(f"No options to select from for '{message}'")
        cursor = min(max(starting_cursor, 0), len(options) - 1)

        self._print(f"? {message}")
        for index, option in enumerate(options):
            marker = ">" if index == cursor else " "
            self._print(f"{marker} {index + 1}) {display(option)}")

        while True:
            answer = self._ask(message, self.labels.get("select_help")).strip()
            if not answer:
                choice = options[cursor]
            elif answer.isdecimal() and 1 <= int(answer) <= len(options):
                choice = options[int(answer) - 1]
            else:
                self._error(self.labels.get("error_invalid_choice", count=len(options)))
                continue
            self.echo(message, display(choice))
            return choice

    def confirm(self, message: str, default: bool = True) -> bool:
        yes = self.labels.get("confirm_yes")
        no = self.labels.get("confirm_no")
        hint = f"{yes.upper()}/{no}" if default else f"{yes}/{no.upper()}"
        while True:
            answer = self._ask(message, hint).strip().lower()
            if not answer:
                result = default
            elif answer in _YES or answer == yes:
                result = True
            elif answer in _NO or answer == no:
                result = False
            else:
                self._error(self.labels.get("error_invalid_confirm"))
                continue
            self.echo(message, yes if result else no)
            return result

    def editor(
        self,
        message: str,
        formatter: Callable[[str], str] = str,
        file_extension: str = ".md",
    ) -> str:
        """
        Multi-line answer. "e" opens the editor on the current content, an
        empty line submits it, any other line is taken as the content itself.
        End of input keeps content already saved from the editor.
        """
        content = ""
        while True:
            try:
                answer = self._ask(message, self.labels.get("editor_help"))
            except PromptCanceled:
                if not content:
                    raise
                answer = ""
            if answer.strip().lower() == "e":
                try:
                    content = self._editor_runner(self._editor_command, content, file_extension)
                except (OSError, subprocess.CalledProcessError) as e:
                    logger.warning(f"Editor '{self._editor_command}' failed: {e}")
                    self._error(str(e))
                continue
            if answer:
                content = answer
            self.echo(message, formatter(content))
            return content
