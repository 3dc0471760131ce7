"""
Acetics CLI Test Suite — Shared fixtures and configuration.

Run:  pytest tests/ -v
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, List, Optional

import httpx
import pytest

from acetics_cli.engine.config import AceticsConfig
from acetics_cli.records.staff import Staff
from acetics_cli.translation_sets.labels import Labels


# Fixed "now" used by workflow tests.
NOW = datetime(2026, 10, 16, 9, 30, 15)

CONFIG_TOML = """\
endpoint = "https://acetics.test/api"
token = "secret-token"
default_staff_index = 0
language = "fr"

[[staffs]]
id = 8
name = "Accueil"

[[staffs]]
id = 3
name = "Alice"

[[staffs]]
id = 5
name = "Bob"
"""


# ---------------------------------------------------------------------------
# Environment setup: never read the developer's real config or variables
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Drop ACETICS_* variables and point the config dir at a temp folder."""
    import os

    for name in list(os.environ):
        if name.startswith("ACETICS_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))


@pytest.fixture
def config_file(tmp_path) -> Path:
    """A valid config.toml with three staff members, Accueil (id 8) default."""
    path = tmp_path / "acetics-cli" / "config.toml"
    path.parent.mkdir(parents=True)
    path.write_text(CONFIG_TOML, encoding="utf-8")
    return path


@pytest.fixture
def config() -> AceticsConfig:
    return AceticsConfig(
        endpoint="https://acetics.test/api",
        token="secret-token",
        default_staff_index=0,
        staffs=[
            Staff(id=8, name="Accueil"),
            Staff(id=3, name="Alice"),
            Staff(id=5, name="Bob"),
        ],
        language="fr",
    )


@pytest.fixture
def labels() -> Labels:
    return Labels("fr")


# ---------------------------------------------------------------------------
# Scripted operator input
# ---------------------------------------------------------------------------

class ScriptedInput:
    """
    Stands in for input(). Answers are returned in order; None (or running
    out of answers) raises EOFError like Ctrl-D would.
    """

    def __init__(self, answers: List[Optional[str]]):
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        answer = self.answers.pop(0)
        if answer is None:
            raise EOFError
        return answer


@pytest.fixture
def scripted_input() -> Callable[[List[Optional[str]]], ScriptedInput]:
    return ScriptedInput


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, status_code: int = 200, payload: Any = None, handler=None):
        self.requests: List[httpx.Request] = []
        self._status_code = status_code
        self._payload = {"id": 42, "status": "created"} if payload is None else payload
        self._custom = handler
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._custom is not None:
            return self._custom(request)
        return httpx.Response(self._status_code, json=self._payload)

    @property
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def now() -> datetime:
    return NOW
