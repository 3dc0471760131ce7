"""
Integration test fixtures — drive the installed entry point against a
scripted operator and a recording HTTP transport.

Run: pytest tests/integration/ -v -m integration
"""

from __future__ import annotations

from pathlib import Path

import pytest

from acetics_cli.engine.api_client import AceticsClient


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: end-to-end runs through acetics_cli.cli.main")


@pytest.fixture
def config_home(tmp_path) -> Path:
    """The acetics-cli directory under the isolated XDG_CONFIG_HOME."""
    return tmp_path / "xdg" / "acetics-cli"


@pytest.fixture
def wired_transport(monkeypatch, transport):
    """Route every AceticsClient built by the CLI through the recording transport."""
    original = AceticsClient.from_config.__func__
    recording = transport

    def from_config(cls, config, transport=None):
        return original(cls, config, transport=recording)

    monkeypatch.setattr(AceticsClient, "from_config", classmethod(from_config))
    return transport


@pytest.fixture
def operator(monkeypatch, scripted_input):
    """Replace builtins.input with scripted answers."""
    def install(answers):
        fake = scripted_input(answers)
        monkeypatch.setattr("builtins.input", fake)
        return fake
    return install
