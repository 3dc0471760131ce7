"""
Integration tests — first run, config edit, then a submitted task.
"""

import json

import pytest

import acetics_cli.cli as cli_mod


EDITED_CONFIG = """\
endpoint = "https://acetics.test/api/"
token = "real-token"
default_staff_index = 1
language = "en"

[[staffs]]
id = 3
name = "Alice"

[[staffs]]
id = 8
name = "Accueil"
"""


@pytest.mark.integration
class TestFirstRun:
    def test_bootstrap_then_submit(self, config_home, wired_transport, operator, capsys):
        # First run: no config, the example is written and nothing is asked.
        fake = operator([])
        assert cli_mod.main(["new", "--no-clear"]) == 1
        config_path = config_home / "config.toml"
        assert config_path.exists()
        assert fake.prompts == []
        assert str(config_path) in capsys.readouterr().out

        # Operator edits the file, second run submits a closed task.
        config_path.write_text(EDITED_CONFIG, encoding="utf-8")
        operator(["08:00", "Called about invoice", "Invoice question", "08:10", "", "", "y"])
        assert cli_mod.main(["new", "--no-clear", "--priority", "low"]) == 0

        request = wired_transport.requests[0]
        assert str(request.url) == "https://acetics.test/api/tasks/create"
        assert request.headers["Authorization"] == "Bearer real-token"
        body = wired_transport.last_json
        assert body["fk_assigned_staff"] == 8
        assert body["status"] == "CLOSED"
        assert body["priority"] == "LOW"
        assert body["work_time"] == "00:10"
        assert body["description"] == "Called about invoice"

        out = capsys.readouterr().out
        assert json.loads(out[out.index("{"):]) == {"id": 42, "status": "created"}


@pytest.mark.integration
class TestEnvironmentOverrides:
    def test_env_token_and_staffs(self, config_home, wired_transport, operator, monkeypatch):
        config_home.mkdir(parents=True)
        (config_home / "config.toml").write_text(EDITED_CONFIG, encoding="utf-8")
        monkeypatch.setenv("ACETICS_TOKEN", "from-env")
        monkeypatch.setenv("ACETICS_STAFFS", json.dumps([{"id": 21, "name": "Zoe"}]))
        monkeypatch.setenv("ACETICS_DEFAULT_STAFF_INDEX", "0")

        operator(["08:00", "", "Callback", "08:05", "", "", ""])
        assert cli_mod.main(["new", "--no-clear"]) == 0

        assert wired_transport.requests[0].headers["Authorization"] == "Bearer from-env"
        assert wired_transport.last_json["fk_assigned_staff"] == 21
