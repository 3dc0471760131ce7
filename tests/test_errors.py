"""Unit tests for acetics_cli.engine.errors — Error hierarchy & serialization."""

import json
import pytest

from acetics_cli.engine.errors import (
    AceticsConfigBootstrapError,
    AceticsConfigError,
    AceticsError,
    AceticsIntegrationError,
    AceticsOperatorAbort,
    AceticsValidationError,
)


class TestAceticsError:
    """Base error class tests."""

    def test_basic_creation(self):
        err = AceticsError("something broke")
        assert err.message == "something broke"
        assert str(err) == "something broke"
        assert err.error_type == "AceticsError"
        assert err.context == {}

    def test_to_dict(self):
        err = AceticsError("fail", attempt=2)
        d = err.to_dict()
        assert d["error_type"] == "AceticsError"
        assert d["message"] == "fail"
        assert d["context"] == {"attempt": "2"}
        assert "timestamp" in d

    def test_to_json(self):
        parsed = json.loads(AceticsError("fail").to_json())
        assert parsed["error_type"] == "AceticsError"
        assert parsed["message"] == "fail"

    def test_repr(self):
        assert repr(AceticsError("boom")) == "AceticsError: boom"


class TestSubclasses:
    """Each subclass keeps its own context fields."""

    @pytest.mark.parametrize("cls", [
        AceticsConfigError,
        AceticsConfigBootstrapError,
        AceticsIntegrationError,
        AceticsValidationError,
        AceticsOperatorAbort,
    ])
    def test_is_acetics_error(self, cls):
        err = cls("x")
        assert isinstance(err, AceticsError)
        assert err.error_type == cls.__name__

    def test_bootstrap_is_config_error(self):
        err = AceticsConfigBootstrapError("edit it", config_path="/tmp/config.toml")
        assert isinstance(err, AceticsConfigError)
        assert err.config_path == "/tmp/config.toml"
        assert err.to_dict()["config_path"] == "/tmp/config.toml"

    def test_integration_fields(self):
        err = AceticsIntegrationError(
            "POST failed",
            method="POST",
            url="https://acetics.test/api/tasks/create",
            status_code=502,
            response_body="Bad Gateway",
        )
        assert err.status_code == 502
        assert err.response_body == "Bad Gateway"
        d = err.to_dict()
        assert d["method"] == "POST"
        assert d["status_code"] == 502

    def test_validation_field(self):
        err = AceticsValidationError("Le champ est obligatoire", field="title")
        assert err.field == "title"

    def test_operator_abort_prompt(self):
        err = AceticsOperatorAbort("Annulé", prompt="Titre:")
        assert err.prompt == "Titre:"
