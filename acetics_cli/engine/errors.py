"""
Acetics CLI Error Hierarchy — Structured exceptions surfaced by the CLI.

Every error carries a message plus free-form context, serializable to JSON
so the top-level handler can log it in one line.

Hierarchy:
    AceticsError
    ├── AceticsConfigError             — Config file exists but is invalid
    │   └── AceticsConfigBootstrapError — First run, default config written
    ├── AceticsIntegrationError        — Outbound HTTP call failed
    ├── AceticsValidationError         — Prompt input rejected (re-prompted)
    └── AceticsOperatorAbort           — Operator canceled a required prompt
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class AceticsError(Exception):
    """Base error for all Acetics CLI failures."""

    def __init__(self, message: str, **context: Any):
        self.message = message
        self.error_type: str = self.__class__.__name__
        self.context: Dict[str, Any] = context
        self.timestamp: str = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error to a JSON-compatible dict for logging."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "timestamp": self.timestamp,
            "context": {k: str(v) for k, v in self.context.items()},
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)

    def __repr__(self) -> str:
        return f"{self.error_type}: {self.message}"


class AceticsConfigError(AceticsError):
    """
    Configuration error — config.toml exists but cannot be parsed or
    validated. The message is the underlying parser message, unchanged.
    """

    def __init__(self, message: str, **context: Any):
        self.config_path: Optional[str] = context.get("config_path")
        super().__init__(message, **context)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["config_path"] = self.config_path
        return d


class AceticsConfigBootstrapError(AceticsConfigError):
    """
    No config file was found. A default one has been written to
    config_path and the operator must edit it before running again.
    """
    pass


class AceticsIntegrationError(AceticsError):
    """Outbound call to the Acetics API failed (transport, non-2xx, bad JSON)."""

    def __init__(self, message: str, **context: Any):
        self.method: Optional[str] = context.get("method")
        self.url: Optional[str] = context.get("url")
        self.status_code: Optional[int] = context.get("status_code")
        self.response_body: Optional[str] = context.get("response_body")
        super().__init__(message, **context)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["method"] = self.method
        d["url"] = self.url
        d["status_code"] = self.status_code
        return d


class AceticsValidationError(AceticsError):
    """Operator input failed validation. Recovered by re-prompting."""

    def __init__(self, message: str, **context: Any):
        self.field: Optional[str] = context.get("field")
        super().__init__(message, **context)


class AceticsOperatorAbort(AceticsError):
    """
    Operator canceled a required prompt. Not a failure: the CLI ends the
    workflow without submitting and exits cleanly.
    """

    def __init__(self, message: str, **context: Any):
        self.prompt: Optional[str] = context.get("prompt")
        super().__init__(message, **context)
