"""Acetics CLI Engine — Config loading, API client, error hierarchy."""

from acetics_cli.engine.api_client import AceticsClient  # noqa: F401
from acetics_cli.engine.config import AceticsConfig, load_config  # noqa: F401

__all__ = [
    "AceticsClient",
    "AceticsConfig",
    "load_config",
]
