"""
Acetics CLI Configuration — Load and validate config.toml at startup.

The file lives in the per-user config directory under acetics-cli/. On first
run a bundled example is written there and the operator is asked to edit it.
ACETICS_* environment variables override keys from the file.

Usage:
    from acetics_cli.engine.config import load_config, default_config_path
"""

from __future__ import annotations

import json
import logging
import os
import sys
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from acetics_cli.engine.errors import AceticsConfigBootstrapError, AceticsConfigError
from acetics_cli.records.staff import Staff
from acetics_cli.translation_sets.labels import DEFAULT_LANGUAGE, Labels, available_languages

logger = logging.getLogger("acetics_cli.engine.config")

APP_DIR_NAME = "acetics-cli"
CONFIG_FILE_NAME = "config.toml"
ENV_PREFIX = "ACETICS_"
DEFAULT_EDITOR = "nvim"


# ---------------------------------------------------------------------------
# Pydantic model for config.toml
# ---------------------------------------------------------------------------

class AceticsConfig(BaseModel):
    """Root model for config.toml. Read once, never mutated."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(min_length=1, description="Base URL of the Acetics API")
    token: str = Field(description="Bearer token")
    default_staff_index: int = Field(default=0, ge=0)
    staffs: List[Staff] = Field(min_length=1)
    language: str = DEFAULT_LANGUAGE
    editor: Optional[str] = None

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        known = available_languages()
        if v not in known:
            raise ValueError(f"language must be one of {sorted(known)}, got '{v}'")
        return v

    @model_validator(mode="after")
    def validate_default_staff_index(self) -> "AceticsConfig":
        if self.default_staff_index >= len(self.staffs):
            raise ValueError(
                f"default_staff_index {self.default_staff_index} is out of range "
                f"for {len(self.staffs)} staff member(s)"
            )
        return self

    @property
    def default_staff(self) -> Staff:
        return self.staffs[self.default_staff_index]

    def is_default_staff(self, staff: Staff) -> bool:
        """True when *staff* is the configured default, compared by id."""
        return staff.id == self.default_staff.id

    def editor_command(self, environ: Optional[Mapping[str, str]] = None) -> str:
        environ = os.environ if environ is None else environ
        return self.editor or environ.get("VISUAL") or environ.get("EDITOR") or DEFAULT_EDITOR


# ---------------------------------------------------------------------------
# Config Loading Functions
# ---------------------------------------------------------------------------

def user_config_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Per-OS base directory for user configuration files."""
    environ = os.environ if environ is None else environ
    home = Path.home()

    if sys.platform.startswith("win"):
        appdata = environ.get("APPDATA")
        return Path(appdata) if appdata else home / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return home / "Library" / "Application Support"

    xdg = environ.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else home / ".config"


def default_config_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return <config dir>/acetics-cli/config.toml."""
    return user_config_dir(environ) / APP_DIR_NAME / CONFIG_FILE_NAME


def default_config_text() -> str:
    """Contents of the bundled example config."""
    return resources.files("acetics_cli").joinpath("config.example.toml").read_text(encoding="utf-8")


def write_default_config(path: Path) -> Path:
    """Write the bundled example config to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(default_config_text(), encoding="utf-8")
    logger.info(f"Wrote default config to {path}")
    return path


def _env_overrides(environ: Mapping[str, str], config_path: Path) -> Dict[str, Any]:
    """Collect ACETICS_* variables as lower-case config keys."""
    overrides: Dict[str, Any] = {}
    for name, value in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        key = name[len(ENV_PREFIX):].lower()
        if key not in AceticsConfig.model_fields:
            continue
        if key == "staffs":
            try:
                value = json.loads(value)
            except json.JSONDecodeError as e:
                raise AceticsConfigError(
                    f"{name}: {e}", config_path=str(config_path)
                ) from e
        overrides[key] = value
    return overrides


def load_config(
    config_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AceticsConfig:
    """
    Load and validate config.toml merged with ACETICS_* overrides.

    Args:
        config_path: Explicit path to config.toml. If None, uses the per-user default.
        environ: Environment mapping. If None, uses os.environ.

    Returns:
        Validated AceticsConfig instance.

    Raises:
        AceticsConfigBootstrapError: The file did not exist; a default was written.
        AceticsConfigError: The file exists but cannot be read, is not UTF-8 TOML,
            or fails validation.
    """
    environ = os.environ if environ is None else environ
    path = Path(config_path) if config_path else default_config_path(environ)

    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except FileNotFoundError:
        write_default_config(path)
        labels = Labels(environ.get(f"{ENV_PREFIX}LANGUAGE"))
        raise AceticsConfigBootstrapError(
            labels.get("config_bootstrap", path=path), config_path=str(path)
        )
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
        raise AceticsConfigError(str(e), config_path=str(path)) from e

    raw.update(_env_overrides(environ, path))

    try:
        config = AceticsConfig(**raw)
    except ValidationError as e:
        raise AceticsConfigError(str(e), config_path=str(path)) from e

    logger.debug(f"Loaded config from {path} ({len(config.staffs)} staff member(s))")
    return config
