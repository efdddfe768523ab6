"""CLI contexts file models.

The contexts file is a YAML document of the form::

    current: prod
    previous: dev
    contexts:
      prod:
        url: https://api.example.com/cloud
        issuer_url: https://dex.example.com/dex
        hmac: secret
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cloudctl.constants.defaults import (
    API_URL_DEFAULT,
    CONFIG_FILE_NAME,
    CONFIG_SEARCH_DIRS,
)
from cloudctl.models.config import ConfigLoadError

logger = logging.getLogger(__name__)


class Context(BaseModel):
    """Connection settings of a single API endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_url: str = Field(default=API_URL_DEFAULT, alias="url")
    issuer_url: str = ""
    issuer_type: str = ""
    custom_scopes: str = ""
    client_id: str = ""
    client_secret: str = ""
    hmac: str | None = None


class Contexts(BaseModel):
    """All configured contexts plus the selected one."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    current_context: str = Field(default="", alias="current")
    previous_context: str = Field(default="", alias="previous")
    contexts: dict[str, Context] = {}

    @classmethod
    def find_config_file(cls, search_dirs: tuple[str, ...] = CONFIG_SEARCH_DIRS) -> Path | None:
        """Return the first existing config file in the search path."""
        for directory in search_dirs:
            candidate = Path(directory).expanduser() / CONFIG_FILE_NAME
            if candidate.is_file():
                return candidate
        return None

    @classmethod
    def load(cls, path: Path) -> Contexts:
        """Load contexts from a YAML file.

        Raises:
            ConfigLoadError: If the file cannot be read or has an invalid shape.
        """
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"unable to read config {path}: {exc}") from exc
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"invalid config {path}: {exc}") from exc

    def current(self) -> Context:
        """Return the selected context, or the default one when unset."""
        context = self.contexts.get(self.current_context)
        if context is None:
            logger.debug("Context %r not configured, using defaults", self.current_context)
            return Context()
        return context


__all__ = [
    "Context",
    "Contexts",
]
