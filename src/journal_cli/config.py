"""Configuration management for the journal CLI."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigError

logger = logging.getLogger(__name__)

HOME_ENV = "JOURNAL_HOME"
FORMAT_ENV = "JOURNAL_FORMAT"


@dataclass(frozen=True)
class Config:
    """Journal configuration."""

    journal_home: str
    journal_format: str


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if value is None:
        raise ConfigError(f"{name} environment variable is not set")
    return value


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Load configuration from the environment.

    Both variables are required. Values are used as-is: no defaults,
    no trimming, no validation of the format pattern.
    """
    if environ is None:
        environ = os.environ

    config = Config(
        journal_home=_require(environ, HOME_ENV),
        journal_format=_require(environ, FORMAT_ENV),
    )
    logger.debug(f"Loaded config: home={config.journal_home!r} format={config.journal_format!r}")
    return config
