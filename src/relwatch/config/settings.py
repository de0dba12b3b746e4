"""Unified settings: CLI flags, env vars, and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  - CLI flags passed by Click
  2. Env vars     - ``RELWATCH_*`` prefix, ``__`` for nested sections
  3. Code defaults - baked into the section models

For example ``RELWATCH_HARD_DEFAULTS__INTERVAL=5m`` overrides the global
fallback interval.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings

from relwatch.config.models import HardDefaultsConfig
from relwatch.domain.options import OptionsBase


class RelwatchSettings(BaseSettings):
    """Unified settings for the relwatch CLI.

    Stored on the CLI's :class:`~relwatch.commands._context.AppContext`.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RELWATCH_",
        "env_nested_delimiter": "__",
    }

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- Sections ---
    hard_defaults: HardDefaultsConfig = Field(default_factory=HardDefaultsConfig)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> RelwatchSettings:
        """Construct settings with CLI flags as highest-priority overrides."""
        return cls(**cli_flags)

    def build_hard_defaults(self) -> OptionsBase:
        """Return a new HardDefaults layer from the configured section."""
        return self.hard_defaults.to_layer()
