"""Pydantic configuration models with code-baked defaults.

Section models are frozen: they describe configuration, not the mutable
option layers built from it.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from relwatch.domain.duration import normalize_interval
from relwatch.domain.options import OptionsBase, new_defaults


class HardDefaultsConfig(BaseModel):
    """[hard_defaults] section: global last-resort option values."""

    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    interval: str = "10m"
    semantic_versioning: bool = True

    @field_validator("interval")
    @classmethod
    def _check_interval(cls, value: str) -> str:
        normalized, ok = normalize_interval(value)
        if not ok:
            msg = f"invalid interval {value!r} (Use 'AhBmCs' duration format)"
            raise ValueError(msg)
        return normalized

    def to_layer(self) -> OptionsBase:
        """Return a fresh mutable layer holding these values."""
        return new_defaults(self.interval, self.semantic_versioning)
