"""Tiered options for a monitored service.

Three layers feed every effective value:

  1. Root          - the :class:`Options` configured on the service itself
  2. Defaults      - service-scoped fallback, shared by many services
  3. HardDefaults  - global last resort, shared process-wide

Each ``get_*`` accessor walks Root -> Defaults -> HardDefaults and returns
the first value that is set.  ``active`` is the exception: it is read
from the root layer only and an unset flag means active.

Defaults and HardDefaults are attached by reference.  They are owned by
the surrounding configuration and may be shared by many Options, so a
change to one of them is seen by every Options pointing at it.  Nothing
here locks; writers must coordinate with readers themselves.

Serialization (:func:`render_options`) echoes only what was set on the
root layer, so a config dump shows user input rather than inherited values.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from io import StringIO
from typing import Any

from pydantic import BaseModel, Field
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from relwatch.domain.duration import normalize_interval, parse_duration
from relwatch.domain.errors import ErrorList, ValidationError

logger = logging.getLogger(__name__)

INTERVAL_HINT = "Use 'AhBmCs' duration format"


def _new_yaml() -> YAML:
    """Create a fresh YAML emitter (ruamel's YAML object is stateful)."""
    y = YAML()
    y.default_flow_style = False
    return y


class OptionsBase(BaseModel):
    """Layer shape shared by Defaults and HardDefaults.

    An empty ``interval`` and a ``None`` ``semantic_versioning`` both mean
    "not set here", letting resolution fall through to the next layer.
    """

    model_config = {"extra": "forbid", "coerce_numbers_to_str": True}

    interval: str = ""
    semantic_versioning: bool | None = None


class IntervalRef:
    """Handle onto the layer that holds a resolved interval.

    Reading :attr:`value` reads the layer's ``interval``; assigning it
    writes straight into that layer, which may be shared.
    """

    __slots__ = ("layer",)

    def __init__(self, layer: OptionsBase) -> None:
        self.layer = layer

    @property
    def value(self) -> str:
        return self.layer.interval

    @value.setter
    def value(self, interval: str) -> None:
        self.layer.interval = interval

    def __repr__(self) -> str:
        return f"IntervalRef(layer={type(self.layer).__name__}, value={self.value!r})"


class Options(OptionsBase):
    """Root option layer for one monitored service.

    Attributes:
        active: Whether the service is monitored.  ``None`` means active.
        interval: Polling interval, e.g. ``"10m"``.  Empty means unset.
        semantic_versioning: Whether versions compare by semver rules.
        defaults: Service-scoped fallback layer, or None.
        hard_defaults: Global fallback layer, or None.
    """

    active: bool | None = None
    defaults: OptionsBase | None = Field(default=None, exclude=True, repr=False)
    hard_defaults: OptionsBase | None = Field(default=None, exclude=True, repr=False)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _layers(self) -> list[OptionsBase]:
        """Return the present layers, most specific first."""
        return [layer for layer in (self, self.defaults, self.hard_defaults) if layer is not None]

    def get_active(self) -> bool:
        """Return the root ``active`` flag, treating unset as True."""
        return self.active is not False

    def get_interval(self) -> str:
        """Return the first non-empty interval across the layers."""
        for layer in self._layers():
            if layer.interval:
                return layer.interval
        return ""

    def get_interval_ref(self) -> IntervalRef | None:
        """Return a handle onto the layer owning the resolved interval.

        Root wins when set, then Defaults.  Otherwise the handle points at
        HardDefaults, even when its interval is empty.  Returns None only
        when no layer could own the value.
        """
        if self.interval:
            return IntervalRef(self)
        if self.defaults is not None and self.defaults.interval:
            return IntervalRef(self.defaults)
        if self.hard_defaults is not None:
            return IntervalRef(self.hard_defaults)
        return None

    def get_interval_duration(self) -> timedelta:
        """Return the resolved interval as a :class:`timedelta`.

        Expects :meth:`check_values` to have run already.  An interval that
        is unset on every layer gives a zero duration.

        Raises:
            DurationError: If the resolved interval is malformed.
        """
        interval = self.get_interval()
        if not interval:
            return timedelta(0)
        return parse_duration(interval)

    def get_semantic_versioning(self) -> bool:
        """Return the first set ``semantic_versioning`` flag, default True."""
        for layer in self._layers():
            if layer.semantic_versioning is not None:
                return layer.semantic_versioning
        return True

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def check_values(self, prefix: str = "") -> ErrorList | None:
        """Validate the root layer, normalizing it in place.

        A digits-only interval is taken as seconds and rewritten, so
        ``"10"`` is stored back as ``"10s"``.

        Returns:
            An :class:`ErrorList` headed ``{prefix}options:`` describing
            every invalid field, or None when the root layer is valid.
        """
        errs = ErrorList(header=f"{prefix}options:")

        if self.interval:
            interval, ok = normalize_interval(self.interval)
            if not ok:
                errs.append(
                    ValidationError(
                        "interval", self.interval, prefix=f"{prefix}  ", hint=INTERVAL_HINT
                    )
                )
            elif interval != self.interval:
                logger.debug("Normalized interval %r to %r", self.interval, interval)
                self.interval = interval

        return errs or None

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def explicit_values(self) -> dict[str, Any]:
        """Return the root fields that were set, in declared order."""
        return self.model_dump(exclude_defaults=True)

    def __str__(self) -> str:
        buf = StringIO()
        _new_yaml().dump(CommentedMap(self.explicit_values()), buf)
        return buf.getvalue()


def render_options(options: Options | None) -> str:
    """Render the explicitly set root values of *options* as YAML.

    Returns ``""`` for None and ``"{}\\n"`` when nothing is set, whatever
    the attached Defaults and HardDefaults hold.
    """
    if options is None:
        return ""
    return str(options)


def new_options(
    active: bool | None = None,
    interval: str = "",
    semantic_versioning: bool | None = None,
    defaults: OptionsBase | None = None,
    hard_defaults: OptionsBase | None = None,
) -> Options:
    """Build a root :class:`Options`, attaching both layers by reference."""
    options = Options(active=active, interval=interval, semantic_versioning=semantic_versioning)
    options.defaults = defaults
    options.hard_defaults = hard_defaults
    return options


def new_defaults(interval: str = "", semantic_versioning: bool | None = None) -> OptionsBase:
    """Build a standalone layer for use as Defaults or HardDefaults."""
    return OptionsBase(interval=interval, semantic_versioning=semantic_versioning)
