"""OptionsService: validation and resolution for monitored services.

The service owns the shared Defaults and HardDefaults layers and attaches
them to each service's root :class:`Options`.  Validation follows the
linter pattern: every service is checked, and all problems are reported
together in one :class:`ServiceResult`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from relwatch.domain.errors import DurationError, ErrorList
from relwatch.domain.options import Options, OptionsBase, render_options
from relwatch.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

INVALID_OPTIONS = "INVALID_OPTIONS"
INVALID_DURATION = "INVALID_DURATION"


class OptionsService:
    """Attach, validate, and resolve option layers.

    Args:
        defaults: Service-scoped Defaults layer shared by every service.
        hard_defaults: Global HardDefaults layer shared by every service.
    """

    def __init__(
        self,
        defaults: OptionsBase | None = None,
        hard_defaults: OptionsBase | None = None,
    ) -> None:
        self.defaults = defaults
        self.hard_defaults = hard_defaults

    def attach(self, options: Options) -> Options:
        """Point *options* at this service's shared layers and return it."""
        options.defaults = self.defaults
        options.hard_defaults = self.hard_defaults
        return options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(self, services: Mapping[str, Options]) -> ServiceResult:
        """Validate every service's root options, normalizing in place."""
        errs = ErrorList(header="service:")
        invalid: dict[str, str] = {}
        normalized: dict[str, str] = {}
        warnings: list[str] = []

        for service_id, options in services.items():
            before = options.interval
            err = options.check_values(prefix="    ")
            if options.interval != before:
                normalized[service_id] = options.interval
                msg = f"{service_id}: interval {before!r} read as seconds ({options.interval!r})"
                warnings.append(msg)
            if err is not None:
                logger.debug("Invalid options for service %s", service_id)
                errs.append(ErrorList([err], header=f"  {service_id}:"))
                invalid[service_id] = str(err)

        data: dict[str, Any] = {
            "checked": len(services),
            "invalid": sorted(invalid),
            "normalized": normalized,
        }
        if errs:
            return ServiceResult(
                ok=False,
                op="check",
                data=data,
                warnings=warnings,
                error=ServiceError(code=INVALID_OPTIONS, message=str(errs), detail=invalid),
            )
        logger.debug("Checked options for %d services", len(services))
        return ServiceResult(ok=True, op="check", data=data, warnings=warnings)

    def resolve(self, options: Options) -> ServiceResult:
        """Validate *options*, then report its root dump and effective values."""
        self.attach(options)
        err = options.check_values()
        if err is not None:
            return ServiceResult(
                ok=False,
                op="resolve",
                error=ServiceError(code=INVALID_OPTIONS, message=str(err)),
            )

        # Only the root layer is validated; an inherited interval may still be bad.
        try:
            duration = options.get_interval_duration()
        except DurationError as exc:
            return ServiceResult(
                ok=False,
                op="resolve",
                error=ServiceError(
                    code=INVALID_DURATION,
                    message=str(exc),
                    detail={"interval": options.get_interval()},
                ),
            )

        return ServiceResult(
            ok=True,
            op="resolve",
            data={
                "options": render_options(options),
                "active": options.get_active(),
                "interval": options.get_interval(),
                "interval_seconds": duration.total_seconds(),
                "semantic_versioning": options.get_semantic_versioning(),
            },
        )
