"""Custom header templating for outbound webhook requests.

Header values may reference the service they are sent for::

    X-Service: "{{ service_id }}"
    X-Version: "v{{ version }}"

Transport, signing, and retries live in the dispatch layer.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from pydantic import BaseModel

from relwatch.infrastructure.templates import render_string


class ServiceInfo(BaseModel):
    """Template context describing the service a webhook fires for."""

    model_config = {"frozen": True}

    id: str
    latest_version: str = ""

    def template_context(self) -> dict[str, Any]:
        return {"service_id": self.id, "version": self.latest_version}


def set_custom_headers(
    headers: MutableMapping[str, str],
    custom_headers: Mapping[str, str] | None,
    service_info: ServiceInfo,
) -> None:
    """Render each custom header template and set it on *headers*.

    Existing values for the same key are replaced.  Nothing is touched
    when *custom_headers* is empty.
    """
    if not custom_headers:
        return

    context = service_info.template_context()
    for key, template in custom_headers.items():
        headers[key] = render_string(template, context)
