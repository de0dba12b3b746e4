"""Shared Jinja2 environment for rendering short string templates."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from jinja2 import BaseLoader, Environment


@lru_cache(maxsize=1)
def build_string_environment() -> Environment:
    """Build the Jinja2 environment used for inline templates.

    Templates come from configuration values rather than files, so the
    environment has no filesystem loader.  Undefined variables render as
    empty strings.
    """
    return Environment(loader=BaseLoader(), keep_trailing_newline=True, autoescape=False)


def render_string(template: str, context: dict[str, Any]) -> str:
    """Render *template* with *context*.

    Strings without any ``{`` cannot hold template syntax and are returned
    unchanged.
    """
    if "{" not in template:
        return template
    return build_string_environment().from_string(template).render(**context)
