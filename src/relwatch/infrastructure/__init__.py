"""Infrastructure layer: template rendering.

This layer depends on stdlib and third-party libs (Jinja2).
It must never import from domain, services, commands, or output.
"""
