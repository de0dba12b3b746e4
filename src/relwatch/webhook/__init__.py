"""Webhook collaborators that consume resolved service state."""
