"""Settings, section models, and logging setup."""
