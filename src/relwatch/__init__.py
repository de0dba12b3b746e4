"""relwatch: tiered option resolution for release monitoring."""

__version__ = "0.3.0"
