"""Single-day task scheduler with overlap rejection and conflict observers."""

__version__ = "0.1.0"
